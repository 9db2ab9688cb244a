"""StructlogSessionObserver — production observer that delegates to structlog."""

import structlog


class StructlogSessionObserver:
    """Logs session domain events to structlog.

    Does NOT inherit from SessionObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_started(self, total_questions: int) -> None:
        self._log.info("session.started", total_questions=total_questions)

    def answer_recorded(self, index: int, correct: bool) -> None:
        self._log.debug("session.answer_recorded", index=index, correct=correct)

    def answer_skipped(self, index: int, reason: str) -> None:
        self._log.warning("session.answer_skipped", index=index, reason=reason)

    def session_completed(
        self, total_questions: int, correct_count: int, percentage: float
    ) -> None:
        self._log.info(
            "session.completed",
            total_questions=total_questions,
            correct_count=correct_count,
            percentage=round(percentage, 1),
        )
