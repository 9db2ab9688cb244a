"""Observer port for the session domain — defines events in domain language."""

from typing import Protocol


class SessionObserver(Protocol):
    """Observer port emitting structured events during a quiz session.

    Implementations may log to structlog or record for tests.
    """

    def session_started(self, total_questions: int) -> None: ...

    def answer_recorded(self, index: int, correct: bool) -> None: ...

    def answer_skipped(self, index: int, reason: str) -> None: ...

    def session_completed(
        self, total_questions: int, correct_count: int, percentage: float
    ) -> None: ...
