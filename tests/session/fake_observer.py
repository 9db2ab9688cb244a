"""FakeSessionObserver — records session domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnswerRecordedEvent:
    index: int
    correct: bool


@dataclass(frozen=True)
class AnswerSkippedEvent:
    index: int
    reason: str


@dataclass(frozen=True)
class SessionCompletedEvent:
    total_questions: int
    correct_count: int
    percentage: float


class FakeSessionObserver:
    """Satisfies the SessionObserver protocol by appending every event to a list."""

    def __init__(self) -> None:
        self.started: list[int] = []
        self.recorded: list[AnswerRecordedEvent] = []
        self.skipped: list[AnswerSkippedEvent] = []
        self.completed: list[SessionCompletedEvent] = []

    def session_started(self, total_questions: int) -> None:
        self.started.append(total_questions)

    def answer_recorded(self, index: int, correct: bool) -> None:
        self.recorded.append(AnswerRecordedEvent(index=index, correct=correct))

    def answer_skipped(self, index: int, reason: str) -> None:
        self.skipped.append(AnswerSkippedEvent(index=index, reason=reason))

    def session_completed(
        self, total_questions: int, correct_count: int, percentage: float
    ) -> None:
        self.completed.append(
            SessionCompletedEvent(
                total_questions=total_questions,
                correct_count=correct_count,
                percentage=percentage,
            )
        )
