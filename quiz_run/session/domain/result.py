"""Session result value objects — per-question outcomes and the final score."""

from typing import Self

from pydantic import BaseModel, Field, model_validator


class QuestionOutcome(BaseModel, frozen=True):
    """What happened when a single question was asked.

    answer is None when the answer could not be read; such a question is
    skipped and never counts as correct.
    """

    index: int = Field(ge=0)
    prompt: str
    answer: str | None
    correct: bool

    @model_validator(mode="after")
    def _skipped_is_never_correct(self) -> Self:
        if self.answer is None and self.correct:
            raise ValueError("a skipped question cannot be correct")
        return self


class SessionResult(BaseModel, frozen=True):
    """Immutable score for one completed quiz session.

    total_questions is the dataset length, not the number of answers collected,
    so skipped questions still count against the percentage.
    """

    total_questions: int = Field(ge=0)
    correct_count: int = Field(ge=0)
    outcomes: list[QuestionOutcome] = Field(default_factory=list)

    @model_validator(mode="after")
    def _correct_count_within_total(self) -> Self:
        if self.correct_count > self.total_questions:
            raise ValueError(
                f"correct_count ({self.correct_count}) exceeds"
                f" total_questions ({self.total_questions})"
            )
        return self

    @property
    def percentage(self) -> float:
        """Percentage of questions answered correctly; 0.0 for an empty session."""
        if self.total_questions == 0:
            return 0.0
        return self.correct_count / self.total_questions * 100
