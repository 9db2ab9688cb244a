"""QuestionRecord domain value object — one prompt/expected-answer pair from a dataset."""

from pydantic import BaseModel, Field


class QuestionRecord(BaseModel, frozen=True):
    """Immutable value object representing a single question and its expected answer."""

    prompt: str = Field(min_length=1)
    expected_answer: str
