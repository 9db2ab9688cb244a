"""QuizConfig — the root configuration object injected at startup."""

from pydantic import BaseModel, Field

DEFAULT_DATASET_PATH = "./data/problems.csv"


class QuizConfig(BaseModel, frozen=True, extra="forbid"):
    """Root configuration for a quiz session.

    default_path is kept as a plain string so it is shown and used verbatim
    when the user accepts it at the path prompt.
    """

    default_path: str = Field(default=DEFAULT_DATASET_PATH, min_length=1)
