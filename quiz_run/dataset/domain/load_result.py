"""DatasetLoadResult — the result of loading a dataset, including records and integrity hash."""

from pydantic import BaseModel, Field

from quiz_run.dataset.domain.record import QuestionRecord


class DatasetLoadResult(BaseModel, frozen=True):
    """Immutable value object returned by a DatasetLoader.

    Carries the header row values (read but never interpreted), the parsed
    records in file order, and the SHA-256 hex digest of the raw file bytes.
    """

    header: list[str]
    records: list[QuestionRecord]
    sha256: str = Field(min_length=1)
