"""DatasetLoader Protocol — structural interface for loading question records."""

from typing import Protocol

from quiz_run.dataset.domain.load_result import DatasetLoadResult


class DatasetLoader(Protocol):
    """Loads question records from the dataset at path, returning a DatasetLoadResult."""

    def load(self, path: str) -> DatasetLoadResult: ...
