"""Observer port for the dataset domain — defines events in domain language."""

from typing import Protocol


class DatasetObserver(Protocol):
    def dataset_loading_started(self, path: str) -> None: ...

    def dataset_record_loaded(self, index: int) -> None: ...

    def dataset_loading_completed(
        self, path: str, total_records: int, sha256: str
    ) -> None: ...

    def dataset_loading_failed(self, path: str, reason: str) -> None: ...
