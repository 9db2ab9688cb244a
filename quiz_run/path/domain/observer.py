"""Observer port for the path domain — defines events in domain language."""

from typing import Protocol


class PathObserver(Protocol):
    def path_prompted(self, default_path: str) -> None: ...

    def path_default_used(self, path: str) -> None: ...

    def path_resolved(self, path: str) -> None: ...

    def path_resolution_failed(self, reason: str) -> None: ...
