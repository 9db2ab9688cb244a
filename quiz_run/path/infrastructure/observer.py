"""Structlog implementation of the PathObserver port."""

import structlog


class StructlogPathObserver:
    """Delegates path domain events to structlog.

    Satisfies the PathObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def path_prompted(self, default_path: str) -> None:
        self._log.debug("path.prompted", default_path=default_path)

    def path_default_used(self, path: str) -> None:
        self._log.info("path.default_used", path=path)

    def path_resolved(self, path: str) -> None:
        self._log.info("path.resolved", path=path)

    def path_resolution_failed(self, reason: str) -> None:
        self._log.warning("path.resolution_failed", reason=reason)
