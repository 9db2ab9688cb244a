"""PathResolver Protocol — structural interface for obtaining the dataset location."""

from typing import Protocol, TextIO


class PathResolver(Protocol):
    """Returns the dataset path to use, given the configured default and an input stream."""

    def resolve(self, default_path: str, stdin: TextIO) -> str: ...
