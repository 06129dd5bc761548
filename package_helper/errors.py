"""Error types raised by the package helper."""

from __future__ import annotations


class PackageHelperError(RuntimeError):
    """Base class for all package helper failures."""


class SourceNotFoundError(PackageHelperError):
    def __init__(self, path: object) -> None:
        super().__init__(f"Source '{path}' does not exist.")
        self.path = str(path)


class DirectoryCreationError(PackageHelperError):
    def __init__(self, path: object) -> None:
        super().__init__(f"Failed to create directory '{path}'.")
        self.path = str(path)


class CopyError(PackageHelperError):
    def __init__(self, source: object, target: object) -> None:
        super().__init__(f"Failed to copy '{source}' to '{target}'.")
        self.source = str(source)
        self.target = str(target)


class ReadError(PackageHelperError):
    def __init__(self, path: object) -> None:
        super().__init__(f"Failed to read file '{path}'.")
        self.path = str(path)


class WriteError(PackageHelperError):
    def __init__(self, path: object) -> None:
        super().__init__(f"Failed to update file '{path}'.")
        self.path = str(path)


class NamespaceMappingNotFoundError(PackageHelperError):
    def __init__(self, path: object) -> None:
        super().__init__(f"No matching PSR-4 mapping found for directory '{path}'.")
        self.path = str(path)
