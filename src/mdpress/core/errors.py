"""Positioned build errors raised by the parse, build, and render stages"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories reported per source file"""
    file_access = "file-access"
    header_malformed = "header-malformed"
    header_missing_required = "header-missing-required"
    render_failure = "render-failure"


class BuildError(Exception):
    """A failure tied to one source file; line is 1-based, 0 when not line-specific."""
    kind: ErrorKind = ErrorKind.file_access

    def __init__(self, message: str, path: str = "", line: int = 0):
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line

    def __str__(self) -> str:
        if self.line:
            return f"{self.path}:{self.line}: {self.message}"
        return f"{self.path}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {self.path!r}, {self.line})"


class FileAccessError(BuildError):
    kind = ErrorKind.file_access


class HeaderError(BuildError):
    kind = ErrorKind.header_malformed


class MissingKeyError(HeaderError):
    kind = ErrorKind.header_missing_required


class RenderError(BuildError):
    """Template lookup/render failure; carries the underlying message instead of a line."""
    kind = ErrorKind.render_failure
