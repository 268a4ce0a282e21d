"""Failure taxonomy for the virtual file system.

Every operation in the core raises one of these classes. The tool adapters
catch them and turn them into short messages the model can act on, so each
class keeps the arguments that caused the failure as attributes.
"""

from typing import Optional


class FileSystemError(Exception):
    """Base class for all virtual file system failures.

    Args:
        message: Human-readable description of the failure.
    """

    kind = "FileSystemError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidPathError(FileSystemError, ValueError):
    """Raised when a path string cannot be canonicalized.

    Args:
        raw: The path as it was supplied.
        reason: Why it was rejected.
    """

    kind = "InvalidPath"

    def __init__(self, raw: object, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid path {raw!r}: {reason}")


class NotFoundError(FileSystemError):
    """Raised when a path names no file (or no node at all)."""

    kind = "NotFound"

    def __init__(self, path: str, detail: Optional[str] = None):
        self.path = path
        self.detail = detail
        message = f"No such file or directory: /{path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class AlreadyExistsError(FileSystemError):
    """Raised when a target path is already populated and overwrite was not requested."""

    kind = "AlreadyExists"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path already exists: /{path}")


class DirectoryCollisionError(FileSystemError):
    """Raised when a file and a directory would share a path.

    Args:
        path: The path being written or moved.
        conflict: The existing path it collides with.
        detail: Optional extra explanation.
    """

    kind = "DirectoryCollision"

    def __init__(self, path: str, conflict: str, detail: Optional[str] = None):
        self.path = path
        self.conflict = conflict
        message = f"Cannot place /{path}: conflicts with /{conflict}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NoMatchError(FileSystemError):
    """Raised when the text to replace does not occur in the file."""

    kind = "NoMatch"

    def __init__(self, old_str: str, detail: Optional[str] = None):
        self.old_str = old_str
        super().__init__(detail or f"String not found in file: {old_str!r}")


class AmbiguousMatchError(FileSystemError):
    """Raised when the text to replace occurs more than once.

    Args:
        old_str: The text that was searched for.
        lines: 1-based line numbers where each occurrence starts.
    """

    kind = "AmbiguousMatch"

    def __init__(self, old_str: str, lines: list[int]):
        self.old_str = old_str
        self.lines = lines
        line_list = ", ".join(str(line) for line in lines)
        super().__init__(
            f"String occurs {len(lines)} times (lines {line_list}); "
            "include more surrounding context so it matches exactly once"
        )


class InvalidRangeError(FileSystemError, ValueError):
    """Raised when a line number or line range falls outside the file."""

    kind = "InvalidRange"

    def __init__(self, message: str, line_count: Optional[int] = None):
        self.line_count = line_count
        if line_count is not None:
            message = f"{message}. File has {line_count} lines."
        super().__init__(message)


class UnsupportedCommandError(FileSystemError):
    """Raised when a tool call names a command the tool does not implement.

    Args:
        command: The command that was requested.
        supported: Commands the tool accepts.
    """

    kind = "UnsupportedCommand"

    def __init__(self, command: object, supported: list[str]):
        self.command = command
        self.supported = supported
        super().__init__(
            f"Invalid command {command!r}. Supported commands: {', '.join(supported)}"
        )


class InvalidSnapshotError(FileSystemError):
    """Raised when a persisted snapshot cannot be rebuilt into a consistent tree."""

    kind = "InvalidSnapshot"


class LimitExceededError(FileSystemError):
    """Raised when a write would push the tree past a configured limit.

    Args:
        path: The path being written.
        limit: Name of the limit that was hit (e.g. "max_files").
        detail: Description of the overrun.
    """

    kind = "LimitExceeded"

    def __init__(self, path: str, limit: str, detail: str):
        self.path = path
        self.limit = limit
        super().__init__(f"Cannot write /{path}: {detail}")
