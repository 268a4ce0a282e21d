"""In-memory virtual file system for tool-calling agents.

This package contains the path model, the file system itself, the pure
text-editing primitives used by the editor tool, and the snapshot
serializer used to persist a tree between agent turns.
"""

from vfs.config import DEFAULT_WEB_EXTENSIONS, FileSystemLimits
from vfs.errors import (
    AlreadyExistsError,
    AmbiguousMatchError,
    DirectoryCollisionError,
    FileSystemError,
    InvalidPathError,
    InvalidRangeError,
    InvalidSnapshotError,
    LimitExceededError,
    NoMatchError,
    NotFoundError,
    UnsupportedCommandError,
)
from vfs.filesystem import VirtualFileSystem
from vfs.nodes import DirectoryNode, FileNode
from vfs.serializer import deserialize, dumps, loads, serialize

__all__ = [
    "VirtualFileSystem",
    "FileSystemLimits",
    "DEFAULT_WEB_EXTENSIONS",
    "FileNode",
    "DirectoryNode",
    "serialize",
    "deserialize",
    "dumps",
    "loads",
    # Errors
    "FileSystemError",
    "InvalidPathError",
    "NotFoundError",
    "AlreadyExistsError",
    "DirectoryCollisionError",
    "NoMatchError",
    "AmbiguousMatchError",
    "InvalidRangeError",
    "UnsupportedCommandError",
    "InvalidSnapshotError",
    "LimitExceededError",
]
