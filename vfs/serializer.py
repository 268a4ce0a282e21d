"""Flatten a VirtualFileSystem into a persistable snapshot and rebuild it.

Snapshot format: a mapping of canonical path to either the file's content
string or the directory marker ``{"type": "directory"}``. Every directory is
emitted, so empty directories survive a round trip. Keys are sorted.

``deserialize`` also accepts the node-record form written by older clients
(``{"type": "file", "content": "..."}``) and keys with a leading slash.
"""

import json
import logging
from typing import Any, Mapping, Optional, Union

from vfs import paths
from vfs.config import FileSystemLimits
from vfs.errors import FileSystemError, InvalidSnapshotError
from vfs.filesystem import VirtualFileSystem

logger = logging.getLogger(__name__)

DIRECTORY_MARKER: dict[str, str] = {"type": "directory"}

SnapshotValue = Union[str, dict[str, Any]]
Snapshot = dict[str, SnapshotValue]


def serialize(fs: VirtualFileSystem) -> Snapshot:
    """Flatten the tree into a snapshot.

    Args:
        fs: The file system to flatten.

    Returns:
        Mapping of canonical path -> content (files) or DIRECTORY_MARKER
        (directories), sorted by path. ``fs.limits`` is not included; the
        host keeps the limits and passes them back to ``deserialize``.
    """
    entries: Snapshot = {}
    for directory in fs.directories:
        entries[directory] = dict(DIRECTORY_MARKER)
    for file_path, content in fs.list_files().items():
        entries[file_path] = content

    snapshot = {key: entries[key] for key in sorted(entries)}
    logger.info(f"Serialized file system: {fs.summary}")
    return snapshot


def _classify(key: str, value: Any) -> tuple[str, Optional[str]]:
    """Return ("file", content) or ("directory", None) for one snapshot entry."""
    if isinstance(value, str):
        return "file", value
    if isinstance(value, Mapping):
        node_type = value.get("type")
        if node_type == "directory":
            return "directory", None
        if node_type == "file":
            content = value.get("content", "")
            if content is None:
                content = ""
            if not isinstance(content, str):
                raise InvalidSnapshotError(f"File entry {key!r} has non-text content")
            return "file", content
        raise InvalidSnapshotError(f"Entry {key!r} has unknown node type {node_type!r}")
    raise InvalidSnapshotError(
        f"Entry {key!r} must be a content string or a node record, got {type(value).__name__}"
    )


def deserialize(
    snapshot: Mapping[str, Any], limits: Optional[FileSystemLimits] = None
) -> VirtualFileSystem:
    """Rebuild a fresh VirtualFileSystem from a snapshot.

    Args:
        snapshot: Mapping produced by ``serialize`` (or the node-record form).
        limits: Limits for the rebuilt tree. When given, every entry is
            checked against them. When omitted, entries are restored without
            limit checks and the tree gets FileSystemLimits() for later
            writes, so ``deserialize(serialize(fs))`` holds whatever limits
            ``fs`` was built under. Pass ``limits=fs.limits`` to keep them.

    Returns:
        A new file system with the same files, contents and directories.

    Raises:
        InvalidSnapshotError: If the snapshot is not a mapping, has an invalid
            path, two keys that canonicalize to the same path, a file/directory
            collision, an unknown entry shape, or breaks the given limits.
    """
    if not isinstance(snapshot, Mapping):
        raise InvalidSnapshotError(
            f"Snapshot must be a mapping, got {type(snapshot).__name__}"
        )

    files: dict[str, str] = {}
    directories: set[str] = set()
    for key, value in snapshot.items():
        try:
            canonical = paths.normalize(key, allow_root=True)
        except FileSystemError as exc:
            raise InvalidSnapshotError(f"Snapshot has an invalid path: {exc}") from exc

        kind, content = _classify(key, value)
        if canonical == paths.ROOT:
            if kind == "directory":
                continue
            raise InvalidSnapshotError("Snapshot stores a file at the root path")
        if canonical in files or canonical in directories:
            raise InvalidSnapshotError(f"Snapshot lists /{canonical} more than once")

        if kind == "file":
            files[canonical] = content or ""
        else:
            directories.add(canonical)

    # Snapshots do not record limits; restore unchecked unless limits are given.
    fs = VirtualFileSystem(limits=limits or FileSystemLimits.unlimited())
    try:
        # Directories first so that a file stored at a directory path collides.
        for directory in sorted(directories):
            fs.create_directory(directory, exist_ok=True)
        for file_path in sorted(files):
            fs.write_file(file_path, files[file_path], overwrite=False)
    except FileSystemError as exc:
        raise InvalidSnapshotError(f"Snapshot is inconsistent: {exc}") from exc

    if limits is None:
        fs.limits = FileSystemLimits()
    fs.update_count = 0
    logger.info(f"Deserialized file system: {fs.summary}")
    return fs


def dumps(fs: VirtualFileSystem) -> str:
    """Serialize the tree to a JSON string with sorted keys."""
    return json.dumps(serialize(fs), sort_keys=True, ensure_ascii=False)


def loads(text: str, limits: Optional[FileSystemLimits] = None) -> VirtualFileSystem:
    """Rebuild a tree from a JSON string produced by ``dumps``.

    Raises:
        InvalidSnapshotError: If the text is not valid JSON or not a valid snapshot.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise InvalidSnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    return deserialize(data, limits=limits)
