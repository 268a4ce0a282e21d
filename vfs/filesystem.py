"""In-memory virtual file system owned by a single agent session."""

import logging
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Union

from pydantic import BaseModel, Field, PrivateAttr

from vfs import paths
from vfs.config import FileSystemLimits
from vfs.errors import (
    AlreadyExistsError,
    DirectoryCollisionError,
    LimitExceededError,
    NotFoundError,
)
from vfs.nodes import DirectoryNode, FileNode

logger = logging.getLogger(__name__)


class VirtualFileSystem(BaseModel):
    """Tree of text files and directories held entirely in memory.

    Files are stored as canonical path -> content. Directories are stored as
    a set of canonical paths in the same namespace; writing a file registers
    every missing ancestor directory, so a directory outlives the deletion of
    its last file. The root directory always exists and is never stored.

    Invariants:
    - A path is either a file or a directory, never both.
    - No file has a file as an ancestor.
    - Every ancestor of every stored path is a stored directory.

    File and directory state lives in private attributes, so model_dump() and
    model_validate() do not carry it; persist a tree with vfs.serializer.

    The instance is mutated by one caller at a time and does no locking.
    Every mutating method checks all of its preconditions before it changes
    anything, so a failed call leaves the tree exactly as it was.

    Args:
        limits: Resource limits applied to every write.
        update_count: Number of successful mutations applied to this tree.

    Example:
        >>> fs = VirtualFileSystem()
        >>> fs.write_file("/src/App.jsx", "export default App;")
        >>> fs.list_children("src")
        ['src/App.jsx']
    """

    limits: FileSystemLimits = Field(
        default_factory=FileSystemLimits,
        description="Resource limits applied to every write",
    )
    update_count: int = Field(
        default=0, description="Number of successful mutations applied to this tree"
    )

    _files: dict[str, str] = PrivateAttr(default_factory=dict)
    _directories: set[str] = PrivateAttr(default_factory=set)
    _total_size: int = PrivateAttr(default=0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def file_count(self) -> int:
        """Number of files in the tree."""
        return len(self._files)

    @property
    def total_size(self) -> int:
        """Combined size of all file contents, in characters."""
        return self._total_size

    @property
    def directories(self) -> list[str]:
        """Sorted canonical paths of every directory except the root."""
        return sorted(self._directories)

    @property
    def summary(self) -> str:
        """Return a brief human-readable summary of the tree."""
        return (
            f"{self.file_count} files, {len(self._directories)} directories, "
            f"{self.total_size} characters"
        )

    def exists(self, path: str) -> bool:
        """Check whether a path names a file or a directory.

        Args:
            path: Raw or canonical path. "/" names the root.

        Returns:
            True if the path is a file or a directory.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
        """
        canonical = paths.normalize(path, allow_root=True)
        return self._is_file(canonical) or self._is_directory(canonical)

    def is_file(self, path: str) -> bool:
        """Check whether a path names a file."""
        return self._is_file(paths.normalize(path, allow_root=True))

    def is_directory(self, path: str) -> bool:
        """Check whether a path names a directory ("/" is always one)."""
        return self._is_directory(paths.normalize(path, allow_root=True))

    def get_node(self, path: str) -> Union[FileNode, DirectoryNode]:
        """Look up the node at a path.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            NotFoundError: If nothing exists at the path.
        """
        canonical = paths.normalize(path, allow_root=True)
        if self._is_file(canonical):
            return FileNode(path=canonical, content=self._files[canonical])
        if self._is_directory(canonical):
            return DirectoryNode(path=canonical)
        raise NotFoundError(canonical)

    def read_file(self, path: str) -> str:
        """Return the content of a file.

        Args:
            path: Path of the file.

        Returns:
            The file's text content.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            NotFoundError: If the path is absent or names a directory.
        """
        canonical = paths.normalize(path)
        if canonical in self._files:
            return self._files[canonical]
        if canonical in self._directories:
            raise NotFoundError(canonical, "path is a directory, not a file")
        raise NotFoundError(canonical)

    def list_children(self, path: str = "/") -> list[str]:
        """List the immediate children of a directory.

        Both files and subdirectories are returned, as canonical paths sorted
        lexicographically, so repeated calls on an unchanged tree return the
        same sequence.

        Args:
            path: Directory to list. Defaults to the root.

        Returns:
            Sorted canonical paths of the directory's children.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            NotFoundError: If the path does not name a directory.
        """
        canonical = paths.normalize(path, allow_root=True)
        if not self._is_directory(canonical):
            if self._is_file(canonical):
                raise NotFoundError(canonical, "path is a file, not a directory")
            raise NotFoundError(canonical)

        children = [
            candidate
            for candidate in self._all_paths()
            if (paths.parent(candidate) or paths.ROOT) == canonical
        ]
        return sorted(children)

    def list_files(self) -> dict[str, str]:
        """Return every file as path -> content, ordered by path."""
        return {path: self._files[path] for path in sorted(self._files)}

    def walk(self, path: str = "/") -> Iterator[Union[FileNode, DirectoryNode]]:
        """Yield every node below a directory, depth first, in sorted order.

        The starting directory itself is not yielded.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            NotFoundError: If the path does not name a directory.
        """
        for child in self.list_children(path):
            if self._is_file(child):
                yield FileNode(path=child, content=self._files[child])
            else:
                yield DirectoryNode(path=child)
                yield from self.walk(child)

    def snapshot(self) -> Mapping[str, str]:
        """Return a read-only copy of the file map for display or diffing.

        The returned mapping does not change when the tree is mutated later.
        """
        return MappingProxyType(self.list_files())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def write_file(self, path: str, content: str, overwrite: bool = True) -> str:
        """Create or replace a file, creating missing ancestor directories.

        Args:
            path: Path of the file.
            content: New text content.
            overwrite: Replace an existing file. When False an existing file
                fails with AlreadyExistsError.

        Returns:
            The canonical path that was written.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            AlreadyExistsError: If the file exists and overwrite is False.
            DirectoryCollisionError: If the path is a directory or an ancestor
                segment is a file.
            LimitExceededError: If the write would break a configured limit.
        """
        canonical = paths.normalize(path)
        self._check_no_file_ancestor(canonical)
        if canonical in self._directories:
            raise DirectoryCollisionError(
                canonical, canonical, "a directory already exists at this path"
            )
        existed = canonical in self._files
        if existed and not overwrite:
            raise AlreadyExistsError(canonical)

        self._check_write_limits(canonical, content)

        for ancestor in paths.ancestors(canonical):
            self._directories.add(ancestor)
        self._total_size += len(content) - len(self._files.get(canonical, ""))
        self._files[canonical] = content
        self.update_count += 1

        logger.debug(
            f"{'Updated' if existed else 'Created'} file /{canonical} ({len(content)} chars)"
        )
        return canonical

    def create_file(self, path: str, content: str = "") -> str:
        """Create a new file; fails with AlreadyExistsError if it exists."""
        return self.write_file(path, content, overwrite=False)

    def create_directory(self, path: str, exist_ok: bool = False) -> str:
        """Create an empty directory and any missing ancestors.

        Args:
            path: Path of the directory.
            exist_ok: Succeed silently if the directory already exists.

        Returns:
            The canonical path of the directory.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            AlreadyExistsError: If the directory exists and exist_ok is False.
            DirectoryCollisionError: If the path or an ancestor is a file.
        """
        canonical = paths.normalize(path)
        self._check_no_file_ancestor(canonical)
        if canonical in self._files:
            raise DirectoryCollisionError(
                canonical, canonical, "a file already exists at this path"
            )
        if canonical in self._directories:
            if exist_ok:
                return canonical
            raise AlreadyExistsError(canonical)

        for ancestor in paths.ancestors(canonical):
            self._directories.add(ancestor)
        self._directories.add(canonical)
        self.update_count += 1

        logger.debug(f"Created directory /{canonical}")
        return canonical

    def delete_file(self, path: str) -> str:
        """Delete a single file.

        Returns:
            The canonical path that was deleted.

        Raises:
            InvalidPathError: If the path cannot be canonicalized.
            NotFoundError: If no file exists at the path (including when the
                path names a directory).
        """
        canonical = paths.normalize(path)
        if canonical not in self._files:
            if canonical in self._directories:
                raise NotFoundError(canonical, "path is a directory, not a file")
            raise NotFoundError(canonical)

        self._total_size -= len(self._files.pop(canonical))
        self.update_count += 1

        logger.debug(f"Deleted file /{canonical}")
        return canonical

    def delete_path(self, path: str) -> list[str]:
        """Delete a file, or a directory together with everything below it.

        Args:
            path: Path of the file or directory. The root cannot be deleted.

        Returns:
            Sorted canonical paths of the files that were removed.

        Raises:
            InvalidPathError: If the path cannot be canonicalized or is the root.
            NotFoundError: If nothing exists at the path.
        """
        canonical = paths.normalize(path)
        if canonical in self._files:
            self.delete_file(canonical)
            return [canonical]
        if canonical not in self._directories:
            raise NotFoundError(canonical)

        removed_files = sorted(
            file_path
            for file_path in self._files
            if paths.is_ancestor_of(canonical, file_path)
        )
        removed_dirs = [
            dir_path
            for dir_path in self._directories
            if dir_path == canonical or paths.is_ancestor_of(canonical, dir_path)
        ]

        for file_path in removed_files:
            self._total_size -= len(self._files.pop(file_path))
        self._directories.difference_update(removed_dirs)
        self.update_count += 1

        logger.debug(
            f"Deleted directory /{canonical} ({len(removed_files)} files, "
            f"{len(removed_dirs)} directories)"
        )
        return removed_files

    def rename_path(self, old_path: str, new_path: str, overwrite: bool = False) -> str:
        """Rename a file, or move a directory with everything below it.

        For a directory every descendant is re-keyed by replacing the
        ``old_path`` prefix with ``new_path``. Missing ancestors of the target
        are created. All targets are checked before anything moves.

        Args:
            old_path: Existing file or directory.
            new_path: Destination path.
            overwrite: Replace existing files at the destination. Without it
                any populated target fails with AlreadyExistsError.

        Returns:
            The canonical destination path.

        Raises:
            InvalidPathError: If either path cannot be canonicalized or is the root.
            NotFoundError: If old_path does not exist.
            AlreadyExistsError: If a target exists and overwrite is False, or
                the two paths are the same.
            DirectoryCollisionError: If a target would put a file where a
                directory is (or the reverse), or a directory would move into
                its own subtree.
            LimitExceededError: If a renamed file's extension is not allowed.
        """
        source = paths.normalize(old_path)
        target = paths.normalize(new_path)

        if not (self._is_file(source) or self._is_directory(source)):
            raise NotFoundError(source)
        if source == target:
            raise AlreadyExistsError(target)
        if paths.is_ancestor_of(source, target):
            raise DirectoryCollisionError(
                target, source, "cannot move a path inside itself"
            )
        self._check_no_file_ancestor(target)

        if self._is_file(source):
            file_moves = {source: target}
            dir_moves: dict[str, str] = {}
        else:
            file_moves = {
                file_path: paths.rebase(file_path, source, target)
                for file_path in self._files
                if paths.is_ancestor_of(source, file_path)
            }
            dir_moves = {
                dir_path: paths.rebase(dir_path, source, target)
                for dir_path in self._directories
                if dir_path == source or paths.is_ancestor_of(source, dir_path)
            }

        self._check_rename_targets(source, target, file_moves, dir_moves, overwrite)

        moved_contents = {new: self._files.pop(old) for old, new in file_moves.items()}
        self._directories.difference_update(dir_moves)
        for new, content in moved_contents.items():
            self._total_size -= len(self._files.get(new, ""))
            self._files[new] = content
        self._directories.update(dir_moves.values())
        for ancestor in paths.ancestors(target):
            self._directories.add(ancestor)
        self.update_count += 1

        logger.debug(
            f"Renamed /{source} -> /{target} ({len(file_moves)} files, "
            f"{len(dir_moves)} directories)"
        )
        return target

    def move_path(self, path: str, directory: str, overwrite: bool = False) -> str:
        """Move a file or directory into another directory, keeping its name.

        The destination directory is created if missing.

        Returns:
            The canonical destination path.

        Raises:
            Same failures as rename_path.
        """
        source = paths.normalize(path)
        destination = paths.normalize(directory, allow_root=True)
        return self.rename_path(
            source, paths.join(destination, paths.basename(source)), overwrite=overwrite
        )

    def clear(self) -> None:
        """Remove every file and directory, leaving only the empty root."""
        self._files.clear()
        self._directories.clear()
        self._total_size = 0
        self.update_count = 0

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    def validate_state(self) -> list[str]:
        """Validate tree invariants and return any problems found.

        Returns:
            List of validation error messages (empty list if valid).
        """
        errors = []

        for file_path in self._files:
            if file_path in self._directories:
                errors.append(f"/{file_path} is both a file and a directory")
            for ancestor in paths.ancestors(file_path):
                if ancestor in self._files:
                    errors.append(f"/{file_path} has a file ancestor /{ancestor}")
                elif ancestor not in self._directories:
                    errors.append(f"/{file_path} is missing ancestor directory /{ancestor}")

        for dir_path in self._directories:
            for ancestor in paths.ancestors(dir_path):
                if ancestor not in self._directories:
                    errors.append(
                        f"Directory /{dir_path} is missing ancestor directory /{ancestor}"
                    )

        actual_size = sum(len(content) for content in self._files.values())
        if actual_size != self._total_size:
            errors.append(
                f"Tracked total size ({self._total_size}) doesn't match "
                f"actual size ({actual_size})"
            )

        return errors

    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable description of the tree for inspection.

        This is a display aid; use vfs.serializer.serialize for persistence.
        """
        return {
            "files": self.list_files(),
            "directories": self.directories,
            "file_count": self.file_count,
            "total_size": self.total_size,
            "update_count": self.update_count,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_file(self, canonical: str) -> bool:
        return canonical in self._files

    def _is_directory(self, canonical: str) -> bool:
        return canonical == paths.ROOT or canonical in self._directories

    def _all_paths(self) -> Iterator[str]:
        yield from self._files
        yield from self._directories

    def _check_no_file_ancestor(self, canonical: str) -> None:
        for ancestor in paths.ancestors(canonical):
            if ancestor in self._files:
                raise DirectoryCollisionError(
                    canonical, ancestor, "an ancestor segment is a file"
                )

    def _check_write_limits(self, canonical: str, content: str) -> None:
        limits = self.limits
        if not limits.extension_allowed(canonical):
            logger.warning(f"Rejected write to /{canonical}: extension not allowed")
            raise LimitExceededError(
                canonical,
                "allowed_extensions",
                f"file type not allowed (allowed: {', '.join(limits.allowed_extensions or [])})",
            )

        size = len(content)
        if limits.max_file_size is not None and size > limits.max_file_size:
            logger.warning(f"Rejected write to /{canonical}: file too large ({size})")
            raise LimitExceededError(
                canonical,
                "max_file_size",
                f"file size {size} exceeds the limit of {limits.max_file_size}",
            )

        is_new = canonical not in self._files
        if is_new and limits.max_files is not None and self.file_count >= limits.max_files:
            logger.warning(f"Rejected write to /{canonical}: file count limit reached")
            raise LimitExceededError(
                canonical,
                "max_files",
                f"the tree already holds the maximum of {limits.max_files} files",
            )

        new_total = self._total_size + size - len(self._files.get(canonical, ""))
        if limits.max_total_size is not None and new_total > limits.max_total_size:
            logger.warning(f"Rejected write to /{canonical}: total size limit reached")
            raise LimitExceededError(
                canonical,
                "max_total_size",
                f"total size {new_total} would exceed the limit of {limits.max_total_size}",
            )

    def _check_rename_targets(
        self,
        source: str,
        target: str,
        file_moves: dict[str, str],
        dir_moves: dict[str, str],
        overwrite: bool,
    ) -> None:
        if self._is_file(target) or self._is_directory(target):
            if not overwrite:
                raise AlreadyExistsError(target)
            if self._is_file(source) != self._is_file(target):
                raise DirectoryCollisionError(
                    target, target, "cannot replace a file with a directory or the reverse"
                )

        if self._is_file(source) and not self.limits.extension_allowed(target):
            logger.warning(f"Rejected rename to /{target}: extension not allowed")
            raise LimitExceededError(target, "allowed_extensions", "file type not allowed")

        remaining_files = set(self._files).difference(file_moves)
        final_dirs = self._directories.difference(dir_moves).union(dir_moves.values())
        for new in file_moves.values():
            if new in final_dirs:
                raise DirectoryCollisionError(new, new, "a directory exists at the target")
        for new in dir_moves.values():
            if new in remaining_files:
                raise DirectoryCollisionError(new, new, "a file exists at the target")
