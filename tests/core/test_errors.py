"""Unit tests for the failure taxonomy."""

import pytest

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


class TestErrorHierarchy:
    """Test that every failure shares the FileSystemError base."""

    @pytest.mark.parametrize(
        "error, kind",
        [
            (InvalidPathError("a/../b", "'..' segments are not allowed"), "InvalidPath"),
            (NotFoundError("a.txt"), "NotFound"),
            (AlreadyExistsError("a.txt"), "AlreadyExists"),
            (DirectoryCollisionError("a/b", "a"), "DirectoryCollision"),
            (NoMatchError("foo"), "NoMatch"),
            (AmbiguousMatchError("foo", [1, 2]), "AmbiguousMatch"),
            (InvalidRangeError("bad range"), "InvalidRange"),
            (UnsupportedCommandError("copy", ["rename", "delete"]), "UnsupportedCommand"),
            (InvalidSnapshotError("broken"), "InvalidSnapshot"),
            (LimitExceededError("a.txt", "max_files", "too many files"), "LimitExceeded"),
        ],
    )
    def test_kind_and_base(self, error, kind):
        """Each error carries its kind and derives from FileSystemError."""
        assert isinstance(error, FileSystemError)
        assert error.kind == kind
        assert error.message == str(error)

    def test_value_error_compatibility(self):
        """Path and range failures are also ValueErrors."""
        assert isinstance(InvalidPathError("", "path is empty"), ValueError)
        assert isinstance(InvalidRangeError("bad"), ValueError)


class TestErrorMessages:
    """Test the messages shown to callers."""

    def test_not_found(self):
        """NotFoundError names the rooted path and optional detail."""
        assert str(NotFoundError("src/a.ts")) == "No such file or directory: /src/a.ts"
        assert str(NotFoundError("src", "path is a directory, not a file")).endswith(
            "(path is a directory, not a file)"
        )

    def test_already_exists(self):
        """AlreadyExistsError names the rooted path."""
        assert str(AlreadyExistsError("App.jsx")) == "Path already exists: /App.jsx"

    def test_directory_collision(self):
        """DirectoryCollisionError names both paths."""
        error = DirectoryCollisionError("a/b", "a", "an ancestor segment is a file")
        assert error.path == "a/b"
        assert error.conflict == "a"
        assert "/a/b" in str(error)
        assert "conflicts with /a" in str(error)

    def test_ambiguous_match_lists_lines(self):
        """AmbiguousMatchError lists the line of every occurrence."""
        error = AmbiguousMatchError("foo", [1, 4])
        assert "2 times" in str(error)
        assert "lines 1, 4" in str(error)

    def test_no_match_detail_overrides(self):
        """A detail replaces the default NoMatchError message."""
        assert "not found" in str(NoMatchError("foo"))
        assert str(NoMatchError("", "old_str must not be empty")) == "old_str must not be empty"

    def test_invalid_range_line_count(self):
        """InvalidRangeError appends the line count when known."""
        assert str(InvalidRangeError("Invalid insert_line 9", 3)) == (
            "Invalid insert_line 9. File has 3 lines."
        )

    def test_unsupported_command(self):
        """UnsupportedCommandError lists the supported commands."""
        error = UnsupportedCommandError("copy", ["rename", "delete"])
        assert "Invalid command 'copy'" in str(error)
        assert "rename, delete" in str(error)

    def test_limit_exceeded(self):
        """LimitExceededError keeps the limit name."""
        error = LimitExceededError("big.txt", "max_file_size", "file too large")
        assert error.limit == "max_file_size"
        assert str(error) == "Cannot write /big.txt: file too large"
