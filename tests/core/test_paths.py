"""Unit tests for path canonicalization."""

import pytest

from vfs import paths
from vfs.errors import InvalidPathError


class TestNormalize:
    """Test normalize() canonical forms."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("App.jsx", "App.jsx"),
            ("/App.jsx", "App.jsx"),
            ("App.jsx/", "App.jsx"),
            ("//App.jsx//", "App.jsx"),
            ("  /src//components///Button.jsx  ", "src/components/Button.jsx"),
        ],
    )
    def test_canonical_forms(self, raw, expected):
        """Leading, trailing and repeated separators collapse to the canonical form."""
        assert paths.normalize(raw) == expected

    def test_idempotent(self):
        """Normalizing a canonical path returns it unchanged."""
        once = paths.normalize("//a///b/c/")
        assert paths.normalize(once) == once

    def test_root_rejected_by_default(self):
        """A path that reduces to the root is rejected unless allowed."""
        with pytest.raises(InvalidPathError):
            paths.normalize("/")

    def test_root_allowed(self):
        """The root normalizes to ROOT when allow_root is set."""
        assert paths.normalize("/", allow_root=True) == paths.ROOT
        assert paths.normalize("///", allow_root=True) == paths.ROOT

    @pytest.mark.parametrize("raw", ["", "   ", "a/../b", "../etc/passwd", "./a", "a/./b", ".."])
    def test_rejects_empty_and_relative_segments(self, raw):
        """Empty strings and '.'/'..' segments are rejected."""
        with pytest.raises(InvalidPathError):
            paths.normalize(raw)

    @pytest.mark.parametrize("raw", ["a\x00b", "a/b\x07", "line\nbreak/file", "del\x7f"])
    def test_rejects_control_characters(self, raw):
        """NUL and other control characters are rejected."""
        with pytest.raises(InvalidPathError):
            paths.normalize(raw)

    def test_surrounding_whitespace_trimmed_before_checks(self):
        """A trailing newline from a model is trimmed, not rejected."""
        assert paths.normalize("/App.jsx\n") == "App.jsx"

    @pytest.mark.parametrize("raw", [None, 42, ["a"], b"a"])
    def test_rejects_non_strings(self, raw):
        """Non-string input fails with InvalidPathError rather than TypeError."""
        with pytest.raises(InvalidPathError):
            paths.normalize(raw)

    def test_rejects_overlong_paths(self):
        """Paths longer than MAX_PATH_LENGTH are rejected."""
        with pytest.raises(InvalidPathError):
            paths.normalize("a" * (paths.MAX_PATH_LENGTH + 1))

    def test_error_keeps_raw_input(self):
        """InvalidPathError stores the raw input and reason."""
        with pytest.raises(InvalidPathError) as exc_info:
            paths.normalize("a/../b")
        assert exc_info.value.raw == "a/../b"
        assert ".." in exc_info.value.reason

    def test_is_valid(self):
        """is_valid reports success without raising."""
        assert paths.is_valid("/src/App.jsx")
        assert not paths.is_valid("../x")
        assert not paths.is_valid(None)


class TestPathRelations:
    """Test parent, basename and ancestry helpers."""

    def test_parent(self):
        """parent() drops the last segment."""
        assert paths.parent("src/lib/util.ts") == "src/lib"
        assert paths.parent("src/util.ts") == "src"

    def test_parent_of_root_level_path_is_none(self):
        """A single-segment path has no parent."""
        assert paths.parent("App.jsx") is None

    def test_basename(self):
        """basename() returns the final segment."""
        assert paths.basename("src/lib/util.ts") == "util.ts"
        assert paths.basename("App.jsx") == "App.jsx"

    def test_ancestors(self):
        """ancestors() lists every enclosing directory, outermost first."""
        assert paths.ancestors("a/b/c.txt") == ["a", "a/b"]
        assert paths.ancestors("c.txt") == []

    def test_is_ancestor_of(self):
        """A path is an ancestor only when followed by a separator."""
        assert paths.is_ancestor_of("src", "src/a.ts")
        assert paths.is_ancestor_of("src", "src/lib/a.ts")
        assert not paths.is_ancestor_of("src", "src")
        assert not paths.is_ancestor_of("src", "srcfoo/a.ts")

    def test_root_is_ancestor_of_everything(self):
        """The root is an ancestor of every non-root path."""
        assert paths.is_ancestor_of(paths.ROOT, "a")
        assert not paths.is_ancestor_of(paths.ROOT, paths.ROOT)

    def test_rebase(self):
        """rebase() swaps the leading prefix."""
        assert paths.rebase("src/a.ts", "src", "lib") == "lib/a.ts"
        assert paths.rebase("src", "src", "lib/core") == "lib/core"

    def test_join_and_display(self):
        """join() handles the root and display() adds a leading slash."""
        assert paths.join(paths.ROOT, "a") == "a"
        assert paths.join("a", "b") == "a/b"
        assert paths.display("a/b") == "/a/b"
        assert paths.display(paths.ROOT) == "/"
