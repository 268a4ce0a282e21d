"""Path canonicalization for the virtual file system.

Canonical paths are forward-slash separated with no leading or trailing
separator and no empty, "." or ".." segments, e.g. ``src/components/App.jsx``.
The root directory is the empty string ``ROOT``. Tool arguments usually
arrive with a leading slash (``/App.jsx``); ``display`` puts it back when a
path is shown to the model.
"""

from typing import Optional

from vfs.errors import InvalidPathError

SEPARATOR = "/"
ROOT = ""
MAX_PATH_LENGTH = 500


def _check_characters(raw: str) -> None:
    for char in raw:
        code = ord(char)
        if code < 32 or code == 127:
            raise InvalidPathError(raw, f"contains control character {char!r}")


def normalize(raw: object, allow_root: bool = False) -> str:
    """Canonicalize a raw path string.

    Surrounding whitespace is trimmed, repeated separators collapse to one,
    and leading/trailing separators are dropped. Applying ``normalize`` to
    its own output returns the same string.

    Args:
        raw: The path as supplied by a caller or a model.
        allow_root: Accept paths that reduce to the root directory.

    Returns:
        The canonical path.

    Raises:
        InvalidPathError: If the input is not a string, is empty, names the
            root when ``allow_root`` is False, contains ``.``/``..`` segments,
            NUL or other control characters, or exceeds ``MAX_PATH_LENGTH``.
    """
    if not isinstance(raw, str):
        raise InvalidPathError(raw, "path must be a string")

    stripped = raw.strip()
    if not stripped:
        raise InvalidPathError(raw, "path is empty")
    _check_characters(stripped)

    segments = [segment for segment in stripped.split(SEPARATOR) if segment]
    for segment in segments:
        if segment in (".", ".."):
            raise InvalidPathError(raw, f"'{segment}' segments are not allowed")

    canonical = SEPARATOR.join(segments)
    if canonical == ROOT and not allow_root:
        raise InvalidPathError(raw, "path names the root directory")
    if len(canonical) > MAX_PATH_LENGTH:
        raise InvalidPathError(raw, f"path is longer than {MAX_PATH_LENGTH} characters")

    return canonical


def is_valid(raw: object, allow_root: bool = False) -> bool:
    """Return True if ``raw`` canonicalizes without error."""
    try:
        normalize(raw, allow_root=allow_root)
    except InvalidPathError:
        return False
    return True


def parent(path: str) -> Optional[str]:
    """Return the parent directory of a canonical path.

    ``None`` is returned for single-segment paths (whose parent is the root)
    and for the root itself.
    """
    if SEPARATOR not in path:
        return None
    return path.rsplit(SEPARATOR, 1)[0]


def basename(path: str) -> str:
    """Return the final segment of a canonical path."""
    return path.rsplit(SEPARATOR, 1)[-1]


def join(directory: str, name: str) -> str:
    """Join a canonical directory path (possibly the root) with a child name."""
    if directory == ROOT:
        return name
    return f"{directory}{SEPARATOR}{name}"


def ancestors(path: str) -> list[str]:
    """Return every ancestor directory of ``path``, outermost first, root excluded.

    Example:
        >>> ancestors("src/lib/util.ts")
        ['src', 'src/lib']
    """
    segments = path.split(SEPARATOR)[:-1]
    return [SEPARATOR.join(segments[: index + 1]) for index in range(len(segments))]


def is_ancestor_of(ancestor: str, path: str) -> bool:
    """Return True iff ``path`` lies strictly below ``ancestor``.

    The root is an ancestor of every non-root path.
    """
    if ancestor == ROOT:
        return path != ROOT
    return path.startswith(ancestor + SEPARATOR)


def rebase(path: str, old_prefix: str, new_prefix: str) -> str:
    """Rewrite ``path`` so that ``old_prefix`` is replaced by ``new_prefix``.

    ``path`` must equal ``old_prefix`` or descend from it.
    """
    if path == old_prefix:
        return new_prefix
    return join(new_prefix, path[len(old_prefix) + 1 :])


def display(path: str) -> str:
    """Render a canonical path the way tool results show it (leading slash)."""
    return SEPARATOR + path
