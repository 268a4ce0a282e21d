"""Pure text-editing primitives used by the editor tool.

Every function takes file content and returns a string; none of them touch a
VirtualFileSystem. The editor adapter does the read-modify-write.

Line model: content is split on "\\n". A single trailing newline ends the
last line instead of starting a new, empty one, and empty content has no
lines at all. Line numbers are 1-based.
"""

from typing import Optional, Sequence

from vfs.errors import AlreadyExistsError, AmbiguousMatchError, InvalidRangeError, NoMatchError

EMPTY_FILE_MARKER = "(empty file)"


def split_lines(content: str) -> tuple[list[str], bool]:
    """Split content into lines.

    Returns:
        The lines without their separators, and whether the content ended
        with a trailing newline.
    """
    if content == "":
        return [], False
    trailing = content.endswith("\n")
    body = content[:-1] if trailing else content
    return body.split("\n"), trailing


def join_lines(lines: list[str], trailing_newline: bool) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + ("\n" if trailing_newline else "")


def line_count(content: str) -> int:
    return len(split_lines(content)[0])


def number_lines(lines: Sequence[str], start: int = 1) -> str:
    """Prefix each line with its line number and a tab."""
    return "\n".join(f"{start + offset}\t{line}" for offset, line in enumerate(lines))


def view(content: str, view_range: Optional[Sequence[int]] = None) -> str:
    """Render file content, or a slice of it, with line numbers.

    Args:
        content: Current file content.
        view_range: Optional ``[start, end]`` pair of 1-based inclusive line
            numbers. ``end`` may be -1 to read through the last line.

    Returns:
        Line-numbered text (``"{n}\\t{line}"`` per line), or
        ``EMPTY_FILE_MARKER`` for an empty file viewed without a range.

    Raises:
        InvalidRangeError: If the range is malformed, starts before line 1,
            ends before it starts, or reaches past the last line.
    """
    lines, _ = split_lines(content)
    if view_range is None:
        if not lines:
            return EMPTY_FILE_MARKER
        return number_lines(lines)

    if len(view_range) != 2:
        raise InvalidRangeError("view_range must be a list of two integers [start, end]")
    start, end = int(view_range[0]), int(view_range[1])
    total = len(lines)

    if start < 1:
        raise InvalidRangeError(f"Invalid view_range start {start}: must be at least 1", total)
    if start > total:
        raise InvalidRangeError(f"Invalid view_range start {start}: beyond end of file", total)
    if end == -1:
        end = total
    elif end < start:
        raise InvalidRangeError(
            f"Invalid view_range [{start}, {end}]: end must be >= start or -1", total
        )
    elif end > total:
        raise InvalidRangeError(f"Invalid view_range end {end}: beyond end of file", total)

    return number_lines(lines[start - 1 : end], start=start)


def find_occurrences(content: str, old_str: str) -> list[int]:
    """Return the start offset of every occurrence of ``old_str``, overlaps included."""
    offsets = []
    index = content.find(old_str)
    while index != -1:
        offsets.append(index)
        index = content.find(old_str, index + 1)
    return offsets


def str_replace(content: str, old_str: str, new_str: str) -> str:
    """Replace the single occurrence of ``old_str`` with ``new_str``.

    Args:
        content: Current file content.
        old_str: Exact text to find. Must occur exactly once.
        new_str: Replacement text (may be empty to delete).

    Returns:
        The updated content.

    Raises:
        NoMatchError: If ``old_str`` is empty or does not occur.
        AmbiguousMatchError: If ``old_str`` occurs more than once.
    """
    if not old_str:
        raise NoMatchError(old_str, "old_str must not be empty")

    offsets = find_occurrences(content, old_str)
    if not offsets:
        raise NoMatchError(old_str)
    if len(offsets) > 1:
        lines = [content.count("\n", 0, offset) + 1 for offset in offsets]
        raise AmbiguousMatchError(old_str, lines)

    offset = offsets[0]
    return content[:offset] + new_str + content[offset + len(old_str) :]


def insert(content: str, after_line: int, text: str) -> str:
    """Insert text as new line(s) after a given line.

    Args:
        content: Current file content.
        after_line: 1-based line to insert after; 0 inserts before the first line.
        text: Text to insert. A single trailing newline on it is ignored.

    Returns:
        The updated content.

    Raises:
        InvalidRangeError: If ``after_line`` is negative or past the last line.
    """
    lines, trailing = split_lines(content)
    if after_line < 0 or after_line > len(lines):
        raise InvalidRangeError(f"Invalid insert_line {after_line}", len(lines))

    new_lines, _ = split_lines(text)
    if not new_lines:
        new_lines = [""]
    lines[after_line:after_line] = new_lines
    return join_lines(lines, trailing)


def create(
    path: str,
    initial_content: str = "",
    existing: Optional[str] = None,
    overwrite: bool = False,
) -> str:
    """Produce the content for a brand-new file.

    Args:
        path: Canonical path of the file being created, used in the failure message.
        initial_content: Content the new file starts with.
        existing: Current content at the target path, or None if it is free.
        overwrite: Allow replacing existing content.

    Returns:
        ``initial_content`` unchanged.

    Raises:
        AlreadyExistsError: If the target is populated and overwrite is False.
    """
    if existing is not None and not overwrite:
        raise AlreadyExistsError(path)
    return initial_content
