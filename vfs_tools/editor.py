"""The str_replace_editor tool: view, create and edit files."""

from typing import Any, ClassVar

from pydantic import BaseModel

from vfs import paths, patcher
from vfs.errors import InvalidRangeError
from vfs_tools.base import ToolAdapter
from vfs_tools.models import EditorArguments, ToolResult

EMPTY_DIRECTORY_MARKER = "(empty directory)"

EDITOR_DESCRIPTION = """A text editor for viewing, creating and editing files in the project.

Commands:
- view: show a file with line numbers, or list a directory. Optional view_range [start, end] shows only those lines; use -1 as end to read to the end of the file.
- create: create a new file at path with file_text as its content. Missing parent directories are created. Fails if the file already exists.
- str_replace: replace old_str with new_str in the file at path. old_str must match exactly one location in the file, including whitespace; add surrounding lines to make it unique.
- insert: insert new_str after line insert_line (0 inserts at the top of the file).

Paths are rooted at the project root, e.g. /App.jsx or /components/Button.jsx."""


class EditorTool(ToolAdapter):
    """Tool adapter exposing view/create/str_replace/insert over a VirtualFileSystem.

    Each editing command reads the current content, computes the new content
    with a pure function from ``vfs.patcher`` and writes it back in one call,
    so a failed edit never leaves a partial write behind.

    Example:
        >>> tool = EditorTool(fs=fs)
        >>> tool.execute({"command": "create", "path": "/App.jsx", "file_text": "hi"})
        'File created: /App.jsx'
    """

    name: ClassVar[str] = "str_replace_editor"
    description: ClassVar[str] = EDITOR_DESCRIPTION
    arguments_model: ClassVar[type[BaseModel]] = EditorArguments
    handlers: ClassVar[dict[str, str]] = {
        "view": "_handle_view",
        "create": "_handle_create",
        "str_replace": "_handle_str_replace",
        "insert": "_handle_insert",
    }

    def render(self, result: ToolResult) -> Any:
        return result.text

    def _handle_view(self, params: EditorArguments) -> str:
        node = self.fs.get_node(params.path)
        if node.type == "file":
            return patcher.view(node.content, params.view_range)

        if params.view_range is not None:
            raise InvalidRangeError(
                f"view_range cannot be used on directory {paths.display(node.path)}"
            )
        return self._render_listing(node.path)

    def _render_listing(self, directory: str) -> str:
        children = self.fs.list_children(paths.display(directory))
        if not children:
            return EMPTY_DIRECTORY_MARKER

        entries = []
        for child in children:
            prefix = "[FILE]" if self.fs.is_file(child) else "[DIR]"
            entries.append(f"{prefix} {paths.basename(child)}")
        return "\n".join(entries)

    def _handle_create(self, params: EditorArguments) -> str:
        canonical = paths.normalize(params.path)
        existing = self.fs.read_file(canonical) if self.fs.is_file(canonical) else None
        content = patcher.create(canonical, params.file_text or "", existing=existing)
        self.fs.write_file(canonical, content, overwrite=False)
        return f"File created: {paths.display(canonical)}"

    def _handle_str_replace(self, params: EditorArguments) -> str:
        canonical = paths.normalize(params.path)
        content = self.fs.read_file(canonical)
        updated = patcher.str_replace(content, params.old_str or "", params.new_str or "")
        self.fs.write_file(canonical, updated)
        return f"Replaced 1 occurrence of the string in {paths.display(canonical)}"

    def _handle_insert(self, params: EditorArguments) -> str:
        canonical = paths.normalize(params.path)
        after_line = params.insert_line if params.insert_line is not None else 0
        content = self.fs.read_file(canonical)
        updated = patcher.insert(content, after_line, params.new_str or "")
        self.fs.write_file(canonical, updated)
        return f"Text inserted after line {after_line} in {paths.display(canonical)}"
