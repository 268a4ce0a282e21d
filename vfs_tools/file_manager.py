"""The file_manager tool: rename and delete files or directories."""

from typing import Any, ClassVar

from pydantic import BaseModel

from vfs import paths
from vfs_tools.base import ToolAdapter
from vfs_tools.models import ManagerArguments, ToolResult

MANAGER_DESCRIPTION = """Rename, move or delete files and directories in the project.

Commands:
- rename: move the file or directory at path to new_path. Renaming a directory moves everything inside it. Missing parent directories of new_path are created. Fails if new_path already exists.
- delete: delete the file or directory at path. Deleting a directory removes everything inside it.

Paths are rooted at the project root, e.g. /App.jsx or /components."""


class FileManagerTool(ToolAdapter):
    """Tool adapter exposing rename/delete over a VirtualFileSystem.

    Results are returned as ``{"success": True, "message": ...}`` or
    ``{"success": False, "error": ...}``.
    """

    name: ClassVar[str] = "file_manager"
    description: ClassVar[str] = MANAGER_DESCRIPTION
    arguments_model: ClassVar[type[BaseModel]] = ManagerArguments
    handlers: ClassVar[dict[str, str]] = {
        "rename": "_handle_rename",
        "delete": "_handle_delete",
    }

    def render(self, result: ToolResult) -> Any:
        return result.to_dict()

    def _handle_rename(self, params: ManagerArguments) -> str:
        source = paths.normalize(params.path)
        target = self.fs.rename_path(source, params.new_path or "")
        return f"Successfully renamed {paths.display(source)} to {paths.display(target)}"

    def _handle_delete(self, params: ManagerArguments) -> str:
        canonical = paths.normalize(params.path)
        was_directory = self.fs.is_directory(canonical)
        removed = self.fs.delete_path(canonical)
        if was_directory:
            return (
                f"Successfully deleted directory {paths.display(canonical)} "
                f"and {len(removed)} file(s) inside it"
            )
        return f"Successfully deleted {paths.display(canonical)}"
