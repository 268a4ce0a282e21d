"""Tool adapters that expose a VirtualFileSystem to a tool-calling model."""

from vfs_tools.base import ToolAdapter
from vfs_tools.editor import EditorTool
from vfs_tools.file_manager import FileManagerTool
from vfs_tools.models import EditorArguments, ManagerArguments, ToolResult
from vfs_tools.registry import build_tools, dispatch_tool_call, tool_definitions

__all__ = [
    "ToolAdapter",
    "EditorTool",
    "FileManagerTool",
    "EditorArguments",
    "ManagerArguments",
    "ToolResult",
    "build_tools",
    "dispatch_tool_call",
    "tool_definitions",
]
