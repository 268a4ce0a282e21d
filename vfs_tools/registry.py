"""Build the file tools for one file system and route tool calls to them."""

import logging
from typing import Any, Mapping, Union

from vfs.filesystem import VirtualFileSystem
from vfs_tools.base import ToolAdapter
from vfs_tools.editor import EditorTool
from vfs_tools.file_manager import FileManagerTool

logger = logging.getLogger(__name__)


def build_tools(fs: VirtualFileSystem) -> dict[str, ToolAdapter]:
    """Create both file tools bound to the same file system.

    Args:
        fs: The file system for the current agent turn.

    Returns:
        Mapping of tool name to adapter, in the order they are offered to the model.

    Example:
        >>> tools = build_tools(fs)
        >>> sorted(tools)
        ['file_manager', 'str_replace_editor']
    """
    editor = EditorTool(fs=fs)
    manager = FileManagerTool(fs=fs)
    return {editor.name: editor, manager.name: manager}


def tool_definitions(tools: Mapping[str, ToolAdapter]) -> list[dict[str, Any]]:
    """Return the provider-facing descriptors of every tool."""
    return [tool.definition() for tool in tools.values()]


def dispatch_tool_call(
    tools: Mapping[str, ToolAdapter],
    name: str,
    arguments: Union[Mapping[str, Any], str, None] = None,
) -> Any:
    """Execute a tool call by tool name.

    Args:
        tools: Tools built by ``build_tools``.
        name: Tool name chosen by the model.
        arguments: Tool-call arguments.

    Returns:
        The tool's result, or an error string if no tool has that name.
    """
    tool = tools.get(name)
    if tool is None:
        available = ", ".join(sorted(tools))
        logger.warning(f"Model called unknown tool {name!r}")
        return f"Error: Unknown tool {name!r}. Available tools: {available}"
    return tool.execute(arguments)
