"""Unit tests for building and dispatching the file tools."""

from vfs_tools import EditorTool, FileManagerTool, build_tools, dispatch_tool_call, tool_definitions


class TestBuildTools:
    """Test build_tools()."""

    def test_both_tools_share_filesystem(self, project_fs):
        """Both tools are bound to the same tree."""
        tools = build_tools(project_fs)
        assert list(tools) == ["str_replace_editor", "file_manager"]
        assert isinstance(tools["str_replace_editor"], EditorTool)
        assert isinstance(tools["file_manager"], FileManagerTool)
        assert tools["str_replace_editor"].fs is project_fs
        assert tools["file_manager"].fs is project_fs

    def test_tool_definitions(self, empty_fs):
        """tool_definitions returns one descriptor per tool."""
        definitions = tool_definitions(build_tools(empty_fs))
        assert [d["name"] for d in definitions] == ["str_replace_editor", "file_manager"]
        for definition in definitions:
            assert set(definition) == {"name", "description", "input_schema"}


class TestDispatchToolCall:
    """Test dispatch_tool_call()."""

    def test_dispatch_editor(self, empty_fs):
        """Editor calls return text."""
        tools = build_tools(empty_fs)
        result = dispatch_tool_call(
            tools, "str_replace_editor", {"command": "create", "path": "/a.txt", "file_text": "a"}
        )
        assert result == "File created: /a.txt"

    def test_dispatch_manager(self, project_fs):
        """Manager calls return a result dictionary."""
        tools = build_tools(project_fs)
        result = dispatch_tool_call(tools, "file_manager", {"command": "delete", "path": "/App.jsx"})
        assert result["success"] is True

    def test_dispatch_unparsed_arguments(self, empty_fs):
        """Raw JSON argument strings are routed like parsed ones."""
        result = dispatch_tool_call(
            build_tools(empty_fs), "str_replace_editor", '{"command": "view", "path": "/"}'
        )
        assert result == "(empty directory)"

    def test_unknown_tool(self, empty_fs):
        """An unknown tool name is reported, not raised."""
        result = dispatch_tool_call(build_tools(empty_fs), "shell", {"command": "ls"})
        assert result.startswith("Error: Unknown tool 'shell'")
        assert "file_manager" in result
