"""Argument and result models for the file tools.

These models describe what a model may send in a tool call and what the
host sends back. Their JSON schemas double as the tool input schemas.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

EditorCommand = Literal["view", "create", "str_replace", "insert"]
ManagerCommand = Literal["rename", "delete"]


class EditorArguments(BaseModel):
    """Arguments of a str_replace_editor tool call.

    Args:
        command: Editor command to run.
        path: File or directory the command applies to.
        file_text: Content of the new file (create).
        old_str: Exact text to replace (str_replace).
        new_str: Replacement text (str_replace) or text to insert (insert).
        insert_line: Line after which to insert; 0 inserts at the top (insert).
        view_range: Optional [start, end] line range; end -1 reads to the end (view).
    """

    command: EditorCommand = Field(
        description="The command to run: view, create, str_replace or insert"
    )
    path: str = Field(description="Path of the file or directory, e.g. /App.jsx")
    file_text: Optional[str] = Field(
        default=None,
        description="Required for create: full content of the new file",
    )
    old_str: Optional[str] = Field(
        default=None,
        description="Required for str_replace: exact text to replace; must occur exactly once",
    )
    new_str: Optional[str] = Field(
        default=None,
        description="For str_replace: replacement text. For insert: text to insert",
    )
    insert_line: Optional[int] = Field(
        default=None,
        description="For insert: line number after which to insert (0 inserts at the top)",
    )
    view_range: Optional[list[int]] = Field(
        default=None,
        description="For view: [start, end] 1-based line range; use -1 as end to read to the end",
    )

    @field_validator("view_range")
    @classmethod
    def validate_view_range(cls, v: Optional[list[int]]) -> Optional[list[int]]:
        """Validate that view_range has exactly two entries.

        Raises:
            ValueError: If view_range does not have two entries.
        """
        if v is not None and len(v) != 2:
            raise ValueError("view_range must contain exactly two integers [start, end]")
        return v

    @model_validator(mode="after")
    def validate_command_fields(self) -> "EditorArguments":
        """Validate that the fields required by the command are present.

        Raises:
            ValueError: If a required field for the command is missing.
        """
        if self.command == "str_replace" and self.old_str is None:
            raise ValueError("old_str is required for str_replace")
        if self.command == "insert" and self.new_str is None:
            raise ValueError("new_str is required for insert")
        return self


class ManagerArguments(BaseModel):
    """Arguments of a file_manager tool call.

    Args:
        command: Manager command to run.
        path: File or directory to rename or delete.
        new_path: Destination path (rename).
    """

    command: ManagerCommand = Field(description="The command to run: rename or delete")
    path: str = Field(description="Path of the file or directory, e.g. /components")
    new_path: Optional[str] = Field(
        default=None,
        description="Required for rename: the new path of the file or directory",
    )

    @model_validator(mode="after")
    def validate_command_fields(self) -> "ManagerArguments":
        """Validate that rename carries a new_path.

        Raises:
            ValueError: If new_path is missing for rename.
        """
        if self.command == "rename" and self.new_path is None:
            raise ValueError("new_path is required for rename")
        return self


class ToolResult(BaseModel):
    """Outcome of one tool call.

    Args:
        success: Whether the command was applied.
        message: Result text on success.
        error: Failure text on failure.
    """

    success: bool = Field(description="Whether the command was applied")
    message: Optional[str] = Field(default=None, description="Result text on success")
    error: Optional[str] = Field(default=None, description="Failure text on failure")

    @classmethod
    def ok(cls, message: str) -> "ToolResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, error: str) -> "ToolResult":
        return cls(success=False, error=error)

    @property
    def text(self) -> str:
        """Plain-text rendering; failures are prefixed with "Error: "."""
        if self.success:
            return self.message or ""
        return f"Error: {self.error}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary without empty fields.

        Returns:
            {"success": True, "message": ...} or {"success": False, "error": ...}.
        """
        result: dict[str, Any] = {"success": self.success}
        if self.success:
            result["message"] = self.message or ""
        else:
            result["error"] = self.error or ""
        return result
