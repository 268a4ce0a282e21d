"""Node value types returned by VirtualFileSystem lookups."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from vfs.paths import basename, display


class FileNode(BaseModel):
    """A file and its text content.

    Args:
        path: Canonical path of the file.
        content: Full text content.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = Field(default="file", description="Always 'file'")
    path: str = Field(description="Canonical path of the file")
    content: str = Field(default="", description="Full text content")

    @property
    def name(self) -> str:
        """Final segment of the path."""
        return basename(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted node-record form.

        Returns:
            Dictionary with type, name, display path and content.
        """
        return {
            "type": self.type,
            "name": self.name,
            "path": display(self.path),
            "content": self.content,
        }


class DirectoryNode(BaseModel):
    """A directory. Its children are derived from the paths below it.

    Args:
        path: Canonical path of the directory (empty string for the root).
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = Field(
        default="directory", description="Always 'directory'"
    )
    path: str = Field(description="Canonical path of the directory")

    @property
    def name(self) -> str:
        return basename(self.path) if self.path else "/"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "name": self.name,
            "path": display(self.path),
        }


Node = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]
