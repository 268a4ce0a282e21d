"""Resource limits for a virtual file system instance."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_WEB_EXTENSIONS = [
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".css",
    ".json",
    ".md",
    ".txt",
]


class FileSystemLimits(BaseModel):
    """Bounds enforced on every write to a VirtualFileSystem.

    Sizes are measured in characters of file content. A limit set to None is
    not enforced.

    Args:
        max_files: Maximum number of files in the tree.
        max_file_size: Maximum size of a single file.
        max_total_size: Maximum combined size of all files.
        allowed_extensions: File name suffixes accepted for files (e.g. ".tsx").
            None accepts any name.

    Example:
        >>> limits = FileSystemLimits(max_files=10, allowed_extensions=DEFAULT_WEB_EXTENSIONS)
        >>> fs = VirtualFileSystem(limits=limits)
    """

    max_files: Optional[int] = Field(
        default=100, description="Maximum number of files in the tree"
    )
    max_file_size: Optional[int] = Field(
        default=500_000, description="Maximum size of a single file"
    )
    max_total_size: Optional[int] = Field(
        default=5_000_000, description="Maximum combined size of all files"
    )
    allowed_extensions: Optional[list[str]] = Field(
        default=None, description="File name suffixes accepted for files"
    )

    @field_validator("max_files", "max_file_size", "max_total_size")
    @classmethod
    def validate_positive(cls, v: Optional[int]) -> Optional[int]:
        """Validate that numeric limits are positive.

        Raises:
            ValueError: If a limit is zero or negative.
        """
        if v is not None and v <= 0:
            raise ValueError("limits must be positive integers or None")
        return v

    @field_validator("allowed_extensions")
    @classmethod
    def validate_extensions(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        """Normalize extensions to lowercase with a leading dot.

        Raises:
            ValueError: If an extension is empty.
        """
        if v is None:
            return v
        normalized = []
        for ext in v:
            ext = ext.strip().lower()
            if not ext or ext == ".":
                raise ValueError("allowed_extensions cannot contain empty entries")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @classmethod
    def unlimited(cls) -> "FileSystemLimits":
        """Return limits with every bound disabled."""
        return cls(
            max_files=None,
            max_file_size=None,
            max_total_size=None,
            allowed_extensions=None,
        )

    def extension_allowed(self, path: str) -> bool:
        """Check whether a file path carries an accepted extension.

        Args:
            path: Canonical file path.

        Returns:
            True if no extension policy is set or the name ends in an allowed suffix.
        """
        if self.allowed_extensions is None:
            return True
        name = path.rsplit("/", 1)[-1].lower()
        dot = name.rfind(".")
        if dot <= 0:
            return False
        return name[dot:] in self.allowed_extensions
