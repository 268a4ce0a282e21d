"""Convert file system failures into messages a model can act on.

The tool adapters never let an exception escape a tool call. Each failure
becomes a short message naming what went wrong and, where it helps, what to
try instead; the agent loop shows that text to the model as the tool result.
"""

from pydantic import ValidationError

from vfs.errors import FileSystemError

# Follow-up advice appended to the failure message, keyed by error kind.
ERROR_HINTS: dict[str, str] = {
    "InvalidPath": "Use a relative or /-rooted path without '.' or '..' segments.",
    "NotFound": "View the parent directory to see which paths exist.",
    "AlreadyExists": "Pick a different path, or edit the existing file with str_replace or insert.",
    "DirectoryCollision": "A path cannot be both a file and a directory.",
    "NoMatch": "old_str must match the file content exactly, including whitespace and indentation.",
    "InvalidRange": "View the file to check its line numbers.",
    "LimitExceeded": "Reduce the file size or remove files you no longer need.",
}


def format_error(exc: FileSystemError) -> str:
    """Render a file system failure as a model-readable message.

    Args:
        exc: The failure raised by the file system or the text patcher.

    Returns:
        The failure message, followed by a hint for the failure kind if one exists.
    """
    message = exc.message
    hint = ERROR_HINTS.get(exc.kind)
    if not hint:
        return message
    separator = " " if message.endswith(".") else ". "
    return f"{message}{separator}{hint}"


def format_validation_error(exc: ValidationError) -> str:
    """Render malformed tool arguments as a single-line message.

    Args:
        exc: The pydantic validation failure for the tool arguments.

    Returns:
        Message listing each offending field and why it was rejected.
    """
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "__root__")
        message = error.get("msg", "invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, ") :]
        problems.append(f"{location}: {message}" if location else message)
    return "Invalid arguments: " + "; ".join(problems)
