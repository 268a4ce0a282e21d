"""Base class for tools that expose a VirtualFileSystem to a model."""

import json
import logging
from abc import abstractmethod
from typing import Any, ClassVar, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vfs.errors import FileSystemError, UnsupportedCommandError
from vfs.filesystem import VirtualFileSystem
from vfs_tools.exceptions import format_error, format_validation_error
from vfs_tools.models import ToolResult

logger = logging.getLogger(__name__)


class ToolAdapter(BaseModel):
    """Dispatchable tool contract over one VirtualFileSystem.

    A tool call arrives as a plain mapping with a ``command`` field. The
    adapter validates it against ``arguments_model``, looks the command up in
    ``handlers`` and runs the matching ``_handle_<command>`` method. Every
    failure raised on the way, including unknown commands and malformed
    arguments, is converted to a failed ToolResult, so ``execute`` never
    raises for anything the model sends.

    Subclasses define:
    - ``name`` and ``description``: the tool as advertised to the model.
    - ``arguments_model``: pydantic model of the tool arguments.
    - ``handlers``: command name -> handler method name.
    - ``render``: how a ToolResult is returned to the agent loop.

    Args:
        fs: The file system this tool reads and mutates.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: ClassVar[str]
    description: ClassVar[str]
    arguments_model: ClassVar[type[BaseModel]]
    handlers: ClassVar[dict[str, str]]

    fs: VirtualFileSystem = Field(description="The file system this tool operates on")

    @property
    def commands(self) -> list[str]:
        return list(self.handlers)

    def definition(self) -> dict[str, Any]:
        """Return the tool descriptor handed to the model provider.

        Returns:
            Dictionary with name, description and JSON-schema input_schema.
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.arguments_model.model_json_schema(),
        }

    def run(self, arguments: Union[Mapping[str, Any], str, None] = None, **kwargs: Any) -> ToolResult:
        """Execute one tool call and return its structured result.

        Args:
            arguments: Tool-call arguments as sent by the model, as a mapping or
                a JSON object string.
            **kwargs: Additional arguments, merged over ``arguments``.

        Returns:
            ToolResult describing success or the reason for failure.
        """
        try:
            payload = self._build_payload(arguments, kwargs)
        except ValueError as exc:
            logger.warning(f"{self.name} received unreadable arguments: {exc}")
            return ToolResult.fail(f"Invalid arguments: {exc}")
        command = payload.get("command")

        try:
            if not isinstance(command, str) or command not in self.handlers:
                raise UnsupportedCommandError(command, self.commands)
            params = self.arguments_model.model_validate(payload)
            handler = getattr(self, self.handlers[command])
            message = handler(params)
        except FileSystemError as exc:
            logger.warning(f"{self.name} {command!r} failed: {exc.kind}: {exc.message}")
            return ToolResult.fail(format_error(exc))
        except ValidationError as exc:
            logger.warning(f"{self.name} {command!r} rejected malformed arguments")
            return ToolResult.fail(format_validation_error(exc))

        logger.info(f"{self.name} {command!r} succeeded on {payload.get('path')!r}")
        return ToolResult.ok(message)

    @staticmethod
    def _build_payload(arguments: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Merge call arguments into one dict.

        A JSON object string is decoded first, since some hosts pass the raw
        tool-call arguments through unparsed.

        Raises:
            ValueError: If the arguments are not a JSON object.
        """
        if isinstance(arguments, str):
            try:
                arguments = json.loads(arguments)
            except ValueError:
                raise ValueError("tool arguments are not valid JSON") from None
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ValueError("tool arguments must be an object")
        payload = dict(arguments)
        payload.update(kwargs)
        return payload

    def execute(self, arguments: Union[Mapping[str, Any], str, None] = None, **kwargs: Any) -> Any:
        """Execute one tool call and return the JSON-serializable tool result."""
        return self.render(self.run(arguments, **kwargs))

    @abstractmethod
    def render(self, result: ToolResult) -> Any:
        """Convert a ToolResult into the value returned to the agent loop.

        Must return only plain text or JSON-serializable data.
        """
        pass
