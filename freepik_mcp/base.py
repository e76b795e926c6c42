"""
MCP Tool Base Classes

Provides the common descriptor, validation, and error handling for all
Freepik tools. Each tool declares its parameters (used to advertise the
input schema) and a pydantic input model (used to validate arguments
before anything reaches the remote API).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Type

import pydantic
from mcp.types import Tool
from pydantic import BaseModel

logger = logging.getLogger(__name__)


@dataclass
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str = ""
    required: bool = False
    default: Any = None
    enum: Optional[Sequence[str]] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    properties: List["ToolParameter"] = field(default_factory=list)

    def to_schema(self) -> Dict[str, Any]:
        """JSON-Schema fragment for this parameter."""
        schema: Dict[str, Any] = {"type": self.type}

        if self.properties:
            schema["properties"] = {
                prop.name: prop.to_schema() for prop in self.properties
            }
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        if self.default is not None:
            schema["default"] = self.default
        if self.description:
            schema["description"] = self.description

        return schema


class MCPToolError(Exception):
    """Base exception for MCP tool errors."""
    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(MCPToolError):
    """Raised when tool input validation fails."""

    @property
    def field(self) -> Optional[str]:
        """Dotted path of the first offending field, if known."""
        errors = self.details.get("errors") or []
        return errors[0]["field"] if errors else None


class ExecutionError(MCPToolError):
    """Raised when tool execution fails."""
    pass


class ConfigurationError(MCPToolError):
    """Raised when required configuration is missing at startup."""
    pass


def _format_location(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


class MCPTool(ABC):
    """
    Abstract base class for MCP tools.

    All tools must inherit from this class and implement:
    - name: Tool identifier
    - description: What the tool does
    - parameters: List of ToolParameter definitions
    - input_model: pydantic model the arguments are validated against
    - execute(): The actual tool logic
    """

    #: Position in the advertised tool list.
    order: int = 0

    input_model: Type[BaseModel]

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    def parameters(self) -> List[ToolParameter]:
        """List of parameters the tool accepts."""
        return []

    def validate(self, /, **kwargs) -> Dict[str, Any]:
        """
        Validate input parameters against the tool's input model.

        Returns the normalized parameters with unset fields dropped, so
        absent values fall back to the remote defaults.
        Raises ValidationError if validation fails.
        """
        try:
            model = self.input_model.model_validate(kwargs)
        except pydantic.ValidationError as e:
            errors = [
                {"field": _format_location(err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            summary = "; ".join(f"{err['field']}: {err['message']}" for err in errors)
            raise ValidationError(
                f"Invalid arguments for {self.name}: {summary}",
                tool_name=self.name,
                details={"errors": errors}
            ) from e

        return model.model_dump(exclude_none=True)

    @abstractmethod
    async def execute(self, **kwargs) -> Any:
        """
        Execute the tool with given parameters.
        This method should contain the actual tool logic.
        """
        pass

    async def run(self, /, **kwargs) -> Dict[str, Any]:
        """
        Public entry point: validate and execute.
        Returns standardized response format.
        """
        try:
            validated = self.validate(**kwargs)
            result = await self.execute(**validated)
            return {
                "success": True,
                "tool": self.name,
                "result": result
            }
        except ValidationError as e:
            logger.error(f"Validation error in {self.name}: {e.message}")
            return {
                "success": False,
                "tool": self.name,
                "error": e.message,
                "error_type": "validation"
            }
        except ExecutionError as e:
            logger.error(f"Execution error in {self.name}: {e.message}")
            return {
                "success": False,
                "tool": self.name,
                "error": e.message,
                "error_type": "execution"
            }
        except Exception as e:
            logger.exception(f"Unexpected error in {self.name}")
            return {
                "success": False,
                "tool": self.name,
                "error": str(e),
                "error_type": "unexpected"
            }

    def to_input_schema(self) -> Dict[str, Any]:
        """JSON-Schema object describing the tool's arguments."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {
                param.name: param.to_schema() for param in self.parameters
            }
        }

        required = [param.name for param in self.parameters if param.required]
        if required:
            schema["required"] = required

        return schema

    def to_mcp_tool(self) -> Tool:
        """Convert tool to the descriptor returned by tools/list."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.to_input_schema()
        )
