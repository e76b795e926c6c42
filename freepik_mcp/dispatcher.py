"""
Tool Dispatcher

Maps tools/list and tools/call requests onto the registry. Tool failures
(validation or remote) come back as error-flagged results; only an unknown
tool name is raised as a protocol error.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, CallToolResult, ErrorData, TextContent, Tool

from .registry import ToolRegistry

logger = logging.getLogger(__name__)


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=text)],
        isError=is_error
    )


class ToolDispatcher:
    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> List[Tool]:
        return [tool.to_mcp_tool() for tool in self.registry.tools()]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> CallToolResult:
        """
        Validate and run one tool.

        Raises McpError(METHOD_NOT_FOUND) for names that are not registered.
        """
        tool = self.registry.get(name)
        if tool is None:
            logger.error(f"[Tool Error] Unknown tool: {name}")
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            return text_result(
                f"Invalid arguments for {name}: expected an object",
                is_error=True
            )

        outcome = await tool.run(**arguments)
        if not outcome["success"]:
            return text_result(outcome["error"], is_error=True)

        return text_result(json.dumps(outcome["result"], indent=2))
