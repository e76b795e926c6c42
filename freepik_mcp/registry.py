"""
MCP Tool Registry

Single Source of Truth (SSOT) for tool discovery and collection.
Discovers every tool in freepik_mcp/tools/ and binds it to the shared
FreepikClient. The set of tools is fixed once the registry is built.
"""

import importlib
import inspect
import logging
import pkgutil
from typing import Dict, List, Optional, Type

from . import tools as tools_package
from .base import MCPTool
from .client import FreepikClient

logger = logging.getLogger(__name__)


def discover_tool_classes() -> List[Type[MCPTool]]:
    """
    Import all modules in freepik_mcp/tools/ and collect the concrete
    MCPTool subclasses, sorted by their `order`.
    """
    classes: Dict[str, Type[MCPTool]] = {}

    for _, module_name, _ in pkgutil.iter_modules(tools_package.__path__):
        if module_name.startswith("_"):
            continue

        full_module_name = f"{tools_package.__name__}.{module_name}"
        module = importlib.import_module(full_module_name)
        logger.debug(f"Loaded tool module: {full_module_name}")

        for name, obj in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(obj, MCPTool)
                and obj.__module__ == full_module_name
                and not inspect.isabstract(obj)
            ):
                classes[f"{obj.__module__}.{name}"] = obj

    return sorted(classes.values(), key=lambda cls: cls.order)


class ToolRegistry:
    """Tools keyed by name, each bound to the same client."""

    def __init__(self, client: FreepikClient, tool_classes: Optional[List[Type[MCPTool]]] = None):
        self.client = client
        self._tools: Dict[str, MCPTool] = {}

        for cls in tool_classes if tool_classes is not None else discover_tool_classes():
            tool = cls(client)
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool
            logger.info(f"Registered tool: {tool.name} ({cls.__module__})")

        logger.info(f"Tool discovery complete. Total tools: {len(self._tools)}")

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def get(self, name: str) -> Optional[MCPTool]:
        """
        Get a specific tool by name.
        Returns None if tool not found.
        """
        return self._tools.get(name)

    def names(self) -> List[str]:
        """Get list of all registered tool names."""
        return list(self._tools.keys())

    def tools(self) -> List[MCPTool]:
        return list(self._tools.values())
