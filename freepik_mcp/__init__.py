"""
Freepik MCP Server

Exposes the Freepik stock and Mystic AI APIs as MCP tools.
All tools are auto-discovered via registry.py
"""

from .base import MCPTool, ToolParameter
from .client import FreepikClient
from .dispatcher import ToolDispatcher
from .registry import ToolRegistry

__all__ = ["FreepikClient", "MCPTool", "ToolDispatcher", "ToolParameter", "ToolRegistry"]
