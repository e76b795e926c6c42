"""
Freepik MCP Tools Package

All tools in this directory are auto-discovered by registry.py
Each tool inherits from FreepikTool and receives the shared FreepikClient.
"""

# Tools are auto-discovered, no explicit imports needed
