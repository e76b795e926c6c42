"""Shared base for tools backed by the Freepik API client."""

import httpx

from ..base import ExecutionError, MCPTool
from ..client import FreepikClient


class FreepikTool(MCPTool):
    """MCPTool holding a reference to the shared FreepikClient."""

    def __init__(self, client: FreepikClient):
        self.client = client

    def remote_error(self, error: httpx.HTTPError) -> ExecutionError:
        """Wrap a failed Freepik request, keeping the transport's message."""
        details = {}
        if isinstance(error, httpx.HTTPStatusError):
            details["status_code"] = error.response.status_code

        return ExecutionError(
            f"Freepik API request failed: {error}",
            tool_name=self.name,
            details=details
        )
