#!/usr/bin/env python3
"""
Freepik MCP Server Entrypoint

Serves the Freepik tools over stdio. stdout carries the protocol, so all
logging goes to stderr.
"""

import asyncio
import logging
import os
import signal
import sys
from typing import List

import anyio
import anyio.abc
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolRequest, ServerResult, Tool

from .base import ConfigurationError
from .client import FreepikClient
from .config import Settings, load_settings
from .dispatcher import ToolDispatcher
from .registry import ToolRegistry

SERVER_NAME = "freepik-mcp"
SERVER_VERSION = "0.1.0"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Build the MCP server with tools/list and tools/call bound to the dispatcher."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return dispatcher.list_tools()

    # Registered directly so an unknown tool surfaces as a JSON-RPC
    # METHOD_NOT_FOUND error instead of an error-flagged tool result.
    async def call_tool(request: CallToolRequest) -> ServerResult:
        result = await dispatcher.call_tool(request.params.name, request.params.arguments)
        return ServerResult(result)

    server.request_handlers[CallToolRequest] = call_tool

    return server


async def exit_on_signal(
    client: FreepikClient,
    *,
    task_status: anyio.abc.TaskStatus = anyio.TASK_STATUS_IGNORED
) -> None:
    """
    Close the client and exit with status 0 on SIGINT or SIGTERM.

    The stdio reader thread blocks on stdin and cannot be cancelled, so the
    process exits directly instead of unwinding the server.
    """
    with anyio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as signals:
        task_status.started()
        async for signum in signals:
            logger.info(f"Received {signal.Signals(signum).name}, shutting down")
            await client.aclose()
            logging.shutdown()
            os._exit(0)


async def serve(settings: Settings) -> None:
    """Run the server on stdio until the input stream closes or a signal arrives."""
    async with FreepikClient(settings.api_key, base_url=settings.base_url) as client:
        dispatcher = ToolDispatcher(ToolRegistry(client))
        server = create_server(dispatcher)

        async with anyio.create_task_group() as tg:
            await tg.start(exit_on_signal, client)

            async with stdio_server() as (read_stream, write_stream):
                logger.info("Freepik MCP server running on stdio")
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options()
                )

            tg.cancel_scope.cancel()


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT, stream=sys.stderr)
        logger.error(e.message)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")

    sys.exit(0)


if __name__ == "__main__":
    main()
