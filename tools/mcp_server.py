# =============================================================================
# tools/mcp_server.py  -  MCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the MCP tools an agent can call to ask Clojars about versions.
#   Each tool is a thin wrapper around a core/ lookup: it decodes the
#   arguments, calls core/, and formats the result as JSON text.
#
# HOW IT WORKS (the flow):
#   1. The host sends tools/call with a tool name and an arguments object
#   2. call_tool() looks the name up (unknown name -> MethodNotFound)
#   3. The tool decodes its arguments (bad shape -> InvalidParams)
#   4. core/clojars.py fetches maven-metadata.xml and extracts versions
#   5. The result dataclass is returned as indented JSON in one text item
#
# TOOLS:
#   get_clojars_latest_version    -> {dependency, latest_version}
#   check_clojars_version_exists  -> {dependency, version, exists}
#   get_clojars_version_history   -> {dependency, recent_versions, total_versions}
#   All tools are read-only and keep no state between calls.
#
# RUNNING THIS SERVER:
#   main.py is the entry point (`python main.py` or the installed
#   `clojars-deps-server` script).  It attaches serve() to stdio.
# =============================================================================

import json
import logging
import os
import signal
import sys
from dataclasses import asdict
from typing import Any, Awaitable, Callable

import anyio
import anyio.abc
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from core.clojars import DEFAULT_HISTORY_LIMIT, ClojarsClient
from core.config import Settings
from core.exceptions import RegistryLookupError
from tools.arguments import (
    DependencyArgs,
    VersionCheckArgs,
    VersionHistoryArgs,
    parse_arguments,
)

SERVER_NAME = "clojars-deps-server"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  STDOUT is the MCP transport; anything else written
# there corrupts the JSON-RPC stream.
#
#   CYAN   incoming tool calls with their arguments
#   YELLOW intermediate status (metadata fetched, versions found)
#   GREEN  response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def configure_logging(level: str = "INFO") -> None:
    """Send all log records to stderr in the server's format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: Any) -> None:
    logger.info(f"{_CYAN}{tool_name} called with: {arguments!r}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


# =============================================================================
# Tool catalog (what tools/list returns)
# =============================================================================
# The descriptions are what the calling agent reads to decide WHEN to use
# a tool, so they say what comes back and in which format.
# =============================================================================
_DEPENDENCY_PROPERTY = {
    "type": "string",
    "description": 'Clojars dependency name in format "group/artifact" (e.g. "metosin/reitit")',
}

TOOLS: list[types.Tool] = [
    types.Tool(
        name="get_clojars_latest_version",
        description=(
            "Get the latest version of a Clojars dependency (Maven artifact). "
            "Returns the release version, or the latest version when no "
            "release is recorded."
        ),
        inputSchema={
            "type": "object",
            "properties": {"dependency": _DEPENDENCY_PROPERTY},
            "required": ["dependency"],
        },
    ),
    types.Tool(
        name="check_clojars_version_exists",
        description="Check whether a specific version of a Clojars dependency exists",
        inputSchema={
            "type": "object",
            "properties": {
                "dependency": _DEPENDENCY_PROPERTY,
                "version": {
                    "type": "string",
                    "description": 'Version to check (e.g. "0.7.2")',
                },
            },
            "required": ["dependency", "version"],
        },
    ),
    types.Tool(
        name="get_clojars_version_history",
        description=(
            "List the most recent published versions of a Clojars dependency, "
            "newest first, together with the total number of versions"
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "dependency": _DEPENDENCY_PROPERTY,
                "limit": {
                    "type": "integer",
                    "minimum": 1,
                    "description": f"Maximum number of versions to return (default {DEFAULT_HISTORY_LIMIT})",
                },
            },
            "required": ["dependency"],
        },
    ),
]


# =============================================================================
# Tool implementations
# =============================================================================
# Each takes the open ClojarsClient and the raw arguments, and returns the
# result as a plain dict.  RegistryLookupError is left to call_tool().
# =============================================================================
ToolHandler = Callable[[ClojarsClient, Any], Awaitable[dict]]


async def get_clojars_latest_version(client: ClojarsClient, arguments: Any) -> dict:
    args = parse_arguments(DependencyArgs, arguments)
    ref = args.ref
    _log_status(f"Fetching {ref.metadata_path}")
    result = await client.get_latest_version(ref)
    return asdict(result)


async def check_clojars_version_exists(client: ClojarsClient, arguments: Any) -> dict:
    args = parse_arguments(VersionCheckArgs, arguments)
    ref = args.ref
    _log_status(f"Fetching {ref.metadata_path}")
    result = await client.check_version_exists(ref, args.version)
    _log_status(f"{args.version} {'found' if result.exists else 'not found'}")
    return asdict(result)


async def get_clojars_version_history(client: ClojarsClient, arguments: Any) -> dict:
    args = parse_arguments(VersionHistoryArgs, arguments)
    ref = args.ref
    limit = args.limit if args.limit is not None else DEFAULT_HISTORY_LIMIT
    _log_status(f"Fetching {ref.metadata_path}")
    result = await client.get_version_history(ref, limit=limit)
    _log_status(f"Found {result.total_versions} versions")
    return asdict(result)


_HANDLERS: dict[str, ToolHandler] = {
    "get_clojars_latest_version": get_clojars_latest_version,
    "check_clojars_version_exists": check_clojars_version_exists,
    "get_clojars_version_history": get_clojars_version_history,
}


# =============================================================================
# Dispatch
# =============================================================================
async def call_tool(client: ClojarsClient, name: str, arguments: Any) -> types.CallToolResult:
    """Run one tool call.

    Returns:
        A CallToolResult holding the JSON result, or, when the registry
        lookup failed, the failure message with isError set.

    Raises:
        McpError: METHOD_NOT_FOUND for an unknown tool name (checked before
            the arguments are looked at), INVALID_PARAMS for bad arguments.
        MetadataError: when the metadata has no release/latest marker.
    """
    handler = _HANDLERS.get(name)
    if handler is None:
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )

    _log_request(name, arguments)
    try:
        result = await handler(client, arguments)
    except RegistryLookupError as e:
        logger.warning(f"  ← {name} failed: {e}")
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=str(e))],
            isError=True,
        )

    _log_response(name, result)
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=json.dumps(result, indent=2))],
    )


def create_server(client: ClojarsClient) -> Server:
    """Build the MCP server and register the tools/list and tools/call handlers."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return TOOLS

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await call_tool(client, req.params.name, req.params.arguments)
        except McpError:
            raise
        except Exception:
            logger.exception(f"[MCP Error] {req.params.name} raised")
            raise
        return types.ServerResult(result)

    # Registered directly rather than through server.call_tool(): that
    # decorator turns every exception into an isError result, and protocol
    # errors must reach the host as JSON-RPC errors.
    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


# =============================================================================
# Serving
# =============================================================================
async def _exit_on_sigint(
    client: ClojarsClient,
    *,
    task_status: anyio.abc.TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
) -> None:
    """Close the HTTP client and end the process with status 0 on SIGINT.

    The SDK reads stdin in a worker thread that cannot be cancelled, so
    unwinding the stdio transport would wait for the host's next line.
    The process is ended directly once the client is closed.
    """
    with anyio.open_signal_receiver(signal.SIGINT) as signals:
        task_status.started()
        async for _ in signals:
            logger.info("SIGINT received, closing server")
            await client.aclose()
            logger.info("Clojars MCP server closed")
            logging.shutdown()
            os._exit(0)


async def serve(settings: Settings) -> None:
    """Serve tool calls over stdio until stdin closes or SIGINT arrives.

    When stdin closes, the stdio transport is closed first, then the HTTP
    client.  SIGINT is handled by _exit_on_sigint().
    """
    async with ClojarsClient(settings) as client:
        server = create_server(client)
        async with anyio.create_task_group() as tg:
            await tg.start(_exit_on_sigint, client)
            async with stdio_server() as (read_stream, write_stream):
                logger.info(f"Clojars MCP server running on stdio (registry: {settings.repo_url})")
                await server.run(
                    read_stream,
                    write_stream,
                    server.create_initialization_options(),
                )
            tg.cancel_scope.cancel()
    logger.info("Clojars MCP server closed")
