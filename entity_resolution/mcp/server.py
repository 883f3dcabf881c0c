"""
Entity Resolution MCP Server

Single-tool MCP server that compares two entities.

Tool:
    compare_entities(entity1, entity2, threshold=0.8, apiKey=None)

The tool returns the ComparisonVerdict as pretty-printed JSON text (and as
structured content). Invalid arguments are reported as JSON-RPC errors with
code INVALID_PARAMS; an unknown tool name with METHOD_NOT_FOUND. Every other
fault, including all LLM errors, is reported inside a successful result.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from entity_resolution import __version__
from entity_resolution.comparison.comparator import EntityComparator
from entity_resolution.config.settings import ResolverConfig

# Load .env file for ER_* settings
load_dotenv()

logger = logging.getLogger(__name__)

SERVER_NAME = "entity-resolution-server"
TOOL_NAME = "compare_entities"

_comparator: EntityComparator | None = None


# =============================================================================
# Tool Definition
# =============================================================================

def build_tool(default_threshold: float = 0.8) -> types.Tool:
    """Describe the compare_entities tool and its input schema."""
    return types.Tool(
        name=TOOL_NAME,
        description=(
            "Compare two entities using syntactic and optional semantic (LLM) methods."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "entity1": {
                    "type": "object",
                    "description": "First entity information",
                    "additionalProperties": True,
                },
                "entity2": {
                    "type": "object",
                    "description": "Second entity information",
                    "additionalProperties": True,
                },
                "threshold": {
                    "type": "number",
                    "description": (
                        "Syntactic similarity threshold (0-1, based on Dice) "
                        "to consider entities as matching"
                    ),
                    "minimum": 0,
                    "maximum": 1,
                    "default": default_threshold,
                },
                "apiKey": {
                    "type": "string",
                    "description": (
                        "(Optional) API key for the semantic (LLM) comparison. "
                        "Without it only syntactic scores are computed."
                    ),
                },
            },
            "required": ["entity1", "entity2"],
        },
    )


# =============================================================================
# Argument Parsing
# =============================================================================

@dataclass
class CompareArguments:
    """Validated arguments of one compare_entities call."""
    entity1: dict[str, Any]
    entity2: dict[str, Any]
    threshold: float
    api_key: str | None


def _invalid_params(message: str) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_PARAMS, message=message))


def parse_compare_arguments(
    arguments: dict[str, Any] | None,
    *,
    default_threshold: float = 0.8,
) -> CompareArguments:
    """
    Validate compare_entities arguments.

    A threshold that is not a number falls back to default_threshold. An
    apiKey that is not a non-empty string is ignored.

    Raises:
        McpError: INVALID_PARAMS if entity1 or entity2 is missing or not an object
    """
    args = arguments or {}
    entity1 = args.get("entity1")
    entity2 = args.get("entity2")

    if not isinstance(entity1, dict) or not isinstance(entity2, dict):
        raise _invalid_params(
            "Invalid entity format. Both entity1 and entity2 must be objects."
        )

    raw_threshold = args.get("threshold")
    if isinstance(raw_threshold, (int, float)) and not isinstance(raw_threshold, bool):
        threshold = float(raw_threshold)
    else:
        threshold = default_threshold

    api_key = args.get("apiKey")
    if api_key is not None and not isinstance(api_key, str):
        logger.warning("Ignoring apiKey that is not a string")
        api_key = None

    return CompareArguments(
        entity1=entity1,
        entity2=entity2,
        threshold=threshold,
        api_key=api_key or None,
    )


# =============================================================================
# Tool Execution
# =============================================================================

def get_comparator() -> EntityComparator:
    """Get or create the EntityComparator."""
    global _comparator
    if _comparator is None:
        _comparator = EntityComparator()
    return _comparator


def init_comparator(config: ResolverConfig | None = None) -> EntityComparator:
    """Initialize the EntityComparator with the given configuration."""
    global _comparator
    _comparator = EntityComparator(config)
    return _comparator


async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    """
    Execute a tool call.

    Raises:
        McpError: METHOD_NOT_FOUND for an unknown tool, INVALID_PARAMS for
                  malformed entities
    """
    if name != TOOL_NAME:
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )

    comparator = get_comparator()
    request = parse_compare_arguments(
        arguments,
        default_threshold=comparator.config.default_threshold,
    )

    verdict = await comparator.compare(
        request.entity1,
        request.entity2,
        threshold=request.threshold,
        api_key=request.api_key,
    )

    return types.CallToolResult(
        content=[types.TextContent(type="text", text=verdict.to_json())],
        structuredContent=verdict.to_wire(),
        isError=False,
    )


# =============================================================================
# MCP Server
# =============================================================================

def create_server(name: str = SERVER_NAME) -> Server:
    """Create the MCP server with the compare_entities tool."""
    server: Server = Server(name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [build_tool(get_comparator().config.default_threshold)]

    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    # Registered directly so McpError reaches the JSON-RPC layer as a protocol
    # error instead of being folded into an isError tool result.
    server.request_handlers[types.CallToolRequest] = handle_call_tool

    return server


async def run_server(config: ResolverConfig | None = None) -> None:
    """Initialize the comparator and serve over stdio until interrupted."""
    init_comparator(config)
    server = create_server()
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"Entity Resolution MCP server running on stdio (v{__version__})")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


# =============================================================================
# CLI Entry Point
# =============================================================================

def configure_logging(level: str) -> None:
    """Log to stderr; stdout carries the MCP channel."""
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


def main() -> None:
    """CLI entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="Entity Resolution MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    python -m entity_resolution.mcp --config ./resolver.toml

Claude Desktop config:
    {
        "mcpServers": {
            "entity-resolution": {
                "command": "python",
                "args": ["-m", "entity_resolution.mcp"]
            }
        }
    }
""",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to TOML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: ER_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()

    overrides: dict[str, Any] = {}
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        if args.config is not None:
            config = ResolverConfig.from_file(args.config, **overrides)
        else:
            config = ResolverConfig(**overrides)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.log_level)

    try:
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, server stopped")


if __name__ == "__main__":
    main()
