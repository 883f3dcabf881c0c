"""
Entity Resolution MCP Server

Exposes entity comparison via a single MCP tool (compare_entities).

Tool:
    - compare_entities: Score two entities for likely real-world equivalence

Arguments:
    entity1    JSON object (required)
    entity2    JSON object (required)
    threshold  Dice threshold in [0, 1] (default 0.8)
    apiKey     LLM API key; enables per-field semantic checks and a
               holistic analysis (optional)

Usage:
    # Run the MCP server
    python -m entity_resolution.mcp

    # Or in Claude Desktop config:
    {
        "mcpServers": {
            "entity-resolution": {
                "command": "entity-resolution-mcp"
            }
        }
    }
"""

from entity_resolution.mcp.server import create_server, run_server

__all__ = ["create_server", "run_server"]
