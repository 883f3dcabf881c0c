from entity_resolution.mcp.server import main

main()
