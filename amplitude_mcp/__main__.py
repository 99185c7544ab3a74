from amplitude_mcp.main import run

run()
