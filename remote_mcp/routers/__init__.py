"""HTTP routers outside the MCP endpoint."""
