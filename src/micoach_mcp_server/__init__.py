"""MiCoach MCP Server: rule-based coaching plans and progress tracking."""
