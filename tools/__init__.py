# =============================================================================
# tools/__init__.py
# =============================================================================
# The serving boundary.
#
#   registry.py    tool table, argument validation, dispatch to core/
#   mcp_server.py  FastMCP server the ADK agent connects to over stdio
#   http_app.py    Starlette app for remote clients
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT contain domain logic (that's in core/)
#   - They do NOT know about Google ADK
# =============================================================================
