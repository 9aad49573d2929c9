# =============================================================================
# cms_tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   cms_tools/ is the translation layer between MCP clients and cms_core/.
#   Each tool:
#     1. Takes typed parameters from the MCP client
#     2. Calls one cms_core adapter
#     3. Unwraps the Result: envelope dict on success, raised error otherwise
#     4. Logs the call to stderr
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or decode bodies (that's in cms_core/)
#   - They do NOT know about Google ADK
# =============================================================================
