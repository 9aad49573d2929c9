# =============================================================================
# cms_agent/__init__.py
# =============================================================================
# This package contains the Google ADK content assistant.
#
# ARCHITECTURAL ROLE:
#   The assistant answers questions about an Optimizely CMS 12 instance
#   ("what content types exist?", "list the children of the start page") by
#   calling the MCP tools in cms_tools/.  It owns no request logic: the LLM
#   decides WHICH tool and operation to call, cms_core/ does the work.
# =============================================================================
