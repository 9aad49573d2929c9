# =============================================================================
# cms_tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Optimizely CMS 12 read-only adapters as MCP tools:
#     - paas_cms_content_delivery   sites, content, children
#     - cms_content_manifest        full content-definition export
#     - paas_cms_content_types      content type listing / lookup
#
# RESULT CONTRACT:
#   Every tool returns the envelope dict
#       {success, status, statusText, data | error, url, headers?}
#   A backend that answers with 4xx/5xx is NOT an error here: the envelope
#   comes back with success=False so the agent can read the backend's reason.
#   Bad parameters and unreachable hosts ARE errors: they are raised, and
#   FastMCP reports them to the client as tool errors.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m cms_tools.mcp_server
#     b) As a stdio subprocess of the content assistant (cms_agent/)
# =============================================================================

import json
import logging
import os
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from cms_core.adapters import (
    fetch_content_delivery,
    fetch_content_manifest,
    fetch_content_types,
)
from cms_core.models import Err

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT carries the MCP protocol, so every log line goes to STDERR.
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

# Parameters whose values must never reach the log.
_SECRET_PARAMS = {"auth_token"}


def _mask(name: str, value):
    if name in _SECRET_PARAMS and value:
        return "***"
    return value


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(
        f"{k}={_mask(k, v)!r}" for k, v in params.items() if v is not None
    )
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the envelope as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, separators=(',', ':'), default=str)}{_RESET}"
    )
    return result


def _finish(tool_name: str, result) -> dict:
    """Unwrap an adapter Result into the envelope dict (or raise)."""
    if isinstance(result, Err):
        _log_status(f"{result.kind} error: {result.message}")
    envelope = result.unwrap()
    _log_status(f"{envelope.status} {envelope.status_text} from {envelope.url}")
    return _log_response(tool_name, envelope.to_dict())


mcp = FastMCP("optimizely-cms")


# =============================================================================
# TOOL 1: paas_cms_content_delivery
# =============================================================================
# The only multi-operation tool.  `operation` selects the endpoint shape;
# the identifiers it needs are validated before any request is sent.
# =============================================================================
@mcp.tool()
async def paas_cms_content_delivery(
    cms_url: str,
    auth_token: str,
    operation: str,
    content_reference: str | None = None,
    content_guid: str | None = None,
    site_id: str | None = None,
    content_url: str | None = None,
    language: str | None = None,
    expand: str | None = None,
    select: str | None = None,
    top: int | None = None,
) -> dict:
    """Retrieve content and site information from the Optimizely CMS 12 Content Delivery API.

    Supported operations:
      - get-all-sites: list all sites
      - get-site-by-id: get one site (needs site_id)
      - get-content-by-reference: get content by reference ID (needs content_reference)
      - get-content-by-guid: get content by GUID (needs content_guid)
      - get-content-by-url: get content by absolute URL (needs content_url)
      - get-children: list child pages/content (needs content_reference or content_guid)

    Use this to retrieve published content, site structures and page hierarchies.

    Args:
        cms_url: Base URL of the CMS 12 instance (e.g., "https://test9.optimizely.cc").
        auth_token: Bearer token for the Content Delivery API.
        operation: One of the operation names listed above.
        content_reference: Content reference ID (e.g., "5" or "5_123").
        content_guid: Content GUID.
        site_id: Site GUID, for get-site-by-id.
        content_url: Absolute URL of the content, for get-content-by-url.
        language: Language code (e.g., "en", "sv"), sent as Accept-Language.
        expand: Comma-separated properties to expand (e.g., "contentArea,blocks"); "*" expands all.
        select: Comma-separated properties to return (e.g., "name,url,contentType").
        top: Maximum number of children to return (get-children only, max 100).

    Returns:
        The response envelope: success, status, statusText, url, and either
        data + headers (2xx) or error (any other status).
    """
    _log_request(
        "paas_cms_content_delivery",
        cms_url=cms_url, auth_token=auth_token, operation=operation,
        content_reference=content_reference, content_guid=content_guid,
        site_id=site_id, content_url=content_url, language=language,
        expand=expand, select=select, top=top,
    )
    result = await fetch_content_delivery(
        cms_url,
        auth_token,
        operation,
        content_reference=content_reference,
        content_guid=content_guid,
        site_id=site_id,
        content_url=content_url,
        language=language,
        expand=expand,
        select=select,
        top=top,
    )
    return _finish("paas_cms_content_delivery", result)


# =============================================================================
# TOOL 2: cms_content_manifest
# =============================================================================
@mcp.tool()
async def cms_content_manifest(
    cms_url: str,
    auth_token: str | None = None,
    include_system_types: bool | None = None,
) -> dict:
    """Export a manifest of all content definitions from Optimizely CMS 12.

    The manifest includes content types, property groups and editor
    definitions.  Use it for environment comparison, backup/restore
    workflows, documentation generation or migration planning.

    Args:
        cms_url: Base URL of the CMS 12 instance.
        auth_token: Bearer token (optional if the API allows anonymous access).
        include_system_types: Whether system types are included in the export
            (the backend defaults to false).

    Returns:
        The response envelope; on success `data` holds the manifest.
    """
    _log_request(
        "cms_content_manifest",
        cms_url=cms_url, auth_token=auth_token,
        include_system_types=include_system_types,
    )
    result = await fetch_content_manifest(cms_url, auth_token, include_system_types)
    return _finish("cms_content_manifest", result)


# =============================================================================
# TOOL 3: paas_cms_content_types
# =============================================================================
@mcp.tool()
async def paas_cms_content_types(
    cms_url: str,
    auth_token: str | None = None,
    content_type_id: str | None = None,
) -> dict:
    """Retrieve content type definitions from Optimizely CMS 12.

    Lists all content types, or fetches one when content_type_id is given.
    Use this to understand the structure and properties of content types.

    Args:
        cms_url: Base URL of the CMS 12 instance.
        auth_token: Bearer token (optional if the API allows anonymous access).
        content_type_id: Content type ID; omit to list every content type.

    Returns:
        The response envelope; on success `data` holds the definition(s).
    """
    _log_request(
        "paas_cms_content_types",
        cms_url=cms_url, auth_token=auth_token, content_type_id=content_type_id,
    )
    result = await fetch_content_types(cms_url, auth_token, content_type_id)
    return _finish("paas_cms_content_types", result)


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    mcp.run()
