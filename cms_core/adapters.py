# =============================================================================
# cms_core/adapters.py  -  The three CMS adapters
# =============================================================================
#
#   fetch_content_delivery()  multi-operation adapter over the Content
#                             Delivery API (sites, content, children)
#   fetch_content_manifest()  content manifest export
#   fetch_content_types()     content type listing / lookup
#
# Each adapter returns a Result instead of raising, so the pre-flight vs
# transport vs backend-rejection split is visible in the return type:
#
#   Err("validation", ...)   bad parameters, no request was made
#   Err("transport", ...)    the request could not complete
#   Ok(envelope)             the backend answered (check envelope.success)
#
# Call .unwrap() to turn a Result into an envelope or a raised exception.
# =============================================================================

import httpx

from cms_core.client import build_request_context, run_request
from cms_core.errors import ValidationError
from cms_core.models import Err, Result
from cms_core.operations import (
    CONTENT_MANIFEST_OPERATION,
    CONTENT_TYPES_OPERATION,
    resolve,
    resolve_operation,
)

CONTENT_DELIVERY_LABEL = "CMS Content Delivery"
CONTENT_MANIFEST_LABEL = "CMS Content Manifest"
CONTENT_TYPES_LABEL = "CMS Content Types"


async def fetch_content_delivery(
    cms_url: str,
    auth_token: str | None,
    operation: str,
    *,
    content_reference: str | None = None,
    content_guid: str | None = None,
    site_id: str | None = None,
    content_url: str | None = None,
    language: str | None = None,
    expand: str | None = None,
    select: str | None = None,
    top: int | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result:
    """Run one Content Delivery API operation.

    The Content Delivery API always requires a bearer token, so a missing
    token is a pre-flight failure like a missing identifier.
    """
    params = {
        "content_reference": content_reference,
        "content_guid": content_guid,
        "site_id": site_id,
        "content_url": content_url,
        "expand": expand,
        "select": select,
        "top": top,
    }
    try:
        path, query = resolve_operation(operation, params)
        if not auth_token:
            raise ValidationError(
                f"Missing required parameter for operation {operation}: auth_token"
            )
    except ValidationError as exc:
        return Err("validation", str(exc))

    context = build_request_context(cms_url, path, query, auth_token, language)
    return await run_request(CONTENT_DELIVERY_LABEL, context, transport)


async def fetch_content_manifest(
    cms_url: str,
    auth_token: str | None = None,
    include_system_types: bool | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result:
    """Export the content manifest.  Anonymous access is allowed."""
    path, query = resolve(
        "export-content-manifest",
        CONTENT_MANIFEST_OPERATION,
        {"include_system_types": include_system_types},
    )
    context = build_request_context(cms_url, path, query, auth_token)
    return await run_request(CONTENT_MANIFEST_LABEL, context, transport)


async def fetch_content_types(
    cms_url: str,
    auth_token: str | None = None,
    content_type_id: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result:
    """List all content types, or fetch one when content_type_id is given."""
    path, query = resolve(
        "content-types",
        CONTENT_TYPES_OPERATION,
        {"content_type_id": content_type_id},
    )
    context = build_request_context(cms_url, path, query, auth_token)
    return await run_request(CONTENT_TYPES_LABEL, context, transport)
