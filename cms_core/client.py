# =============================================================================
# cms_core/client.py  -  Request Executor, Response Normalizer, Error Classifier
# =============================================================================
#
# HOW ONE CALL FLOWS THROUGH THIS MODULE:
#   1. build_request_context()  assembles URL + headers (immutable)
#   2. execute_request()        performs exactly ONE GET with httpx
#   3. normalize_response()     decodes the body and builds the envelope
#   4. run_request()            wraps 2-3 and classifies the outcome as
#                               Ok(envelope) or Err("transport", ...)
#
# WHAT THE EXECUTOR DOES NOT DO:
#   - no retries or backoff
#   - no client-side timeout (timeout=None); the caller's environment owns
#     timeout policy
#   - no custom redirect handling beyond following them, like fetch() does
#
# TESTING:
#   Every entry point accepts an optional httpx transport.  Tests pass an
#   httpx.MockTransport so nothing ever leaves the process.
# =============================================================================

import logging
from types import MappingProxyType

import httpx

from cms_core.models import Err, Ok, RequestContext, ResponseEnvelope, Result
from cms_core.urls import encode_query, normalize_base_url

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


# =============================================================================
# Request construction
# =============================================================================
def build_headers(auth_token: str | None = None, language: str | None = None) -> dict[str, str]:
    """Assemble the request headers.

    Accept and Content-Type are always JSON, even though a GET carries no
    body, to tell the backend which representation we expect.
    """
    headers = {
        "Accept": JSON_MEDIA_TYPE,
        "Content-Type": JSON_MEDIA_TYPE,
    }
    if auth_token:
        headers["Authorization"] = f"Bearer {auth_token}"
    if language:
        headers["Accept-Language"] = language
    return headers


def build_request_context(
    cms_url: str,
    path: str,
    query_pairs=(),
    auth_token: str | None = None,
    language: str | None = None,
) -> RequestContext:
    return RequestContext(
        base_url=normalize_base_url(cms_url),
        path=path,
        query_params=encode_query(query_pairs),
        headers=MappingProxyType(build_headers(auth_token, language)),
    )


# =============================================================================
# Request Executor
# =============================================================================
async def execute_request(
    context: RequestContext,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Perform the GET and return the raw response.

    Transport failures (DNS, refused connection, TLS, ...) propagate as httpx
    exceptions; run_request() is responsible for wrapping them.
    """
    logger.debug("%s %s", context.method, context.url)
    async with httpx.AsyncClient(
        transport=transport,
        timeout=None,
        follow_redirects=True,
    ) as client:
        response = await client.request(context.method, context.url, headers=dict(context.headers))
    logger.debug("%s %s -> %s", context.method, context.url, response.status_code)
    return response


# =============================================================================
# Response Normalizer
# =============================================================================
def decode_body(response: httpx.Response):
    """Decode the body as JSON when declared, falling back to text.

    Never raises: a body that claims to be JSON but isn't comes back as the
    raw string.
    """
    content_type = response.headers.get("content-type", "")
    if JSON_MEDIA_TYPE in content_type:
        try:
            return response.json()
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            return response.text
    return response.text


def collect_headers(response: httpx.Response) -> dict[str, str]:
    """Flatten response headers; a repeated header keeps its last value."""
    headers: dict[str, str] = {}
    for name, value in response.headers.multi_items():
        headers[name] = value
    return headers


def is_success(status: int) -> bool:
    return 200 <= status <= 299


def normalize_response(response: httpx.Response, url: str) -> ResponseEnvelope:
    """Collapse a raw response into a ResponseEnvelope.

    A non-2xx status is still a normal return value here.  Header maps are
    only attached to successful envelopes.
    """
    body = decode_body(response)
    status = response.status_code
    status_text = response.reason_phrase

    if not is_success(status):
        return ResponseEnvelope(
            success=False,
            status=status,
            status_text=status_text,
            url=url,
            error=body,
        )

    return ResponseEnvelope(
        success=True,
        status=status,
        status_text=status_text,
        url=url,
        data=body,
        headers=collect_headers(response),
    )


# =============================================================================
# Error Classifier
# =============================================================================
async def run_request(
    label: str,
    context: RequestContext,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result:
    """Execute and normalize one call, classifying the outcome.

    Args:
        label: Adapter name used to prefix transport errors,
            e.g. "CMS Content Delivery".
        context: The resolved request.
        transport: Optional httpx transport (tests).

    Returns:
        Ok(envelope) whenever the backend answered, whatever the status.
        Err("transport", "<label> API call failed: <reason>") otherwise.
    """
    try:
        response = await execute_request(context, transport)
        envelope = normalize_response(response, context.url)
    except Exception as exc:
        reason = str(exc) or type(exc).__name__
        logger.warning("%s call to %s failed: %s", label, context.url, reason)
        return Err("transport", f"{label} API call failed: {reason}", exc)
    return Ok(envelope)
