# =============================================================================
# cms_core/errors.py  -  Error taxonomy
# =============================================================================
#
#   ValidationError   raised before any network access (unknown operation,
#                     missing identifying parameter, missing credential)
#   TransportError    the call could not complete (DNS, refused connection,
#                     unexpected failure while fetching); message carries the
#                     adapter label, e.g. "CMS Content Types API call failed: ..."
#
# A backend that answers with a non-2xx status is NOT an exception.  That
# outcome comes back as a ResponseEnvelope with success=False.
# =============================================================================


class CmsApiError(Exception):
    """Base class for every error raised by the CMS adapters."""


class ValidationError(CmsApiError):
    """Pre-flight failure; no HTTP request was attempted."""


class TransportError(CmsApiError):
    """The HTTP call could not complete."""
