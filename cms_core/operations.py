# =============================================================================
# cms_core/operations.py  -  Operation Registry & Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps an operation identifier ("get-children") plus a parameter bag to a
#   concrete API path and the ordered list of query pairs for that call.
#
# THE TABLE IS STATIC:
#   Every registry below is a MappingProxyType / tuple built at import time.
#   Nothing mutates it, so concurrent tool calls can share it freely.
#
# VARIANTS:
#   An operation id owns a tuple of OperationSpec variants.  The dispatcher
#   walks them in order and picks the first whose required parameters are all
#   present.  That is how "get-children" routes by content reference when one
#   is given and falls back to the content GUID otherwise.
#
# PRESENCE:
#   None, "" and 0 count as "not supplied" (so top=0 means "no limit").
#   Booleans are always supplied, so include_system_types=False still lands
#   in the query string as includeSystemTypes=false.
# =============================================================================

from types import MappingProxyType
from typing import Any, Mapping

from cms_core.errors import ValidationError
from cms_core.models import OperationSpec

API_PREFIX = "/api/episerver/v3.0"


# -----------------------------------------------------------------------------
# Content Delivery API (the multi-operation adapter)
# -----------------------------------------------------------------------------
_TOP = (("top", "top"),)

CONTENT_DELIVERY_OPERATIONS: Mapping[str, tuple[OperationSpec, ...]] = MappingProxyType({
    "get-all-sites": (
        OperationSpec("get-all-sites", "/site"),
    ),
    "get-site-by-id": (
        OperationSpec("get-site-by-id", "/site/{site_id}", frozenset({"site_id"})),
    ),
    "get-content-by-reference": (
        OperationSpec(
            "get-content-by-reference",
            "/content/{content_reference}",
            frozenset({"content_reference"}),
        ),
    ),
    "get-content-by-guid": (
        OperationSpec(
            "get-content-by-guid",
            "/content/{content_guid}",
            frozenset({"content_guid"}),
        ),
    ),
    "get-content-by-url": (
        OperationSpec(
            "get-content-by-url",
            "/content",
            frozenset({"content_url"}),
            (("content_url", "contentUrl"),),
        ),
    ),
    "get-children": (
        OperationSpec(
            "get-children",
            "/content/{content_reference}/children",
            frozenset({"content_reference"}),
            _TOP,
        ),
        OperationSpec(
            "get-children",
            "/content/{content_guid}/children",
            frozenset({"content_guid"}),
            _TOP,
        ),
    ),
})

# Appended after the operation's own query pairs, in this order.
COMMON_QUERY_PARAMS: tuple[tuple[str, str], ...] = (
    ("expand", "expand"),
    ("select", "select"),
)


# -----------------------------------------------------------------------------
# Single-purpose adapters (one implicit operation each)
# -----------------------------------------------------------------------------
CONTENT_MANIFEST_OPERATION: tuple[OperationSpec, ...] = (
    OperationSpec(
        "export-content-manifest",
        "/contentmanifest",
        query_params=(("include_system_types", "includeSystemTypes"),),
    ),
)

CONTENT_TYPES_OPERATION: tuple[OperationSpec, ...] = (
    OperationSpec(
        "get-content-type",
        "/contenttypes/{content_type_id}",
        frozenset({"content_type_id"}),
    ),
    OperationSpec("list-content-types", "/contenttypes"),
)


def is_present(value: Any) -> bool:
    """Return True if a parameter value counts as supplied."""
    if isinstance(value, bool):
        return True
    return bool(value)


def select_variant(
    operation: str,
    variants: tuple[OperationSpec, ...],
    params: Mapping[str, Any],
) -> OperationSpec:
    """Pick the first variant whose required parameters are all present.

    Raises:
        ValidationError: no variant matches.  The message names every
            identifying parameter that would have satisfied the operation.
    """
    for spec in variants:
        if all(is_present(params.get(name)) for name in spec.required_params):
            return spec

    candidates: list[str] = []
    for spec in variants:
        for name in sorted(spec.required_params):
            if name not in candidates:
                candidates.append(name)
    raise ValidationError(
        f"Missing required parameter for operation {operation}: {' or '.join(candidates)}"
    )


def resolve(
    operation: str,
    variants: tuple[OperationSpec, ...],
    params: Mapping[str, Any],
    common_query: tuple[tuple[str, str], ...] = (),
) -> tuple[str, list[tuple[str, Any]]]:
    """Resolve a variant table to (path, ordered raw query pairs)."""
    spec = select_variant(operation, variants, params)
    supplied = {name: value for name, value in params.items() if is_present(value)}

    path = API_PREFIX + spec.path_template.format(**supplied)
    query = [
        (key, supplied[name])
        for name, key in spec.query_params + common_query
        if name in supplied
    ]
    return path, query


def resolve_operation(operation: str, params: Mapping[str, Any]) -> tuple[str, list[tuple[str, Any]]]:
    """Dispatch a Content Delivery operation id.

    Lookup is exact and case-sensitive.  Nothing here touches the network, so
    every ValidationError is raised before a request could be attempted.

    Example:
        >>> resolve_operation("get-children", {"content_guid": "abc-123", "top": 10})
        ('/api/episerver/v3.0/content/abc-123/children', [('top', 10)])
    """
    variants = CONTENT_DELIVERY_OPERATIONS.get(operation)
    if variants is None:
        raise ValidationError(f"Unknown operation: {operation}")
    return resolve(operation, variants, params, COMMON_QUERY_PARAMS)
