# =============================================================================
# cms_core/urls.py  -  URL Builder
# =============================================================================
#
# Turns (base origin, resolved path, ordered query pairs) into one absolute URL.
#
# RULES:
#   - Exactly one trailing "/" is stripped from the origin.  Internal slashes
#     are left alone.
#   - Path identifiers (content references, GUIDs) are inserted verbatim.
#     Callers must pass URL-safe identifiers.
#   - Query values are percent-encoded one by one, the way the browser's
#     encodeURIComponent() does it.  Query keys are fixed constants and are
#     assumed safe.
#   - Query order is the order the operation declares, never the order the
#     caller happened to supply parameters in.
# =============================================================================

from urllib.parse import quote

# Characters encodeURIComponent() leaves alone on top of quote()'s defaults.
_URI_COMPONENT_SAFE = "!~*'()"


def normalize_base_url(cms_url: str) -> str:
    """Strip a single trailing slash from the CMS origin."""
    return cms_url[:-1] if cms_url.endswith("/") else cms_url


def encode_query_value(value) -> str:
    """Render one query value.

    Booleans become "true"/"false" so the backend sees the same literals a
    JavaScript client would send.
    """
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return quote(text, safe=_URI_COMPONENT_SAFE)


def encode_query(pairs) -> tuple[tuple[str, str], ...]:
    """Encode the values of ordered (key, raw value) pairs."""
    return tuple((key, encode_query_value(value)) for key, value in pairs)


def join_url(base_url: str, path: str, encoded_pairs=()) -> str:
    """Join an already-normalized origin, a path and encoded query pairs."""
    query = "&".join(f"{key}={value}" for key, value in encoded_pairs)
    return f"{base_url}{path}{'?' + query if query else ''}"

