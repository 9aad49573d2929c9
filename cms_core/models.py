# =============================================================================
# cms_core/models.py  -  Data Models (the "nouns" of the adapter)
# =============================================================================
#
# Every object here is created fresh for one tool call and thrown away once
# the envelope has been returned.  Nothing is cached or shared between calls.
#
#   OperationSpec    - one route variant in the Operation Registry
#   RequestContext   - everything needed to perform the GET (immutable)
#   ResponseEnvelope - the normalized outcome handed back to the caller
#   Ok / Err         - tagged result: either an envelope or a classified error
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

from cms_core.errors import TransportError, ValidationError
from cms_core.urls import join_url


# -----------------------------------------------------------------------------
# OperationSpec - one entry (variant) in the Operation Registry
# -----------------------------------------------------------------------------
# A logical operation may own several variants.  "get-children" has two: one
# keyed by content reference, one keyed by content GUID.  The dispatcher picks
# the first variant whose required_params are all present.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OperationSpec:
    """A single request shape against the CMS API."""

    id: str                                    # "get-children"
    path_template: str                         # "/content/{content_guid}/children"
    required_params: frozenset[str] = frozenset()
    # (parameter name, query key) pairs, emitted in this order when present.
    query_params: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class RequestContext:
    """A fully resolved, read-only request."""

    base_url: str                              # origin, trailing slash stripped
    path: str                                  # already parameter-substituted
    query_params: tuple[tuple[str, str], ...] = ()  # values already encoded
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    method: str = "GET"

    @property
    def url(self) -> str:
        return join_url(self.base_url, self.path, self.query_params)


# -----------------------------------------------------------------------------
# ResponseEnvelope - the one result shape every tool returns
# -----------------------------------------------------------------------------
# success == True   →  data + headers are populated, error is None
# success == False  →  error is populated, data is None, headers are omitted
#
# The missing header map on failures mirrors what existing callers already
# receive; see DESIGN.md before changing it.
# -----------------------------------------------------------------------------
@dataclass
class ResponseEnvelope:
    """Normalized outcome of one CMS API call."""

    success: bool
    status: int
    status_text: str
    url: str
    data: Any = None
    error: Any = None
    headers: dict[str, str] | None = None

    def to_dict(self) -> dict:
        """Serialize to the wire shape returned by the tools."""
        result = {
            "success": self.success,
            "status": self.status,
            "statusText": self.status_text,
        }
        if self.success:
            result["data"] = self.data
            result["url"] = self.url
            result["headers"] = dict(self.headers or {})
        else:
            result["error"] = self.error
            result["url"] = self.url
        return result


# -----------------------------------------------------------------------------
# Ok / Err - the tagged result type
# -----------------------------------------------------------------------------
# HTTP-level rejections are still Ok (the backend answered).  Err is reserved
# for failures where no envelope could be produced at all.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Ok:
    envelope: ResponseEnvelope

    def unwrap(self) -> ResponseEnvelope:
        return self.envelope


@dataclass(frozen=True)
class Err:
    kind: str                                  # "validation" | "transport"
    message: str
    cause: BaseException | None = None

    def unwrap(self) -> ResponseEnvelope:
        """Raise the exception matching this error's kind."""
        if self.kind == "validation":
            raise ValidationError(self.message)
        raise TransportError(self.message) from self.cause


Result = Union[Ok, Err]
