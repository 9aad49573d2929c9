"""
Unit tests for the envelope and the Ok/Err result type (cms_core/models.py).
"""

import pytest

from cms_core.errors import TransportError, ValidationError
from cms_core.models import Err, Ok, RequestContext, ResponseEnvelope


def test_success_envelope_dict():
    envelope = ResponseEnvelope(
        success=True, status=200, status_text="OK", url="https://h/x",
        data={"name": "Start"}, headers={"content-type": "application/json"},
    )
    assert envelope.to_dict() == {
        "success": True,
        "status": 200,
        "statusText": "OK",
        "data": {"name": "Start"},
        "url": "https://h/x",
        "headers": {"content-type": "application/json"},
    }


def test_failure_envelope_has_no_data_and_no_headers():
    envelope = ResponseEnvelope(
        success=False, status=404, status_text="Not Found", url="https://h/x",
        error="missing",
    )
    result = envelope.to_dict()
    assert result["error"] == "missing"
    assert "data" not in result
    assert "headers" not in result


def test_request_context_url():
    context = RequestContext(
        base_url="https://h", path="/content", query_params=(("contentUrl", "a%2Fb"),),
    )
    assert context.url == "https://h/content?contentUrl=a%2Fb"
    assert context.method == "GET"


def test_request_context_is_immutable():
    context = RequestContext(base_url="https://h", path="/site")
    with pytest.raises(AttributeError):
        context.path = "/content"


def test_ok_unwraps_to_envelope():
    envelope = ResponseEnvelope(success=True, status=200, status_text="OK", url="u")
    assert Ok(envelope).unwrap() is envelope


def test_validation_err_raises_validation_error():
    with pytest.raises(ValidationError, match="Unknown operation: x"):
        Err("validation", "Unknown operation: x").unwrap()


def test_transport_err_chains_cause():
    cause = OSError("boom")
    with pytest.raises(TransportError) as excinfo:
        Err("transport", "CMS Content Types API call failed: boom", cause).unwrap()
    assert excinfo.value.__cause__ is cause
