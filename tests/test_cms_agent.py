"""
Tests for the content assistant wiring (cms_agent/cms_agent.py, main.py).
No model is called: only construction, state handling and console output.
"""

from types import SimpleNamespace

import pytest
from google.adk.tools.mcp_tool import MCPToolset

from cms_agent.cms_agent import (
    connection_state,
    create_agent,
    describe_tool_call,
    inject_connection,
)


def _context(state):
    return SimpleNamespace(state=state)


def test_create_agent_uses_configured_model(monkeypatch):
    monkeypatch.setenv("CMS_AGENT_MODEL", "openai/gpt-4o-mini")

    agent = create_agent()

    assert agent.name == "cms_content_assistant"
    assert agent.model.model == "openai/gpt-4o-mini"
    assert len(agent.tools) == 1
    assert isinstance(agent.tools[0], MCPToolset)
    assert agent.before_tool_callback is inject_connection


def test_create_agent_default_model(monkeypatch):
    monkeypatch.delenv("CMS_AGENT_MODEL", raising=False)
    assert create_agent().model.model == "openrouter/openai/gpt-4o"


def test_connection_state():
    assert connection_state(" https://host.example ", " tok ") == {
        "cms_url": "https://host.example",
        "cms_auth_token": "tok",
    }
    assert connection_state("https://host.example", None)["cms_auth_token"] == ""


def test_connection_state_requires_url():
    with pytest.raises(ValueError):
        connection_state("  ", "tok")


def test_connection_overrides_model_arguments():
    args = {"cms_url": "https://guess.example", "auth_token": "", "operation": "get-all-sites"}

    result = inject_connection(
        None, args, _context({"cms_url": "https://host.example", "cms_auth_token": "tok"}),
    )

    assert result is None
    assert args == {
        "cms_url": "https://host.example",
        "auth_token": "tok",
        "operation": "get-all-sites",
    }


def test_anonymous_session_sends_empty_token():
    args = {"cms_url": "", "auth_token": "made-up"}
    inject_connection(None, args, _context({"cms_url": "https://host.example", "cms_auth_token": ""}))
    assert args["auth_token"] == ""


def test_tool_call_line_masks_token():
    line = describe_tool_call(
        "paas_cms_content_delivery",
        {"cms_url": "https://host.example", "auth_token": "secret",
         "operation": "get-children", "content_guid": "abc-123", "top": 10, "expand": None},
    )
    assert line == (
        "paas_cms_content_delivery [get-children]"
        "(cms_url='https://host.example', auth_token=***, content_guid='abc-123', top=10)"
    )
    assert "secret" not in line


def test_tool_call_line_without_operation():
    assert describe_tool_call("paas_cms_content_types", None) == "paas_cms_content_types()"


def test_read_connection_prefers_environment(monkeypatch):
    import main

    monkeypatch.setenv("CMS_URL", "https://host.example/")
    monkeypatch.setenv("CMS_AUTH_TOKEN", "tok")
    monkeypatch.setattr("builtins.input", lambda prompt: pytest.fail("should not prompt"))

    assert main.read_connection() == {
        "cms_url": "https://host.example/",
        "cms_auth_token": "tok",
    }


def test_read_connection_prompts_for_missing_values(monkeypatch):
    import main

    monkeypatch.delenv("CMS_URL", raising=False)
    monkeypatch.delenv("CMS_AUTH_TOKEN", raising=False)
    monkeypatch.setattr("builtins.input", lambda prompt: "https://host.example")
    monkeypatch.setattr(main, "getpass", lambda prompt: "")

    assert main.read_connection() == {
        "cms_url": "https://host.example",
        "cms_auth_token": "",
    }
