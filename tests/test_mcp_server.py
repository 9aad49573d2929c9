"""
Tests for the FastMCP tool layer (cms_tools/mcp_server.py), exercised
in-memory through fastmcp.Client.
"""

import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from cms_agent.prompt import CMS_ASSISTANT_PROMPT
from cms_core.models import Err, Ok, ResponseEnvelope
from cms_tools import mcp_server

TOOL_NAMES = {"paas_cms_content_delivery", "cms_content_manifest", "paas_cms_content_types"}


@pytest.mark.asyncio
async def test_tools_are_registered():
    async with Client(mcp_server.mcp) as client:
        tools = await client.list_tools()
    assert {tool.name for tool in tools} == TOOL_NAMES


@pytest.mark.asyncio
async def test_delivery_schema_requires_url_token_and_operation():
    async with Client(mcp_server.mcp) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}
    schema = tools["paas_cms_content_delivery"].inputSchema
    assert set(schema["required"]) == {"cms_url", "auth_token", "operation"}


@pytest.mark.asyncio
async def test_unknown_operation_is_a_tool_error():
    async with Client(mcp_server.mcp) as client:
        with pytest.raises(ToolError, match="Unknown operation: delete-content"):
            await client.call_tool(
                "paas_cms_content_delivery",
                {"cms_url": "https://host.example", "auth_token": "t", "operation": "delete-content"},
            )


@pytest.mark.asyncio
async def test_envelope_is_returned_as_tool_result(monkeypatch):
    envelope = ResponseEnvelope(
        success=True, status=200, status_text="OK",
        url="https://host.example/api/episerver/v3.0/contenttypes",
        data=[{"name": "StandardPage"}], headers={"content-type": "application/json"},
    )

    async def fake_fetch(cms_url, auth_token=None, content_type_id=None):
        return Ok(envelope)

    monkeypatch.setattr(mcp_server, "fetch_content_types", fake_fetch)

    async with Client(mcp_server.mcp) as client:
        result = await client.call_tool("paas_cms_content_types", {"cms_url": "https://host.example"})

    payload = json.loads(result.content[0].text)
    assert payload["success"] is True
    assert payload["statusText"] == "OK"
    assert payload["data"] == [{"name": "StandardPage"}]


@pytest.mark.asyncio
async def test_transport_error_surfaces_with_label(monkeypatch):
    async def fake_fetch(cms_url, auth_token=None, include_system_types=None):
        return Err("transport", "CMS Content Manifest API call failed: timed out", OSError("timed out"))

    monkeypatch.setattr(mcp_server, "fetch_content_manifest", fake_fetch)

    async with Client(mcp_server.mcp) as client:
        with pytest.raises(ToolError, match="CMS Content Manifest API call failed: timed out"):
            await client.call_tool("cms_content_manifest", {"cms_url": "https://host.example"})


def test_token_is_masked_in_logs(caplog):
    with caplog.at_level("INFO"):
        mcp_server._log_request("paas_cms_content_delivery", auth_token="secret", operation="get-all-sites")
    assert "secret" not in caplog.text
    assert "'***'" in caplog.text


def test_prompt_mentions_every_tool():
    for name in TOOL_NAMES:
        assert name in CMS_ASSISTANT_PROMPT
