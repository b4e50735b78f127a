import asyncio
import json

import pytest
from fastmcp import Client

from monolith.server import Server


def run(coro):
    return asyncio.run(coro)


async def _list_tools(server: Server):
    async with Client(server.mcp) as client:
        return await client.list_tools()


async def _call(server: Server, name: str, arguments: dict):
    async with Client(server.mcp) as client:
        return await client.call_tool(name, arguments, raise_on_error=False)


def _text(result) -> str:
    return result.content[0].text


def test_server_registers_every_operation():
    server = Server()
    tools = run(_list_tools(server))
    assert sorted(t.name for t in tools) == sorted(server.tools.dispatcher.names())


def test_published_schema_matches_capability():
    server = Server()
    tools = {t.name: t for t in run(_list_tools(server))}
    capability = server.tools.dispatcher.operation("strings/truncate").capability()
    tool = tools["strings/truncate"]
    assert tool.description == capability["description"]
    assert tool.inputSchema["required"] == ["input", "length"]
    assert tool.inputSchema["properties"]["suffix"]["default"] == "..."


def test_call_function_tool():
    server = Server()
    result = run(_call(server, "strings/toCamelCase", {"input": "hello-world"}))
    assert not result.is_error
    payload = json.loads(_text(result))
    assert payload["success"] is True
    assert payload["result"] == "helloWorld"


def test_envelope_failure_is_not_a_tool_error():
    server = Server()
    result = run(_call(server, "math/clamp", {"value": 1, "min": 10, "max": 5}))
    assert not result.is_error
    assert json.loads(_text(result))["errorCode"] == "INVALID_RANGE"


def test_call_discovery_tool():
    server = Server()
    result = run(_call(server, "list_categories", {}))
    assert json.loads(_text(result))["count"] == 7


def test_invalid_arguments_flagged_as_error():
    server = Server()
    result = run(_call(server, "strings/truncate", {"input": "Hello"}))
    assert result.is_error
    assert "TOOL_EXECUTION_ERROR" in _text(result)


def test_server_uses_custom_catalog(catalog_file):
    server = Server(catalog_path=catalog_file)
    assert server.tools.catalog.names()[0] == "encoding/base64Decode"


def test_run_rejects_unknown_transport():
    with pytest.raises(ValueError, match="Unsupported transport"):
        Server().run(transport="carrier-pigeon")  # type: ignore[arg-type]


def test_run_stdio_delegates_to_fastmcp(monkeypatch):
    server = Server()
    calls = []
    monkeypatch.setattr(server.mcp, "run", lambda **kwargs: calls.append(kwargs))
    server.run()
    assert calls == [{"transport": "stdio"}]
