import json

from click.testing import CliRunner

from monolith.cli import monolith


def invoke(*args):
    return CliRunner().invoke(monolith, list(args))


def test_search_command():
    result = invoke("search", "camel")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["count"] == 1
    assert payload["functions"][0]["name"] == "strings/toCamelCase"


def test_search_command_with_category():
    result = invoke("search", "", "--category", "encoding")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["count"] == 2


def test_categories_command():
    result = invoke("categories")
    assert result.exit_code == 0, result.output
    names = [c["name"] for c in json.loads(result.output)["categories"]]
    assert names[0] == "conversion"


def test_describe_command():
    result = invoke("describe", "dates/addDays")
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["category"] == "dates"


def test_call_command():
    result = invoke("call", "encoding/base64Encode", "--args", '{"input": "Hello World"}')
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["result"] == "SGVsbG8gV29ybGQ="


def test_call_command_envelope_failure_exits_zero():
    result = invoke("call", "math/clamp", "--args", '{"value": 1, "min": 3, "max": 2}')
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["errorCode"] == "INVALID_RANGE"


def test_call_command_unknown_tool_exits_one():
    result = invoke("call", "nonexistent/op")
    assert result.exit_code == 1
    assert "Unknown tool: nonexistent/op" in result.output


def test_call_command_rejects_bad_json():
    result = invoke("call", "math/round", "--args", "{not json")
    assert result.exit_code == 2
    assert "--args" in result.output


def test_call_command_rejects_non_object():
    result = invoke("call", "math/round", "--args", "[1, 2]")
    assert result.exit_code == 2


def test_custom_catalog_option(catalog_file):
    result = invoke("categories", "--catalog", str(catalog_file))
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["count"] == 7


def test_serve_help():
    result = invoke("serve", "--help")
    assert result.exit_code == 0
    assert "--transport" in result.output
    assert "TRANSPORT" in result.output


def test_serve_passes_options_to_server(monkeypatch):
    from monolith.server import Server

    calls = []
    monkeypatch.setattr(Server, "run", lambda self, **kwargs: calls.append(kwargs))
    result = CliRunner().invoke(
        monolith,
        ["serve", "--transport", "streamable-http", "--port", "9001"],
        env={"HOST": "0.0.0.0"},
    )
    assert result.exit_code == 0, result.output
    assert calls == [{"transport": "streamable-http", "host": "0.0.0.0", "port": 9001}]
