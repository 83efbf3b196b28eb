import json

import httpx
import pytest
from typer.testing import CliRunner

import randomorg.client as client_module
from randomorg.cli.command_groups.generate_commands import parse_char_set, parse_sequence_bound
from randomorg.cli.command_groups.config_commands import mask_secret
from randomorg.cli.commands import app
from randomorg.config.loader import get_config_path
from randomorg.rpc.json_rpc import JsonRpc

runner = CliRunner()


def _fake_service(data):
    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "id": body["id"],
                "result": {
                    "random": {"data": data, "completionTime": "2024-01-01 00:00:00Z"},
                    "bitsUsed": 1,
                    "bitsLeft": 2,
                    "requestsLeft": 3,
                    "advisoryDelay": 4,
                },
            },
        )

    return handler


@pytest.fixture
def with_service(isolated_home, monkeypatch):
    """Configure an API key and route JsonRpc through a mock transport."""
    monkeypatch.setenv("RANDOM_ORG_API_KEY", "k")

    def install(data):
        transport = httpx.MockTransport(_fake_service(data))
        monkeypatch.setattr(
            client_module,
            "JsonRpc",
            lambda timeout=None: JsonRpc(httpx.AsyncClient(transport=transport)),
        )

    return install


def test_parse_helpers() -> None:
    assert parse_sequence_bound("5") == 5
    assert parse_sequence_bound("5,10,20") == [5, 10, 20]
    assert parse_char_set("digits").characters == "0123456789"
    assert parse_char_set("digits+upper").characters.startswith("0123456789ABC")
    assert parse_char_set("xyz").characters == "xyz"
    assert mask_secret("") == ""
    assert mask_secret("abcd") == "****"
    assert mask_secret("0123456789abcdef") == "0123…cdef"


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "randomorg v" in result.output


def test_integers_prints_values(with_service) -> None:
    with_service([4, 8, 15])
    result = runner.invoke(app, ["integers", "3", "1", "20"])
    assert result.exit_code == 0, result.output
    assert "4 8 15" in result.output
    assert "requests left 3" in result.output


def test_uuids_prints_one_per_line(with_service) -> None:
    with_service(["47849fd4-b790-4ff2-8cf2-3a9ea0a5e3d3"])
    result = runner.invoke(app, ["uuids", "1"])
    assert result.exit_code == 0, result.output
    assert "47849fd4-b790-4ff2-8cf2-3a9ea0a5e3d3" in result.output


def test_sequences_multiform(with_service) -> None:
    with_service([[1, 2], [3, 4, 5]])
    result = runner.invoke(app, ["sequences", "2", "--length", "2,3", "--min", "0,0", "--max", "9,9"])
    assert result.exit_code == 0, result.output
    assert "3 4 5" in result.output


def test_validation_failure_exits_2(with_service) -> None:
    with_service([])
    result = runner.invoke(app, ["integers", "0", "1", "20"])
    assert result.exit_code == 2
    assert "invalid-bound-closed-min" in result.output


def test_structural_mismatch_exits_2(with_service) -> None:
    with_service([])
    result = runner.invoke(app, ["sequences", "2", "--length", "2,3", "--min", "0", "--max", "9,9"])
    assert result.exit_code == 2
    assert "invalid-same-variant" in result.output


def test_missing_api_key_exits_1(isolated_home) -> None:
    result = runner.invoke(app, ["uuids", "1"])
    assert result.exit_code == 1
    assert "No API key" in result.output


def test_config_set_and_show(isolated_home) -> None:
    result = runner.invoke(app, ["config", "set", "apiKey", "0123456789abcdef"])
    assert result.exit_code == 0, result.output
    saved = json.loads(get_config_path().read_text())
    assert saved == {"apiKey": "0123456789abcdef"}

    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "0123…cdef" in result.output
    assert "0123456789abcdef" not in result.output


def test_config_set_rejects_unknown_key(isolated_home) -> None:
    result = runner.invoke(app, ["config", "set", "nope", "1"])
    assert result.exit_code != 0
