"""Tests for config file loading, saving and env overrides."""

import json

import pytest
from pydantic import ValidationError

from rpcgate.config.loader import camel_to_snake, convert_keys, load_config, save_config, snake_to_camel
from rpcgate.config.schema import Config


def test_missing_file_gives_defaults(tmp_path) -> None:
    config = load_config(tmp_path / "absent.json")
    assert config.server.port == 8000
    assert config.protocol.version == "2.0"
    assert config.dispatch.split_invocation_errors is False
    assert config.dispatch.pending_timeout_seconds is None


def test_camel_case_file_is_loaded(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "server": {"port": 9100, "path": "/rpc"},
        "protocol": {"version": "1.0"},
        "dispatch": {"splitInvocationErrors": True, "pendingTimeoutSeconds": 2.5},
        "service": "./examples/service",
    }))
    config = load_config(path)
    assert config.server.port == 9100
    assert config.server.path == "/rpc"
    assert config.protocol.version == "1.0"
    assert config.dispatch.split_invocation_errors is True
    assert config.dispatch.pending_timeout_seconds == 2.5
    assert config.service == "./examples/service"


@pytest.mark.parametrize("text", ["{not json", "[1, 2]", '{"protocol": {"version": "3.0"}}'])
def test_bad_file_raises_value_error(tmp_path, text) -> None:
    path = tmp_path / "config.json"
    path.write_text(text)
    with pytest.raises(ValueError, match="Failed to load config"):
        load_config(path)


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = Config()
    config.server.port = 8123
    config.dispatch.split_invocation_errors = True
    save_config(config, path)

    raw = json.loads(path.read_text())
    assert raw["dispatch"]["splitInvocationErrors"] is True
    assert load_config(path).server.port == 8123


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("RPCGATE_PROTOCOL__VERSION", "1.0")
    monkeypatch.setenv("RPCGATE_SERVER__PORT", "9001")
    config = Config()
    assert config.protocol.version == "1.0"
    assert config.server.port == 9001


def test_pending_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Config.model_validate({"dispatch": {"pending_timeout_seconds": 0}})


def test_key_conversion() -> None:
    assert camel_to_snake("pendingTimeoutSeconds") == "pending_timeout_seconds"
    assert snake_to_camel("split_invocation_errors") == "splitInvocationErrors"
    assert convert_keys({"fileEnabled": [{"innerKey": 1}]}) == {"file_enabled": [{"inner_key": 1}]}
