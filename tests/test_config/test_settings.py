"""Testes das settings (YAML + override por env)."""

from __future__ import annotations

import pytest

from config.settings import (
    ForwardSettings,
    GatewaySettings,
    WeChatPaySettings,
    get_forward_settings,
    get_gateway_settings,
    get_wechatpay_settings,
    load_config_file,
    parse_listen_address,
)
from config.settings.loader import lookup

ENV_VARS = (
    "GATEWAY_ADDRESS",
    "GATEWAY_DEBUG",
    "GATEWAY_FORWARDS",
    "FORWARD_TIMEOUT_SECONDS",
    "FORWARD_MAX_RETRIES",
    "LOG_LEVEL",
    "WECHATPAY_PUBLIC_KEY_PATH",
    "WECHATPAY_PUBLIC_KEY_ID",
    "WECHATPAY_API_V3_KEY",
)

CONFIG_YAML = """
address: "127.0.0.1:9000"
debug: true
wechat:
  publicKey: /etc/gateway/pub_key.pem
  publicKeyID: PUB_KEY_ID_0114232134912410000000000000
  apiV3Key: 0123456789abcdef0123456789abcdef
forwards:
  - https://orders.internal/notify
  - https://billing.internal/notify
forward:
  timeoutSeconds: 2.5
  maxRetries: 3
"""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    monkeypatch.setenv("GATEWAY_CONFIG_PATH", str(path))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return path


def test_settings_loaded_from_yaml(config_file) -> None:
    gateway = get_gateway_settings()
    wechat = get_wechatpay_settings()
    forward = get_forward_settings()

    assert gateway.address == "127.0.0.1:9000"
    assert gateway.debug is True
    assert gateway.effective_log_level == "DEBUG"
    assert wechat.public_key_path == "/etc/gateway/pub_key.pem"
    assert wechat.public_key_id == "PUB_KEY_ID_0114232134912410000000000000"
    assert wechat.validate() == []
    assert forward.targets == ("https://orders.internal/notify", "https://billing.internal/notify")
    assert forward.timeout_seconds == 2.5
    assert forward.max_retries == 3
    assert forward.validate() == []


def test_env_overrides_yaml(config_file, monkeypatch) -> None:
    monkeypatch.setenv("GATEWAY_FORWARDS", "https://a.internal/n, https://b.internal/n")
    monkeypatch.setenv("GATEWAY_DEBUG", "false")
    monkeypatch.setenv("WECHATPAY_PUBLIC_KEY_ID", "PUB_KEY_ID_ENV")

    assert get_forward_settings().targets == ("https://a.internal/n", "https://b.internal/n")
    assert get_gateway_settings().debug is False
    assert get_wechatpay_settings().public_key_id == "PUB_KEY_ID_ENV"


def test_missing_config_file_uses_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("GATEWAY_CONFIG_PATH", str(tmp_path / "absent.yml"))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    assert get_gateway_settings().address == ":8080"
    assert get_forward_settings().targets == ()
    assert get_forward_settings().timeout_seconds == 4.0
    assert get_forward_settings().max_retries == 5


def test_load_config_file_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapeamento YAML"):
        load_config_file(path)


def test_lookup_dotted_keys() -> None:
    data = {"wechat": {"publicKey": "/k.pem"}, "debug": False}

    assert lookup(data, "wechat.publicKey") == "/k.pem"
    assert lookup(data, "debug", True) is False
    assert lookup(data, "wechat.apiV3Key", "") == ""
    assert lookup(data, "debug.nested", "x") == "x"


def test_forward_settings_validate_empty_targets() -> None:
    errors = ForwardSettings().validate()

    assert any("forwards vazio" in error for error in errors)


def test_forward_settings_validate_bad_url() -> None:
    errors = ForwardSettings(targets=("ftp://files.internal/n",)).validate()

    assert errors == ["forwards contém URL inválida: 'ftp://files.internal/n'"]


def test_forward_settings_validate_accepts_uppercase_scheme() -> None:
    targets = ("HTTPS://orders.example/notify", "Http://billing.example/notify")

    assert ForwardSettings(targets=targets).validate() == []


def test_forward_settings_non_list_forwards_reported_by_validate(tmp_path, monkeypatch) -> None:
    path = tmp_path / "config.yml"
    path.write_text("forwards:\n  orders: https://orders.internal/notify\n", encoding="utf-8")
    monkeypatch.setenv("GATEWAY_CONFIG_PATH", str(path))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    forward = get_forward_settings()

    assert forward.validate() == ["forwards deve ser lista de URLs, recebido dict"]


def test_wechatpay_settings_validate() -> None:
    errors = WeChatPaySettings(public_key_path="/k.pem", api_v3_key="short").validate()

    assert "wechat.publicKeyID não configurado" in errors
    assert "wechat.apiV3Key deve ter 32 bytes" in errors


def test_gateway_settings_validate_bad_address() -> None:
    errors = GatewaySettings(address="localhost").validate()

    assert errors == ["address inválido: 'localhost'"]


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        (":8080", ("0.0.0.0", 8080)),
        ("127.0.0.1:9000", ("127.0.0.1", 9000)),
        ("[::1]:8443", ("::1", 8443)),
    ],
)
def test_parse_listen_address(address: str, expected: tuple[str, int]) -> None:
    assert parse_listen_address(address) == expected


@pytest.mark.parametrize("address", ["8080", ":http", ":0", ":70000"])
def test_parse_listen_address_invalid(address: str) -> None:
    with pytest.raises(ValueError):
        parse_listen_address(address)
