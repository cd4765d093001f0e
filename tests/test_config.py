import pytest

from pxshot import Client, ClientConfig, PxshotSettings, ValidationError

from .stubs import StubTransport


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PXSHOT_API_KEY", "env-key")
    monkeypatch.setenv("PXSHOT_BASE_URL", "https://staging.pxshot.test")
    monkeypatch.setenv("PXSHOT_TIMEOUT", "120")
    monkeypatch.setenv("PXSHOT_USER_AGENT", "MyApp/1.0")

    config = PxshotSettings().to_client_config()

    assert config == ClientConfig(
        api_key="env-key",
        base_url="https://staging.pxshot.test",
        timeout=120.0,
        user_agent="MyApp/1.0",
    )


def test_client_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PXSHOT_API_KEY", "env-key")
    monkeypatch.delenv("PXSHOT_BASE_URL", raising=False)
    client = Client.from_env(transport=StubTransport())
    assert client.config.api_key == "env-key"
    assert client.base_url == "https://api.pxshot.com"


def test_client_from_env_without_key(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PXSHOT_API_KEY", raising=False)
    with pytest.raises(ValidationError, match="API key is required"):
        Client.from_env(transport=StubTransport())


def test_timeout_must_be_positive():
    with pytest.raises(Exception):
        ClientConfig(api_key="k", timeout=0)
