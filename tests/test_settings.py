import pytest

from huebridge.settings import DEFAULT_TIMEOUT, BridgeSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so values loaded from a .env file are undone after the test
    for name in ("HUE_BRIDGE_IP", "HUE_USERNAME", "HUE_TIMEOUT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_from_env(monkeypatch):
    monkeypatch.setenv("HUE_BRIDGE_IP", "192.168.1.10")
    monkeypatch.setenv("HUE_USERNAME", "newdeveloper")
    monkeypatch.setenv("HUE_TIMEOUT", "2")

    settings = BridgeSettings.from_env(load_env_file=False)

    assert settings == BridgeSettings("192.168.1.10", "newdeveloper", 2.0)


def test_username_and_timeout_are_optional(monkeypatch):
    monkeypatch.setenv("HUE_BRIDGE_IP", "192.168.1.10")
    settings = BridgeSettings.from_env(load_env_file=False)
    assert settings.username is None
    assert settings.timeout == DEFAULT_TIMEOUT


def test_missing_bridge_ip():
    with pytest.raises(ValueError):
        BridgeSettings.from_env(load_env_file=False)


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("HUE_BRIDGE_IP", "192.168.1.10")
    monkeypatch.setenv("HUE_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        BridgeSettings.from_env(load_env_file=False)


def test_reads_dotenv_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("HUE_BRIDGE_IP=10.1.1.1\nHUE_USERNAME=fromfile\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = BridgeSettings.from_env()

    assert settings.bridge_ip == "10.1.1.1"
    assert settings.username == "fromfile"
