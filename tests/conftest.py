import pytest

from storm_message import ApplicationContext
from storm_message import settings as settings_mod
from storm_message.state import SettingsSlot

from tests.mocks.transport_mock import RecordingListener, RecordingTransport


@pytest.fixture(autouse=True)
def fresh_slot(monkeypatch):
    """Every test starts in a process state where nothing has been built."""
    slot = SettingsSlot()
    monkeypatch.setattr(settings_mod, "_slot", slot)
    yield slot


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    # keep a developer's .env and STORM_MESSAGE_* variables out of the tests
    monkeypatch.chdir(tmp_path)
    for name in ("PROJECT_NUMBER", "DEFAULT_RECEIVER", "DEBUG_MODE"):
        monkeypatch.delenv(f"STORM_MESSAGE_{name}", raising=False)


@pytest.fixture()
def transport():
    return RecordingTransport(token="push-token-1")


@pytest.fixture()
def app_context(transport):
    return ApplicationContext(transport, name="test-app")


@pytest.fixture()
def listener():
    return RecordingListener()
