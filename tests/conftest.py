import asyncio

import keyring
import pytest

from switchboard import config
from switchboard.config import GatewayConfig
from switchboard.status import build_providers_table

PROVIDER_ENV = (
    "SWITCHBOARD_CONFIG",
    "TELEGRAM_BOT_TOKEN",
    "DISCORD_BOT_TOKEN",
    "SLACK_BOT_TOKEN",
    "SLACK_APP_TOKEN",
    "MSTEAMS_APP_ID",
    "MSTEAMS_APP_PASSWORD",
    "MSTEAMS_TENANT_ID",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def keyring_store(monkeypatch):
    store: dict[tuple[str, str], str] = {}
    monkeypatch.setattr(keyring, "get_password", lambda service, key: store.get((service, key)))
    return store


@pytest.fixture(autouse=True)
def tmp_state_dir(tmp_path, monkeypatch):
    state_dir = tmp_path / "state"
    state_dir.mkdir()
    monkeypatch.setattr(config, "STATE_DIR", state_dir)
    return state_dir


@pytest.fixture
def build():
    def _build(raw=None, show_secrets=False):
        cfg = GatewayConfig.from_dict(raw or {})
        return asyncio.run(build_providers_table(cfg, show_secrets=show_secrets))

    return _build
