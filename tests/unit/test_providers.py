import asyncio
import json
import os

from switchboard.config import GatewayConfig
from switchboard.core.models import Probe
from switchboard.providers import discord, imessage, msteams, signal, slack, telegram, whatsapp


def _cfg(raw):
    return GatewayConfig.from_dict(raw)


# telegram


def test_telegram_ids_default_when_unconfigured():
    assert telegram.list_account_ids(_cfg({})) == ["default"]


def test_telegram_ids_sorted_overrides():
    cfg = _cfg({"telegram": {"accounts": {"work": {}, "home": {}}}})
    assert telegram.list_account_ids(cfg) == ["home", "work"]


def test_telegram_ids_include_default_with_base_token():
    cfg = _cfg({"telegram": {"botToken": "t", "accounts": {"work": {}}}})
    assert telegram.list_account_ids(cfg) == ["default", "work"]


def test_telegram_base_token_is_config():
    account = telegram.resolve_account(_cfg({"telegram": {"botToken": " 123:abc "}}))
    assert account.account_id == "default"
    assert account.token == "123:abc"
    assert account.token_source == "config"


def test_telegram_token_file(tmp_path):
    path = tmp_path / "tg.token"
    path.write_text("  123:file\n")
    account = telegram.resolve_account(_cfg({"telegram": {"tokenFile": str(path)}}))
    assert account.token == "123:file"
    assert account.token_source == "tokenFile"
    assert account.token_file_key == "telegram.tokenFile"


def test_telegram_unreadable_token_file_stops_fallback(tmp_path, monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "from-env")
    account = telegram.resolve_account(_cfg({"telegram": {"tokenFile": str(tmp_path / "gone")}}))
    assert account.token == ""
    assert account.token_source == "none"


def test_telegram_env_then_keyring(monkeypatch, keyring_store):
    keyring_store[("switchboard-telegram", "bot_token")] = "from-keyring"
    assert telegram.resolve_account(_cfg({})).token_source == "keyring"
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "from-env")
    account = telegram.resolve_account(_cfg({}))
    assert account.token == "from-env"
    assert account.token_source == "env"


def test_telegram_named_account_does_not_inherit_token(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "from-env")
    cfg = _cfg({"telegram": {"botToken": "base", "accounts": {"work": {"name": "Work"}}}})
    account = telegram.resolve_account(cfg, "work")
    assert account.token == ""
    assert account.token_source == "none"
    assert account.name == "Work"


def test_telegram_account_token_file_key(tmp_path):
    cfg = _cfg({"telegram": {"accounts": {"work": {"tokenFile": str(tmp_path / "w")}}}})
    account = telegram.resolve_account(cfg, "work")
    assert account.token_file_key == "telegram.accounts.work.tokenFile"


def test_telegram_account_enabled_follows_section():
    cfg = _cfg({"telegram": {"enabled": False, "accounts": {"a": {}}}})
    assert telegram.resolve_account(cfg, "a").enabled is False
    cfg = _cfg({"telegram": {"accounts": {"a": {"enabled": False}}}})
    assert telegram.resolve_account(cfg, "a").enabled is False


# discord / slack


def test_discord_precedence(monkeypatch):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "env-token")
    assert discord.resolve_account(_cfg({})).token_source == "env"
    account = discord.resolve_account(_cfg({"discord": {"token": "cfg-token"}}))
    assert account.token == "cfg-token"
    assert account.token_source == "config"


def test_slack_tokens_resolve_independently(monkeypatch):
    monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-env")
    account = slack.resolve_account(_cfg({"slack": {"botToken": "xoxb-cfg"}}))
    assert (account.bot_token, account.bot_token_source) == ("xoxb-cfg", "config")
    assert (account.app_token, account.app_token_source) == ("xapp-env", "env")


def test_slack_missing_token_source_is_none():
    account = slack.resolve_account(_cfg({"slack": {"botToken": "xoxb"}}))
    assert account.app_token == ""
    assert account.app_token_source == "none"


# signal / imessage


def test_signal_default_is_unconfigured():
    account = signal.resolve_account(_cfg({}))
    assert account.configured is False
    assert account.base_url == "http://127.0.0.1:8080"


def test_signal_host_and_port():
    account = signal.resolve_account(_cfg({"signal": {"httpHost": "10.0.0.2", "httpPort": 9000}}))
    assert account.configured is True
    assert account.base_url == "http://10.0.0.2:9000"


def test_signal_url_wins_and_overrides_merge():
    cfg = _cfg(
        {
            "signal": {
                "httpUrl": "http://signal.lan:8080/",
                "accounts": {"alt": {"account": "+15550001111"}},
            }
        }
    )
    account = signal.resolve_account(cfg, "alt")
    assert account.base_url == "http://signal.lan:8080"
    assert account.account == "+15550001111"
    assert signal.list_account_ids(cfg) == ["alt"]


def test_imessage_configured_flag():
    assert imessage.resolve_account(_cfg({})).configured is False
    account = imessage.resolve_account(_cfg({"imessage": {"dbPath": "~/chat.db"}}))
    assert account.configured is True
    assert account.db_path == "~/chat.db"
    assert account.cli_path is None


# msteams


def test_msteams_credentials_need_all_three(monkeypatch):
    assert msteams.resolve_credentials(_cfg({})) is None
    monkeypatch.setenv("MSTEAMS_APP_ID", "app")
    monkeypatch.setenv("MSTEAMS_APP_PASSWORD", "pw")
    assert msteams.resolve_credentials(_cfg({})) is None
    creds = msteams.resolve_credentials(_cfg({"msteams": {"tenantId": "tenant"}}))
    assert creds == msteams.MSTeamsCredentials(app_id="app", app_password="pw", tenant_id="tenant")


def test_msteams_accounts_carry_credentials(monkeypatch):
    assert msteams.resolve_accounts(_cfg({}))[0].credentials is None
    monkeypatch.setenv("MSTEAMS_TENANT_ID", "tenant")
    [account] = msteams.resolve_accounts(_cfg({"msteams": {"appId": "app", "appPassword": "pw"}}))
    assert account.credentials == msteams.MSTeamsCredentials(
        app_id="app", app_password="pw", tenant_id="tenant"
    )


def test_msteams_sources(monkeypatch):
    monkeypatch.setenv("MSTEAMS_APP_ID", "env-app")
    account = msteams.resolve_account(_cfg({"msteams": {"appId": "cfg-app"}}))
    assert account.app_id == "cfg-app"
    assert account.app_id_source == "config"
    assert account.tenant_id_source == "none"


# whatsapp


def _write_creds(auth_dir, payload):
    auth_dir.mkdir(parents=True, exist_ok=True)
    path = auth_dir / "creds.json"
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload)
    return path


def test_whatsapp_defaults(tmp_state_dir):
    account = whatsapp.resolve_account(_cfg({}))
    assert account.dm_policy == "pairing"
    assert account.self_chat_mode is False
    assert account.allow_from == []
    assert account.auth_dir == str(tmp_state_dir / "credentials" / "whatsapp" / "default")
    assert account.linked is False


def test_whatsapp_override_inherits_base():
    cfg = _cfg(
        {
            "whatsapp": {
                "dmPolicy": "allowlist",
                "allowFrom": ["+15550001111"],
                "accounts": {"work": {"selfChatMode": True}},
            }
        }
    )
    account = whatsapp.resolve_account(cfg, "work")
    assert account.dm_policy == "allowlist"
    assert account.allow_from == ["+15550001111"]
    assert account.self_chat_mode is True
    assert account.auth_dir.endswith("whatsapp/work")


def test_web_auth_exists(tmp_path):
    assert whatsapp.web_auth_exists(str(tmp_path / "none")) is Probe.MISSING
    _write_creds(tmp_path / "ok", {"me": {"id": "1@s.whatsapp.net"}})
    assert whatsapp.web_auth_exists(str(tmp_path / "ok")) is Probe.PRESENT
    _write_creds(tmp_path / "bad", "{not json")
    assert whatsapp.web_auth_exists(str(tmp_path / "bad")) is Probe.UNKNOWN


def test_web_auth_age(tmp_path):
    path = _write_creds(tmp_path, {})
    os.utime(path, (1_000, 1_000))
    assert whatsapp.get_web_auth_age_ms(str(tmp_path), now=1_090.5) == 90_500
    assert whatsapp.get_web_auth_age_ms(str(tmp_path / "missing")) is None


def test_read_web_self_id(tmp_path):
    _write_creds(tmp_path / "a", {"me": {"id": "15551234567:12@s.whatsapp.net"}})
    assert whatsapp.read_web_self_id(str(tmp_path / "a")) == "+15551234567"
    _write_creds(tmp_path / "b", {"me": {}})
    assert whatsapp.read_web_self_id(str(tmp_path / "b")) is None
    _write_creds(tmp_path / "c", [1, 2])
    assert whatsapp.read_web_self_id(str(tmp_path / "c")) is None


def test_resolve_accounts_probes_sessions(tmp_path):
    _write_creds(tmp_path / "work", {"me": {"id": "15550002222@s.whatsapp.net"}})
    cfg = _cfg(
        {
            "whatsapp": {
                "accounts": {
                    "work": {"authDir": str(tmp_path / "work")},
                    "home": {"authDir": str(tmp_path / "home")},
                }
            }
        }
    )
    accounts = asyncio.run(whatsapp.resolve_accounts(cfg))
    assert [a.account_id for a in accounts] == ["home", "work"]
    home, work = accounts
    assert home.linked is False
    assert home.auth_age_ms is None
    assert work.linked is True
    assert work.self_e164 == "+15550002222"
    assert work.auth_age_ms is not None
