import pytest

from groupguard.config.settings import BotConfig, parse_admin_ids, parse_chat_ref

ENV_VARS = [
    "TELEGRAM_TOKEN", "BOT_TOKEN", "REQUIRED_CHANNEL", "VERIFY_TIMEOUT_SECONDS",
    "BAN_DURATION_SECONDS", "KEYWORDS_URL", "BANNED_KEYWORDS", "KEYWORDS_TTL_SECONDS",
    "ADMIN_IDS", "WEBHOOK_URL", "WEBHOOK_LISTEN", "WEBHOOK_PORT", "WEBHOOK_PATH", "WEBHOOK_SECRET",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_token_is_required():
    with pytest.raises(ValueError):
        BotConfig.from_env()


def test_defaults(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    config = BotConfig.from_env()
    assert config.telegram_token == "123:abc"
    assert config.required_channel is None
    assert config.verify_timeout_seconds == 300
    assert config.ban_duration_seconds == 86400
    assert config.keywords_ttl_seconds == 300
    assert config.admin_ids is None
    assert config.webhook_url is None


def test_values_from_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_TOKEN", "t")
    monkeypatch.setenv("REQUIRED_CHANNEL", "@news")
    monkeypatch.setenv("BAN_DURATION_SECONDS", "600")
    monkeypatch.setenv("VERIFY_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("ADMIN_IDS", "1, 2,x,")
    monkeypatch.setenv("KEYWORDS_URL", "https://example.com/k.txt")
    monkeypatch.setenv("WEBHOOK_PATH", "/hook/")
    config = BotConfig.from_env()
    assert config.required_channel == "@news"
    assert config.ban_duration_seconds == 600
    assert config.verify_timeout_seconds == 300
    assert config.admin_ids == frozenset({1, 2})
    assert config.keywords_url == "https://example.com/k.txt"
    assert config.webhook_path == "hook"


def test_admin_ids_without_valid_entries_uses_live_query(monkeypatch):
    monkeypatch.setenv("TELEGRAM_TOKEN", "t")
    monkeypatch.setenv("ADMIN_IDS", "x, ,y")
    assert BotConfig.from_env().admin_ids is None


def test_parse_helpers():
    assert parse_admin_ids("") == frozenset()
    assert parse_chat_ref("-1001") == -1001
    assert parse_chat_ref("@chan") == "@chan"
    assert parse_chat_ref("  ") is None
