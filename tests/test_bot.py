from groupguard.bot import build_admin_oracle, build_keyword_source
from groupguard.config.settings import BotConfig
from groupguard.services.admins import LiveQueryAdminOracle, StaticAdminOracle
from groupguard.services.keywords import RemoteKeywordSource, StaticKeywordSource


def test_keyword_url_wins_over_inline_list():
    config = BotConfig(
        telegram_token="t",
        keywords_url="https://example.com/k.txt",
        banned_keywords="广告,推广",
    )
    source = build_keyword_source(config)
    assert isinstance(source, RemoteKeywordSource)
    assert source.url == "https://example.com/k.txt"


def test_inline_keywords_use_static_source():
    source = build_keyword_source(BotConfig(telegram_token="t", banned_keywords="广告,推广"))
    assert isinstance(source, StaticKeywordSource)
    assert source.text == "广告\n推广"


def test_no_keyword_source_configured():
    assert build_keyword_source(BotConfig(telegram_token="t")) is None


def test_admin_ids_select_static_oracle(client):
    oracle = build_admin_oracle(BotConfig(telegram_token="t", admin_ids=frozenset({1, 2})), client)
    assert isinstance(oracle, StaticAdminOracle)
    assert oracle.admin_ids == frozenset({1, 2})


def test_missing_admin_ids_select_live_query(client):
    oracle = build_admin_oracle(BotConfig(telegram_token="t"), client)
    assert isinstance(oracle, LiveQueryAdminOracle)
    assert oracle.client is client
