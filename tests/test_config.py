"""Tests for voidstats/config.py."""

import json

from voidstats.config import Config, load_privileged_users, parse_guild_ids


def test_privileged_users_are_ints(tmp_path):
    path = tmp_path / "premium.json"
    path.write_text(json.dumps({"users": ["123", 456, "not-an-id"]}))

    assert load_privileged_users(str(path)) == frozenset({123, 456})


def test_missing_premium_file(tmp_path):
    assert load_privileged_users(str(tmp_path / "missing.json")) == frozenset()


def test_corrupt_premium_file(tmp_path):
    path = tmp_path / "premium.json"
    path.write_text("{not json")

    assert load_privileged_users(str(path)) == frozenset()


def test_parse_guild_ids():
    assert parse_guild_ids("") == []
    assert parse_guild_ids("1, 2,,3") == [1, 2, 3]


def test_from_env(monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "token")
    monkeypatch.setenv("HYPIXEL_KEY", "key")
    monkeypatch.setenv("DEBUG_GUILDS", "10,20")
    monkeypatch.delenv("PREMIUM_FILE", raising=False)
    monkeypatch.delenv("BOT_ERRORS_CHANNEL", raising=False)

    cfg = Config.from_env()

    assert cfg.TOKEN == "token"
    assert cfg.HYPIXEL_KEY == "key"
    assert cfg.DEBUG_GUILDS == [10, 20]
    assert cfg.PREMIUM_FILE == "premium.json"
    assert cfg.BOT_ERRORS_CHANNEL == 0
