"""Configuration module for the voidstats bot."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import FrozenSet, List

import filelock
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("voidstats")


def safe_json_load(filepath: str, default: dict) -> dict:
    """Load a JSON file under a file lock, falling back to ``default``."""
    lock = filelock.FileLock(f"{filepath}.lock", timeout=5)
    try:
        with lock:
            if os.path.exists(filepath):
                with open(filepath, "r") as f:
                    return json.load(f)
    except (json.JSONDecodeError, filelock.Timeout, OSError) as e:
        logger.error(f"Failed to load {filepath}: {e}")
    return default


def load_privileged_users(filepath: str) -> FrozenSet[int]:
    """
    Read the ids of users exempt from the command cooldown.

    The file holds ``{"users": ["123", 456, ...]}``. Ids that are not
    integers are skipped.
    """
    data = safe_json_load(filepath, {})
    users = data.get("users", []) if isinstance(data, dict) else []
    privileged = set()
    for raw in users:
        try:
            privileged.add(int(raw))
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid user id in {filepath}: {raw!r}")
    return frozenset(privileged)


def parse_guild_ids(value: str) -> List[int]:
    """Parse a comma separated list of guild ids, ignoring blanks."""
    return [int(part) for part in value.split(",") if part.strip()]


@dataclass
class Config:
    """Bot configuration loaded from environment variables."""

    TOKEN: str
    HYPIXEL_KEY: str
    PREMIUM_FILE: str
    BOT_ERRORS_CHANNEL: int
    DEBUG_GUILDS: List[int] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            TOKEN=os.getenv("DISCORD_TOKEN", ""),
            HYPIXEL_KEY=os.getenv("HYPIXEL_KEY", ""),
            PREMIUM_FILE=os.getenv("PREMIUM_FILE", "premium.json"),
            BOT_ERRORS_CHANNEL=int(os.getenv("BOT_ERRORS_CHANNEL", 0)),
            DEBUG_GUILDS=parse_guild_ids(os.getenv("DEBUG_GUILDS", "")),
        )


config = Config.from_env()
