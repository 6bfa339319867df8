"""
Configuration settings for GroupGuard
"""
import os
from typing import Optional, FrozenSet, Union
from dataclasses import dataclass
import logging

from .constants import (
    DEFAULT_VERIFY_TIMEOUT_SECONDS,
    DEFAULT_BAN_DURATION_SECONDS,
    DEFAULT_KEYWORDS_TTL_SECONDS,
    DEFAULT_WEBHOOK_PORT,
    DEFAULT_WEBHOOK_PATH,
)


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.warning(f"Invalid {name}: {raw}, using {default}")
        return default


def parse_admin_ids(raw: str) -> FrozenSet[int]:
    """Parse a comma-separated list of numeric user ids, skipping junk entries"""
    ids = set()
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.add(int(part))
        except ValueError:
            logging.warning(f"Skipping invalid admin id: {part}")
    return frozenset(ids)


def parse_chat_ref(raw: str) -> Optional[Union[int, str]]:
    """Channel reference: numeric id when it parses, otherwise the @username as given"""
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return raw


@dataclass
class BotConfig:
    """Bot configuration"""
    telegram_token: str
    required_channel: Optional[Union[int, str]] = None

    # Moderation
    verify_timeout_seconds: int = DEFAULT_VERIFY_TIMEOUT_SECONDS
    ban_duration_seconds: int = DEFAULT_BAN_DURATION_SECONDS

    # Keyword list: URL wins over the inline list
    keywords_url: Optional[str] = None
    banned_keywords: Optional[str] = None
    keywords_ttl_seconds: int = DEFAULT_KEYWORDS_TTL_SECONDS

    # None means "ask Telegram for the live admin list"
    admin_ids: Optional[FrozenSet[int]] = None

    # Webhook (polling when webhook_url is empty)
    webhook_url: Optional[str] = None
    webhook_listen: str = "0.0.0.0"
    webhook_port: int = DEFAULT_WEBHOOK_PORT
    webhook_path: str = DEFAULT_WEBHOOK_PATH
    webhook_secret: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'BotConfig':
        """Create config from environment variables"""
        telegram_token = os.getenv("TELEGRAM_TOKEN") or os.getenv("BOT_TOKEN", "")
        if not telegram_token:
            raise ValueError("TELEGRAM_TOKEN is required")

        admin_ids_str = os.getenv("ADMIN_IDS", "").strip()
        admin_ids = parse_admin_ids(admin_ids_str) if admin_ids_str else None
        if admin_ids is not None and not admin_ids:
            logging.warning("ADMIN_IDS has no valid ids, falling back to the live admin list")
            admin_ids = None

        return cls(
            telegram_token=telegram_token,
            required_channel=parse_chat_ref(os.getenv("REQUIRED_CHANNEL", "")),
            verify_timeout_seconds=_int_from_env("VERIFY_TIMEOUT_SECONDS", DEFAULT_VERIFY_TIMEOUT_SECONDS),
            ban_duration_seconds=_int_from_env("BAN_DURATION_SECONDS", DEFAULT_BAN_DURATION_SECONDS),
            keywords_url=os.getenv("KEYWORDS_URL", "").strip() or None,
            banned_keywords=os.getenv("BANNED_KEYWORDS") or None,
            keywords_ttl_seconds=_int_from_env("KEYWORDS_TTL_SECONDS", DEFAULT_KEYWORDS_TTL_SECONDS),
            admin_ids=admin_ids,
            webhook_url=os.getenv("WEBHOOK_URL", "").strip() or None,
            webhook_listen=os.getenv("WEBHOOK_LISTEN", "0.0.0.0"),
            webhook_port=_int_from_env("WEBHOOK_PORT", DEFAULT_WEBHOOK_PORT),
            webhook_path=os.getenv("WEBHOOK_PATH", DEFAULT_WEBHOOK_PATH).strip("/"),
            webhook_secret=os.getenv("WEBHOOK_SECRET") or None,
        )


# Logging configuration
def setup_logging():
    """Setup logging configuration"""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
