"""
Configuration modules
"""

from .settings import BotConfig, setup_logging
from .constants import (
    VERIFY_CALLBACK_PREFIX, MEMBER_OK_STATUSES, GROUP_CHAT_TYPES,
    DEFAULT_VERIFY_TIMEOUT_SECONDS, DEFAULT_BAN_DURATION_SECONDS,
    DEFAULT_KEYWORDS_TTL_SECONDS, TEXTS,
)

__all__ = [
    'BotConfig', 'setup_logging',
    'VERIFY_CALLBACK_PREFIX', 'MEMBER_OK_STATUSES', 'GROUP_CHAT_TYPES',
    'DEFAULT_VERIFY_TIMEOUT_SECONDS', 'DEFAULT_BAN_DURATION_SECONDS',
    'DEFAULT_KEYWORDS_TTL_SECONDS', 'TEXTS',
]
