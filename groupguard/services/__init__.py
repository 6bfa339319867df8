"""
Service modules
"""

from .client import ChatClient, RESTRICT_ALL, RESTORE_ALL
from .keywords import (
    KeywordSource, StaticKeywordSource, RemoteKeywordSource, KeywordCache,
    parse_keywords, find_first_match,
)
from .admins import AdminOracle, LiveQueryAdminOracle, StaticAdminOracle

__all__ = [
    'ChatClient', 'RESTRICT_ALL', 'RESTORE_ALL',
    'KeywordSource', 'StaticKeywordSource', 'RemoteKeywordSource', 'KeywordCache',
    'parse_keywords', 'find_first_match',
    'AdminOracle', 'LiveQueryAdminOracle', 'StaticAdminOracle',
]
