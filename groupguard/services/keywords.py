"""
Keyword blocklist: sources, TTL cache with stale fallback, and matching
"""
import logging
import time
from typing import Callable, List, Optional

import httpx


def parse_keywords(raw: str) -> List[str]:
    """One keyword per line; blank lines and lines starting with '#' are dropped"""
    keywords = []
    for line in raw.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        keywords.append(line)
    return keywords


def find_first_match(text: str, keywords: List[str]) -> Optional[str]:
    """First keyword (in list order) contained in text, case-insensitive"""
    lowered = text.lower()
    for keyword in keywords:
        if keyword and keyword.lower() in lowered:
            return keyword
    return None


class KeywordSource:
    """Where the raw keyword text comes from"""

    async def fetch(self) -> str:
        raise NotImplementedError


class StaticKeywordSource(KeywordSource):
    """Keyword text supplied up front (environment / config)"""

    def __init__(self, text: str):
        self.text = text

    @classmethod
    def from_inline(cls, value: str) -> 'StaticKeywordSource':
        """Accept the comma-separated form used in BANNED_KEYWORDS as well as one-per-line"""
        return cls(value.replace(",", "\n"))

    async def fetch(self) -> str:
        return self.text


class RemoteKeywordSource(KeywordSource):
    """Plain-text keyword list served over HTTP"""

    def __init__(self, url: str, timeout: float = 10, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self) -> str:
        headers = {"User-Agent": "Mozilla/5.0"}
        async with httpx.AsyncClient(transport=self.transport) as client:
            resp = await client.get(self.url, headers=headers, timeout=self.timeout, follow_redirects=True)
            resp.raise_for_status()
            return resp.text


class KeywordCache:
    """Serves the active keyword list, refreshing at most once per TTL.

    A failed refresh keeps whatever was cached before. With no source the
    list is always empty. Concurrent refreshes are not serialised; each one
    replaces the whole list, so the result is one of the fetched lists.
    """

    def __init__(
        self,
        source: Optional[KeywordSource],
        ttl_seconds: float = 300,
        clock: Callable[[], float] = time.time,
    ):
        self.source = source
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.keywords: List[str] = []
        self.last_fetch_time: Optional[float] = None

    def is_fresh(self, now: float) -> bool:
        if not self.keywords or self.last_fetch_time is None:
            return False
        return now - self.last_fetch_time < self.ttl_seconds

    async def get_active_list(self) -> List[str]:
        if self.source is None:
            return []

        now = self.clock()
        if self.is_fresh(now):
            return self.keywords

        try:
            raw = await self.source.fetch()
            keywords = parse_keywords(raw)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logging.error(f"Keyword list fetch failed, serving {len(self.keywords)} cached entries: {e}")
            return self.keywords
        except ValueError as e:
            logging.error(f"Keyword list parse failed, serving {len(self.keywords)} cached entries: {e}")
            return self.keywords

        self.keywords = keywords
        self.last_fetch_time = now
        logging.info(f"Keyword list refreshed: {len(keywords)} entries")
        return self.keywords
