"""Keyword blocklist enforcement for group text messages."""
import logging
import time
from typing import Callable, Optional

from ..config.constants import TEXTS, DEFAULT_BAN_DURATION_SECONDS
from ..models import Member
from ..services.client import ChatClient
from ..services.keywords import KeywordCache, find_first_match


class KeywordEnforcer:
    def __init__(
        self,
        client: ChatClient,
        keyword_cache: KeywordCache,
        ban_duration_seconds: int = DEFAULT_BAN_DURATION_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.keyword_cache = keyword_cache
        self.ban_duration_seconds = ban_duration_seconds
        self.clock = clock

    async def enforce(self, chat_id: int, message_id: int, sender: Optional[Member], text: str) -> Optional[str]:
        """Delete the message and ban its sender on a keyword hit. Returns the matched keyword."""
        keywords = await self.keyword_cache.get_active_list()
        if not keywords:
            return None

        hit = find_first_match(text, keywords)
        if hit is None:
            return None
        if sender is None:
            logging.warning(f"Keyword '{hit}' in {chat_id}/{message_id} but sender is unknown, skipping")
            return None

        await self.client.delete_message(chat_id, message_id)
        until = int(self.clock()) + self.ban_duration_seconds
        await self.client.ban(chat_id, sender.id, until=until)
        await self.client.send_message(
            chat_id, TEXTS["keyword_ban"].format(keyword=hit, name=sender.display_name)
        )
        logging.info(f"Banned {sender.id} in {chat_id} until {until} for keyword '{hit}'")
        return hit
