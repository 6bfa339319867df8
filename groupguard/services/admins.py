"""
Admin oracles: answer "is this user an admin of this chat"
"""
import logging
from typing import Iterable

from .client import ChatClient


class AdminOracle:
    async def is_admin(self, chat_id: int, user_id: int) -> bool:
        raise NotImplementedError


class LiveQueryAdminOracle(AdminOracle):
    """Asks Telegram for the current admin list on every check, never cached"""

    def __init__(self, client: ChatClient):
        self.client = client

    async def is_admin(self, chat_id: int, user_id: int) -> bool:
        admin_ids = await self.client.get_admin_ids(chat_id)
        if admin_ids is None:
            logging.warning(f"Could not load admins of {chat_id}, denying {user_id}")
            return False
        return user_id in admin_ids


class StaticAdminOracle(AdminOracle):
    """Fixed set of admin ids from configuration, valid in every chat"""

    def __init__(self, admin_ids: Iterable[int]):
        self.admin_ids = frozenset(admin_ids)

    async def is_admin(self, chat_id: int, user_id: int) -> bool:
        return user_id in self.admin_ids
