"""
Join verification.

A new member is restricted on join and gets a button carrying a
VerificationToken. Clicking it as that member (and following the required
channel, when one is configured) restores send permissions. There is no
expiry: the advertised timeout is only printed in the welcome text.
"""
import logging
from typing import Iterable, Optional, Union

from telegram import InlineKeyboardButton

from ..config.constants import MEMBER_OK_STATUSES, TEXTS
from ..models import Member, VerificationToken, MalformedTokenError
from ..services.client import ChatClient, RESTRICT_ALL, RESTORE_ALL


class MembershipGate:
    def __init__(
        self,
        client: ChatClient,
        required_channel: Optional[Union[int, str]] = None,
        verify_timeout_seconds: int = 300,
    ):
        self.client = client
        self.required_channel = required_channel
        self.verify_timeout_seconds = verify_timeout_seconds

    def welcome_text(self, member: Member) -> str:
        text = TEXTS["welcome"].format(name=member.display_name)
        if self.required_channel:
            text += TEXTS["welcome_channel"].format(channel=self.required_channel)
        text += TEXTS["welcome_timeout"].format(seconds=self.verify_timeout_seconds)
        return text

    async def on_join(self, chat_id: int, members: Iterable[Member]) -> None:
        for member in members:
            if member.is_bot:
                continue
            await self.challenge(chat_id, member)

    async def challenge(self, chat_id: int, member: Member) -> None:
        """Restrict the member, then post the verification button"""
        await self.client.restrict(chat_id, member.id, RESTRICT_ALL)
        token = VerificationToken(chat_id=chat_id, user_id=member.id)
        button = InlineKeyboardButton(TEXTS["verify_button"], callback_data=token.encode())
        await self.client.send_message(chat_id, self.welcome_text(member), button=button)
        logging.info(f"Challenged {member.id} in {chat_id}")

    async def follows_required_channel(self, user_id: int) -> bool:
        if not self.required_channel:
            return True
        status = await self.client.get_member_status(self.required_channel, user_id)
        return status in MEMBER_OK_STATUSES

    async def on_click(self, callback_query_id: str, actor_id: int, data: Optional[str]) -> bool:
        """Resolve a button click. Returns True when the member got verified."""
        if not VerificationToken.matches(data):
            await self.client.answer_callback(callback_query_id, TEXTS["unknown_action"])
            return False

        try:
            token = VerificationToken.decode(data)
        except MalformedTokenError as e:
            logging.warning(f"Ignoring click from {actor_id}: {e}")
            await self.client.answer_callback(callback_query_id, TEXTS["unknown_action"])
            return False

        if actor_id != token.user_id:
            await self.client.answer_callback(
                callback_query_id, TEXTS["verify_wrong_user"], alert=True
            )
            return False

        if not await self.follows_required_channel(actor_id):
            await self.client.answer_callback(
                callback_query_id,
                TEXTS["verify_follow_channel"].format(channel=self.required_channel),
                alert=True,
            )
            return False

        await self.client.restrict(token.chat_id, token.user_id, RESTORE_ALL)
        await self.client.answer_callback(callback_query_id, TEXTS["verify_success"])
        await self.client.send_message(token.chat_id, TEXTS["verify_announcement"])
        logging.info(f"Verified {token.user_id} in {token.chat_id}")
        return True
