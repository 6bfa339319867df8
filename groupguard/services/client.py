"""
Thin adapter over telegram.Bot.

Every call reports success instead of raising: Telegram errors are logged
and turned into a falsy return value. No retries.
"""
import logging
from typing import Optional, Union, Iterable, Set

from telegram import (
    Bot, ChatPermissions, InlineKeyboardButton, InlineKeyboardMarkup, ReplyParameters,
)
from telegram.error import TelegramError

ChatRef = Union[int, str]

RESTRICT_ALL = ChatPermissions.no_permissions()

RESTORE_ALL = ChatPermissions(
    can_send_messages=True,
    can_send_audios=True,
    can_send_documents=True,
    can_send_photos=True,
    can_send_videos=True,
    can_send_video_notes=True,
    can_send_voice_notes=True,
    can_send_polls=True,
    can_send_other_messages=True,
    can_add_web_page_previews=True,
    can_change_info=False,
    can_invite_users=True,
    can_pin_messages=False,
)


class ChatClient:
    """Outbound Bot API calls used by the moderation handlers"""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send_message(
        self,
        chat_id: ChatRef,
        text: str,
        reply_to: Optional[int] = None,
        button: Optional[InlineKeyboardButton] = None,
    ) -> bool:
        reply_markup = InlineKeyboardMarkup([[button]]) if button else None
        reply_parameters = (
            ReplyParameters(message_id=reply_to, allow_sending_without_reply=True)
            if reply_to else None
        )
        try:
            await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                reply_parameters=reply_parameters,
                reply_markup=reply_markup,
            )
            return True
        except TelegramError as e:
            logging.error(f"sendMessage failed in {chat_id}: {e}")
            return False

    async def delete_message(self, chat_id: ChatRef, message_id: int) -> bool:
        try:
            return await self.bot.delete_message(chat_id=chat_id, message_id=message_id)
        except TelegramError as e:
            logging.error(f"deleteMessage {message_id} failed in {chat_id}: {e}")
            return False

    async def restrict(
        self,
        chat_id: ChatRef,
        user_id: int,
        permissions: ChatPermissions,
        until: Optional[int] = None,
    ) -> bool:
        try:
            return await self.bot.restrict_chat_member(
                chat_id=chat_id,
                user_id=user_id,
                permissions=permissions,
                until_date=until,
            )
        except TelegramError as e:
            logging.error(f"restrictChatMember {user_id} failed in {chat_id}: {e}")
            return False

    async def ban(self, chat_id: ChatRef, user_id: int, until: Optional[int] = None) -> bool:
        try:
            return await self.bot.ban_chat_member(chat_id=chat_id, user_id=user_id, until_date=until)
        except TelegramError as e:
            logging.error(f"banChatMember {user_id} failed in {chat_id}: {e}")
            return False

    async def unban(self, chat_id: ChatRef, user_id: int, only_if_banned: bool = True) -> bool:
        try:
            return await self.bot.unban_chat_member(
                chat_id=chat_id, user_id=user_id, only_if_banned=only_if_banned
            )
        except TelegramError as e:
            logging.error(f"unbanChatMember {user_id} failed in {chat_id}: {e}")
            return False

    async def get_member_status(self, chat_id: ChatRef, user_id: int) -> Optional[str]:
        """Membership status string ("member", "left", ...) or None if the lookup failed"""
        try:
            member = await self.bot.get_chat_member(chat_id=chat_id, user_id=user_id)
        except TelegramError as e:
            logging.error(f"getChatMember {user_id} failed in {chat_id}: {e}")
            return None
        return member.status

    async def get_admin_ids(self, chat_id: ChatRef) -> Optional[Set[int]]:
        """Ids of current administrators, or None if the lookup failed"""
        try:
            admins: Iterable = await self.bot.get_chat_administrators(chat_id=chat_id)
        except TelegramError as e:
            logging.error(f"getChatAdministrators failed in {chat_id}: {e}")
            return None
        return {admin.user.id for admin in admins}

    async def answer_callback(
        self, callback_query_id: str, text: Optional[str] = None, alert: bool = False
    ) -> bool:
        try:
            return await self.bot.answer_callback_query(
                callback_query_id=callback_query_id, text=text, show_alert=alert
            )
        except TelegramError as e:
            logging.error(f"answerCallbackQuery failed: {e}")
            return False
