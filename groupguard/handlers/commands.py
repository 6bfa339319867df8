"""
Admin commands driven by replying to the target's message:

    /ban [minutes]  mute; indefinite without a valid positive duration
    /banl           kick: ban immediately followed by unban-if-banned
    /unban          lift both a mute and a ban
"""
import logging
import time
from typing import Callable, List, Optional, Tuple

from ..config.constants import TEXTS
from ..models import Member
from ..services.admins import AdminOracle
from ..services.client import ChatClient, RESTRICT_ALL, RESTORE_ALL

COMMANDS = ("ban", "banl", "unban")


def parse_command(text: str) -> Optional[Tuple[str, List[str]]]:
    """Split "/ban@SomeBot 60" into ("ban", ["60"]); None for anything that isn't an admin command"""
    parts = text.split()
    if not parts or not parts[0].startswith("/"):
        return None
    name = parts[0][1:].split("@", 1)[0].lower()
    if name not in COMMANDS:
        return None
    return name, parts[1:]


def parse_duration_minutes(arg: Optional[str]) -> Optional[int]:
    """Positive whole minutes, or None meaning indefinite"""
    if not arg:
        return None
    try:
        minutes = int(arg)
    except ValueError:
        return None
    if minutes <= 0:
        return None
    return minutes


class CommandProcessor:
    def __init__(
        self,
        client: ChatClient,
        admin_oracle: AdminOracle,
        clock: Callable[[], float] = time.time,
    ):
        self.client = client
        self.admin_oracle = admin_oracle
        self.clock = clock

    async def handle(
        self,
        chat_id: int,
        message_id: int,
        command: str,
        args: List[str],
        sender_id: Optional[int],
        target: Optional[Member],
    ) -> bool:
        """Run an admin command. Returns True if a moderation action was issued."""
        if sender_id is None or not await self.admin_oracle.is_admin(chat_id, sender_id):
            await self.client.send_message(
                chat_id, TEXTS["no_permission"].format(command=command), reply_to=message_id
            )
            logging.info(f"Denied /{command} from {sender_id} in {chat_id}")
            return False

        if target is None:
            await self.client.send_message(chat_id, TEXTS[f"{command}_usage"], reply_to=message_id)
            return False

        if command == "ban":
            await self.mute(chat_id, message_id, target, args[0] if args else None)
        elif command == "banl":
            await self.kick(chat_id, message_id, target)
        elif command == "unban":
            await self.lift(chat_id, message_id, target)
        else:
            raise ValueError(f"Unknown command: {command}")
        return True

    async def mute(self, chat_id: int, message_id: int, target: Member, duration_arg: Optional[str]) -> None:
        minutes = parse_duration_minutes(duration_arg)
        if minutes is None:
            await self.client.restrict(chat_id, target.id, RESTRICT_ALL)
            text = TEXTS["ban_done_forever"]
        else:
            until = int(self.clock()) + minutes * 60
            await self.client.restrict(chat_id, target.id, RESTRICT_ALL, until=until)
            text = TEXTS["ban_done_minutes"].format(minutes=minutes)
        await self.client.send_message(chat_id, text, reply_to=message_id)
        logging.info(f"Muted {target.id} in {chat_id} for {minutes or 'indefinite'} minutes")

    async def kick(self, chat_id: int, message_id: int, target: Member) -> None:
        # Two independent calls: between them the member is momentarily banned
        await self.client.ban(chat_id, target.id)
        await self.client.unban(chat_id, target.id, only_if_banned=True)
        await self.client.send_message(chat_id, TEXTS["banl_done"], reply_to=message_id)
        logging.info(f"Kicked {target.id} from {chat_id}")

    async def lift(self, chat_id: int, message_id: int, target: Member) -> None:
        await self.client.restrict(chat_id, target.id, RESTORE_ALL)
        await self.client.unban(chat_id, target.id, only_if_banned=True)
        await self.client.send_message(chat_id, TEXTS["unban_done"], reply_to=message_id)
        logging.info(f"Lifted restrictions on {target.id} in {chat_id}")
