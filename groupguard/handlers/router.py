"""
Update routing: new members and button clicks go to the gate, group text
goes to the admin commands or to keyword enforcement.
"""
from telegram import Update
from telegram.ext import CallbackQueryHandler, ContextTypes, MessageHandler, filters

from ..config.constants import GROUP_CHAT_TYPES
from ..models import Member
from ..utils.decorators import log_errors
from .commands import CommandProcessor, parse_command
from .gate import MembershipGate
from .moderation import KeywordEnforcer


class UpdateRouter:
    def __init__(self, gate: MembershipGate, commands: CommandProcessor, enforcer: KeywordEnforcer):
        self.gate = gate
        self.commands = commands
        self.enforcer = enforcer

    @log_errors
    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.message
        if message is None:
            return
        chat = message.chat

        if message.new_chat_members:
            members = [Member.from_user(user) for user in message.new_chat_members]
            await self.gate.on_join(chat.id, members)
            return

        text = message.text
        if not text or chat.type not in GROUP_CHAT_TYPES:
            return

        sender = Member.from_user(message.from_user) if message.from_user else None

        command = parse_command(text)
        if command:
            name, args = command
            reply = message.reply_to_message
            target = Member.from_user(reply.from_user) if reply and reply.from_user else None
            await self.commands.handle(
                chat.id,
                message.message_id,
                name,
                args,
                sender.id if sender else None,
                target,
            )
            return

        await self.enforcer.enforce(chat.id, message.message_id, sender, text)

    @log_errors
    async def handle_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        query = update.callback_query
        if query is None:
            return
        await self.gate.on_click(query.id, query.from_user.id, query.data)


def register_moderation(app, router: UpdateRouter) -> None:
    """Register the router with the bot application."""
    app.add_handler(
        MessageHandler(
            filters.UpdateType.MESSAGE & (filters.StatusUpdate.NEW_CHAT_MEMBERS | filters.TEXT),
            router.handle_message,
        )
    )
    app.add_handler(CallbackQueryHandler(router.handle_callback))
