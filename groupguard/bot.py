import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from telegram import Update
from telegram.ext import Application, ApplicationBuilder, ContextTypes

from .config import BotConfig, setup_logging
from .handlers import CommandProcessor, KeywordEnforcer, MembershipGate, UpdateRouter, register_moderation
from .services import (
    AdminOracle, ChatClient, KeywordCache, KeywordSource, LiveQueryAdminOracle,
    RemoteKeywordSource, StaticAdminOracle, StaticKeywordSource,
)


def build_keyword_source(config: BotConfig) -> Optional[KeywordSource]:
    if config.keywords_url:
        return RemoteKeywordSource(config.keywords_url)
    if config.banned_keywords:
        return StaticKeywordSource.from_inline(config.banned_keywords)
    return None


def build_admin_oracle(config: BotConfig, client: ChatClient) -> AdminOracle:
    if config.admin_ids is not None:
        return StaticAdminOracle(config.admin_ids)
    return LiveQueryAdminOracle(client)


def build_router(config: BotConfig, client: ChatClient) -> UpdateRouter:
    keyword_cache = KeywordCache(build_keyword_source(config), ttl_seconds=config.keywords_ttl_seconds)
    gate = MembershipGate(client, config.required_channel, config.verify_timeout_seconds)
    commands = CommandProcessor(client, build_admin_oracle(config, client))
    enforcer = KeywordEnforcer(client, keyword_cache, config.ban_duration_seconds)
    return UpdateRouter(gate, commands, enforcer)


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logging.error("Unhandled error while processing update", exc_info=context.error)


def build_application(config: BotConfig) -> Application:
    app = ApplicationBuilder().token(config.telegram_token).build()
    client = ChatClient(app.bot)
    register_moderation(app, build_router(config, client))
    app.add_error_handler(on_error)
    return app


def main():
    load_dotenv()
    setup_logging()

    try:
        config = BotConfig.from_env()
    except ValueError as e:
        logging.critical(f"Configuration error: {e}")
        sys.exit(1)

    app = build_application(config)
    allowed_updates = [Update.MESSAGE, Update.CALLBACK_QUERY]

    logging.info(f"Required channel: {config.required_channel or 'none'}")
    logging.info(f"Keyword source: {config.keywords_url or ('inline' if config.banned_keywords else 'none')}")
    logging.info(f"Admin source: {'static list' if config.admin_ids is not None else 'live query'}")

    if config.webhook_url:
        webhook_url = f"{config.webhook_url.rstrip('/')}/{config.webhook_path}"
        logging.info(f"Bot is starting webhook on {config.webhook_listen}:{config.webhook_port}…")
        app.run_webhook(
            listen=config.webhook_listen,
            port=config.webhook_port,
            url_path=config.webhook_path,
            webhook_url=webhook_url,
            secret_token=config.webhook_secret,
            allowed_updates=allowed_updates,
        )
    else:
        logging.info("Bot is starting polling…")
        app.run_polling(allowed_updates=allowed_updates)


if __name__ == '__main__':
    main()
