"""Process entrypoint: Telegram polling plus the optional invitation page endpoint."""

from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage

from src.app import create_app
from src.bot.router import router
from src.config.logging import configure_logging
from src.config.settings import load_settings
from src.rsvp.server import start_web

logger = logging.getLogger(__name__)


async def main() -> None:
    """Run the Telegram bot polling loop."""

    settings = load_settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    await app.pool.open(wait=True)

    bot = Bot(token=settings.telegram_bot_token, default=DefaultBotProperties(parse_mode=None))
    dp = Dispatcher(storage=MemoryStorage())
    dp.include_router(router)

    if settings.bot_username:
        logger.info("invite links use https://t.me/%s?start=<guest_id>", settings.bot_username)

    runner = None
    try:
        if settings.http_port:
            runner = await start_web(app, settings.http_host, settings.http_port)
        await dp.start_polling(bot, app=app)
    finally:
        logger.info("shutting down")
        if runner is not None:
            await runner.cleanup()
        await app.pool.close()


if __name__ == "__main__":
    asyncio.run(main())
