"""
capsule_bot/entry.py
--------------------
Bootstrap script: validates settings, authorizes the bot, wires the routers
and the notifier, then polls until SIGINT/SIGTERM.
Keep this file tiny: all logic lives in the routers or helpers.
"""
from __future__ import annotations

import asyncio
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError
from aiogram.utils.token import TokenValidationError

from capsule_bot.config import ConfigError, settings
from capsule_bot.delivery import CapsuleDelivery
from capsule_bot.logger import configure_logging, logger
from capsule_bot.middlewares.error_logger import ErrorLogger
from capsule_bot.notifier import Notifier
from capsule_bot.store import CapsuleStore
from capsule_bot.utils import WaitingTracker

from capsule_bot.routers.commands import router as commands_router
from capsule_bot.routers.capsule import router as capsule_router


def build_dispatcher(
    store: CapsuleStore, tracker: WaitingTracker, delivery: CapsuleDelivery
) -> Dispatcher:
    # workflow data: handlers ask for `store`, `tracker`, `delivery` by name
    dp = Dispatcher(store=store, tracker=tracker, delivery=delivery)
    dp.update.outer_middleware(ErrorLogger())

    dp.include_router(commands_router)
    dp.include_router(capsule_router)
    return dp


# ----------------------------------------------------------------------------
# Startup / shutdown helpers
# ----------------------------------------------------------------------------

async def _authorize() -> Bot | None:
    try:
        bot = Bot(
            settings.BOT_TOKEN,
            default=DefaultBotProperties(parse_mode=ParseMode.HTML),
        )
    except TokenValidationError as exc:
        logger.critical("Bot token is malformed: %s", exc)
        return None

    try:
        me = await bot.get_me()
    except TelegramAPIError as exc:
        logger.critical("Bot authorization failed: %s", exc)
        await bot.session.close()
        return None

    logger.info("Authorized as @%s", me.username)
    return bot


async def main() -> int:
    configure_logging()

    try:
        settings.validate()
        release_date = settings.release_date
    except ConfigError as exc:
        logger.critical("Invalid configuration: %s", exc)
        return 1

    bot = await _authorize()
    if bot is None:
        return 1

    store = CapsuleStore()
    tracker = WaitingTracker()
    delivery = CapsuleDelivery(store, release_date)
    notifier = Notifier(bot, delivery, settings.notify_interval)
    dp = build_dispatcher(store, tracker, delivery)

    logger.info("Capsules open on %s", release_date.isoformat())
    notifier.start()
    try:
        await dp.start_polling(bot, polling_timeout=settings.polling_timeout)
    finally:
        await notifier.stop()
        await bot.session.close()
        logger.info("Bot stopped")
    return 0


def run() -> None:
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    run()
