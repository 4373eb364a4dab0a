"""Outbound sends that log instead of raising.

A failed reply must never undo or block a state change that already
happened, so handlers go through these helpers.
"""
from __future__ import annotations

import logging

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Message

logger = logging.getLogger(__name__)


async def send_text(bot: Bot, chat_id: int, text: str, **kwargs) -> bool:
    try:
        await bot.send_message(chat_id=chat_id, text=text, **kwargs)
    except TelegramAPIError as e:
        logger.warning("Send to %s failed: %s", chat_id, e)
        return False
    return True


async def answer(msg: Message, text: str, **kwargs) -> bool:
    try:
        await msg.answer(text, **kwargs)
    except TelegramAPIError as e:
        logger.warning("Reply in %s failed: %s", msg.chat.id, e)
        return False
    return True


async def delete_quietly(msg: Message) -> bool:
    try:
        await msg.delete()
    except TelegramAPIError as e:
        logger.warning("Could not delete message %s in %s: %s", msg.message_id, msg.chat.id, e)
        return False
    return True
