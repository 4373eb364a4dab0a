"""
capsule_bot/routers/commands.py
-------------------------------
/start and /help. Neither touches the composing state.
"""
from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

from capsule_bot import texts
from capsule_bot.keyboards import main_menu
from capsule_bot.utils import answer

router = Router(name="commands")


@router.message(CommandStart())
async def cmd_start(msg: Message):
    await answer(msg, texts.START, reply_markup=main_menu().as_markup(resize_keyboard=True))


@router.message(Command("help"))
async def cmd_help(msg: Message):
    await answer(msg, texts.HELP)
