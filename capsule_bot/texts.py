"""User-facing strings. Message bodies are HTML (the bot's default parse mode)."""
from __future__ import annotations

from datetime import datetime

from aiogram import html

BTN_COMPOSE = "✍️ Write a capsule"
BTN_RETRIEVE = "📬 Get my capsule"

START = (
    "Hi there! 🌟 I keep time capsules.\n"
    "Write one now and I will hand it back to you when the day comes."
)

HELP = (
    "🤗 Here is what I can do:\n\n"
    f"1️⃣ {html.bold('Write a capsule')}: press “{BTN_COMPOSE}” and send me your "
    "thoughts and dreams for the future.\n\n"
    f"2️⃣ {html.bold('Get a capsule')}: once the time has come, press “{BTN_RETRIEVE}”. "
    "I will remind you about it as well!\n\n"
    "Sending a new capsule replaces the one you wrote before. 🌈"
)

COMPOSE_PROMPT = "Hooray! 🎉 Please write your time capsule. I can't wait to read it!"
CAPSULE_SAVED = "Time capsule saved! 🎊 It will now wait for its moment."
FALLBACK = "Oops, I didn't quite get that. 🤔 Try again or use /help."
NOTHING_STORED = "You don't have a time capsule yet. Let's write one together! ✍️"


def human_date(moment: datetime) -> str:
    return f"{moment:%B} {moment.day}, {moment.year}"


def wait_more(days: int, release_date: datetime) -> str:
    unit = "day" if days == 1 else "days"
    return (
        f"Hold on, {days} more {unit} until {human_date(release_date)}! ⏳ "
        "Don't worry, your capsule will be ready soon."
    )


def capsule_opened(text: str) -> str:
    return f"Here is your time capsule:\n\n{html.quote(text)}\n\n🎈 I hope it brings you joy!"
