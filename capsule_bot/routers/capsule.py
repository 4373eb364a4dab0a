"""
capsule_bot/routers/capsule.py
------------------------------
Two-state flow per chat (Idle / Composing):
• "Write a capsule" button – chat starts composing, prompt is sent
• next free text while composing – stored as the sender's capsule
• "Get my capsule" button – delivery check for the sender
• anything else – fallback hint, state untouched

The button labels win over capsule text, so pressing a button while
composing does not store the label. Commands never reach the free-text
handler.

Store, tracker and delivery are injected by the dispatcher (see
`capsule_bot.entry.build_dispatcher`).
"""
from __future__ import annotations

import logging

from aiogram import Bot, F, Router
from aiogram.types import Message

from capsule_bot import texts
from capsule_bot.delivery import CapsuleDelivery
from capsule_bot.store import CapsuleStore
from capsule_bot.utils import WaitingTracker, answer, delete_quietly

router = Router(name="capsule")
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Buttons
# -----------------------------------------------------------------------------

@router.message(F.text == texts.BTN_COMPOSE)
async def compose_start(msg: Message, tracker: WaitingTracker):
    await tracker.begin_waiting(msg.chat.id)
    await answer(msg, texts.COMPOSE_PROMPT)


@router.message(F.text == texts.BTN_RETRIEVE)
async def retrieve(msg: Message, bot: Bot, delivery: CapsuleDelivery):
    outcome = await delivery.deliver(bot, msg.from_user.id)
    logger.debug("Retrieve by %s: %s", msg.from_user.id, outcome.value)


# -----------------------------------------------------------------------------
# Free text: capsule body or fallback
# -----------------------------------------------------------------------------

@router.message(F.text, ~F.text.startswith("/"))
async def free_text(msg: Message, store: CapsuleStore, tracker: WaitingTracker):
    if not await tracker.consume_if_waiting(msg.chat.id):
        await answer(msg, texts.FALLBACK)
        return

    uid = msg.from_user.id
    await store.put(uid, msg.text)
    logger.info("Capsule stored for user %s (chat %s)", uid, msg.chat.id)

    # hide the capsule until release
    await delete_quietly(msg)
    await answer(msg, texts.CAPSULE_SAVED)


@router.message(~F.text)
async def non_text(msg: Message):
    await answer(msg, texts.FALLBACK)
