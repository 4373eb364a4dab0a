"""Capsule retrieval shared by the "get capsule" button and the notifier sweep."""
from __future__ import annotations

import enum
import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from aiogram import Bot

from . import texts
from .store import CapsuleStore, TakeResult, utcnow
from .utils.replies import send_text

log = logging.getLogger(__name__)


class Outcome(enum.Enum):
    EMPTY = "empty"
    WAITING = "waiting"
    DELIVERED = "delivered"
    FAILED = "failed"  # capsule was released but the send failed; it was restored


def days_remaining(remaining: timedelta) -> int:
    """Whole days left, i.e. floor(hours / 24)."""
    return max(int(remaining.total_seconds() // 86400), 0)


def render(result: TakeResult, release_date: datetime) -> str:
    if not result.found:
        return texts.NOTHING_STORED
    if not result.ready:
        return texts.wait_more(days_remaining(result.remaining), release_date)
    return texts.capsule_opened(result.capsule.text)


class CapsuleDelivery:
    def __init__(
        self,
        store: CapsuleStore,
        release_date: datetime,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.release_date = release_date
        self.clock = clock

    async def deliver(
        self,
        bot: Bot,
        user_id: int,
        now: Optional[datetime] = None,
        notify_empty: bool = True,
    ) -> Outcome:
        """Check the user's capsule against the release date and message them.

        A released capsule leaves the store before sending; if the send fails
        it is put back so the next attempt can pick it up. With
        ``notify_empty=False`` a user without a capsule gets no message.
        """
        result = await self.store.take_if_ready(user_id, now or self.clock(), self.release_date)
        if not result.found and not notify_empty:
            return Outcome.EMPTY
        text = render(result, self.release_date)

        sent = await send_text(bot, user_id, text)

        if not result.found:
            return Outcome.EMPTY
        if not result.ready:
            return Outcome.WAITING

        if not sent:
            await self.store.restore(result.capsule)
            log.info("Capsule for %s restored after failed delivery", user_id)
            return Outcome.FAILED
        log.info("Capsule delivered to %s", user_id)
        return Outcome.DELIVERED
