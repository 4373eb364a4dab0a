"""Background sweep that re-attempts delivery for every stored capsule.

Before the release date each tick repeats the "wait N days" reminder; after
it, the first successful tick hands the capsule over and empties the slot.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from aiogram import Bot

from .delivery import CapsuleDelivery, Outcome

log = logging.getLogger(__name__)


class Notifier:
    def __init__(self, bot: Bot, delivery: CapsuleDelivery, interval: float = 30):
        self.bot = bot
        self.delivery = delivery
        self.interval = interval
        self._stopped = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    # ----------------------------- public API ---------------------------------
    def start(self) -> None:
        if self._task and not self._task.done():
            return
        self._stopped.clear()
        self._task = asyncio.create_task(self._run(), name="capsule-notifier")
        log.info("Notifier started, interval %ss", self.interval)

    async def stop(self) -> None:
        """Signal the loop and wait for it to exit."""
        self._stopped.set()
        task, self._task = self._task, None
        if task:
            await task
        log.info("Notifier stopped")

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def sweep(self) -> dict:
        """Run delivery once for every user currently holding a capsule."""
        user_ids = await self.delivery.store.user_ids()
        counts = {outcome: 0 for outcome in Outcome}
        for uid in user_ids:
            # a capsule retrieved through the button since the snapshot is skipped silently
            counts[await self.delivery.deliver(self.bot, uid, notify_empty=False)] += 1
        if user_ids:
            log.info(
                "Sweep over %s user(s): %s delivered, %s waiting, %s failed",
                len(user_ids),
                counts[Outcome.DELIVERED],
                counts[Outcome.WAITING],
                counts[Outcome.FAILED],
            )
        return counts

    # ----------------------------- internals ----------------------------------
    async def _run(self) -> None:
        while not self._stopped.is_set():
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                try:
                    await self.sweep()
                except Exception:      # noqa: BLE001
                    log.exception("Sweep failed; next tick in %ss", self.interval)
