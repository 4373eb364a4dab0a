"""
capsule_bot/utils/state.py
--------------------------
Per‑chat "composing" flag shared by the capsule router.

A chat id is present while the bot waits for the capsule text from that
chat. Handlers get the tracker injected by the dispatcher:

    async def handler(msg: Message, tracker: WaitingTracker):
        if await tracker.consume_if_waiting(msg.chat.id):
            ...
"""
from __future__ import annotations

import asyncio
from typing import Set


class WaitingTracker:
    def __init__(self):
        self._waiting: Set[int] = set()
        self._lock = asyncio.Lock()

    async def begin_waiting(self, chat_id: int) -> None:
        async with self._lock:
            self._waiting.add(chat_id)

    async def consume_if_waiting(self, chat_id: int) -> bool:
        """Clear the flag for ``chat_id`` and report whether it was set."""
        async with self._lock:
            if chat_id not in self._waiting:
                return False
            self._waiting.discard(chat_id)
            return True

    async def is_waiting(self, chat_id: int) -> bool:
        async with self._lock:
            return chat_id in self._waiting


__all__ = ["WaitingTracker"]
