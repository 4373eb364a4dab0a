"""In-memory capsule store: one capsule per user, released after a fixed date.

Every access goes through an ``asyncio.Lock`` so the polling handlers and
the notifier task never interleave a read-modify-write on the same map.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Capsule:
    user_id: int
    text: str
    stored_at: datetime = field(default_factory=utcnow)


@dataclass
class TakeResult:
    """Outcome of :meth:`CapsuleStore.take_if_ready`.

    ``capsule`` is ``None`` when the user has nothing stored. When a capsule
    exists but is not ready yet, it is returned for inspection and stays in
    the store; ``remaining`` then holds the time left until release.
    """

    capsule: Optional[Capsule]
    ready: bool
    remaining: timedelta = timedelta(0)

    @property
    def found(self) -> bool:
        return self.capsule is not None


class CapsuleStore:
    def __init__(self):
        self._capsules: Dict[int, Capsule] = {}
        self._lock = asyncio.Lock()

    async def put(self, user_id: int, text: str, now: Optional[datetime] = None) -> Capsule:
        """Store ``text`` for ``user_id``, overwriting any unretrieved capsule."""
        capsule = Capsule(user_id, text, now or utcnow())
        async with self._lock:
            self._capsules[user_id] = capsule
        return capsule

    async def get(self, user_id: int) -> Optional[Capsule]:
        async with self._lock:
            return self._capsules.get(user_id)

    async def take_if_ready(
        self, user_id: int, now: datetime, release_date: datetime
    ) -> TakeResult:
        async with self._lock:
            capsule = self._capsules.get(user_id)
            if capsule is None:
                return TakeResult(capsule=None, ready=False)

            remaining = release_date - now
            if remaining > timedelta(0):
                return TakeResult(capsule=capsule, ready=False, remaining=remaining)

            del self._capsules[user_id]
            return TakeResult(capsule=capsule, ready=True)

    async def restore(self, capsule: Capsule) -> bool:
        """Put back a capsule whose delivery failed.

        A capsule stored by the user after it was taken wins; returns whether
        the old one was put back.
        """
        async with self._lock:
            if capsule.user_id in self._capsules:
                return False
            self._capsules[capsule.user_id] = capsule
            return True

    async def user_ids(self) -> List[int]:
        async with self._lock:
            return list(self._capsules)

    def __len__(self) -> int:
        return len(self._capsules)
