from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import List, Optional

import pytest
from aiogram.exceptions import TelegramNetworkError

from capsule_bot.delivery import CapsuleDelivery
from capsule_bot.store import CapsuleStore
from capsule_bot.utils.state import WaitingTracker

RELEASE = datetime(2025, 9, 2, tzinfo=timezone.utc)
BEFORE = datetime(2025, 6, 1, tzinfo=timezone.utc)
AFTER = datetime(2025, 9, 3, tzinfo=timezone.utc)


def network_error() -> TelegramNetworkError:
    return TelegramNetworkError(method=None, message="connection reset")


class FakeBot:
    """Records outbound messages; flip ``fail`` to simulate a dead transport."""

    def __init__(self):
        self.sent: List[SimpleNamespace] = []
        self.fail = False

    async def send_message(self, chat_id: int, text: str, **kwargs):
        if self.fail:
            raise network_error()
        self.sent.append(SimpleNamespace(chat_id=chat_id, text=text, kwargs=kwargs))

    def texts_to(self, chat_id: int) -> List[str]:
        return [m.text for m in self.sent if m.chat_id == chat_id]


class FakeMessage:
    def __init__(
        self,
        text: Optional[str],
        user_id: int = 42,
        chat_id: Optional[int] = None,
        message_id: int = 1,
        fail_delete: bool = False,
    ):
        self.text = text
        self.from_user = SimpleNamespace(id=user_id)
        self.chat = SimpleNamespace(id=user_id if chat_id is None else chat_id)
        self.message_id = message_id
        self.answers: List[SimpleNamespace] = []
        self.deleted = False
        self._fail_delete = fail_delete

    async def answer(self, text: str, **kwargs):
        self.answers.append(SimpleNamespace(text=text, kwargs=kwargs))

    async def delete(self):
        if self._fail_delete:
            raise network_error()
        self.deleted = True

    @property
    def answer_texts(self) -> List[str]:
        return [a.text for a in self.answers]


class Clock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def bot() -> FakeBot:
    return FakeBot()


@pytest.fixture
def store() -> CapsuleStore:
    return CapsuleStore()


@pytest.fixture
def tracker() -> WaitingTracker:
    return WaitingTracker()


@pytest.fixture
def clock() -> Clock:
    return Clock(BEFORE)


@pytest.fixture
def delivery(store, clock) -> CapsuleDelivery:
    return CapsuleDelivery(store, RELEASE, clock=clock)
