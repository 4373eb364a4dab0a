import logging

from aiogram import BaseMiddleware
from aiogram.types import Update

logger = logging.getLogger(__name__)


class ErrorLogger(BaseMiddleware):
    """Outer update middleware: log any handler crash with the update id, then re-raise."""

    async def __call__(self, handler, event, data):
        try:
            return await handler(event, data)
        except Exception as exc:      # noqa: BLE001
            update_id = event.update_id if isinstance(event, Update) else None
            user = data.get("event_from_user")
            logger.exception(
                "Unhandled error in update %s from user %s: %s",
                update_id,
                user.id if user else None,
                exc,
            )
            raise
