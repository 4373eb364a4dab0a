import os
from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()

RELEASE_DATE_FORMAT = "%Y-%b-%d"


class ConfigError(RuntimeError):
    """Raised when the environment cannot produce a usable configuration."""


def parse_release_date(raw: str) -> datetime:
    """Parse "2025-Sep-02" into an aware UTC datetime at midnight."""
    try:
        parsed = datetime.strptime(raw.strip(), RELEASE_DATE_FORMAT)
    except ValueError as exc:
        raise ConfigError(f"RELEASE_DATE {raw!r} is not in YYYY-Mon-DD form") from exc
    return parsed.replace(tzinfo=timezone.utc)


def _number(name: str, raw, kind):
    try:
        return kind(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


class Settings:
    BOT_TOKEN: str = os.getenv("BOT_TOKEN") or os.getenv("TELEGRAM_TOKEN", "")

    # Kept raw; converted (and checked) by the properties below
    RELEASE_DATE: str = os.getenv("RELEASE_DATE", "2025-Sep-02")
    NOTIFY_INTERVAL: str = os.getenv("NOTIFY_INTERVAL", "30")
    POLLING_TIMEOUT: str = os.getenv("POLLING_TIMEOUT", "60")

    LOG_FILE: str = os.getenv("LOG_FILE", "logs/bot.log")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def release_date(self) -> datetime:
        return parse_release_date(self.RELEASE_DATE)

    @property
    def notify_interval(self) -> float:
        interval = _number("NOTIFY_INTERVAL", self.NOTIFY_INTERVAL, float)
        if interval <= 0:
            raise ConfigError(f"NOTIFY_INTERVAL must be positive, got {interval}")
        return interval

    @property
    def polling_timeout(self) -> int:
        return _number("POLLING_TIMEOUT", self.POLLING_TIMEOUT, int)

    # Startup sanity‑checks; the entry point treats any failure as fatal
    def validate(self):
        if not self.BOT_TOKEN:
            raise ConfigError("Missing required setting: BOT_TOKEN")
        # each property raises ConfigError on a bad value
        for name in ("notify_interval", "polling_timeout", "release_date"):
            getattr(self, name)


settings = Settings()
