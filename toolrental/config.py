import json
import logging
import os
import sys
from datetime import date

import pytz
from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def load_env() -> str:
    """Load the nearest .env at or above the working directory; return its path ('' if none)."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)
    return path


load_env()


def _split_env(name: str) -> list:
    raw = os.getenv(name) or ""
    return [part.strip() for part in raw.split(",") if part.strip()]


class Config:
    """Configuration for the tool rental checkout."""

    # Business timezone: aware checkout datetimes are read in this zone
    TIMEZONE = os.getenv("TOOLRENTAL_TIMEZONE", "UTC")

    # Comma-separated ISO dates treated as holidays by create_service()
    HOLIDAYS = _split_env("TOOLRENTAL_HOLIDAYS")

    LOG_LEVEL = os.getenv("TOOLRENTAL_LOG_LEVEL", "INFO")

    @classmethod
    def holiday_dates(cls) -> list:
        """Parse HOLIDAYS into dates; raise ValueError on a bad entry."""
        return [date.fromisoformat(s) for s in cls.HOLIDAYS]

    @classmethod
    def validate(cls) -> bool:
        """Check the timezone and holiday list; log what is wrong."""
        problems = []
        if cls.TIMEZONE not in pytz.all_timezones_set:
            problems.append(f"unknown timezone {cls.TIMEZONE!r}")
        try:
            cls.holiday_dates()
        except ValueError as e:
            problems.append(f"bad holiday date ({e})")

        if problems:
            logger.warning(f"Invalid configuration: {', '.join(problems)}")
            return False
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
        }
        if hasattr(record, "tool_code"):
            log_record["tool_code"] = record.tool_code
        return json.dumps(log_record)


def setup_logging(level=None):
    """Configure structured JSON logging on the root logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(level or Config.LOG_LEVEL)
    # Remove existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    return handler
