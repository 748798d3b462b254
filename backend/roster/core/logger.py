# backend/roster/core/logger.py

import logging
import sys
from typing import Any

LOGGER_NAME = "roster"

# LogRecord attributes that are not "extra" fields
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class RedactingFormatter(logging.Formatter):
    """Plain text formatter that appends `extra` fields, with secrets masked."""

    SENSITIVE_KEYS = {"password", "secretword", "secret_word", "token", "authorization"}

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            k: self._sanitize(k, v)
            for k, v in record.__dict__.items()
            if k not in _RESERVED and not k.startswith("_")
        }
        if extras:
            line += " " + " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return line

    def _sanitize(self, key: str, value: Any) -> Any:
        if key.lower() in self.SENSITIVE_KEYS:
            return "***"
        return value


def configure_logging(level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # idempotent: uvicorn --reload and tests import main more than once
    if not any(getattr(h, "_roster_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(RedactingFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handler._roster_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
