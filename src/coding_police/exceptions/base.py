"""Base exception for Coding Police."""

from typing import Mapping, Optional


class CodingPoliceError(Exception):
    """Base exception for all Coding Police errors.

    ``message`` says what failed. ``details`` holds string context; a
    ``reason`` entry is rendered right after the message and the remaining
    entries follow in parentheses unless the message already shows them.
    """

    def __init__(self, message: str, details: Optional[Mapping[str, object]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: str(v) for k, v in (details or {}).items()}

    def __str__(self) -> str:
        reason = self.details.get("reason")
        text = f"{self.message}: {reason}" if reason else self.message
        extra = [f"{k}={v}" for k, v in self.details.items() if k != "reason" and v not in text]
        if extra:
            text = f"{text} ({', '.join(extra)})"
        return text
