"""Timed single-slot toast notifications shown under the grid."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

MESSAGE_TTL_SECONDS = 2.0


@dataclass(frozen=True)
class Message:
    text: str
    color: str
    expires_at: float


class MessageQueue:
    """Append-only toast queue of which only the newest live entry is shown.

    Expired entries are dropped whenever the queue is read. ``clock`` defaults
    to ``time.monotonic`` and is injectable for tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, ttl: float = MESSAGE_TTL_SECONDS) -> None:
        self._clock = clock
        self._ttl = ttl
        self._messages: list[Message] = []

    def __len__(self) -> int:
        return len(self._messages)

    def push(self, text: str, color: str) -> Message:
        message = Message(text=text, color=color, expires_at=self._clock() + self._ttl)
        self._messages.append(message)
        return message

    def prune(self, now: float | None = None) -> None:
        now = self._clock() if now is None else now
        self._messages = [message for message in self._messages if message.expires_at > now]

    def current(self, now: float | None = None) -> Message | None:
        """Prune expired entries and return the most recently pushed survivor."""
        self.prune(now)
        if not self._messages:
            return None
        return self._messages[-1]
