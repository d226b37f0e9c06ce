"""Shared type aliases for the notification package."""

from __future__ import annotations

from typing import Protocol


class MessageSender(Protocol):
    """Capability to deliver one message to one recipient.

    Any callable accepting ``message`` and ``recipient`` as keywords fits;
    transports are plain functions.
    """

    def __call__(self, *, message: str, recipient: str) -> None: ...
