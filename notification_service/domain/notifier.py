"""Notifier: validation in front of an injected message sender.

Mental model refresher:
- Domain modules hold the notification rules.
- They decide whether a request is well formed before anything is sent.
- They never pick a transport; the sender is handed in at construction.
"""

from __future__ import annotations

import logging

from ..errors import InvalidArgumentError, NullDependencyError
from ..types import MessageSender

logger = logging.getLogger(__name__)


class Notifier:
    """Send notifications through one injected sender."""

    __slots__ = ("_sender",)

    def __init__(self, sender: MessageSender) -> None:
        if sender is None:
            raise NullDependencyError("sender")
        if not callable(sender):
            raise TypeError("sender must be callable")
        object.__setattr__(self, "_sender", sender)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __reduce__(self) -> tuple[type[Notifier], tuple[MessageSender]]:
        return (type(self), (self._sender,))

    @property
    def sender(self) -> MessageSender:
        return self._sender

    def notify(self, message: str, recipient: str) -> None:
        """Validate the request, then hand it to the sender unchanged.

        Raises `InvalidArgumentError` for an empty message or recipient; the
        sender is not called in that case. Sender errors propagate as-is.
        """
        if not message:
            logger.debug("notification rejected: empty message")
            raise InvalidArgumentError("message")
        if not recipient:
            logger.debug("notification rejected: empty recipient")
            raise InvalidArgumentError("recipient")

        logger.debug("delegating notification to %r", self._sender)
        self._sender(message=message, recipient=recipient)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sender={self._sender!r})"
