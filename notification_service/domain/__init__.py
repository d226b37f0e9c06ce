"""Domain layer: notification rules."""

from .notifier import Notifier

__all__ = [
    "Notifier",
]
