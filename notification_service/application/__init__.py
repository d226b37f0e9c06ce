"""Application layer: composition of senders and notifiers."""

from .demo import (
    SAMPLE_MESSAGE,
    SAMPLE_RECIPIENT,
    build_sms_notifier,
    send_sample_notification,
)

__all__ = [
    "SAMPLE_MESSAGE",
    "SAMPLE_RECIPIENT",
    "build_sms_notifier",
    "send_sample_notification",
]
