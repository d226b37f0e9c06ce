"""Notification primitives: a validating Notifier over injectable senders."""

from .adapters.fake_senders import format_sms_delivery_line, send_sms_via_console
from .application.demo import build_sms_notifier, send_sample_notification
from .domain.notifier import Notifier
from .errors import InvalidArgumentError, NotificationError, NullDependencyError
from .types import MessageSender

__all__ = [
    "InvalidArgumentError",
    "MessageSender",
    "NotificationError",
    "Notifier",
    "NullDependencyError",
    "build_sms_notifier",
    "format_sms_delivery_line",
    "send_sample_notification",
    "send_sms_via_console",
]
