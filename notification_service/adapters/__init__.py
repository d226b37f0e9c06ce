"""Adapter layer: sender implementations."""

from .fake_senders import format_sms_delivery_line, send_sms_via_console

__all__ = [
    "format_sms_delivery_line",
    "send_sms_via_console",
]
