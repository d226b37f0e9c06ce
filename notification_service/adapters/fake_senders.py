"""Fake sender adapters for local smoke tests.

Mental model refresher:
- This is outbound adapter code.
- In production, this is where provider SDK/API calls live (Twilio, SMTP, etc).
- Domain code calls these through an injected sender; the Notifier does not
  know which implementation is underneath.
"""

from __future__ import annotations


def format_sms_delivery_line(message: str, recipient: str) -> str:
    return f"{message} has been sent to {recipient} via SMS."


def send_sms_via_console(*, message: str, recipient: str) -> None:
    print(format_sms_delivery_line(message, recipient))
