"""Application wiring for the sample notification.

Mental model refresher:
- Application layer composes adapters and domain objects into a use-case.
- Picking the transport happens here and nowhere else; swapping SMS for
  another sender means changing `build_sms_notifier` only.
"""

from __future__ import annotations

from ..adapters.fake_senders import send_sms_via_console
from ..domain.notifier import Notifier

SAMPLE_MESSAGE = "Hello, this is your verification code"
SAMPLE_RECIPIENT = "0933873..."


def build_sms_notifier() -> Notifier:
    """Return a Notifier backed by the console SMS sender."""
    return Notifier(send_sms_via_console)


def send_sample_notification(notifier: Notifier | None = None) -> None:
    """Issue the one fixed sample notification."""
    if notifier is None:
        notifier = build_sms_notifier()
    notifier.notify(SAMPLE_MESSAGE, SAMPLE_RECIPIENT)
