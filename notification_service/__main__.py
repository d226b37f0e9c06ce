"""Send the sample SMS notification: `python -m notification_service`."""

from __future__ import annotations

import sys

from .application.demo import send_sample_notification


def main() -> int:
    send_sample_notification()
    return 0


if __name__ == "__main__":
    sys.exit(main())
