#!/usr/bin/env python3
"""Send one sample SMS notification through the console sender.

The transport choice is hardcoded in `notification_service.application.demo`.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notification_service.application.demo import send_sample_notification  # noqa: E402


def main() -> int:
    parse_args()
    send_sample_notification()
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Notify the sample recipient via the console SMS sender."
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
