#!/usr/bin/env python3
"""
Main entry point for the train delay checker.

Checks every configured line once, e-mails a single alert when any line is
delayed or suspended, and prints the run summary. Meant to be run from cron
or a platform scheduler.
"""

import sys

from core.delay_checker import DelayChecker
from core.errors import ConfigurationError
from utils.logger import setup_logging_from_settings


def main() -> int:
    try:
        checker = DelayChecker()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging_from_settings(checker.registry.get_settings())
    print(checker.run())
    return 0


if __name__ == '__main__':
    sys.exit(main())
