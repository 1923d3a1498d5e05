#!/usr/bin/env python3
"""
CLI script to run delay checks manually.

Usage:
    python run_check.py                  # Check all lines and notify on delays
    python run_check.py --dry-run        # Check all lines, never send e-mail
    python run_check.py --line keiyo     # Check one line (never sends e-mail)
    python run_check.py --list           # List configured lines
"""

import argparse
import json
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.delay_checker import DelayChecker
from core.errors import ConfigurationError
from notifiers.formatter import MODES
from utils.logger import setup_logging_from_settings


def main():
    parser = argparse.ArgumentParser(
        description='Train Delay Checker - Line Status Monitor'
    )
    parser.add_argument(
        '--line',
        type=str,
        action='append',
        help='Line key to check (repeatable, checks all if not specified)'
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List all configured lines'
    )
    parser.add_argument(
        '--mode',
        choices=MODES,
        help='Notification body mode (default: from settings.yaml)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Check lines but do not send the notification'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON'
    )
    parser.add_argument(
        '--config',
        type=str,
        help='Path to lines.yaml'
    )
    parser.add_argument(
        '--settings',
        type=str,
        help='Path to settings.yaml'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args()

    try:
        checker = DelayChecker(config_path=args.config, settings_path=args.settings, mode=args.mode)
    except ConfigurationError as e:
        parser.exit(2, f"Configuration error: {e}\n")

    setup_logging_from_settings(checker.registry.get_settings(), verbose=args.verbose)

    if args.list:
        print("\nConfigured Lines:")
        print("-" * 50)
        for line in checker.registry.get_all_lines():
            print(f"  {line.key}")
            print(f"    Name:     {line.name} ({line.name_en or '-'})")
            print(f"    Operator: {line.operator}")
            print(f"    Method:   {line.method}")
            print(f"    URL:      {line.url[:60]}")
            if line.selector:
                print(f"    Selector: {line.selector}")
            print(f"    Silence is normal: {line.silence_is_normal}")
            print()
        return

    if args.line:
        unknown = [key for key in args.line if key not in checker.registry.list_lines()]
        if unknown:
            parser.error(f"Unknown line(s): {', '.join(unknown)}")
        result = checker.check_lines(args.line)
    else:
        result = checker.check_lines()
        if args.dry_run:
            print("Dry run: notification not sent")
        else:
            checker.dispatcher.dispatch(result)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    print("\nResults:")
    print("-" * 70)
    print(result)
    print(f"\nSummary: {result.summary()}")


if __name__ == '__main__':
    main()
