"""
Delay Checker - Main entry point for one delay check run.
"""

import logging
from typing import Optional, List

from core.aggregator import Aggregator
from core.classifier import StatusClassifier
from core.dispatcher import Dispatcher
from core.line_checker import LineChecker, Fetcher
from core.registry import LineRegistry
from models.check_result import CheckResult
from notifiers.email_sender import EmailSender
from notifiers.formatter import NotificationFormatter, MODE_FULL


class DelayChecker:
    """Orchestrates check → aggregate → dispatch for all configured lines."""

    def __init__(
        self,
        config_path: str = None,
        settings_path: str = None,
        fetcher: Optional[Fetcher] = None,
        sender: Optional[EmailSender] = None,
        recipient: str = None,
        mode: str = None
    ):
        """
        Initialize the delay checker.

        Args:
            config_path: Path to lines.yaml
            settings_path: Path to settings.yaml
            fetcher: Page retrieval callable, the registry's handlers if omitted
            sender: E-mail sender, built from settings if omitted
            recipient: Notification address, NOTIFY_EMAIL if omitted
            mode: 'full' or 'disrupted_only', settings value if omitted
        """
        self.registry = LineRegistry(config_path, settings_path)
        self.logger = logging.getLogger('DelayChecker')

        notification_settings = self.registry.get_settings().get('notification', {})
        self.formatter = NotificationFormatter(
            mode=mode or notification_settings.get('mode', MODE_FULL),
            timezone=notification_settings.get('timezone', 'Asia/Tokyo'),
        )

        self.checker = LineChecker(fetcher or self.registry.fetch_text, StatusClassifier())
        self.aggregator = Aggregator(self.checker)
        self.dispatcher = Dispatcher(
            sender=sender or self.registry.build_sender(),
            formatter=self.formatter,
            recipient=recipient if recipient is not None else self.registry.get_recipient(),
        )

    def check_lines(self, keys: List[str] = None) -> CheckResult:
        """
        Check lines without notifying.

        Args:
            keys: Line keys to check, all lines if omitted

        Returns:
            CheckResult in configuration order
        """
        if keys:
            configs = [line for line in self.registry.get_all_lines() if line.key in keys]
        else:
            configs = self.registry.get_all_lines()

        result = self.aggregator.check_all(configs)
        for line in result.lines:
            self.logger.info(str(line))
        return result

    def run(self, dry_run: bool = False) -> str:
        """
        Check every line and notify if any is delayed or suspended.

        Args:
            dry_run: Skip sending the notification

        Returns:
            Run summary string
        """
        self.logger.info("Checking train delays...")
        result = self.check_lines()

        if dry_run:
            self.logger.info("Dry run, notification not sent")
        else:
            self.dispatcher.dispatch(result)

        summary = result.summary()
        self.logger.info(summary)
        return summary


def check_train_delays() -> str:
    """
    Convenience function to run a full check with default configuration.

    Returns:
        Run summary string
    """
    checker = DelayChecker()
    return checker.run()
