"""
Dispatcher - Sends the notification only when a line is disrupted.
"""

import logging

from models.check_result import CheckResult
from notifiers.email_sender import EmailSender
from notifiers.formatter import NotificationFormatter


class Dispatcher:
    """Decides whether to notify and hands the payload to the sender once."""

    def __init__(self, sender: EmailSender, formatter: NotificationFormatter, recipient: str):
        self.sender = sender
        self.formatter = formatter
        self.recipient = recipient
        self.logger = logging.getLogger('Dispatcher')

    def dispatch(self, result: CheckResult) -> bool:
        """
        Notify about a run if any line is delayed or suspended.

        Args:
            result: Aggregated run result

        Returns:
            True if a notification was sent, False otherwise
        """
        if not result.requires_notification:
            self.logger.info("No delays detected, no email sent")
            return False

        notification = self.formatter.format(result)
        self.logger.info(f"Delays detected, sending notification: {notification.subject}")

        try:
            self.sender.send(notification, self.recipient)
        except Exception as e:
            self.logger.error(f"Failed to send notification: {e}")
            return False

        return True
