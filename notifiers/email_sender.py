"""
E-mail transports for delay notifications.
"""

import logging
import smtplib
from abc import ABC, abstractmethod
from email.message import EmailMessage

import requests

from core.errors import DispatchFailure
from notifiers.formatter import Notification

RESEND_API_URL = 'https://api.resend.com/emails'
RESEND_DEFAULT_FROM = 'onboarding@resend.dev'


class EmailSender(ABC):
    """Delivers a Notification to one recipient."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def send(self, notification: Notification, recipient: str) -> None:
        """
        Send the notification.

        Raises:
            DispatchFailure: if the message was not accepted
        """
        pass


class SMTPSender(EmailSender):
    """Sends mail through an SMTP server with STARTTLS (or SSL on 465)."""

    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str = None,
        password: str = None,
        from_addr: str = None,
        timeout: int = 30
    ):
        super().__init__()
        self.host = host
        self.port = int(port)
        self.username = username
        self.password = password
        self.from_addr = from_addr or username
        self.timeout = timeout

    def build_message(self, notification: Notification, recipient: str) -> EmailMessage:
        msg = EmailMessage()
        msg['Subject'] = notification.subject
        msg['From'] = self.from_addr
        msg['To'] = recipient
        msg.set_content(notification.text_body)
        msg.add_alternative(notification.html_body, subtype='html')
        return msg

    def send(self, notification: Notification, recipient: str) -> None:
        if not (self.host and self.username and self.password and recipient):
            raise DispatchFailure("SMTP settings incomplete, check SMTP_USER/SMTP_PASS/NOTIFY_EMAIL")

        msg = self.build_message(notification, recipient)
        try:
            if self.port == 465:
                with smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout) as server:
                    server.login(self.username, self.password)
                    server.send_message(msg)
            else:
                with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                    server.starttls()
                    server.login(self.username, self.password)
                    server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise DispatchFailure(f"SMTP send failed: {e}") from e

        self.logger.info(f"Email sent to {recipient} via {self.host}")


class ResendSender(EmailSender):
    """Sends mail through the Resend HTTP API."""

    def __init__(self, api_key: str, from_addr: str = None, timeout: int = 30):
        super().__init__()
        self.api_key = api_key
        self.from_addr = from_addr or RESEND_DEFAULT_FROM
        self.timeout = timeout

    def send(self, notification: Notification, recipient: str) -> None:
        if not self.api_key or not recipient:
            raise DispatchFailure("Missing RESEND_API_KEY or NOTIFY_EMAIL")

        payload = {
            'from': self.from_addr,
            'to': recipient,
            'subject': notification.subject,
            'text': notification.text_body,
            'html': notification.html_body,
        }
        headers = {
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
        }

        try:
            response = requests.post(RESEND_API_URL, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DispatchFailure(f"Resend API request failed: {e}") from e

        self.logger.info(f"Email sent to {recipient} via Resend")
