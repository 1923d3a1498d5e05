"""
Notification formatting and e-mail delivery.

Usage:
    from notifiers import NotificationFormatter, SMTPSender

    notification = NotificationFormatter(mode='full').format(result)
    SMTPSender('smtp.gmail.com', 587, user, password).send(notification, 'me@example.com')
"""

from notifiers.formatter import Notification, NotificationFormatter, MODE_FULL, MODE_DISRUPTED_ONLY
from notifiers.email_sender import EmailSender, SMTPSender, ResendSender

__all__ = [
    'Notification',
    'NotificationFormatter',
    'MODE_FULL',
    'MODE_DISRUPTED_ONLY',
    'EmailSender',
    'SMTPSender',
    'ResendSender',
]
