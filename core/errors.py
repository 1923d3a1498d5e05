"""
Exception types raised by the delay checker.
"""


class DelayCheckerError(Exception):
    """Base class for all delay checker errors."""


class ConfigurationError(DelayCheckerError):
    """Raised when line or settings configuration is invalid."""


class RetrievalFailure(DelayCheckerError):
    """Raised when a status page cannot be fetched."""

    def __init__(self, message: str, url: str = None):
        super().__init__(message)
        self.url = url


class ClassificationAmbiguity(DelayCheckerError):
    """No keyword matched on a status page."""


class DispatchFailure(DelayCheckerError):
    """Raised when a notification could not be delivered."""
