"""
Abstract base handler for all retrieval methods.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
import logging

from models.line_config import LineConfig


class BaseHandler(ABC):
    """Abstract base class for status page handlers."""

    def __init__(self, settings: Dict[str, Any] = None):
        """
        Initialize handler with application settings.

        Args:
            settings: Settings dictionary (settings.yaml)
        """
        self.settings = settings or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def __call__(self, line_config: LineConfig) -> str:
        return self.fetch_text(line_config)

    @abstractmethod
    def fetch_text(self, line_config: LineConfig) -> str:
        """
        Fetch the raw status page for a line.

        Returns:
            Page body as text

        Raises:
            RetrievalFailure: if the page cannot be retrieved
        """
        pass

    @abstractmethod
    def get_method_name(self) -> str:
        """
        Get the name of the retrieval method.

        Returns:
            String identifier for this method
        """
        pass

    def handle_error(self, line_config: LineConfig, exception: Exception) -> None:
        """
        Log errors during page retrieval.

        Args:
            line_config: Line whose page failed
            exception: The exception that occurred
        """
        self.logger.error(
            f"Error fetching status page for {line_config.name}: "
            f"{type(exception).__name__}: {str(exception)}"
        )
