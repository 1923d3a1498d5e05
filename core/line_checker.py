"""
Line Checker - Fetches, normalizes and classifies one line's status page.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from core.classifier import StatusClassifier
from models.line_config import LineConfig
from models.line_status import LineStatus, UNKNOWN
from utils.text_normalizer import normalize_text

Fetcher = Callable[[LineConfig], str]

FAILURE_TEMPLATE = 'チェック失敗: {error}'


class LineChecker:
    """Checks a single line. Never raises for retrieval problems."""

    def __init__(self, fetcher: Fetcher, classifier: Optional[StatusClassifier] = None):
        """
        Args:
            fetcher: Callable returning the raw page for a line, raising on failure
            classifier: Classifier to use, a default StatusClassifier if omitted
        """
        self.fetcher = fetcher
        self.classifier = classifier or StatusClassifier()
        self.logger = logging.getLogger('LineChecker')

    def check(self, line_config: LineConfig) -> LineStatus:
        self.logger.info(f"Checking {line_config.operator} {line_config.name}")

        try:
            raw = self.fetcher(line_config)
        except Exception as e:
            self.logger.warning(f"Retrieval failed for {line_config.name}: {e}")
            return self._status(line_config, UNKNOWN, FAILURE_TEMPLATE.format(error=str(e) or type(e).__name__))

        text = normalize_text(raw, line_config.selector)
        classification = self.classifier.classify(text, line_config)
        return self._status(line_config, classification.status, classification.message)

    def _status(self, line_config: LineConfig, status: str, message: str) -> LineStatus:
        return LineStatus(
            line=line_config.name,
            operator=line_config.operator,
            status=status,
            message=message,
            timestamp=datetime.now(timezone.utc),
        )
