"""
Status Classifier - Keyword rules that turn page text into a line status.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from core.errors import ClassificationAmbiguity
from models.line_config import LineConfig, KeywordRule
from models.line_status import NORMAL, UNKNOWN, MAX_MESSAGE_LENGTH

NORMAL_MESSAGE = '平常運転'
SILENCE_MESSAGE = '運行情報なし（15分以上の遅延なし）'
UNKNOWN_MESSAGE = 'ステータス不明（ページ構造が変更された可能性）'
DISRUPTION_TEMPLATE = '{keyword}が発生しています'

_SENTENCE_END_RE = re.compile(r'[。！？!?]')
_WHITESPACE_RE = re.compile(r'\s+')


@dataclass(frozen=True)
class Classification:
    """Status and message derived from one page."""

    status: str
    message: str


class StatusClassifier:
    """
    Classifies normalized status page text for a line.

    Precedence is fixed: disruption keywords, then normal keywords, then the
    line's silence policy. Within each list the configured order wins.
    """

    def __init__(self, max_message_length: int = MAX_MESSAGE_LENGTH):
        self.max_message_length = max_message_length
        self.logger = logging.getLogger('StatusClassifier')

    def classify(self, text: str, line_config: LineConfig) -> Classification:
        """
        Classify page text.

        Args:
            text: Normalized page text
            line_config: Configuration of the line the page belongs to

        Returns:
            Classification, never raises
        """
        text = text or ''
        try:
            return self._match_keywords(text, line_config)
        except ClassificationAmbiguity as e:
            self.logger.debug(f"{line_config.name}: {e}")
            if line_config.silence_is_normal:
                return Classification(NORMAL, SILENCE_MESSAGE)
            return Classification(UNKNOWN, UNKNOWN_MESSAGE)

    def _match_keywords(self, text: str, line_config: LineConfig) -> Classification:
        masked = self._mask_boilerplate(text, line_config.boilerplate_phrases)

        for rule in line_config.disruption_rules:
            if rule.keyword in masked:
                return Classification(rule.severity, self._extract_message(masked, rule))

        for keyword in line_config.normal_keywords:
            if keyword in text:
                return Classification(NORMAL, NORMAL_MESSAGE)

        raise ClassificationAmbiguity(f"no status keyword found in {len(text)} characters of text")

    def _mask_boilerplate(self, text: str, phrases) -> str:
        for phrase in phrases:
            phrase = _WHITESPACE_RE.sub(' ', phrase).strip()
            if phrase:
                text = text.replace(phrase, ' ')
        return text

    def _extract_message(self, text: str, rule: KeywordRule) -> str:
        fragment = self._find_fragment(text, rule.keyword)
        if fragment and len(fragment) > self.max_message_length:
            fragment = self._window(fragment, rule.keyword)
        if not fragment or rule.keyword not in fragment:
            return DISRUPTION_TEMPLATE.format(keyword=rule.keyword)
        return fragment

    def _window(self, fragment: str, keyword: str) -> str:
        """
        Cut a long fragment down to max_message_length around the keyword.

        Keeps the tail of the fragment, where the announcement usually is,
        unless that would drop the keyword itself.
        """
        start = len(fragment) - self.max_message_length
        position = fragment.find(keyword)
        if position < start:
            start = position
        return fragment[start:start + self.max_message_length].strip()

    def _find_fragment(self, text: str, keyword: str) -> Optional[str]:
        """First sentence-like fragment containing keyword."""
        for fragment in _SENTENCE_END_RE.split(text):
            if keyword in fragment:
                return fragment.strip()
        return None
