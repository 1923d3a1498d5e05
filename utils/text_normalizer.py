"""
Text normalization for status pages.
Turns an HTML page body into one line of searchable text.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r'<[^>]*>')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize_text(raw: Optional[str], selector: Optional[str] = None) -> str:
    """
    Strip markup and collapse whitespace.

    Args:
        raw: Page body (HTML or plain text)
        selector: Optional CSS selector for the status area. The whole page
            is used when it matches nothing or only whitespace.

    Returns:
        Single-line text, empty string for empty input
    """
    if not raw:
        return ''

    try:
        soup = BeautifulSoup(raw, 'html.parser')
        for element in soup(['script', 'style', 'noscript']):
            element.decompose()
        text = _select_text(soup, selector) or soup.get_text(' ')
    except Exception as e:
        # html.parser can still choke on badly broken markup
        logger.debug(f"HTML parsing failed, stripping tags with regex: {e}")
        text = _TAG_RE.sub(' ', raw)

    return _WHITESPACE_RE.sub(' ', text).strip()


def _select_text(soup: BeautifulSoup, selector: Optional[str]) -> str:
    if not selector:
        return ''
    try:
        element = soup.select_one(selector)
    except Exception as e:
        # soupsieve raises SelectorSyntaxError for malformed selectors
        logger.warning(f"Invalid selector '{selector}', using whole page: {e}")
        return ''
    if element is None:
        return ''
    text = element.get_text(' ')
    return text if text.strip() else ''
