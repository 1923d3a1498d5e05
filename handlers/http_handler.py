"""
HTTP GET handler for operator status pages.
"""

import requests

from .base_handler import BaseHandler
from core.errors import RetrievalFailure
from models.line_config import LineConfig

DEFAULT_USER_AGENT = 'Mozilla/5.0 (compatible; TrainDelayChecker/1.0)'
DEFAULT_ACCEPT_LANGUAGE = 'ja,en;q=0.9'


class HTTPHandler(BaseHandler):
    """Handler for status pages served over HTTP."""

    def get_method_name(self) -> str:
        return "http"

    def fetch_text(self, line_config: LineConfig) -> str:
        """
        Fetch the status page with a single GET request.

        Returns:
            Decoded response body

        Raises:
            RetrievalFailure: on connection errors, timeouts and non-2xx responses
        """
        url = line_config.url
        if not url:
            raise RetrievalFailure(f"No url configured for {line_config.name}")

        http_settings = self.settings.get('http', {})
        timeout = http_settings.get('timeout', 30)
        headers = {
            'User-Agent': http_settings.get('user_agent', DEFAULT_USER_AGENT),
            'Accept-Language': http_settings.get('accept_language', DEFAULT_ACCEPT_LANGUAGE),
        }

        try:
            self.logger.info(f"Fetching status page from {url}")
            response = requests.get(url, headers=headers, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.handle_error(line_config, e)
            raise RetrievalFailure(str(e), url=url) from e

        # requests falls back to ISO-8859-1 when the charset header is missing
        if not response.encoding or response.encoding.lower() == 'iso-8859-1':
            response.encoding = response.apparent_encoding

        return response.text
