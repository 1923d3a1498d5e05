"""
File handler for saved status pages.
Lets a run be replayed against pages captured earlier.
"""

from .base_handler import BaseHandler
from core.errors import RetrievalFailure
from models.line_config import LineConfig


class FileHandler(BaseHandler):
    """Handler that reads the page from the path in ``url``."""

    def get_method_name(self) -> str:
        return "file"

    def fetch_text(self, line_config: LineConfig) -> str:
        path = line_config.url
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            self.handle_error(line_config, e)
            raise RetrievalFailure(str(e), url=path) from e
