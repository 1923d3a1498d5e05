"""
Handlers package - Status page retrieval implementations.
"""

from handlers.base_handler import BaseHandler
from handlers.http_handler import HTTPHandler
from handlers.file_handler import FileHandler

__all__ = [
    'BaseHandler',
    'HTTPHandler',
    'FileHandler',
]
