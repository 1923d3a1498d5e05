"""
Utils package - Shared utility functions.
"""

from utils.text_normalizer import normalize_text
from utils.logger import setup_logging, setup_logging_from_settings

__all__ = ['normalize_text', 'setup_logging', 'setup_logging_from_settings']
