"""
Models package - Data classes for the application.
"""

from models.line_status import LineStatus
from models.line_config import LineConfig, KeywordRule
from models.check_result import CheckResult

__all__ = ['LineStatus', 'LineConfig', 'KeywordRule', 'CheckResult']
