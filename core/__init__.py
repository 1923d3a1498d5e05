"""
Core package - Classification, aggregation and dispatch logic.
"""

from core.errors import (
    DelayCheckerError,
    ConfigurationError,
    RetrievalFailure,
    ClassificationAmbiguity,
    DispatchFailure,
)

__all__ = [
    'DelayCheckerError',
    'ConfigurationError',
    'RetrievalFailure',
    'ClassificationAmbiguity',
    'DispatchFailure',
]
