"""
Data quality error classifications for revenue row mapping.

Raised while turning a decoded tabular row into a RevenueRecord. The
normalizer catches them and drops the row.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingDataError(DataQualityError):
    """A required column has no usable value in the row."""

    def __init__(self, message: str, data_type: Optional[str] = None,
                 candidates: Optional[tuple] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type
        self.candidates = candidates or ()


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
