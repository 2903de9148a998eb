"""
Error classification for the layers around the calculation core.

The calculators themselves are total functions and never raise; these
exceptions cover row mapping and configuration loading.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .configuration import ConfigurationError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Configuration
    "ConfigurationError",
]
