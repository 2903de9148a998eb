"""
Logging configuration and utilities for the revenue decision engine.
"""
from .config import configure_logging, get_logger, get_risk_logger

__all__ = ["configure_logging", "get_logger", "get_risk_logger"]
