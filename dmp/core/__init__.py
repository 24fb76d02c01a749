"""
Core utilities and configuration for DMP.

This package provides core functionality including logging configuration,
access validation, database setup, and other shared utilities.
"""

from dmp.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
