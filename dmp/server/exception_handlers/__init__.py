"""Maps DMP errors, database failures and unexpected exceptions to JSON responses."""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
