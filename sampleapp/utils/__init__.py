"""Utilities module"""

from .helpers import ERROR_MESSAGES, truncate, validate_email

__all__ = ["ERROR_MESSAGES", "truncate", "validate_email"]
