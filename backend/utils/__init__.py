"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors
from .logging_utils import configure_logging

__all__ = ["handle_api_errors", "configure_logging"]
