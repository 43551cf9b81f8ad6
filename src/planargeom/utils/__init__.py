"""Utility functions for planargeom.

This module provides utility functions including:

- Logging setup and configuration
"""

from planargeom.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
