"""Configuration management for planargeom.

This module provides configuration management using Pydantic models.

Key classes:
- GeometryConfig: Numerical tolerances used by the kernel
- LoggingConfig: Logging settings
- PlanarGeomSettings: Main application settings
"""

from planargeom.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PlanarGeomSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PlanarGeomSettings",
    "get_default_settings",
]
