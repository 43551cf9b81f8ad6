"""Configuration settings for planargeom."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class GeometryConfig(BaseModel):
    """Numerical tolerances for geometry operations.

    The kernel uses ordinary floating point throughout; these values only
    decide when two computed quantities are treated as the same.
    """

    vertex_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        description="Edge parameter below which a hit is considered to land on the edge start vertex",
    )
    centroid_tolerance: float = Field(
        default=1e-4,
        gt=0.0,
        description="Squared probe length below which a point is treated as sitting on the centroid",
    )
    fallback_direction: tuple[float, float] = Field(
        default=(1.0, 0.0),
        description="Probe direction used for containment tests at the centroid",
    )
    z_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        description="Maximum z mismatch for two 3D segments to be considered intersecting",
    )

    @field_validator("fallback_direction")
    @classmethod
    def _non_zero_direction(cls, value: tuple[float, float]) -> tuple[float, float]:
        if value[0] == 0.0 and value[1] == 0.0:
            raise ValueError("fallback_direction must be a non-zero vector")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PlanarGeomSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlanarGeomSettings:
    """Get default application settings."""
    return PlanarGeomSettings()
