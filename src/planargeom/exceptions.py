"""Exception hierarchy for planargeom."""


class PlanarGeomError(Exception):
    """Base exception for all planargeom errors."""

    pass


class GeometryError(PlanarGeomError):
    """Errors raised by the geometry kernel."""

    pass


class EmptyResultError(GeometryError):
    """A hit was read from a hit record that holds no hits."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(
            f"Cannot read '{attribute}' from an empty hit record; check has_hit() first"
        )


class OutOfRangeError(GeometryError, IndexError):
    """A vertex, edge, face or hit index is beyond the stored elements."""

    def __init__(self, kind: str, index: int, size: int) -> None:
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} index {index} out of range (size {size})")


class CacheNotComputedError(GeometryError):
    """A cached result was read before it was computed."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"'{name}' has not been computed yet")


class ConfigError(PlanarGeomError):
    """Invalid configuration or user input.

    details carries an optional hint on how to correct the input.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        self.details = details
        super().__init__(message)
