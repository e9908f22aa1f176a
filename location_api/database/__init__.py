"""Database column types."""

from .types import (
    GeographyPoint,
    GeometryLineString,
    GeometryPoint,
    GeometryPolygon,
    PlainPoint,
)

__all__ = [
    "GeographyPoint",
    "GeometryLineString",
    "GeometryPoint",
    "GeometryPolygon",
    "PlainPoint",
]
