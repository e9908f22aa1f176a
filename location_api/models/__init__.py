"""Location and geometry models package."""

from .geometry import WGS84_SRID, Geometry, LineString, Point, Polygon
from .location import (
    ADMIN_CODE_KEYS,
    AdminCodeSet,
    FeatureClass,
    HierarchyLevel,
    HierarchyResult,
    LocationRecord,
)

__all__ = [
    "ADMIN_CODE_KEYS",
    "AdminCodeSet",
    "FeatureClass",
    "Geometry",
    "HierarchyLevel",
    "HierarchyResult",
    "LineString",
    "LocationRecord",
    "Point",
    "Polygon",
    "WGS84_SRID",
]
