"""SQLAlchemy column types storing geometry values as SRID-tagged text.

The PostGIS types come from GeoAlchemy2. Values are written through the type's
``from_text`` function and read back with ``ST_AsEWKT``, so the codec sees the
same text in both directions.
"""

from typing import Any

from geoalchemy2.types import Geography, Geometry
from sqlalchemy.types import UserDefinedType

from location_api.core.exceptions import MalformedGeometryError
from location_api.core.geometry import (
    GeometryKind,
    decode_geometry,
    encode_bare_point,
    encode_geometry,
)
from location_api.models.geometry import WGS84_SRID, LineString, Point, Polygon


class _EWKTCodecMixin:
    """Route GeoAlchemy2 column values through the EWKT codec."""

    as_binary = "ST_AsEWKT"

    kind: GeometryKind = GeometryKind.GEOMETRY
    wkt_type: str = "GEOMETRY"
    value_type: type = Point

    def __init__(self, srid: int = WGS84_SRID, **kwargs: Any):
        kwargs.setdefault("geometry_type", self.wkt_type)
        super().__init__(srid=srid, **kwargs)

    def bind_processor(self, dialect: Any):
        def process(value: Any) -> str | None:
            if value is None:
                return None
            if not isinstance(value, self.value_type):
                raise TypeError(
                    f"{type(self).__name__} expects {self.value_type.__name__}, "
                    f"got {type(value).__name__}"
                )
            return encode_geometry(value)

        return process

    def result_processor(self, dialect: Any, coltype: Any):
        def process(value: Any) -> Any:
            if value is None:
                return None
            geometry = decode_geometry(value, self.kind)
            if not isinstance(geometry, self.value_type):
                raise MalformedGeometryError(
                    value, f"expected {self.wkt_type.lower()} value"
                )
            return geometry

        return process


class GeometryPoint(_EWKTCodecMixin, Geometry):
    """``geometry(POINT)`` column, SRID 0 is kept."""

    wkt_type = "POINT"
    value_type = Point


class GeographyPoint(_EWKTCodecMixin, Geography):
    """``geography(POINT)`` column, SRID 0 is read as WGS-84."""

    kind = GeometryKind.GEOGRAPHY
    wkt_type = "POINT"
    value_type = Point


class GeometryLineString(_EWKTCodecMixin, Geometry):
    wkt_type = "LINESTRING"
    value_type = LineString


class GeometryPolygon(_EWKTCodecMixin, Geometry):
    wkt_type = "POLYGON"
    value_type = Polygon


class PlainPoint(UserDefinedType):
    """PostgreSQL ``POINT`` column holding ``(lat, lon)`` without CRS."""

    cache_ok = True

    def get_col_spec(self, **kw: Any) -> str:
        return "POINT"

    def bind_processor(self, dialect: Any):
        def process(value: Point | None) -> str | None:
            return None if value is None else encode_bare_point(value)

        return process

    def result_processor(self, dialect: Any, coltype: Any):
        def process(value: Any) -> Point | None:
            if value is None:
                return None
            point = decode_geometry(value)
            if not isinstance(point, Point):
                raise MalformedGeometryError(value, "expected point value")
            return point

        return process
