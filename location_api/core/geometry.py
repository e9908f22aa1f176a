"""SRID-tagged well-known-text codec for points, line strings and polygons.

Text on the wire is ``SRID=<n>;POINT(<lon> <lat>)`` (longitude first), while
``Point`` stores latitude first. This module is the only place the axis swap
happens, in both directions.
"""

import re
from enum import Enum

from pydantic import ValidationError

from location_api.core.exceptions import MalformedGeometryError
from location_api.models.geometry import (
    WGS84_SRID,
    Geometry,
    LineString,
    Point,
    Polygon,
)

COORDINATE_PRECISION = 12

_NUMBER = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
_BARE_POINT = re.compile(rf"^\(\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\)$")
_SRID_PREFIX = re.compile(r"^SRID\s*=\s*(\d+)\s*;", re.IGNORECASE)
_TAGGED = re.compile(
    r"^(POINT|LINESTRING|POLYGON)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL
)
_VERTEX = re.compile(rf"^({_NUMBER})\s+({_NUMBER})$")


class GeometryKind(str, Enum):
    """Column flavour deciding how SRID 0 is treated."""

    GEOMETRY = "geometry"  # keeps SRID 0
    GEOGRAPHY = "geography"  # SRID 0 means WGS-84


def normalize_srid(srid: int | None, kind: GeometryKind = GeometryKind.GEOMETRY) -> int:
    """Apply the SRID defaults for a column kind.

    Args:
        srid: SRID found in the text, None when no prefix was given
        kind: Geometry or geography column

    Returns:
        int: 4326 when no SRID was given, or when a geography value carries SRID 0
    """
    if srid is None:
        return WGS84_SRID
    if srid == 0 and kind is GeometryKind.GEOGRAPHY:
        return WGS84_SRID
    return srid


def decode_geometry(
    text: str | bytes, kind: GeometryKind = GeometryKind.GEOMETRY
) -> Geometry:
    """Decode geometry text into a value.

    Accepts the bare ``"(lat, lon)"`` point form (SRID 0) and the SRID-tagged
    extended form for POINT, LINESTRING and POLYGON.

    Args:
        text: Geometry text, ``bytes`` are read as UTF-8
        kind: Column kind used for SRID normalization

    Returns:
        Geometry: Point, LineString or Polygon

    Raises:
        MalformedGeometryError: If the text cannot be decoded
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedGeometryError(text, "input is not UTF-8 text") from e
    if not isinstance(text, str):
        raise MalformedGeometryError(
            text, f"expected text, got {type(text).__name__}"
        )

    value = text.strip()
    if not value:
        raise MalformedGeometryError(text, "empty input")

    if value.startswith("("):
        return _decode_bare_point(text, value)

    srid: int | None = None
    prefix = _SRID_PREFIX.match(value)
    if prefix:
        srid = int(prefix.group(1))
        value = value[prefix.end() :].strip()
    srid = normalize_srid(srid, kind)

    tagged = _TAGGED.match(value)
    if not tagged:
        raise MalformedGeometryError(text, "expected POINT, LINESTRING or POLYGON")
    geometry_type = tagged.group(1).upper()
    body = tagged.group(2).strip()

    try:
        if geometry_type == "POINT":
            return _point_from_vertex(text, body, srid)
        if geometry_type == "LINESTRING":
            return LineString(points=_parse_vertices(text, body, srid), srid=srid)
        return _decode_polygon(text, body, srid)
    except ValidationError as e:
        raise MalformedGeometryError(text, _validation_reason(e)) from e


def encode_geometry(geometry: Geometry) -> str:
    """Encode a geometry value as SRID-tagged text, longitude first.

    Args:
        geometry: Point, LineString or Polygon

    Returns:
        str: e.g. ``SRID=4326;POINT(13.4 52.5)``
    """
    if isinstance(geometry, Point):
        body = f"POINT({_format_vertex(geometry)})"
    elif isinstance(geometry, LineString):
        body = f"LINESTRING({_format_vertices(geometry.points)})"
    elif isinstance(geometry, Polygon):
        body = f"POLYGON(({_format_vertices(geometry.points)}))"
    else:
        raise TypeError(f"Cannot encode {type(geometry).__name__} as geometry")
    return f"SRID={geometry.srid};{body}"


def encode_bare_point(point: Point) -> str:
    """Encode a point in the bare ``"(lat, lon)"`` form, dropping the SRID."""
    return (
        f"({_format_coordinate(point.latitude)}, "
        f"{_format_coordinate(point.longitude)})"
    )


def _decode_bare_point(text: str, value: str) -> Point:
    match = _BARE_POINT.match(value)
    if not match:
        raise MalformedGeometryError(text, "expected exactly two numbers as (lat, lon)")
    try:
        return Point(
            latitude=float(match.group(1)), longitude=float(match.group(2)), srid=0
        )
    except ValidationError as e:
        raise MalformedGeometryError(text, _validation_reason(e)) from e


def _decode_polygon(text: str, body: str, srid: int) -> Polygon:
    if not (body.startswith("(") and body.endswith(")")):
        raise MalformedGeometryError(text, "polygon ring must be in parentheses")
    ring = body[1:-1]
    if "(" in ring or ")" in ring:
        raise MalformedGeometryError(text, "only a single polygon ring is supported")

    points = _parse_vertices(text, ring, srid)
    if len(points) >= 2 and points[0] != points[-1]:
        raise MalformedGeometryError(text, "polygon ring is not closed")
    return Polygon(points=points, srid=srid)


def _parse_vertices(text: str, body: str, srid: int) -> tuple[Point, ...]:
    return tuple(
        _point_from_vertex(text, vertex, srid) for vertex in body.split(",")
    )


def _point_from_vertex(text: str, vertex: str, srid: int) -> Point:
    match = _VERTEX.match(vertex.strip())
    if not match:
        raise MalformedGeometryError(
            text, f"vertex {vertex.strip()!r} is not two numbers"
        )
    longitude, latitude = float(match.group(1)), float(match.group(2))
    return Point(latitude=latitude, longitude=longitude, srid=srid)


def _format_coordinate(value: float) -> str:
    formatted = f"{value:.{COORDINATE_PRECISION}f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def _format_vertex(point: Point) -> str:
    longitude = _format_coordinate(point.longitude)
    return f"{longitude} {_format_coordinate(point.latitude)}"


def _format_vertices(points: tuple[Point, ...]) -> str:
    return ",".join(_format_vertex(point) for point in points)


def _validation_reason(error: ValidationError) -> str:
    first = error.errors()[0]
    return str(first.get("msg", error))
