"""Geometry value types anchoring location records in space."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

WGS84_SRID = 4326


class Point(BaseModel):
    """Geographic point, stored latitude first."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ...,
        title="Latitude",
        description="Latitude coordinate",
        examples=[52.5],
    )
    longitude: float = Field(
        ...,
        title="Longitude",
        description="Longitude coordinate",
        examples=[13.4],
    )
    srid: int = Field(
        default=WGS84_SRID,
        ge=0,
        description="Spatial reference identifier, 0 for points without CRS",
    )

    @model_validator(mode="after")
    def validate_coordinates(self) -> "Point":
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError("Latitude must be between -90 and 90 degrees")
        if not -180 <= self.longitude <= 180:
            raise ValueError("Longitude must be between -180 and 180 degrees")
        return self


def _check_shared_srid(points: tuple[Point, ...], srid: int) -> None:
    for point in points:
        if point.srid != srid:
            raise ValueError(
                f"All points must share SRID {srid}, found point with SRID {point.srid}"
            )


class LineString(BaseModel):
    """Ordered sequence of at least two points with one SRID."""

    model_config = ConfigDict(frozen=True)

    points: tuple[Point, ...] = Field(..., min_length=2)
    srid: int = Field(default=WGS84_SRID, ge=0)

    @model_validator(mode="after")
    def validate_points(self) -> "LineString":
        """Validate that all points share the line's SRID."""
        _check_shared_srid(self.points, self.srid)
        return self


class Polygon(BaseModel):
    """Closed ring of at least four points with one SRID.

    Only the outer ring is modelled; the first and last point must be equal.
    """

    model_config = ConfigDict(frozen=True)

    points: tuple[Point, ...] = Field(..., min_length=4)
    srid: int = Field(default=WGS84_SRID, ge=0)

    @model_validator(mode="after")
    def validate_ring(self) -> "Polygon":
        """Validate the ring is closed and shares one SRID."""
        _check_shared_srid(self.points, self.srid)
        first, last = self.points[0], self.points[-1]
        if (first.latitude, first.longitude) != (last.latitude, last.longitude):
            raise ValueError("Polygon ring must be closed (first point equals last)")
        return self


Geometry = Point | LineString | Polygon
