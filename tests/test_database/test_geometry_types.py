"""Tests for geometry column types."""

import pytest
from geoalchemy2.types import Geography, Geometry
from sqlalchemy import Column, Integer, MetaData, Table, bindparam, select
from sqlalchemy.dialects import postgresql

from location_api.core.exceptions import MalformedGeometryError
from location_api.database.types import (
    GeographyPoint,
    GeometryLineString,
    GeometryPoint,
    GeometryPolygon,
    PlainPoint,
)
from location_api.models.geometry import LineString, Point

DIALECT = postgresql.dialect()


@pytest.fixture
def places_table() -> Table:
    """Table with one column per geometry type."""
    return Table(
        "places",
        MetaData(),
        Column("id", Integer, primary_key=True),
        Column("coordinate", GeographyPoint()),
        Column("area", GeometryPolygon()),
    )


class TestColumnSpecs:
    """Test DDL type names."""

    @pytest.mark.parametrize(
        "column_type,expected",
        [
            (GeometryPoint(), "geometry(POINT,4326)"),
            (GeographyPoint(), "geography(POINT,4326)"),
            (GeometryLineString(3857), "geometry(LINESTRING,3857)"),
            (GeometryPolygon(), "geometry(POLYGON,4326)"),
            (PlainPoint(), "POINT"),
        ],
    )
    def test_col_spec(self, column_type, expected):
        """Test column type DDL."""
        assert column_type.get_col_spec() == expected

    def test_should_build_on_geoalchemy2_types(self):
        """Test PostGIS columns keep the GeoAlchemy2 geometry type and SRID."""
        point = GeographyPoint(3857)

        assert isinstance(point, Geography)
        assert isinstance(GeometryPolygon(), Geometry)
        assert point.geometry_type == "POINT"
        assert point.srid == 3857


class TestValueProcessing:
    """Test values passing through the codec."""

    def test_should_bind_point_as_ewkt(self):
        """Test bound points are written longitude first."""
        process = GeometryPoint().bind_processor(DIALECT)

        assert process(Point(latitude=52.5, longitude=13.4)) == (
            "SRID=4326;POINT(13.4 52.5)"
        )
        assert process(None) is None

    def test_should_reject_wrong_value_type_on_bind(self):
        """Test a line string cannot be bound to a point column."""
        process = GeometryPoint().bind_processor(DIALECT)
        line = LineString(
            points=(Point(latitude=0, longitude=0), Point(latitude=1, longitude=1))
        )

        with pytest.raises(TypeError):
            process(line)

    def test_geography_result_should_normalize_srid_zero(self):
        """Test geography columns read SRID 0 as WGS-84."""
        process = GeographyPoint().result_processor(DIALECT, None)

        point = process("SRID=0;POINT(13.4 52.5)")

        assert point == Point(latitude=52.5, longitude=13.4, srid=4326)

    def test_geometry_result_should_keep_srid_zero(self):
        """Test geometry columns keep SRID 0."""
        process = GeometryPoint().result_processor(DIALECT, None)

        assert process("SRID=0;POINT(13.4 52.5)").srid == 0
        assert process(None) is None

    def test_should_reject_unexpected_geometry_in_result(self):
        """Test a polygon column refuses point text."""
        process = GeometryPolygon().result_processor(DIALECT, None)

        with pytest.raises(MalformedGeometryError):
            process("SRID=4326;POINT(13.4 52.5)")

    def test_plain_point_should_use_bare_form(self):
        """Test plain points are stored as (lat, lon)."""
        column_type = PlainPoint()
        point = Point(latitude=52.5, longitude=13.4, srid=0)

        stored = column_type.bind_processor(DIALECT)(point)

        assert stored == "(52.5, 13.4)"
        assert column_type.result_processor(DIALECT, None)(stored) == point


class TestSqlExpressions:
    """Test SQL wrapping of geometry columns."""

    def test_should_wrap_bind_parameter(self):
        """Test geometry values are bound through ST_GeomFromEWKT."""
        expression = GeometryPoint().bind_expression(bindparam("coordinate"))

        assert "ST_GeomFromEWKT" in str(expression.compile(dialect=DIALECT))

    def test_geography_should_bind_through_geog_from_text(self):
        """Test geography values are bound through ST_GeogFromText."""
        expression = GeographyPoint().bind_expression(bindparam("coordinate"))

        assert "ST_GeogFromText" in str(expression.compile(dialect=DIALECT))

    def test_should_read_columns_as_ewkt(self, places_table: Table):
        """Test selected geometry columns are wrapped in ST_AsEWKT."""
        statement = select(places_table.c.coordinate, places_table.c.area)

        compiled = str(statement.compile(dialect=DIALECT))

        assert "ST_AsEWKT(places.coordinate)" in compiled
        assert "ST_AsEWKT(places.area)" in compiled
