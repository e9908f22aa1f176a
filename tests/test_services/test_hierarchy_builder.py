"""Tests for hierarchy assembly."""

from typing import Any
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from location_api.core.exceptions import (
    CountryCodeMissingError,
    UnsupportedFeatureCodeError,
)
from location_api.models.hierarchy_config import LiteralValue
from location_api.models.location import HierarchyLevel
from location_api.services.hierarchy_builder import (
    HierarchyBuilder,
    backfill_district_population_from_city,
)
from location_api.services.hierarchy_config import (
    HierarchyConfigResolver,
    parse_hierarchy_config,
)
from location_api.services.name_resolver import NameResolver


def _builder(
    data: dict[str, Any], spatial_store: MagicMock, **kwargs: Any
) -> HierarchyBuilder:
    resolver = HierarchyConfigResolver(parse_hierarchy_config(data))
    return HierarchyBuilder(resolver, spatial_store, **kwargs)


class TestDistrictRooted:
    """Test sources whose feature code is a district code."""

    def test_should_pick_city_from_candidates_in_same_admin4(
        self, builder, spatial_store, record_factory
    ):
        """Test the full district-rooted path with a state lookup."""
        # Arrange
        source = record_factory(
            id=1, name="Hoboken Terrace", feature_code="PPLX", a1="NJ", a4="X"
        )
        city = record_factory(
            id=2, name="Hoboken", feature_code="PPLA", population=50000, a4="X"
        )
        other = record_factory(id=3, name="Elsewhere", feature_code="PPLX", a4="Y")
        state = record_factory(
            id=4, name="New Jersey", feature_class="A", feature_code="ADM1", a1="NJ"
        )
        spatial_store.find_state_containing.return_value = state

        # Act
        result = builder.resolve_hierarchy(source, [city, other])

        # Assert
        assert result.district == source
        assert result.city == city
        assert result.state == state
        assert result.borough is None
        assert result.country is None
        assert result.country_code == "US"
        assert result.names == {
            "district": "Hoboken Terrace",
            "city": "Hoboken",
            "state": "New Jersey",
        }
        spatial_store.find_state_containing.assert_called_once_with(source)

    def test_should_prefer_containing_city_from_store(
        self, builder, spatial_store, record_factory
    ):
        """Test the store lookup wins over nearby candidates."""
        # Arrange
        source = record_factory(id=1, feature_code="PPLX", a4="X")
        contained_in = record_factory(id=9, name="Metropolis", feature_code="PPLC")
        nearby = record_factory(id=2, name="Nearby", feature_code="PPLA", a4="X")
        spatial_store.find_city_containing_district.return_value = contained_in

        # Act
        result = builder.resolve_hierarchy(source, [nearby])

        # Assert
        assert result.city == contained_in
        assert result.district == source
        spatial_store.find_city_containing_district.assert_called_once_with(source)

    def test_should_fall_back_to_populated_candidate_and_backfill(
        self, builder, record_factory
    ):
        """Test a populated candidate in the same admin4 becomes the city."""
        # Arrange
        source = record_factory(id=1, name="Old Town", feature_code="PPLX", a4="X")
        village = record_factory(
            id=2, name="Village", feature_code="PPL", population=1200, a4="X"
        )

        # Act
        result = builder.resolve_hierarchy(source, [village])

        # Assert
        assert result.city == village
        assert result.district is source
        assert source.population == 1200

    def test_should_promote_district_without_city(self, builder, record_factory):
        """Test a district with no city becomes the city itself."""
        source = record_factory(id=1, name="Lonely", feature_code="PPL", a4="X")

        result = builder.resolve_hierarchy(source, [])

        assert result.district is None
        assert result.city == source
        assert result.names["city"] == "Lonely"

    def test_should_exclude_source_from_candidates(self, builder, record_factory):
        """Test the source is never its own city."""
        source = record_factory(id=1, feature_code="PPL", population=5000, a4="X")

        result = builder.resolve_hierarchy(source, [source])

        assert result.district is None
        assert result.city == source

    def test_should_ignore_candidates_in_other_admin4(self, builder, record_factory):
        """Test cities outside the source's admin4 are not used."""
        source = record_factory(id=1, feature_code="PPLX", a4="X")
        far_city = record_factory(id=2, feature_code="PPLA", population=10, a4="Y")

        result = builder.resolve_hierarchy(source, [far_city])

        assert result.city == source
        assert result.district is None


class TestCityRooted:
    """Test sources whose feature code is a city code."""

    def test_should_pick_district_in_same_admin4(self, builder, record_factory):
        """Test the first district candidate in the same admin4 is used."""
        # Arrange
        source = record_factory(id=1, name="Capital", feature_code="PPLA", a4="X")
        first = record_factory(id=2, name="Quarter", feature_code="PPL", a4="X")
        second = record_factory(id=3, name="Suburb", feature_code="PPLX", a4="X")

        # Act
        result = builder.resolve_hierarchy(source, [first, second])

        # Assert
        assert result.city == source
        assert result.district == first

    def test_should_raise_for_unsupported_feature_code(self, builder, record_factory):
        """Test a source that is neither district nor city."""
        source = record_factory(feature_class="A", feature_code="ADM1")

        with pytest.raises(UnsupportedFeatureCodeError) as exc_info:
            builder.resolve_hierarchy(source, [])

        assert exc_info.value.feature_code == "ADM1"

    def test_should_propagate_config_errors(self, builder, record_factory):
        """Test configuration errors are not swallowed."""
        with pytest.raises(CountryCodeMissingError):
            builder.resolve_hierarchy(record_factory(country=None), [])


class TestOrdering:
    """Test candidate ordering for the city level."""

    def test_should_order_by_feature_code_then_population(
        self, builder, record_factory
    ):
        """Test configured code order wins, population breaks ties."""
        # Arrange
        source = record_factory(id=1, feature_code="PPLX", a4="X")
        capital = record_factory(id=2, feature_code="PPLC", population=900000, a4="X")
        small = record_factory(id=3, feature_code="PPLA2", population=100, a4="X")
        large = record_factory(id=4, feature_code="PPLA2", population=5000, a4="X")

        # Act
        result = builder.resolve_hierarchy(source, [capital, small, large])

        # Assert
        assert result.city == large

    def test_should_order_by_population_only(self, builder, record_factory):
        """Test countries that only sort by population."""
        source = record_factory(id=1, country="DE", feature_code="PPLX", a4="X")
        smaller = record_factory(
            id=2, country="DE", feature_code="PPLA", population=10, a4="X"
        )
        larger = record_factory(
            id=3, country="DE", feature_code="PPLC", population=3000000, a4="X"
        )

        result = builder.resolve_hierarchy(source, [smaller, larger])

        assert result.city == larger

    def test_should_require_population_when_configured(
        self, hierarchy_config_data, spatial_store, record_factory
    ):
        """Test with_population skips unpopulated cities."""
        # Arrange
        hierarchy_config_data["location_configuration"]["US"]["city"][
            "with_population"
        ] = True
        builder = _builder(hierarchy_config_data, spatial_store)
        source = record_factory(id=1, feature_code="PPLX", a4="X")
        unpopulated = record_factory(id=2, feature_code="PPLA2", a4="X")
        populated = record_factory(id=3, feature_code="PPLA", population=10, a4="X")

        # Act
        result = builder.resolve_hierarchy(source, [unpopulated, populated])

        # Assert
        assert result.city == populated


class TestVisibilityAndNames:
    """Test dropping, hiding and naming levels."""

    def test_should_drop_district_named_like_city(self, builder, record_factory):
        """Test a district with the city's display name is removed."""
        source = record_factory(id=1, name="Springfield", feature_code="PPLX", a4="X")
        city = record_factory(id=2, name="Springfield", feature_code="PPLA", a4="X")

        result = builder.resolve_hierarchy(source, [city])

        assert result.district is None
        assert result.city == city
        assert "district" not in result.names

    def test_should_hide_invisible_borough(self, builder, record_factory):
        """Test the default borough rules are not visible."""
        source = record_factory(id=1, feature_code="PPLX", a1="NJ", a4="X")
        borough = record_factory(
            id=2, feature_class="A", feature_code="ADM4", a1="NJ", a4="X"
        )

        result = builder.resolve_hierarchy(source, [borough])

        assert result.borough is None
        assert "borough" not in result.names

    def test_should_show_visible_borough(
        self, hierarchy_config_data, spatial_store, record_factory
    ):
        """Test a visible borough matching the admin code filter."""
        # Arrange
        hierarchy_config_data["location_configuration"]["default"]["borough"][
            "visible"
        ] = True
        builder = _builder(hierarchy_config_data, spatial_store)
        source = record_factory(id=1, feature_code="PPLX", a1="NJ", a4="X")
        wrong_state = record_factory(
            id=2, name="Other", feature_class="A", feature_code="ADM4", a1="PA"
        )
        borough = record_factory(
            id=3, name="Ward 4", feature_class="A", feature_code="ADM4", a1="NJ"
        )

        # Act
        result = builder.resolve_hierarchy(source, [wrong_state, borough])

        # Assert
        assert result.borough == borough
        assert result.names["borough"] == "Ward 4"

    def test_should_hide_invisible_city(
        self, hierarchy_config_data, spatial_store, record_factory
    ):
        """Test a level configured as invisible is absent from the result."""
        hierarchy_config_data["location_configuration"]["US"]["city"]["visible"] = False
        builder = _builder(hierarchy_config_data, spatial_store)
        source = record_factory(id=1, name="Quarter", feature_code="PPLX", a4="X")
        city = record_factory(id=2, name="Town", feature_code="PPLA", a4="X")

        result = builder.resolve_hierarchy(source, [city])

        assert result.city is None
        assert result.district == source
        assert result.names == {"district": "Quarter"}

    def test_should_localize_names(
        self, config_resolver, spatial_store, record_factory
    ):
        """Test names come from the name and localization stores."""
        # Arrange
        name_store = MagicMock()
        name_store.resolve_alternate_name.side_effect = (
            lambda record, iso_language, language_tag: f"{record.name} ({iso_language})"
        )
        localization_store = MagicMock()
        localization_store.country_display_name.return_value = "Vereinigte Staaten"
        builder = HierarchyBuilder(
            config_resolver,
            spatial_store,
            NameResolver(name_store),
            localization_store,
        )
        source = record_factory(id=1, name="Harlem", feature_code="PPLX", a4="X")
        city = record_factory(id=2, name="New York", feature_code="PPLC", a4="X")

        # Act
        result = builder.resolve_hierarchy(source, [city], iso_language="de")

        # Assert
        assert result.names == {
            "district": "Harlem (de)",
            "city": "New York (de)",
            "country": "Vereinigte Staaten",
        }
        localization_store.country_display_name.assert_called_once_with("US", "de")

    def test_should_use_canonical_language_for_country_by_default(
        self, config_resolver, spatial_store, record_factory
    ):
        """Test the localization store gets the canonical language."""
        localization_store = MagicMock()
        localization_store.country_display_name.return_value = "United States"
        builder = HierarchyBuilder(
            config_resolver, spatial_store, localization_store=localization_store
        )

        result = builder.resolve_hierarchy(record_factory(feature_code="PPL"), [])

        assert result.names["country"] == "United States"
        localization_store.country_display_name.assert_called_once_with("US", "en")

    def test_should_name_country_from_record(
        self, builder, spatial_store, record_factory
    ):
        """Test the country record's name is used without a localization store."""
        country = record_factory(
            id=6252001, name="United States", feature_class="A", feature_code="PCLI"
        )
        spatial_store.find_country.return_value = country

        result = builder.resolve_hierarchy(record_factory(feature_code="PPL"), [])

        assert result.country == country
        assert result.names["country"] == "United States"
        spatial_store.find_country.assert_called_once_with("US")


class TestLookupFailures:
    """Test store failures during containing lookups."""

    def test_should_treat_timeout_as_absent_state(
        self, builder, spatial_store, record_factory
    ):
        """Test a timed out state lookup leaves the state empty."""
        # Arrange
        spatial_store.find_state_containing.side_effect = TimeoutError("slow")
        source = record_factory(id=1, feature_code="PPL")

        # Act
        with capture_logs() as logs:
            result = builder.resolve_hierarchy(source, [])

        # Assert
        assert result.state is None
        assert result.city == source
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert warnings[0]["event"] == "hierarchy_lookup_failed"
        assert warnings[0]["lookup"] == "state"

    def test_should_treat_connection_error_as_absent(
        self, builder, spatial_store, record_factory
    ):
        """Test failed city and country lookups fall through."""
        spatial_store.find_city_containing_district.side_effect = ConnectionError()
        spatial_store.find_country.side_effect = ConnectionError()
        source = record_factory(id=1, feature_code="PPLX", a4="X")
        city = record_factory(id=2, feature_code="PPLA", a4="X")

        result = builder.resolve_hierarchy(source, [city])

        assert result.city == city
        assert result.country is None
        assert result.country_code == "US"

    def test_should_propagate_other_store_errors(
        self, builder, spatial_store, record_factory
    ):
        """Test unexpected store errors are raised."""
        spatial_store.find_state_containing.side_effect = RuntimeError("broken")

        with pytest.raises(RuntimeError):
            builder.resolve_hierarchy(record_factory(feature_code="PPL"), [])


class TestCandidateCollection:
    """Test fetching nearby candidates from the spatial store."""

    def test_should_pass_configured_radius_and_limit(
        self, builder, spatial_store, record_factory
    ):
        """Test next places settings drive the store query."""
        # Arrange
        source = record_factory(feature_code="PPL", a1="NJ", a4="X")

        # Act
        builder.collect_candidates(source)

        # Assert
        spatial_store.find_candidates_near.assert_called_once_with(
            source.coordinate,
            5000,
            "P",
            ["PPLA2", "PPLA", "PPLC"],
            country="US",
            admin_code_filter={"a1": LiteralValue(value="NJ")},
            limit=40,
        )

    def test_should_pass_unbounded_radius(self, builder, spatial_store, record_factory):
        """Test a null distance is passed through for boroughs."""
        source = record_factory(feature_code="PPLX", a1="NJ")

        builder.collect_candidates(source, [HierarchyLevel.BOROUGH])

        args, kwargs = spatial_store.find_candidates_near.call_args
        assert args[1] is None
        assert args[2] == "A"
        assert kwargs["limit"] == 10

    def test_should_use_source_feature_code_entry(
        self, builder, spatial_store, record_factory
    ):
        """Test a "P.PPLX" distance applies to a PPLX source searching class P."""
        # Arrange
        source = record_factory(feature_code="PPLX", a1="NJ")

        # Act
        builder.collect_candidates(source)

        # Assert
        args, kwargs = spatial_store.find_candidates_near.call_args
        assert args[1] == 3000
        assert kwargs["limit"] == 40

    def test_should_deduplicate_across_levels(
        self, builder, spatial_store, record_factory
    ):
        """Test records found for several levels are kept once."""
        first = record_factory(id=2, feature_code="PPLA")
        second = record_factory(id=3, feature_code="PPL")
        spatial_store.find_candidates_near.side_effect = [[first, second], [first]]

        found = builder.collect_candidates(
            record_factory(id=1, feature_code="PPLX"),
            [HierarchyLevel.DISTRICT, HierarchyLevel.CITY],
        )

        assert found == [first, second]

    def test_locate_should_collect_and_resolve(
        self, builder, spatial_store, record_factory
    ):
        """Test locate queries every level and resolves the result."""
        source = record_factory(id=1, name="Quarter", feature_code="PPLX", a4="X")
        city = record_factory(id=2, name="Town", feature_code="PPLA", a4="X")
        spatial_store.find_candidates_near.side_effect = [[], [], [city]]

        result = builder.locate(source)

        assert spatial_store.find_candidates_near.call_count == 3
        assert result.city == city
        assert result.district == source

    def test_locate_should_not_make_populated_ward_the_city(
        self, builder, spatial_store, record_factory
    ):
        """Test administrative candidates never become the city."""
        # Arrange
        source = record_factory(
            id=1, name="Quarter", feature_code="PPLX", a1="NJ", a4="X"
        )
        ward = record_factory(
            id=2,
            name="Ward 4",
            feature_class="A",
            feature_code="ADM4",
            population=2000,
            a1="NJ",
            a4="X",
        )
        spatial_store.find_candidates_near.side_effect = [[], [ward], []]

        # Act
        result = builder.locate(source)

        # Assert
        assert result.city == source
        assert result.district is None
        assert result.names == {"city": "Quarter"}
        assert source.population is None


class TestPopulationBackfill:
    """Test the population backfill helper."""

    def test_should_copy_population(self, record_factory):
        """Test the district takes the city's population."""
        district = record_factory(id=1)
        city = record_factory(id=2, population=75000)

        backfill_district_population_from_city(district, city)

        assert district.population == 75000
