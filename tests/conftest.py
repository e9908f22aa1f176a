"""Test configuration."""

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from pytest import Config

from location_api.core.logging import configure_logging
from location_api.models.geometry import Point
from location_api.models.location import AdminCodeSet, LocationRecord
from location_api.services.hierarchy_builder import HierarchyBuilder
from location_api.services.hierarchy_config import (
    HierarchyConfigResolver,
    parse_hierarchy_config,
)
from location_api.services.name_resolver import NameResolver

fixture = pytest.fixture

RecordFactory = Callable[..., LocationRecord]

HIERARCHY_CONFIG_DATA: dict[str, Any] = {
    "district_match": {"US": "a1", "AT": "a3", "VA": "a0"},
    "location_configuration": {
        "default": {
            "district": {
                "feature_class": "P",
                "feature_codes": ["PPLX", "PPL"],
            },
            "borough": {
                "feature_class": "A",
                "feature_codes": ["ADM4"],
                "visible": False,
            },
            "city": {
                "feature_class": "P",
                "feature_codes": ["PPLA", "PPLC", "PPLA2"],
                "sort_by_population": True,
            },
            "state": {
                "feature_class": "A",
                "feature_codes": ["ADM1"],
                "use_coordinate": True,
                "admin_codes": {"a1": "from-location"},
            },
        },
        "US": {
            "district": {
                "feature_codes": ["PPLX", "PPL"],
                "admin_codes": {"a2": "not-null"},
                "exceptions": [
                    {
                        "filter": {"a1": "NY", "a2": "047|061"},
                        "feature_codes": ["PPLX"],
                        "sort_by_feature_codes": True,
                        "admin_codes": {"a2": "from-location"},
                    }
                ],
            },
            "city": {
                "feature_codes": ["PPLA2", "PPLA", "PPLC"],
                "sort_by_feature_codes": True,
                "sort_by_population": True,
            },
            "state": None,
        },
        "CH": {
            "district": {
                "must_match_admin_codes": True,
                "admin_codes": {"a1": "ZH"},
            }
        },
        "FR": None,
    },
    "next_places": {
        "limit": {
            "default": 10,
            "feature_class": {"P": 20},
            "overwrites": {"US": {"feature_class": {"P": 40}}},
        },
        "distance": {
            "default": 5000,
            "feature_class": {"A": None},
            "feature_code": {"P.PPLX": 3000},
        },
    },
}


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    configure_logging(testing=True)


@fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@fixture
def hierarchy_config_data() -> dict[str, Any]:
    """Raw hierarchy configuration, safe to modify per test."""
    return copy.deepcopy(HIERARCHY_CONFIG_DATA)


@fixture
def config_resolver(hierarchy_config_data: dict[str, Any]) -> HierarchyConfigResolver:
    """Config resolver over the test configuration."""
    return HierarchyConfigResolver(parse_hierarchy_config(hierarchy_config_data))


@fixture
def record_factory() -> RecordFactory:
    """Build location records with sensible defaults."""

    def make_record(
        id: int = 1,
        name: str = "Place",
        feature_class: str = "P",
        feature_code: str = "PPL",
        country: str | None = "US",
        population: int | None = None,
        latitude: float = 40.7,
        longitude: float = -74.0,
        **admin_codes: str | None,
    ) -> LocationRecord:
        return LocationRecord(
            id=id,
            name=name,
            feature_class=feature_class,
            feature_code=feature_code,
            country=country,
            admin_codes=AdminCodeSet(**admin_codes),
            coordinate=Point(latitude=latitude, longitude=longitude),
            population=population,
        )

    return make_record


@fixture
def spatial_store() -> MagicMock:
    """Spatial store whose lookups find nothing unless told otherwise."""
    store = MagicMock()
    store.find_candidates_near.return_value = []
    store.find_city_containing_district.return_value = None
    store.find_state_containing.return_value = None
    store.find_country.return_value = None
    return store


@fixture
def builder(
    config_resolver: HierarchyConfigResolver, spatial_store: MagicMock
) -> HierarchyBuilder:
    """Hierarchy builder without name or localization stores."""
    return HierarchyBuilder(config_resolver, spatial_store, NameResolver())
