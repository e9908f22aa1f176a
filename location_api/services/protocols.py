"""
Protocol definitions for the stores consulted during hierarchy resolution.

Any class implementing these Protocols can be plugged into the builder and
name resolver without inheriting from a base class (structural typing).
Every lookup returns None (or an empty list) when nothing is found.
"""

from collections.abc import Mapping
from typing import Protocol

from location_api.models.geometry import Point
from location_api.models.hierarchy_config import AdminCodeMatcher
from location_api.models.location import LocationRecord


class SpatialStore(Protocol):
    """Spatial data store holding location records."""

    def find_candidates_near(
        self,
        point: Point,
        radius_meters: int | None,
        feature_class: str,
        feature_codes: list[str],
        country: str | None = None,
        admin_code_filter: Mapping[str, AdminCodeMatcher] | None = None,
        limit: int = 10,
    ) -> list[LocationRecord]:
        """
        Find records near a point.

        Args:
            point: Search center
            radius_meters: Search radius, None for unbounded
            feature_class: Feature class of the records to return
            feature_codes: Accepted feature codes
            country: Optional ISO country code restriction
            admin_code_filter: Optional admin code matchers per key
            limit: Maximum number of records

        Returns:
            Matching records, nearest first. Empty list if none found.
        """
        ...

    def find_city_containing_district(
        self, district: LocationRecord
    ) -> LocationRecord | None:
        """Return the city whose area contains the district, if known."""
        ...

    def find_state_containing(self, record: LocationRecord) -> LocationRecord | None:
        """Return the state (first-order division) containing the record."""
        ...

    def find_country(self, country_code: str) -> LocationRecord | None:
        """Return the country record for an ISO 3166-1 alpha-2 code."""
        ...


class NameStore(Protocol):
    """Alternate names by language."""

    def resolve_alternate_name(
        self,
        record: LocationRecord,
        iso_language: str,
        language_tag: str | None = None,
    ) -> str | None:
        """
        Look up a localized name.

        Args:
            record: Location record to name
            iso_language: ISO 639 language code, e.g. "de"
            language_tag: Optional preferred tag, e.g. "de-CH"

        Returns:
            The alternate name, or None if the record has none in that language.
        """
        ...


class LocalizationStore(Protocol):
    """Translated UI strings."""

    def country_display_name(
        self, country_code: str, ui_language: str
    ) -> str | None: ...
