"""Assembly of the administrative hierarchy around a source record.

A source record is either rooted as a district (its feature code is one of
the district level's codes) or as a city (one of the city level's codes).
The missing half is picked from nearby candidates; state and country come
from direct store lookups.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from structlog.stdlib import BoundLogger

from location_api.core.exceptions import UnsupportedFeatureCodeError
from location_api.core.logging import get_context_logger
from location_api.models.hierarchy_config import LevelRuleSet
from location_api.models.location import (
    HierarchyLevel,
    HierarchyResult,
    LocationRecord,
)
from location_api.services.hierarchy_config import HierarchyConfigResolver
from location_api.services.name_resolver import NameResolver
from location_api.services.protocols import LocalizationStore, SpatialStore

T = TypeVar("T")

DEFAULT_CANDIDATE_LIMIT = 10

# Store failures that count as "nothing found" for containing lookups
LOOKUP_ERRORS: tuple[type[Exception], ...] = (TimeoutError, ConnectionError)


def backfill_district_population_from_city(
    district: LocationRecord, city: LocationRecord
) -> None:
    """Copy the city's population onto the district record.

    This mutates ``district`` in place. It only happens when the city was
    found by population, so the caller must not share the district record
    with another resolution running at the same time.
    """
    district.population = city.population


def same_admin4(first: LocationRecord, second: LocationRecord) -> bool:
    return first.admin_codes.a4 == second.admin_codes.a4


class HierarchyBuilder:
    """Build district, borough, city, state and country for a source record."""

    def __init__(
        self,
        config_resolver: HierarchyConfigResolver,
        spatial_store: SpatialStore,
        name_resolver: NameResolver | None = None,
        localization_store: LocalizationStore | None = None,
    ):
        self.config_resolver = config_resolver
        self.spatial_store = spatial_store
        self.name_resolver = name_resolver or NameResolver()
        self.localization_store = localization_store

    def resolve_hierarchy(
        self,
        source: LocationRecord,
        candidates: Sequence[LocationRecord],
        iso_language: str | None = None,
        language_tag: str | None = None,
    ) -> HierarchyResult:
        """Assemble the hierarchy of a source record.

        Args:
            source: Record to place in the hierarchy
            candidates: Nearby records, nearest first
            iso_language: Language of the display names
            language_tag: Optional preferred language tag

        Returns:
            HierarchyResult: Present levels and their display names

        Raises:
            ConfigError: If the level rules cannot be resolved
            UnsupportedFeatureCodeError: If the source is neither a district nor a city
        """
        log = get_context_logger(
            __name__, location_id=source.id, country=source.country
        )
        rules = self.config_resolver.resolve_all(source)
        district_rules = rules[HierarchyLevel.DISTRICT]
        city_rules = rules[HierarchyLevel.CITY]
        others = [candidate for candidate in candidates if candidate.id != source.id]

        district: LocationRecord | None
        city: LocationRecord | None
        if district_rules.accepts_feature(source):
            district, city = self._resolve_from_district(
                source, others, city_rules, log
            )
        elif city_rules.accepts_feature(source):
            city = source
            district = self._first_in_same_admin4(others, district_rules, source)
            log.debug("hierarchy_city_rooted", district_id=_id(district))
        else:
            raise UnsupportedFeatureCodeError(source.feature_code, source.country)

        if (
            district is not None
            and city is not None
            and self._display_name(district, iso_language, language_tag)
            == self._display_name(city, iso_language, language_tag)
        ):
            log.debug("hierarchy_district_dropped", reason="same_name_as_city")
            district = None

        levels: dict[HierarchyLevel, LocationRecord | None] = {
            HierarchyLevel.DISTRICT: district,
            HierarchyLevel.BOROUGH: next(
                iter(self._accepted(others, rules[HierarchyLevel.BOROUGH])), None
            ),
            HierarchyLevel.CITY: city,
            HierarchyLevel.STATE: self._lookup(
                self.spatial_store.find_state_containing, source, "state", log
            ),
        }
        for level, record in list(levels.items()):
            if record is not None and not rules[level].visible:
                levels[level] = None

        country_code = source.country
        country = (
            self._lookup(self.spatial_store.find_country, country_code, "country", log)
            if country_code
            else None
        )

        names = {
            level.value: self._display_name(record, iso_language, language_tag)
            for level, record in levels.items()
            if record is not None
        }
        country_name = self._country_name(
            country_code, country, iso_language, language_tag
        )
        if country_name:
            names["country"] = country_name

        return HierarchyResult(
            district=levels[HierarchyLevel.DISTRICT],
            borough=levels[HierarchyLevel.BOROUGH],
            city=levels[HierarchyLevel.CITY],
            state=levels[HierarchyLevel.STATE],
            country=country,
            country_code=country_code,
            names=names,
        )

    def collect_candidates(
        self,
        source: LocationRecord,
        levels: Iterable[HierarchyLevel] = (HierarchyLevel.CITY,),
    ) -> list[LocationRecord]:
        """Fetch nearby records for the given levels from the spatial store.

        Radius and limit come from the ``next_places`` configuration. The
        source's own feature code selects a ``"<class>.<code>"`` entry when
        the level searches the source's feature class. Records returned for
        several levels are kept once, in first-seen order.
        """
        next_places = self.config_resolver.next_places
        collected: dict[int, LocationRecord] = {}
        for level in levels:
            rules = self.config_resolver.resolve(source, level)
            feature_class = rules.feature_class.value
            feature_code = (
                source.feature_code
                if rules.feature_class == source.feature_class
                else None
            )
            found = self.spatial_store.find_candidates_near(
                source.coordinate,
                next_places.distance(
                    feature_class, feature_code, country=source.country
                ),
                feature_class,
                list(rules.feature_codes),
                country=source.country,
                admin_code_filter=rules.admin_code_filter,
                limit=next_places.limit(
                    feature_class,
                    feature_code,
                    country=source.country,
                    default=DEFAULT_CANDIDATE_LIMIT,
                ),
            )
            for record in found:
                collected.setdefault(record.id, record)
        return list(collected.values())

    def locate(
        self,
        source: LocationRecord,
        iso_language: str | None = None,
        language_tag: str | None = None,
    ) -> HierarchyResult:
        """Fetch candidates for every level and resolve the hierarchy."""
        candidates = self.collect_candidates(
            source,
            (HierarchyLevel.DISTRICT, HierarchyLevel.BOROUGH, HierarchyLevel.CITY),
        )
        return self.resolve_hierarchy(source, candidates, iso_language, language_tag)

    def _resolve_from_district(
        self,
        district: LocationRecord,
        candidates: list[LocationRecord],
        city_rules: LevelRuleSet,
        log: BoundLogger,
    ) -> tuple[LocationRecord | None, LocationRecord | None]:
        city = self._lookup(
            self.spatial_store.find_city_containing_district, district, "city", log
        )
        if city is not None:
            log.debug("hierarchy_city_from_store", city_id=city.id)
            return district, city

        city = self._first_in_same_admin4(candidates, city_rules, district)
        if city is not None:
            log.debug("hierarchy_city_from_candidates", city_id=city.id)
            return district, city

        city = next(
            (
                candidate
                for candidate in candidates
                if candidate.feature_class == city_rules.feature_class
                and candidate.has_population
                and same_admin4(candidate, district)
            ),
            None,
        )
        if city is not None:
            log.debug("hierarchy_city_from_population", city_id=city.id)
            backfill_district_population_from_city(district, city)
            return district, city

        log.debug("hierarchy_district_promoted_to_city")
        return None, district

    @staticmethod
    def _first_in_same_admin4(
        candidates: list[LocationRecord],
        rules: LevelRuleSet,
        anchor: LocationRecord,
    ) -> LocationRecord | None:
        for candidate in rules.order(candidates):
            if (
                rules.accepts_feature(candidate)
                and rules.matches_population(candidate)
                and same_admin4(candidate, anchor)
            ):
                return candidate
        return None

    @staticmethod
    def _accepted(
        candidates: list[LocationRecord], rules: LevelRuleSet
    ) -> list[LocationRecord]:
        return [
            candidate
            for candidate in rules.order(candidates)
            if rules.accepts(candidate)
        ]

    @staticmethod
    def _lookup(
        lookup: Callable[[T], LocationRecord | None],
        argument: T,
        what: str,
        log: BoundLogger,
    ) -> LocationRecord | None:
        try:
            return lookup(argument)
        except LOOKUP_ERRORS as e:
            log.warning("hierarchy_lookup_failed", lookup=what, error=str(e))
            return None

    def _display_name(
        self,
        record: LocationRecord,
        iso_language: str | None,
        language_tag: str | None,
    ) -> str:
        return self.name_resolver.resolve(record, iso_language, language_tag)

    def _country_name(
        self,
        country_code: str | None,
        country: LocationRecord | None,
        iso_language: str | None,
        language_tag: str | None,
    ) -> str | None:
        if not country_code:
            return None
        if self.localization_store is not None:
            name = self.localization_store.country_display_name(
                country_code, iso_language or self.name_resolver.canonical_language
            )
            if name:
                return name
        if country is not None:
            return self._display_name(country, iso_language, language_tag)
        return None


def _id(record: LocationRecord | None) -> int | None:
    return None if record is None else record.id
