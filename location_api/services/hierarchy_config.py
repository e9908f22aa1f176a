"""Resolution of per-level hierarchy rules from the layered configuration.

Values are taken from the first layer that defines them:

1. the first exception of the country block whose filter matches the record
2. the country block of the level
3. the default block of the level
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from location_api.core.config import settings
from location_api.core.exceptions import (
    ConfigError,
    ConfigTypeMismatchError,
    CountryCodeMissingError,
    MissingConfigKeyError,
)
from location_api.core.logging import get_logger
from location_api.models.hierarchy_config import (
    NULL_TOKEN,
    ExceptionRule,
    FromLocation,
    HierarchyConfig,
    LevelBlock,
    LevelRules,
    LevelRuleSet,
    LiteralValue,
    NextPlacesSetting,
)
from location_api.models.location import (
    FeatureClass,
    HierarchyLevel,
    LocationRecord,
)

logger = get_logger(__name__)

# Expected shapes reported by ConfigTypeMismatchError
EXPECTED_TYPES: dict[str, str] = {
    "feature_class": "str (one of A, H, L, P, R, S, T, U, V)",
    "feature_codes": "list[str]",
    "admin_codes": "dict[str, str] with keys a1..a4",
    "filter": "dict[str, str] with keys a1..a4",
    "exceptions": "list[dict]",
    "sort_by_feature_codes": "bool",
    "sort_by_population": "bool",
    "must_match_admin_codes": "bool",
    "visible": "bool",
    "with_population": "bool | null",
    "use_coordinate": "bool",
    "district_match": "dict[str, str] with values a0..a4",
    "location_configuration": "dict[str, dict]",
    "next_places": "dict",
    "limit": "int",
    "distance": "int | null",
    "default": "int | null",
}


def parse_hierarchy_config(data: Any) -> HierarchyConfig:
    """Validate raw configuration data.

    Args:
        data: Decoded JSON document

    Returns:
        HierarchyConfig: Frozen configuration

    Raises:
        ConfigTypeMismatchError: If a value has the wrong shape
    """
    try:
        return HierarchyConfig.model_validate(data)
    except ValidationError as e:
        raise _type_mismatch(e) from e


def load_hierarchy_config(path: Path | str) -> HierarchyConfig:
    """Read and validate a JSON hierarchy configuration file.

    Raises:
        ConfigError: If the file cannot be read or is not valid JSON
        ConfigTypeMismatchError: If a value has the wrong shape
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read hierarchy configuration {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in hierarchy configuration {path}: {e}") from e

    config = parse_hierarchy_config(data)
    logger.info(
        "hierarchy_config_loaded",
        path=str(path),
        countries=sorted(config.countries()),
    )
    return config


def _type_mismatch(error: ValidationError) -> ConfigTypeMismatchError:
    first = error.errors()[0]
    names = [
        part for part in first["loc"] if isinstance(part, str) and part != "[key]"
    ]
    key = next((name for name in reversed(names) if name in EXPECTED_TYPES), None)
    if key is None:
        key = ".".join(str(part) for part in first["loc"]) or "<root>"
    expected = EXPECTED_TYPES.get(key) or str(
        (first.get("ctx") or {}).get("expected", first["type"])
    )
    return ConfigTypeMismatchError(key, expected, first.get("msg"))


class HierarchyConfigResolver:
    """Resolve the effective ``LevelRuleSet`` of a record for a hierarchy level."""

    REQUIRED_KEYS = ("feature_class", "feature_codes")

    def __init__(self, config: HierarchyConfig):
        self.config = config
        self.next_places = NextPlacesResolver(config)

    def resolve(self, record: LocationRecord, level: HierarchyLevel) -> LevelRuleSet:
        """Resolve the rule set for one level.

        Args:
            record: Source location record
            level: Hierarchy level to resolve

        Returns:
            LevelRuleSet: Fully populated rules

        Raises:
            CountryCodeMissingError: If the record has no country
            MissingConfigKeyError: If feature_class or feature_codes stay unresolved
        """
        country = record.country
        if not country:
            raise CountryCodeMissingError(record.id)

        default_block = self.config.default_block(level)
        block = self.config.country_block(country, level) or default_block
        exception = self.match_exception(block, record)
        if exception is not None:
            logger.debug(
                "hierarchy_exception_matched",
                location_id=record.id,
                country=country,
                level=level.value,
                filter={key: str(value) for key, value in exception.filter.items()},
            )

        layers: list[LevelRules] = [block, default_block]
        if exception is not None:
            layers.insert(0, exception.overrides)
        return self._build_rule_set(record, level, country, layers)

    def resolve_all(
        self, record: LocationRecord
    ) -> dict[HierarchyLevel, LevelRuleSet]:
        """Resolve the rule sets of every hierarchy level."""
        return {level: self.resolve(record, level) for level in HierarchyLevel}

    @staticmethod
    def match_exception(
        block: LevelBlock, record: LocationRecord
    ) -> ExceptionRule | None:
        """Return the first exception whose filter matches the record."""
        for rule in block.exceptions:
            if rule.matches(record):
                return rule
        return None

    def _build_rule_set(
        self,
        record: LocationRecord,
        level: HierarchyLevel,
        country: str,
        layers: list[LevelRules],
    ) -> LevelRuleSet:
        def value(key: str) -> Any:
            for layer in layers:
                found = getattr(layer, key)
                if found is not None:
                    return found
            return None

        for key in self.REQUIRED_KEYS:
            if value(key) is None:
                raise MissingConfigKeyError(key)

        must_match = value("must_match_admin_codes") or False
        visible = value("visible")

        return LevelRuleSet(
            level=level,
            feature_class=value("feature_class"),
            feature_codes=tuple(value("feature_codes")),
            admin_code_filter=self._admin_code_filter(
                record, country, layers, must_match
            ),
            sort_by_feature_codes=value("sort_by_feature_codes") or False,
            sort_by_population=value("sort_by_population") or False,
            must_match_admin_codes=must_match,
            visible=True if visible is None else visible,
            with_population=value("with_population"),
            use_coordinate=value("use_coordinate") or False,
        )

    def _admin_code_filter(
        self,
        record: LocationRecord,
        country: str,
        layers: list[LevelRules],
        must_match: bool,
    ) -> dict[str, Any]:
        if must_match:
            return {
                key: LiteralValue(value=code)
                for key, code in record.admin_codes.non_null().items()
            }

        for layer in layers:
            if layer.admin_codes is None:
                continue
            return {
                key: (
                    matcher.resolve(record.admin_codes.get(key))
                    if isinstance(matcher, FromLocation)
                    else matcher
                )
                for key, matcher in layer.admin_codes.items()
            }

        return self.general_admin_codes(record, country)

    def general_admin_codes(
        self, record: LocationRecord, country: str | None = None
    ) -> dict[str, LiteralValue]:
        """Return the admin code filter derived from ``district_match``.

        The country's match level (a4 unless configured) is copied from the
        record; ``a0`` disables admin code matching.
        """
        match_key = self.config.district_match_for(country or record.country or "")
        if match_key == "a0":
            return {}
        code = record.admin_codes.get(match_key)
        return {match_key: LiteralValue(value=NULL_TOKEN if code is None else code)}


class NextPlacesResolver:
    """Look up search limits and radii for nearby places."""

    def __init__(self, config: HierarchyConfig):
        self._config = config.next_places

    def limit(
        self,
        feature_class: str | None = None,
        feature_code: str | None = None,
        country: str | None = None,
        default: int | None = None,
    ) -> int:
        """Return the maximum number of nearby places to fetch.

        Raises:
            ConfigTypeMismatchError: If no integer limit is configured
        """
        limit = self._lookup(
            self._config.limit, feature_class, feature_code, country, default
        )
        if not isinstance(limit, int):
            raise ConfigTypeMismatchError("limit", EXPECTED_TYPES["limit"])
        return limit

    def distance(
        self,
        feature_class: str | None = None,
        feature_code: str | None = None,
        country: str | None = None,
        default: int | None = None,
    ) -> int | None:
        """Return the search radius in meters, None means unbounded."""
        return self._lookup(
            self._config.distance, feature_class, feature_code, country, default
        )

    @staticmethod
    def _lookup(
        setting: NextPlacesSetting,
        feature_class: str | None,
        feature_code: str | None,
        country: str | None,
        default: int | None,
    ) -> int | None:
        setting = setting.for_country(country)
        if isinstance(feature_class, FeatureClass):
            feature_class = feature_class.value

        if feature_code is not None:
            code_key = f"{feature_class}.{feature_code}"
            if code_key in setting.feature_code:
                return setting.feature_code[code_key]

        if feature_class is not None and feature_class in setting.feature_class:
            return setting.feature_class[feature_class]

        return default if setting.default is None else setting.default


_hierarchy_config: HierarchyConfig | None = None
_hierarchy_config_resolver: HierarchyConfigResolver | None = None


def get_hierarchy_config() -> HierarchyConfig:
    """Get or load the process-wide hierarchy configuration.

    Returns:
        HierarchyConfig loaded from ``settings.HIERARCHY_CONFIG_PATH``
    """
    global _hierarchy_config
    if _hierarchy_config is None:
        _hierarchy_config = load_hierarchy_config(settings.HIERARCHY_CONFIG_PATH)
    return _hierarchy_config


def get_hierarchy_config_resolver() -> HierarchyConfigResolver:
    """Get or create the singleton config resolver."""
    global _hierarchy_config_resolver
    if _hierarchy_config_resolver is None:
        _hierarchy_config_resolver = HierarchyConfigResolver(get_hierarchy_config())
    return _hierarchy_config_resolver
