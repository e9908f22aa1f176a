"""Hierarchy configuration models.

The configuration is read once from JSON and validated into frozen models.
Admin code values are parsed into ``ConfiguredValue`` variants at that point:

- ``"from-location"``: ``FromLocation``, replaced by the record's own code
- ``"not-null"``: ``NotNull``
- ``"v1|v2"``: ``OneOf``
- anything else: ``LiteralValue``

The token ``"null"`` in a literal or an alternation matches an absent code.
"""

from collections.abc import Iterable
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

from location_api.models.location import (
    ADMIN_CODE_KEYS,
    FeatureClass,
    HierarchyLevel,
    LocationRecord,
)

FROM_LOCATION = "from-location"
NOT_NULL = "not-null"
NULL_TOKEN = "null"
ALTERNATION_SEPARATOR = "|"
DEFAULT_DISTRICT_MATCH = "a4"


class LiteralValue(BaseModel):
    """Admin code must equal a fixed value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: str

    def matches(self, code: str | None) -> bool:
        if self.value == NULL_TOKEN:
            return code is None
        return code == self.value


class OneOf(BaseModel):
    """Admin code must be one of several values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["one_of"] = "one_of"
    values: tuple[str, ...]

    def matches(self, code: str | None) -> bool:
        if code is None:
            return NULL_TOKEN in self.values
        return code in self.values


class NotNull(BaseModel):
    """Admin code must be present."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_null"] = "not_null"

    def matches(self, code: str | None) -> bool:
        return code is not None


class FromLocation(BaseModel):
    """Placeholder for the source record's own admin code."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["from_location"] = "from_location"

    def resolve(self, code: str | None) -> LiteralValue:
        return LiteralValue(value=NULL_TOKEN if code is None else code)


ConfiguredValue = Annotated[
    LiteralValue | OneOf | NotNull | FromLocation, Field(discriminator="kind")
]
AdminCodeMatcher = Annotated[
    LiteralValue | OneOf | NotNull, Field(discriminator="kind")
]


def parse_configured_value(raw: str) -> LiteralValue | OneOf | NotNull | FromLocation:
    """Parse a configured admin code string into its variant."""
    value = raw.strip()
    if value == FROM_LOCATION:
        return FromLocation()
    if value == NOT_NULL:
        return NotNull()
    if ALTERNATION_SEPARATOR in value:
        return OneOf(
            values=tuple(part.strip() for part in value.split(ALTERNATION_SEPARATOR))
        )
    return LiteralValue(value=value)


def _parse_admin_code_mapping(value: Any, allow_from_location: bool = True) -> Any:
    if not isinstance(value, dict):
        return value

    parsed: dict[str, Any] = {}
    for key, raw in value.items():
        if key not in ADMIN_CODE_KEYS:
            raise ValueError(
                f"unknown admin code key {key!r}, expected one of "
                f"{', '.join(ADMIN_CODE_KEYS)}"
            )
        if isinstance(raw, str):
            raw = parse_configured_value(raw)
        elif not isinstance(raw, (LiteralValue, OneOf, NotNull, FromLocation)):
            raise ValueError(f"admin code {key!r} must be a string")
        if isinstance(raw, FromLocation) and not allow_from_location:
            raise ValueError(f"{FROM_LOCATION!r} cannot be used in an exception filter")
        parsed[key] = raw
    return parsed


class LevelRules(BaseModel):
    """Rule keys for one hierarchy level; unset keys fall through to the next layer."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    feature_class: FeatureClass | None = None
    feature_codes: tuple[StrictStr, ...] | None = None
    admin_codes: dict[str, ConfiguredValue] | None = None
    sort_by_feature_codes: StrictBool | None = None
    sort_by_population: StrictBool | None = None
    must_match_admin_codes: StrictBool | None = None
    visible: StrictBool | None = None
    with_population: StrictBool | None = None
    use_coordinate: StrictBool | None = None

    @field_validator("admin_codes", mode="before")
    @classmethod
    def parse_admin_codes(cls, value: Any) -> Any:
        return _parse_admin_code_mapping(value)


class ExceptionRule(BaseModel):
    """Override applied when a record's admin codes match ``filter``.

    In JSON the override keys sit next to ``filter``.
    """

    model_config = ConfigDict(frozen=True)

    filter: dict[str, AdminCodeMatcher]
    overrides: LevelRules = Field(default_factory=LevelRules)

    @model_validator(mode="before")
    @classmethod
    def split_overrides(cls, data: Any) -> Any:
        if isinstance(data, dict) and "overrides" not in data:
            overrides = {key: value for key, value in data.items() if key != "filter"}
            return {"filter": data.get("filter"), "overrides": overrides}
        return data

    @field_validator("filter", mode="before")
    @classmethod
    def parse_filter(cls, value: Any) -> Any:
        return _parse_admin_code_mapping(value, allow_from_location=False)

    def matches(self, record: LocationRecord) -> bool:
        """Check every filtered admin code of the record."""
        return all(
            matcher.matches(record.admin_codes.get(key))
            for key, matcher in self.filter.items()
        )


class LevelBlock(LevelRules):
    """Configuration of one level for one country (or the default)."""

    exceptions: tuple[ExceptionRule, ...] = ()


CountryBlock = dict[HierarchyLevel, LevelBlock | None]


class NextPlacesSetting(BaseModel):
    """Numeric setting looked up by feature code, feature class, then default."""

    model_config = ConfigDict(frozen=True)

    default: StrictInt | None = None
    feature_class: dict[str, StrictInt | None] = Field(default_factory=dict)
    feature_code: dict[str, StrictInt | None] = Field(
        default_factory=dict, description="Keys look like 'P.PPLC'"
    )
    overwrites: dict[str, "NextPlacesOverwrite"] = Field(default_factory=dict)

    def for_country(self, country: str | None) -> "NextPlacesSetting":
        """Return the setting with the country's overwrites merged in."""
        overwrite = self.overwrites.get(country) if country else None
        if overwrite is None:
            return self
        return self.model_copy(
            update={
                field: getattr(overwrite, field) for field in overwrite.model_fields_set
            }
        )


class NextPlacesOverwrite(BaseModel):
    """Country specific replacement of whole ``NextPlacesSetting`` keys."""

    model_config = ConfigDict(frozen=True)

    default: StrictInt | None = None
    feature_class: dict[str, StrictInt | None] = Field(default_factory=dict)
    feature_code: dict[str, StrictInt | None] = Field(default_factory=dict)


NextPlacesSetting.model_rebuild()


class NextPlacesConfig(BaseModel):
    """Search limit and radius (meters) for nearby places."""

    model_config = ConfigDict(frozen=True)

    limit: NextPlacesSetting = Field(default_factory=NextPlacesSetting)
    distance: NextPlacesSetting = Field(default_factory=NextPlacesSetting)


class HierarchyConfig(BaseModel):
    """Root of the hierarchy configuration file."""

    model_config = ConfigDict(frozen=True)

    district_match: dict[str, Literal["a0", "a1", "a2", "a3", "a4"]] = Field(
        default_factory=dict
    )
    location_configuration: dict[str, CountryBlock | None] = Field(
        default_factory=dict
    )
    next_places: NextPlacesConfig = Field(default_factory=NextPlacesConfig)

    def default_block(self, level: HierarchyLevel) -> LevelBlock:
        """Return the default block of a level, empty when not configured."""
        default = self.location_configuration.get("default") or {}
        return default.get(level) or LevelBlock()

    def country_block(self, country: str, level: HierarchyLevel) -> LevelBlock | None:
        """Return the country's own block of a level, if it has one."""
        country_config = self.location_configuration.get(country)
        if not country_config:
            return None
        return country_config.get(level)

    def district_match_for(self, country: str) -> str:
        return self.district_match.get(country, DEFAULT_DISTRICT_MATCH)

    def countries(self) -> Iterable[str]:
        return (key for key in self.location_configuration if key != "default")


class LevelRuleSet(BaseModel):
    """Effective rules of one hierarchy level for one source record."""

    model_config = ConfigDict(frozen=True)

    level: HierarchyLevel
    feature_class: FeatureClass
    feature_codes: tuple[str, ...]
    admin_code_filter: dict[str, AdminCodeMatcher] = Field(default_factory=dict)
    sort_by_feature_codes: bool = False
    sort_by_population: bool = False
    must_match_admin_codes: bool = False
    visible: bool = True
    with_population: bool | None = None
    use_coordinate: bool = False

    def accepts_feature(self, record: LocationRecord) -> bool:
        return record.feature_code in self.feature_codes

    def matches_admin_codes(self, record: LocationRecord) -> bool:
        return all(
            matcher.matches(record.admin_codes.get(key))
            for key, matcher in self.admin_code_filter.items()
        )

    def matches_population(self, record: LocationRecord) -> bool:
        """Apply ``with_population``: true needs a population, false needs none."""
        if self.with_population is None:
            return True
        return record.has_population is self.with_population

    def accepts(self, record: LocationRecord) -> bool:
        """Check feature code, admin codes and population together."""
        return (
            self.accepts_feature(record)
            and self.matches_admin_codes(record)
            and self.matches_population(record)
        )

    def order(self, candidates: Iterable[LocationRecord]) -> list[LocationRecord]:
        """Order candidates by configured feature code order and population.

        Without sort flags the incoming (distance) order is kept. Sorting is
        stable, so distance order survives inside equal keys.
        """
        ordered = list(candidates)
        if self.sort_by_feature_codes:
            rank = {code: index for index, code in enumerate(self.feature_codes)}
            unranked = len(rank)
            if self.sort_by_population:
                ordered.sort(
                    key=lambda record: (
                        rank.get(record.feature_code, unranked),
                        -(record.population or 0),
                    )
                )
            else:
                ordered.sort(key=lambda record: rank.get(record.feature_code, unranked))
        elif self.sort_by_population:
            ordered.sort(key=lambda record: -(record.population or 0))
        return ordered
