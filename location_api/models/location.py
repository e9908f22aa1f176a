"""Location records and the administrative hierarchy assembled around them."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from location_api.models.geometry import Point

ADMIN_CODE_KEYS: tuple[str, ...] = ("a1", "a2", "a3", "a4")


class FeatureClass(str, Enum):
    """GeoNames feature classes."""

    A = "A"  # country, state, region
    H = "H"  # stream, lake
    L = "L"  # parks, area
    P = "P"  # city, village
    R = "R"  # road, railroad
    S = "S"  # spot, building, farm
    T = "T"  # mountain, hill, rock
    U = "U"  # undersea
    V = "V"  # forest, heath


class HierarchyLevel(str, Enum):
    """Levels resolved independently by rule matching.

    Country is read from the record itself and is not a level.
    """

    DISTRICT = "district"
    BOROUGH = "borough"
    CITY = "city"
    STATE = "state"


class AdminCodeSet(BaseModel):
    """Nested administrative subdivision codes, any of which may be absent."""

    model_config = ConfigDict(frozen=True)

    a1: str | None = None
    a2: str | None = None
    a3: str | None = None
    a4: str | None = None

    def get(self, key: str) -> str | None:
        """Return the code stored under ``a1`` .. ``a4``.

        Raises:
            KeyError: If key is not an admin code key
        """
        if key not in ADMIN_CODE_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def non_null(self) -> dict[str, str]:
        """Return only the codes that are set, in a1..a4 order."""
        return {
            key: value
            for key in ADMIN_CODE_KEYS
            if (value := getattr(self, key)) is not None
        }


class LocationRecord(BaseModel):
    """Place record created by the ingestion side.

    Records are treated as read-only, apart from the population backfill
    performed by ``backfill_district_population_from_city``.
    """

    id: int
    name: str
    feature_class: FeatureClass
    feature_code: str
    country: str | None = Field(default=None, description="ISO 3166-1 alpha-2 code")
    admin_codes: AdminCodeSet = Field(default_factory=AdminCodeSet)
    coordinate: Point
    population: int | None = Field(default=None, ge=0)

    @property
    def has_population(self) -> bool:
        return bool(self.population)


class HierarchyResult(BaseModel):
    """Resolved administrative hierarchy for one source record."""

    district: LocationRecord | None = None
    borough: LocationRecord | None = None
    city: LocationRecord | None = None
    state: LocationRecord | None = None
    country: LocationRecord | None = None
    country_code: str | None = None
    names: dict[str, str] = Field(
        default_factory=dict,
        description="Display name per present level, plus 'country'",
    )

    def get(self, level: HierarchyLevel) -> LocationRecord | None:
        """Return the record resolved for a hierarchy level."""
        return getattr(self, level.value)
