"""Error hierarchy for geometry decoding, taxonomy lookups and hierarchy resolution."""


class LocationApiError(Exception):
    """Base exception for all location API errors."""


class DecodeError(LocationApiError):
    """Geometry text could not be turned into a geometry value."""


class MalformedGeometryError(DecodeError):
    """Geometry text is not parseable."""

    def __init__(self, text: object, reason: str):
        """Initialize malformed geometry error.

        Args:
            text: The rejected input
            reason: Why the input was rejected
        """
        self.text = text
        self.reason = reason
        super().__init__(f"Malformed geometry {text!r}: {reason}")


class TaxonomyError(LocationApiError):
    """Feature class or feature code lookup failed."""


class UnknownFeatureError(TaxonomyError):
    """Feature class or feature code is not part of the taxonomy."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown feature class or code: {value!r}")


class ConfigError(LocationApiError):
    """Hierarchy configuration could not be loaded or resolved."""


class CountryCodeMissingError(ConfigError):
    """The location record carries no country code."""

    def __init__(self, record_id: int | None = None):
        self.record_id = record_id
        super().__init__(f"Location record {record_id} has no country code")


class ConfigTypeMismatchError(ConfigError):
    """A configured value has the wrong shape."""

    def __init__(self, key: str, expected_type: str, detail: str | None = None):
        """Initialize type mismatch error.

        Args:
            key: Configuration key holding the bad value
            expected_type: Name of the type that was expected
            detail: Optional validator message
        """
        self.key = key
        self.expected_type = expected_type
        self.detail = detail
        message = f"Configuration key {key!r} must be of type {expected_type}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MissingConfigKeyError(ConfigError):
    """A required configuration key is unresolved after all fallbacks."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required configuration key {key!r} is missing")


class HierarchyError(LocationApiError):
    """Hierarchy could not be assembled for a location record."""


class UnsupportedFeatureCodeError(HierarchyError):
    """The source record's feature code has no resolution path."""

    def __init__(self, feature_code: str, country: str | None = None):
        self.feature_code = feature_code
        self.country = country
        super().__init__(
            f"Feature code {feature_code!r} is neither a district nor a city code"
            f" for country {country!r}"
        )
