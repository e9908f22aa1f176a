"""Lookups over the static feature class / feature code table."""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from location_api.core.exceptions import UnknownFeatureError
from location_api.core.feature_codes import FEATURE_CLASS_LABELS, FEATURE_CODES
from location_api.models.location import FeatureClass


class FeatureCodeSuggestion(BaseModel):
    """Autocomplete item for a feature code."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    feature_class: FeatureClass
    relevance: int = 0


class FeatureTaxonomy:
    """Classify feature codes and list the codes of a feature class."""

    def __init__(self, table: Mapping[str, Mapping[str, str]] = FEATURE_CODES):
        self._table = table
        self._class_by_code: dict[str, FeatureClass] = {}
        for feature_class, codes in table.items():
            for code in codes:
                self._class_by_code[code] = FeatureClass(feature_class)

    def class_of(self, code: str) -> FeatureClass:
        """Return the feature class a feature code belongs to.

        Raises:
            UnknownFeatureError: If the code is not in the table
        """
        try:
            return self._class_by_code[code.upper()]
        except (KeyError, AttributeError) as e:
            raise UnknownFeatureError(str(code)) from e

    def codes_of(self, feature_class: FeatureClass | str) -> list[str]:
        """Return the codes of a feature class, ordered by label.

        Raises:
            UnknownFeatureError: If the class is not in the table
        """
        codes = self._codes(feature_class)
        return sorted(codes, key=lambda code: (codes[code].casefold(), code))

    def label_of(self, code: str) -> str:
        """Return the descriptive label of a feature code."""
        feature_class = self.class_of(code)
        return self._table[feature_class.value][code.upper()]

    def class_label(self, feature_class: FeatureClass | str) -> str:
        key = self._class_key(feature_class)
        return FEATURE_CLASS_LABELS.get(key, key)

    def contains(self, feature_class: FeatureClass | str, code: str) -> bool:
        """Check whether a code belongs to the given class."""
        try:
            return self.class_of(code).value == self._class_key(feature_class)
        except UnknownFeatureError:
            return False

    def autocomplete(self, query: str) -> list[FeatureCodeSuggestion]:
        """Find codes whose code or label contains the query, ignoring case.

        Ranking is left to the caller, every suggestion has relevance 0.
        """
        needle = query.strip().casefold()
        if not needle:
            return []

        suggestions: list[FeatureCodeSuggestion] = []
        for feature_class, codes in self._table.items():
            for code, label in codes.items():
                if needle in code.casefold() or needle in label.casefold():
                    suggestions.append(
                        FeatureCodeSuggestion(
                            id=code,
                            name=label,
                            feature_class=FeatureClass(feature_class),
                        )
                    )
        return suggestions

    def all(self) -> dict[FeatureClass, list[str]]:
        """Return every class with its codes ordered by label."""
        return {
            FeatureClass(feature_class): self.codes_of(feature_class)
            for feature_class in self._table
        }

    def _codes(self, feature_class: FeatureClass | str) -> Mapping[str, str]:
        key = self._class_key(feature_class)
        try:
            return self._table[key]
        except KeyError as e:
            raise UnknownFeatureError(key) from e

    @staticmethod
    def _class_key(feature_class: FeatureClass | str) -> str:
        if isinstance(feature_class, FeatureClass):
            return feature_class.value
        return str(feature_class).upper()


feature_taxonomy = FeatureTaxonomy()


def classify(code: str) -> FeatureClass:
    """Return the feature class of a feature code.

    Raises:
        UnknownFeatureError: If the code is not in the table
    """
    return feature_taxonomy.class_of(code)
