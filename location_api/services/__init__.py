"""Hierarchy resolution services.

This package provides:
- Feature class / feature code lookups
- Per-country hierarchy rule resolution
- Hierarchy assembly from nearby candidates
- Localized display names
"""

from location_api.services.feature_taxonomy import (
    FeatureCodeSuggestion,
    FeatureTaxonomy,
    classify,
    feature_taxonomy,
)
from location_api.services.hierarchy_builder import (
    HierarchyBuilder,
    backfill_district_population_from_city,
)
from location_api.services.hierarchy_config import (
    HierarchyConfigResolver,
    NextPlacesResolver,
    get_hierarchy_config,
    get_hierarchy_config_resolver,
    load_hierarchy_config,
    parse_hierarchy_config,
)
from location_api.services.name_resolver import NameResolver
from location_api.services.protocols import LocalizationStore, NameStore, SpatialStore

__all__ = [
    "FeatureCodeSuggestion",
    "FeatureTaxonomy",
    "HierarchyBuilder",
    "HierarchyConfigResolver",
    "LocalizationStore",
    "NameResolver",
    "NameStore",
    "NextPlacesResolver",
    "SpatialStore",
    "backfill_district_population_from_city",
    "classify",
    "feature_taxonomy",
    "get_hierarchy_config",
    "get_hierarchy_config_resolver",
    "load_hierarchy_config",
    "parse_hierarchy_config",
]
