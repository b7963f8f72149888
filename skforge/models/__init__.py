"""Core data models for the SKForge blueprint catalog."""

from .blueprint import (
    DEFAULT_COMPLEXITY,
    DEFAULT_STATE,
    BlueprintDetail,
    BlueprintSummary,
    CatalogDocument,
    Feature,
    FeatureGroup,
    SearchResult,
    Stack,
    StackLayer,
)
from .driver import DriverSelection, FeatureChoice

__all__ = [
    "DEFAULT_COMPLEXITY",
    "DEFAULT_STATE",
    "Feature",
    "FeatureGroup",
    "CatalogDocument",
    "BlueprintSummary",
    "BlueprintDetail",
    "Stack",
    "StackLayer",
    "SearchResult",
    "DriverSelection",
    "FeatureChoice",
]
