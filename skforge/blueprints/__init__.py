"""Blueprint repository access: discovery, catalogs, search and generation."""

from .discovery import discover_categories, is_valid_category_id
from .features import (
    FEATURE_LOOKAHEAD,
    GROUP_LOOKAHEAD,
    FeatureCatalogParser,
    ParserState,
    count_feature_items,
    parse_features,
)
from .scanner import BlueprintScanner
from .search import search_blueprints
from .stacks import resolve_stacks
from .driver import generate_driver

__all__ = [
    "discover_categories",
    "is_valid_category_id",
    # Catalog parsing
    "FeatureCatalogParser",
    "ParserState",
    "GROUP_LOOKAHEAD",
    "FEATURE_LOOKAHEAD",
    "count_feature_items",
    "parse_features",
    "BlueprintScanner",
    "search_blueprints",
    "resolve_stacks",
    "generate_driver",
]
