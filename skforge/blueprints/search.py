# skforge/blueprints/search.py
"""
Linear text search over the blueprint repository.

No index is kept: each query walks every category and scans its name,
BLUEPRINT.md and features.yml. A category contributes at most one result,
checked in that order.
"""

from typing import List, Optional

from ..models.blueprint import SearchResult
from .scanner import BlueprintScanner

# Matched lines are trimmed to this many characters
MAX_MATCH_LENGTH = 120


def first_matching_line(text: str, needle: str) -> Optional[str]:
    """Return the first line containing `needle` (already lowercased), trimmed."""
    if needle not in text.lower():
        return None
    for line in text.split("\n"):
        if needle in line.lower():
            return line.strip()[:MAX_MATCH_LENGTH]
    return ""


async def search_blueprints(scanner: BlueprintScanner, query: str) -> List[SearchResult]:
    """
    Search categories by name, design document and feature catalog.

    Args:
        scanner: Scanner bound to the blueprints root
        query: Case-insensitive substring; empty returns no results

    Returns:
        List of SearchResult in category order
    """
    if not query:
        return []

    needle = query.lower()
    results: List[SearchResult] = []

    for category in await scanner.list_categories():
        if needle in category:
            results.append(SearchResult(category=category, type="category", match=category))
            continue

        line = first_matching_line(await scanner.read_blueprint(category), needle)
        if line is not None:
            results.append(SearchResult(category=category, type="blueprint", match=line))
            continue

        line = first_matching_line(await scanner.read_features(category), needle)
        if line is not None:
            results.append(SearchResult(category=category, type="feature", match=line))

    return results
