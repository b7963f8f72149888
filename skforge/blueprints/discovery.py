# skforge/blueprints/discovery.py
"""Blueprint category discovery."""

import re
from typing import Iterable, List

import anyio

# Names placed next to the categories that are not categories themselves
DEFAULT_EXCLUDED = ("TEMPLATE", "LICENSE")

CATEGORY_ID_PATTERN = re.compile(r"^[a-z0-9-]+$")


def is_valid_category_id(category: str) -> bool:
    """Category ids used in URLs are lowercase slugs (also rules out path traversal)."""
    return bool(CATEGORY_ID_PATTERN.match(category))


async def discover_categories(
    root: str, excluded: Iterable[str] = DEFAULT_EXCLUDED
) -> List[str]:
    """
    List category ids under the blueprints root.

    Only direct subdirectories count; a missing root yields no categories.
    """
    root_path = anyio.Path(root)
    if not await root_path.is_dir():
        return []

    skip = set(excluded)
    categories = []
    async for item in root_path.iterdir():
        if item.name in skip:
            continue
        if await item.is_dir():
            categories.append(item.name)

    return sorted(categories)
