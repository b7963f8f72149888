# skforge/blueprints/scanner.py
"""
Blueprint repository scanning.

Every call re-reads the filesystem: summaries, details and catalogs are
derived fresh per request. Missing directories and files produce empty
results rather than errors so one broken category never hides the others.
"""

import logging
from typing import Dict, List, Optional
from pathlib import Path
import anyio

from ..config import BlueprintsConfig
from ..models.blueprint import BlueprintDetail, BlueprintSummary, CatalogDocument
from .discovery import discover_categories, is_valid_category_id
from .features import count_feature_items, parse_features

logger = logging.getLogger(__name__)

# Leading lines of BLUEPRINT.md returned as the excerpt
EXCERPT_LINES = 50


async def read_text_or_empty(path: anyio.Path) -> str:
    """Read a UTF-8 text file, returning "" when it is absent or unreadable."""
    if not await path.is_file():
        return ""
    try:
        return await path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return ""


def extract_description(text: str) -> str:
    """First non-blank line that is not a markdown heading."""
    for line in text.split("\n"):
        if line.strip() and not line.startswith("#"):
            return line.strip()
    return ""


def extract_excerpt(text: str, max_lines: int = EXCERPT_LINES) -> str:
    return "\n".join(text.split("\n")[:max_lines])


async def _walk_files(directory: anyio.Path, prefix: str = "") -> List[str]:
    files = []
    async for item in directory.iterdir():
        if await item.is_dir():
            files.extend(await _walk_files(item, f"{prefix}{item.name}/"))
        else:
            files.append(f"{prefix}{item.name}")
    return files


class BlueprintScanner:
    """Read blueprint categories, summaries and feature catalogs from disk."""

    def __init__(self, config: Optional[BlueprintsConfig] = None):
        self.config = config or BlueprintsConfig()
        self.root = Path(self.config.path)

    def _category_dir(self, category: str) -> anyio.Path:
        return anyio.Path(self.root / category)

    def _file(self, category: str, name: str) -> anyio.Path:
        return anyio.Path(self.root / category / name)

    async def list_categories(self) -> List[str]:
        return await discover_categories(str(self.root), self.config.excluded)

    async def category_exists(self, category: str) -> bool:
        """True for a valid category id whose directory exists."""
        if not is_valid_category_id(category):
            return False
        return await self._category_dir(category).is_dir()

    async def has_blueprint(self, category: str) -> bool:
        """True when the category's design document exists."""
        if not is_valid_category_id(category):
            return False
        return await self._file(category, self.config.blueprint_file).is_file()

    async def read_blueprint(self, category: str) -> str:
        return await read_text_or_empty(self._file(category, self.config.blueprint_file))

    async def read_features(self, category: str) -> str:
        return await read_text_or_empty(self._file(category, self.config.features_file))

    async def list_files(self, category: str) -> List[str]:
        """Recursive, sorted listing of paths relative to the category directory."""
        directory = self._category_dir(category)
        if not await directory.is_dir():
            return []
        try:
            files = await _walk_files(directory)
        except OSError as e:
            logger.warning("Failed to list %s: %s", directory, e)
            return []
        return sorted(files)

    async def get_summary(self, category: str) -> BlueprintSummary:
        """
        Build the summary for one category.

        The feature count is a cheap bullet count over features.yml and may
        differ from the number of features the parser accepts.
        """
        blueprint = await self.read_blueprint(category)
        features_text = await self.read_features(category)

        return BlueprintSummary(
            category=category,
            description=extract_description(blueprint),
            feature_count=count_feature_items(features_text),
            files=await self.list_files(category),
            excerpt=extract_excerpt(blueprint),
        )

    async def list_summaries(self) -> List[BlueprintSummary]:
        return [await self.get_summary(category) for category in await self.list_categories()]

    async def get_features(self, category: str) -> Optional[CatalogDocument]:
        """
        Parse a category's feature catalog.

        Returns:
            CatalogDocument (empty when features.yml is absent), or None if
            the category does not exist
        """
        if not await self.category_exists(category):
            return None
        return parse_features(await self.read_features(category))

    async def get_memory_profiles(self, category: str) -> Dict[str, str]:
        profiles_dir = self._file(category, self.config.memory_profiles_dir)
        if not await profiles_dir.is_dir():
            return {}

        profiles = {}
        async for item in profiles_dir.iterdir():
            if await item.is_file():
                profiles[item.name.replace(".md", "", 1)] = await read_text_or_empty(item)
        return dict(sorted(profiles.items()))

    async def get_detail(self, category: str) -> Optional[BlueprintDetail]:
        """
        Full view of one category: summary, parsed catalog and raw documents.

        Returns:
            BlueprintDetail or None if the category does not exist
        """
        if not await self.category_exists(category):
            return None

        summary = await self.get_summary(category)
        return BlueprintDetail(
            **summary.model_dump(),
            features=parse_features(await self.read_features(category)),
            blueprint=await self.read_blueprint(category),
            architecture=await read_text_or_empty(
                self._file(category, self.config.architecture_file)
            ),
            memory_profiles=await self.get_memory_profiles(category),
        )
