# skforge/blueprints/features.py
"""
Feature catalog parsing.

Catalogs (features.yml) are hand-authored in a small, indentation-sensitive
subset of YAML:

    features:
      storage:                      # group key, exactly 2 spaces
        name: "Storage Engines"     # group properties, 4 spaces
        description: "..."
        features:                   # list marker, 4 spaces
          - name: "WAL"             # feature item, 6+ spaces
            complexity: high
            default: on

There is no marker distinguishing a group key from any other 2-space key, so
groups are recognised by peeking a bounded number of lines ahead for a
`name:` or `features:` child. Parsing is a single pass; malformed groups and
items are omitted instead of raising.
"""

import logging
import re
from enum import Enum
from typing import Dict, List, Optional

from ..models.blueprint import CatalogDocument, Feature, FeatureGroup

logger = logging.getLogger(__name__)

# Lines inspected after a 2-space key when deciding whether it is a group
GROUP_LOOKAHEAD = 5
# Lines inspected after a feature item when collecting its properties
FEATURE_LOOKAHEAD = 7

_TOP_LEVEL_KEY = re.compile(r"^  \w")
_GROUP_KEY = re.compile(r"^  (\w[\w-]*):$")
_GROUP_CHILD = re.compile(r"^\s{4}(?:name|features):")
_GROUP_PROPERTY = re.compile(r"^\s{4}(name|description):\s*(.*?)\s*$")
_FEATURES_MARKER = re.compile(r"^\s{4}features:\s*$")
_FEATURE_ITEM = re.compile(r"^\s{6,}- name:\s*(.*?)\s*$")
_FEATURE_PROPERTY = re.compile(r"^\s+(description|complexity|default):\s*(.*?)\s*$")

_FEATURE_ITEM_PATTERN = re.compile(r"^\s+- name:", re.MULTILINE)


class ParserState(str, Enum):
    """Scanner position within the catalog."""
    SEEKING_GROUP = "seeking-group"         # Outside any recognised group
    IN_GROUP_HEADER = "in-group-header"     # Between group key and features:
    IN_FEATURES_LIST = "in-features-list"   # After features:, before first item
    IN_FEATURE_ITEM = "in-feature-item"     # After a "- name:" item


def _unquote(value: str) -> str:
    """Strip an optional leading and trailing double quote."""
    value = value.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def titleize(group_id: str) -> str:
    """Derive a display name from a group id: `key_value-stores` -> `Key Value Stores`."""
    spaced = re.sub(r"[_-]", " ", group_id)
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), spaced)


def count_feature_items(text: str) -> int:
    """Count indented `- name:` bullets without parsing the catalog."""
    return len(_FEATURE_ITEM_PATTERN.findall(text))


class _GroupBuilder:
    """Group being accumulated while its lines are scanned."""

    def __init__(self, group_id: str):
        self.id = group_id
        self.name = ""
        self.description = ""
        # Keyed by name: a repeated name replaces the earlier feature in place
        self.features: Dict[str, Feature] = {}

    def build(self) -> FeatureGroup:
        return FeatureGroup(
            id=self.id,
            name=self.name or titleize(self.id),
            description=self.description,
            features=list(self.features.values()),
        )


class FeatureCatalogParser:
    """Parse feature catalog text into a CatalogDocument."""

    def __init__(self, text: str):
        self.lines: List[str] = [line.rstrip("\r") for line in text.split("\n")]
        self.state = ParserState.SEEKING_GROUP
        self.current: Optional[_GroupBuilder] = None
        self.groups: Dict[str, FeatureGroup] = {}

    def parse(self) -> CatalogDocument:
        for index, line in enumerate(self.lines):
            if _TOP_LEVEL_KEY.match(line):
                self._close_group()
                key = _GROUP_KEY.match(line)
                if key and self._has_group_children(index):
                    self._open_group(key.group(1))
                elif key:
                    logger.debug("Skipping non-group key %r at line %d", key.group(1), index + 1)
                continue

            if self.state is ParserState.SEEKING_GROUP:
                continue

            if self.state is ParserState.IN_GROUP_HEADER:
                prop = _GROUP_PROPERTY.match(line)
                if prop:
                    self._set_group_property(prop.group(1), _unquote(prop.group(2)))
                    continue

            if _FEATURES_MARKER.match(line):
                if self.state is ParserState.IN_GROUP_HEADER:
                    self.state = ParserState.IN_FEATURES_LIST
                continue

            if self.state in (ParserState.IN_FEATURES_LIST, ParserState.IN_FEATURE_ITEM):
                item = _FEATURE_ITEM.match(line)
                if item:
                    self._read_feature(index, _unquote(item.group(1)))

        self._close_group()
        return CatalogDocument(groups=list(self.groups.values()))

    def _has_group_children(self, index: int) -> bool:
        """Peek ahead for a 4-space name:/features: child of the key at `index`."""
        end = min(index + 1 + GROUP_LOOKAHEAD, len(self.lines))
        for line in self.lines[index + 1:end]:
            if _GROUP_CHILD.match(line):
                return True
            if _TOP_LEVEL_KEY.match(line):
                break
        return False

    def _open_group(self, group_id: str) -> None:
        self.current = _GroupBuilder(group_id)
        self.state = ParserState.IN_GROUP_HEADER

    def _close_group(self) -> None:
        group = self.current
        self.current = None
        self.state = ParserState.SEEKING_GROUP
        if group is None:
            return
        if not group.features:
            logger.debug("Dropping group %r: no features", group.id)
            return
        # Duplicate ids: the later group wins, the earlier position is kept
        self.groups[group.id] = group.build()

    def _set_group_property(self, key: str, value: str) -> None:
        if not value:
            return
        if key == "name":
            self.current.name = value
        else:
            self.current.description = value

    def _read_feature(self, index: int, name: str) -> None:
        self.state = ParserState.IN_FEATURE_ITEM
        if not name:
            logger.debug("Skipping feature without a name at line %d", index + 1)
            return

        properties: Dict[str, str] = {}
        end = min(index + 1 + FEATURE_LOOKAHEAD, len(self.lines))
        for line in self.lines[index + 1:end]:
            if _FEATURE_ITEM.match(line) or _TOP_LEVEL_KEY.match(line):
                break
            prop = _FEATURE_PROPERTY.match(line)
            if prop:
                value = _unquote(prop.group(2))
                if value:
                    properties[prop.group(1)] = value

        self.current.features[name] = Feature(name=name, **properties)


def parse_features(text: str) -> CatalogDocument:
    """
    Parse feature catalog text.

    Args:
        text: Raw features.yml content

    Returns:
        CatalogDocument with non-empty groups in document order
    """
    return FeatureCatalogParser(text).parse()
