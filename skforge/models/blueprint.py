# skforge/models/blueprint.py

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_COMPLEXITY = "medium"
DEFAULT_STATE = "off"


class Feature(BaseModel):
    """
    A leaf item of a feature catalog.

    `complexity` and `default` are open string sets (low/medium/high,
    on/off/disabled, ...) and are always populated by the parser.
    """

    name: str
    description: str = ""
    complexity: str = DEFAULT_COMPLEXITY
    default: str = DEFAULT_STATE


class FeatureGroup(BaseModel):
    """
    A named section of a feature catalog.
    """

    id: str                           # Catalog key
    name: str                         # Explicit name: or titleized id
    description: str = ""
    features: list[Feature] = Field(default_factory=list)


class CatalogDocument(BaseModel):
    """Parse result for one category; only non-empty groups, in source order."""

    groups: list[FeatureGroup] = Field(default_factory=list)


class BlueprintSummary(BaseModel):
    """
    A category (folder) of the blueprint repository.
    """

    model_config = ConfigDict(populate_by_name=True)

    category: str                     # Directory name
    description: str = ""
    feature_count: int = Field(default=0, alias="featureCount")
    files: list[str] = Field(default_factory=list)  # Relative to category dir
    excerpt: str = ""


class BlueprintDetail(BlueprintSummary):
    """Summary plus parsed catalog and raw document texts."""

    features: CatalogDocument = Field(default_factory=CatalogDocument)
    blueprint: str = ""
    architecture: str = ""
    memory_profiles: dict[str, str] = Field(default_factory=dict, alias="memoryProfiles")


class StackLayer(BaseModel):
    category: str
    ready: bool


class Stack(BaseModel):
    name: str
    layers: list[StackLayer] = Field(default_factory=list)


class SearchResult(BaseModel):
    category: str
    type: str                         # "category" | "blueprint" | "feature"
    match: str
