# skforge/models/driver.py

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeatureChoice(BaseModel):
    """A client's on/off decision for one catalog feature."""

    name: str
    enabled: bool = False


class DriverSelection(BaseModel):
    """
    Input of a single driver generation call.

    Scalar fields left empty fall back to the generator defaults. Feature
    selections are coerced leniently: anything that is not a mapping of
    group name to a list of choice objects is dropped.
    """

    model_config = ConfigDict(populate_by_name=True)

    category: Optional[str] = None
    language: Optional[str] = None
    hardware: Optional[str] = None
    memory: Optional[str] = None
    selected_features: dict[str, list[FeatureChoice]] = Field(
        default_factory=dict, alias="selectedFeatures"
    )

    @field_validator("selected_features", mode="before")
    @classmethod
    def coerce_selected_features(cls, value: Any) -> dict[str, list[FeatureChoice]]:
        if not isinstance(value, dict):
            return {}

        groups: dict[str, list[FeatureChoice]] = {}
        for group, choices in value.items():
            if not isinstance(choices, list):
                continue
            groups[str(group)] = [
                choice for choice in map(_coerce_choice, choices) if choice is not None
            ]
        return groups


def _coerce_choice(choice: Any) -> Optional[FeatureChoice]:
    """Accept a FeatureChoice or a {name, enabled} object; `enabled` is truthiness."""
    if isinstance(choice, FeatureChoice):
        return choice
    if not isinstance(choice, dict) or choice.get("name") in (None, ""):
        return None
    return FeatureChoice(name=str(choice["name"]), enabled=bool(choice.get("enabled")))
