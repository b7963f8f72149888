# skforge/blueprints/stacks.py
"""Predefined technology stacks built from blueprint categories."""

from typing import Dict, Mapping

from ..config import StackConfig
from ..models.blueprint import Stack, StackLayer
from .scanner import BlueprintScanner


async def resolve_stacks(
    scanner: BlueprintScanner, stacks: Mapping[str, StackConfig]
) -> Dict[str, Stack]:
    """Attach readiness to every layer: a layer is ready once its BLUEPRINT.md exists."""
    resolved = {}
    for stack_id, stack in stacks.items():
        resolved[stack_id] = Stack(
            name=stack.name,
            layers=[
                StackLayer(category=layer, ready=await scanner.has_blueprint(layer))
                for layer in stack.layers
            ],
        )
    return resolved
