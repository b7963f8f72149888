# tests/test_stacks.py
"""Tests for stack readiness."""

import pytest

from skforge.blueprints.scanner import BlueprintScanner
from skforge.blueprints.stacks import resolve_stacks
from skforge.config import BlueprintsConfig, Config, StackConfig


@pytest.mark.asyncio
async def test_layers_ready_when_blueprint_exists(blueprints_root, make_category):
    make_category("api-gateways", blueprint="Gateways.\n")
    make_category("databases")  # directory without BLUEPRINT.md
    scanner = BlueprintScanner(BlueprintsConfig(path=str(blueprints_root)))

    stacks = await resolve_stacks(
        scanner,
        {"mini": StackConfig(name="Mini", layers=["api-gateways", "databases", "object-storage"])},
    )

    assert stacks["mini"].name == "Mini"
    assert [(layer.category, layer.ready) for layer in stacks["mini"].layers] == [
        ("api-gateways", True),
        ("databases", False),
        ("object-storage", False),
    ]


@pytest.mark.asyncio
async def test_default_stacks(tmp_path):
    scanner = BlueprintScanner(BlueprintsConfig(path=str(tmp_path / "missing")))

    stacks = await resolve_stacks(scanner, Config().stacks)

    assert list(stacks) == [
        "saas-starter",
        "ai-platform",
        "enterprise",
        "notion-killer",
        "zero-trust",
    ]
    assert stacks["zero-trust"].name == "Zero Trust"
    assert all(not layer.ready for stack in stacks.values() for layer in stack.layers)
