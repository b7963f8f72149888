# tests/conftest.py
"""Shared pytest fixtures and test helpers."""

from pathlib import Path
from typing import Dict, Optional

import pytest
from httpx import AsyncClient, ASGITransport

from skforge.api.main import create_app
from skforge.api.dependencies import get_config
from skforge.config import BlueprintsConfig, Config, SPAConfig


_STORAGE_CATALOG = """\
features:
  storage:
    name: "Storage Engines"
    description: "How data reaches the disk"
    features:
      - name: "WAL"
        complexity: high
      - name: B-Tree
        description: "Balanced tree index"
        default: on
  replication:
    features:
      - name: Leader election
        complexity: low
        default: disabled
  metadata:
    version: 2
    owner: core
"""


@pytest.fixture
def blueprints_root(tmp_path) -> Path:
    root = tmp_path / "blueprints"
    root.mkdir()
    return root


@pytest.fixture
def make_category(blueprints_root):
    """Fixture providing a factory that writes one blueprint category to disk.

    Usage:
        def test_example(make_category):
            make_category("web-servers", blueprint="# Web Servers\\n...")
    """
    def _make_category(
        name: str,
        blueprint: Optional[str] = None,
        features: Optional[str] = None,
        architecture: Optional[str] = None,
        memory_profiles: Optional[Dict[str, str]] = None,
    ) -> Path:
        category_dir = blueprints_root / name
        category_dir.mkdir(parents=True, exist_ok=True)
        if blueprint is not None:
            (category_dir / "BLUEPRINT.md").write_text(blueprint)
        if features is not None:
            (category_dir / "features.yml").write_text(features)
        if architecture is not None:
            (category_dir / "architecture.md").write_text(architecture)
        if memory_profiles:
            profiles_dir = category_dir / "memory-profiles"
            profiles_dir.mkdir()
            for profile, text in memory_profiles.items():
                (profiles_dir / f"{profile}.md").write_text(text)
        return category_dir
    return _make_category


@pytest.fixture
def test_config(blueprints_root, tmp_path) -> Config:
    return Config(
        blueprints=BlueprintsConfig(path=str(blueprints_root)),
        spa=SPAConfig(path=str(tmp_path / "website" / "app.html")),
    )


@pytest.fixture
async def client(test_config):
    """Create test client bound to the temporary blueprints root."""
    app = create_app()

    async def override_get_config():
        return test_config

    app.dependency_overrides[get_config] = override_get_config

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def storage_catalog() -> str:
    """features.yml with two groups and one non-group key."""
    return _STORAGE_CATALOG
