# skforge/config.py

import os
from typing import Optional
import yaml
from pydantic import BaseModel, Field
import anyio


class BlueprintsConfig(BaseModel):
    path: str = "./blueprints"
    excluded: list[str] = Field(default_factory=lambda: ["TEMPLATE", "LICENSE"])
    blueprint_file: str = "BLUEPRINT.md"
    architecture_file: str = "architecture.md"
    features_file: str = "features.yml"
    memory_profiles_dir: str = "memory-profiles"


class SPAConfig(BaseModel):
    """Single-page client served for every non-API path."""
    path: str = "./website/app.html"


class APIConfig(BaseModel):
    """Configuration for REST API server."""
    host: str = "0.0.0.0"
    port: int = 3000
    # Browsers load the SPA from arbitrary origins (file://, dev servers), so
    # the defaults are fully permissive.
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    cors_methods: list[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_headers: list[str] = Field(default_factory=lambda: ["Content-Type"])
    debug: bool = False


class StackConfig(BaseModel):
    name: str
    layers: list[str] = Field(default_factory=list)


def _default_stacks() -> dict[str, StackConfig]:
    return {
        "saas-starter": StackConfig(
            name="SaaS Starter",
            layers=["api-gateways", "web-servers", "databases", "key-value-stores", "message-queues"],
        ),
        "ai-platform": StackConfig(
            name="AI Platform",
            layers=["api-gateways", "databases", "vector-databases", "message-queues", "object-storage"],
        ),
        "enterprise": StackConfig(
            name="Enterprise",
            layers=[
                "api-gateways",
                "web-servers",
                "databases",
                "key-value-stores",
                "search-engines",
                "message-queues",
            ],
        ),
        "notion-killer": StackConfig(
            name="Notion Killer",
            layers=[
                "api-gateways",
                "web-servers",
                "databases",
                "search-engines",
                "object-storage",
                "message-queues",
            ],
        ),
        "zero-trust": StackConfig(
            name="Zero Trust",
            layers=["api-gateways", "databases", "vector-databases", "object-storage"],
        ),
    }


class Config(BaseModel):
    blueprints: BlueprintsConfig = Field(default_factory=BlueprintsConfig)
    spa: SPAConfig = Field(default_factory=SPAConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    stacks: dict[str, StackConfig] = Field(default_factory=_default_stacks)


def _get_env_value(name: str) -> Optional[str]:
    """Get environment variable value, treating empty as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_env_int(name: str) -> Optional[int]:
    value = _get_env_value(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer") from e


def _apply_env_overrides(config: Config) -> Config:
    api_host = _get_env_value("API_HOST")
    if api_host is not None:
        config.api.host = api_host

    api_port = _get_env_int("API_PORT")
    if api_port is not None:
        config.api.port = api_port

    blueprints_path = _get_env_value("BLUEPRINTS_PATH")
    if blueprints_path is not None:
        config.blueprints.path = blueprints_path

    spa_path = _get_env_value("SPA_PATH")
    if spa_path is not None:
        config.spa.path = spa_path

    return config


async def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file (async)."""
    path = anyio.Path(config_path or "configs/settings.yaml")
    if await path.exists():
        text = await path.read_text()
        # Run YAML parsing in a thread to avoid blocking the event loop
        data = await anyio.to_thread.run_sync(yaml.safe_load, text)
        config = Config(**data) if data else Config()
        return _apply_env_overrides(config)

    return _apply_env_overrides(Config())
