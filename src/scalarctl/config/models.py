"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, scalarctl.toml only holds
overrides. An empty file is a valid config.
"""

from __future__ import annotations

from pydantic import BaseModel


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    default_key: str = "value"
    parse_json: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".scalarctl/plugins"
