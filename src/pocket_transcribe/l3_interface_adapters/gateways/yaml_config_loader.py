"""Gateway: YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from pocket_transcribe.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads the user's YAML config, falling back to the default config locations."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        data: dict = {}
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
        else:
            for default_path in DEFAULT_CONFIG_PATHS:
                if default_path.exists():
                    data = yaml.safe_load(default_path.read_text(encoding='utf-8')) or {}
                    break
        if not isinstance(data, dict):
            raise ValueError(f'Config must be a mapping, got {type(data).__name__}')
        if overrides:
            deep_merge(data, overrides)
        return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
