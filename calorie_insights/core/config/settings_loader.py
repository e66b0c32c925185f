"""
Settings configuration management.

Loads application settings from YAML files and applies environment overrides.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from .settings import Settings

SOURCE_URL_ENV = "CALORIE_SOURCE_URL"


class SettingsLoader:
    """
    Loads settings from a YAML configuration file.

    Expected YAML format:
    ```yaml
    source:
      url: https://example.org/calories.json
      timeout_seconds: 30

    decoder:
      truthy_tokens: ["true", "1", "yes", "y"]

    reports:
      calorie_threshold: 1800
      protein_date: 2022-11-01
      monthly_min_calories: 30
      top_n: 3
    ```

    Only the ``reports`` section is mandatory; omitted keys keep their defaults.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the settings loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")

    def load(self) -> Settings:
        """
        Load and parse settings from the YAML file.

        Returns:
            Validated Settings

        Raises:
            ValueError: If YAML is invalid or the reports section is missing
            pydantic.ValidationError: If a value has the wrong type or range
        """
        with open(self.config_path) as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or "reports" not in config:
            raise ValueError("Configuration file must contain 'reports' section")

        for section in ("source", "decoder", "reports"):
            if config.get(section) is None:
                config[section] = {}
            elif not isinstance(config[section], dict):
                raise ValueError(f"Section '{section}' must be a mapping")

        return Settings.model_validate(apply_env_overrides(config))


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of the raw config with environment overrides applied."""
    merged = {section: dict(values or {}) for section, values in config.items()}
    url = os.getenv(SOURCE_URL_ENV)
    if url:
        merged.setdefault("source", {})["url"] = url
    return merged


def load_settings(config_path: str | Path | None = None) -> Settings:
    """
    Load settings from a file, or build defaults when no path is given.

    Environment overrides apply in both cases.
    """
    if config_path is None:
        return Settings.model_validate(apply_env_overrides({}))
    return SettingsLoader(config_path).load()
