"""
Profile Loader
==============

Loads and validates YAML configuration profiles.

Responsibilities:
- Load profile YAML files from standard and custom directories
- Validate profiles against the Pydantic schema on load
- Provide sensible defaults when no profile exists
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import structlog
import yaml

from todolist.core.domain.config_schema import (
    ProfileConfigSchema,
    validate_profile_config,
)

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"

# Used when no ``{profile}.yaml`` exists.
_FALLBACK_CONFIG: dict[str, Any] = {
    "persistence": {"type": "file", "work_dir": ".todolist"},
    "clock": {"type": "counter"},
    "store": {"max_items": 1000},
    "logging": {"level": "WARNING"},
}


class ProfileLoader:
    """Load and resolve YAML configuration profiles.

    Args:
        config_dir: Root directory containing profile YAML files.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or DEFAULT_CONFIG_DIR
        self._logger = logger.bind(component="profile_loader")

    def load(self, profile: str) -> ProfileConfigSchema:
        """Load a profile by name.

        Search order:
        1. ``{config_dir}/{profile}.yaml``
        2. ``{config_dir}/custom/{profile}.yaml``

        Raises:
            FileNotFoundError: If no matching YAML file is found.
            ConfigValidationError: If the file does not match the schema.
        """
        profile_path = self._config_dir / f"{profile}.yaml"

        if not profile_path.exists():
            custom_path = self._config_dir / "custom" / f"{profile}.yaml"
            if custom_path.exists():
                profile_path = custom_path
            else:
                raise FileNotFoundError(
                    f"Profile not found: {profile_path} or {custom_path}"
                )

        with open(profile_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        config = validate_profile_config(data, file_path=profile_path)
        self._logger.debug("profile_loaded", profile=profile, path=str(profile_path))
        return config

    def load_safe(self, profile: str) -> ProfileConfigSchema:
        """Load a profile, falling back to defaults on ``FileNotFoundError``."""
        try:
            return self.load(profile)
        except FileNotFoundError:
            self._logger.debug("profile_not_found_using_defaults", profile=profile)
            return validate_profile_config(copy.deepcopy(_FALLBACK_CONFIG))

    def list_profiles(self) -> list[str]:
        """Return the names of all profiles in the config directory."""
        if not self._config_dir.exists():
            return []
        names = {p.stem for p in self._config_dir.glob("*.yaml")}
        names.update(p.stem for p in self._config_dir.glob("custom/*.yaml"))
        return sorted(names)
