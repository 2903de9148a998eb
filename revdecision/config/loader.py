"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DecisionParams,
    DefaultConfig,
    IngestionParams,
    InstallmentParams,
    InvestmentParams,
    RiskParams,
    TrendParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTION_TYPES = {
    "investment": InvestmentParams,
    "trend": TrendParams,
    "installment": InstallmentParams,
    "risk": RiskParams,
    "decision": DecisionParams,
    "ingestion": IngestionParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance; profiles ship beside this module by default."""
        if config_dir is None:
            config_dir = Path(__file__).parent

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def _read_profiles(self) -> dict[str, Any]:
        profiles_file = self.config_dir / "profiles.yaml"

        if not profiles_file.exists():
            return {}

        with open(profiles_file) as f:
            profiles_config = yaml.safe_load(f) or {}

        return profiles_config.get("profiles") or {}  # type: ignore[no-any-return]

    def load_profile_config(self, profile: str) -> dict[str, Any]:
        """
        Load profile-specific configuration overrides.

        Raises:
            ConfigurationError: If the profile is not declared in profiles.yaml
        """
        profiles = self._read_profiles()

        if profile not in profiles:
            raise ConfigurationError(
                f"Unknown profile {profile!r} (declared: {', '.join(sorted(profiles)) or 'none'}; "
                f"looked in {self.config_dir / 'profiles.yaml'})",
                profile=profile,
            )

        return profiles[profile] or {}  # type: ignore[no-any-return]

    def list_profiles(self) -> list[str]:
        """Names of the profiles declared in profiles.yaml."""
        return sorted(self._read_profiles())

    def merge_config(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Profile overrides from profiles.yaml
        3. Global defaults (lowest priority)

        Raises:
            ConfigurationError: If a profile is named but not declared
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply profile overrides
        if profile:
            config = self._deep_merge(config, self.load_profile_config(profile))

        # Apply per-call overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Merge, validate and build a typed configuration.

        Raises:
            ConfigurationError: If the profile is unknown or the merged
                configuration is invalid
        """
        merged = self.merge_config(profile, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration ({len(errors)} errors)",
                errors=errors,
                profile=profile,
            )

        return build_config(merged)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> DefaultConfig:
    """
    Build a typed DefaultConfig from a merged configuration dictionary.

    Unknown sections and keys are ignored; YAML lists become tuples.

    Args:
        config: Merged configuration dictionary

    Returns:
        DefaultConfig instance
    """
    sections = {}
    for section_name, section_type in _SECTION_TYPES.items():
        values = config.get(section_name) or {}
        known = {f.name for f in fields(section_type)}
        kwargs = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in values.items()
            if key in known
        }
        sections[section_name] = section_type(**kwargs)

    return DefaultConfig(**sections)
