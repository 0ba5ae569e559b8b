"""Central configuration — loaded from YAML, overridable per-field."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator


# --- Settings models ---


class CalendarSettings(BaseModel):
    """Settings for the upcoming-holiday calendar."""

    lookahead_days: int = Field(default=60, ge=0)
    default_holidays: list[str] = Field(default_factory=lambda: [
        "New Year's Day",
        "Martin Luther King Jr. Day",
        "Presidents' Day",
        "Memorial Day",
        "Independence Day",
        "Labor Day",
        "Columbus Day",
        "Veterans Day",
        "Thanksgiving",
        "Christmas",
    ])

    @field_validator("default_holidays")
    @classmethod
    def _known_holidays(cls, names: list[str]) -> list[str]:
        from holiday_rules.exceptions import UnknownHolidayError
        from holiday_rules.holidays import parse_holiday

        for name in names:
            try:
                parse_holiday(name)
            except UnknownHolidayError:
                raise ValueError(f"unknown holiday in default_holidays: {name!r}") from None
        return names


class DisplaySettings(BaseModel):
    date_format: str = "%Y-%m-%d"
    table_format: str = "simple"   # any tabulate tablefmt


class Settings(BaseModel):
    """Central config — loaded from YAML, overridable per-field."""

    calendar: CalendarSettings = Field(default_factory=CalendarSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


# --- Loading ---

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"
_USER_CONFIG_PATH = Path.home() / ".holiday_rules" / "config.yaml"

_cached_settings: Settings | None = None


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Returns new dict."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    user_config_path: Path | None = None,
    _force_reload: bool = False,
) -> Settings:
    """Load defaults.yaml, merge ~/.holiday_rules/config.yaml if present.

    Args:
        user_config_path: Override path for user config file.
        _force_reload: Bypass cache (for testing).

    Returns:
        Merged Settings instance.
    """
    global _cached_settings
    if _cached_settings is not None and not _force_reload:
        return _cached_settings

    # Layer 1: package defaults
    with open(_DEFAULTS_PATH) as f:
        defaults = yaml.safe_load(f) or {}

    # Layer 2: user overrides
    user_path = user_config_path or _USER_CONFIG_PATH
    if user_path.exists():
        with open(user_path) as f:
            user = yaml.safe_load(f) or {}
        merged = _deep_merge(defaults, user)
    else:
        merged = defaults

    _cached_settings = Settings(**merged)
    return _cached_settings


def get_settings() -> Settings:
    """Get cached settings (singleton). Loads on first call."""
    return load_settings()


def reset_settings() -> None:
    """Clear cached settings. Next get_settings() will reload from YAML."""
    global _cached_settings
    _cached_settings = None
