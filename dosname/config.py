"""Rule profiles.

A profile says which transforms run on each listed name. Profiles come from a
YAML document shaped like ``configs/default.yaml``::

    profiles:
      emulator:
        rename: true
        truncate: true

Lookup order: an explicit path, the per-user file, the file shipped beside the
package, and finally the built-in profiles.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml


class ConfigError(RuntimeError):
    """Configuration error."""


@dataclass(frozen=True, slots=True)
class Profile:
    name: str
    rename: bool = True
    truncate: bool = True


DEFAULT_PROFILE = "emulator"
SHIPPED_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"

BUILTIN_PROFILES: dict[str, Profile] = {
    "listing": Profile("listing", rename=True, truncate=False),
    "emulator": Profile("emulator", rename=True, truncate=True),
    "truncate_only": Profile("truncate_only", rename=False, truncate=True),
}

_SWITCHES = ("rename", "truncate")


def user_config_path() -> Path:
    appdata = os.getenv("APPDATA")
    root = Path(appdata) if appdata else Path.home() / ".config"
    return root / "dosname" / "default.yaml"


def _parse_profile(name: str, raw: object, source: Path) -> Profile:
    if raw is None:
        return Profile(name)
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: profile '{name}' must be a mapping")
    unknown = sorted(set(raw) - set(_SWITCHES))
    if unknown:
        raise ConfigError(f"{source}: profile '{name}' has unknown keys: {', '.join(unknown)}")
    for key in _SWITCHES:
        if key in raw and not isinstance(raw[key], bool):
            raise ConfigError(f"{source}: profile '{name}' key '{key}' must be true or false")
    return Profile(name, **raw)


def parse_profiles(text: str, source: Path) -> dict[str, Profile]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration {source}: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("profiles"), dict):
        raise ConfigError(f"Invalid configuration {source}: missing 'profiles'.")
    return {str(name): _parse_profile(str(name), raw, source) for name, raw in data["profiles"].items()}


def load_profiles(config_path: Path | None = None) -> dict[str, Profile]:
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Configuration not found: {config_path}")
        return parse_profiles(config_path.read_text(encoding="utf-8"), config_path)

    for candidate in (user_config_path(), SHIPPED_CONFIG_PATH):
        if candidate.exists():
            return parse_profiles(candidate.read_text(encoding="utf-8"), candidate)
    return dict(BUILTIN_PROFILES)


def get_profile(profiles: dict[str, Profile], name: str) -> Profile:
    if name not in profiles:
        available = ", ".join(sorted(profiles))
        raise ConfigError(f"Profile '{name}' not found. Available: {available}")
    return profiles[name]
