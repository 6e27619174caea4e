"""Load and merge configuration from .diffmeta.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from diffmeta.config.schema import (
    OUTPUT_FORMATS,
    DiffMetaConfig,
    DisplayConfig,
    OutputConfig,
    SyntaxConfig,
)

CONFIG_FILENAME = ".diffmeta.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: DiffMetaConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Invalid output format {cfg.output.format!r}; "
            f"expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    if not isinstance(cfg.syntax.aliases, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in cfg.syntax.aliases.items()
    ):
        raise ConfigError("[syntax] aliases must map strings to strings")


def _merge_env_overrides(cfg: DiffMetaConfig) -> None:
    """Apply DIFFMETA_* environment variable overrides."""
    if val := os.environ.get("DIFFMETA_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("DIFFMETA_THEME"):
        cfg.display.theme = val
    if os.environ.get("DIFFMETA_NO_HIGHLIGHT") == "1":
        cfg.display.highlight = False


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> DiffMetaConfig:
    """Load, validate, and return a DiffMetaConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = DiffMetaConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = DiffMetaConfig(
            version=raw.get("version", "1.0"),
            output=_build_section(raw, OutputConfig, "output"),
            display=_build_section(raw, DisplayConfig, "display"),
            syntax=_build_section(raw, SyntaxConfig, "syntax"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
