"""Syntax registry — built-in and custom extension mappings, config aliases."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml

from diffmeta.config.schema import DiffMetaConfig
from diffmeta.syntax.models import SyntaxMapping

CUSTOM_DIRNAME = ".diffmeta-syntaxes"


class SyntaxMapError(Exception):
    """Raised when a custom syntax mapping file is malformed."""


class SyntaxRegistry:
    """Lookup table from extension token to highlighter language."""

    def __init__(self) -> None:
        self._mappings: Dict[str, SyntaxMapping] = {}

    # ---- registration ----

    def register(self, mapping: SyntaxMapping) -> None:
        self._mappings[mapping.extension] = mapping

    def register_many(self, mappings: list[SyntaxMapping]) -> None:
        for m in mappings:
            self.register(m)

    # ---- queries ----

    @property
    def all_mappings(self) -> List[SyntaxMapping]:
        return list(self._mappings.values())

    def get(self, extension: str) -> Optional[SyntaxMapping]:
        return self._mappings.get(extension)

    def language_for(self, extension: Optional[str]) -> Optional[str]:
        """Language for *extension*, or None when unknown or absent."""
        if extension is None:
            return None
        mapping = self._mappings.get(extension)
        return mapping.language if mapping else None

    # ---- config ----

    def apply_config(self, config: DiffMetaConfig) -> None:
        """Config aliases override built-in and custom mappings."""
        for ext, lang in config.syntax.aliases.items():
            self.register(SyntaxMapping(extension=ext, language=lang, source="config"))

    # ---- custom mapping loading ----

    def load_custom_mappings(self, directory: Path) -> int:
        """Load YAML mapping files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_mappings(path)
        return count

    def _load_yaml_mappings(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            raise SyntaxMapError(f"Failed to parse {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "extension" not in entry or "language" not in entry:
                raise SyntaxMapError(
                    f"{path}: each entry needs 'extension' and 'language' keys"
                )
            self.register(
                SyntaxMapping(
                    extension=str(entry["extension"]),
                    language=str(entry["language"]),
                    source="custom",
                )
            )
            count += 1
        return count


def build_registry(config: DiffMetaConfig, repo_root: Optional[Path] = None) -> SyntaxRegistry:
    """Create a fully populated syntax registry."""
    from diffmeta.syntax.builtin import ALL_BUILTIN_MAPPINGS

    registry = SyntaxRegistry()
    registry.register_many(ALL_BUILTIN_MAPPINGS)

    # Custom mappings from .diffmeta-syntaxes/
    if repo_root is not None:
        registry.load_custom_mappings(repo_root / CUSTOM_DIRNAME)

    registry.apply_config(config)
    return registry
