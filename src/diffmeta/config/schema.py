"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True


@dataclass
class DisplayConfig:
    file_headers: bool = True
    hunk_headers: bool = True
    highlight: bool = True  # syntax-highlight hunk code fragments
    theme: str = "monokai"


@dataclass
class SyntaxConfig:
    aliases: Dict[str, str] = field(default_factory=dict)  # extension -> language


@dataclass
class DiffMetaConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    syntax: SyntaxConfig = field(default_factory=SyntaxConfig)
