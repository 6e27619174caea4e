"""Syntax mapping model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SyntaxMapping:
    """Maps an extension token (``rs``, ``Makefile``) to a highlighter language."""

    extension: str
    language: str
    source: str = "builtin"  # builtin | custom | config
