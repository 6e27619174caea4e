"""Syntax mapping — models, registry, built-in mappings."""

from diffmeta.syntax.models import SyntaxMapping
from diffmeta.syntax.registry import SyntaxMapError, SyntaxRegistry, build_registry

__all__ = ["SyntaxMapError", "SyntaxMapping", "SyntaxRegistry", "build_registry"]
