"""Renderers for annotated diffs."""
