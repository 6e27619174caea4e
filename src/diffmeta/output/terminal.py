"""Rich terminal renderer — file banners and highlighted hunk headers."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text

from diffmeta.config.schema import DiffMetaConfig
from diffmeta.diff.annotator import Annotation, FileHeader, HunkHeader, summarise
from diffmeta.diff.models import ChangeKind
from diffmeta.syntax.registry import SyntaxRegistry

_CHANGE_STYLE = {
    ChangeKind.UNCHANGED: "bold blue",
    ChangeKind.ADDED: "bold green",
    ChangeKind.DELETED: "bold red",
    ChangeKind.RENAMED: "bold yellow",
    ChangeKind.UNKNOWN: "bold magenta",
}


def _file_banner(item: FileHeader, registry: SyntaxRegistry) -> Text:
    desc = item.info.description
    text = Text(str(desc), style=_CHANGE_STYLE.get(desc.kind, "bold"))
    ext = item.info.extension
    if ext.is_ambiguous:
        text.append("  (mixed file types)", style="dim")
    elif ext.value is not None:
        language = registry.language_for(ext.value) or "plain"
        text.append(f"  [{ext.value} → {language}]", style="dim")
    return text


def highlight_fragment(
    fragment: str, language: Optional[str], *, theme: str, enabled: bool = True
) -> Text:
    """Return the hunk code fragment as Rich Text, highlighted if possible."""
    code = fragment.strip()
    if not enabled or language is None:
        return Text(code)
    syntax = Syntax(code, language, theme=theme)
    highlighted = syntax.highlight(code)
    highlighted.rstrip()
    return highlighted


def _hunk_line(item: HunkHeader, registry: SyntaxRegistry, cfg: DiffMetaConfig) -> Text:
    meta = item.metadata
    text = Text(f"{meta.line_number or '?'}:", style="bold green")
    if meta.code_fragment.strip():
        text.append(" ")
        text.append_text(
            highlight_fragment(
                meta.code_fragment,
                registry.language_for(item.extension),
                theme=cfg.display.theme,
                enabled=cfg.display.highlight,
            )
        )
    return text


def render(
    annotations: List[Annotation],
    registry: SyntaxRegistry,
    cfg: DiffMetaConfig,
    *,
    console: Optional[Console] = None,
) -> None:
    """Print annotated headers to stdout (or *console*) using Rich."""
    console = console or Console()

    if not annotations:
        console.print("[dim]No diff headers found.[/dim]")
        return

    for item in annotations:
        if isinstance(item, FileHeader) and cfg.display.file_headers:
            console.print()
            console.rule(_file_banner(item, registry), align="left", style="blue")
        elif isinstance(item, HunkHeader) and cfg.display.hunk_headers:
            console.print(_hunk_line(item, registry, cfg))

    if cfg.output.show_summary:
        _print_summary(console, annotations)


def _print_summary(console: Console, annotations: List[Annotation]) -> None:
    summary = summarise(annotations)
    console.print()
    console.print(f"[dim]Files:[/dim]      {summary.files}")
    console.print(f"[dim]Hunks:[/dim]      {summary.hunks}")
    for kind, count in summary.changes.items():
        console.print(f"[dim]{kind.capitalize() + ':':<11}[/dim] {count}")
    if summary.ambiguous_extensions:
        console.print(f"[dim]Mixed types:[/dim] {summary.ambiguous_extensions}")
