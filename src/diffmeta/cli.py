"""diffmeta CLI — Typer application with annotate, file, hunk, and init commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from diffmeta import __version__

app = typer.Typer(
    name="diffmeta",
    help="Extract highlighting metadata from unified diff headers.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from diffmeta.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _config_root() -> Path:
    """Repo root when inside a git repository, else the working directory."""
    from diffmeta.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError:
        return Path.cwd()


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {source}: {exc}")
        raise typer.Exit(code=2) from exc


# ── annotate ──────────────────────────────────────────────────────────────────


@app.command()
def annotate(
    source: Optional[str] = typer.Argument(None, help="Diff file, or - for stdin (default: git diff)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffmeta.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    staged: bool = typer.Option(False, "--staged", help="Annotate staged changes"),
    from_ref: Optional[str] = typer.Option(None, "--from", help="Base commit"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Head commit (default HEAD)"),
    no_highlight: bool = typer.Option(False, "--no-highlight", help="Disable syntax highlighting"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Annotate the file and hunk headers of a diff."""
    from diffmeta.config.loader import ConfigError, load_config
    from diffmeta.config.schema import OUTPUT_FORMATS
    from diffmeta.diff.annotator import DiffAnnotator
    from diffmeta.git.adapter import GitError, get_range_diff, get_staged_diff, get_worktree_diff
    from diffmeta.output import json_report, terminal
    from diffmeta.syntax.registry import SyntaxMapError, build_registry

    repo_root = _config_root() if source else _resolve_repo_root()

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if no_highlight:
        cfg.display.highlight = False

    try:
        registry = build_registry(cfg, repo_root)
    except SyntaxMapError as exc:
        console.print(f"[bold red]Syntax map error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if verbose:
        console.print(f"[dim]Syntax mappings loaded: {len(registry.all_mappings)}[/dim]")
        console.print(f"[dim]Config root: {repo_root}[/dim]")

    # --- Get diff ---
    if source:
        diff_text = _read_source(source)
    else:
        try:
            if from_ref:
                diff_text = get_range_diff(repo_root, from_ref, to_ref or "HEAD")
            elif staged:
                diff_text = get_staged_diff(repo_root)
            else:
                diff_text = get_worktree_diff(repo_root)
        except GitError as exc:
            console.print(f"[bold red]Git error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc

    annotations = list(DiffAnnotator(diff_text).annotate())

    if verbose:
        console.print(f"[dim]Header lines annotated: {len(annotations)}[/dim]")

    # --- Output ---
    if cfg.output.format == "json":
        print(json_report.render(annotations, registry))
    else:
        terminal.render(annotations, registry, cfg)


# ── file ──────────────────────────────────────────────────────────────────────


@app.command("file")
def file_header(
    line: str = typer.Argument(..., help='A "diff --git a/<path> b/<path>" line'),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Show the extension and change description of one file header line."""
    from diffmeta.diff.header import parse_file_header

    info = parse_file_header(line)
    if as_json:
        print(json.dumps({
            "old_path": info.paths.old,
            "new_path": info.paths.new,
            "extension": info.extension.value,
            "extension_status": info.extension.status.value,
            "description": str(info.description),
        }, ensure_ascii=False))
        return
    print(f"extension: {info.extension.value if info.extension.value is not None else '-'}")
    print(f"description: {info.description}")


# ── hunk ──────────────────────────────────────────────────────────────────────


@app.command()
def hunk(
    line: str = typer.Argument(..., help='A "@@ -a,b +c,d @@ context" line'),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Show the start line and code context of one hunk header line."""
    from diffmeta.diff.hunk import parse_hunk_metadata

    meta = parse_hunk_metadata(line)
    if as_json:
        print(json.dumps({
            "start_line": meta.line_number,
            "code_fragment": meta.code_fragment,
        }, ensure_ascii=False))
        return
    print(f"start_line: {meta.line_number}")
    print(f"code_fragment: {meta.code_fragment!r}")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .diffmeta.toml in the repo root."""
    from diffmeta.config.defaults import DEFAULT_TOML
    from diffmeta.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"diffmeta {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """diffmeta — Extract highlighting metadata from unified diff headers."""
