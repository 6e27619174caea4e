"""Git subprocess wrapper — repo root, worktree, staged and range diffs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


class GitError(Exception):
    """Raised when git is unavailable or returns an unexpected error."""


_DIFF_ARGS = ["diff", "--no-color", "--no-ext-diff"]


def _run_git(args: list[str], cwd: Path, timeout: int = 30) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        raise GitError(f"git error: {result.stderr.strip() or 'exit code ' + str(result.returncode)}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(out.strip())


def get_worktree_diff(repo_root: Path) -> str:
    """Return the unified diff of unstaged changes."""
    return _run_git(_DIFF_ARGS, cwd=repo_root)


def get_staged_diff(repo_root: Path) -> str:
    """Return the unified diff of staged changes (--cached)."""
    return _run_git([*_DIFF_ARGS, "--cached"], cwd=repo_root)


def get_range_diff(repo_root: Path, base: str, head: str) -> str:
    """Return the unified diff between two commits."""
    return _run_git([*_DIFF_ARGS, f"{base}..{head}"], cwd=repo_root)
