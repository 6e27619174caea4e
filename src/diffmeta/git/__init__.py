"""Git interface layer."""

from diffmeta.git.adapter import (
    GitError,
    get_range_diff,
    get_repo_root,
    get_staged_diff,
    get_worktree_diff,
)

__all__ = [
    "GitError",
    "get_range_diff",
    "get_repo_root",
    "get_staged_diff",
    "get_worktree_diff",
]
