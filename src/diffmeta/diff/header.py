"""File header parsing — paths, extension and change description.

Given a line such as ``diff --git a/src/main.rs b/src/main.rs`` the helpers
here answer two questions: which extension should drive syntax
highlighting (``"rs"``) and how to describe the change (``"src/main.rs"``).
Malformed lines never raise; missing information comes back as ``None``
or the ``"?"`` placeholder.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from diffmeta.diff.models import (
    ChangeDescription,
    ChangeKind,
    ExtensionResolution,
    ExtensionStatus,
    FileHeaderInfo,
    PathPair,
)

NULL_DEVICE = "/dev/null"

# ``b/dev/null`` loses its leading slash together with the ``b/`` marker.
_NULL_DEVICE_FORMS = frozenset({NULL_DEVICE, NULL_DEVICE.lstrip("/")})

_PREFIX_LEN = 2  # "a/" and "b/" markers


def _strip_prefix(token: str) -> str:
    return token[_PREFIX_LEN:]


def parse_file_paths(line: str) -> PathPair:
    """Return the old/new paths of a ``diff --git`` line.

    Splits on single ASCII spaces; the first two tokens (``diff``,
    ``--git``) are skipped and the next two lose their two-character marker.
    """
    tokens = line.split(" ")[2:4]
    old = _strip_prefix(tokens[0]) if len(tokens) > 0 else None
    new = _strip_prefix(tokens[1]) if len(tokens) > 1 else None
    return PathPair(old=old, new=new)


# ---- extension lookup ----


def file_name(path: str) -> Optional[str]:
    """Last path component, or None for empty paths and paths ending in ``..``."""
    parts = [p for p in path.split("/") if p and p != "."]
    if not parts or parts[-1] == "..":
        return None
    return parts[-1]


def dotted_suffix(name: str) -> Optional[str]:
    """Text after the last dot, unless the only dot is leading (``.bashrc``)."""
    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem:
        return None
    return suffix


def bare_file_name(name: str) -> Optional[str]:
    """``Makefile`` and ``Dockerfile`` act as their own extension."""
    return name


ExtensionRule = Callable[[str], Optional[str]]

# Tried in order against the file name; the first non-None answer wins.
EXTENSION_RULES: Tuple[ExtensionRule, ...] = (dotted_suffix, bare_file_name)


def path_extension(path: str) -> Optional[str]:
    """Resolve a single path to its extension token."""
    name = file_name(path)
    if name is None:
        return None
    for rule in EXTENSION_RULES:
        ext = rule(name)
        if ext is not None:
            return ext
    return None


def reconcile_extensions(
    old_ext: Optional[str], new_ext: Optional[str]
) -> ExtensionResolution:
    """Combine the extensions of both sides into one resolution."""
    if old_ext is not None and new_ext is not None:
        if old_ext == new_ext:
            return ExtensionResolution(old_ext, ExtensionStatus.RESOLVED)
        # Rename across file types: don't guess a language
        return ExtensionResolution(None, ExtensionStatus.AMBIGUOUS)
    if old_ext is not None:
        return ExtensionResolution(old_ext, ExtensionStatus.RESOLVED)
    if new_ext is not None:
        return ExtensionResolution(new_ext, ExtensionStatus.RESOLVED)
    return ExtensionResolution(None, ExtensionStatus.ABSENT)


def resolve_extension_detail(paths: PathPair) -> ExtensionResolution:
    old_ext = path_extension(paths.old) if paths.old is not None else None
    new_ext = path_extension(paths.new) if paths.new is not None else None
    return reconcile_extensions(old_ext, new_ext)


def resolve_extension(paths: PathPair) -> Optional[str]:
    """Single extension consistent with both paths, or None."""
    return resolve_extension_detail(paths).value


# ---- change description ----


def is_null_device(path: Optional[str]) -> bool:
    return path in _NULL_DEVICE_FORMS


def describe_change(paths: PathPair) -> ChangeDescription:
    """Classify a path pair as unchanged, deleted, added or renamed."""
    old, new = paths.old, paths.new
    if old is None or new is None:
        return ChangeDescription(ChangeKind.UNKNOWN, old, new)
    if old == new:
        return ChangeDescription(ChangeKind.UNCHANGED, old, new)
    if is_null_device(new):
        return ChangeDescription(ChangeKind.DELETED, old, new)
    if is_null_device(old):
        return ChangeDescription(ChangeKind.ADDED, old, new)
    return ChangeDescription(ChangeKind.RENAMED, old, new)


# ---- line-level entry points ----


def parse_file_header(line: str) -> FileHeaderInfo:
    """Parse the paths once and derive both extension and description."""
    paths = parse_file_paths(line)
    return FileHeaderInfo(
        paths=paths,
        extension=resolve_extension_detail(paths),
        description=describe_change(paths),
    )


def get_file_extension_from_diff_line(line: str) -> Optional[str]:
    """``"diff --git a/src/main.rs b/src/main.rs"`` → ``"rs"``."""
    return resolve_extension(parse_file_paths(line))


def get_file_change_description_from_diff_line(line: str) -> str:
    """``"diff --git a/src/main.rs b/src/main.rs"`` → ``"src/main.rs"``."""
    return str(describe_change(parse_file_paths(line)))
