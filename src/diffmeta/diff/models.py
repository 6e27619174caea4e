"""Data models for diff header metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class ExtensionStatus(str, Enum):
    RESOLVED = "resolved"
    ABSENT = "absent"
    AMBIGUOUS = "ambiguous"  # old and new sides disagree


class ChangeKind(str, Enum):
    UNCHANGED = "unchanged"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class PathPair:
    """Old and new paths named by a ``diff --git`` line."""

    old: Optional[str] = None
    new: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExtensionResolution:
    """Reconciled extension for a path pair.

    ``value`` is ``None`` both when neither side has an extension and when
    the sides disagree; ``status`` tells the two apart.
    """

    value: Optional[str]
    status: ExtensionStatus

    @property
    def is_ambiguous(self) -> bool:
        return self.status is ExtensionStatus.AMBIGUOUS


RENAME_ARROW = "⟶  "


@dataclass(frozen=True, slots=True)
class ChangeDescription:
    """How a file changed, rendered via ``str()``."""

    kind: ChangeKind
    old_path: Optional[str] = None
    new_path: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is ChangeKind.UNCHANGED:
            return f"{self.new_path}"
        if self.kind is ChangeKind.DELETED:
            return f"deleted: {self.old_path}"
        if self.kind is ChangeKind.ADDED:
            return f"added: {self.new_path}"
        if self.kind is ChangeKind.RENAMED:
            return f"renamed: {self.old_path} {RENAME_ARROW}{self.new_path}"
        return "?"


@dataclass(frozen=True, slots=True)
class FileHeaderInfo:
    """Everything derived from one ``diff --git`` line."""

    paths: PathPair
    extension: ExtensionResolution
    description: ChangeDescription


class HunkMetadata(NamedTuple):
    """Code context and new-file start line of an ``@@`` header."""

    code_fragment: str = ""
    line_number: str = ""
