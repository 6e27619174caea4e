"""Stream a unified diff through the header parsers.

Yields one annotation per ``diff --git`` and ``@@`` line. Body lines are
left alone. The only state carried across lines is the extension of the
current file, so hunk headers can be highlighted in the right language.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Generator, Iterable, List, Optional, Union

from diffmeta.diff.header import parse_file_header
from diffmeta.diff.hunk import parse_hunk_metadata
from diffmeta.diff.models import ChangeKind, FileHeaderInfo, HunkMetadata

_FILE_HEADER_RE = re.compile(r"^diff --git ")
_HUNK_HEADER_RE = re.compile(r"^@@")


def _strip_bom(line: str) -> str:
    """Remove UTF-8 BOM if present."""
    return line.lstrip("\ufeff")


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def split_lines(text: str) -> List[str]:
    """Split on newlines only, keeping them; form feeds stay inside their line."""
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    if not lines[-1]:
        lines.pop()
    return lines


@dataclass(frozen=True)
class FileHeader:
    """A ``diff --git`` line and what was derived from it."""

    line_no: int
    raw: str
    info: FileHeaderInfo

    @property
    def extension(self) -> Optional[str]:
        return self.info.extension.value


@dataclass(frozen=True)
class HunkHeader:
    """An ``@@`` line; ``extension`` comes from the enclosing file header."""

    line_no: int
    raw: str
    metadata: HunkMetadata
    extension: Optional[str] = None


Annotation = Union[FileHeader, HunkHeader]


class DiffAnnotator:
    """Annotate the header lines of a unified diff.

    Usage::

        for item in DiffAnnotator(diff_text).annotate():
            if isinstance(item, FileHeader):
                ...
            elif isinstance(item, HunkHeader):
                ...
    """

    def __init__(self, diff_text: str) -> None:
        self._lines = split_lines(diff_text)

    def annotate(self) -> Generator[Annotation, None, None]:
        yield from annotate_lines(self._lines)


def annotate_lines(lines: Iterable[str]) -> Generator[Annotation, None, None]:
    """Annotate an iterable of lines, each optionally ending in a newline."""
    current_ext: Optional[str] = None

    for idx, raw_line in enumerate(lines, start=1):
        if idx == 1:
            raw_line = _strip_bom(raw_line)

        if _FILE_HEADER_RE.match(raw_line):
            info = parse_file_header(_strip_eol(raw_line))
            current_ext = info.extension.value
            yield FileHeader(line_no=idx, raw=raw_line, info=info)
            continue

        if _HUNK_HEADER_RE.match(raw_line):
            yield HunkHeader(
                line_no=idx,
                raw=raw_line,
                metadata=parse_hunk_metadata(raw_line),
                extension=current_ext,
            )


@dataclass
class AnnotationSummary:
    """Counts over one annotated diff."""

    files: int = 0
    hunks: int = 0
    changes: Dict[str, int] = field(default_factory=dict)
    ambiguous_extensions: int = 0


def summarise(annotations: Iterable[Annotation]) -> AnnotationSummary:
    summary = AnnotationSummary()
    kinds: Counter[str] = Counter()
    for item in annotations:
        if isinstance(item, FileHeader):
            summary.files += 1
            kinds[item.info.description.kind.value] += 1
            if item.info.extension.is_ambiguous:
                summary.ambiguous_extensions += 1
        elif isinstance(item, HunkHeader):
            summary.hunks += 1
    summary.changes = {kind.value: kinds[kind.value] for kind in ChangeKind if kinds[kind.value]}
    return summary
