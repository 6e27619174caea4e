"""Hunk header parsing."""

from __future__ import annotations

from diffmeta.diff.models import HunkMetadata

_DELIMITER = "@@"


def _new_start(ranges: str) -> str:
    """``" -74,15 +75,14 "`` → ``"75"``; ``""`` when no ``+start,count`` token."""
    for token in ranges.split():
        if token.startswith("+"):
            start, comma, _ = token[1:].partition(",")
            return start if comma else ""
    return ""


def parse_hunk_metadata(line: str) -> HunkMetadata:
    """Return the code fragment and new-file start line of an ``@@`` line.

    Given ``"@@ -74,15 +75,14 @@ pub fn delta(\\n"`` return
    ``(" pub fn delta(\\n", "75")``. The fragment is everything after the
    closing ``@@``, whitespace included. The line number stays a string.
    """
    segments = line.split(_DELIMITER, 2)
    ranges = segments[1] if len(segments) > 1 else ""
    code_fragment = segments[2] if len(segments) > 2 else ""
    return HunkMetadata(code_fragment=code_fragment, line_number=_new_start(ranges))
