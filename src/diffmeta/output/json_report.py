"""JSON renderer for scripts and editor integrations."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List

from diffmeta.diff.annotator import Annotation, FileHeader, HunkHeader, summarise
from diffmeta.syntax.registry import SyntaxRegistry


def _file_entry(item: FileHeader, registry: SyntaxRegistry) -> Dict[str, Any]:
    info = item.info
    return {
        "type": "file",
        "line": item.line_no,
        "old_path": info.paths.old,
        "new_path": info.paths.new,
        "extension": info.extension.value,
        "extension_status": info.extension.status.value,
        "language": registry.language_for(info.extension.value),
        "change": info.description.kind.value,
        "description": str(info.description),
    }


def _hunk_entry(item: HunkHeader, registry: SyntaxRegistry) -> Dict[str, Any]:
    return {
        "type": "hunk",
        "line": item.line_no,
        "start_line": item.metadata.line_number,
        "code_fragment": item.metadata.code_fragment,
        "extension": item.extension,
        "language": registry.language_for(item.extension),
    }


def to_dict(annotations: List[Annotation], registry: SyntaxRegistry) -> Dict[str, Any]:
    """Convert annotations to a JSON-serialisable dict."""
    entries: List[Dict[str, Any]] = []
    for item in annotations:
        if isinstance(item, FileHeader):
            entries.append(_file_entry(item, registry))
        elif isinstance(item, HunkHeader):
            entries.append(_hunk_entry(item, registry))

    summary = summarise(annotations)
    return {
        "version": "1.0",
        "files": summary.files,
        "hunks": summary.hunks,
        "summary": asdict(summary),
        "annotations": entries,
    }


def render(annotations: List[Annotation], registry: SyntaxRegistry) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(annotations, registry), indent=2, ensure_ascii=False)
