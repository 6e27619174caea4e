"""Diff header parsing — file paths, extensions, change descriptions, hunks."""

from diffmeta.diff.annotator import (
    AnnotationSummary,
    DiffAnnotator,
    FileHeader,
    HunkHeader,
    annotate_lines,
    summarise,
)
from diffmeta.diff.header import (
    NULL_DEVICE,
    describe_change,
    get_file_change_description_from_diff_line,
    get_file_extension_from_diff_line,
    parse_file_header,
    parse_file_paths,
    path_extension,
    reconcile_extensions,
    resolve_extension,
)
from diffmeta.diff.hunk import parse_hunk_metadata
from diffmeta.diff.models import (
    ChangeDescription,
    ChangeKind,
    ExtensionResolution,
    ExtensionStatus,
    FileHeaderInfo,
    HunkMetadata,
    PathPair,
)

__all__ = [
    "NULL_DEVICE",
    "AnnotationSummary",
    "ChangeDescription",
    "ChangeKind",
    "DiffAnnotator",
    "ExtensionResolution",
    "ExtensionStatus",
    "FileHeader",
    "FileHeaderInfo",
    "HunkHeader",
    "HunkMetadata",
    "PathPair",
    "annotate_lines",
    "describe_change",
    "get_file_change_description_from_diff_line",
    "get_file_extension_from_diff_line",
    "parse_file_header",
    "parse_file_paths",
    "parse_hunk_metadata",
    "path_extension",
    "reconcile_extensions",
    "resolve_extension",
    "summarise",
]
