"""Tests for file header parsing — paths, extensions, change descriptions."""

import pytest

from diffmeta.diff.header import (
    describe_change,
    get_file_change_description_from_diff_line,
    get_file_extension_from_diff_line,
    parse_file_header,
    parse_file_paths,
    path_extension,
    reconcile_extensions,
)
from diffmeta.diff.models import ChangeKind, ExtensionStatus, PathPair


class TestFilePaths:
    def test_both_paths(self):
        pair = parse_file_paths("diff --git a/src/main.rs b/src/main.rs")
        assert pair == PathPair(old="src/main.rs", new="src/main.rs")

    def test_missing_new_path(self):
        pair = parse_file_paths("diff --git a/only.rs")
        assert pair.old == "only.rs"
        assert pair.new is None

    @pytest.mark.parametrize("line", ["", "diff", "diff --git"])
    def test_short_lines_have_no_paths(self, line):
        assert parse_file_paths(line) == PathPair(None, None)

    def test_tokens_shorter_than_marker(self):
        """One-character tokens lose everything, never raise."""
        assert parse_file_paths("diff --git a b") == PathPair("", "")

    def test_extra_tokens_ignored(self):
        pair = parse_file_paths("diff --git a/x.py b/y.py trailing")
        assert pair == PathPair("x.py", "y.py")


class TestPathExtension:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("src/main.rs", "rs"),
            ("archive.tar.gz", "gz"),
            ("Makefile", "Makefile"),
            ("build/Dockerfile", "Dockerfile"),
            (".bashrc", ".bashrc"),
            ("trailing.", ""),
            ("", None),
            ("src/..", None),
        ],
    )
    def test_extension_rules(self, path, expected):
        assert path_extension(path) == expected


class TestExtensionResolution:
    def test_same_extension(self):
        assert get_file_extension_from_diff_line("diff --git a/src/main.rs b/src/main.rs") == "rs"

    def test_rename_same_extension(self):
        assert get_file_extension_from_diff_line("diff --git a/old.py b/new.py") == "py"

    def test_differing_extensions_are_ambiguous(self):
        assert get_file_extension_from_diff_line("diff --git a/lib.js b/lib.ts") is None

    def test_extensionless_file_name(self):
        assert get_file_extension_from_diff_line("diff --git a/Makefile b/Makefile") == "Makefile"

    def test_single_side(self):
        assert get_file_extension_from_diff_line("diff --git a/only.rs") == "rs"

    def test_no_paths(self):
        assert get_file_extension_from_diff_line("diff --git") is None

    def test_reconcile_statuses(self):
        assert reconcile_extensions("rs", "rs").status is ExtensionStatus.RESOLVED
        assert reconcile_extensions("rs", None).value == "rs"
        assert reconcile_extensions(None, "rs").value == "rs"

        ambiguous = reconcile_extensions("js", "ts")
        assert ambiguous.value is None
        assert ambiguous.is_ambiguous

        absent = reconcile_extensions(None, None)
        assert absent.value is None
        assert absent.status is ExtensionStatus.ABSENT


class TestChangeDescription:
    def test_modified(self):
        line = "diff --git a/src/main.rs b/src/main.rs"
        assert get_file_change_description_from_diff_line(line) == "src/main.rs"

    def test_deleted(self):
        desc = get_file_change_description_from_diff_line("diff --git a/old.rs b/dev/null")
        assert desc == "deleted: old.rs"

    def test_deleted_literal_sentinel(self):
        desc = get_file_change_description_from_diff_line("diff --git a/old.rs b//dev/null")
        assert desc == "deleted: old.rs"

    def test_added(self):
        desc = get_file_change_description_from_diff_line("diff --git a/dev/null b/new.rs")
        assert desc == "added: new.rs"

    def test_renamed_arrow_spacing(self):
        desc = get_file_change_description_from_diff_line("diff --git a/old.py b/new.py")
        assert desc == "renamed: old.py ⟶  new.py"

    @pytest.mark.parametrize("line", ["diff --git a/x.py", "diff --git", "not a header"])
    def test_unknown(self, line):
        assert get_file_change_description_from_diff_line(line) == "?"

    def test_kinds(self):
        assert describe_change(PathPair("a", "a")).kind is ChangeKind.UNCHANGED
        assert describe_change(PathPair("a", "/dev/null")).kind is ChangeKind.DELETED
        assert describe_change(PathPair("/dev/null", "a")).kind is ChangeKind.ADDED
        assert describe_change(PathPair("a", "b")).kind is ChangeKind.RENAMED
        assert describe_change(PathPair("a", None)).kind is ChangeKind.UNKNOWN


class TestFileHeader:
    def test_single_parse_feeds_both(self):
        info = parse_file_header("diff --git a/docs/README b/docs/README.md")
        assert info.paths == PathPair("docs/README", "docs/README.md")
        assert info.extension.is_ambiguous
        assert str(info.description) == "renamed: docs/README ⟶  docs/README.md"

    def test_matches_line_level_helpers(self):
        line = "diff --git a/src/main.rs b/src/main.rs"
        info = parse_file_header(line)
        assert info.extension.value == get_file_extension_from_diff_line(line)
        assert str(info.description) == get_file_change_description_from_diff_line(line)

    def test_repeated_parse_is_identical(self):
        line = "diff --git a/old.py b/new.py"
        assert parse_file_header(line) == parse_file_header(line)
