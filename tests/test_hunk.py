"""Tests for hunk header parsing."""

from diffmeta.diff.hunk import parse_hunk_metadata
from diffmeta.diff.models import HunkMetadata


class TestHunkMetadata:
    def test_fragment_and_line_number(self):
        assert parse_hunk_metadata("@@ -74,15 +75,14 @@ pub fn delta(\n") == (
            " pub fn delta(\n",
            "75",
        )

    def test_named_fields(self):
        meta = parse_hunk_metadata("@@ -1,2 +3,4 @@ def f():")
        assert isinstance(meta, HunkMetadata)
        assert meta.code_fragment == " def f():"
        assert meta.line_number == "3"

    def test_missing_plus_token(self):
        meta = parse_hunk_metadata("@@ -74,15 @@ fn x()")
        assert meta.line_number == ""
        assert meta.code_fragment == " fn x()"

    def test_missing_comma(self):
        """Single-line ranges have no count, so no line number is reported."""
        assert parse_hunk_metadata("@@ -1 +1 @@\n") == ("\n", "")

    def test_no_context(self):
        assert parse_hunk_metadata("@@ -0,0 +1,3 @@") == ("", "1")

    def test_no_closing_delimiter(self):
        assert parse_hunk_metadata("@@ -1,2 +3,4") == ("", "3")

    def test_context_containing_delimiter_kept_whole(self):
        meta = parse_hunk_metadata("@@ -1,2 +3,4 @@ x = a @@ b\n")
        assert meta.code_fragment == " x = a @@ b\n"

    def test_not_a_hunk_line(self):
        assert parse_hunk_metadata("") == ("", "")
        assert parse_hunk_metadata("+added line") == ("", "")

    def test_repeated_parse_is_identical(self):
        line = "@@ -74,15 +75,14 @@ pub fn delta(\n"
        assert parse_hunk_metadata(line) == parse_hunk_metadata(line)
