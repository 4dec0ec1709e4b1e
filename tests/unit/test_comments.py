"""
Unit tests for comment stripping and the candidate scanner.
"""

import re

from jdl_angular.processors import (
    column_number,
    drop_commented,
    find_candidates,
    is_commented,
    line_number,
    scan,
    strip_block_comments,
    strip_block_comments_mapped,
)


class TestStripBlockComments:
    """Test removal of /* ... */ spans."""

    def test_no_block_comment_is_noop(self):
        text = "entity Foo {\n  name String\n}"
        assert strip_block_comments(text) == text

    def test_single_line_block_comment(self):
        assert strip_block_comments("a /* gone */ b") == "a  b"

    def test_multiline_block_comment(self):
        text = "before\n/* line one\n   entity X { y String }\n*/after"
        assert strip_block_comments(text) == "before\nafter"

    def test_each_comment_ends_at_first_terminator(self):
        """Text between two separate block comments survives."""
        text = "/* one */ keep /* two */"
        assert strip_block_comments(text) == " keep "

    def test_unterminated_block_comment_is_left_alone(self):
        text = "/* never closed\nentity Foo { a String }"
        assert strip_block_comments(text) == text


class TestIsCommented:
    """Test the positional line-comment predicate."""

    def test_match_at_line_start_is_not_commented(self):
        text = "entity Foo {}"
        assert is_commented(text, 0) is False

    def test_match_after_marker_is_commented(self):
        text = "// entity Foo {}"
        assert is_commented(text, text.index("entity")) is True

    def test_leading_whitespace_before_marker(self):
        text = "first\n    // entity Foo {}"
        assert is_commented(text, text.index("entity")) is True

    def test_marker_after_code_does_not_comment(self):
        """Only lines starting with // count."""
        text = "x = 1 // entity Foo {}"
        assert is_commented(text, text.index("entity")) is False

    def test_marker_on_previous_line_does_not_leak(self):
        text = "// note\nentity Foo {}"
        assert is_commented(text, text.index("entity")) is False

    def test_only_text_before_index_counts(self):
        text = "entity Foo {} // trailing"
        assert is_commented(text, 0) is False

    def test_line_number(self):
        text = "a\nb\nc"
        assert line_number(text, 0) == 1
        assert line_number(text, text.index("c")) == 3


class TestScanner:
    """Test the two scanning stages and their composition."""

    PATTERN = re.compile(r"item\s+(\w+)")

    def test_find_candidates_returns_all_matches(self):
        text = "item a\n// item b\nitem c"
        names = [m.group(1) for m in find_candidates(self.PATTERN, text)]
        assert names == ["a", "b", "c"]

    def test_drop_commented_filters_commented_lines(self):
        text = "item a\n// item b\nitem c"
        kept = drop_commented(find_candidates(self.PATTERN, text), text)
        assert [m.group(1) for m in kept] == ["a", "c"]

    def test_scan_composes_both_stages(self):
        text = "  // item x\nitem y"
        assert [m.group(1) for m in scan(self.PATTERN, text)] == ["y"]

    def test_skipped_candidates_are_logged(self, gen_caplog):
        text = "// item hidden"
        assert list(scan(self.PATTERN, text)) == []
        assert any("Commented declaration at line 1" in r.getMessage() for r in gen_caplog.records)


class TestLineMap:
    """Test mapping cleaned offsets back to source lines."""

    def test_mapped_text_equals_plain_strip(self):
        text = "a /* x\ny */ b\n/* z */c"
        cleaned, _ = strip_block_comments_mapped(text)
        assert cleaned == strip_block_comments(text)

    def test_without_comments_lines_are_unchanged(self):
        text = "a\nb\nc"
        _, line_map = strip_block_comments_mapped(text)
        assert line_map.line(text.index("c")) == 3

    def test_multiline_comment_before_offset(self):
        text = "/*\n one\n two\n*/\nentity Foo"
        cleaned, line_map = strip_block_comments_mapped(text)
        index = cleaned.index("entity")
        assert line_number(cleaned, index) == 2
        assert line_map.line(index) == 5

    def test_comment_after_offset_does_not_count(self):
        text = "entity Foo\n/*\n\n*/\nentity Bar"
        cleaned, line_map = strip_block_comments_mapped(text)
        assert line_map.line(cleaned.index("Foo")) == 1
        assert line_map.line(cleaned.index("Bar")) == 5

    def test_several_comments_accumulate(self):
        text = "/*\n*/a\n/*\n\n*/b"
        cleaned, line_map = strip_block_comments_mapped(text)
        assert line_map.line(cleaned.index("a")) == 2
        assert line_map.line(cleaned.index("b")) == 5

    def test_column_number(self):
        text = "ab\n  cd"
        assert column_number(text, 0) == 1
        assert column_number(text, text.index("c")) == 3

    def test_skip_log_uses_source_lines(self, gen_caplog):
        text = "/*\n\n*/\n// item hidden"
        cleaned, line_map = strip_block_comments_mapped(text)
        assert list(scan(TestScanner.PATTERN, cleaned, line_map)) == []
        assert any("Commented declaration at line 4" in r.getMessage() for r in gen_caplog.records)
