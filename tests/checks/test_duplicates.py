"""Tests for duplicate block detection."""

from coding_police.checks.duplicates import (
    check_duplicate_blocks,
    find_duplicate_blocks,
    normalize_lines,
)
from coding_police.checks.models import DuplicateMatch, NormalizedLine, ViolationKind
from coding_police.scanning.lines import number_lines

BLOCK = [
    "const x = getUser();",
    "const y = validate(x);",
    "const z = transform(y);",
    "await save(z);",
    'logger.info("done");',
    "return z;",
]


def _file_with_block_at(starts, total=80):
    """Unique filler lines with BLOCK pasted at each 1-based start line."""
    texts = [f"const filler{i} = {i};" for i in range(1, total + 1)]
    for start in starts:
        texts[start - 1 : start - 1 + len(BLOCK)] = BLOCK
    return number_lines(texts)


class TestNormalizeLines:
    """Trivial lines are dropped, positions are kept."""

    def test_drops_trivial_lines(self):
        lines = number_lines(
            [
                "  const a = 1;  ",
                "",
                "   ",
                "// comment",
                "# comment",
                " * doc line",
                "/* block",
                "*/",
                "import os",
                "from x import y",
                "use std::io;",
                "using System;",
                "require('x');",
                "{",
                "}",
                ")",
                ";",
                ",",
                "return a;",
            ]
        )
        assert normalize_lines(lines) == [
            NormalizedLine("const a = 1;", 1),
            NormalizedLine("return a;", 19),
        ]

    def test_keeps_multi_character_punctuation(self):
        lines = number_lines(["});", "]);"])
        assert [n.text for n in normalize_lines(lines)] == ["});", "]);"]

    def test_order_preserved(self):
        lines = number_lines(["b = 2", "", "a = 1"])
        assert [n.number for n in normalize_lines(lines)] == [1, 3]


class TestFindDuplicateBlocks:
    """Window matching and pair reporting."""

    def test_no_duplicates(self):
        lines = number_lines([f"const {c} = {i};" for i, c in enumerate("abcdefg")])
        assert find_duplicate_blocks(lines, 6) == []

    def test_block_repeated_once(self):
        lines = _file_with_block_at([5, 40])
        assert find_duplicate_blocks(lines, 6) == [DuplicateMatch(5, 40, 6)]

    def test_third_repeat_links_to_first_occurrence(self):
        lines = _file_with_block_at([5, 40, 75])
        assert find_duplicate_blocks(lines, 6) == [
            DuplicateMatch(5, 40, 6),
            DuplicateMatch(5, 75, 6),
        ]

    def test_interleaved_trivial_lines_ignored(self):
        second = [
            BLOCK[0],
            "",
            BLOCK[1],
            "// explain",
            BLOCK[2],
            "import { a } from 'a';",
            BLOCK[3],
            BLOCK[4],
            "",
            BLOCK[5],
        ]
        lines = number_lines([*BLOCK, "const sep = 0;", *second])
        assert find_duplicate_blocks(lines, 6) == [DuplicateMatch(1, 8, 6)]

    def test_longer_block_reported_once(self):
        block = [*BLOCK, "const extra1 = 1;", "const extra2 = 2;"]
        lines = number_lines([*block, "const sep = 0;", *block])
        assert find_duplicate_blocks(lines, 6) == [DuplicateMatch(1, 10, 6)]

    def test_repeated_line_reported_once_per_new_site(self):
        """A region that overlaps itself never advances its first occurrence."""
        lines = number_lines(["count += 1;"] * 10)
        assert find_duplicate_blocks(lines, 6) == [
            DuplicateMatch(1, 2, 6),
            DuplicateMatch(1, 3, 6),
            DuplicateMatch(1, 4, 6),
            DuplicateMatch(1, 5, 6),
        ]
        assert len(check_duplicate_blocks(lines, 6)) == 4

    def test_repeated_line_pair_coalesces_alternate_windows(self):
        lines = number_lines(["const a = 1;", "const b = 2;"] * 6)
        assert find_duplicate_blocks(lines, 6) == [
            DuplicateMatch(1, 3, 6),
            DuplicateMatch(1, 5, 6),
            DuplicateMatch(1, 7, 6),
        ]

    def test_block_smaller_than_window(self):
        block = ["const a = 1;", "const b = 2;", "const c = 3;"]
        lines = number_lines([*block, "", *block])
        assert find_duplicate_blocks(lines, 6) == []
        assert find_duplicate_blocks(lines, 3) == [DuplicateMatch(1, 5, 3)]

    def test_whitespace_difference_defeats_match(self):
        altered = [*BLOCK]
        altered[2] = "const z  = transform(y);"
        lines = number_lines([*BLOCK, "const sep = 0;", *altered])
        assert find_duplicate_blocks(lines, 6) == []

    def test_indentation_does_not_matter(self):
        indented = [f"    {text}" for text in BLOCK]
        lines = number_lines([*BLOCK, "const sep = 0;", *indented])
        assert find_duplicate_blocks(lines, 6) == [DuplicateMatch(1, 8, 6)]

    def test_reordering_defeats_match(self):
        reordered = [BLOCK[1], BLOCK[0], *BLOCK[2:]]
        lines = number_lines([*BLOCK, "const sep = 0;", *reordered])
        assert find_duplicate_blocks(lines, 6) == []

    def test_comment_and_blank_only_file(self):
        lines = number_lines(["// comment", "", "# note", ""] * 10)
        assert find_duplicate_blocks(lines, 6) == []
        assert find_duplicate_blocks(lines, 1) == []

    def test_duplicate_imports_ignored(self):
        imports = [f"import {{ {c} }} from '{c}';" for c in "abcdef"]
        lines = number_lines([*imports, "", *imports])
        assert find_duplicate_blocks(lines, 6) == []

    def test_window_clamped_to_one(self):
        lines = number_lines(["const a = 1;", "const b = 2;", "const a = 1;"])
        assert find_duplicate_blocks(lines, 0) == [DuplicateMatch(1, 3, 1)]
        assert find_duplicate_blocks(lines, -3) == [DuplicateMatch(1, 3, 1)]

    def test_fewer_lines_than_window(self):
        lines = number_lines(["const a = 1;"])
        assert find_duplicate_blocks(lines, 6) == []

    def test_repeatable(self):
        lines = _file_with_block_at([5, 40, 75])
        assert find_duplicate_blocks(lines, 6) == find_duplicate_blocks(lines, 6)


class TestCheckDuplicateBlocks:
    """Violation messages."""

    def test_message(self):
        violations = check_duplicate_blocks(_file_with_block_at([5, 40]), 6)
        assert len(violations) == 1
        assert violations[0].kind == ViolationKind.DUPLICATE_CODE
        assert violations[0].message == (
            "DUPLICATE CODE: 6+ line block duplicated at lines 5 and 40."
            " Extract into a shared function to keep code DRY."
        )

    def test_duplicated_handlers(self):
        lines = number_lines(
            ["function handler1() {", *BLOCK, "}", "", "function handler2() {", *BLOCK, "}"]
        )
        violations = check_duplicate_blocks(lines, 6)
        assert len(violations) == 1
        assert "lines 2 and 11" in violations[0].message
        assert "DRY" in violations[0].message
