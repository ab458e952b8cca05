from data.diff_engine import compute_diff, diff_engine, generate_unified_diff
from data.diff_formatters import format_inline, format_side_by_side, render_unified_diff
from domain.entities import DiffOptions, DiffType, LineNumber, SideBySideLine


def test_side_by_side_unchanged():
    result = format_side_by_side(compute_diff("hello", "hello"))

    assert result.left == (SideBySideLine(DiffType.UNCHANGED, 1, "hello"),)
    assert result.right == (SideBySideLine(DiffType.UNCHANGED, 1, "hello"),)


def test_side_by_side_addition_leaves_left_blank():
    result = format_side_by_side(compute_diff("a", "a\nb"))

    assert result.left[1] == SideBySideLine(DiffType.ADDED, None, "")
    assert result.right[1] == SideBySideLine(DiffType.ADDED, 2, "b")


def test_side_by_side_deletion_leaves_right_blank():
    result = format_side_by_side(compute_diff("a\nb", "a"))

    assert result.left[1] == SideBySideLine(DiffType.REMOVED, 2, "b")
    assert result.right[1] == SideBySideLine(DiffType.REMOVED, None, "")


def test_side_by_side_modification_shows_both_versions():
    result = format_side_by_side(compute_diff("old", "new"))

    assert result.left[0] == SideBySideLine(DiffType.MODIFIED, 1, "old")
    assert result.right[0] == SideBySideLine(DiffType.MODIFIED, 1, "new")


def test_side_by_side_sides_have_equal_length():
    result = diff_engine.side_by_side("a\nb\nc\nd", "x\nb\nd\ne\nf")

    assert len(result.left) == len(result.right)
    assert len(list(result.rows())) == len(result.left)


def test_inline_prefixes():
    inline = format_inline(compute_diff("a\nb\nc", "a\nc\nd"))

    assert [(l.prefix, l.content) for l in inline] == [
        (" ", "a"),
        ("-", "b"),
        (" ", "c"),
        ("+", "d"),
    ]


def test_inline_expands_modification_into_two_lines():
    inline = format_inline(compute_diff("old", "new"))

    assert len(inline) == 2
    assert inline[0].type == DiffType.REMOVED
    assert inline[0].prefix == "-" and inline[0].content == "old"
    assert inline[0].line_number == LineNumber(left=1, right=None)
    assert inline[1].type == DiffType.ADDED
    assert inline[1].prefix == "+" and inline[1].content == "new"
    assert inline[1].line_number == LineNumber(left=None, right=1)


def test_unified_diff_text():
    text = generate_unified_diff("a\nb", "a\nc", "file1.txt", "file2.txt")

    assert text == "--- file1.txt\n+++ file2.txt\n@@ -1,2 +1,2 @@\n a\n-b\n+c"


def test_unified_diff_default_labels_and_empty_input():
    text = generate_unified_diff("", "")

    assert text == "--- Original\n+++ Modified\n@@ -1,0 +1,0 @@"


def test_unified_diff_has_single_header_block():
    text = diff_engine.unified_diff("x\ny\nz", "x\nY\nz\nw", options=DiffOptions(ignore_case=True))
    lines = text.split("\n")

    assert sum(1 for l in lines if l.startswith("--- ")) == 1
    assert sum(1 for l in lines if l.startswith("+++ ")) == 1
    assert sum(1 for l in lines if l.startswith("@@")) == 1
    assert lines[2] == "@@ -1,3 +1,4 @@"
    assert lines[3:] == [" x", " Y", " z", "+w"]


def test_render_unified_matches_generate():
    result = compute_diff("one\ntwo", "one\nthree")

    assert render_unified_diff(result, "L", "R") == generate_unified_diff("one\ntwo", "one\nthree", "L", "R")
