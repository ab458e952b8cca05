import io

import pytest
from loguru import logger as loguru_logger
from rich.console import Console

from data.char_diff import highlight_char_diff
from data.diff_engine import compute_diff
from presentation.logger import Logger
from presentation.ui_diff_view import UIDiffView, UIDiffViewError, build_char_text


def make_view():
    console = Console(record=True, width=120, file=io.StringIO())
    return UIDiffView(console), console


def test_side_by_side_shows_both_versions_of_modified_line():
    view, console = make_view()
    view.display_diff(compute_diff("keep\nold line", "keep\nnew line"), left_label="L", right_label="R")

    output = console.export_text()
    assert "old line" in output
    assert "new line" in output
    assert "keep" in output


def test_inline_view_prefixes_lines():
    view, console = make_view()
    view.display_diff(compute_diff("a\nb", "a\nc"), view="inline")

    output = console.export_text()
    assert "-b" in output
    assert "+c" in output


def test_unified_view_prints_header():
    view, console = make_view()
    view.display_diff(compute_diff("a", "b"), view="unified", left_label="x.txt", right_label="y.txt")

    output = console.export_text()
    assert "--- x.txt" in output
    assert "@@ -1,1 +1,1 @@" in output


def test_no_changes_message():
    view, console = make_view()
    view.display_diff(compute_diff("same", "same"), view="inline")

    assert "No changes detected" in console.export_text()


def test_max_lines_truncates_display():
    view, console = make_view()
    text = "\n".join(str(i) for i in range(10))
    view.display_diff(compute_diff(text, text + "\nextra"), view="inline", max_lines=3)

    assert "et 8 autres lignes" in console.export_text()


def test_unknown_view_raises():
    view, _ = make_view()

    with pytest.raises(UIDiffViewError):
        view.display_diff(compute_diff("a", "b"), view="columns")


def test_build_char_text_styles_highlighted_segments():
    segments = highlight_char_diff("hello", "hallo").new_segments
    text = build_char_text(segments, "bold red")

    assert text.plain == "hallo"
    styled = [text.plain[span.start:span.end] for span in text.spans if span.style == "bold red"]
    assert styled == ["a"]


def test_logger_writes_markdown_session_file(tmp_path):
    app_logger = Logger(
        "session_test",
        level="ERROR",
        to_file=True,
        logs_dir=tmp_path,
        console=Console(file=io.StringIO()),
    )
    app_logger.log_diff(compute_diff("a", "b"), "left.txt", "right.txt")
    loguru_logger.remove()

    content = (tmp_path / "session_test.md").read_text(encoding="utf-8")
    assert "```diff" in content
    assert "--- left.txt" in content
    assert "+b" in content
    assert app_logger.get_log_file_path().endswith("session_test.md")


def test_panel_titles_are_plain_text():
    view, console = make_view()
    view.display_diff(compute_diff("a\nb", "a\nc"), left_label="L", right_label="R")

    output = console.export_text()
    assert "Diff" in output
    assert "Summary of Changes" in output
    assert "[DIFF]" not in output
    assert "[SUMMARY]" not in output
