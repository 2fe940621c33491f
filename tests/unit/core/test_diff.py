"""Unit tests for core/utils/diff.py"""

from mdoutline.core.utils.diff import indent_changes, unified_diff


def test_unified_diff_identical_is_empty():
    assert unified_diff("x.md", "# A\n\t- b\n", "# A\n\t- b\n") == ""


def test_unified_diff_labels_and_changes():
    out = unified_diff("x.md", "- a\n  - b\n", "- a\n\t- b\n")
    assert out.startswith("--- a/x.md\n+++ b/x.md\n")
    assert "-  - b\n" in out
    assert "+\t- b\n" in out


def test_indent_changes_counts_reindented_lines():
    stats = indent_changes("# A\n  - x\n      - y\n", "# A\n\t- x\n\t\t- y\n")
    assert stats == {"reindented": 2, "rewritten": 0}


def test_indent_changes_counts_rewritten_markers():
    """Canonicalized bullets and trimmed trailing space are rewrites, not reindents."""
    stats = indent_changes("* a\n    wrap  \ntext  \n", "- a\n  wrap\ntext\n")
    assert stats == {"reindented": 1, "rewritten": 2}


def test_indent_changes_unchanged():
    assert indent_changes("# A\n", "# A\n") == {"reindented": 0, "rewritten": 0}
