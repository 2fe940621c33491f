"""Change reporting between a source outline and its normalized rendering"""

import difflib


def _split_indent(line: str) -> tuple[str, str]:
    body = line.lstrip()
    return line[:len(line) - len(body)], body


def indent_changes(original: str, formatted: str) -> dict[str, int]:
    """Count reindented lines (same text, new leading whitespace) and rewritten lines.

    Normalization emits exactly one line per source line, so lines pair up by
    position; rewritten covers canonicalized markers and trimmed trailing space.
    """
    reindented = rewritten = 0
    for old, new in zip(original.splitlines(), formatted.splitlines()):
        if old == new:
            continue
        old_indent, old_body = _split_indent(old)
        new_indent, new_body = _split_indent(new)
        if old_body.rstrip() == new_body and old_indent != new_indent:
            reindented += 1
        else:
            rewritten += 1
    return {"reindented": reindented, "rewritten": rewritten}


def unified_diff(path: str, original: str, formatted: str, context: int = 3) -> str:
    """Return a git-style a/ b/ unified diff for path; '' when already normalized."""
    return "".join(difflib.unified_diff(
        original.splitlines(keepends=True),
        formatted.splitlines(keepends=True),
        fromfile=f"a/{path}",
        tofile=f"b/{path}",
        n=context,
    ))
