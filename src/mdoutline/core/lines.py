"""Line classification: raw source lines, line types, and resolved output lines"""

import re
from dataclasses import dataclass
from enum import Enum


HEADER_RE = re.compile(r'^(#+)(?:\s|$)')
TODO_RE = re.compile(r'^[-*+]\s+\[([ xX])\](?:\s+|$)')
BULLET_RE = re.compile(r'^[-*+](?:\s+|$)')

DEFAULT_TAB_WIDTH = 4
DEFAULT_FENCE_MARKER = '```'


class LineType(str, Enum):
    """Classification of a resolved line; non-text variants carry a render prefix."""
    header = "header"
    list_bullet_point = "list_bullet_point"
    list_todo_item = "list_todo_item"
    text = "text"
    list_continuous_line = "list_continuous_line"
    preformatted = "preformatted"

    @property
    def prefix(self) -> str:
        return LINE_PREFIXES[self]

    @property
    def is_list_item(self) -> bool:
        return self in (LineType.list_bullet_point, LineType.list_todo_item)


LINE_PREFIXES: dict[LineType, str] = {
    LineType.header:               '#',
    LineType.list_bullet_point:    '- ',
    LineType.list_todo_item:       '- [ ] ',
    LineType.text:                 '',
    LineType.list_continuous_line: '  ',
    LineType.preformatted:         '',
}


def _leading_columns(line: str, tab_width: int) -> int:
    """Count leading whitespace columns, expanding tabs to the next tab stop."""
    columns = 0
    for ch in line:
        if ch == '\t':
            columns += tab_width - (columns % tab_width)
        elif ch.isspace():
            columns += 1
        else:
            break
    return columns


@dataclass(frozen=True)
class RawLine:
    """Immutable snapshot of one source line."""
    num_indent: int
    trimmed: str
    fence_marker: str = DEFAULT_FENCE_MARKER

    @classmethod
    def from_string(
        cls,
        line: str,
        tab_width: int = DEFAULT_TAB_WIDTH,
        fence_marker: str = DEFAULT_FENCE_MARKER,
        ) -> "RawLine":
        """Decompose line into leading indent columns and trimmed text."""
        return cls(num_indent=_leading_columns(line, tab_width), trimmed=line.strip(), fence_marker=fence_marker)

    @property
    def is_header(self) -> bool:
        return HEADER_RE.match(self.trimmed) is not None

    @property
    def header_indent(self) -> tuple[int, int]:
        """Raw indent of a header as (leading columns, number of '#').

        Compared lexicographically: whitespace decides first, '#' count breaks
        ties, so '## B' under '# A' at the same column reads as deeper.
        """
        m = HEADER_RE.match(self.trimmed)
        return self.num_indent, len(m.group(1)) if m else 0

    @property
    def is_todo_item(self) -> bool:
        return TODO_RE.match(self.trimmed) is not None

    @property
    def is_bullet_point(self) -> bool:
        return not self.is_todo_item and BULLET_RE.match(self.trimmed) is not None

    @property
    def is_list_item(self) -> bool:
        return BULLET_RE.match(self.trimmed) is not None

    @property
    def contains_marker(self) -> bool:
        return bool(self.fence_marker) and self.trimmed.startswith(self.fence_marker)

    @property
    def is_empty(self) -> bool:
        return not self.trimmed


def _render_raw(raw: RawLine) -> tuple[LineType, str]:
    """Classify raw and return (line_type, contents) with list markers canonicalized."""
    if raw.is_header:
        return LineType.header, raw.trimmed

    m = TODO_RE.match(raw.trimmed)
    if m:
        checked = m.group(1) != ' '
        prefix = '- [x] ' if checked else LineType.list_todo_item.prefix
        return LineType.list_todo_item, (prefix + raw.trimmed[m.end():]).rstrip()

    m = BULLET_RE.match(raw.trimmed)
    if m:
        return LineType.list_bullet_point, (LineType.list_bullet_point.prefix + raw.trimmed[m.end():]).rstrip()

    return LineType.text, raw.trimmed


@dataclass(frozen=True)
class FormattedLine:
    """A raw line with its resolved nesting depth, classification, and rendered contents."""
    indent_level: int
    line_type: LineType
    contents: str
    original_raw: RawLine

    def __post_init__(self):
        if self.indent_level < 0:
            raise ValueError(f"indent_level must be >= 0, got {self.indent_level}")

    @classmethod
    def from_raw(cls, raw: RawLine, indent_level: int) -> "FormattedLine":
        line_type, contents = _render_raw(raw)
        return cls(indent_level=indent_level, line_type=line_type, contents=contents, original_raw=raw)

    @classmethod
    def continuation(cls, raw: RawLine, indent_level: int) -> "FormattedLine":
        """Wrapped text belonging to the list item above it."""
        return cls(
            indent_level=indent_level,
            line_type=LineType.list_continuous_line,
            contents=LineType.list_continuous_line.prefix + raw.trimmed,
            original_raw=raw,
        )

    @classmethod
    def preformatted(cls, raw: RawLine, indent_level: int, base_indent: int) -> "FormattedLine":
        """Fenced line keeping its indentation relative to the opening marker."""
        relative = '' if raw.is_empty else ' ' * max(0, raw.num_indent - base_indent)
        return cls(
            indent_level=indent_level,
            line_type=LineType.preformatted,
            contents=f"{LineType.preformatted.prefix}{relative}{raw.trimmed}",
            original_raw=raw,
        )

    @property
    def is_list_item(self) -> bool:
        return self.line_type.is_list_item
