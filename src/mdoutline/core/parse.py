"""Single-pass outline parser: line classification and indent-level resolution"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from mdoutline.core.document import Block, Document
from mdoutline.core.lines import DEFAULT_FENCE_MARKER, DEFAULT_TAB_WIDTH, FormattedLine, LineType, RawLine
from mdoutline.core.utils.logger import get_logger


logger = get_logger(__name__)


class ParseInvariantError(RuntimeError):
    """A line reached an indent resolver that does not handle its kind."""


@dataclass
class ParserState:
    """Everything carried from one line to the next.

    fence_base_indent is None outside a fenced range; inside one it holds the
    raw indent of the opening marker.
    """
    document: Document = field(default_factory=Document)
    fence_base_indent: Optional[int] = None

    @property
    def inside_fence(self) -> bool:
        return self.fence_base_indent is not None


def determine_new_header_indent(document: Document, raw_line: RawLine) -> int:
    """Resolve a header as sibling, child, or re-opened ancestor of the previous header."""
    if not raw_line.is_header:
        raise ParseInvariantError(f"Header indent requested for non-header line: {raw_line.trimmed!r}")

    previous_block = document.last_block()
    if not previous_block.has_header():
        return 0

    previous = previous_block.raw_header_indent()
    current = raw_line.header_indent

    if current == previous:
        return previous_block.contents_indent_level() - 1
    if current > previous:
        return previous_block.contents_indent_level()

    # Shallower than the previous header (fewer columns, or fewer '#' at the
    # same column): realign with the latest header that used the same raw
    # indent, else treat as top level.
    ancestor = document.find_latest_block_with_raw_indent(current)
    return ancestor.contents_indent_level() - 1 if ancestor is not None else 0


def determine_new_list_item_indent(block: Block, raw_line: RawLine) -> int:
    """Resolve a bullet/todo level; nesting grows by at most one level per line."""
    if not raw_line.is_list_item:
        raise ParseInvariantError(f"List indent requested for non-list line: {raw_line.trimmed!r}")

    previous_item = (
        block.find_previous_of(LineType.list_bullet_point)
        or block.find_previous_of(LineType.list_todo_item)
    )

    if previous_item is not None:
        previous = previous_item.original_raw.num_indent
        if raw_line.num_indent == previous:
            return previous_item.indent_level
        if raw_line.num_indent > previous:
            return previous_item.indent_level + 1
        # Shifted left: close nested levels, or start a new list after prose.
        match = block.find_latest_line_with_raw_indent(raw_line.num_indent)
        return match.indent_level if match is not None else block.contents_indent_level()

    previous_text = block.find_previous_of(LineType.text)
    if previous_text is not None:
        return previous_text.indent_level
    return block.contents_indent_level()


def parse_text_line(block: Block, raw_line: RawLine) -> FormattedLine:
    """Resolve a plain line: list continuation when wrapped under an item, else block text."""
    previous_line = block.last_line()
    if previous_line is not None and previous_line.is_list_item and not raw_line.is_empty:
        return FormattedLine.continuation(raw_line, previous_line.indent_level)
    return FormattedLine.from_raw(raw_line, block.contents_indent_level())


def _toggle_fence(state: ParserState, raw_line: RawLine) -> None:
    if state.inside_fence:
        logger.debug("Closing fence opened at indent %d", state.fence_base_indent)
        state.fence_base_indent = None
    else:
        logger.debug("Opening fence at indent %d", raw_line.num_indent)
        state.fence_base_indent = raw_line.num_indent


def parse_line(state: ParserState, raw_line: RawLine) -> ParserState:
    """Resolve one raw line against state and append it to the document."""
    document = state.document

    if raw_line.contains_marker:
        _toggle_fence(state, raw_line)
        block = document.last_block()
        block.add_line(parse_text_line(block, raw_line))
    elif state.inside_fence:
        block = document.last_block()
        block.add_line(FormattedLine.preformatted(raw_line, block.contents_indent_level(), state.fence_base_indent))
    elif raw_line.is_header:
        header = FormattedLine.from_raw(raw_line, determine_new_header_indent(document, raw_line))
        logger.debug("Block %d starts at level %d: %s", len(document), header.indent_level, header.contents)
        document.add_block(Block(header=header))
    elif raw_line.is_list_item:
        block = document.last_block()
        block.add_line(FormattedLine.from_raw(raw_line, determine_new_list_item_indent(block, raw_line)))
    else:
        block = document.last_block()
        block.add_line(parse_text_line(block, raw_line))

    return state


def parse_document(
    lines: Iterable[str] | str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    fence_marker: str = DEFAULT_FENCE_MARKER,
    ) -> Document:
    """Parse outline text (a string or an ordered sequence of lines) into a Document."""
    if isinstance(lines, str):
        lines = lines.splitlines()

    state = ParserState()
    for line in lines:
        raw_line = RawLine.from_string(line, tab_width=tab_width, fence_marker=fence_marker)
        state = parse_line(state, raw_line)

    if state.inside_fence:
        logger.debug("Input ended inside a fence opened at indent %d", state.fence_base_indent)
    return state.document
