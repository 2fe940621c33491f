"""Document containers: header-rooted blocks and the ordered block sequence"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from mdoutline.core.lines import FormattedLine, LineType


@dataclass
class Block:
    """One optional header line plus the body lines subordinate to it.

    Only the implicit leading block of a document has no header. Body lines
    are append-only; the find_* helpers scan them backwards.
    """
    header: Optional[FormattedLine] = None
    body: list[FormattedLine] = field(default_factory=list)

    def has_header(self) -> bool:
        return self.header is not None

    def contents_indent_level(self) -> int:
        """Indent level of body text: one below the header, or 0 without one."""
        return self.header.indent_level + 1 if self.header is not None else 0

    def raw_header_indent(self) -> tuple[int, int]:
        if self.header is None:
            raise ValueError("Headerless block has no raw header indent")
        return self.header.original_raw.header_indent

    def add_line(self, line: FormattedLine) -> None:
        self.body.append(line)

    def last_line(self) -> Optional[FormattedLine]:
        return self.body[-1] if self.body else None

    def find_previous_of(self, line_type: LineType) -> Optional[FormattedLine]:
        """Most recent body line of exactly line_type, else None."""
        for line in reversed(self.body):
            if line.line_type == line_type:
                return line
        return None

    def find_latest_line_with_raw_indent(self, num_indent: int) -> Optional[FormattedLine]:
        """Most recent body line whose source indent was num_indent, else None."""
        for line in reversed(self.body):
            if line.original_raw.num_indent == num_indent:
                return line
        return None

    def lines(self) -> Iterator[FormattedLine]:
        """Header (when present) followed by the body, in input order."""
        if self.header is not None:
            yield self.header
        yield from self.body


@dataclass
class Document:
    """Ordered blocks, starting with the implicit headerless block."""
    blocks: list[Block] = field(default_factory=lambda: [Block()])

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)

    def last_block(self) -> Block:
        """The block currently being filled."""
        return self.blocks[-1]

    def find_latest_block_with_raw_indent(self, header_indent: tuple[int, int]) -> Optional[Block]:
        """Most recent headed block whose header had this (columns, '#' count), else None."""
        for block in reversed(self.blocks):
            if block.has_header() and block.raw_header_indent() == header_indent:
                return block
        return None

    def lines(self) -> Iterator[FormattedLine]:
        for block in self.blocks:
            yield from block.lines()
