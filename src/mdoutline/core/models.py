"""Serializable view of a parsed outline, used by the inspect command"""

from typing import Optional

from pydantic import BaseModel

from mdoutline.core.document import Document
from mdoutline.core.lines import FormattedLine, LineType


class OutlineLine(BaseModel):
    """One resolved line."""
    indent_level: int
    line_type: LineType
    contents: str
    raw_indent: int                 # leading whitespace columns in the source


class OutlineBlock(BaseModel):
    header: Optional[OutlineLine] = None    # None only for the leading headerless block
    lines: list[OutlineLine] = []


class OutlineDoc(BaseModel):
    """Public JSON contract for a parsed document."""
    path: Optional[str] = None
    blocks: list[OutlineBlock]


def _line_model(line: FormattedLine) -> OutlineLine:
    return OutlineLine(
        indent_level=line.indent_level,
        line_type=line.line_type,
        contents=line.contents,
        raw_indent=line.original_raw.num_indent,
    )


def document_to_model(document: Document, path: Optional[str] = None) -> OutlineDoc:
    """Convert a Document into its pydantic view."""
    return OutlineDoc(
        path=path,
        blocks=[
            OutlineBlock(
                header=_line_model(block.header) if block.header is not None else None,
                lines=[_line_model(line) for line in block.body],
            )
            for block in document
        ],
    )
