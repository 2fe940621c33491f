"""Serialize a parsed Document back to normalized outline text"""

from mdoutline.core.document import Document
from mdoutline.core.lines import FormattedLine


INDENT_STYLES = ('tab', 'space')


def indent_unit(style: str = 'tab', size: int = 4) -> str:
    """Return the string emitted once per indent level."""
    if style == 'tab':
        return '\t'
    if style == 'space':
        return ' ' * size
    raise ValueError(f"Unknown indent style {style!r}; expected one of {', '.join(INDENT_STYLES)}")


def render_line(line: FormattedLine, indent: str = '\t') -> str:
    """Render one line; empty lines carry no indentation."""
    if not line.contents:
        return ''
    return indent * line.indent_level + line.contents


def render_document(document: Document, indent: str = '\t') -> str:
    """Render every line of document, newline-terminated; '' for an empty document."""
    rendered = [render_line(line, indent) for line in document.lines()]
    return '\n'.join(rendered) + '\n' if rendered else ''
