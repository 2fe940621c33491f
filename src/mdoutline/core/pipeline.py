"""Pipeline step functions: discovery, formatting, and inspection of outline files"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from mdoutline.config import Settings
from mdoutline.core.models import OutlineDoc, document_to_model
from mdoutline.core.parse import parse_document
from mdoutline.core.render import indent_unit, render_document
from mdoutline.core.utils.logger import get_logger


STDIN = "-"

logger = get_logger(__name__)


@dataclass
class FormatResult:
    """Outcome of formatting one source (a file path or '-' for stdin)."""
    path:      str
    original:  str
    formatted: str

    @property
    def changed(self) -> bool:
        return self.original != self.formatted


def discover_files(path: Path, extensions: Iterable[str] = (".md", ".txt")) -> list[Path]:
    """Return sorted files with a matching suffix under path, or [path] if a single file."""
    suffixes = {e.lower() for e in extensions}
    if path.is_file():
        return [path]
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in suffixes)


def format_text(text: str, settings: Optional[Settings] = None) -> str:
    """Normalize the indentation of outline text."""
    settings = settings or Settings()
    document = parse_document(text, tab_width=settings.tab_width, fence_marker=settings.fence_marker)
    return render_document(document, indent_unit(settings.indent_style, settings.indent_size))


def _read_source(source: str) -> str:
    if source == STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8')


def run_format(
    paths: Iterable[str],
    settings: Settings,
    write: bool = False,
    ) -> list[FormatResult]:
    """Format each path (files, directories, or '-'). Writes changed files back when write is set."""
    sources: list[str] = []
    for p in paths:
        if p == STDIN:
            if write:
                raise RuntimeError("Cannot rewrite stdin in place; drop --in-place to print the result")
            sources.append(p)
            continue
        if not Path(p).exists():
            raise RuntimeError(f"Path does not exist: {p}")
        sources.extend(str(f) for f in discover_files(Path(p), settings.extensions))

    results = []
    for source in sources:
        try:
            original = _read_source(source)
            result = FormatResult(path=source, original=original, formatted=format_text(original, settings))
            if write and result.changed:
                Path(source).write_text(result.formatted, encoding='utf-8')
                logger.info("Reformatted %s", source)
        except (OSError, UnicodeDecodeError) as e:
            raise RuntimeError(f"Failed to format {source}: {e}") from e
        results.append(result)
    return results


def run_inspect(path: str, settings: Settings) -> OutlineDoc:
    """Parse a single source and return its structure view."""
    try:
        text = _read_source(path)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e
    document = parse_document(text, tab_width=settings.tab_width, fence_marker=settings.fence_marker)
    return document_to_model(document, path=None if path == STDIN else path)
