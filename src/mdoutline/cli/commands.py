"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from mdoutline.config import Settings, load_config
from mdoutline.core.pipeline import run_format, run_inspect
from mdoutline.core.utils.diff import indent_changes, unified_diff
from mdoutline.core.utils.logger import configure_logging


PathsArg = Annotated[list[str], typer.Argument(help="Files or directories to process; '-' reads stdin")]
StyleOpt = Annotated[Optional[str], typer.Option("--indent-style", help="tab or space")]
SizeOpt = Annotated[Optional[int], typer.Option("--indent-size", help="Spaces per level for space indentation")]
TabOpt = Annotated[Optional[int], typer.Option("--tab-width", help="Columns a tab counts for in source files")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log parser decisions to stderr")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def format_cmd(
    paths: PathsArg,
    in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Rewrite files instead of printing")] = False,
    diff: Annotated[bool, typer.Option("--diff", help="Print a unified diff instead of the formatted text")] = False,
    style: StyleOpt = None,
    size: SizeOpt = None,
    tab_width: TabOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Normalize outline indentation and print (or rewrite) the result."""
    configure_logging(verbose)
    settings = _settings(overrides={"indent_style": style, "indent_size": size, "tab_width": tab_width})

    try:
        results = run_format(paths, settings, write=in_place)
    except RuntimeError as e:
        _fail(str(e))

    for result in results:
        if diff:
            typer.echo(unified_diff(result.path, result.original, result.formatted), nl=False)
        elif in_place:
            if result.changed:
                typer.echo(f"  reformatted: {result.path}")
        else:
            typer.echo(result.formatted, nl=False)

    if in_place:
        changed = sum(r.changed for r in results)
        typer.echo(f"Formatted {len(results)} file(s), {changed} changed")


def check_cmd(
    paths: PathsArg,
    style: StyleOpt = None,
    size: SizeOpt = None,
    tab_width: TabOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Report files whose indentation is not normalized; exit 1 if any."""
    configure_logging(verbose)
    settings = _settings(overrides={"indent_style": style, "indent_size": size, "tab_width": tab_width})

    try:
        results = run_format(paths, settings)
    except RuntimeError as e:
        _fail(str(e))

    changed = [r for r in results if r.changed]
    for result in changed:
        stats = indent_changes(result.original, result.formatted)
        typer.echo(
            f"  would reformat: {result.path} "
            f"({stats['reindented']} reindented, {stats['rewritten']} rewritten)"
        )
    typer.echo(f"Checked {len(results)} file(s), {len(changed)} would change")
    if changed:
        raise typer.Exit(1)


def inspect_cmd(
    path: Annotated[str, typer.Argument(help="File to parse; '-' reads stdin")],
    tab_width: TabOpt = None,
    verbose: VerboseOpt = False,
    ):
    """Print the parsed block/line structure as JSON."""
    configure_logging(verbose)
    settings = _settings(overrides={"tab_width": tab_width})
    try:
        outline = run_inspect(path, settings)
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(outline.model_dump_json(indent=2))
