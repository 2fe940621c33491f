"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdoutline.cli.commands import check_cmd, format_cmd, inspect_cmd


app = typer.Typer(name="mdoutline", no_args_is_help=True, help="Outline indentation normalizer")

app.command(name="format")(format_cmd)
app.command(name="check")(check_cmd)
app.command(name="inspect")(inspect_cmd)
