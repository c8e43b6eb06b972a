"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpress.cli.commands import build_cmd, check_cmd


app = typer.Typer(name="mdpress", no_args_is_help=True, help="Markdown blog post publishing pipeline")

app.command(name="build")(build_cmd)
app.command(name="check")(check_cmd)
