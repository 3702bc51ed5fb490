"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblocks.cli.commands import inspect_cmd, render_cmd


app = typer.Typer(name="mdblocks", no_args_is_help=True, help="Render restricted markdown into structured blocks")

app.command(name="render")(render_cmd)
app.command(name="inspect")(inspect_cmd)
