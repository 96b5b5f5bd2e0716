"""CLI entrypoint: Typer app definition and command registration"""

import typer

from nodig.cli.commands import backlinks_cmd, build_cmd, nav_cmd


app = typer.Typer(name="nodig", no_args_is_help=True, help="Obsidian vault to static-site page model")

app.command(name="build")(build_cmd)
app.command(name="nav")(nav_cmd)
app.command(name="backlinks")(backlinks_cmd)
