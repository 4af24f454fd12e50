"""CLI entrypoint: Typer app definition and command registration"""

import typer

from hunkdiff.cli.commands import config_cmd, diff_cmd


app = typer.Typer(name="hunkdiff", no_args_is_help=True, help="Unified diffs with configurable context")

app.command(name="diff")(diff_cmd)
app.command(name="config")(config_cmd)
