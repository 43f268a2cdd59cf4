import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from shapewright_cli import __version__
from shapewright_cli.commands.offerings_cmd import offerings
from shapewright_cli.commands.select_cmd import select
from shapewright_cli.project import load_config


def _version_callback(value: bool) -> None:
    if value:
        print(f"shapewright {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="shapewright",
    help="Select compute instance types by resource requirements",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version", callback=_version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["json"] = json_output
    ctx.obj["config"] = load_config()
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


app.command()(select)
app.command()(offerings)
