"""Show which instance types are offered in a zone or region."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from shapewright import Selector
from shapewright.location import classify_location

from shapewright_cli.project import setting
from shapewright_cli.utils import build_provider, handle_error

console = Console()


def offerings(
    ctx: typer.Context,
    location: Annotated[str, typer.Argument(help="Zone id (use1-az1), zone name (us-east-1a) or region (us-east-1)")],
    region: Annotated[str | None, typer.Option("--region", "-r", help="Region for the EC2 API client")] = None,
    profile: Annotated[str | None, typer.Option(help="AWS credentials profile")] = None,
    catalog_file: Annotated[
        str | None, typer.Option(help="Read offerings from a YAML/JSON snapshot instead of EC2")
    ] = None,
) -> None:
    """List the instance types offered in a location."""
    try:
        obj = ctx.obj or {}
        config = obj.get("config", {})
        location_type = classify_location(location)
        provider = build_provider(
            setting(config, "catalog_file", catalog_file),
            setting(config, "region", region),
            setting(config, "profile", profile),
        )

        with console.status(f"Fetching offerings for {location}..."):
            index = Selector(provider).retrieve_instance_types_supported_in_location(location) or {}

        if obj.get("json"):
            print(json.dumps({"location": location, "location_type": location_type, "offerings": index}))
            return

        if not index:
            console.print(f"[yellow]No instance types offered in {location}.[/yellow]")
            return

        table = Table(title=f"Offerings: {location} ({location_type})")
        table.add_column("Instance Type", style="cyan")
        table.add_column("Location")
        for name in sorted(index):
            table.add_row(name, index[name])

        console.print(table)
        console.print(f"[green]{len(index)}[/green] instance types")

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(ctx, e)
