from __future__ import annotations

import json

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from shapewright import FloatRange, IntRange, InvalidLocationFormat, UnsupportedFilterType, UpstreamFetchError
from shapewright.providers import InstanceTypeProvider

_err_console = Console(stderr=True)


def handle_error(ctx: typer.Context, e: Exception) -> None:
    """Print a clean error message and exit 1."""
    import yaml

    obj = ctx.obj or (ctx.parent.obj if ctx.parent else None) or {}
    verbose = obj.get("verbose", False)
    json_mode = obj.get("json", False)

    if isinstance(e, FileNotFoundError):
        msg = f"File not found: {e}"
    elif isinstance(e, yaml.YAMLError):
        msg = f"Invalid YAML: {e}"
    elif isinstance(e, ValidationError):
        msg = f"Invalid filters: {e}"
    elif isinstance(e, InvalidLocationFormat):
        msg = str(e)
    elif isinstance(e, UpstreamFetchError):
        msg = f"AWS request failed: {e}"
    elif isinstance(e, UnsupportedFilterType):
        msg = f"Internal filter error: {e}"
    elif isinstance(e, ValueError):
        msg = str(e)
    else:
        msg = f"Error: {e}"

    if json_mode:
        print(json.dumps({"error": msg}))
    else:
        _err_console.print(f"[red]Error:[/red] {escape(msg)}")

    if verbose:
        _err_console.print_exception()

    raise typer.Exit(1)


def int_range(name: str, exact: int | None, lower: int | None, upper: int | None) -> IntRange | None:
    """Build a range from --NAME or --NAME-min/--NAME-max."""
    if exact is not None:
        if lower is not None or upper is not None:
            raise ValueError(f"Use --{name} or --{name}-min/--{name}-max, not both")
        return IntRange.exact(exact)
    if lower is None and upper is None:
        return None
    return IntRange(min=lower, max=upper)


def gib_to_mib(value: float | None) -> int | None:
    if value is None:
        return None
    return int(value * 1024)


def parse_ratio(ratio: str | None) -> FloatRange | None:
    """Parse "vcpus:memory" like "1:4" into the vCPU-per-GiB ratio (0.25)."""
    if not ratio:
        return None
    parts = ratio.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid ratio {ratio!r}: expected vcpus:memory, e.g. 1:4")
    try:
        vcpus, memory = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Invalid ratio {ratio!r}: both sides must be numbers") from None
    if vcpus <= 0 or memory <= 0:
        raise ValueError(f"Invalid ratio {ratio!r}: both sides must be positive")
    return FloatRange.exact(round(vcpus / memory, 4))


def build_provider(catalog_file: str | None, region: str | None, profile: str | None) -> InstanceTypeProvider:
    """Offline snapshot when a catalog file is given, live EC2 otherwise."""
    if catalog_file:
        from shapewright.providers.static import StaticProvider

        return StaticProvider.from_file(catalog_file)

    from shapewright.providers.ec2 import EC2Provider

    return EC2Provider(region=region, profile=profile)
