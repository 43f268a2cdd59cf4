"""Turn selected instance types into display strings.

A formatter is any callable taking the ordered list of instance type records
and returning one string per output line.
"""

from __future__ import annotations

import json
from collections.abc import Callable

from rich.console import Console
from rich.table import Table

from shapewright.model import InstanceTypeInfo
from shapewright.specs import UNKNOWN_BANDWIDTH, InstanceSpecs

InstanceTypesOutput = Callable[[list[InstanceTypeInfo]], list[str]]

_TABLE_WIDTH = 200


def simple_instance_type_output(instance_types: list[InstanceTypeInfo]) -> list[str]:
    """One instance type name per line."""
    return [info["InstanceType"] for info in instance_types]


def verbose_instance_type_output(instance_types: list[InstanceTypeInfo]) -> list[str]:
    """The full record of each instance type as indented JSON."""
    return [json.dumps(info, indent=2, sort_keys=True, default=str) for info in instance_types]


def _gib(mib: int | None) -> str:
    if mib is None:
        return "-"
    return f"{mib / 1024:g}"


def _flag(value: bool | None) -> str:
    if value is None:
        return "-"
    return "true" if value else "false"


def _render(table: Table) -> list[str]:
    console = Console(width=_TABLE_WIDTH, color_system=None, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return [line.rstrip() for line in capture.get().splitlines()]


def table_output_short(instance_types: list[InstanceTypeInfo]) -> list[str]:
    table = Table(box=None, header_style=None)
    table.add_column("Instance Type")
    table.add_column("VCPUs", justify="right")
    table.add_column("Mem (GiB)", justify="right")

    for info in instance_types:
        specs = InstanceSpecs.from_info(info)
        table.add_row(specs.instance_type, str(specs.vcpus or "-"), _gib(specs.memory_mib))
    return _render(table)


def table_output_wide(instance_types: list[InstanceTypeInfo]) -> list[str]:
    table = Table(box=None, header_style=None)
    for header in (
        "Instance Type",
        "VCPUs",
        "Mem (GiB)",
        "Hypervisor",
        "Current Gen",
        "Hibernation Support",
        "CPU Arch",
        "Network Performance",
        "ENIs",
        "GPUs",
        "GPU Mem (GiB)",
        "FPGA",
    ):
        table.add_column(header)

    for info in instance_types:
        specs = InstanceSpecs.from_info(info)
        bandwidth = (
            "-" if specs.network_bandwidth_gbps == UNKNOWN_BANDWIDTH else f"{specs.network_bandwidth_gbps} Gigabit"
        )
        table.add_row(
            specs.instance_type,
            str(specs.vcpus or "-"),
            _gib(specs.memory_mib),
            specs.hypervisor or "-",
            _flag(specs.current_generation),
            _flag(specs.hibernation_supported),
            ", ".join(sorted(specs.architectures)) or "-",
            bandwidth,
            str(specs.network_interfaces if specs.network_interfaces is not None else "-"),
            str(specs.gpus),
            _gib(specs.gpu_memory_mib),
            _flag(specs.fpga),
        )
    return _render(table)


OUTPUT_FORMATS: dict[str, InstanceTypesOutput] = {
    "simple": simple_instance_type_output,
    "verbose": verbose_instance_type_output,
    "table": table_output_short,
    "table-wide": table_output_wide,
}
