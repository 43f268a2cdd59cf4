"""Select instance types matching resource filters."""

from __future__ import annotations

import json
from typing import Annotated

import typer
from rich.console import Console
from shapewright import Filters, Selector
from shapewright.outputs import OUTPUT_FORMATS

from shapewright_cli.project import setting
from shapewright_cli.utils import build_provider, gib_to_mib, handle_error, int_range, parse_ratio

console = Console()

_DEFAULT_OUTPUT = "simple"


def select(
    ctx: typer.Context,
    vcpus: Annotated[int | None, typer.Option(help="Exact number of vCPUs")] = None,
    vcpus_min: Annotated[int | None, typer.Option(help="Minimum vCPUs")] = None,
    vcpus_max: Annotated[int | None, typer.Option(help="Maximum vCPUs")] = None,
    memory: Annotated[float | None, typer.Option(help="Exact memory in GiB")] = None,
    memory_min: Annotated[float | None, typer.Option(help="Minimum memory in GiB")] = None,
    memory_max: Annotated[float | None, typer.Option(help="Maximum memory in GiB")] = None,
    gpus: Annotated[int | None, typer.Option(help="Exact number of GPUs")] = None,
    gpus_min: Annotated[int | None, typer.Option(help="Minimum GPUs")] = None,
    gpus_max: Annotated[int | None, typer.Option(help="Maximum GPUs")] = None,
    gpu_memory_total: Annotated[float | None, typer.Option(help="Exact total GPU memory in GiB")] = None,
    gpu_memory_total_min: Annotated[float | None, typer.Option(help="Minimum total GPU memory in GiB")] = None,
    gpu_memory_total_max: Annotated[float | None, typer.Option(help="Maximum total GPU memory in GiB")] = None,
    network_interfaces: Annotated[int | None, typer.Option(help="Exact number of network interfaces")] = None,
    network_interfaces_min: Annotated[int | None, typer.Option(help="Minimum network interfaces")] = None,
    network_interfaces_max: Annotated[int | None, typer.Option(help="Maximum network interfaces")] = None,
    network_performance: Annotated[int | None, typer.Option(help="Exact bandwidth in Gigabit")] = None,
    network_performance_min: Annotated[int | None, typer.Option(help="Minimum bandwidth in Gigabit")] = None,
    network_performance_max: Annotated[int | None, typer.Option(help="Maximum bandwidth in Gigabit")] = None,
    vcpus_to_memory_ratio: Annotated[
        str | None, typer.Option(help="vCPU to memory (GiB) ratio, e.g. 1:4")
    ] = None,
    cpu_architecture: Annotated[str | None, typer.Option(help="x86_64, arm64, i386")] = None,
    usage_class: Annotated[str | None, typer.Option(help="on-demand or spot")] = None,
    root_device_type: Annotated[str | None, typer.Option(help="ebs or instance-store")] = None,
    placement_group_strategy: Annotated[str | None, typer.Option(help="cluster, partition or spread")] = None,
    hypervisor: Annotated[str | None, typer.Option(help="xen or nitro")] = None,
    hibernation_support: Annotated[
        bool | None, typer.Option("--hibernation-support/--no-hibernation-support", help="Hibernation supported")
    ] = None,
    baremetal: Annotated[bool | None, typer.Option("--baremetal/--no-baremetal", help="Bare metal")] = None,
    burst_support: Annotated[
        bool | None, typer.Option("--burst-support/--no-burst-support", help="Burstable performance (T family)")
    ] = None,
    fpga_support: Annotated[bool | None, typer.Option("--fpga-support/--no-fpga-support", help="FPGA present")] = None,
    ena_support: Annotated[bool | None, typer.Option("--ena-support/--no-ena-support", help="ENA supported")] = None,
    current_generation: Annotated[
        bool | None, typer.Option("--current-generation/--previous-generation", help="Current generation only")
    ] = None,
    availability_zone: Annotated[
        str | None, typer.Option("--availability-zone", "-z", help="Zone id (use1-az1) or zone name (us-east-1a)")
    ] = None,
    region: Annotated[str | None, typer.Option("--region", "-r", help="Region to query and restrict to")] = None,
    profile: Annotated[str | None, typer.Option(help="AWS credentials profile")] = None,
    max_results: Annotated[int | None, typer.Option(help="Maximum number of results", min=0)] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="simple, verbose, table or table-wide")
    ] = None,
    catalog_file: Annotated[
        str | None, typer.Option(help="Read instance types from a YAML/JSON snapshot instead of EC2")
    ] = None,
) -> None:
    """Select instance types that satisfy every given filter."""
    try:
        obj = ctx.obj or {}
        config = obj.get("config", {})
        region = setting(config, "region", region)
        output = setting(config, "output", output) or _DEFAULT_OUTPUT
        if output not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output {output!r}. Choose from: {', '.join(OUTPUT_FORMATS)}")

        filters = Filters(
            cpu_architecture=cpu_architecture,
            usage_class=usage_class,
            root_device_type=root_device_type,
            hibernation_supported=hibernation_support,
            vcpus_range=int_range("vcpus", vcpus, vcpus_min, vcpus_max),
            memory_range=int_range("memory", gib_to_mib(memory), gib_to_mib(memory_min), gib_to_mib(memory_max)),
            gpu_memory_range=int_range(
                "gpu-memory-total",
                gib_to_mib(gpu_memory_total),
                gib_to_mib(gpu_memory_total_min),
                gib_to_mib(gpu_memory_total_max),
            ),
            gpus_range=int_range("gpus", gpus, gpus_min, gpus_max),
            placement_group_strategy=placement_group_strategy,
            hypervisor=hypervisor,
            bare_metal=baremetal,
            burstable=burst_support,
            fpga=fpga_support,
            ena_support=ena_support,
            vcpus_to_memory_ratio=parse_ratio(vcpus_to_memory_ratio),
            current_generation=current_generation,
            network_interfaces=int_range(
                "network-interfaces", network_interfaces, network_interfaces_min, network_interfaces_max
            ),
            network_performance=int_range(
                "network-performance", network_performance, network_performance_min, network_performance_max
            ),
            availability_zone=availability_zone,
            region=region,
            max_results=setting(config, "max_results", max_results),
        )

        provider = build_provider(
            setting(config, "catalog_file", catalog_file),
            region,
            setting(config, "profile", profile),
        )
        selector = Selector(provider)

        with console.status("Selecting instance types..."):
            if obj.get("json"):
                records = selector.filter_verbose(filters)
            else:
                lines = selector.filter_with_output(filters, OUTPUT_FORMATS[output])

        if obj.get("json"):
            if output == "verbose":
                print(json.dumps({"instance_types": records}, default=str))
            else:
                print(json.dumps({"instance_types": [r["InstanceType"] for r in records]}))
            return

        if not lines:
            console.print("[yellow]No instance types matched the filters.[/yellow]")
            return

        for line in lines:
            print(line)

    except typer.Exit:
        raise
    except Exception as e:
        handle_error(ctx, e)
