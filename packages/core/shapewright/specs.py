"""Per-instance attribute extraction.

``InstanceSpecs.from_info`` flattens one DescribeInstanceTypes record into the
values the filters compare against, computing derived attributes (GPU totals,
FPGA presence, ENA, vCPU/memory ratio, bandwidth) once per record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from shapewright.model import InstanceTypeInfo

_BANDWIDTH_RE = re.compile(r"(\d+) Gigabit")
_RATIO_PRECISION = 4
# NetworkPerformance values like "Low" or "Moderate" carry no number
UNKNOWN_BANDWIDTH = -1


def _dig(info: dict[str, Any], *keys: str) -> Any:
    node: Any = info
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def total_gpu_memory(gpu_info: dict[str, Any] | None) -> int:
    """Total GPU memory in MiB across every GPU; 0 when no GPU info is reported."""
    if not gpu_info:
        return 0
    reported = gpu_info.get("TotalGpuMemoryInMiB")
    if reported is not None:
        return int(reported)
    total = 0
    for gpu in gpu_info.get("Gpus") or []:
        total += int(gpu.get("Count", 0)) * int(_dig(gpu, "MemoryInfo", "SizeInMiB") or 0)
    return total


def total_gpu_count(gpu_info: dict[str, Any] | None) -> int:
    if not gpu_info:
        return 0
    return sum(int(gpu.get("Count", 0)) for gpu in gpu_info.get("Gpus") or [])


def support_syntax_to_bool(support: str | None) -> bool | None:
    """Map "unsupported" | "supported" | "required" to a bool."""
    if support is None:
        return None
    return support != "unsupported"


def vcpus_to_memory_ratio(vcpus: int | None, memory_mib: int | None) -> float | None:
    """vCPUs per GiB of memory, e.g. 2 vCPUs / 8 GiB -> 0.25."""
    if not vcpus or not memory_mib:
        return None
    return round(vcpus / (memory_mib / 1024), _RATIO_PRECISION)


def network_bandwidth(performance: str | None) -> int:
    """Parse "Up to 10 Gigabit" -> 10. Unparseable descriptions map to -1."""
    if not performance:
        return UNKNOWN_BANDWIDTH
    m = _BANDWIDTH_RE.search(performance)
    if not m:
        return UNKNOWN_BANDWIDTH
    return int(m.group(1))


@dataclass(frozen=True, slots=True)
class InstanceSpecs:
    instance_type: str
    architectures: frozenset[str] = field(default_factory=frozenset)
    usage_classes: frozenset[str] = field(default_factory=frozenset)
    root_device_types: frozenset[str] = field(default_factory=frozenset)
    hibernation_supported: bool | None = None
    vcpus: int | None = None
    memory_mib: int | None = None
    gpu_memory_mib: int = 0
    gpus: int = 0
    placement_group_strategies: frozenset[str] = field(default_factory=frozenset)
    hypervisor: str | None = None
    bare_metal: bool | None = None
    burstable: bool | None = None
    fpga: bool = False
    ena_support: bool | None = None
    vcpus_to_memory_ratio: float | None = None
    current_generation: bool | None = None
    network_interfaces: int | None = None
    network_bandwidth_gbps: int = UNKNOWN_BANDWIDTH

    @classmethod
    def from_info(cls, info: InstanceTypeInfo) -> InstanceSpecs:
        vcpus = _dig(info, "VCpuInfo", "DefaultVCpus")
        memory = _dig(info, "MemoryInfo", "SizeInMiB")
        gpu_info = info.get("GpuInfo")
        return cls(
            instance_type=info["InstanceType"],
            architectures=frozenset(_dig(info, "ProcessorInfo", "SupportedArchitectures") or ()),
            usage_classes=frozenset(info.get("SupportedUsageClasses") or ()),
            root_device_types=frozenset(info.get("SupportedRootDeviceTypes") or ()),
            hibernation_supported=info.get("HibernationSupported"),
            vcpus=vcpus,
            memory_mib=memory,
            gpu_memory_mib=total_gpu_memory(gpu_info),
            gpus=total_gpu_count(gpu_info),
            placement_group_strategies=frozenset(_dig(info, "PlacementGroupInfo", "SupportedStrategies") or ()),
            hypervisor=info.get("Hypervisor"),
            bare_metal=info.get("BareMetal"),
            burstable=info.get("BurstablePerformanceSupported"),
            fpga=info.get("FpgaInfo") is not None,
            ena_support=support_syntax_to_bool(_dig(info, "NetworkInfo", "EnaSupport")),
            vcpus_to_memory_ratio=vcpus_to_memory_ratio(vcpus, memory),
            current_generation=info.get("CurrentGeneration"),
            network_interfaces=_dig(info, "NetworkInfo", "MaximumNetworkInterfaces"),
            network_bandwidth_gbps=network_bandwidth(_dig(info, "NetworkInfo", "NetworkPerformance")),
        )
