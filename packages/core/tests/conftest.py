"""Shared fixtures for core tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest
from shapewright.providers.static import StaticProvider


def _make_instance(name: str, vcpus: int, memory_mib: int, **overrides: Any) -> dict[str, Any]:
    """Build a DescribeInstanceTypes record with m5-family defaults."""
    info: dict[str, Any] = {
        "InstanceType": name,
        "CurrentGeneration": True,
        "SupportedUsageClasses": ["on-demand", "spot"],
        "SupportedRootDeviceTypes": ["ebs"],
        "BareMetal": False,
        "Hypervisor": "nitro",
        "ProcessorInfo": {"SupportedArchitectures": ["x86_64"]},
        "VCpuInfo": {"DefaultVCpus": vcpus},
        "MemoryInfo": {"SizeInMiB": memory_mib},
        "NetworkInfo": {
            "NetworkPerformance": "Up to 10 Gigabit",
            "MaximumNetworkInterfaces": 3,
            "EnaSupport": "required",
        },
        "PlacementGroupInfo": {"SupportedStrategies": ["cluster", "partition", "spread"]},
        "HibernationSupported": True,
        "BurstablePerformanceSupported": False,
    }
    info.update(overrides)
    return info


_M5_LARGE = _make_instance("m5.large", 2, 8192)
_M5_XLARGE = _make_instance(
    "m5.xlarge",
    4,
    16384,
    NetworkInfo={"NetworkPerformance": "Up to 10 Gigabit", "MaximumNetworkInterfaces": 4, "EnaSupport": "required"},
)
_T3_MICRO = _make_instance(
    "t3.micro",
    2,
    1024,
    BurstablePerformanceSupported=True,
    NetworkInfo={"NetworkPerformance": "Up to 5 Gigabit", "MaximumNetworkInterfaces": 2, "EnaSupport": "required"},
)
_P3_2XLARGE = _make_instance(
    "p3.2xlarge",
    8,
    62464,
    Hypervisor="xen",
    HibernationSupported=False,
    GpuInfo={
        "Gpus": [{"Name": "V100", "Manufacturer": "NVIDIA", "Count": 1, "MemoryInfo": {"SizeInMiB": 16384}}],
        "TotalGpuMemoryInMiB": 16384,
    },
)
_G4DN_12XLARGE = _make_instance(
    "g4dn.12xlarge",
    48,
    196608,
    HibernationSupported=False,
    GpuInfo={"Gpus": [{"Name": "T4", "Manufacturer": "NVIDIA", "Count": 4, "MemoryInfo": {"SizeInMiB": 16384}}]},
    NetworkInfo={"NetworkPerformance": "50 Gigabit", "MaximumNetworkInterfaces": 8, "EnaSupport": "required"},
)
_A1_METAL = _make_instance(
    "a1.metal",
    16,
    32768,
    BareMetal=True,
    HibernationSupported=False,
    ProcessorInfo={"SupportedArchitectures": ["arm64"]},
    NetworkInfo={"NetworkPerformance": "Up to 10 Gigabit", "MaximumNetworkInterfaces": 8, "EnaSupport": "supported"},
)
_A1_METAL.pop("Hypervisor")
_F1_2XLARGE = _make_instance(
    "f1.2xlarge",
    8,
    124928,
    Hypervisor="xen",
    HibernationSupported=False,
    FpgaInfo={"Fpgas": [{"Name": "Virtex UltraScale (VU9P)", "Count": 1, "MemoryInfo": {"SizeInMiB": 65536}}]},
)
_M1_SMALL = _make_instance(
    "m1.small",
    1,
    1740,
    CurrentGeneration=False,
    Hypervisor="xen",
    HibernationSupported=False,
    SupportedRootDeviceTypes=["ebs", "instance-store"],
    ProcessorInfo={"SupportedArchitectures": ["i386", "x86_64"]},
    NetworkInfo={"NetworkPerformance": "Low", "MaximumNetworkInterfaces": 2, "EnaSupport": "unsupported"},
)
_M1_SMALL.pop("PlacementGroupInfo")

_OFFERINGS = [
    {"InstanceType": "m5.large", "LocationType": "availability-zone-id", "Location": "use1-az1"},
    {"InstanceType": "m5.large", "LocationType": "availability-zone", "Location": "us-east-1a"},
    {"InstanceType": "t3.micro", "LocationType": "availability-zone", "Location": "us-east-1a"},
    {"InstanceType": "m5.large", "LocationType": "region", "Location": "us-east-1"},
    {"InstanceType": "m5.xlarge", "LocationType": "region", "Location": "us-east-1"},
    {"InstanceType": "p3.2xlarge", "LocationType": "region", "Location": "us-east-1"},
    {"InstanceType": "a1.metal", "LocationType": "region", "Location": "us-west-2"},
]


_BASIC = [_M5_LARGE, _M5_XLARGE, _T3_MICRO]
_FULL = _BASIC + [_P3_2XLARGE, _G4DN_12XLARGE, _A1_METAL, _F1_2XLARGE, _M1_SMALL]


@pytest.fixture
def instances() -> dict[str, dict[str, Any]]:
    """Every sample record keyed by instance type name (deep-copied per test)."""
    return {info["InstanceType"]: copy.deepcopy(info) for info in _FULL}


@pytest.fixture
def offerings() -> list[dict[str, str]]:
    return copy.deepcopy(_OFFERINGS)


@pytest.fixture
def basic_provider(offerings) -> StaticProvider:
    """m5.large, m5.xlarge and t3.micro, one instance per page."""
    return StaticProvider(copy.deepcopy(_BASIC), offerings, page_size=1)


@pytest.fixture
def full_provider(offerings) -> StaticProvider:
    return StaticProvider(copy.deepcopy(_FULL), offerings, page_size=3)
