"""Decide whether one instance type satisfies every filter.

Each named filter is described once, at import time, by a FilterDescriptor:
which Filters field holds the requested value, which InstanceSpecs field holds
the instance's value, and which kind of comparison applies. Evaluation walks
the table and ANDs the results; filters left as ``None`` are skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from shapewright.comparators import (
    is_supported_from_string,
    is_supported_from_strings,
    is_supported_with_bool,
)
from shapewright.errors import UnsupportedFilterType
from shapewright.model import Filters, FloatRange, IntRange
from shapewright.specs import InstanceSpecs

# Filter value kinds
SCALAR_EXACT = "scalar_exact"  # str compared by equality, or membership for set attributes
BOOLEAN_EXACT = "boolean_exact"
RANGE_BOUND = "range_bound"  # IntRange / FloatRange, inclusive


@dataclass(frozen=True, slots=True)
class FilterDescriptor:
    name: str
    kind: str
    filter_value: Callable[[Filters], Any]
    spec_value: Callable[[InstanceSpecs], Any]


def _descriptor(name: str, kind: str, spec_field: str) -> FilterDescriptor:
    return FilterDescriptor(name=name, kind=kind, filter_value=attrgetter(name), spec_value=attrgetter(spec_field))


FILTER_TABLE: tuple[FilterDescriptor, ...] = (
    _descriptor("cpu_architecture", SCALAR_EXACT, "architectures"),
    _descriptor("usage_class", SCALAR_EXACT, "usage_classes"),
    _descriptor("root_device_type", SCALAR_EXACT, "root_device_types"),
    _descriptor("hibernation_supported", BOOLEAN_EXACT, "hibernation_supported"),
    _descriptor("vcpus_range", RANGE_BOUND, "vcpus"),
    _descriptor("memory_range", RANGE_BOUND, "memory_mib"),
    _descriptor("gpu_memory_range", RANGE_BOUND, "gpu_memory_mib"),
    _descriptor("gpus_range", RANGE_BOUND, "gpus"),
    _descriptor("placement_group_strategy", SCALAR_EXACT, "placement_group_strategies"),
    _descriptor("hypervisor", SCALAR_EXACT, "hypervisor"),
    _descriptor("bare_metal", BOOLEAN_EXACT, "bare_metal"),
    _descriptor("burstable", BOOLEAN_EXACT, "burstable"),
    _descriptor("fpga", BOOLEAN_EXACT, "fpga"),
    _descriptor("ena_support", BOOLEAN_EXACT, "ena_support"),
    _descriptor("vcpus_to_memory_ratio", RANGE_BOUND, "vcpus_to_memory_ratio"),
    _descriptor("current_generation", BOOLEAN_EXACT, "current_generation"),
    _descriptor("network_interfaces", RANGE_BOUND, "network_interfaces"),
    _descriptor("network_performance", RANGE_BOUND, "network_bandwidth_gbps"),
)


def _is_number(value: Any, number_type: type) -> bool:
    # bool is an int subclass; never treat True as 1 here
    return isinstance(value, number_type) and not isinstance(value, bool)


def compare(descriptor: FilterDescriptor, target: Any, value: Any, instance_type: str) -> bool:
    """Apply the comparator selected by the filter kind and the attribute's shape.

    Raises UnsupportedFilterType when the pairing has no comparator, which
    only happens if a descriptor is misconfigured.
    """
    kind = descriptor.kind
    if kind == SCALAR_EXACT and isinstance(target, str):
        if isinstance(value, (frozenset, set, list, tuple)):
            return is_supported_from_strings(value, target)
        if value is None or isinstance(value, str):
            return is_supported_from_string(value, target)
    elif kind == BOOLEAN_EXACT and isinstance(target, bool):
        if value is None or isinstance(value, bool):
            return is_supported_with_bool(value, target)
    elif kind == RANGE_BOUND and isinstance(target, IntRange):
        if value is None or _is_number(value, int):
            return target.contains(value)
    elif kind == RANGE_BOUND and isinstance(target, FloatRange):
        if value is None or _is_number(value, float):
            return target.contains(value)

    raise UnsupportedFilterType(
        descriptor.name,
        f"filter value {target!r} ({type(target).__name__}, {kind}) cannot be compared with "
        f"instance spec {value!r} ({type(value).__name__}) for instance type {instance_type}",
    )


def evaluate(
    filters: Filters,
    specs: InstanceSpecs,
    table: Iterable[FilterDescriptor] = FILTER_TABLE,
) -> bool:
    """True when every present filter in ``filters`` accepts ``specs``."""
    for descriptor in table:
        target = descriptor.filter_value(filters)
        if target is None:
            continue
        value = descriptor.spec_value(specs)
        if not compare(descriptor, target, value, specs.instance_type):
            return False
    return True
