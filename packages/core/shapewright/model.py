"""Filters — the declarative request every selection starts from.

Each field is optional. ``None`` means "do not filter on this attribute";
only a present value can exclude an instance type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shapewright.comparators import is_within_range

# Instance type description as returned by DescribeInstanceTypes (botocore shape)
InstanceTypeInfo = dict[str, Any]


class _Range(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float | None = None
    max: float | None = None

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"range lower bound {self.min} is greater than upper bound {self.max}")
        return self

    def contains(self, value: float) -> bool:
        return is_within_range(value, self.min, self.max)


class IntRange(_Range):
    """Inclusive integer bounds; a missing side is unbounded."""

    min: int | None = None
    max: int | None = None

    @classmethod
    def exact(cls, value: int) -> IntRange:
        return cls(min=value, max=value)


class FloatRange(_Range):
    """Inclusive float bounds; a missing side is unbounded."""

    min: float | None = None
    max: float | None = None

    @classmethod
    def exact(cls, value: float) -> FloatRange:
        return cls(min=value, max=value)


class Filters(BaseModel):
    model_config = ConfigDict(frozen=True)

    cpu_architecture: str | None = None
    usage_class: str | None = None
    root_device_type: str | None = None
    hibernation_supported: bool | None = None
    vcpus_range: IntRange | None = None
    memory_range: IntRange | None = None  # MiB
    gpu_memory_range: IntRange | None = None  # MiB, summed over all GPUs
    gpus_range: IntRange | None = None
    placement_group_strategy: str | None = None
    hypervisor: str | None = None
    bare_metal: bool | None = None
    burstable: bool | None = None
    fpga: bool | None = None
    ena_support: bool | None = None
    vcpus_to_memory_ratio: FloatRange | None = None
    current_generation: bool | None = None
    network_interfaces: IntRange | None = None
    network_performance: IntRange | None = None  # Gigabit

    availability_zone: str | None = None
    region: str | None = None
    max_results: int | None = Field(default=None, ge=0)

    @property
    def location(self) -> str:
        """The location to restrict to; a zone takes precedence over a region."""
        if self.availability_zone:
            return self.availability_zone
        if self.region:
            return self.region
        return ""
