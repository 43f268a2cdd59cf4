"""Shapewright — select compute instance types from declarative resource filters."""

from shapewright.errors import (
    InvalidLocationFormat,
    SelectorError,
    UnsupportedFilterType,
    UpstreamFetchError,
)
from shapewright.model import Filters, FloatRange, InstanceTypeInfo, IntRange

__version__ = "0.1.0"

__all__ = [
    "EC2Provider",
    "Filters",
    "FloatRange",
    "InstanceSpecs",
    "InstanceTypeInfo",
    "InstanceTypeProvider",
    "IntRange",
    "InvalidLocationFormat",
    "Selector",
    "SelectorError",
    "StaticProvider",
    "UnsupportedFilterType",
    "UpstreamFetchError",
]


def __getattr__(name: str):
    # Lazy imports so botocore/rich load only when a selector is built
    if name == "Selector":
        from shapewright.selector import Selector

        return Selector
    if name == "InstanceSpecs":
        from shapewright.specs import InstanceSpecs

        return InstanceSpecs
    if name == "InstanceTypeProvider":
        from shapewright.providers import InstanceTypeProvider

        return InstanceTypeProvider
    if name == "EC2Provider":
        from shapewright.providers.ec2 import EC2Provider

        return EC2Provider
    if name == "StaticProvider":
        from shapewright.providers.static import StaticProvider

        return StaticProvider
    raise AttributeError(f"module 'shapewright' has no attribute {name!r}")
