"""Instance type providers: paged catalog and availability data sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from shapewright.model import InstanceTypeInfo

# One page of DescribeInstanceTypeOfferings: {"InstanceType", "LocationType", "Location"}
InstanceTypeOffering = dict[str, str]


class InstanceTypeProvider(ABC):
    """Abstract base for instance type data sources.

    Both methods return generators yielding one page at a time. A consumer
    stops paging early by closing the generator (or simply abandoning the
    loop); no further pages are requested after that. Failures are raised as
    UpstreamFetchError naming the call that failed.
    """

    @abstractmethod
    def iter_instance_type_pages(self) -> Iterator[list[InstanceTypeInfo]]:
        """Yield pages of the full, unfiltered instance type catalog."""

    @abstractmethod
    def iter_offering_pages(self, location_type: str, location: str) -> Iterator[list[InstanceTypeOffering]]:
        """Yield pages of instance type offerings for one location."""


__all__ = ["InstanceTypeOffering", "InstanceTypeProvider"]
