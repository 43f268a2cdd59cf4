"""In-memory provider backed by a catalog snapshot.

The snapshot uses the same keys the EC2 API returns, so the output of
``aws ec2 describe-instance-types`` and ``aws ec2 describe-instance-type-offerings``
can be merged into one YAML or JSON file and used offline:

    InstanceTypes:
      - InstanceType: m5.large
        VCpuInfo: {DefaultVCpus: 2}
        ...
    InstanceTypeOfferings:
      - {InstanceType: m5.large, LocationType: availability-zone-id, Location: use1-az1}
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

import yaml

from shapewright.model import InstanceTypeInfo
from shapewright.providers import InstanceTypeOffering, InstanceTypeProvider

_DEFAULT_PAGE_SIZE = 100


def _pages(items: Sequence, page_size: int) -> Iterator[list]:
    for start in range(0, len(items), page_size):
        yield list(items[start : start + page_size])


class StaticProvider(InstanceTypeProvider):
    def __init__(
        self,
        instance_types: Sequence[InstanceTypeInfo],
        offerings: Sequence[InstanceTypeOffering] = (),
        page_size: int = _DEFAULT_PAGE_SIZE,
    ):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.instance_types = list(instance_types)
        self.offerings = list(offerings)
        self.page_size = page_size
        self.pages_served = 0

    @classmethod
    def from_file(cls, path: str | Path, page_size: int = _DEFAULT_PAGE_SIZE) -> StaticProvider:
        """Load a YAML or JSON snapshot (JSON parses as YAML)."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Catalog snapshot {path} must be a mapping with an InstanceTypes key")
        return cls(
            data.get("InstanceTypes") or [],
            data.get("InstanceTypeOfferings") or [],
            page_size=page_size,
        )

    def iter_instance_type_pages(self) -> Iterator[list[InstanceTypeInfo]]:
        for page in _pages(self.instance_types, self.page_size):
            self.pages_served += 1
            yield page

    def iter_offering_pages(self, location_type: str, location: str) -> Iterator[list[InstanceTypeOffering]]:
        matching = [
            o for o in self.offerings if o.get("LocationType") == location_type and o.get("Location") == location
        ]
        yield from _pages(matching, self.page_size)
