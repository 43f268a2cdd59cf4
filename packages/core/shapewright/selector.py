"""Selector — filter the instance type catalog against declarative Filters.

Flow per call: resolve the requested location (if any) into an index of
instance type -> location, page through the full catalog pruning a candidate
dict in place, then sort by name and truncate to ``max_results``.
"""

from __future__ import annotations

import logging

from shapewright.filters import evaluate
from shapewright.location import classify_location, is_supported_in_location
from shapewright.model import Filters, InstanceTypeInfo
from shapewright.outputs import InstanceTypesOutput, simple_instance_type_output
from shapewright.providers import InstanceTypeProvider
from shapewright.specs import InstanceSpecs

logger = logging.getLogger(__name__)


def sort_instance_type_info(instance_types: list[InstanceTypeInfo]) -> list[InstanceTypeInfo]:
    """Ascending by instance type name; names are unique so the order is total."""
    return sorted(instance_types, key=lambda info: info["InstanceType"])


def truncate_results(max_results: int | None, instance_types: list[InstanceTypeInfo]) -> list[InstanceTypeInfo]:
    if max_results is None:
        return instance_types
    return instance_types[: max(max_results, 0)]


class Selector:
    """Select instance types from a provider's catalog.

    Three entry points share one filtering pass: ``filter`` returns names,
    ``filter_verbose`` returns the raw records, and ``filter_with_output``
    renders records through a caller-supplied formatter.
    """

    def __init__(self, provider: InstanceTypeProvider):
        self.provider = provider

    def filter(self, filters: Filters) -> list[str]:
        return self.filter_with_output(filters, simple_instance_type_output)

    def filter_verbose(self, filters: Filters) -> list[InstanceTypeInfo]:
        return truncate_results(filters.max_results, self._raw_filter(filters))

    def filter_with_output(self, filters: Filters, output_fn: InstanceTypesOutput) -> list[str]:
        return output_fn(self.filter_verbose(filters))

    def retrieve_instance_types_supported_in_location(self, location: str) -> dict[str, str] | None:
        """Map instance type -> location for everything offered in ``location``.

        ``location`` may be a zone id (use1-az1), a zone name (us-east-1a) or a
        region (us-east-1). An empty string means no restriction and returns
        None, which is different from an empty mapping.
        """
        if not location:
            return None
        location_type = classify_location(location)
        available: dict[str, str] = {}
        for page in self.provider.iter_offering_pages(location_type, location):
            for offering in page:
                available[offering["InstanceType"]] = offering["Location"]
        logger.info("Resolved %s %s to %d instance types", location_type, location, len(available))
        return available

    def _raw_filter(self, filters: Filters) -> list[InstanceTypeInfo]:
        offerings = self.retrieve_instance_types_supported_in_location(filters.location)

        candidates: dict[str, InstanceTypeInfo] = {}
        # first evaluation of a name is final; repeats on later pages are ignored
        seen: set[str] = set()
        pages = self.provider.iter_instance_type_pages()
        try:
            for page in pages:
                for info in page:
                    specs = InstanceSpecs.from_info(info)
                    name = specs.instance_type
                    if name in seen:
                        logger.debug("Ignoring repeated instance type %s", name)
                        continue
                    seen.add(name)
                    # UnsupportedFilterType propagates and discards all candidates
                    if is_supported_in_location(offerings, name) and evaluate(filters, specs):
                        candidates[name] = info
                    else:
                        candidates.pop(name, None)
        finally:
            # stops any further page requests when we leave early
            pages.close()

        logger.debug("%d instance types matched", len(candidates))
        return sort_instance_type_info(list(candidates.values()))
