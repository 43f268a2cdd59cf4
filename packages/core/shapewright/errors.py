"""Errors raised by the selection engine. Each one aborts the whole filter call."""

from __future__ import annotations


class SelectorError(Exception):
    """Base class for instance selection failures."""


class InvalidLocationFormat(SelectorError, ValueError):
    def __init__(self, location: str):
        self.location = location
        super().__init__(f"The location passed in ({location}) is not a valid zone-id, zone-name, or region name")


class UnsupportedFilterType(SelectorError, TypeError):
    """A filter value was paired with an instance attribute it has no comparator for."""

    def __init__(self, filter_name: str, detail: str):
        self.filter_name = filter_name
        super().__init__(f"Unable to process filter {filter_name}: {detail}")


class UpstreamFetchError(SelectorError):
    """A provider call failed while paging. The original exception is chained."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(f"Encountered an error when calling {operation}: {cause}")
