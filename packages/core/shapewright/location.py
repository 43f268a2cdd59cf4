"""Classify a location string as a zone id, zone name or region."""

from __future__ import annotations

import re

from shapewright.errors import InvalidLocationFormat

# use1-az1, use2-az3
_ZONE_ID_RE = re.compile(r"^[a-z]{3}[1-9]-az[1-9]$")
# us-east-1a, us-gov-west-1b
_ZONE_NAME_RE = re.compile(r"^[a-z]{2,3}-([a-z]{1,10}-)?[a-z]{1,10}-[1-9][a-z]$")
# us-east-1, ap-southeast-2
_REGION_RE = re.compile(r"^[a-z]{2,3}-([a-z]{1,10}-)?[a-z]{1,10}-[1-9]")

ZONE_ID_LOCATION_TYPE = "availability-zone-id"
ZONE_NAME_LOCATION_TYPE = "availability-zone"
REGION_LOCATION_TYPE = "region"

# Ordered: a zone name also matches the (unanchored) region pattern
_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (_ZONE_ID_RE, ZONE_ID_LOCATION_TYPE),
    (_ZONE_NAME_RE, ZONE_NAME_LOCATION_TYPE),
    (_REGION_RE, REGION_LOCATION_TYPE),
)


def classify_location(location: str) -> str:
    """Return the DescribeInstanceTypeOfferings location type for ``location``.

    Zone names are account-relative; zone ids are stable across accounts.
    """
    for pattern, location_type in _PATTERNS:
        if pattern.match(location):
            return location_type
    raise InvalidLocationFormat(location)


def is_supported_in_location(offerings: dict[str, str] | None, instance_type: str) -> bool:
    """``None`` means no location restriction was requested."""
    if offerings is None:
        return True
    return instance_type in offerings
