"""Tests for location classification and membership."""

from __future__ import annotations

import pytest
from shapewright.errors import InvalidLocationFormat
from shapewright.location import (
    REGION_LOCATION_TYPE,
    ZONE_ID_LOCATION_TYPE,
    ZONE_NAME_LOCATION_TYPE,
    classify_location,
    is_supported_in_location,
)


class TestClassifyLocation:
    @pytest.mark.parametrize("location", ["use1-az1", "usw2-az3", "euc1-az2"])
    def test_zone_ids(self, location):
        assert classify_location(location) == ZONE_ID_LOCATION_TYPE

    @pytest.mark.parametrize("location", ["us-east-1a", "eu-west-2c", "us-gov-west-1b", "ap-southeast-2a"])
    def test_zone_names(self, location):
        assert classify_location(location) == ZONE_NAME_LOCATION_TYPE

    @pytest.mark.parametrize("location", ["us-east-1", "eu-central-1", "us-gov-east-1", "ap-northeast-3"])
    def test_regions(self, location):
        assert classify_location(location) == REGION_LOCATION_TYPE

    @pytest.mark.parametrize("location", ["not-a-zone", "US-EAST-1", "use1-az0", "east", "1-us-east"])
    def test_invalid(self, location):
        with pytest.raises(InvalidLocationFormat) as exc_info:
            classify_location(location)
        assert exc_info.value.location == location

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError, match="not a valid zone-id, zone-name, or region name"):
            classify_location("nowhere")


class TestIsSupportedInLocation:
    def test_no_restriction(self):
        assert is_supported_in_location(None, "m5.large")

    def test_empty_index_excludes_everything(self):
        assert not is_supported_in_location({}, "m5.large")

    def test_membership(self):
        index = {"m5.large": "use1-az1"}
        assert is_supported_in_location(index, "m5.large")
        assert not is_supported_in_location(index, "t3.micro")
