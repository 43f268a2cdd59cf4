"""Tests for the botocore-backed EC2 provider.

All EC2 calls are mocked, so no network access or credentials are required.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import shapewright
from botocore.exceptions import ClientError, EndpointConnectionError
from shapewright.errors import UpstreamFetchError
from shapewright.providers import InstanceTypeProvider
from shapewright.providers.ec2 import EC2Provider, default_user_agent_tag


def _client_with_pages(pages: list[dict]) -> MagicMock:
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = iter(pages)
    return client


def _client_error(operation: str) -> ClientError:
    return ClientError({"Error": {"Code": "UnauthorizedOperation", "Message": "not allowed"}}, operation)


class TestConstruction:
    def test_is_provider(self):
        assert isinstance(EC2Provider(client=MagicMock()), InstanceTypeProvider)

    def test_default_user_agent_tag(self):
        assert default_user_agent_tag() == f"shapewright-v{shapewright.__version__}"
        assert EC2Provider(client=MagicMock()).user_agent_tag == default_user_agent_tag()

    def test_user_agent_scoped_to_instance(self):
        a = EC2Provider(client=MagicMock(), user_agent_tag="tool-a-v1")
        b = EC2Provider(client=MagicMock())
        assert a.user_agent_tag == "tool-a-v1"
        assert b.user_agent_tag == default_user_agent_tag()

    def test_client_built_with_user_agent(self):
        with patch("shapewright.providers.ec2.botocore.session.Session") as session_cls:
            EC2Provider(region="us-west-2", profile="dev", user_agent_tag="custom-v9")
        session_cls.assert_called_once_with(profile="dev")
        args, kwargs = session_cls.return_value.create_client.call_args
        assert args == ("ec2",)
        assert kwargs["region_name"] == "us-west-2"
        assert kwargs["config"].user_agent_extra == "custom-v9"

    def test_real_client_carries_tag(self):
        provider = EC2Provider(region="us-east-1", user_agent_tag="shapewright-test")
        assert provider._client.meta.config.user_agent_extra == "shapewright-test"
        assert provider._client.meta.region_name == "us-east-1"


class TestInstanceTypePages:
    def test_yields_each_page(self):
        client = _client_with_pages(
            [
                {"InstanceTypes": [{"InstanceType": "m5.large"}, {"InstanceType": "t3.micro"}]},
                {"InstanceTypes": [{"InstanceType": "c5.large"}]},
            ]
        )
        pages = list(EC2Provider(client=client).iter_instance_type_pages())
        assert [len(p) for p in pages] == [2, 1]
        client.get_paginator.assert_called_once_with("describe_instance_types")
        client.get_paginator.return_value.paginate.assert_called_once_with()

    def test_missing_result_key(self):
        client = _client_with_pages([{}])
        assert list(EC2Provider(client=client).iter_instance_type_pages()) == [[]]

    def test_close_stops_paging(self):
        requested = []

        def paginate():
            for i in range(5):
                requested.append(i)
                yield {"InstanceTypes": [{"InstanceType": f"m5.{i}"}]}

        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = paginate
        pages = EC2Provider(client=client).iter_instance_type_pages()
        next(pages)
        pages.close()
        assert requested == [0]

    def test_client_error_wrapped(self):
        def paginate():
            yield {"InstanceTypes": [{"InstanceType": "m5.large"}]}
            raise _client_error("DescribeInstanceTypes")

        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = paginate
        pages = EC2Provider(client=client).iter_instance_type_pages()
        assert next(pages) == [{"InstanceType": "m5.large"}]
        with pytest.raises(UpstreamFetchError, match="describe_instance_types") as exc_info:
            next(pages)
        assert exc_info.value.operation == "describe_instance_types"
        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_connection_error_wrapped(self):
        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = EndpointConnectionError(
            endpoint_url="https://ec2.us-east-1.amazonaws.com"
        )
        with pytest.raises(UpstreamFetchError, match="Could not connect"):
            list(EC2Provider(client=client).iter_instance_type_pages())

    def test_other_errors_not_wrapped(self):
        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = KeyError("boom")
        with pytest.raises(KeyError):
            list(EC2Provider(client=client).iter_instance_type_pages())


class TestOfferingPages:
    def test_location_filter_params(self):
        client = _client_with_pages(
            [
                {
                    "InstanceTypeOfferings": [
                        {"InstanceType": "m5.large", "LocationType": "availability-zone-id", "Location": "use1-az1"}
                    ]
                }
            ]
        )
        pages = list(EC2Provider(client=client).iter_offering_pages("availability-zone-id", "use1-az1"))
        assert pages[0][0]["Location"] == "use1-az1"
        client.get_paginator.assert_called_once_with("describe_instance_type_offerings")
        client.get_paginator.return_value.paginate.assert_called_once_with(
            LocationType="availability-zone-id",
            Filters=[{"Name": "location", "Values": ["use1-az1"]}],
        )

    def test_error_wrapped(self):
        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = _client_error("DescribeInstanceTypeOfferings")
        with pytest.raises(UpstreamFetchError, match="describe_instance_type_offerings"):
            list(EC2Provider(client=client).iter_offering_pages("region", "us-east-1"))
