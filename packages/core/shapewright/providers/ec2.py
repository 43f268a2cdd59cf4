"""EC2 provider — pages DescribeInstanceTypes and DescribeInstanceTypeOfferings via botocore."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import botocore.session
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from shapewright import __version__
from shapewright.errors import UpstreamFetchError
from shapewright.model import InstanceTypeInfo
from shapewright.providers import InstanceTypeOffering, InstanceTypeProvider

logger = logging.getLogger(__name__)

SDK_NAME = "shapewright"
_LOCATION_FILTER_KEY = "location"
_CONNECT_TIMEOUT = 10  # seconds
_READ_TIMEOUT = 30


def default_user_agent_tag() -> str:
    return f"{SDK_NAME}-v{__version__}"


class EC2Provider(InstanceTypeProvider):
    """Reads instance type data from the EC2 API.

    The user agent tag is scoped to this provider instance and sent with every
    request as ``user_agent_extra``. Pass ``client`` to reuse an existing
    botocore EC2 client.
    """

    def __init__(
        self,
        region: str | None = None,
        profile: str | None = None,
        user_agent_tag: str | None = None,
        client: Any = None,
    ):
        self.user_agent_tag = user_agent_tag or default_user_agent_tag()
        if client is None:
            session = botocore.session.Session(profile=profile)
            client = session.create_client(
                "ec2",
                region_name=region,
                config=Config(
                    user_agent_extra=self.user_agent_tag,
                    connect_timeout=_CONNECT_TIMEOUT,
                    read_timeout=_READ_TIMEOUT,
                ),
            )
        self._client = client

    def iter_instance_type_pages(self) -> Iterator[list[InstanceTypeInfo]]:
        yield from self._paginate("describe_instance_types", "InstanceTypes")

    def iter_offering_pages(self, location_type: str, location: str) -> Iterator[list[InstanceTypeOffering]]:
        yield from self._paginate(
            "describe_instance_type_offerings",
            "InstanceTypeOfferings",
            LocationType=location_type,
            Filters=[{"Name": _LOCATION_FILTER_KEY, "Values": [location]}],
        )

    def _paginate(self, operation: str, result_key: str, **params: Any) -> Iterator[list[dict[str, Any]]]:
        try:
            paginator = self._client.get_paginator(operation)
            for number, page in enumerate(paginator.paginate(**params), start=1):
                items = page.get(result_key, [])
                logger.debug("%s page %d: %d items", operation, number, len(items))
                yield items
        except (BotoCoreError, ClientError) as exc:
            raise UpstreamFetchError(operation, exc) from exc
