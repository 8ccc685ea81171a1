"""Lazy-initialized boto3 resources — reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from awards.config import get_config
from awards.errors import ConfigurationError


@lru_cache(maxsize=1)
def get_awards_table() -> Any:
    config = get_config()
    if not config.table_name:
        raise ConfigurationError("TABLE_NAME is not set")
    if not config.aws_region:
        raise ConfigurationError("REGION is not set")

    resource = boto3.resource(
        "dynamodb",
        region_name=config.aws_region,
        endpoint_url=config.dynamodb_endpoint,
    )
    return resource.Table(config.table_name)
