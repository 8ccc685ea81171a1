"""Unit tests for the cached awards table handle."""

import os
from unittest.mock import patch

import pytest

from awards.clients import get_awards_table
from awards.config import _reset_config
from awards.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clear_caches():
    _reset_config()
    get_awards_table.cache_clear()
    yield
    _reset_config()
    get_awards_table.cache_clear()


def test_table_built_from_config():
    env = {"TABLE_NAME": "MovieAwards", "REGION": "eu-west-1", "DYNAMODB_ENDPOINT": "http://localhost:8000"}
    with patch.dict(os.environ, env, clear=True), patch("awards.clients.boto3") as mock_boto3:
        table = get_awards_table()

    mock_boto3.resource.assert_called_once_with(
        "dynamodb",
        region_name="eu-west-1",
        endpoint_url="http://localhost:8000",
    )
    mock_boto3.resource.return_value.Table.assert_called_once_with("MovieAwards")
    assert table is mock_boto3.resource.return_value.Table.return_value


def test_table_reused_across_calls():
    with (
        patch.dict(os.environ, {"TABLE_NAME": "MovieAwards", "REGION": "eu-west-1"}, clear=True),
        patch("awards.clients.boto3") as mock_boto3,
    ):
        first = get_awards_table()
        second = get_awards_table()

    assert first is second
    mock_boto3.resource.assert_called_once()


def test_missing_table_name_raises():
    with patch.dict(os.environ, {"REGION": "eu-west-1"}, clear=True), patch("awards.clients.boto3") as mock_boto3:
        with pytest.raises(ConfigurationError, match="TABLE_NAME"):
            get_awards_table()

    mock_boto3.resource.assert_not_called()


def test_missing_region_raises():
    with patch.dict(os.environ, {"TABLE_NAME": "MovieAwards"}, clear=True), patch("awards.clients.boto3"):
        with pytest.raises(ConfigurationError, match="REGION"):
            get_awards_table()
