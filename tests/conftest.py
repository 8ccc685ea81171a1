"""Shared test fixtures for the movie awards API."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def api_event():
    """API Gateway proxy event for GET /movies/550/awards/Oscar."""
    return {
        "resource": "/movies/{movieId}/awards/{awardBody}",
        "httpMethod": "GET",
        "pathParameters": {"movieId": "550", "awardBody": "Oscar"},
        "queryStringParameters": None,
    }


# DynamoDB fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3
    from awards.config import get_config

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region or "us-east-1",
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


@pytest.fixture
def awards_table(dynamodb_resource):
    """Provide the MovieAwards table."""
    from awards.config import get_config

    table = dynamodb_resource.Table(get_config().table_name or "MovieAwards")
    yield table

    # Cleanup: scan and delete all items created during test
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(
                Key={
                    "movieId": item["movieId"],
                    "awardBody": item["awardBody"],
                }
            )
