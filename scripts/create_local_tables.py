#!/usr/bin/env python3
"""Create and seed the movie awards table for local development.

This script creates the awards table configured against DynamoDB Local and
loads a handful of sample award records. The key schema matches the deployed
table: movieId (HASH, number) and awardBody (RANGE, string).

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from awards.config import get_config

DEFAULT_TABLE_NAME = "MovieAwards"

SAMPLE_AWARDS = [
    {"movieId": 550, "awardBody": "Oscar", "numAwards": 3, "category": "Best Picture"},
    {"movieId": 550, "awardBody": "GoldenGlobe", "numAwards": 1},
    {"movieId": 680, "awardBody": "Oscar", "numAwards": 7},
    {"movieId": 680, "awardBody": "BAFTA", "numAwards": 2},
]


def create_awards_table(dynamodb, table_name: str):
    """Create the awards table."""
    try:
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {"AttributeName": "movieId", "KeyType": "HASH"},
                {"AttributeName": "awardBody", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "movieId", "AttributeType": "N"},
                {"AttributeName": "awardBody", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        dynamodb.get_waiter("table_exists").wait(TableName=table_name)
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def seed_awards(table):
    """Load sample award records."""
    with table.batch_writer() as batch:
        for item in SAMPLE_AWARDS:
            batch.put_item(Item=item)
    print(f"✓ Seeded {len(SAMPLE_AWARDS)} award records")


def main():
    """Create and seed the awards table."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"
    region = config.aws_region or "us-east-1"
    table_name = config.table_name or DEFAULT_TABLE_NAME

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    session_kwargs = dict(
        endpoint_url=endpoint_url,
        region_name=region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )
    create_awards_table(boto3.client("dynamodb", **session_kwargs), table_name)
    seed_awards(boto3.resource("dynamodb", **session_kwargs).Table(table_name))

    print()
    print("✅ Awards table ready")


if __name__ == "__main__":
    main()
