"""Award lookup service — request parsing and the awards table query."""

import logging
import re
from typing import Any

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from awards.errors import ClientInputError, ErrorCode, UpstreamError
from awards.models import AwardQuery, AwardRecord

logger = logging.getLogger(__name__)

# Leading integer, the same prefix JavaScript's parseInt reads: "12abc" -> 12, "1e3" -> 1.
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_int_prefix(raw: Any) -> int | None:
    if raw is None:
        return None
    match = _INT_PREFIX.match(str(raw))
    return int(match.group(1)) if match else None


def _parse_movie_id(raw: Any) -> int | None:
    movie_id = parse_int_prefix(raw)
    return movie_id if movie_id is not None and movie_id > 0 else None


def _parse_min_awards(raw: Any) -> int | None:
    if not raw:
        return None
    min_awards = parse_int_prefix(raw)
    if min_awards is None:
        raise ValueError(f"min is not an integer: {raw!r}")
    return min_awards


def parse_award_query(event: dict[str, Any]) -> AwardQuery:
    """Build an AwardQuery from an API Gateway event.

    Raises ClientInputError when movieId or awardBody is missing. A ``min``
    value with no leading integer raises ValueError.
    """
    path_params = event.get("pathParameters") or {}
    query_params = event.get("queryStringParameters") or {}

    movie_id = _parse_movie_id(path_params.get("movieId"))
    if not movie_id:
        raise ClientInputError("movieId is absent or not a positive integer", code=ErrorCode.MISSING_MOVIE_ID)

    award_body = path_params.get("awardBody")
    if not award_body:
        raise ClientInputError("awardBody is absent", code=ErrorCode.MISSING_AWARD_BODY)

    return AwardQuery(
        movie_id=movie_id,
        award_body=award_body,
        min_awards=_parse_min_awards(query_params.get("min")),
    )


def build_query_kwargs(query: AwardQuery) -> dict[str, Any]:
    """Key condition on (movieId, awardBody), plus a numAwards filter when requested."""
    query_kwargs: dict[str, Any] = {
        "KeyConditionExpression": Key("movieId").eq(query.movie_id) & Key("awardBody").eq(query.award_body),
    }
    if query.min_awards is not None:
        query_kwargs["FilterExpression"] = Attr("numAwards").gte(query.min_awards)
    return query_kwargs


def find_awards(query: AwardQuery, table: Any) -> list[AwardRecord]:
    """Run the awards query, following pagination, and return matching records."""
    query_kwargs = build_query_kwargs(query)
    items: list[dict[str, Any]] = []
    last_key = None

    while True:
        if last_key:
            query_kwargs["ExclusiveStartKey"] = last_key

        try:
            response = table.query(**query_kwargs)
        except ClientError as e:
            logger.error("Awards query failed: %s", e.response["Error"]["Message"])
            raise UpstreamError(e.response["Error"]["Message"]) from e

        logger.info("Query response: %s", response)
        items.extend(response.get("Items", []))

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break

    return [AwardRecord.from_item(item) for item in items]
