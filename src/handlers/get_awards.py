"""REST handler — GET /movies/{movieId}/awards/{awardBody}?min=N."""

import json
import logging
from typing import Any

from awards.clients import get_awards_table
from awards.config import get_config
from awards.errors import AwardsError, ClientInputError, EmptyResultError
from awards.responses import error_response, message_response, success
from awards.services.award_lookup import find_awards, parse_award_query

logger = logging.getLogger(__name__)

# Lambda leaves the root logger at WARNING.
_log_level = getattr(logging, get_config().log_level, logging.INFO)
for _name in ("awards", "handlers"):
    logging.getLogger(_name).setLevel(_log_level)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Look up award records for one movie and award body.

    404 for a missing movieId or awardBody, 400 when nothing matches,
    500 with the error detail for anything unexpected.
    """
    logger.info("Event: %s", json.dumps(event, default=str))

    try:
        query = parse_award_query(event)
        records = find_awards(query, get_awards_table())
        if not records:
            raise EmptyResultError()

        logger.info("Found %d award records for movie %s / %s", len(records), query.movie_id, query.award_body)
        return success([record.to_item() for record in records])
    except (ClientInputError, EmptyResultError) as e:
        logger.info("Award lookup rejected: %s", e.message)
        return message_response(e.status_code, e.user_message)
    except AwardsError as e:
        logger.exception("Award lookup failed: %s", e.code.value)
        return error_response(e.message, e.status_code)
    except Exception as e:
        logger.exception("Unhandled exception in award lookup")
        return error_response(str(e))
