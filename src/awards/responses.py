import json
from typing import Any

_DEFAULT_HEADERS = {
    "content-type": "application/json",
}


def api_response(status_code: int, body: Any) -> dict[str, Any]:
    """Format a Lambda proxy response for API Gateway."""
    return {
        "statusCode": status_code,
        "headers": dict(_DEFAULT_HEADERS),
        "body": json.dumps(body),
    }


def success(data: Any, status_code: int = 200) -> dict[str, Any]:
    return api_response(status_code, data)


def message_response(status_code: int, message: str) -> dict[str, Any]:
    """Client-facing outcome: ``{"Message": ...}``."""
    return api_response(status_code, {"Message": message})


def error_response(error: str, status_code: int = 500) -> dict[str, Any]:
    """Unexpected failure: ``{"error": ...}``."""
    return api_response(status_code, {"error": error})
