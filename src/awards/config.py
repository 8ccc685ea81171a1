from os import environ

from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    table_name: str | None = None
    aws_region: str | None = None
    dynamodb_endpoint: str | None = None
    log_level: str = "INFO"
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        table_name=environ.get("TABLE_NAME") or None,
        aws_region=environ.get("REGION") or environ.get("AWS_REGION") or None,
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
