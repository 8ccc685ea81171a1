from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def replace_decimals(obj: Any) -> Any:
    """Recursively convert DynamoDB Decimals to int/float for JSON serialization."""
    if isinstance(obj, list):
        return [replace_decimals(i) for i in obj]
    if isinstance(obj, set):
        return sorted(replace_decimals(i) for i in obj)
    if isinstance(obj, dict):
        return {k: replace_decimals(v) for k, v in obj.items()}
    if isinstance(obj, Decimal):
        return int(obj) if obj % 1 == 0 else float(obj)
    return obj


class AwardQuery(BaseModel):
    """Validated lookup for one (movieId, awardBody) key pair."""

    model_config = ConfigDict(frozen=True)

    movie_id: int = Field(..., gt=0)
    award_body: str = Field(..., min_length=1)
    min_awards: int | None = None


class AwardRecord(BaseModel):
    """An award item as stored in the table. Unknown attributes are kept as-is."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    movie_id: int = Field(..., alias="movieId")
    award_body: str = Field(..., alias="awardBody")
    num_awards: int | float = Field(..., alias="numAwards")

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "AwardRecord":
        return cls.model_validate(replace_decimals(item))

    def to_item(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
