"""Dealer DTOs."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.application.criteria.filters import LONG_MAX, LONG_MIN


class DealerDTO(BaseModel):
    """Dealer DTO."""

    id: Optional[int] = Field(None, ge=LONG_MIN, le=LONG_MAX)
    name: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1001,
                "name": "Autos del Norte",
            }
        },
    )
