import re
import uuid

from pydantic import BaseModel, Field, field_validator

# 8-4-4-4-12 hex digits, any case
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

class Place(BaseModel):
    """A favorite place. Field order matches the JSON and CSV column order."""
    id: str
    name: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    description: str = Field(..., min_length=1)

    @field_validator("id")
    @classmethod
    def check_uuid(cls, value: str) -> str:
        if not UUID_PATTERN.match(value):
            raise ValueError("id must be a UUID in canonical form")
        uuid.UUID(value)
        return value

    @classmethod
    def from_row(cls, row: list[str]) -> "Place":
        """Build a place from a trusted dataset row, skipping client validation."""
        return cls.model_construct(
            id=row[0],
            name=row[1],
            latitude=float(row[2]),
            longitude=float(row[3]),
            description=row[4],
        )
