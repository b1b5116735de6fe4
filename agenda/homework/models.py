"""Homework record models and payload parsing."""
import enum
import json
import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from agenda.errors import RecordValidationError

# Compact UTC offsets such as -0400 are rewritten to -04:00 before parsing
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


class Priority(enum.Enum):
    High = "High"
    Medium = "Medium"
    Low = "Low"


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp carrying a UTC offset.

    Accepts ``2021-09-09T11:59:00-0400``, ``2021-09-09T11:59:00-04:00`` and a
    trailing ``Z``. Raises ValueError for anything else, including naive
    timestamps, since a record's dates must be absolute.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        candidate = value.strip()
        if candidate.endswith("Z"):
            candidate = candidate[:-1] + "+00:00"
        elif "T" in candidate:
            candidate = _COMPACT_OFFSET.sub(r"\1:\2", candidate)
        try:
            parsed = datetime.fromisoformat(candidate)
        except ValueError:
            raise ValueError(f"Invalid timestamp: {value!r}")
    else:
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ValueError(f"Timestamp has no UTC offset: {value!r}")
    return parsed


class HomeworkRecord(BaseModel):
    """A tracked piece of homework, keyed by its submission date."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    course: str
    due_date: datetime = Field(alias="dueDate")
    sub_date: datetime = Field(alias="subDate")
    priority: Optional[Priority] = None

    @field_validator("due_date", "sub_date", mode="before")
    @classmethod
    def absolute_timestamp(cls, v: Any) -> datetime:
        return parse_timestamp(v)

    @field_validator("priority", mode="before")
    @classmethod
    def discard_client_priority(cls, v: Any) -> None:
        # Priority is always derived from the dates on write
        return None

    @property
    def key(self) -> str:
        return record_key(self.sub_date)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def record_key(sub_date: Union[datetime, str]) -> str:
    """Canonical RecordSet key for a submission date.

    Keys are the UTC instant, so every spelling of one moment shares a key.
    """
    try:
        return parse_timestamp(sub_date).astimezone(timezone.utc).isoformat()
    except ValueError as e:
        raise RecordValidationError(f"subDate: {e}")


def _decode(raw: Union[str, bytes, Mapping]) -> dict:
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise RecordValidationError(f"Homework payload is not valid JSON: {e}")
    if not isinstance(raw, Mapping):
        raise RecordValidationError("Homework payload must be a JSON object")
    return dict(raw)


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "payload"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_record(raw: Union[str, bytes, Mapping]) -> HomeworkRecord:
    """Parse a JSON-encoded (or decoded) homework payload.

    Raises:
        RecordValidationError: if the payload is not a JSON object, is missing
            a field, or carries an unparsable timestamp.
    """
    data = _decode(raw)
    try:
        return HomeworkRecord.model_validate(data)
    except ValidationError as e:
        raise RecordValidationError(_describe(e)) from e


def parse_submission_key(raw: Union[str, bytes, Mapping]) -> str:
    """Extract the record key from a payload naming a ``subDate``."""
    data = _decode(raw)
    if "subDate" not in data:
        raise RecordValidationError("subDate: Field required")
    return record_key(data["subDate"])
