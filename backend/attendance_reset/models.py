import re
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

# Firestore emits RFC 3339 with up to nanosecond precision
_TIMESTAMP_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})$"
)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a Firestore timestampValue into an aware datetime, or None."""
    if not isinstance(value, str):
        return None
    match = _TIMESTAMP_RE.match(value.strip())
    if not match:
        return None
    seconds, fraction, offset = match.groups()
    fraction = (fraction or "0")[:6].ljust(6, "0")
    if offset == "Z":
        offset = "+00:00"
    try:
        return datetime.fromisoformat(f"{seconds}.{fraction}{offset}")
    except ValueError:
        return None


def _value(fields: Dict[str, Any], key: str, kind: str) -> Optional[str]:
    """String payload of a typed Firestore value, or None when absent or malformed."""
    field = fields.get(key)
    value = field.get(kind) if isinstance(field, dict) else None
    return value if isinstance(value, str) else None


class AttendanceRecord(BaseModel):
    doc_id: str
    name: str
    user_id: Optional[str] = None
    check_in: Optional[datetime] = None
    check_in_raw: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "AttendanceRecord":
        fields = doc.get("fields")
        if not isinstance(fields, dict):
            fields = {}
        raw = _value(fields, "checkIn", "timestampValue")
        name = doc.get("name")
        if not isinstance(name, str):
            name = ""
        return cls(
            doc_id=name.rsplit("/", 1)[-1],
            name=name,
            user_id=_value(fields, "userId", "stringValue"),
            check_in=parse_timestamp(raw),
            check_in_raw=raw,
        )


class TimeWindow(BaseModel):
    """Half-open interval [start, end)."""
    start: datetime
    end: datetime

    @classmethod
    def for_day(cls, start: datetime) -> "TimeWindow":
        return cls(start=start, end=start + timedelta(hours=24))

    def contains(self, ts: Optional[datetime]) -> bool:
        if ts is None or ts.tzinfo is None:
            return False
        return self.start <= ts < self.end


class DeleteOutcome(BaseModel):
    doc_id: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status_code in (200, 204)


class ResetSummary(BaseModel):
    window: TimeWindow
    fetched: int
    targeted: int
    outcomes: List[DeleteOutcome] = []

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)
