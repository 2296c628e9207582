from datetime import datetime, timezone
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class Entry(BaseModel):
    """A stored value and the moment it stops being visible."""

    model_config = ConfigDict(frozen=True)

    value: StrictStr
    deadline: Optional[datetime] = None  # None: never expires

    @field_validator("deadline")
    @classmethod
    def make_aware(cls, deadline: Optional[datetime]) -> Optional[datetime]:
        # naive deadlines are local time
        if deadline is None or deadline.tzinfo is not None:
            return deadline
        try:
            return deadline.astimezone()
        except (OverflowError, ValueError):
            # no local offset fits at the ends of the datetime range
            return deadline.replace(tzinfo=timezone.utc)

    def alive(self, now: datetime) -> bool:
        return self.deadline is None or self.deadline > now


class Lookup(NamedTuple):
    value: str
    found: bool


MISS = Lookup("", False)
