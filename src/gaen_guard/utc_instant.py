"""UTC instant with millisecond resolution and bucket discretization.

All temporal comparisons in gaen_guard go through UTCInstant so that no
code path ever compares raw epoch integers or local-time datetimes.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Union

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLIS_PER_DAY = 86_400_000


class GaenUnit(Enum):
    """Discretization units used by exposure notification keys."""

    TEN_MINUTES = 600_000
    HOURS = 3_600_000
    DAYS = _MILLIS_PER_DAY

    @property
    def millis(self) -> int:
        return self.value

    @property
    def duration(self) -> timedelta:
        return timedelta(milliseconds=self.value)


def _to_millis(delta: timedelta) -> int:
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


@dataclass(frozen=True, order=True)
class UTCInstant:
    """
    Immutable instant in UTC, stored as milliseconds since the Unix epoch.

    Invariants:
    - timestamp is an int (millisecond resolution, sub-millisecond input is truncated)
    - a day is always 24 hours (UTC has no DST)
    """

    timestamp: int

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, value: int, unit: GaenUnit) -> "UTCInstant":
        """Convert a bucket count in ``unit`` into an instant."""
        return cls(int(value) * unit.millis)

    @classmethod
    def of_epoch_millis(cls, millis: int) -> "UTCInstant":
        return cls(int(millis))

    @classmethod
    def now(cls) -> "UTCInstant":
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def today(cls) -> "UTCInstant":
        return cls.now().at_start_of_day()

    @classmethod
    def from_datetime(cls, value: datetime) -> "UTCInstant":
        """Naive datetimes are read as UTC, aware ones are converted."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls(_to_millis(value - _EPOCH))

    @classmethod
    def midnight_of(cls, day: date) -> "UTCInstant":
        return cls.from_datetime(datetime.combine(day, time.min, tzinfo=timezone.utc))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def get_timestamp(self) -> int:
        return self.timestamp

    def get(self, unit: GaenUnit) -> int:
        """Number of whole ``unit`` buckets since the epoch."""
        return self.timestamp // unit.millis

    def get_datetime(self) -> datetime:
        return _EPOCH + timedelta(milliseconds=self.timestamp)

    def get_local_date(self) -> date:
        return self.get_datetime().date()

    def at_start_of_day(self) -> "UTCInstant":
        return UTCInstant(self.timestamp - self.timestamp % _MILLIS_PER_DAY)

    def is_midnight(self) -> bool:
        return self.timestamp % _MILLIS_PER_DAY == 0

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def plus(self, delta: timedelta) -> "UTCInstant":
        return UTCInstant(self.timestamp + _to_millis(delta))

    def minus(self, delta: timedelta) -> "UTCInstant":
        return UTCInstant(self.timestamp - _to_millis(delta))

    def plus_days(self, days: int) -> "UTCInstant":
        return UTCInstant(self.timestamp + days * _MILLIS_PER_DAY)

    def minus_days(self, days: int) -> "UTCInstant":
        return self.plus_days(-days)

    def plus_hours(self, hours: int) -> "UTCInstant":
        return UTCInstant(self.timestamp + hours * GaenUnit.HOURS.millis)

    def minus_hours(self, hours: int) -> "UTCInstant":
        return self.plus_hours(-hours)

    def plus_minutes(self, minutes: int) -> "UTCInstant":
        return UTCInstant(self.timestamp + minutes * 60_000)

    def minus_minutes(self, minutes: int) -> "UTCInstant":
        return self.plus_minutes(-minutes)

    # ------------------------------------------------------------------
    # Date granularity comparisons
    # ------------------------------------------------------------------

    @staticmethod
    def _date_of(other: Union["UTCInstant", date]) -> date:
        if isinstance(other, UTCInstant):
            return other.get_local_date()
        if isinstance(other, datetime):
            return UTCInstant.from_datetime(other).get_local_date()
        return other

    def is_before_date_of(self, other: Union["UTCInstant", date]) -> bool:
        return self.get_local_date() < self._date_of(other)

    def is_after_date_of(self, other: Union["UTCInstant", date]) -> bool:
        return self.get_local_date() > self._date_of(other)

    def is_same_date(self, other: Union["UTCInstant", date]) -> bool:
        return self.get_local_date() == self._date_of(other)

    # ------------------------------------------------------------------
    # Millisecond granularity comparisons
    # ------------------------------------------------------------------

    def is_before_epoch_millis_of(self, other: "UTCInstant") -> bool:
        return self.timestamp < other.timestamp

    def is_after_epoch_millis_of(self, other: "UTCInstant") -> bool:
        return self.timestamp > other.timestamp

    def is_before_or_equal_epoch_millis_of(self, other: "UTCInstant") -> bool:
        return self.timestamp <= other.timestamp

    def is_after_or_equal_epoch_millis_of(self, other: "UTCInstant") -> bool:
        return self.timestamp >= other.timestamp

    def has_same_epoch_millis_as(self, other: "UTCInstant") -> bool:
        return self.timestamp == other.timestamp

    def __str__(self) -> str:
        dt = self.get_datetime()
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
