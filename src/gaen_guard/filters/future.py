"""Reject keys whose rolling start lies too far in the future."""

from typing import Any, Optional

from loguru import logger

from ..models import GaenKey, OSType
from ..utc_instant import UTCInstant

# Keys dated on or after now + MAX_DAYS_AHEAD (calendar date) are dropped
MAX_DAYS_AHEAD = 2


class RemoveKeysFromFuture:
    """
    Keep only keys whose rolling start date is before the date of now + 2 days.

    The comparison is on calendar dates: any key from tomorrow is kept, any
    key from the day after tomorrow is dropped, whatever its time of day.
    """

    def filter(
        self,
        now: UTCInstant,
        content: list[GaenKey],
        os_type: Optional[OSType] = None,
        os_version: Optional[str] = None,
        app_version: Optional[str] = None,
        principal: Any = None,
    ) -> list[GaenKey]:
        limit = now.plus_days(MAX_DAYS_AHEAD)
        kept = [
            key for key in content if key.rolling_start_instant().is_before_date_of(limit)
        ]

        dropped = len(content) - len(kept)
        if dropped:
            logger.debug(
                f"Dropped {dropped}/{len(content)} keys dated on or after "
                f"{limit.get_local_date()}"
            )
        return kept


FutureKeyFilter = RemoveKeysFromFuture
