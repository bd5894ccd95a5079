"""Interface shared by key insertion filters."""

from typing import Any, Optional, Protocol

from ..models import GaenKey, OSType
from ..utc_instant import UTCInstant


class KeyInsertionFilter(Protocol):
    """
    Drops keys that must not be inserted.

    Filters never raise for a rejected key: they return the keys to keep, in
    their original order. OS/app context and principal are passed through for
    filters that need them.
    """

    def filter(
        self,
        now: UTCInstant,
        content: list[GaenKey],
        os_type: Optional[OSType] = None,
        os_version: Optional[str] = None,
        app_version: Optional[str] = None,
        principal: Any = None,
    ) -> list[GaenKey]: ...
