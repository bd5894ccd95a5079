"""Data models for uploaded exposure keys."""

from dataclasses import dataclass
from enum import Enum

from .utc_instant import GaenUnit, UTCInstant

# 144 ten-minute buckets make one day
DEFAULT_ROLLING_PERIOD = 144


class OSType(str, Enum):
    """Operating system of the uploading client."""

    ANDROID = "android"
    IOS = "ios"


@dataclass(frozen=True)
class GaenKey:
    """
    Temporary exposure key as submitted by a mobile client.

    Only rolling_start_number is interpreted by the temporal checks; the other
    fields belong to the upload pipeline and are carried through untouched.
    """

    key_data: str  # base64 encoded key material
    rolling_start_number: int  # ten-minute buckets since epoch
    rolling_period: int = DEFAULT_ROLLING_PERIOD
    transmission_risk_level: int = 0
    fake: int = 0

    def rolling_start_instant(self) -> UTCInstant:
        return UTCInstant.of(self.rolling_start_number, GaenUnit.TEN_MINUTES)
