"""Pytest fixtures and test utilities for the gaen_guard test suite."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest

from gaen_guard.config import ValidationConfig
from gaen_guard.models import GaenKey
from gaen_guard.utc_instant import GaenUnit, UTCInstant
from gaen_guard.validation import TemporalValidator


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================


@pytest.fixture
def validation_config():
    """16 byte keys, 14 day retention, 2h release buckets."""
    return ValidationConfig(
        key_length_bytes=16,
        retention_period=timedelta(days=14),
        release_bucket_duration=7_200_000,
    )


@pytest.fixture
def validator(validation_config):
    return TemporalValidator(validation_config)


# ============================================================================
# TIME FIXTURES
# ============================================================================


@pytest.fixture
def now():
    """Fixed server time: 2021-06-15T13:37:00Z."""
    return UTCInstant.from_datetime(datetime(2021, 6, 15, 13, 37, tzinfo=timezone.utc))


def at(*args: int) -> UTCInstant:
    """Build a UTCInstant from datetime components (UTC)."""
    return UTCInstant.from_datetime(datetime(*args, tzinfo=timezone.utc))


def key_at(instant: UTCInstant, key_data: str = "AAAAAAAAAAAAAAAAAAAAAA==") -> GaenKey:
    return GaenKey(
        key_data=key_data,
        rolling_start_number=instant.get(GaenUnit.TEN_MINUTES),
    )


# ============================================================================
# PRINCIPAL DOUBLES
# ============================================================================


class StubPrincipal:
    """Minimal ClaimsPrincipal that records which claims were read."""

    def __init__(self, claims: Optional[dict[str, Any]] = None):
        self.claims = claims or {}
        self.reads: list[str] = []

    def has_claim(self, name: str) -> bool:
        return name in self.claims

    def get_claim(self, name: str) -> Any:
        self.reads.append(name)
        return self.claims.get(name)

    def get_claim_as_string(self, name: str) -> Optional[str]:
        self.reads.append(name)
        value = self.claims.get(name)
        return None if value is None else str(value)
