"""
Temporal validation of upload requests.

TemporalValidator bundles the checks an upload endpoint runs on the
request-level fields of a key submission:
- key format (base64, expected length)
- retention window of timestamps and key dates
- batch release time alignment on the release bucket grid
- delayed key date claim extraction and plausibility
- fake (decoy) request detection

The validator holds only its frozen ValidationConfig and is safe to share
between concurrent request handlers.
"""

import base64
import binascii
import hmac
import re
from datetime import timedelta
from typing import Any

from loguru import logger

from .claims import ClaimsPrincipal
from .config import ValidationConfig
from .errors import DelayedKeyDateClaimMissing, DelayedKeyDateInvalid, InvalidBatchBoundary
from .utc_instant import GaenUnit, UTCInstant

DELAYED_KEY_DATE_CLAIM = "delayedKeyDate"
FAKE_CLAIM = "fake"
FAKE_CLAIM_VALUE = b"1"

_INT_CLAIM = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1


def _parse_int_claim(name: str, value: Any) -> int:
    """Parse a 32 bit integer claim; no whitespace, underscores or non-ASCII digits."""
    if not isinstance(value, str) or not _INT_CLAIM.fullmatch(value):
        raise ValueError(f"claim {name} is not an integer: {value!r}")
    parsed = int(value)
    if not _INT32_MIN <= parsed <= _INT32_MAX:
        raise ValueError(f"claim {name} out of 32 bit range: {value!r}")
    return parsed


class TemporalValidator:
    """Checks timestamps, key dates and credential claims of upload requests."""

    def __init__(self, config: ValidationConfig):
        """
        Initialize the validator with the parameters in use.

        Args:
            config: expected key length, retention period and the release
                bucket duration (ms) that batch release times must align to
        """
        self.config = config

    def is_valid_key_format(self, value: Any) -> bool:
        """
        Check that ``value`` is standard base64 of exactly key_length_bytes bytes.

        Unpadded input is accepted, broken padding is not. Malformed input
        yields False. Nothing is logged here: invalid keys are routine on a
        public endpoint and must look like any other rejection.
        """
        if isinstance(value, str) and "=" not in value:
            value += "=" * (-len(value) % 4)
        try:
            key = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError, TypeError):
            return False
        return len(key) == self.config.key_length_bytes

    def is_date_in_range(self, timestamp: UTCInstant, now: UTCInstant) -> bool:
        """
        Check if ``timestamp`` lies in [now - retention_period, now).

        Both ends are compared at millisecond resolution; the retention edge
        itself is accepted, ``now`` is not.
        """
        retention = now.minus(self.config.retention_period)
        return timestamp.is_after_or_equal_epoch_millis_of(retention) and (
            timestamp.is_before_epoch_millis_of(now)
        )

    def is_before_retention(self, timestamp: UTCInstant, now: UTCInstant) -> bool:
        """Date-only check: is ``timestamp`` older than the retention window."""
        return timestamp.is_before_date_of(now.minus(self.config.retention_period))

    def is_valid_key_date(self, key_date: UTCInstant) -> bool:
        """Key dates must be exactly midnight UTC."""
        return key_date.is_midnight()

    def is_valid_batch_release_time(
        self, batch_release_time: UTCInstant, now: UTCInstant
    ) -> bool:
        """
        Check that a batch release time is on the grid and inside the retention window.

        Args:
            batch_release_time: start of the requested batch
            now: current server time

        Returns:
            True if the batch release time is in range

        Raises:
            InvalidBatchBoundary: if batch_release_time is not a multiple of
                the release bucket duration
        """
        if batch_release_time.get_timestamp() % self.config.release_bucket_duration != 0:
            logger.warning(
                f"Batch release time {batch_release_time.get_timestamp()} is not aligned "
                f"to {self.config.release_bucket_duration} ms buckets"
            )
            raise InvalidBatchBoundary(
                f"batch release time {batch_release_time} is not a multiple of "
                f"{self.config.release_bucket_duration} ms"
            )
        return self.is_date_in_range(batch_release_time, now)

    def assert_delayed_key_date(self, now: UTCInstant, delayed_key_date: UTCInstant) -> None:
        """
        Reject delayed key dates more than one day away from today.

        Raises:
            DelayedKeyDateInvalid: if the date of delayed_key_date is outside
                [today - 1 day, today + 1 day]
        """
        today = now.get_local_date()
        earliest = today - timedelta(days=1)
        latest = today + timedelta(days=1)
        if delayed_key_date.is_before_date_of(earliest) or delayed_key_date.is_after_date_of(latest):
            logger.warning(
                f"Delayed key date {delayed_key_date.get_local_date()} outside "
                f"+/- 1 day of {today}"
            )
            raise DelayedKeyDateInvalid(
                f"delayed key date {delayed_key_date.get_local_date()} is not within "
                f"one day of {today}"
            )

    def get_delayed_key_date_claim(self, principal: Any) -> UTCInstant:
        """
        Read the delayedKeyDate claim (ten-minute buckets) as an instant.

        A claim that is present but null or not a 32 bit integer raises
        ValueError: the token issuer is broken, which is not a normal rejection.

        Raises:
            DelayedKeyDateClaimMissing: if the principal has no such claim
        """
        if isinstance(principal, ClaimsPrincipal) and principal.has_claim(
            DELAYED_KEY_DATE_CLAIM
        ):
            value = principal.get_claim_as_string(DELAYED_KEY_DATE_CLAIM)
            bucket = _parse_int_claim(DELAYED_KEY_DATE_CLAIM, value)
            return UTCInstant.of(bucket, GaenUnit.TEN_MINUTES)
        logger.warning(f"Principal carries no {DELAYED_KEY_DATE_CLAIM} claim")
        raise DelayedKeyDateClaimMissing(f"missing {DELAYED_KEY_DATE_CLAIM} claim")

    def jwt_is_fake(self, principal: Any) -> bool:
        """
        Check whether the request is a decoy (claim fake is the string "1").

        Non-string values such as the number 1 are not decoys. The claim is read and compared the same way whatever its value, so
        the time spent here does not reveal the outcome.
        """
        value = None
        if isinstance(principal, ClaimsPrincipal) and principal.has_claim(FAKE_CLAIM):
            value = principal.get_claim(FAKE_CLAIM)
        if not isinstance(value, str):
            value = ""
        return hmac.compare_digest(value.encode(), FAKE_CLAIM_VALUE)
