"""Error taxonomy shared by every temporal check.

All kinds are permanent client errors: the request handler catches them and
answers with a rejection. None of them is retryable.
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Why a request was rejected by a temporal check."""

    INVALID_BATCH_BOUNDARY = "invalid_batch_boundary"
    DELAYED_KEY_DATE_INVALID = "delayed_key_date_invalid"
    DELAYED_KEY_DATE_CLAIM_MISSING = "delayed_key_date_claim_missing"


class TemporalValidationError(Exception):
    """Base class for rejections raised by TemporalValidator."""

    kind: ValidationErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)
        self.message = message or self.kind.value


class InvalidBatchBoundary(TemporalValidationError):
    """Batch release time is not aligned to the release bucket grid."""

    kind = ValidationErrorKind.INVALID_BATCH_BOUNDARY


class DelayedKeyDateInvalid(TemporalValidationError):
    """Delayed key date lies outside the +/- 1 day window around server time."""

    kind = ValidationErrorKind.DELAYED_KEY_DATE_INVALID


class DelayedKeyDateClaimMissing(TemporalValidationError):
    """Principal carries no delayedKeyDate claim."""

    kind = ValidationErrorKind.DELAYED_KEY_DATE_CLAIM_MISSING
