"""gaen_guard - temporal validation and filtering of uploaded exposure keys."""

__version__ = "0.1.0"

from .claims import ClaimSet, ClaimsPrincipal, claims_from_jwt
from .config import Config, ValidationConfig
from .errors import (
    DelayedKeyDateClaimMissing,
    DelayedKeyDateInvalid,
    InvalidBatchBoundary,
    TemporalValidationError,
    ValidationErrorKind,
)
from .filters import FutureKeyFilter, KeyInsertionFilter, RemoveKeysFromFuture
from .models import GaenKey, OSType
from .utc_instant import GaenUnit, UTCInstant
from .validation import TemporalValidator

__all__ = [
    "ClaimSet",
    "ClaimsPrincipal",
    "claims_from_jwt",
    "Config",
    "ValidationConfig",
    "TemporalValidationError",
    "ValidationErrorKind",
    "InvalidBatchBoundary",
    "DelayedKeyDateInvalid",
    "DelayedKeyDateClaimMissing",
    "FutureKeyFilter",
    "KeyInsertionFilter",
    "RemoveKeysFromFuture",
    "GaenKey",
    "OSType",
    "GaenUnit",
    "UTCInstant",
    "TemporalValidator",
    "__version__",
]
