"""Centralized configuration for gaen_guard."""

import os
from dataclasses import dataclass
from datetime import timedelta


def _env_int(name: str, default: str) -> int:
    """Parse an integer environment variable, naming it on failure."""
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"Invalid {name} environment variable: {e}")


class Config:
    """
    Upload validation configuration with environment variable overrides.

    Values are read once at import time. Use ValidationConfig.from_config()
    to freeze them into the object handed to TemporalValidator.
    """

    # ========================================================================
    # Key Format
    # ========================================================================
    KEY_LENGTH_BYTES: int = _env_int("KEY_LENGTH_BYTES", "16")

    # ========================================================================
    # Retention
    # ========================================================================
    RETENTION_DAYS: int = _env_int("RETENTION_DAYS", "14")

    # ========================================================================
    # Batch Release Grid
    # ========================================================================
    RELEASE_BUCKET_DURATION_MS: int = _env_int("RELEASE_BUCKET_DURATION_MS", "7200000")  # 2h

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration consistency.

        Checks:
        - All values are > 0
        - The release bucket grid divides a day evenly (warning only)

        Returns:
            True if validation passes

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if cls.KEY_LENGTH_BYTES <= 0:
            errors.append(f"KEY_LENGTH_BYTES must be > 0, got {cls.KEY_LENGTH_BYTES}")

        if cls.RETENTION_DAYS <= 0:
            errors.append(f"RETENTION_DAYS must be > 0, got {cls.RETENTION_DAYS}")

        if cls.RELEASE_BUCKET_DURATION_MS <= 0:
            errors.append(
                f"RELEASE_BUCKET_DURATION_MS must be > 0, got {cls.RELEASE_BUCKET_DURATION_MS}"
            )
        elif 86_400_000 % cls.RELEASE_BUCKET_DURATION_MS != 0:
            import warnings

            warnings.warn(
                f"RELEASE_BUCKET_DURATION_MS={cls.RELEASE_BUCKET_DURATION_MS} does not "
                "divide a day evenly; batch boundaries will drift against midnight."
            )

        if errors:
            raise ValueError(f"Config validation failed: {'; '.join(errors)}")

        return True


@dataclass(frozen=True)
class ValidationConfig:
    """
    Immutable parameters of TemporalValidator, built once at startup.

    Invariants:
    - key_length_bytes > 0
    - retention_period > 0
    - release_bucket_duration > 0 (milliseconds)
    """

    key_length_bytes: int
    retention_period: timedelta
    release_bucket_duration: int

    def __post_init__(self):
        if self.key_length_bytes <= 0:
            raise ValueError(f"key_length_bytes must be > 0, got {self.key_length_bytes}")
        if self.retention_period <= timedelta(0):
            raise ValueError(f"retention_period must be > 0, got {self.retention_period}")
        if self.release_bucket_duration <= 0:
            raise ValueError(
                f"release_bucket_duration must be > 0, got {self.release_bucket_duration}"
            )

    @classmethod
    def from_config(cls) -> "ValidationConfig":
        Config.validate()
        return cls(
            key_length_bytes=Config.KEY_LENGTH_BYTES,
            retention_period=timedelta(days=Config.RETENTION_DAYS),
            release_bucket_duration=Config.RELEASE_BUCKET_DURATION_MS,
        )
