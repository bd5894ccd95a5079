"""Claim access for already-authenticated upload credentials.

Only claim *extraction* happens here. Signature and issuer trust are checked
by the authentication layer before a principal reaches this package.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

import jwt
from loguru import logger


@runtime_checkable
class ClaimsPrincipal(Protocol):
    """Anything that can answer claim lookups."""

    def has_claim(self, name: str) -> bool: ...

    def get_claim(self, name: str) -> Any: ...

    def get_claim_as_string(self, name: str) -> Optional[str]: ...


class ClaimSet:
    """Read-only ClaimsPrincipal backed by a decoded token payload."""

    def __init__(self, claims: Mapping[str, Any]):
        self._claims = MappingProxyType(dict(claims))

    def has_claim(self, name: str) -> bool:
        return name in self._claims

    def get_claim(self, name: str) -> Any:
        return self._claims.get(name)

    def get_claim_as_string(self, name: str) -> Optional[str]:
        value = self._claims.get(name)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    @property
    def claims(self) -> Mapping[str, Any]:
        return self._claims

    def __repr__(self) -> str:
        return f"ClaimSet({sorted(self._claims)})"


def claims_from_jwt(token: str) -> Optional[ClaimSet]:
    """
    Extract the payload of a JWT WITHOUT verifying it.

    The caller must have verified the token already. Never use this on a
    token that did not pass the authentication layer.

    Args:
        token: Compact-serialized JWT

    Returns:
        ClaimSet with the payload claims, or None if the token cannot be parsed
    """
    if not token:
        return None

    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError as e:
        logger.warning(f"JWT claim extraction failed: {e}")
        return None

    return ClaimSet(payload)
