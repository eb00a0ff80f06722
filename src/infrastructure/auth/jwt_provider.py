"""JWT authentication provider implementation.

Supports tokens issued by an external identity provider (RS256/ES256,
verified against its JWKS endpoint) and locally-created tokens (HS256,
shared secret, used by tests and service-to-service calls).

Expected payload:
    {
        "sub": "00uhjfrwdWAQvD8JV4x6",
        "email": "frank@example.com",
        "name": "Frank Martinez",
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional

import httpx
from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)

ASYMMETRIC_ALGORITHMS = frozenset({"RS256", "RS384", "RS512", "ES256", "ES384"})

# Module-level JWKS cache (fetched once, reused across requests)
_jwks_cache: dict[str, Any] | None = None


async def _get_jwks_keys() -> dict[str, Any]:
    """Fetch and cache the identity provider's signing keys by kid."""
    global _jwks_cache
    if _jwks_cache is not None:
        return _jwks_cache

    jwks_url = settings.auth_jwks_url
    if not jwks_url:
        return {}

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(jwks_url, timeout=10.0)
            response.raise_for_status()
            jwks_data = response.json()
    except httpx.HTTPError:
        logger.exception("Failed to fetch JWKS from %s", jwks_url)
        return {}

    _jwks_cache = {
        key_data["kid"]: key_data
        for key_data in jwks_data.get("keys", [])
        if key_data.get("kid")
    }
    logger.info("Fetched %d JWKS keys from %s", len(_jwks_cache), jwks_url)
    return _jwks_cache


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        audience: str = settings.auth_audience,
        issuer: str = settings.auth_issuer,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._audience = audience or None
        self._issuer = issuer or None

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract user info.

        The signing algorithm is read from the token header: asymmetric
        tokens are checked against the JWKS key named by ``kid``, anything
        else against the shared secret with the configured algorithm.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            header = jwt.get_unverified_header(token)
            alg = header.get("alg", self._algorithm)

            if alg in ASYMMETRIC_ALGORITHMS:
                payload = await self._validate_with_jwks(token, header, alg)
            else:
                payload = self._decode(token, self._secret_key, self._algorithm)

            if payload is None:
                return None

            subject = payload.get("sub")
            if not subject:
                return None

            return TokenUser(
                id=str(subject),
                email=payload.get("email"),
                name=payload.get("name"),
                role=payload.get("role"),
            )

        except JWTError:
            return None

    async def _validate_with_jwks(
        self, token: str, header: dict, alg: str
    ) -> Optional[dict]:
        """Validate an asymmetrically signed JWT using JWKS public keys."""
        kid = header.get("kid")
        if not kid:
            return None

        jwks_keys = await _get_jwks_keys()
        key_data = jwks_keys.get(kid)
        if not key_data:
            # Unknown kid: the provider may have rotated keys
            global _jwks_cache
            _jwks_cache = None
            jwks_keys = await _get_jwks_keys()
            key_data = jwks_keys.get(kid)
            if not key_data:
                logger.warning("JWKS key not found for kid=%s", kid)
                return None

        return self._decode(token, key_data, alg)

    def _decode(self, token: str, key: Any, alg: str) -> dict:
        return jwt.decode(
            token,
            key,
            algorithms=[alg],
            audience=self._audience,
            issuer=self._issuer,
            options={"verify_aud": self._audience is not None},
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create an HS256 JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "sub": user.id,
            "email": user.email,
            "name": user.name,
            "exp": expire,
        }
        if self._audience:
            payload["aud"] = self._audience
        if self._issuer:
            payload["iss"] = self._issuer
        if user.role:
            payload["role"] = user.role

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
