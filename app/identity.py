"""
Caller identity lookup.

Resolves the identifier of the authenticated requester from a bearer token.
Token issuance happens elsewhere; this module only verifies tokens and reads
the subject claim.
"""

import logging
from typing import Optional

from jose import JWTError, jwt

from app.config import settings

logger = logging.getLogger("recetarre.identity")


def decode_token(token: str) -> Optional[dict]:
    """
    Verify and decode a bearer token.

    Args:
        token: encoded JWT

    Returns:
        Claims mapping, or None if the token is invalid, expired or signed
        with another key
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except JWTError as e:
        logger.warning(f"token_rejected error={e}")
        return None


def resolve_caller_identity(token: Optional[str]) -> Optional[str]:
    """Return the caller identifier carried by the token, or None when unresolved."""
    if not token:
        return None

    payload = decode_token(token)
    if not payload:
        return None

    subject = payload.get("sub")
    if not subject:
        logger.warning("token_rejected error=missing subject claim")
        return None
    return str(subject)
