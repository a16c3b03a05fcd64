"""Shared dependencies for API endpoints."""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException

from barber_ratings.application.ports.identity import Principal, TokenVerifier
from barber_ratings.config import settings
from barber_ratings.infrastructure.identity.static_token_verifier import StaticTokenVerifier


@lru_cache()
def get_token_verifier() -> TokenVerifier:
    """Get the configured token verifier."""
    return StaticTokenVerifier.from_config(settings.DEV_AUTH_TOKENS)


async def get_current_principal(
    authorization: Optional[str] = Header(None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Principal:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header.

    Raises:
        HTTPException: 403 if no token is sent, 401 if the token is unknown

    Returns:
        Principal: the authenticated caller
    """
    parts = (authorization or "").split()
    token = parts[1] if len(parts) == 2 and parts[0].lower() == "bearer" else None
    if not token:
        raise HTTPException(status_code=403, detail="No token provided")

    principal = await verifier.verify(token)
    if principal is None:
        raise HTTPException(status_code=401, detail="Invalid token")

    return principal
