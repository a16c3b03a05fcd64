"""Token verifier backed by a fixed token table (local development and tests)."""
import logging
from typing import Dict, Mapping, Optional

from barber_ratings.application.ports.identity import Principal

logger = logging.getLogger(__name__)


class StaticTokenVerifier:
    """Resolves bearer tokens from a configured token -> principal table."""

    def __init__(self, principals: Mapping[str, Principal]):
        self._principals: Dict[str, Principal] = dict(principals)

    @classmethod
    def from_config(cls, tokens: Mapping[str, Mapping[str, str]]) -> "StaticTokenVerifier":
        """Build from ``{"token": {"uid": ..., "phone_number": ...}}``."""
        principals = {}
        for token, claims in tokens.items():
            uid = claims.get("uid")
            if not uid:
                logger.warning("Skipping configured auth token without a uid")
                continue
            principals[token] = Principal(uid=uid, phone_number=claims.get("phone_number"))
        return cls(principals)

    async def verify(self, token: str) -> Optional[Principal]:
        return self._principals.get(token)
