"""Identity provider interface.

The rating service never verifies credentials itself; write endpoints ask a
verifier for the principal behind a bearer token and trust its uid as given.
"""
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class Principal:
    """Authenticated caller."""
    uid: str
    phone_number: Optional[str] = None


class TokenVerifier(Protocol):
    async def verify(self, token: str) -> Optional[Principal]:
        """Return the principal for ``token``, or None when it is not valid."""
