"""User domain entity - the party giving a rating."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """User domain entity."""
    id: str
    phone_number: Optional[str] = None
    name: Optional[str] = None
