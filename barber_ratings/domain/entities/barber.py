"""Barber domain entity - the party being rated."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Barber:
    """Barber domain entity."""
    id: str
    name: Optional[str] = None
