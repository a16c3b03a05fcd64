"""Barbers and users for local development, read from settings."""
from typing import List

from barber_ratings.config import settings
from barber_ratings.domain.entities.barber import Barber
from barber_ratings.domain.entities.user import User


def dev_barbers() -> List[Barber]:
    """Barbers listed in ``DEV_BARBERS``."""
    return [Barber(id=barber_id, name=name) for barber_id, name in settings.DEV_BARBERS.items()]


def dev_users() -> List[User]:
    """One user per principal in ``DEV_AUTH_TOKENS``."""
    users = {}
    for claims in settings.DEV_AUTH_TOKENS.values():
        uid = claims.get("uid")
        if uid:
            users[uid] = User(id=uid, phone_number=claims.get("phone_number"))
    return list(users.values())
