"""
User identifier generation.

Identifiers are signed 64‑bit integers drawn at random.  Callers that
own a store pass an ``exists`` predicate so a draw that collides with
a stored record is discarded.
"""

import random
from typing import Callable, Optional

from .exceptions import UserServiceException

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
MAX_ATTEMPTS = 16

_random = random.SystemRandom()


def generate_user_id(exists: Optional[Callable[[int], bool]] = None) -> int:
    """Return a non‑zero signed 64‑bit identifier.

    Zero is reserved to mean "not assigned".  If ``exists`` reports a
    collision ``MAX_ATTEMPTS`` times in a row a ``UserServiceException``
    is raised.
    """
    for _ in range(MAX_ATTEMPTS):
        candidate = _random.randint(INT64_MIN, INT64_MAX)
        if candidate == 0:
            continue
        if exists is not None and exists(candidate):
            continue
        return candidate
    raise UserServiceException("Could not generate a unique user id")
