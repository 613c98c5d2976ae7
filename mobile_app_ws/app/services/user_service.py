"""
Business logic for users held in memory.

The ``UserService`` stores records in a dictionary that lives as long
as the service instance (normally the process).  Keys are the string
form of the user id, which is how the ``/users`` routes address
records.  A lock serialises every operation so concurrent requests do
not interleave their read‑modify‑write steps.
"""

import logging
import threading
from typing import Dict, List, Optional

from ..core.ids import generate_user_id
from ..schemas.user import UpdateUserDetailsRequestModel, UserDetailsRequestModel, UserRest

logger = logging.getLogger(__name__)


class UserService:
    """In‑memory user store."""

    def __init__(self, users: Optional[Dict[str, UserRest]] = None) -> None:
        self._users: Dict[str, UserRest] = users if users is not None else {}
        self._lock = threading.Lock()

    async def create_user(self, details: UserDetailsRequestModel) -> UserRest:
        """Copy ``details`` into a new record with a freshly generated id."""
        with self._lock:
            user_id = generate_user_id(exists=lambda candidate: str(candidate) in self._users)
            user = UserRest.from_details(details, user_id=user_id)
            self._users[str(user_id)] = user
        logger.info("Created user %s", user_id)
        return user

    async def get_user(self, user_id: str) -> Optional[UserRest]:
        with self._lock:
            return self._users.get(user_id)

    async def update_user(
        self, user_id: str, details: UpdateUserDetailsRequestModel
    ) -> Optional[UserRest]:
        """Overwrite the names of an existing user.

        Returns ``None`` if no record is stored under ``user_id``.
        """
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                return None
            updated = existing.with_names(details)
            self._users[user_id] = updated
        logger.info("Updated user %s", user_id)
        return updated

    async def delete_user(self, user_id: str) -> bool:
        """Remove a user; returns whether a record was actually removed."""
        with self._lock:
            removed = self._users.pop(user_id, None) is not None
        if removed:
            logger.info("Deleted user %s", user_id)
        return removed

    async def list_users(self, page: int = 1, limit: int = 50) -> List[UserRest]:
        """Return every stored user.

        ``page`` and ``limit`` are accepted for interface parity with
        the persisted variant but do not slice the result.
        """
        logger.debug("Listing users (page=%s, limit=%s)", page, limit)
        with self._lock:
            return list(self._users.values())
