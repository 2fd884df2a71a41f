"""Resolve the signed-in user from the session."""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from userauth.models import User

logger = logging.getLogger(__name__)

# The only session key this service reads or writes.
SESSION_USER_KEY = "user_id"


class UserLookup(Protocol):
    def find_one(self, user_id: int | None) -> User | None: ...


def resolve_current_user(session: Mapping[str, Any] | None, users: UserLookup) -> User | None:
    """
    Return the user whose id is stored in the session, or None.

    Best-effort: a missing session, a falsy user id or an id that no longer
    resolves all yield None without raising. The directory is not queried
    when the session carries no user id.
    """
    user_id = (session or {}).get(SESSION_USER_KEY)
    if not user_id:
        return None
    user = users.find_one(user_id)
    if user is None:
        logger.debug("Session user_id=%s does not resolve to a user", user_id)
    return user
