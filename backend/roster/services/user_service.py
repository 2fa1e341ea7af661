"""
Roster Backend — User Service (In-Memory Store)
=================================================

What:  Owns the ordered collection of user records and its CRUD operations.
How:   A plain Python list scanned linearly; ids are derived from the
       current maximum. Nothing is persisted; the list lives as long as the
       UserService instance.
Who:   Created once per application by create_app() and handed to route
       handlers through a FastAPI dependency.

Operation summary:
    list()            → every record, insertion order
    get(id)           → record or None (never raises)
    create(request)   → new record with id = max(ids) + 1, or 1 if empty
    update(id, patch) → mutates supplied fields in place; NotFoundError if absent
    delete(id)        → drops the record; unknown id is a silent no-op

Thread Safety:
    Mutations run under a single threading.Lock. Route handlers are async
    and run on one event loop, so the lock only matters when the store is
    shared with threaded callers.
"""

import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from roster.exceptions import NotFoundError
from roster.models.user import Role, User
from roster.schemas.user import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)


# Records every default store starts with
SEED_USERS = (
    User(id=1, name="Tyler", age=26, role=Role.TEACHER),
    User(id=2, name="John", age=33, role=Role.STUDENT),
    User(id=3, name="Stan", age=50, role=Role.ADMIN),
)


class UserService:
    """
    In-memory user store.

    Args:
        seed: Records to start with. Defaults to SEED_USERS; pass an empty
              iterable for an empty store. Records are copied so two stores
              never share a record instance.

    Invariants:
        - ids are pairwise distinct
        - a record returned by list()/get()/create() is the instance that a
          later update() mutates
    """

    def __init__(self, seed: Optional[Iterable[User]] = None):
        records = SEED_USERS if seed is None else seed
        self._users: List[User] = [replace(user) for user in records]
        self._lock = threading.Lock()

    def list(self) -> List[User]:
        """Return every record in insertion order (a new list, same records)."""
        return list(self._users)

    def get(self, user_id: int) -> Optional[User]:
        """Return the record with the given id, or None if there is none."""
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def create(self, request: CreateUserRequest) -> User:
        """
        Append a new record built from a validated create request.

        Id policy: one more than the largest id in the store, or 1 when the
        store is empty. Ids of deleted records at the top of the range are
        therefore reused; ids below the maximum never are.
        """
        with self._lock:
            next_id = max((user.id for user in self._users), default=0) + 1
            user = User(
                id=next_id,
                name=request.name,
                age=request.age,
                role=request.role,
            )
            self._users.append(user)

        logger.info("Created user %d (%s, %s)", user.id, user.name, user.role.value)
        return user

    def update(self, user_id: int, patch: UpdateUserRequest) -> User:
        """
        Apply a patch to an existing record in place.

        Only fields supplied with a non-null value are written; the others
        keep their current values. The existence check runs before any
        field is touched, so a failed update changes nothing.

        Raises:
            NotFoundError: No record has this id.
        """
        changes = patch.changes()
        with self._lock:
            user = self.get(user_id)
            if user is None:
                logger.warning("Update rejected: user %d not found", user_id)
                raise NotFoundError(resource_id=user_id)

            for field, value in changes.items():
                setattr(user, field, value)

        logger.info("Updated user %d: %s", user_id, sorted(changes) or "no changes")
        return user

    def delete(self, user_id: int) -> None:
        """
        Remove the record with the given id.

        Unlike update(), an unknown id is not an error: the store is left
        unchanged and nothing is raised. Deleting twice equals deleting once.
        """
        with self._lock:
            remaining = [user for user in self._users if user.id != user_id]
            removed = len(self._users) - len(remaining)
            self._users = remaining

        if removed:
            logger.info("Deleted user %d", user_id)
        else:
            logger.debug("Delete ignored: user %d not found", user_id)

    def __len__(self) -> int:
        return len(self._users)
