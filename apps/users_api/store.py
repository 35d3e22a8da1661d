"""In-memory user collection backing the users API.

Records are kept in insertion order and looked up by a linear scan where the
first record with a matching ``id`` wins.  Duplicate ids are allowed, so an
index keyed by id would change which record an operation sees.
"""

from __future__ import annotations

import threading
from typing import Any, Iterable, List, Optional

from lib.config.users_api_loader import DEFAULT_SEED_USERS
from lib.contracts.user import User


class UserNotFound(LookupError):
    """No record in the collection carries the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__(user_id)
        self.user_id = user_id


def _seed_records(seed: Optional[Iterable[Any]]) -> List[User]:
    items = DEFAULT_SEED_USERS if seed is None else seed
    return [u if isinstance(u, User) else User.model_validate(u) for u in items]


class UserStore:
    """Ordered collection of :class:`User` records.

    Each operation runs under one lock so a scan and the mutation that follows
    it cannot interleave with another request.
    """

    def __init__(self, seed: Optional[Iterable[Any]] = None) -> None:
        self._seed: List[User] = _seed_records(seed)
        self._users: List[User] = list(self._seed)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: str) -> int:
        for i, user in enumerate(self._users):
            if user.id == user_id:
                return i
        raise UserNotFound(user_id)

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def get(self, user_id: str) -> User:
        with self._lock:
            return self._users[self._index_of(user_id)]

    def create(self, user: User) -> User:
        with self._lock:
            self._users.append(user)
        return user

    def update(self, user_id: str, user: User) -> User:
        """Replace the whole record found under ``user_id``.

        The replacement keeps whatever ``id`` it carries, so the slot may end
        up re-keyed.
        """

        with self._lock:
            self._users[self._index_of(user_id)] = user
        return user

    def delete(self, user_id: str) -> User:
        with self._lock:
            return self._users.pop(self._index_of(user_id))

    def reset(self, seed: Optional[Iterable[Any]] = None) -> None:
        """Restore the seed contents, or replace them with ``seed``."""

        records = self._seed if seed is None else _seed_records(seed)
        with self._lock:
            self._seed = records
            self._users = list(records)


__all__ = ["UserNotFound", "UserStore"]
