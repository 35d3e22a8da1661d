"""Users API service.

:class:`UsersService` is the handle the HTTP layer talks to.  It owns the
loaded configuration and the :class:`~apps.users_api.store.UserStore`, and it
decodes request bodies into :class:`~lib.contracts.user.User` records.  The
HTTP app receives the handle explicitly so tests can build one with fresh
state instead of sharing the module level instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from lib.config.users_api_loader import ServiceConfig, load_service_config, parse_service_config
from lib.contracts.user import User
from lib.telemetry.logger import get_logger
from lib.utils.validation import decode_user

from .store import UserNotFound, UserStore


logger = get_logger(__name__)


@dataclass
class UsersService:
    """Configuration plus the user collection.

    Parameters
    ----------
    config: optional :class:`ServiceConfig` or raw mapping.  When omitted the
        file at ``config_path`` is loaded if it exists, otherwise defaults
        apply.
    store: optional pre-built store.  When omitted one is seeded from the
        configuration.
    """

    config: ServiceConfig | dict | None = field(default=None)
    config_path: str = "config/users_api.yaml"
    store: Optional[UserStore] = field(default=None)

    def __post_init__(self) -> None:
        if self.config is None and Path(self.config_path).exists():
            self.config = load_service_config(self.config_path)
        if isinstance(self.config, dict):
            self.config = parse_service_config(self.config)
        if self.config is None:
            self.config = ServiceConfig()
        if self.store is None:
            self.store = UserStore(self.config.seed_users)

    def decode(self, raw: bytes) -> User:
        return decode_user(raw)

    def list_users(self) -> List[User]:
        return self.store.list_users()

    def get_user(self, user_id: str) -> User:
        return self.store.get(user_id)

    def create_user(self, raw: bytes) -> User:
        user = self.store.create(self.decode(raw))
        logger.info("created user id=%r", user.id)
        return user

    def update_user(self, user_id: str, raw: bytes) -> User:
        """Decode ``raw`` and replace the first record with ``user_id``.

        The body is decoded before the lookup, so a bad body is reported even
        when the id does not exist.
        """

        user = self.store.update(user_id, self.decode(raw))
        logger.info("updated user id=%r (now id=%r)", user_id, user.id)
        return user

    def delete_user(self, user_id: str) -> User:
        user = self.store.delete(user_id)
        logger.info("deleted user id=%r", user_id)
        return user


__all__ = ["UserNotFound", "UsersService"]
