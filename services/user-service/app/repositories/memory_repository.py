"""
In-memory user repository.

Keeps users in a dict keyed by id. Suitable for tests and local runs;
a storage-backed repository would implement the same interface.
"""

from threading import Lock
from typing import Dict, Iterable, Optional

import structlog

from ..domain.entities import User
from ..domain.exceptions import UserNotFoundException
from .user_repository import IUserRepository

logger = structlog.get_logger(__name__)


class InMemoryUserRepository(IUserRepository):
    """
    Thread-safe in-memory implementation of IUserRepository.

    Ids are unique: saving a user whose id is already stored replaces it.
    """

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        """
        Initialize repository.

        Args:
            users: Users to store up front
        """
        self._users: Dict[int, User] = {}
        self._lock = Lock()
        for user in users or ():
            self.save(user)

    def save(self, user: User) -> User:
        """
        Save or replace a user.

        Args:
            user: User entity to store

        Returns:
            The stored user
        """
        with self._lock:
            if user.id in self._users:
                logger.debug("Replacing stored user", user_id=user.id)
            self._users[user.id] = user
        return user

    def find_by_id(self, user_id: int) -> User:
        """
        Find user by identifier.

        Args:
            user_id: Identifier of the user

        Returns:
            The stored user

        Raises:
            UserNotFoundException: If no user has this identifier
        """
        with self._lock:
            user = self._users.get(user_id)

        if user is None:
            logger.debug("User lookup miss", user_id=user_id)
            raise UserNotFoundException(user_id)
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users
