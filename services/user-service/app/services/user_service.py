"""
Business logic service layer.

Exposes user lookups to callers on top of an injected user repository.
"""

from ..domain.entities import User
from ..repositories.user_repository import IUserRepository


class UserService:
    """
    User service.

    Thin orchestration over an IUserRepository. Lookups are passed straight
    through: no caching, no retries, no error translation.
    """

    def __init__(self, repository: IUserRepository):
        """
        Initialize user service.

        Args:
            repository: Repository used for all user lookups
        """
        self.repository = repository

    def get_user_by_id(self, user_id: int) -> User:
        """
        Get user by identifier.

        Args:
            user_id: Identifier of the user

        Returns:
            The user returned by the repository, unchanged

        Raises:
            UserNotFoundException: If the repository has no such user
        """
        return self.repository.find_by_id(user_id)
