"""
User repository interface (Abstract Base Class).

Defines the contract for user lookup independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod

from ..domain.entities import User


class IUserRepository(ABC):
    """
    Abstract repository interface for user lookups.

    Implementations must raise UserNotFoundException for unknown
    identifiers rather than returning None.
    """

    @abstractmethod
    def find_by_id(self, user_id: int) -> User:
        """
        Find user by identifier.

        Args:
            user_id: Identifier of the user

        Returns:
            User entity

        Raises:
            UserNotFoundException: If no user has this identifier
        """
        pass
