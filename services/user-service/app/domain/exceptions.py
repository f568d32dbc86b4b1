"""
Custom exceptions for the user service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.).
"""

from typing import Any, Optional


class UserServiceException(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UserNotFoundException(UserServiceException):
    """Raised when no user exists for the requested identifier."""

    def __init__(self, user_id: Any):
        self.user_id = user_id
        super().__init__(
            message=f"User not found: {user_id}", details={"user_id": user_id}
        )
