"""
Shared dependencies for the application.

Holds the process-wide user service instance built at startup.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .services.user_service import UserService

# Global service instance (set by main.create_user_service)
_user_service: Optional["UserService"] = None


def set_user_service(service: "UserService") -> None:
    """
    Set the global user service instance.

    Called during startup.
    """
    global _user_service
    _user_service = service


def get_user_service() -> "UserService":
    """
    Get the user service instance.

    Raises:
        RuntimeError: If startup has not registered a service yet
    """
    if _user_service is None:
        raise RuntimeError("User service not initialized")
    return _user_service


def reset_user_service() -> None:
    """Forget the registered service."""
    global _user_service
    _user_service = None
