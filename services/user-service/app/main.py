"""
Startup wiring for User Service.

Builds the user service from settings: logging first, then the
repository seeded with the configured users, then the service itself.
"""

from typing import Optional

import structlog

from .config import Settings, settings as default_settings
from .dependencies import set_user_service
from .domain.entities import User
from .logging_config import setup_logging
from .repositories.memory_repository import InMemoryUserRepository
from .services.user_service import UserService

logger = structlog.get_logger(__name__)


def create_user_service(settings: Optional[Settings] = None) -> UserService:
    """
    Create and register the application's user service.

    Args:
        settings: Settings to use (module settings if None)

    Returns:
        The registered UserService
    """
    settings = settings or default_settings

    setup_logging(
        log_level=settings.LOG_LEVEL,
        service_name=settings.SERVICE_NAME,
        json_logs=settings.LOG_JSON,
    )

    repository = InMemoryUserRepository(
        User.from_dict(seed.model_dump()) for seed in settings.SEED_USERS
    )
    service = UserService(repository)
    set_user_service(service)

    logger.info("User service ready", seeded_users=len(repository))
    return service
