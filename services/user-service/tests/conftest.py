"""
Test configuration and fixtures
"""

import logging
from typing import Dict, List, Optional
from unittest.mock import create_autospec

import pytest
import structlog

from app import dependencies
from app.domain.entities import User
from app.domain.exceptions import UserNotFoundException
from app.repositories.user_repository import IUserRepository


class RecordingUserRepository(IUserRepository):
    """Scripted repository that records every find_by_id call."""

    def __init__(self, users: Optional[Dict[int, User]] = None):
        self.users = dict(users or {})
        self.calls: List[int] = []

    def find_by_id(self, user_id: int) -> User:
        self.calls.append(user_id)
        if user_id not in self.users:
            raise UserNotFoundException(user_id)
        return self.users[user_id]


@pytest.fixture
def john_doe():
    """The user stored under id 1."""
    return User(id=1, name="John Doe")


@pytest.fixture
def make_recording_repo():
    """Factory for recording fakes with arbitrary contents."""
    return RecordingUserRepository


@pytest.fixture
def recording_repo(john_doe):
    """Fake repository holding only John Doe."""
    return RecordingUserRepository({john_doe.id: john_doe})


@pytest.fixture
def mock_repo():
    """Autospecced mock of the repository interface."""
    return create_autospec(IUserRepository, instance=True)


@pytest.fixture(autouse=True)
def reset_global_state():
    """Restore logging config and the registered service after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level

    yield

    dependencies.reset_user_service()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)
