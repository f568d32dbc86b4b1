"""
Domain entities for user data.

Core business objects returned by user repositories.
These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class User:
    """
    User entity.

    Immutable once created; two users are equal when both id and name match.
    """

    id: int
    name: str

    def __post_init__(self):
        """Validate field types on creation."""
        # bool is a subclass of int but never a valid identifier
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Invalid user id: {self.id!r}")
        if not isinstance(self.name, str):
            raise ValueError(f"Invalid user name: {self.name!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """
        Build a user from a mapping with ``id`` and ``name`` keys.

        Args:
            data: Mapping holding the user fields

        Returns:
            User entity

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        try:
            return cls(id=data["id"], name=data["name"])
        except KeyError as e:
            raise ValueError(f"Missing user field: {e.args[0]}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "name": self.name}
