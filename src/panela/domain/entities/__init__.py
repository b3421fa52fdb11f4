"""Domain entities."""

from panela.domain.entities.role import Role
from panela.domain.entities.user import User

__all__ = [
    "Role",
    "User",
]
