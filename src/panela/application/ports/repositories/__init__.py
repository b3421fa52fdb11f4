"""Repository ports."""

from panela.application.ports.repositories.role_repository import RoleRepository
from panela.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "RoleRepository",
    "UserRepository",
]
