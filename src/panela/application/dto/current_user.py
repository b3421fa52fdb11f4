"""Current user DTO - stored user plus normalized role."""

from dataclasses import dataclass

from panela.domain.entities import User
from panela.domain.value_objects import RoleName, normalize_role


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated user with role resolved to RoleName (None if missing or unknown)."""

    user: User
    role: RoleName | None

    @classmethod
    def from_user(cls, user: User) -> "CurrentUser":
        return cls(user=user, role=normalize_role(user.role_name))

    @property
    def id(self) -> str:
        return str(self.user.id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.user.name,
            "email": self.user.email,
            "role": self.role.value if self.role else None,
            "cost_center_id": str(self.user.cost_center_id) if self.user.cost_center_id else None,
            "cost_center_name": self.user.cost_center_name,
        }
