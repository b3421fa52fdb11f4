"""Role names for RBAC."""

from enum import StrEnum


class RoleName(StrEnum):
    """Roles a user can hold."""

    ADMIN = "admin"
    ADVISOR = "asesor"
    COLLABORATOR = "colaborador"


def normalize_role(value: str | None) -> RoleName | None:
    """Map a stored role name to RoleName, ignoring case and surrounding spaces.

    Returns None for empty or unknown names, which every access check treats
    as "no role".
    """
    if not value:
        return None
    try:
        return RoleName(value.strip().lower())
    except ValueError:
        return None
