"""Role entity for RBAC."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Role:
    """Role - admin, asesor, colaborador as stored in master data."""

    id: UUID
    name: str
    description: str | None = None
