"""Application user - one role at a time, linked to an auth account."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User record from master data. role_name is the joined role name as stored."""

    id: UUID
    name: str
    email: str
    active: bool
    created_at: datetime
    updated_at: datetime
    phone: str | None = None
    role_id: UUID | None = None
    role_name: str | None = None
    cost_center_id: UUID | None = None
    cost_center_name: str | None = None
    auth_user_id: str | None = None
