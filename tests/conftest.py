"""Pytest fixtures for Panela tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from panela.application.dto.session import SessionClaims
from panela.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from panela.domain.access import AccessResolver
from panela.domain.entities import Role, User
from panela.infrastructure.policy.default_policy import build_default_policy


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for role in self._by_id.values():
            if role.name.lower() == name.lower():
                return role
        return None

    async def list_all(self) -> list[Role]:
        return list(self._by_id.values())

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakeUserRepository:
    """In-memory user repository; joins role names through the role repository."""

    def __init__(self, roles: FakeRoleRepository) -> None:
        self._by_id: dict[UUID, User] = {}
        self._roles = roles

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def get_by_auth_id(self, auth_user_id: str) -> User | None:
        for user in self._by_id.values():
            if user.auth_user_id == auth_user_id:
                return user
        return None

    async def list_all(self) -> list[User]:
        return sorted(self._by_id.values(), key=lambda u: u.created_at, reverse=True)

    async def update_role(self, user_id: UUID, role_id: UUID) -> None:
        user = self._by_id.get(user_id)
        if user:
            role = await self._roles.get_by_id(role_id)
            self._by_id[user_id] = replace(
                user,
                role_id=role_id,
                role_name=role.name if role else None,
                updated_at=datetime.now(UTC),
            )

    def add_user(self, user: User) -> None:
        """Helper to add user for tests."""
        self._by_id[user.id] = user


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.users = FakeUserRepository(self.roles)
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass

    def seed_roles(self) -> dict[str, Role]:
        """Add admin, asesor and colaborador; return them by name."""
        roles = {}
        for name, desc in [
            ("admin", "Administrator"),
            ("asesor", "Sales advisor"),
            ("colaborador", "Inventory collaborator"),
        ]:
            role = Role(id=uuid4(), name=name, description=desc)
            self.roles.add_role(role)
            roles[name] = role
        return roles

    def add_user(
        self,
        auth_user_id: str,
        role: Role | None = None,
        *,
        role_name: str | None = None,
        active: bool = True,
    ) -> User:
        """Add a user linked to auth_user_id. role_name overrides the stored name."""
        now = datetime.now(UTC)
        user = User(
            id=uuid4(),
            name=auth_user_id.title(),
            email=f"{auth_user_id}@panela.test",
            active=active,
            created_at=now,
            updated_at=now,
            role_id=role.id if role else None,
            role_name=role_name if role_name is not None else (role.name if role else None),
            auth_user_id=auth_user_id,
        )
        self.users.add_user(user)
        return user


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so state persists across calls."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


def session_for(subject: str) -> SessionClaims:
    return SessionClaims(subject=subject, email=f"{subject}@panela.test", username=subject)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """UnitOfWork with the three roles and one active user per role."""
    uow = FakeUnitOfWork()
    roles = uow.seed_roles()
    uow.add_user("admin-1", roles["admin"])
    uow.add_user("asesor-1", roles["asesor"])
    uow.add_user("colaborador-1", roles["colaborador"])
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the shared FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def resolver() -> AccessResolver:
    """Resolver over the dashboard's default policy."""
    return AccessResolver(build_default_policy())


@pytest.fixture
def current_user_provider(uow_factory) -> GetCurrentUserUseCase:
    return GetCurrentUserUseCase(uow_factory)
