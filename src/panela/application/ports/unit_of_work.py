"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from panela.application.ports.repositories.role_repository import RoleRepository
from panela.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for UnitOfWork instances; each call is an async context manager."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
