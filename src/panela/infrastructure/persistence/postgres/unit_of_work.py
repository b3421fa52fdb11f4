"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from panela.application.ports import UnitOfWorkFactory
from panela.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from panela.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._users = PostgresUserRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> UnitOfWorkFactory:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
