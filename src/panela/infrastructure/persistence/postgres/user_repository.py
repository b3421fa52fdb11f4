"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from panela.domain.entities import User

_SELECT = (
    "SELECT u.id, u.name, u.email, u.active, u.created_at, u.updated_at, u.phone, "
    "u.role_id, r.name, u.cost_center_id, cc.name, u.auth_user_id "
    "FROM app_user u "
    "LEFT JOIN role r ON r.id = u.role_id "
    "LEFT JOIN cost_center cc ON cc.id = u.cost_center_id"
)


def _to_user(r: tuple) -> User:
    return User(
        id=r[0],
        name=r[1],
        email=r[2],
        active=r[3],
        created_at=r[4],
        updated_at=r[5],
        phone=r[6],
        role_id=r[7],
        role_name=r[8],
        cost_center_id=r[9],
        cost_center_name=r[10],
        auth_user_id=r[11],
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(f"{_SELECT} WHERE u.id = %s", (user_id,))
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def get_by_auth_id(self, auth_user_id: str) -> User | None:
        """Get user linked to an auth account."""
        cur = await self._conn.execute(f"{_SELECT} WHERE u.auth_user_id = %s", (auth_user_id,))
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def list_all(self) -> list[User]:
        """List users, newest first."""
        cur = await self._conn.execute(f"{_SELECT} ORDER BY u.created_at DESC")
        rows = await cur.fetchall()
        return [_to_user(r) for r in rows]

    async def update_role(self, user_id: UUID, role_id: UUID) -> None:
        """Set the user's role."""
        await self._conn.execute(
            "UPDATE app_user SET role_id = %s, updated_at = now() WHERE id = %s",
            (role_id, user_id),
        )
