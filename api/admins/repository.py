"""
Admin and admin-role persistence (raw SQL).

Admin roles are only read here; their lifecycle is managed elsewhere.
"""

from __future__ import annotations

from core import db

_ADMIN_SELECT = """
    SELECT a.id, a.username, a.password, a.email, a.phone_number, a.status,
           a.admin_role_id AS role_id, r.name AS role_name,
           a.created_at, a.updated_at
    FROM admins a
    JOIN admin_roles r ON r.id = a.admin_role_id
"""


async def list_admins(conn: db.Executor) -> list[dict]:
    return await db.fetch_all(
        _ADMIN_SELECT + "ORDER BY a.id",
        conn=conn,
    )


async def get_admin_by_id(conn: db.Executor, admin_id: int) -> dict | None:
    return await db.fetch_one(
        _ADMIN_SELECT + "WHERE a.id = $1",
        admin_id,
        conn=conn,
    )


async def insert_admin(
    conn: db.Executor,
    *,
    username: str,
    password_hash: str,
    email: str,
    phone_number: str,
    status: bool,
    role_id: int,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO admins (username, password, email, phone_number, status, admin_role_id)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING id
        """,
        username,
        password_hash,
        email,
        phone_number,
        status,
        role_id,
        conn=conn,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert admin.")
    return int(row["id"])


async def update_admin(
    conn: db.Executor,
    admin_id: int,
    *,
    username: str,
    password_hash: str,
    email: str,
    phone_number: str,
    role_id: int,
) -> bool:
    row = await db.fetch_one(
        """
        UPDATE admins
        SET username = $2,
            password = $3,
            email = $4,
            phone_number = $5,
            admin_role_id = $6,
            updated_at = now()
        WHERE id = $1
        RETURNING id
        """,
        admin_id,
        username,
        password_hash,
        email,
        phone_number,
        role_id,
        conn=conn,
    )
    return row is not None


async def delete_admin(conn: db.Executor, admin_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM admins
        WHERE id = $1
        RETURNING id
        """,
        admin_id,
        conn=conn,
    )
    return row is not None


async def get_role_by_id(conn: db.Executor, role_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, description
        FROM admin_roles
        WHERE id = $1
        """,
        role_id,
        conn=conn,
    )


async def list_roles(conn: db.Executor) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, description
        FROM admin_roles
        ORDER BY id
        """,
        conn=conn,
    )
