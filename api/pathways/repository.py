"""
Pathway persistence (raw SQL).

Every function takes the connection of the caller's transaction.
"""

from __future__ import annotations

from core import db

_COLUMNS = "id, name, description, created_at, updated_at"


async def list_pathways(conn: db.Executor) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM pathways
        ORDER BY id
        """,
        conn=conn,
    )


async def get_pathway_by_id(conn: db.Executor, pathway_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM pathways
        WHERE id = $1
        """,
        pathway_id,
        conn=conn,
    )


async def get_pathway_by_name(conn: db.Executor, name: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM pathways
        WHERE name = $1
        """,
        name,
        conn=conn,
    )


async def insert_pathway(conn: db.Executor, *, name: str, description: str | None) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO pathways (name, description)
        VALUES ($1, $2)
        RETURNING {_COLUMNS}
        """,
        name,
        description,
        conn=conn,
    )
    if row is None:
        raise RuntimeError("Failed to insert pathway.")
    return row


async def update_pathway(
    conn: db.Executor,
    pathway_id: int,
    *,
    name: str,
    description: str | None,
) -> dict | None:
    """
    Overwrite all mutable fields. Returns the updated row, or None when the
    id does not exist.
    """
    return await db.fetch_one(
        f"""
        UPDATE pathways
        SET name = $2,
            description = $3,
            updated_at = now()
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        pathway_id,
        name,
        description,
        conn=conn,
    )


async def delete_pathway(conn: db.Executor, pathway_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM pathways
        WHERE id = $1
        RETURNING id
        """,
        pathway_id,
        conn=conn,
    )
    return row is not None
