"""
Pathway business logic.

Each operation runs one read-check-write inside a single transaction and
returns its value or a `Failure`.
"""

from __future__ import annotations

import asyncpg

from core import db
from core.results import Failure, report_unexpected

from . import mapper, repository, schemas

ENTITY = "Pathway"


@report_unexpected("create_pathway")
async def create_pathway(pool: asyncpg.Pool, payload: schemas.PathwayRequest) -> bool | Failure:
    try:
        async with db.transaction(pool) as conn:
            existing = await repository.get_pathway_by_name(conn, payload.name)
            if existing is not None:
                return Failure.name_conflict(ENTITY, payload.name)
            await repository.insert_pathway(conn, name=payload.name, description=payload.description)
    except asyncpg.IntegrityConstraintViolationError as exc:
        # Lost a race against a concurrent insert of the same name.
        return Failure.integrity_violation(str(exc))
    return True


@report_unexpected("get_all_pathways")
async def get_all_pathways(pool: asyncpg.Pool) -> list[schemas.PathwayResponse] | Failure:
    async with db.transaction(pool) as conn:
        rows = await repository.list_pathways(conn)
    return [mapper.to_pathway_response(row) for row in rows]


@report_unexpected("update_pathway")
async def update_pathway(
    pool: asyncpg.Pool,
    payload: schemas.PathwayRequest,
    pathway_id: int,
) -> bool | Failure:
    try:
        async with db.transaction(pool) as conn:
            existing = await repository.get_pathway_by_id(conn, pathway_id)
            if existing is None:
                return Failure.not_found(ENTITY, pathway_id)
            updated = await repository.update_pathway(
                conn,
                pathway_id,
                name=payload.name,
                description=payload.description,
            )
    except asyncpg.IntegrityConstraintViolationError as exc:
        return Failure.integrity_violation(str(exc))
    if updated is None:
        return Failure.not_found(ENTITY, pathway_id)
    return True


@report_unexpected("delete_pathway")
async def delete_pathway(pool: asyncpg.Pool, pathway_id: int) -> bool | Failure:
    async with db.transaction(pool) as conn:
        existing = await repository.get_pathway_by_id(conn, pathway_id)
        if existing is None:
            return Failure.not_found(ENTITY, pathway_id)
        deleted = await repository.delete_pathway(conn, pathway_id)
    if not deleted:
        return Failure.not_found(ENTITY, pathway_id)
    return True
