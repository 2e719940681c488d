"""
Admin business logic.

Scope:
- admin CRUD, each admin bound to exactly one existing admin role
- read-only admin role listing
"""

from __future__ import annotations

import logging

import asyncpg

from core import db
from core.results import Failure, report_unexpected

from . import mapper, repository, schemas, security

logger = logging.getLogger(__name__)

ADMIN = "Admin"
ADMIN_ROLE = "AdminRole"


@report_unexpected("find_all_admins")
async def find_all(pool: asyncpg.Pool) -> list[schemas.AdminResponse] | Failure:
    async with db.transaction(pool) as conn:
        rows = await repository.list_admins(conn)
    return [mapper.to_admin_response(row) for row in rows]


@report_unexpected("find_admin")
async def find_by_id(pool: asyncpg.Pool, admin_id: int) -> schemas.AdminResponse | Failure:
    async with db.transaction(pool) as conn:
        row = await repository.get_admin_by_id(conn, admin_id)
    if row is None:
        return Failure.not_found(ADMIN, admin_id)
    return mapper.to_admin_response(row)


@report_unexpected("create_admin")
async def create_admin(pool: asyncpg.Pool, payload: schemas.AdminRequest) -> schemas.AdminResponse | Failure:
    try:
        async with db.transaction(pool) as conn:
            role = await repository.get_role_by_id(conn, payload.role_id)
            if role is None:
                return Failure.not_found(ADMIN_ROLE, payload.role_id)

            # New admins always start active.
            admin_id = await repository.insert_admin(
                conn,
                username=payload.username,
                password_hash=security.hash_password(payload.password),
                email=payload.email,
                phone_number=payload.phone_number,
                status=True,
                role_id=int(role["id"]),
            )
            row = await repository.get_admin_by_id(conn, admin_id)
    except asyncpg.IntegrityConstraintViolationError as exc:
        return Failure.integrity_violation(str(exc))

    if row is None:
        raise RuntimeError("Failed to load created admin.")
    return mapper.to_admin_response(row)


@report_unexpected("update_admin")
async def update_admin(
    pool: asyncpg.Pool,
    payload: schemas.AdminRequest,
    admin_id: int,
) -> schemas.AdminResponse | Failure:
    try:
        async with db.transaction(pool) as conn:
            existing = await repository.get_admin_by_id(conn, admin_id)
            if existing is None:
                return Failure.not_found(ADMIN, admin_id)

            role = await repository.get_role_by_id(conn, payload.role_id)
            if role is None:
                return Failure.not_found(ADMIN_ROLE, payload.role_id)

            await repository.update_admin(
                conn,
                admin_id,
                username=payload.username,
                password_hash=security.hash_password(payload.password),
                email=payload.email,
                phone_number=payload.phone_number,
                role_id=int(role["id"]),
            )
            row = await repository.get_admin_by_id(conn, admin_id)
    except asyncpg.IntegrityConstraintViolationError as exc:
        return Failure.integrity_violation(str(exc))

    if row is None:
        return Failure.not_found(ADMIN, admin_id)
    return mapper.to_admin_response(row)


@report_unexpected("delete_admin")
async def delete_by_id(pool: asyncpg.Pool, admin_id: int) -> bool | Failure:
    async with db.transaction(pool) as conn:
        existing = await repository.get_admin_by_id(conn, admin_id)
        if existing is None:
            return Failure.not_found(ADMIN, admin_id)
        deleted = await repository.delete_admin(conn, admin_id)

    if not deleted:
        return Failure.not_found(ADMIN, admin_id)
    logger.info("admin_deleted admin_id=%s username=%s", admin_id, existing["username"])
    return True


@report_unexpected("list_admin_roles")
async def list_roles(pool: asyncpg.Pool) -> list[schemas.AdminRoleResponse] | Failure:
    async with db.transaction(pool) as conn:
        rows = await repository.list_roles(conn)
    return [mapper.to_admin_role_response(row) for row in rows]
