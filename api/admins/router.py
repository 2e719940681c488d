"""
Admin CRUD endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from core import db, responses
from core.results import Failure
from core.schemas import MAX_ID

from . import schemas, service

router = APIRouter(prefix="/api/admin")


@router.get("/read")
async def read_admins(pool: asyncpg.Pool = Depends(db.pool)) -> JSONResponse:
    result = await service.find_all(pool)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to retrieve admins")
    if not result:
        return responses.success_response("No admins found", [])
    return responses.success_response("Admins retrieved successfully", result)


@router.get("/read/{admin_id}")
async def read_admin(
    admin_id: int = Path(..., ge=1, le=MAX_ID),
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.find_by_id(pool, admin_id)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to retrieve admin")
    return responses.success_response("Admin retrieved successfully", result)


@router.post("/create")
async def create_admin(
    payload: schemas.AdminRequest,
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.create_admin(pool, payload)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to create admin")
    return responses.success_response("Admin created successfully", result)


@router.put("/update/{admin_id}")
async def update_admin(
    payload: schemas.AdminRequest,
    admin_id: int = Path(..., ge=1, le=MAX_ID),
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.update_admin(pool, payload, admin_id)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to update admin")
    return responses.success_response("Admin updated successfully", result)


@router.delete("/delete/{admin_id}")
async def delete_admin(
    admin_id: int = Path(..., ge=1, le=MAX_ID),
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.delete_by_id(pool, admin_id)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to delete admin")
    return responses.success_response("Admin deleted successfully", "deleted")


@router.get("/roles")
async def read_admin_roles(pool: asyncpg.Pool = Depends(db.pool)) -> JSONResponse:
    result = await service.list_roles(pool)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to retrieve admin roles")
    return responses.success_response("Admin roles retrieved successfully", result)
