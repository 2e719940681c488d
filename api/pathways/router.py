"""
Pathway CRUD endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from core import db, responses
from core.results import Failure
from core.schemas import MAX_ID

from . import schemas, service

router = APIRouter(prefix="/api/pathway")


@router.post("/create")
async def create_pathway(
    payload: schemas.PathwayRequest,
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.create_pathway(pool, payload)
    if isinstance(result, Failure):
        return responses.failure_response(result, "Failed to create pathway")
    return responses.success_response("Pathway created successfully", "created")


@router.get("/read")
async def read_pathways(pool: asyncpg.Pool = Depends(db.pool)) -> JSONResponse:
    result = await service.get_all_pathways(pool)
    if isinstance(result, Failure):
        return responses.error_response(result.status_code, "Failed to retrieve pathways")
    if not result:
        return responses.success_response("No pathways found", [])
    return responses.success_response("Pathways retrieved successfully", result)


@router.put("/update/{pathway_id}")
async def update_pathway(
    payload: schemas.PathwayRequest,
    pathway_id: int = Path(..., ge=1, le=MAX_ID),
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.update_pathway(pool, payload, pathway_id)
    if isinstance(result, Failure):
        if result.status_code == 404:
            return responses.failure_response(result, f"Pathway not found with ID: {pathway_id}")
        return responses.failure_response(result, "Failed to update pathway")
    return responses.success_response("Pathway updated successfully", "updated")


@router.delete("/delete/{pathway_id}")
async def delete_pathway(
    pathway_id: int = Path(..., ge=1, le=MAX_ID),
    pool: asyncpg.Pool = Depends(db.pool),
) -> JSONResponse:
    result = await service.delete_pathway(pool, pathway_id)
    if isinstance(result, Failure):
        if result.status_code == 404:
            return responses.failure_response(result, f"Pathway not found with ID: {pathway_id}")
        return responses.failure_response(result, "Failed to delete pathway")
    return responses.success_response("Pathway deleted successfully", "deleted")
