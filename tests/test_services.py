"""Service-level tests: outcomes are returned, never raised."""
import asyncio
from datetime import datetime, timezone

from admins import mapper as admin_mapper
from admins import schemas as admin_schemas
from admins import service as admin_service
from core.results import Failure, FailureKind
from pathways import mapper as pathway_mapper
from pathways import schemas as pathway_schemas
from pathways import service as pathway_service


def test_create_pathway_runs_in_one_transaction(store, fake_pool):
    payload = pathway_schemas.PathwayRequest(name="Cloud", description=None)

    result = asyncio.run(pathway_service.create_pathway(fake_pool, payload))

    assert result is True
    assert fake_pool.acquired == 1
    assert fake_pool.connection.transactions == 1


def test_duplicate_pathway_returns_name_conflict(store, fake_pool):
    payload = pathway_schemas.PathwayRequest(name="Cloud")
    asyncio.run(pathway_service.create_pathway(fake_pool, payload))

    result = asyncio.run(pathway_service.create_pathway(fake_pool, payload))

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.NAME_CONFLICT
    assert result.key == "Cloud"


def test_get_all_pathways_empty(store, fake_pool):
    assert asyncio.run(pathway_service.get_all_pathways(fake_pool)) == []


def test_delete_missing_pathway(store, fake_pool):
    result = asyncio.run(pathway_service.delete_pathway(fake_pool, 11))

    assert result == Failure.not_found("Pathway", 11)


def test_create_admin_unknown_role(store, fake_pool):
    payload = admin_schemas.AdminRequest(
        username="mya",
        password="long-enough",
        email="mya@example.com",
        phone_number="0912",
        role_id=40,
    )

    result = asyncio.run(admin_service.create_admin(fake_pool, payload))

    assert result.kind is FailureKind.NOT_FOUND
    assert (result.entity, result.key) == ("AdminRole", 40)
    assert store.admins == {}


def test_find_missing_admin(store, fake_pool):
    result = asyncio.run(admin_service.find_by_id(fake_pool, 2))

    assert (result.entity, result.key) == ("Admin", 2)


def test_pathway_mapper():
    now = datetime(2024, 11, 5, tzinfo=timezone.utc)
    row = {"id": 4, "name": "Cloud", "description": None, "created_at": now, "updated_at": now}

    assert pathway_mapper.to_pathway_response(row) == pathway_schemas.PathwayResponse(
        id=4, name="Cloud", description=None, created_at=now, updated_at=now
    )


def test_admin_mapper_drops_password():
    row = {
        "id": 1,
        "username": "mya",
        "password": "$2b$04$hash",
        "email": "mya@example.com",
        "phone_number": "0912",
        "status": True,
        "role_id": 2,
        "role_name": "ADMIN",
    }

    response = admin_mapper.to_admin_response(row)

    assert "password" not in response.model_dump()
    assert response.role_name == "ADMIN"
