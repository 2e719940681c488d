"""Pytest shared fixtures: fake pool, in-memory repositories, API client."""
import itertools
import os
import pathlib
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

# Make the flat `api/` packages importable without an install.
API_ROOT = pathlib.Path(__file__).resolve().parents[1] / "api"
if str(API_ROOT) not in sys.path:
    sys.path.insert(0, str(API_ROOT))

# Cheap bcrypt cost for tests; set BEFORE any app imports.
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import asyncpg
import pytest
from fastapi.testclient import TestClient

from admins import repository as admin_repository
from core import db
from main import app
from pathways import repository as pathway_repository


# ─────────────────────────────────────────────────────────────────────────────
# Fake connection pool
# ─────────────────────────────────────────────────────────────────────────────
class FakeConnection:
    def __init__(self):
        self.transactions = 0

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        yield self


class FakePool:
    def __init__(self):
        self.connection = FakeConnection()
        self.acquired = 0

    @asynccontextmanager
    async def acquire(self):
        self.acquired += 1
        yield self.connection


# ─────────────────────────────────────────────────────────────────────────────
# In-memory store mirroring the repository functions and table constraints
# ─────────────────────────────────────────────────────────────────────────────
def _now():
    return datetime.now(timezone.utc)


class InMemoryStore:
    def __init__(self):
        self.pathways = {}
        self.admins = {}
        self.roles = {
            1: {"id": 1, "name": "SUPER_ADMIN", "description": "Full access to the admin console"},
            2: {"id": 2, "name": "ADMIN", "description": "Manages learning content"},
        }
        self._pathway_ids = itertools.count(1)
        self._admin_ids = itertools.count(1)

    # pathways ---------------------------------------------------------------
    def _check_pathway_name(self, name, *, exclude_id=None):
        for row in self.pathways.values():
            if row["name"] == name and row["id"] != exclude_id:
                raise asyncpg.UniqueViolationError(
                    'duplicate key value violates unique constraint "pathways_name_key"'
                )

    async def list_pathways(self, conn):
        return [dict(row) for _, row in sorted(self.pathways.items())]

    async def get_pathway_by_id(self, conn, pathway_id):
        row = self.pathways.get(pathway_id)
        return dict(row) if row is not None else None

    async def get_pathway_by_name(self, conn, name):
        for row in self.pathways.values():
            if row["name"] == name:
                return dict(row)
        return None

    async def insert_pathway(self, conn, *, name, description):
        self._check_pathway_name(name)
        pathway_id = next(self._pathway_ids)
        now = _now()
        row = {
            "id": pathway_id,
            "name": name,
            "description": description,
            "created_at": now,
            "updated_at": now,
        }
        self.pathways[pathway_id] = row
        return dict(row)

    async def update_pathway(self, conn, pathway_id, *, name, description):
        row = self.pathways.get(pathway_id)
        if row is None:
            return None
        self._check_pathway_name(name, exclude_id=pathway_id)
        row.update(name=name, description=description, updated_at=_now())
        return dict(row)

    async def delete_pathway(self, conn, pathway_id):
        return self.pathways.pop(pathway_id, None) is not None

    # admins -----------------------------------------------------------------
    def _check_admin_unique(self, username, email, *, exclude_id=None):
        for row in self.admins.values():
            if row["id"] == exclude_id:
                continue
            if row["username"] == username:
                raise asyncpg.UniqueViolationError(
                    'duplicate key value violates unique constraint "admins_username_key"'
                )
            if row["email"] == email:
                raise asyncpg.UniqueViolationError(
                    'duplicate key value violates unique constraint "admins_email_key"'
                )

    def _joined(self, row):
        joined = dict(row)
        joined["role_name"] = self.roles[row["role_id"]]["name"]
        return joined

    async def list_admins(self, conn):
        return [self._joined(row) for _, row in sorted(self.admins.items())]

    async def get_admin_by_id(self, conn, admin_id):
        row = self.admins.get(admin_id)
        return self._joined(row) if row is not None else None

    async def insert_admin(self, conn, *, username, password_hash, email, phone_number, status, role_id):
        self._check_admin_unique(username, email)
        admin_id = next(self._admin_ids)
        now = _now()
        self.admins[admin_id] = {
            "id": admin_id,
            "username": username,
            "password": password_hash,
            "email": email,
            "phone_number": phone_number,
            "status": status,
            "role_id": role_id,
            "created_at": now,
            "updated_at": now,
        }
        return admin_id

    async def update_admin(self, conn, admin_id, *, username, password_hash, email, phone_number, role_id):
        row = self.admins.get(admin_id)
        if row is None:
            return False
        self._check_admin_unique(username, email, exclude_id=admin_id)
        row.update(
            username=username,
            password=password_hash,
            email=email,
            phone_number=phone_number,
            role_id=role_id,
            updated_at=_now(),
        )
        return True

    async def delete_admin(self, conn, admin_id):
        return self.admins.pop(admin_id, None) is not None

    async def get_role_by_id(self, conn, role_id):
        row = self.roles.get(role_id)
        return dict(row) if row is not None else None

    async def list_roles(self, conn):
        return [dict(row) for _, row in sorted(self.roles.items())]


_PATHWAY_FUNCTIONS = (
    "list_pathways",
    "get_pathway_by_id",
    "get_pathway_by_name",
    "insert_pathway",
    "update_pathway",
    "delete_pathway",
)

_ADMIN_FUNCTIONS = (
    "list_admins",
    "get_admin_by_id",
    "insert_admin",
    "update_admin",
    "delete_admin",
    "get_role_by_id",
    "list_roles",
)


@pytest.fixture()
def store(monkeypatch):
    memory = InMemoryStore()
    for name in _PATHWAY_FUNCTIONS:
        monkeypatch.setattr(pathway_repository, name, getattr(memory, name))
    for name in _ADMIN_FUNCTIONS:
        monkeypatch.setattr(admin_repository, name, getattr(memory, name))
    return memory


@pytest.fixture()
def fake_pool():
    return FakePool()


@pytest.fixture()
def client(store, fake_pool):
    # No lifespan: the real pool is never created.
    app.dependency_overrides[db.pool] = lambda: fake_pool
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
