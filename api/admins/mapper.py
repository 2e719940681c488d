from __future__ import annotations

from . import schemas


def to_admin_response(row: dict) -> schemas.AdminResponse:
    return schemas.AdminResponse(
        id=int(row["id"]),
        username=str(row["username"]),
        email=str(row["email"]),
        phone_number=str(row["phone_number"]),
        status=bool(row["status"]),
        role_id=int(row["role_id"]),
        role_name=row.get("role_name"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def to_admin_role_response(row: dict) -> schemas.AdminRoleResponse:
    return schemas.AdminRoleResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        description=row.get("description"),
    )
