from __future__ import annotations

from . import schemas


def to_pathway_response(row: dict) -> schemas.PathwayResponse:
    return schemas.PathwayResponse(
        id=int(row["id"]),
        name=str(row["name"]),
        description=row.get("description"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )
