"""
Explicit service outcomes.

Services return either their value or a `Failure`. Routers translate a
`Failure` into an HTTP response; nothing above the service layer has to
catch exceptions for expected outcomes (missing rows, duplicate names).
"""

from __future__ import annotations

import enum
import functools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")


class FailureKind(str, enum.Enum):
    NAME_CONFLICT = "name_conflict"
    NOT_FOUND = "not_found"
    INTEGRITY_VIOLATION = "integrity_violation"
    UNEXPECTED = "unexpected"


_STATUS_BY_KIND = {
    FailureKind.NAME_CONFLICT: 400,
    FailureKind.INTEGRITY_VIOLATION: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.UNEXPECTED: 500,
}


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    detail: str
    entity: str | None = None
    key: Any = None

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self.kind]

    @classmethod
    def name_conflict(cls, entity: str, name: str) -> "Failure":
        return cls(
            kind=FailureKind.NAME_CONFLICT,
            detail=f"{entity} with name '{name}' already exists",
            entity=entity,
            key=name,
        )

    @classmethod
    def not_found(cls, entity: str, key: Any, field: str = "Id") -> "Failure":
        return cls(
            kind=FailureKind.NOT_FOUND,
            detail=f"{entity} not found with {field} : '{key}'",
            entity=entity,
            key=key,
        )

    @classmethod
    def integrity_violation(cls, detail: str) -> "Failure":
        return cls(kind=FailureKind.INTEGRITY_VIOLATION, detail=detail)

    @classmethod
    def unexpected(cls, detail: str) -> "Failure":
        return cls(kind=FailureKind.UNEXPECTED, detail=detail)


def report_unexpected(
    action: str,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T | Failure]]]:
    """
    Turn any exception escaping an async service function into
    `Failure.unexpected`, logging it against the service module's logger.
    """

    def decorator(fn: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T | Failure]]:
        logger = logging.getLogger(fn.__module__)

        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> T | Failure:
            try:
                return await fn(*args, **kwargs)
            except Exception as exc:
                logger.exception("%s_failed", action)
                return Failure.unexpected(str(exc))

        return wrapper

    return decorator
