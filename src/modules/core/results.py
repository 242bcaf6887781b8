"""Explicit success / error return values for the Service Layer.

Business-rule failures (duplicate entity, missing entity) are expected
outcomes, so services return them as values instead of raising::

    result = service.get_product(product_id)
    if result.ok:
        product = result.value
    else:
        kind = result.error.kind

Unexpected failures (database down, programming errors) still propagate
as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Recoverable business-rule failures reported by services."""

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a service call: either ``value`` or ``error`` is set."""

    ok: bool
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    def is_error(self, kind: ErrorKind) -> bool:
        return self.error is not None and self.error.kind is kind


def service_ok(value: Optional[T] = None) -> ServiceResult[T]:
    return ServiceResult(ok=True, value=value)


def service_err(error: ServiceError) -> ServiceResult:
    return ServiceResult(ok=False, error=error)
