"""In-memory implementation of the Product repository.

Keeps products in an insertion-ordered dict keyed by UUID.  It mirrors
the database behaviour the service relies on: copies go in and out (no
shared mutable instances) and the (name, brand) pair is unique.

Used as a test double and for running the service without a database.
"""

from __future__ import annotations

import copy
import threading
from typing import Dict, List, Optional
from uuid import UUID

from django.db import IntegrityError
from django.utils import timezone

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


def _as_uuid(id: str | UUID) -> Optional[UUID]:
    if isinstance(id, UUID):
        return id
    try:
        return UUID(str(id))
    except ValueError:
        return None


class InMemoryProductRepository(IProductRepository):
    def __init__(self) -> None:
        self._rows: Dict[UUID, Product] = {}
        self._lock = threading.Lock()

    def get_by_id(self, id: str | UUID) -> Optional[Product]:
        key = _as_uuid(id)
        if key is None:
            return None
        with self._lock:
            row = self._rows.get(key)
            return copy.deepcopy(row) if row is not None else None

    def get_by_name_and_brand(self, name: str, brand: str) -> Optional[Product]:
        with self._lock:
            for row in self._rows.values():
                if row.name == name and row.brand == brand:
                    return copy.deepcopy(row)
        return None

    def list_page(self, page: int, page_size: int) -> List[Product]:
        offset = (page - 1) * page_size
        with self._lock:
            rows = list(self._rows.values())[offset : offset + page_size]
            return [copy.deepcopy(row) for row in rows]

    def save(self, entity: Product) -> Product:
        with self._lock:
            for key, row in self._rows.items():
                if key != entity.id and row.name == entity.name and row.brand == entity.brand:
                    raise IntegrityError(
                        "UNIQUE constraint failed: products.name, products.brand"
                    )
            now = timezone.now()
            if entity.created_at is None:
                entity.created_at = now
            entity.updated_at = now
            entity._state.adding = False
            self._rows[entity.id] = copy.deepcopy(entity)
        return entity

    def delete(self, id: str | UUID) -> bool:
        key = _as_uuid(id)
        with self._lock:
            return key is not None and self._rows.pop(key, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
