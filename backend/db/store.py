"""
In-memory catalog store.

Models:
- Warehouse (fixed at startup, never mutated)
- Product (warehouse_id / stock / demand mutable; status is derived, never stored)

State lives for the process lifetime only. One lock guards the catalog:
reads copy a snapshot under it, mutations hold it across validate-then-write.
"""

import threading
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class Warehouse:
    id: str
    name: str


@dataclass
class Product:
    id: str
    name: str
    sku: str
    warehouse_id: str
    stock: int
    demand: int


class CatalogStore:
    def __init__(self, warehouses: Iterable[Warehouse], products: Iterable[Product]):
        # dicts keep insertion order, which is the listing order
        self._warehouses = {w.id: w for w in warehouses}
        self._products = {p.id: p for p in products}
        for p in self._products.values():
            if p.warehouse_id not in self._warehouses:
                raise ValueError(f"Product {p.id} references unknown warehouse {p.warehouse_id}")
        self.lock = threading.Lock()

    def warehouses(self) -> List[Warehouse]:
        with self.lock:
            return list(self._warehouses.values())

    def products(self) -> List[Product]:
        """Snapshot copies; callers may not write through them."""
        with self.lock:
            return [replace(p) for p in self._products.values()]

    # The lookups below do not take the lock; callers inside a mutation
    # already hold it.
    def get_warehouse(self, warehouse_id: str) -> Optional[Warehouse]:
        return self._warehouses.get(warehouse_id)

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def __len__(self) -> int:
        return len(self._products)
