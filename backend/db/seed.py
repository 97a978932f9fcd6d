from __future__ import annotations

from typing import Optional

from db.store import CatalogStore, Product, Warehouse


SEED_WAREHOUSES: list[Warehouse] = [
    Warehouse(id="BLR-A", name="Bangalore Warehouse A"),
    Warehouse(id="BLR-B", name="Bangalore Warehouse B"),
    Warehouse(id="PNQ-C", name="Pune Warehouse C"),
    Warehouse(id="DEL-B", name="Delhi Warehouse B"),
    Warehouse(id="MUM-A", name="Mumbai Warehouse A"),
]

# (id, name, sku, warehouse_id, stock, demand)
SEED_PRODUCTS: list[tuple] = [
    ("P-1001", "12mm Hex Bolt", "HEX-12-100", "BLR-A", 180, 120),
    ("P-1002", "Steel Washer", "WSR-08-500", "BLR-A", 50, 80),
    ("P-1003", "M8 Nut", "NUT-08-200", "PNQ-C", 80, 80),
    ("P-1004", "Bearing 608ZZ", "BRG-608-50", "DEL-B", 24, 120),
    ("P-1005", "Steel Rod 10mm", "ROD-10-300", "MUM-A", 200, 150),
    ("P-1006", "Aluminum Sheet", "ALU-SHT-200", "BLR-B", 75, 100),
]


def build_store() -> CatalogStore:
    """Fresh store from seed data. Products are new objects on every call."""
    products = [
        Product(id=pid, name=name, sku=sku, warehouse_id=wid, stock=stock, demand=demand)
        for pid, name, sku, wid, stock, demand in SEED_PRODUCTS
    ]
    return CatalogStore(SEED_WAREHOUSES, products)


_store: Optional[CatalogStore] = None


def get_store() -> CatalogStore:
    """FastAPI dependency: the process-wide catalog, seeded on first use."""
    global _store
    if _store is None:
        _store = build_store()
    return _store


def reset_store() -> CatalogStore:
    global _store
    _store = build_store()
    return _store
