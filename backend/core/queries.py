import logging
from dataclasses import dataclass
from typing import List, Optional

from core.config import settings
from core.status import derive_status
from db.store import CatalogStore, Product, Warehouse

logger = logging.getLogger("inventory.queries")


@dataclass
class ProductView:
    """A product joined with its warehouse and a freshly derived status."""
    id: str
    name: str
    sku: str
    warehouse_id: str
    warehouse: Optional[Warehouse]
    stock: int
    demand: int
    status: str


@dataclass
class PageInfo:
    has_next_page: bool
    has_previous_page: bool


@dataclass
class ProductPage:
    items: List[ProductView]
    total: int
    page_info: PageInfo


def to_view(store: CatalogStore, product: Product) -> ProductView:
    return ProductView(
        id=product.id,
        name=product.name,
        sku=product.sku,
        warehouse_id=product.warehouse_id,
        warehouse=store.get_warehouse(product.warehouse_id),
        stock=product.stock,
        demand=product.demand,
        status=derive_status(product.stock, product.demand),
    )


def _matches_search(p: ProductView, needle: str) -> bool:
    return needle in p.name.lower() or needle in p.sku.lower()


def list_products(
    store: CatalogStore,
    *,
    search: Optional[str] = None,
    warehouse_id: Optional[str] = None,
    status: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> ProductPage:
    """
    Filter and paginate the product catalog.

    - Filters apply in order search -> warehouse_id -> status; empty/None means "not set".
    - status is matched against the derived status, computed before filtering.
    - page is an item offset, not a page index.
    """
    page = 0 if page is None else page
    limit = settings.default_page_limit if limit is None else limit

    rows = [to_view(store, p) for p in store.products()]

    if search:
        needle = search.lower()
        rows = [p for p in rows if _matches_search(p, needle)]

    if warehouse_id:
        rows = [p for p in rows if p.warehouse_id == warehouse_id]

    if status:
        rows = [p for p in rows if p.status == status]

    logger.debug(
        "list_products search=%r warehouse_id=%r status=%r matched=%d",
        search, warehouse_id, status, len(rows),
    )

    total = len(rows)
    items = rows[page:page + limit]

    return ProductPage(
        items=items,
        total=total,
        page_info=PageInfo(
            has_next_page=page + limit < total,
            has_previous_page=page > 0,
        ),
    )


def list_warehouses(store: CatalogStore) -> List[Warehouse]:
    return store.warehouses()
