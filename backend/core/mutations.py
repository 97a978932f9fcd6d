import logging

from core.errors import (
    InsufficientStock,
    InvalidQuantity,
    InvalidSource,
    ProductNotFound,
    WarehouseNotFound,
)
from core.queries import ProductView, to_view
from db.store import CatalogStore

logger = logging.getLogger("inventory.mutations")


def update_demand(store: CatalogStore, product_id: str, demand: int) -> ProductView:
    """Set a product's demand in place. No other field changes."""
    with store.lock:
        product = store.get_product(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        if demand < 0:
            raise InvalidQuantity("demand", demand)

        previous = product.demand
        product.demand = demand
        view = to_view(store, product)

    logger.info("demand updated product=%s %d -> %d status=%s", product_id, previous, demand, view.status)
    return view


def transfer_stock(
    store: CatalogStore,
    product_id: str,
    from_warehouse: str,
    to_warehouse: str,
    quantity: int,
) -> ProductView:
    """
    Relocate a product to another warehouse.

    The transferred quantity becomes the product's whole stock at the
    destination; nothing is left behind or merged. Total stock is not
    conserved across warehouses (observed contract, kept as-is).
    All checks run before any field is written.
    """
    with store.lock:
        product = store.get_product(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        if product.warehouse_id != from_warehouse:
            raise InvalidSource(product_id, from_warehouse, product.warehouse_id)

        if store.get_warehouse(to_warehouse) is None:
            raise WarehouseNotFound(to_warehouse)

        if quantity < 0:
            raise InvalidQuantity("quantity", quantity)

        if quantity > product.stock:
            raise InsufficientStock(product_id, quantity, product.stock)

        product.warehouse_id = to_warehouse
        product.stock = quantity

        view = to_view(store, product)

    logger.info(
        "stock transferred product=%s %s -> %s quantity=%d",
        product_id, from_warehouse, to_warehouse, quantity,
    )
    return view
