from typing import Optional

from fastapi import APIRouter, Depends

from core.mutations import transfer_stock, update_demand
from core.queries import list_products
from db.seed import get_store
from db.store import CatalogStore
from schemas.products import DemandUpdate, ProductPageRead, ProductRead, StockTransferCreate

router = APIRouter()


@router.get("/", response_model=ProductPageRead)
async def get_products(
    search: Optional[str] = None,
    warehouse_id: Optional[str] = None,
    status: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
    store: CatalogStore = Depends(get_store),
):
    """
    List products with optional filters.

    - search matches name or sku, case-insensitive.
    - status matches the derived status (healthy/low/critical).
    - page is an item offset; limit defaults to 100.
    """
    result = list_products(
        store,
        search=search,
        warehouse_id=warehouse_id,
        status=status,
        page=page,
        limit=limit,
    )
    return ProductPageRead.model_validate(result)


@router.post("/{product_id}/demand", response_model=ProductRead)
async def post_demand(
    product_id: str,
    payload: DemandUpdate,
    store: CatalogStore = Depends(get_store),
):
    view = update_demand(store, product_id, payload.demand)
    return ProductRead.model_validate(view)


@router.post("/{product_id}/transfer", response_model=ProductRead)
async def post_transfer(
    product_id: str,
    payload: StockTransferCreate,
    store: CatalogStore = Depends(get_store),
):
    """Move a product to another warehouse; quantity becomes its new stock."""
    view = transfer_stock(
        store,
        product_id,
        payload.from_warehouse,
        payload.to_warehouse,
        payload.quantity,
    )
    return ProductRead.model_validate(view)
