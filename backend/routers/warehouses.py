from fastapi import APIRouter, Depends
from typing import List

from core.queries import list_warehouses
from db.seed import get_store
from db.store import CatalogStore
from schemas.products import WarehouseRead

router = APIRouter()


@router.get("/", response_model=List[WarehouseRead])
async def get_warehouses(store: CatalogStore = Depends(get_store)):
    return [WarehouseRead.model_validate(w) for w in list_warehouses(store)]
