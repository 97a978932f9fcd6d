from typing import List, Optional

from pydantic import BaseModel, StrictInt, field_validator

from core.status import ProductStatus


class WarehouseRead(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class ProductRead(BaseModel):
    id: str
    name: str
    sku: str
    warehouse_id: str
    warehouse: WarehouseRead
    stock: int
    demand: int
    status: ProductStatus

    class Config:
        from_attributes = True


class PageInfoRead(BaseModel):
    has_next_page: bool
    has_previous_page: bool

    class Config:
        from_attributes = True


class ProductPageRead(BaseModel):
    items: List[ProductRead]
    total: int
    page_info: PageInfoRead

    class Config:
        from_attributes = True


class DemandUpdate(BaseModel):
    # strict: JSON booleans are not integers
    demand: StrictInt


class StockTransferCreate(BaseModel):
    from_warehouse: str
    to_warehouse: str
    quantity: StrictInt

    @field_validator("from_warehouse", "to_warehouse")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class ErrorItem(BaseModel):
    message: str
    code: str
    detail: Optional[str] = None


class ErrorResponse(BaseModel):
    data: None = None
    errors: List[ErrorItem]
