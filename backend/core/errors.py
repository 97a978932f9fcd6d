"""
Inventory error taxonomy.

All errors are caller-input validation failures raised before any write,
so a failed mutation leaves the catalog untouched.
"""


class InventoryError(Exception):
    code = "INVENTORY_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(InventoryError):
    code = "NOT_FOUND"


class ProductNotFound(NotFound):
    def __init__(self, product_id: str):
        super().__init__(f"Product with id {product_id} not found")
        self.product_id = product_id


class WarehouseNotFound(NotFound):
    def __init__(self, warehouse_id: str):
        super().__init__(f"Warehouse {warehouse_id} not found")
        self.warehouse_id = warehouse_id


class InvalidSource(InventoryError):
    code = "INVALID_SOURCE"

    def __init__(self, product_id: str, from_warehouse: str, current_warehouse: str):
        super().__init__(f"Product is not currently in warehouse {from_warehouse}")
        self.product_id = product_id
        self.from_warehouse = from_warehouse
        self.current_warehouse = current_warehouse


class InsufficientStock(InventoryError):
    code = "INSUFFICIENT_STOCK"

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(
            f"Cannot transfer {requested} items. Only {available} available in stock"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class InvalidQuantity(InventoryError):
    code = "INVALID_QUANTITY"

    def __init__(self, field: str, value: int):
        super().__init__(f"{field} must be >= 0 (got {value})")
        self.field = field
        self.value = value
