from typing import Literal

ProductStatus = Literal["healthy", "low", "critical"]

HEALTHY = "healthy"
LOW = "low"
CRITICAL = "critical"

STATUSES = (HEALTHY, LOW, CRITICAL)


def derive_status(stock: int, demand: int) -> str:
    """Health of a product's supply vs demand. Never stored, always recomputed."""
    if stock > demand:
        return HEALTHY
    if stock == demand:
        return LOW
    return CRITICAL
