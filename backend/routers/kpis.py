from fastapi import APIRouter, Query
from typing import List

from core.kpis import generate_kpis
from schemas.kpis import KpiRead

router = APIRouter()


@router.get("/", response_model=List[KpiRead])
async def get_kpis(range_: str = Query(..., alias="range")):
    """Mock daily stock/demand series. range: 7d, 14d, anything else is 30 days."""
    return [KpiRead.model_validate(p) for p in generate_kpis(range_)]
