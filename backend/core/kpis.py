import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional, Tuple

from core.config import settings


RANGE_DAYS = {"7d": 7, "14d": 14}
DEFAULT_DAYS = 30

_rng = random.Random()


@dataclass
class KpiPoint:
    date: str
    stock: int
    demand: int


def range_to_days(range_: str) -> int:
    return RANGE_DAYS.get(range_, DEFAULT_DAYS)


def generate_kpis(
    range_: str,
    *,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
    stock_range: Optional[Tuple[int, int]] = None,
    demand_range: Optional[Tuple[int, int]] = None,
) -> List[KpiPoint]:
    """
    Mock stock/demand series for the dashboard, one point per day, oldest first.

    The window ends today (UTC). Values are random and illustrative only.
    Bounds are half-open: [min, max).
    """
    today = today or datetime.now(timezone.utc).date()
    rng = rng or _rng
    stock_min, stock_max = stock_range or (settings.kpi_stock_min, settings.kpi_stock_max)
    demand_min, demand_max = demand_range or (settings.kpi_demand_min, settings.kpi_demand_max)

    days = range_to_days(range_)
    points: List[KpiPoint] = []
    for i in range(days - 1, -1, -1):
        d = today - timedelta(days=i)
        points.append(
            KpiPoint(
                date=d.isoformat(),
                stock=rng.randrange(stock_min, stock_max),
                demand=rng.randrange(demand_min, demand_max),
            )
        )
    return points
