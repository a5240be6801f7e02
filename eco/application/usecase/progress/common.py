"""Response models shared by the progress use cases."""

from pydantic import BaseModel

from eco.domain.service import ImpactTotals
from eco.domain.value import ImpactCategory


class MonthItem(BaseModel):
    """Records of one calendar month, summed."""

    month: str  # "Jan" to "Dec"
    actions: int
    points: float
    carbon_saved: float

    @classmethod
    def from_totals(cls, totals: ImpactTotals) -> "MonthItem":
        return cls(
            month=totals.label,
            actions=totals.count,
            points=float(totals.points),
            carbon_saved=float(totals.carbon_saved),
        )


class CategoryItem(BaseModel):
    """Records of one impact area, summed."""

    category: ImpactCategory
    count: int
    points: float
    carbon_saved: float

    @classmethod
    def from_totals(cls, totals: ImpactTotals) -> "CategoryItem":
        return cls(
            category=ImpactCategory(totals.label),
            count=totals.count,
            points=float(totals.points),
            carbon_saved=float(totals.carbon_saved),
        )
