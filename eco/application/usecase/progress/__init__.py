"""Progress use cases."""

from .common import CategoryItem, MonthItem
from .get_monthly_progress import (
    GetMonthlyProgressRequest,
    GetMonthlyProgressResponse,
    GetMonthlyProgressUseCase,
)
from .get_progress import GetProgressResponse, GetProgressUseCase

__all__ = [
    "CategoryItem",
    "GetMonthlyProgressRequest",
    "GetMonthlyProgressResponse",
    "GetMonthlyProgressUseCase",
    "GetProgressResponse",
    "GetProgressUseCase",
    "MonthItem",
]
