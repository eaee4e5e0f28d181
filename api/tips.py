"""Tips API router.

Serves the static coaching tips; no session and no database involved.
"""

from fastapi import APIRouter

from schemas import TipsIndexResponse, CategoryTipsResponse
from services.tips_service import tips_service

router = APIRouter(prefix="/api/tips", tags=["tips"])


@router.get("", response_model=TipsIndexResponse)
def list_tips():
    return TipsIndexResponse(categories=tips_service.get_all())


@router.get("/{category}", response_model=CategoryTipsResponse)
def get_category_tips(category: str):
    """Return the tips of one category, an empty list when it is unknown."""
    return CategoryTipsResponse(category=category, tips=tips_service.get_tips_by_category(category))
