"""Schemas for the static tips endpoints."""

from pydantic import BaseModel
from typing import List


class TipCategory(BaseModel):
    category: str
    title: str
    tips: List[str]


class TipsIndexResponse(BaseModel):
    categories: List[TipCategory]


class CategoryTipsResponse(BaseModel):
    """Tips for one category; empty for an unknown category."""

    category: str
    tips: List[str]
