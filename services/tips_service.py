"""Static tips lookup.

Pure reads over the in-memory table in `data.tips`; unknown categories
yield an empty list instead of an error.
"""

from typing import Dict, List

from data.tips import TIPS_DATA
from schemas.tips_schema import TipCategory


class TipsService:
    """Lookup over a category -> {title, tips} table."""

    def __init__(self, table: Dict[str, dict] = None):
        self.table = TIPS_DATA if table is None else table

    def get_tips_by_category(self, category: str) -> List[str]:
        entry = self.table.get(category)
        return list(entry["tips"]) if entry else []

    def get_all_tip_categories(self) -> List[str]:
        return list(self.table.keys())

    def get_all(self) -> List[TipCategory]:
        return [
            TipCategory(category=name, title=entry["title"], tips=list(entry["tips"]))
            for name, entry in self.table.items()
        ]


# export singleton
tips_service = TipsService()
__all__ = ["TipsService", "tips_service"]
