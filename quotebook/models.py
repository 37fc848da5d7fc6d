"""
Domain models for the quotebook.
Closed category enumeration, quote record and the seed collection.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """语录分类（固定集合，声明顺序即展示顺序）"""
    SUCCESS = "successQuotes"
    PERSEVERANCE = "perseveranceQuotes"
    HAPPINESS = "happinessQuotes"

    @classmethod
    def parse(cls, name: str) -> Optional["Category"]:
        """按名称精确匹配（区分大小写），无匹配返回 None"""
        try:
            return cls(name)
        except ValueError:
            return None


class Quote(BaseModel):
    """语录记录，没有标识字段，按内容比较"""
    model_config = ConfigDict(frozen=True)

    quote: str = Field(..., description="语录内容")
    author: str = Field(..., description="作者")


SEED_QUOTES: Dict[Category, List[Quote]] = {
    Category.SUCCESS: [
        Quote(
            quote="Success is not final, failure is not fatal: It is the courage to continue that counts.",
            author="Winston S. Churchill",
        ),
        Quote(
            quote="The way to get started is to quit talking and begin doing.",
            author="Walt Disney",
        ),
    ],
    Category.PERSEVERANCE: [
        Quote(
            quote="It’s not that I’m so smart, it’s just that I stay with problems longer.",
            author="Albert Einstein",
        ),
        Quote(
            quote="Perseverance is failing 19 times and succeeding the 20th.",
            author="Julie Andrews",
        ),
    ],
    Category.HAPPINESS: [
        Quote(
            quote="Happiness is not something ready made. It comes from your own actions.",
            author="Dalai Lama",
        ),
        Quote(
            quote="For every minute you are angry you lose sixty seconds of happiness.",
            author="Ralph Waldo Emerson",
        ),
    ],
}
