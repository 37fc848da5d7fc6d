"""
In-memory quote store.
Owns the categorized quote collection for the lifetime of the process.
"""

import random
import threading
from typing import Dict, Iterable, List, Mapping, Optional

from utils import store_logger, ValidationError, ErrorCodes
from .models import Category, Quote, SEED_QUOTES

INVALID_INPUT_MESSAGE = "invalid or insufficient user input"


def format_category_listing(categories: Iterable[Category]) -> str:
    """每个分类一行的纯文本列表"""
    return "\n".join(f"A possible category is {category.value}" for category in categories)


class QuoteStore:
    """语录存储

    每个实例持有独立的分类 -> 语录列表映射；读取和追加都在同一把锁内完成，
    因此线程池中并发执行的请求不会看到追加到一半的列表。
    """

    def __init__(self, seed: Optional[Mapping[Category, List[Quote]]] = None,
                 rng: Optional[random.Random] = None):
        seed = SEED_QUOTES if seed is None else seed
        # 每个分类都必须有条目，且复制列表以免修改种子数据
        self._quotes: Dict[Category, List[Quote]] = {
            category: list(seed.get(category, [])) for category in Category
        }
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        store_logger.info(
            f"[QuoteStore] Initialized with {sum(len(q) for q in self._quotes.values())} quotes "
            f"in {len(self._quotes)} categories"
        )

    def list_categories(self) -> List[Category]:
        """按声明顺序返回全部分类"""
        return list(Category)

    def quotes(self, category: Category) -> List[Quote]:
        """返回某分类语录的快照副本"""
        with self._lock:
            return list(self._quotes[category])

    def count(self, category: Category) -> int:
        with self._lock:
            return len(self._quotes[category])

    def random_quote(self, category_name: str) -> Quote:
        """从指定分类中等概率随机取一条语录"""
        category = Category.parse(category_name)
        if category is None:
            store_logger.warning(f"[QuoteStore] Unknown category requested: {category_name!r}")
            raise ValidationError(
                f"no category listed for {category_name}",
                ErrorCodes.VALIDATION_INVALID_CATEGORY,
                context={"category": category_name}
            )

        with self._lock:
            quotes = self._quotes[category]
            if not quotes:
                raise ValidationError(
                    f"no quotes available for {category_name}",
                    ErrorCodes.VALIDATION_INVALID_CATEGORY,
                    context={"category": category_name}
                )
            return quotes[self._rng.randrange(len(quotes))]

    def add_quote(self, category_name: Optional[str], quote: Optional[str],
                  author: Optional[str]) -> Quote:
        """追加一条语录到分类末尾；任何字段缺失或分类非法都返回同一个错误"""
        category = Category.parse(category_name) if category_name else None
        if category is None or not quote or not author:
            store_logger.warning(
                f"[QuoteStore] Rejected new quote (category={category_name!r}, "
                f"quote_set={bool(quote)}, author_set={bool(author)})"
            )
            raise ValidationError(INVALID_INPUT_MESSAGE, ErrorCodes.VALIDATION_INVALID_INPUT)

        record = Quote(quote=quote, author=author)
        with self._lock:
            self._quotes[category].append(record)
            size = len(self._quotes[category])

        store_logger.info(f"[QuoteStore] Added quote by {author} to {category.value} ({size} total)")
        return record
