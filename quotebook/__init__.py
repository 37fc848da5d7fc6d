"""
Quotebook domain package.
Provides the category enumeration, quote records and the in-memory store.
"""

from .models import Category, Quote, SEED_QUOTES
from .store import QuoteStore, format_category_listing, INVALID_INPUT_MESSAGE

__all__ = [
    "Category",
    "Quote",
    "SEED_QUOTES",
    "QuoteStore",
    "format_category_listing",
    "INVALID_INPUT_MESSAGE",
]
