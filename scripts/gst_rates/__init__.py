"""
Módulo de scraping de tasas GST.

Cada fuente tiene su propio submódulo que implementa BaseScraper.
"""

from .base import BaseScraper
from .models import CategoryRow, Dataset, EnrichedItem
from .store import load_previous_items, save_dataset

__all__ = [
    "BaseScraper",
    "CategoryRow",
    "Dataset",
    "EnrichedItem",
    "load_previous_items",
    "save_dataset",
]
