"""
Módulo de keywords de categorías GST.

Proporciona los buckets temáticos y el enriquecimiento acumulativo.
"""

from .buckets import KEYWORD_BUCKETS, map_category_to_keywords, match_bucket
from .enricher import (
    KeywordEnricher,
    build_dataset,
    enrich_keywords,
    tokenize_category,
)

__all__ = [
    "KEYWORD_BUCKETS",
    "map_category_to_keywords",
    "match_bucket",
    "KeywordEnricher",
    "build_dataset",
    "enrich_keywords",
    "tokenize_category",
]
