"""
Buckets temáticos de keywords.

Cada bucket agrupa keywords de búsqueda para un tipo de producto. Una
categoría GST cae en un bucket si su nombre coincide con alguno de los
patrones; se evalúan en orden y gana el primero.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Tuple

DEFAULT_BUCKET = "default"

# Keywords por bucket
KEYWORD_BUCKETS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "food": (
        "pizza",
        "burger",
        "biryani",
        "cake",
        "bread",
        "chicken",
        "dal",
        "rice",
        "milkshake",
        "chocolate",
        "vanilla",
        "strawberry",
        "smoothie",
    ),
    "beverages": (
        "tea",
        "coffee",
        "coke",
        "pepsi",
        "juice",
        "milk",
        "milkshake",
        "smoothie",
        "chocolate",
        "vanilla",
    ),
    "electronics": (
        "mobile",
        "phone",
        "laptop",
        "tv",
        "tablet",
        "headphones",
        "charger",
    ),
    "clothing": ("shirt", "tshirt", "jeans", "dress", "kurta"),
    "jewelry": ("gold", "diamond", "silver", "necklace", "ring", "earrings"),
    DEFAULT_BUCKET: (),
})

# Orden de evaluación: el primer patrón que coincide decide el bucket
BUCKET_RULES: Tuple[Tuple[str, re.Pattern], ...] = (
    ("food", re.compile(r"food|butter|cheese|milk|spreads|snack|cooked|restaurant")),
    ("beverages", re.compile(r"drink|beverage|tea|coffee|juice")),
    ("electronics", re.compile(r"laptop|mobile|phone|television|tv|tablet")),
    ("clothing", re.compile(r"shirt|jeans|dress|kurta")),
    ("jewelry", re.compile(r"gold|diamond|silver|jewellery|jewelry")),
)


def match_bucket(category: str) -> str:
    """Devuelve el nombre del bucket para una categoría ("default" si ninguno)."""
    lower = category.lower()
    for bucket, pattern in BUCKET_RULES:
        if pattern.search(lower):
            return bucket
    return DEFAULT_BUCKET


def map_category_to_keywords(category: str) -> List[str]:
    """
    Keywords del bucket temático de una categoría.

    Args:
        category: Nombre de la categoría tal como viene de la tabla.

    Returns:
        Copia de la lista de keywords del bucket (vacía si no hay match).
    """
    return list(KEYWORD_BUCKETS[match_bucket(category)])
