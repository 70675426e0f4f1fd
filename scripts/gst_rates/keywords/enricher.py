"""
Enriquecimiento de keywords con aprendizaje acumulativo.

Para cada categoría recién descargada combina:
- las keywords guardadas en la ejecución anterior (carry-forward),
- las palabras del propio nombre de la categoría,
- las keywords del bucket temático.

Las categorías guardadas que ya no aparecen en la descarga se descartan:
el dataset se reemplaza, no se acumula.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from ..models import CategoryRow, Dataset, EnrichedItem
from .buckets import KEYWORD_BUCKETS, match_bucket

logger = logging.getLogger(__name__)

# Todo lo que no sea carácter de palabra ASCII o espacio
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")


def tokenize_category(category: str) -> List[str]:
    """
    Palabras base de una categoría.

    "Milk and Cream" -> ["milk", "and", "cream"]
    """
    text = _NON_WORD_RE.sub("", category.lower())
    return [token for token in text.split() if token]


def merge_keywords(*sources: Iterable[str]) -> List[str]:
    """Une varias listas de keywords sin duplicados, en orden de aparición."""
    merged: Dict[str, None] = {}
    for source in sources:
        for keyword in source:
            merged.setdefault(keyword, None)
    return list(merged)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """Timestamp ISO-8601 en UTC con milisegundos: 2025-01-31T10:20:30.123Z"""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class KeywordEnricher:
    """
    Enriquece filas descargadas con las keywords de la ejecución anterior.

    Indexa los items previos por nombre en minúsculas; si un nombre se
    repite en el archivo, se queda con la primera aparición.
    """

    def __init__(self, previous_items: Optional[Iterable[EnrichedItem]] = None):
        """
        Args:
            previous_items: Items cargados del snapshot anterior.
        """
        self._previous: Dict[str, EnrichedItem] = {}
        for item in previous_items or []:
            self._previous.setdefault(item.item_category.lower(), item)

        self._stats: Dict[str, int] = {"carried_forward": 0, "new": 0}
        for bucket in KEYWORD_BUCKETS:
            self._stats[bucket] = 0

    def enrich(self, row: CategoryRow) -> EnrichedItem:
        """Calcula las keywords de una fila."""
        existing = self._previous.get(row.item_category.lower())
        previous_keywords = [k.lower() for k in existing.keywords] if existing else []

        bucket = match_bucket(row.item_category)
        keywords = merge_keywords(
            previous_keywords,
            tokenize_category(row.item_category),
            KEYWORD_BUCKETS[bucket],
        )

        self._stats["carried_forward" if existing else "new"] += 1
        self._stats[bucket] += 1
        logger.debug(f"{row} -> bucket {bucket}, {len(keywords)} keywords")

        return EnrichedItem(
            item_category=row.item_category,
            gst_percent=row.gst_percent,
            keywords=keywords,
        )

    def enrich_all(self, rows: Iterable[CategoryRow]) -> List[EnrichedItem]:
        """Enriquece todas las filas, conservando el orden de descarga."""
        return [self.enrich(row) for row in rows]

    def get_stats(self) -> Dict[str, int]:
        """Obtiene estadísticas: items por bucket, arrastrados y nuevos."""
        return dict(self._stats)


def enrich_keywords(
    rows: Iterable[CategoryRow],
    previous_items: Optional[Iterable[EnrichedItem]] = None,
) -> List[EnrichedItem]:
    """
    Enriquece filas descargadas con las keywords previas.

    Args:
        rows: Filas recién descargadas.
        previous_items: Items del snapshot anterior.

    Returns:
        Un item por fila, en el mismo orden.
    """
    return KeywordEnricher(previous_items).enrich_all(rows)


def build_dataset(
    items: List[EnrichedItem],
    now: Optional[datetime] = None,
) -> Dataset:
    """Envuelve los items en un snapshot con timestamp."""
    return Dataset(last_updated=utc_timestamp(now), items=list(items))
