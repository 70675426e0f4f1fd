"""
Modelos de datos para el scraping de tasas GST.

Define el contrato común entre el scraper, el enriquecedor de keywords
y el archivo JSON persistido.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CategoryRow:
    """Fila extraída de la tabla de tasas: categoría y porcentaje GST."""

    item_category: str
    gst_percent: int

    def __str__(self) -> str:
        return f"{self.item_category} ({self.gst_percent}%)"


@dataclass
class EnrichedItem:
    """
    Categoría con sus keywords acumuladas.

    Las keywords van en minúsculas y sin duplicados. El orden se conserva
    tal como aparecieron, pero no tiene significado.
    """

    item_category: str
    gst_percent: Optional[int]
    keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para JSON."""
        return {
            "item_category": self.item_category,
            "gst_percent": self.gst_percent,
            "keywords": list(self.keywords),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnrichedItem":
        """Construye un item desde el JSON persistido."""
        return cls(
            item_category=data["item_category"],
            gst_percent=data.get("gst_percent"),
            keywords=list(data.get("keywords") or []),
        )


@dataclass
class Dataset:
    """Snapshot completo que se guarda en disco en cada ejecución."""

    last_updated: str
    items: List[EnrichedItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_updated": self.last_updated,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dataset":
        return cls(
            last_updated=data.get("last_updated", ""),
            items=[EnrichedItem.from_dict(d) for d in data.get("items") or []],
        )
