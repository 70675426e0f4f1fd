"""
Scraper de ClearTax.

Descarga la página pública de tasas GST de ClearTax y extrae de cada tabla
las filas (categoría, porcentaje). La página no expone API: todo sale del
HTML, recorriendo todas las <table> del documento.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup

from ..base import BaseScraper
from ..models import CategoryRow

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[0-9]+")


def parse_gst_percent(text: str) -> Optional[int]:
    """
    Extrae el primer entero del texto de la celda de tasa.

    "18%" -> 18, "2.5%" -> 2, "Exempt" -> None.
    """
    match = _INTEGER_RE.search(text or "")
    if not match:
        return None
    return int(match.group(0))


def parse_rate_tables(html: str) -> List[CategoryRow]:
    """
    Recorre todas las tablas del HTML y devuelve sus filas válidas.

    Se descartan filas con menos de dos celdas <td>, con la primera celda
    vacía o sin ningún número en la segunda.

    Args:
        html: Documento HTML.

    Returns:
        Filas en el orden en que aparecen en el documento.
    """
    soup = BeautifulSoup(html, "lxml")
    rows: List[CategoryRow] = []
    skipped = 0

    for table in soup.find_all("table"):
        for tr in table.find_all("tr"):
            cols = tr.find_all("td")
            if len(cols) < 2:
                continue

            category = cols[0].get_text().strip()
            rate_text = cols[1].get_text().strip()
            if not category:
                continue

            gst_percent = parse_gst_percent(rate_text)
            if gst_percent is None:
                logger.debug(f"Fila sin tasa numérica: {category!r} -> {rate_text!r}")
                skipped += 1
                continue

            rows.append(CategoryRow(item_category=category, gst_percent=gst_percent))

    if skipped:
        logger.info(f"Filas descartadas sin tasa numérica: {skipped}")

    return rows


class ClearTaxScraper(BaseScraper):
    """Scraper para la tabla de tasas GST de ClearTax."""

    SOURCE = "cleartax"
    URL = "https://cleartax.in/s/gst-rates"

    def parse_rows(self, html: str) -> List[CategoryRow]:
        return parse_rate_tables(html)
