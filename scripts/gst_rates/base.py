"""
Clase base abstracta para scrapers de tablas de tasas.

Define el contrato que todos los scrapers deben implementar.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from .http_client import HttpClient
from .models import CategoryRow

logger = logging.getLogger(__name__)


class BaseScraper(ABC):
    """
    Clase base para scrapers de tasas GST.

    Cada fuente debe extender esta clase, definir su URL e
    implementar el parseo del HTML.
    """

    # Nombre de la fuente (debe sobrescribirse)
    SOURCE: str = "unknown"
    URL: str = ""

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        url: Optional[str] = None,
    ):
        """
        Inicializa el scraper.

        Args:
            http_client: Cliente HTTP a usar. Si no se proporciona,
                        se crea uno con configuración por defecto.
            url: URL alternativa a la de la clase.
        """
        self.http = http_client or HttpClient()
        self.url = url or self.URL

    @abstractmethod
    def parse_rows(self, html: str) -> List[CategoryRow]:
        """
        Extrae las filas (categoría, porcentaje) del HTML.

        Args:
            html: Documento HTML descargado.

        Returns:
            Lista de filas en el orden del documento.
        """
        pass

    def fetch_rows(self) -> List[CategoryRow]:
        """
        Descarga la página y extrae sus filas.

        Los errores de red se propagan sin reintentos.

        Returns:
            Lista de filas extraídas.
        """
        logger.info(f"Descargando tasas de {self.SOURCE}: {self.url}")
        html = self.http.get(self.url)
        rows = self.parse_rows(html)
        logger.info(f"Filas obtenidas de {self.SOURCE}: {len(rows)}")
        return rows
