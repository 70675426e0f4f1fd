"""
Cliente HTTP para descargar páginas HTML.

Capa fina sobre requests con:
- Headers de navegador por defecto
- Timeout configurable
- Logging estructurado

No reintenta: cualquier error de red o status HTTP de error se propaga
y aborta la ejecución.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)


class HttpClient:
    """Cliente HTTP que devuelve el HTML de una URL."""

    DEFAULT_HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-IN,en;q=0.9",
    }

    def __init__(
        self,
        timeout: int = 30,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Inicializa el cliente HTTP.

        Args:
            timeout: Timeout por request en segundos.
            headers: Headers adicionales para las peticiones.
        """
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(self.DEFAULT_HEADERS)
        if headers:
            self.session.headers.update(headers)

    def get(self, url: str) -> str:
        """
        Realiza una petición GET y devuelve el cuerpo como texto.

        Args:
            url: URL a consultar.

        Returns:
            HTML de la respuesta.

        Raises:
            requests.RequestException: Error de red o status HTTP de error.
        """
        logger.debug(f"GET {url}")
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        logger.debug(f"{response.status_code} {url} ({len(response.text)} bytes)")
        return response.text
