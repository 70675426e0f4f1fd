#!/usr/bin/env python3
"""
CLI para actualizar el dataset de tasas GST con keywords.

Uso:
    python main.py                            # Descarga, enriquece y guarda
    python main.py --dry-run                  # Sin escribir el archivo
    python main.py --output data/otro.json    # Ruta de salida alternativa
    python main.py -v                         # Logging detallado
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from config import get_settings
from gst_rates import Dataset, load_previous_items, save_dataset
from gst_rates.base import BaseScraper
from gst_rates.cleartax import ClearTaxScraper
from gst_rates.http_client import HttpClient
from gst_rates.keywords import KEYWORD_BUCKETS, KeywordEnricher, build_dataset

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configura logging hacia stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def run_update(
    output_file: Path,
    scraper: Optional[BaseScraper] = None,
    dry_run: bool = False,
) -> Dataset:
    """
    Ejecuta el ciclo completo: descarga, carga previa, enriquecimiento y guardado.

    Args:
        output_file: Ruta del dataset JSON (se lee y se reescribe).
        scraper: Scraper a usar. Por defecto ClearTax.
        dry_run: Si True, no escribe el archivo.

    Returns:
        Dataset generado.
    """
    inicio = datetime.now()
    scraper = scraper or ClearTaxScraper()

    logger.info(f"Descargando categorías GST de {scraper.SOURCE.upper()}...")
    rows = scraper.fetch_rows()

    logger.info("Cargando datos GST previos...")
    previous_items = load_previous_items(output_file)

    logger.info("Enriqueciendo keywords con aprendizaje acumulativo...")
    enricher = KeywordEnricher(previous_items)
    items = enricher.enrich_all(rows)
    dataset = build_dataset(items)

    stats = enricher.get_stats()
    duracion = (datetime.now() - inicio).total_seconds()

    logger.info("")
    logger.info("=" * 50)
    logger.info("RESUMEN")
    logger.info("=" * 50)
    logger.info(f"Filas descargadas: {len(rows)}")
    logger.info(f"Items previos: {len(previous_items)}")
    logger.info(f"Keywords arrastradas: {stats['carried_forward']}")
    logger.info(f"Categorías nuevas: {stats['new']}")
    logger.info("")
    logger.info("Buckets:")
    for bucket in KEYWORD_BUCKETS:
        logger.info(f"  - {bucket}: {stats.get(bucket, 0)}")
    logger.info(f"Duración: {duracion:.1f}s")
    logger.info("=" * 50)

    if dry_run:
        logger.info("Modo dry-run: no se escribe el archivo")
    else:
        save_dataset(dataset, output_file)
        logger.info(f"Datos GST guardados en {output_file} con keywords acumuladas")

    return dataset


def main(argv=None):
    """Punto de entrada del CLI."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Actualiza el dataset de tasas GST con keywords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--url",
        default=settings["source_url"],
        help="URL de la tabla de tasas GST",
    )
    parser.add_argument(
        "--output",
        type=Path,
        metavar="PATH",
        default=Path(settings["output_file"]),
        help="Archivo JSON del dataset",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="No escribir el archivo (solo descargar y enriquecer)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Mostrar información detallada",
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    scraper = ClearTaxScraper(
        http_client=HttpClient(timeout=settings["timeout"]),
        url=args.url,
    )

    try:
        run_update(args.output, scraper=scraper, dry_run=args.dry_run)
    except KeyboardInterrupt:
        logger.warning("Proceso interrumpido por el usuario")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
