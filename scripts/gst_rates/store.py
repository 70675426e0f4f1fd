"""
Persistencia del dataset GST en JSON.

El archivo se lee entero al empezar y se reescribe entero al terminar.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from .models import Dataset, EnrichedItem

logger = logging.getLogger(__name__)

# Ruta por defecto, relativa al directorio de trabajo
DATA_DIR = Path("data")
OUTPUT_FILE = DATA_DIR / "gst-data.json"


def load_previous_items(path: Union[str, Path] = OUTPUT_FILE) -> List[EnrichedItem]:
    """
    Carga los items del snapshot anterior.

    Args:
        path: Ruta al archivo JSON.

    Returns:
        Items en el orden del archivo, o lista vacía si no existe.

    Raises:
        json.JSONDecodeError: Si el archivo no es JSON válido.
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"Sin datos previos en {path}")
        return []

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    items = Dataset.from_dict(data).items
    logger.info(f"Items previos cargados: {len(items)}")
    return items


def save_dataset(dataset: Dataset, path: Union[str, Path] = OUTPUT_FILE) -> Path:
    """
    Guarda el dataset reemplazando el archivo anterior.

    Escribe en un temporal del mismo directorio y lo renombra al final,
    así un fallo a medias deja intacto el snapshot previo.

    Args:
        dataset: Snapshot a guardar.
        path: Ruta destino.

    Returns:
        Ruta del archivo escrito.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(dataset.to_dict(), f, ensure_ascii=False, indent=2)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise

    logger.info(f"Dataset guardado: {path} ({len(dataset.items)} items)")
    return path
