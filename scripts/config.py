"""
Configuración del scraper usando variables de entorno.
"""
import os
from dotenv import load_dotenv

from gst_rates.cleartax import ClearTaxScraper
from gst_rates.store import OUTPUT_FILE

# Cargar variables de entorno desde .env
load_dotenv()

DEFAULT_SOURCE_URL = ClearTaxScraper.URL
DEFAULT_OUTPUT_FILE = str(OUTPUT_FILE)


def get_settings():
    """
    Obtiene la configuración del scraper desde variables de entorno.

    Returns:
        dict: URL de origen, archivo de salida y timeout HTTP
    """
    return {
        'source_url': os.getenv('GST_SOURCE_URL', DEFAULT_SOURCE_URL),
        'output_file': os.getenv('GST_OUTPUT_FILE', DEFAULT_OUTPUT_FILE),
        'timeout': int(os.getenv('GST_HTTP_TIMEOUT', '30')),
    }
