from .scraper import ClearTaxScraper, parse_gst_percent, parse_rate_tables

__all__ = ["ClearTaxScraper", "parse_gst_percent", "parse_rate_tables"]
