"""Catalog discovery, reading, reporting and re-encoding."""

from .catalog import CatalogFormatError, CatalogRecord, iter_records, read_catalog_frame
from .convert import convert_catalog, convert_catalogs
from .files import FileFormat, get_catalog_paths, get_csv_paths, is_valid_csv_format
from .scan import scan_catalog

__all__ = [
    "CatalogFormatError",
    "CatalogRecord",
    "FileFormat",
    "convert_catalog",
    "convert_catalogs",
    "get_catalog_paths",
    "get_csv_paths",
    "is_valid_csv_format",
    "iter_records",
    "read_catalog_frame",
    "scan_catalog",
]
