"""Collection export dispatch, default filenames and file filters."""

import logging
from collections.abc import Callable
from typing import NamedTuple

from httx.errors import EmptyCollectionError, UnsupportedFormatError
from httx.parser.base import ExportedRequest

from .insomnia import export_insomnia
from .openapi import export_openapi
from .postman import export_postman

logger = logging.getLogger(__name__)


class ExportFormat(NamedTuple):
    render: Callable[[str, list[ExportedRequest]], str]
    suffix: str  # appended to the collection's file-safe name
    filter_label: str
    filter_pattern: str


EXPORT_FORMATS: dict[str, ExportFormat] = {
    "postman": ExportFormat(export_postman, ".postman_collection.json", "JSON Files (*.json)", "*.json"),
    "insomnia": ExportFormat(export_insomnia, ".insomnia.json", "JSON Files (*.json)", "*.json"),
    "openapi": ExportFormat(export_openapi, ".openapi.yaml", "YAML Files (*.yaml)", "*.yaml"),
}


def generate_export(name: str, requests: list[ExportedRequest], fmt: str) -> str:
    """Render a collection in the given format.

    Raises:
        UnsupportedFormatError: fmt is not a known format key.
        EmptyCollectionError: requests is empty.
    """
    if fmt not in EXPORT_FORMATS:
        raise UnsupportedFormatError(fmt)
    if not requests:
        raise EmptyCollectionError(name)

    logger.debug("Exporting %d requests from %r as %s", len(requests), name, fmt)
    return EXPORT_FORMATS[fmt].render(name, requests)


def safe_name(name: str) -> str:
    return name.lower().replace(" ", "-")


def export_filename(name: str, fmt: str) -> str:
    """Default output filename for a collection export."""
    export_format = EXPORT_FORMATS.get(fmt)
    suffix = export_format.suffix if export_format else ".json"
    return safe_name(name) + suffix


def export_file_filter(fmt: str) -> tuple[str, str]:
    """Return the (display label, glob pattern) file-picker filter for a format."""
    export_format = EXPORT_FORMATS.get(fmt)
    if export_format is None:
        return "All Files", "*.*"
    return export_format.filter_label, export_format.filter_pattern
