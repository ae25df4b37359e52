"""Collect request documents from a project's request tree.

Requests are ``.http`` files under ``<project>/.httx/requests/``. An
optional ``<project>/.httx/order.json`` maps a directory path relative
to the requests root ("" for the root) to the preferred order of its
children's on-disk names.
"""

import json
import logging
from pathlib import Path

from httx.parser.base import ExportedRequest
from httx.parser.document import parse_file

logger = logging.getLogger(__name__)

REQUESTS_DIR = Path(".httx") / "requests"
ORDER_FILE = Path(".httx") / "order.json"
REQUEST_SUFFIX = ".http"


def requests_dir(project: Path) -> Path:
    return project / REQUESTS_DIR


def load_order(project: Path) -> dict[str, list[str]]:
    """Read the ordering map. A missing or malformed file gives an empty map."""
    path = project / ORDER_FILE
    if not path.is_file():
        return {}
    try:
        order = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.warning("Ignoring malformed order file %s", path)
        return {}
    if not isinstance(order, dict):
        return {}
    return {str(k): [str(n) for n in v] for k, v in order.items() if isinstance(v, list)}


def sort_children(children: list[Path], ordered: list[str]) -> list[Path]:
    """Order listed names first, in listed order, then the rest alphabetically."""
    position = {name: i for i, name in enumerate(ordered)}
    return sorted(
        children,
        key=lambda p: (0, position[p.name], "") if p.name in position else (1, 0, p.name),
    )


def collect_requests(project: Path) -> list[ExportedRequest]:
    """Parse every request file in a project, in tree order."""
    root = requests_dir(project)
    if not root.is_dir():
        return []

    requests: list[ExportedRequest] = []
    _collect(root, "", load_order(project), requests)
    logger.debug("Collected %d requests from %s", len(requests), root)
    return requests


def _collect(directory: Path, folder: str, order: dict[str, list[str]], out: list[ExportedRequest]) -> None:
    children = [
        p for p in directory.iterdir()
        if p.is_dir() or p.suffix == REQUEST_SUFFIX
    ]
    for child in sort_children(children, order.get(folder, [])):
        if child.is_dir():
            sub = f"{folder}/{child.name}" if folder else child.name
            _collect(child, sub, order, out)
            continue
        try:
            document = parse_file(child)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable request %s: %s", child, e)
            continue
        out.append(ExportedRequest(folder=folder, name=child.stem, document=document))
