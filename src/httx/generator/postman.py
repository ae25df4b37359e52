"""Postman Collection v2.1 exporter."""

import json

from httx.parser.base import ExportedRequest

POSTMAN_SCHEMA = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"


def export_postman(name: str, requests: list[ExportedRequest]) -> str:
    """Render requests as a Postman Collection v2.1 JSON string.

    Requests are grouped one level deep by their folder string. Folder
    groups come first, sorted by name, followed by root requests in
    collection order.
    """
    folders: dict[str, list[dict]] = {}
    root_items: list[dict] = []

    for req in requests:
        item = _postman_item(req)
        if req.folder:
            folders.setdefault(req.folder, []).append(item)
        else:
            root_items.append(item)

    items = [{"name": folder, "item": folders[folder]} for folder in sorted(folders)]
    items.extend(root_items)

    collection = {
        "info": {"name": name, "schema": POSTMAN_SCHEMA},
        "item": items,
    }
    return json.dumps(collection, indent=2, ensure_ascii=False)


def _postman_item(req: ExportedRequest) -> dict:
    doc = req.document
    request = {
        "method": doc.method,
        "header": [{"key": k, "value": v} for k, v in doc.headers.items()],
        "url": {"raw": doc.url},
    }
    if doc.body:
        request["body"] = {"mode": "raw", "raw": doc.body}
    return {"name": req.name, "request": request}
