"""Insomnia v4 exporter."""

import json

from httx.parser.base import ExportedRequest

WORKSPACE_ID = "wrk_httx"


def folder_id(folder: str) -> str:
    """Request group id for a folder path."""
    return "fld_" + folder.replace("/", "_")


def export_insomnia(name: str, requests: list[ExportedRequest]) -> str:
    """Render requests as an Insomnia v4 export JSON string."""
    resources: list[dict] = [
        {
            "_id": WORKSPACE_ID,
            "_type": "workspace",
            "name": name,
            "parentId": None,
            "scope": "collection",
        }
    ]

    folder_ids: dict[str, str] = {}
    for req in requests:
        if req.folder and req.folder not in folder_ids:
            folder_ids[req.folder] = folder_id(req.folder)
            resources.append({
                "_id": folder_ids[req.folder],
                "_type": "request_group",
                "name": req.folder,
                "parentId": WORKSPACE_ID,
            })

    for i, req in enumerate(requests):
        doc = req.document
        resource = {
            "_id": f"req_{i}",
            "_type": "request",
            "name": req.name,
            "method": doc.method,
            "url": doc.url,
            "headers": [{"name": k, "value": v} for k, v in doc.headers.items()],
            "parentId": folder_ids[req.folder] if req.folder else WORKSPACE_ID,
        }
        if doc.body:
            resource["body"] = {"mimeType": "application/json", "text": doc.body}
        resources.append(resource)

    export = {
        "_type": "export",
        "__export_format": 4,
        "resources": resources,
    }
    return json.dumps(export, indent=2, ensure_ascii=False)
