"""OpenAPI 3.0 exporter.

The YAML is written as text, line by line. String values are single
quoted with embedded quotes doubled; nothing else is escaped.
"""

import logging
import re
from urllib.parse import urlsplit

from httx.parser.base import ExportedRequest

logger = logging.getLogger(__name__)


def quote(value: str) -> str:
    """Single-quote a YAML scalar."""
    return "'" + value.replace("'", "''") + "'"


def extract_path(raw_url: str) -> str:
    """Find the URL path used to group operations.

    URLs starting with a template placeholder such as ``{{base_url}}/users``
    have no scheme, so the path is located by the first slash after ``//``
    or else the first slash in the string. Any query or fragment is dropped.
    """
    try:
        parts = urlsplit(raw_url)
    except ValueError:
        parts = None
    if parts is not None and parts.scheme and parts.netloc and parts.path:
        return parts.path

    raw = re.split(r"[?#]", raw_url, maxsplit=1)[0]
    idx = raw.find("/")
    if idx < 0:
        return "/"
    _, sep, rest = raw.partition("//")
    if sep:
        slash = rest.find("/")
        if slash >= 0:
            return rest[slash:]
    return raw[idx:]


def export_openapi(name: str, requests: list[ExportedRequest]) -> str:
    """Render requests as an OpenAPI 3.0 YAML string."""
    paths: dict[str, dict[str, ExportedRequest]] = {}
    for req in requests:
        method = req.document.method.lower()
        if not method:
            logger.warning("Skipping %r: no request line", req.name)
            continue
        path = extract_path(req.document.url)
        operations = paths.setdefault(path, {})
        if method in operations:
            logger.warning("Skipping %r: %s %s already exported", req.name, method.upper(), path)
            continue
        operations[method] = req

    lines = [
        "openapi: '3.0.0'",
        "info:",
        f"  title: {quote(name)}",
        "  version: '1.0.0'",
        "paths:",
    ]
    for path in sorted(paths):
        lines.append(f"  {quote(path)}:")
        for method, req in paths[path].items():
            lines.append(f"    {method}:")
            lines.extend(_operation_lines(req))

    return "\n".join(lines) + "\n"


def _content_type(headers: dict[str, str]) -> str:
    for key, value in headers.items():
        if key.lower() == "content-type":
            return value
    return ""


def _operation_lines(req: ExportedRequest) -> list[str]:
    doc = req.document
    docs = doc.docs
    lines = [f"      summary: {quote(docs.summary or req.name)}"]

    if docs.description:
        lines.append(f"      description: {quote(docs.description)}")

    if req.folder:
        lines.append("      tags:")
        lines.append(f"        - {quote(req.folder)}")

    if docs.params:
        lines.append("      parameters:")
        for param in docs.params:
            lines.append(f"        - name: {quote(param.name)}")
            lines.append(f"          in: {quote(param.location)}")
            if param.description:
                lines.append(f"          description: {quote(param.description)}")
            lines.append("          schema:")
            lines.append("            type: string")

    if doc.body:
        content_type = _content_type(doc.headers) or "application/json"
        lines.extend([
            "      requestBody:",
            "        content:",
            f"          {quote(content_type)}:",
            "            schema:",
            "              type: object",
        ])

    lines.extend([
        "      responses:",
        "        '200':",
        "          description: Successful response",
    ])
    return lines
