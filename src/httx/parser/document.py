"""Request document parser and writer.

A request document is plain text::

    # @summary List users
    # @param page query Page number
    GET {{base_url}}/users
    Accept: application/json

    optional body

Parsing is a single pass over the lines with four phases: leading
comments, the request line, headers, then the body. It never fails;
text without a request line yields a document with an empty method
and URL.
"""

import logging
import re
from pathlib import Path

from .base import HTTP_METHODS, HttpDocument, ParamDoc, RequestDocs

logger = logging.getLogger(__name__)

REQUEST_LINE_RE = re.compile(
    r"^(" + "|".join(HTTP_METHODS) + r")\s+(.+)$", re.IGNORECASE
)
HEADER_KEY_RE = re.compile(r"[\w-]+", re.ASCII)
HEADER_RE = re.compile(r"^([\w-]+)\s*:\s*(.+)$", re.ASCII)

SUMMARY_TAG = "@summary "
DESCRIPTION_TAG = "@description "
PARAM_TAG = "@param "

COMMENTS, REQUEST_LINE, HEADERS, BODY = "comments", "request-line", "headers", "body"


def parse_document(text: str) -> HttpDocument:
    """Parse request document text into an HttpDocument."""
    comments: list[str] = []
    summary = ""
    description = ""
    params: list[ParamDoc] = []
    method = ""
    url = ""
    headers: dict[str, str] = {}
    body_lines: list[str] = []
    phase = COMMENTS

    for line in text.split("\n"):
        trimmed = line.strip()

        if phase == COMMENTS:
            if not trimmed:
                continue
            if trimmed.startswith("#"):
                comment = trimmed[1:].strip()
                if comment.startswith(SUMMARY_TAG):
                    summary = comment[len(SUMMARY_TAG):].strip()
                elif comment.startswith(DESCRIPTION_TAG):
                    description = comment[len(DESCRIPTION_TAG):].strip()
                elif comment.startswith(PARAM_TAG):
                    param = _parse_param(comment[len(PARAM_TAG):])
                    if param is not None:
                        params.append(param)
                comments.append(comment)
                continue
            phase = REQUEST_LINE

        if phase == REQUEST_LINE:
            match = REQUEST_LINE_RE.match(trimmed)
            if match:
                method = match.group(1).upper()
                url = match.group(2).strip()
                phase = HEADERS
            else:
                logger.debug("Skipping line before request line: %r", trimmed)
            continue

        if phase == HEADERS:
            if not trimmed:
                phase = BODY
                continue
            match = HEADER_RE.match(trimmed)
            if match:
                headers[match.group(1)] = match.group(2).strip()
                continue
            # Not a header, so the body starts here
            phase = BODY
            body_lines.append(line)
            continue

        body_lines.append(line)

    while body_lines and not body_lines[-1].strip():
        body_lines.pop()

    if not method:
        logger.debug("No request line found in document")

    return HttpDocument(
        method=method,
        url=url,
        headers=headers,
        body="\n".join(body_lines),
        comments=comments,
        docs=RequestDocs(summary=summary, description=description, params=params),
    )


def parse_file(file_path: Path) -> HttpDocument:
    """Read and parse a request document file."""
    return parse_document(file_path.read_text(encoding="utf-8"))


def render_document(doc: HttpDocument) -> str:
    """Write a document back to its text form.

    ``parse_document(render_document(doc))`` reproduces the method, URL,
    headers, body and comments of ``doc``.
    """
    lines = [f"# {comment}" for comment in doc.comments]
    if doc.comments:
        lines.append("")

    lines.append(f"{doc.method} {doc.url}")
    for key, value in doc.headers.items():
        lines.append(f"{key}: {value}")

    if doc.body:
        lines.append("")
        lines.append(doc.body)

    return "\n".join(lines)


def _parse_param(text: str) -> ParamDoc | None:
    parts = text.split()
    if len(parts) < 2:
        logger.debug("Ignoring @param without name and location: %r", text)
        return None
    return ParamDoc(name=parts[0], location=parts[1], description=" ".join(parts[2:]))
