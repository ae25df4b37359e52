"""Variable resolution for request documents.

Two placeholder syntaxes are substituted independently:

* ``{{name}}`` looks in the override mapping first, then in the
  selected environment.
* ``${NAME}`` reads the process environment. An empty value counts
  as unset.

Placeholders without a value are left in place. When overrides are
given and the resolved body is a JSON object, fields that already
exist in it are replaced by the typed override value.
"""

import json
import logging
import os
import re

from httx.parser.base import HttpDocument, VariableSources

logger = logging.getLogger(__name__)

TEMPLATE_VAR_RE = re.compile(r"\{\{(\w+)\}\}", re.ASCII)
PROCESS_ENV_RE = re.compile(r"\$\{([^}]+)\}")


def resolve_variables(text: str, sources: VariableSources) -> str:
    """Substitute ``{{name}}`` and ``${NAME}`` placeholders in text."""

    def template_value(match: re.Match) -> str:
        name = match.group(1)
        if name in sources.overrides:
            return sources.overrides[name]
        if name in sources.environment:
            return sources.environment[name]
        logger.debug("Unresolved variable {{%s}}", name)
        return match.group(0)

    result = TEMPLATE_VAR_RE.sub(template_value, text)
    return expand_process_env(result)


def expand_process_env(text: str) -> str:
    """Substitute ``${NAME}`` placeholders from the process environment."""

    def env_value(match: re.Match) -> str:
        value = os.environ.get(match.group(1), "")
        if value:
            return value
        logger.debug("Unresolved environment variable ${%s}", match.group(1))
        return match.group(0)

    return PROCESS_ENV_RE.sub(env_value, text)


def resolve_document(doc: HttpDocument, sources: VariableSources) -> HttpDocument:
    """Return a copy of doc with URL, header values and body resolved."""
    headers = {key: resolve_variables(value, sources) for key, value in doc.headers.items()}

    body = doc.body
    if body:
        body = resolve_variables(body, sources)
        if sources.overrides:
            body = _patch_json_body(body, sources.overrides)

    return HttpDocument(
        method=doc.method,
        url=resolve_variables(doc.url, sources),
        headers=headers,
        body=body,
        comments=doc.comments,
        docs=doc.docs,
    )


def coerce_value(value: str):
    """Convert an override string into the JSON value it denotes."""
    if value == "true":
        return True
    if value == "false":
        return False
    if value == "null":
        return None
    if value == value.strip() and "_" not in value:
        try:
            number = float(value)
        except ValueError:
            return value
        if number.is_integer():
            return int(number)
        return number
    return value


def _patch_json_body(body: str, overrides: dict[str, str]) -> str:
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        logger.debug("Body is not JSON, skipping field overrides")
        return body
    if not isinstance(parsed, dict):
        logger.debug("Body is not a JSON object, skipping field overrides")
        return body

    for key, value in overrides.items():
        if key in parsed:
            parsed[key] = coerce_value(value)

    try:
        return json.dumps(parsed, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError:
        logger.debug("Patched body is not serializable, keeping resolved text")
        return body
