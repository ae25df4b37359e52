"""Checks that exported collection text is well-formed.

This only verifies the text parses as JSON or YAML and has the expected
top-level keys. It does not validate against the Postman, Insomnia or
OpenAPI schemas.
"""

import json

import yaml

REQUIRED_KEYS = {
    "postman": ("info", "item"),
    "insomnia": ("_type", "resources"),
    "openapi": ("openapi", "info", "paths"),
}


def validate_export(content: str, fmt: str) -> list[str]:
    """Check one export's text.

    Returns a list of error messages, empty when the text is well-formed.
    """
    try:
        if fmt == "openapi":
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except yaml.YAMLError as e:
        return [f"YAMLError: {e}"]
    except json.JSONDecodeError as e:
        return [f"JSONDecodeError: {e.msg} (line {e.lineno})"]

    if not isinstance(data, dict):
        return ["top level is not a mapping"]
    return [f"missing top-level key {key!r}" for key in REQUIRED_KEYS.get(fmt, ()) if key not in data]
