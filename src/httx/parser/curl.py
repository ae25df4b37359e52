"""curl command importer.

Converts a curl command line into request document text and the
corresponding HttpDocument. Only a subset of curl flags is understood;
other flags are skipped on a best-effort basis.
"""

import logging

from httx.errors import EmptyCommandError, NoURLFoundError, UnterminatedQuoteError

from .base import HttpDocument
from .document import HEADER_KEY_RE, parse_document
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

METHOD_FLAGS = {"-X", "--request"}
HEADER_FLAGS = {"-H", "--header"}
DATA_FLAGS = {"-d", "--data", "--data-raw", "--data-binary"}
USER_FLAGS = {"-u", "--user"}
URL_FLAGS = {"--url"}

# Flags that never take an argument.
BOOLEAN_FLAGS = {
    "-L", "--location", "--location-trusted",
    "-s", "--silent",
    "-S", "--show-error",
    "-k", "--insecure",
    "-v", "--verbose",
    "-i", "--include",
    "-I", "--head",
    "-f", "--fail",
    "-g", "--globoff",
    "-N", "--no-buffer",
    "-n", "--netrc",
    "-j", "--junk-session-cookies",
    "-#", "--progress-bar",
    "-4", "--ipv4",
    "-6", "--ipv6",
    "-0", "--http1.0",
    "--http1.1", "--http2", "--http2-prior-knowledge", "--http3",
    "--compressed", "--no-keepalive", "--tr-encoding", "--raw", "--ssl",
}


def import_curl(command: str) -> HttpDocument:
    """Convert a curl command line into an HttpDocument."""
    return parse_document(curl_to_http(command))


def parse_curl_tokens(tokens: list[str]) -> HttpDocument:
    """Convert already tokenized curl arguments into an HttpDocument."""
    return parse_document(_build_http(*_scan(tokens)))


def curl_to_http(command: str) -> str:
    """Convert a curl command line into request document text.

    Raises:
        UnterminatedQuoteError: the command has an unclosed quote.
        EmptyCommandError: the command has no tokens.
        NoURLFoundError: no URL could be found.
    """
    try:
        tokens = tokenize(command)
    except UnterminatedQuoteError as e:
        raise UnterminatedQuoteError(f"failed to parse curl command: {e}") from e
    return _build_http(*_scan(tokens))


def _scan(tokens: list[str]) -> tuple[str, str, list[tuple[str, str]], str]:
    if not tokens:
        raise EmptyCommandError("empty curl command")

    if tokens[0].lower() == "curl":
        tokens = tokens[1:]

    method = ""
    url = ""
    headers: list[tuple[str, str]] = []
    body = ""

    i = 0
    while i < len(tokens):
        tok = tokens[i]
        value = tokens[i + 1] if i + 1 < len(tokens) else None

        if tok in METHOD_FLAGS:
            i += 1
            if value is not None:
                method = value.upper()
        elif tok in HEADER_FLAGS:
            i += 1
            if value is not None:
                key, sep, val = value.partition(":")
                if sep:
                    _add_header(headers, key.strip(), val.strip())
                else:
                    logger.debug("Discarding malformed header: %r", value)
        elif tok in DATA_FLAGS:
            i += 1
            if value is not None:
                body = value
        elif tok in USER_FLAGS:
            i += 1
            if value is not None:
                # Credentials are passed through as written, not base64 encoded
                _add_header(headers, "Authorization", "Basic " + value)
        elif tok in URL_FLAGS:
            i += 1
            if value is not None:
                url = value
        elif tok in BOOLEAN_FLAGS:
            pass
        elif not tok.startswith("-"):
            if not url:
                url = tok
        else:
            if value is not None and not value.startswith("-"):
                logger.debug("Skipping unknown flag %s with argument %r", tok, value)
                i += 1
            else:
                logger.debug("Skipping unknown flag %s", tok)
        i += 1

    if not url:
        raise NoURLFoundError("no URL found in curl command")

    if not method:
        method = "POST" if body else "GET"

    return method, url, headers, body


def _add_header(headers: list[tuple[str, str]], key: str, value: str) -> None:
    # Only headers the document parser reads back as headers are kept
    if not HEADER_KEY_RE.fullmatch(key) or not value.strip() or "\n" in value or "\r" in value:
        logger.debug("Discarding header that cannot be written: %r: %r", key, value)
        return
    headers.append((key, value))


def _build_http(method: str, url: str, headers: list[tuple[str, str]], body: str) -> str:
    lines = [f"{method} {url}"]
    lines.extend(f"{key}: {value}" for key, value in headers)
    text = "\n".join(lines) + "\n"
    if body:
        text += "\n" + body + "\n"
    return text
