"""Shell-like tokenizer for command lines pasted from a terminal."""

from httx.errors import UnterminatedQuoteError

WHITESPACE = frozenset(" \t\n\r")


def tokenize(command: str) -> list[str]:
    """Split a command line into words.

    Backslash-newline continuations become a single space. Outside
    single quotes a backslash escapes the next character. Quotes are
    consumed, never emitted. An empty quoted string yields no token.

    Raises:
        UnterminatedQuoteError: a quote is still open at end of input.
    """
    command = command.replace("\\\n", " ").replace("\\\r\n", " ")

    tokens: list[str] = []
    current: list[str] = []
    in_single = False
    in_double = False
    escaped = False

    for ch in command:
        if escaped:
            current.append(ch)
            escaped = False
            continue

        if ch == "\\" and not in_single:
            escaped = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            continue

        if ch in WHITESPACE and not in_single and not in_double:
            if current:
                tokens.append("".join(current))
                current = []
            continue

        current.append(ch)

    if in_single or in_double:
        raise UnterminatedQuoteError("unterminated quote in command")

    if current:
        tokens.append("".join(current))

    return tokens
