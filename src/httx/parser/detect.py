"""Auto-detect whether pasted text is a curl command or a request document."""


def detect_input(text: str) -> str:
    """Detect the kind of request text.

    Returns: 'curl' or 'http'.
    """
    words = text.strip().split(maxsplit=1)
    if words and words[0].lower() == "curl":
        return "curl"
    return "http"
