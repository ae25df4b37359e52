"""Exceptions raised by httx."""


class HttxError(Exception):
    """Base exception for httx errors."""

    pass


class UnterminatedQuoteError(HttxError):
    """A quote in a command line was never closed."""

    pass


class EmptyCommandError(HttxError):
    """A curl command line contained no tokens."""

    pass


class NoURLFoundError(HttxError):
    """A curl command line did not contain a URL."""

    pass


class UnsupportedFormatError(HttxError):
    """Requested export format or snippet language is unknown."""

    def __init__(self, fmt: str, kind: str = "export format"):
        self.format = fmt
        super().__init__(f"unsupported {kind}: {fmt}")


class EmptyCollectionError(HttxError):
    """An export was requested for a collection with no requests."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no requests found in collection {name!r}")


class EnvironmentNotFoundError(HttxError):
    """Named environment file does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"environment {name!r} not found")


class EnvironmentFileError(HttxError):
    """Environment file could not be parsed."""

    pass
