"""Data models for request documents.

The parser, the curl importer and the resolver all produce these
models; exporters and snippet generators consume them.
"""

from pydantic import BaseModel, ConfigDict, field_validator

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


class ParamDoc(BaseModel):
    """A parameter declared with an ``@param`` annotation."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # query / path / header / cookie
    description: str = ""


class RequestDocs(BaseModel):
    """Structured annotations taken from the leading comment block."""

    model_config = ConfigDict(frozen=True)

    summary: str = ""
    description: str = ""
    params: tuple[ParamDoc, ...] = ()


class HttpDocument(BaseModel):
    """One HTTP request definition.

    Headers keep the order they were written in; a repeated key keeps
    its first position and takes the last value. Every document owns a
    private copy of its headers, so changing one never reaches another.
    """

    model_config = ConfigDict(frozen=True)

    method: str = ""  # upper-cased verb, or "" when no request line was found
    url: str = ""
    headers: dict[str, str] = {}
    body: str = ""
    comments: tuple[str, ...] = ()
    docs: RequestDocs = RequestDocs()

    @field_validator("headers", mode="after")
    @classmethod
    def _own_headers(cls, value: dict[str, str]) -> dict[str, str]:
        return dict(value)

    @property
    def has_request_line(self) -> bool:
        return bool(self.method)

    def header(self, name: str) -> str:
        """Return a header value by exact key, or "" if absent."""
        return self.headers.get(name, "")


class VariableSources(BaseModel):
    """Values available to placeholder substitution."""

    model_config = ConfigDict(frozen=True)

    overrides: dict[str, str] = {}  # --set values, highest precedence
    environment: dict[str, str] = {}  # selected environment file


class ExportedRequest(BaseModel):
    """A document collected for export, with its place in the collection."""

    model_config = ConfigDict(frozen=True)

    folder: str = ""  # slash-joined path, "" = root
    name: str
    document: HttpDocument
