import pytest
from pydantic import ValidationError

from httx.parser.base import ExportedRequest, HttpDocument, ParamDoc, RequestDocs, VariableSources


class TestHttpDocument:
    def test_defaults(self):
        doc = HttpDocument()
        assert doc.method == ""
        assert doc.headers == {}
        assert doc.docs == RequestDocs()
        assert not doc.has_request_line

    def test_is_frozen(self):
        doc = HttpDocument(method="GET", url="https://a")
        with pytest.raises(ValidationError):
            doc.url = "https://b"

    def test_comments_and_params_are_tuples(self):
        doc = HttpDocument(
            comments=["a"],
            docs=RequestDocs(params=[ParamDoc(name="id", location="path")]),
        )
        assert doc.comments == ("a",)
        assert isinstance(doc.docs.params, tuple)

    def test_headers_are_copied_on_construction(self):
        headers = {"X": "1"}
        doc = HttpDocument(method="GET", url="https://a", headers=headers)
        headers["X"] = "changed"
        assert doc.headers == {"X": "1"}

    def test_header_lookup(self):
        doc = HttpDocument(method="GET", url="https://a", headers={"Content-Type": "text/plain"})
        assert doc.header("Content-Type") == "text/plain"
        assert doc.header("content-type") == ""

    def test_serialization_roundtrip(self):
        doc = HttpDocument(
            method="POST",
            url="https://a",
            headers={"A": "1"},
            body="x",
            comments=["@summary S"],
            docs=RequestDocs(summary="S", params=[ParamDoc(name="id", location="path")]),
        )
        assert HttpDocument(**doc.model_dump()) == doc


class TestOtherModels:
    def test_variable_sources_default_empty(self):
        sources = VariableSources()
        assert sources.overrides == {}
        assert sources.environment == {}

    def test_exported_request_defaults_to_root(self):
        req = ExportedRequest(name="ping", document=HttpDocument(method="GET", url="https://a"))
        assert req.folder == ""
