import json

import pytest

from httx.parser.base import HttpDocument, VariableSources
from httx.resolver import coerce_value, resolve_document, resolve_variables


def _sources(overrides=None, environment=None) -> VariableSources:
    return VariableSources(overrides=overrides or {}, environment=environment or {})


class TestTemplateVariables:
    def test_override_beats_environment(self):
        assert resolve_variables("{{x}}", _sources({"x": "1"}, {"x": "2"})) == "1"

    def test_environment_used_without_override(self):
        assert resolve_variables("{{x}}", _sources({}, {"x": "2"})) == "2"

    def test_missing_variable_left_unchanged(self):
        assert resolve_variables("{{x}}", _sources()) == "{{x}}"

    def test_multiple_placeholders(self):
        text = "{{scheme}}://{{host}}/{{missing}}"
        result = resolve_variables(text, _sources(environment={"scheme": "https", "host": "api"}))
        assert result == "https://api/{{missing}}"

    def test_empty_override_value_is_used(self):
        assert resolve_variables("a{{x}}b", _sources({"x": ""}, {"x": "2"})) == "ab"


class TestProcessEnvironment:
    def test_set_variable(self, monkeypatch):
        monkeypatch.setenv("HTTX_TEST_TOKEN", "abc")
        assert resolve_variables("Bearer ${HTTX_TEST_TOKEN}", _sources()) == "Bearer abc"

    def test_unset_variable_left_unchanged(self, monkeypatch):
        monkeypatch.delenv("HTTX_TEST_TOKEN", raising=False)
        assert resolve_variables("${HTTX_TEST_TOKEN}", _sources()) == "${HTTX_TEST_TOKEN}"

    def test_empty_variable_left_unchanged(self, monkeypatch):
        monkeypatch.setenv("HTTX_TEST_TOKEN", "")
        assert resolve_variables("${HTTX_TEST_TOKEN}", _sources()) == "${HTTX_TEST_TOKEN}"

    def test_not_read_from_sources(self, monkeypatch):
        monkeypatch.delenv("HTTX_TEST_TOKEN", raising=False)
        sources = _sources({"HTTX_TEST_TOKEN": "x"}, {"HTTX_TEST_TOKEN": "y"})
        assert resolve_variables("${HTTX_TEST_TOKEN}", sources) == "${HTTX_TEST_TOKEN}"


class TestCoerceValue:
    def test_booleans_and_null(self):
        assert coerce_value("true") is True
        assert coerce_value("false") is False
        assert coerce_value("null") is None

    def test_numbers(self):
        assert coerce_value("5") == 5
        assert coerce_value("-2.5") == -2.5
        assert coerce_value("1e3") == 1000

    def test_strings(self):
        assert coerce_value("abc") == "abc"
        assert coerce_value("True") == "True"
        assert coerce_value(" 5") == " 5"


class TestResolveDocument:
    def test_json_body_patch(self):
        doc = HttpDocument(method="POST", url="https://a", body='{"a":1,"b":2}')
        resolved = resolve_document(doc, _sources({"a": "5", "c": "9"}))
        assert json.loads(resolved.body) == {"a": 5, "b": 2}

    def test_patch_reformats_even_without_matches(self):
        doc = HttpDocument(method="POST", url="https://a", body='{"a":1}')
        resolved = resolve_document(doc, _sources({"x": "1"}))
        assert resolved.body == '{\n  "a": 1\n}'

    def test_no_overrides_keeps_body_text(self):
        doc = HttpDocument(method="POST", url="https://a", body='{"a":"{{v}}"}')
        resolved = resolve_document(doc, _sources(environment={"v": "z"}))
        assert resolved.body == '{"a":"z"}'

    def test_typed_patch_values(self):
        doc = HttpDocument(method="POST", url="https://a", body='{"on": "x", "gone": 1, "name": 2}')
        resolved = resolve_document(doc, _sources({"on": "true", "gone": "null", "name": "bob"}))
        assert json.loads(resolved.body) == {"on": True, "gone": None, "name": "bob"}

    def test_substitution_happens_before_patch(self):
        doc = HttpDocument(method="POST", url="https://a", body='{"a": "{{x}}", "b": 0}')
        resolved = resolve_document(doc, _sources({"x": "hi", "b": "7"}))
        assert json.loads(resolved.body) == {"a": "hi", "b": 7}

    def test_non_object_json_body_not_patched(self):
        doc = HttpDocument(method="POST", url="https://a", body='[{"a":1}]')
        resolved = resolve_document(doc, _sources({"a": "5"}))
        assert resolved.body == '[{"a":1}]'

    def test_invalid_json_body_keeps_substituted_text(self):
        doc = HttpDocument(method="POST", url="https://a", body="name={{a}}")
        resolved = resolve_document(doc, _sources({"a": "5"}))
        assert resolved.body == "name=5"

    def test_url_and_headers_resolved(self):
        doc = HttpDocument(
            method="GET",
            url="{{base}}/users",
            headers={"Authorization": "Bearer {{token}}", "{{k}}": "v"},
        )
        resolved = resolve_document(doc, _sources(environment={"base": "https://a", "token": "t", "k": "K"}))
        assert resolved.url == "https://a/users"
        assert resolved.headers == {"Authorization": "Bearer t", "{{k}}": "v"}
        assert resolved.method == "GET"

    def test_input_document_not_modified(self):
        doc = HttpDocument(method="POST", url="{{base}}", headers={"A": "{{a}}"}, body='{"a": 1}')
        resolved = resolve_document(doc, _sources({"base": "https://a", "a": "2"}))
        assert resolved is not doc
        assert doc.url == "{{base}}"
        assert doc.headers == {"A": "{{a}}"}
        assert doc.body == '{"a": 1}'

    def test_comments_and_docs_kept(self):
        doc = HttpDocument(method="GET", url="https://a", comments=["note"])
        resolved = resolve_document(doc, _sources())
        assert resolved.comments == ("note",)
        assert resolved.docs == doc.docs

    def test_changing_resolved_headers_leaves_input_alone(self):
        doc = HttpDocument(method="GET", url="https://a", headers={"X": "1"}, comments=["note"])
        resolved = resolve_document(doc, _sources())
        resolved.headers["X"] = "changed"
        assert doc.headers == {"X": "1"}
        with pytest.raises(AttributeError):
            resolved.comments.append("more")
        assert doc.comments == ("note",)
