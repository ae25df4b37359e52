import pytest

from httx.errors import UnterminatedQuoteError
from httx.parser.tokenizer import tokenize


class TestTokenize:
    def test_quotes_and_escapes(self):
        assert tokenize("a 'b c' \"d\\\"e\"") == ["a", "b c", 'd"e']

    def test_unclosed_single_quote(self):
        with pytest.raises(UnterminatedQuoteError):
            tokenize("curl 'https://example.com")

    def test_unclosed_double_quote(self):
        with pytest.raises(UnterminatedQuoteError):
            tokenize('curl -d "{')

    def test_whitespace_collapses(self):
        assert tokenize("  a \t b\n\nc  ") == ["a", "b", "c"]

    def test_line_continuation(self):
        assert tokenize("curl \\\n  -X POST \\\n  https://a") == ["curl", "-X", "POST", "https://a"]

    def test_crlf_line_continuation(self):
        assert tokenize("curl \\\r\n  https://a") == ["curl", "https://a"]

    def test_backslash_escapes_space_outside_quotes(self):
        assert tokenize("a\\ b c") == ["a b", "c"]

    def test_no_escaping_inside_single_quotes(self):
        assert tokenize("'a\\b'") == ["a\\b"]

    def test_single_quote_inside_double_quotes(self):
        assert tokenize("\"it's\"") == ["it's"]

    def test_adjacent_quoted_parts_join(self):
        assert tokenize("-H'X: '\"1\"") == ["-HX: 1"]

    def test_empty_quotes_emit_nothing(self):
        assert tokenize("a '' b") == ["a", "b"]

    def test_empty_input(self):
        assert tokenize("") == []
