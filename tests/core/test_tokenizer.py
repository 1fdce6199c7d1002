"""Tests for spec string tokenization."""

from core.tokenizer import tokenize


class TestTokenize:
    def test_single_clause(self) -> None:
        assert tokenize("123") == ["123"]

    def test_keeps_order(self) -> None:
        assert tokenize("130-135,123,^132") == ["130-135", "123", "^132"]

    def test_trims_and_drops_empty(self) -> None:
        assert tokenize("  123  ,  ,  456  ") == ["123", "456"]

    def test_empty_input(self) -> None:
        assert tokenize("") == []
        assert tokenize(None) == []

    def test_only_separators(self) -> None:
        assert tokenize(" , ,, ") == []

    def test_does_not_validate(self) -> None:
        assert tokenize("abc,1-") == ["abc", "1-"]
