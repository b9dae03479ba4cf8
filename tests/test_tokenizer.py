"""Tokenizer and renderer tests."""

import pytest

from tagsys.tokenizer import render_word, tokenize


class TestTokenize:

    def test_plain_text_is_one_symbol_per_character(self):
        assert tokenize("aab") == ("a", "a", "b")

    def test_whitespace_separated_symbols(self):
        assert tokenize("  q0 q1  q0 ") == ("q0", "q1", "q0")

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_blank_text_is_empty_word(self, text):
        assert tokenize(text) == ()

    def test_alphabet_drives_segmentation(self):
        assert tokenize("q0q1a", alphabet={"q0", "q1", "a"}) == ("q0", "q1", "a")

    def test_longest_match_wins(self):
        alphabet = {"a", "b", "ab"}
        assert tokenize("abab", alphabet) == ("ab", "ab")
        assert tokenize("aab", alphabet) == ("a", "ab")

    def test_unknown_character_falls_back_to_single_symbol(self):
        assert tokenize("q0x", alphabet={"q0"}) == ("q0", "x")

    def test_single_character_alphabet_reads_characters(self):
        assert tokenize("abc", alphabet={"a", "b", "c"}) == ("a", "b", "c")

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            tokenize(["a", "b"])


class TestRenderWord:

    def test_single_character_symbols_concatenate(self):
        assert render_word(("a", "b", "a")) == "aba"

    def test_multi_character_symbols_are_spaced(self):
        assert render_word(("q0", "a")) == "q0 a"

    def test_non_string_symbols(self):
        assert render_word((1, 0)) == "1 0"

    def test_empty_word(self):
        assert render_word(()) == ""

    def test_rendered_word_reads_back(self):
        word = ("q0", "a", "q1")
        assert tokenize(render_word(word), {"q0", "q1", "a"}) == word

    def test_mixed_length_alphabet_keeps_symbols_apart(self):
        alphabet = {"a", "b", "ab", "H"}
        assert render_word(("a", "b"), alphabet) == "a b"
        assert render_word(("ab",), alphabet) == "ab"

    @pytest.mark.parametrize(
        "word",
        [("a", "b"), ("ab",), ("a", "b", "ab"), ("ab", "a", "b", "H"), ()],
    )
    def test_mixed_length_alphabet_reads_back(self, word):
        alphabet = {"a", "b", "ab", "H"}
        assert tokenize(render_word(word, alphabet), alphabet) == word
