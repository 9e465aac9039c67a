"""Tests for the tokenizer."""

from grue.engine.lexer import tokenize


def _words(text: str) -> list[str]:
    return [t.word for t in tokenize(text)]


def test_lowercases_and_positions():
    """Tokens are lowercased and keep their offsets."""
    tokens = tokenize("Take the LAMP")
    assert [t.word for t in tokens] == ["take", "the", "lamp"]
    assert [t.position for t in tokens] == [0, 5, 9]


def test_empty_input():
    """Blank input produces no tokens."""
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_trailing_punctuation_dropped():
    """Sentence punctuation at the end of a word is removed."""
    assert _words("hello! where am I?") == ["hello", "where", "am", "i"]


def test_commas_separate_words():
    """Commas split words even without spaces."""
    assert _words("take lamp,sword, knife") == ["take", "lamp", "sword", "knife"]


def test_lone_punctuation_dropped():
    """A token made only of punctuation disappears."""
    assert _words("look . !") == ["look"]
