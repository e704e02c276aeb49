"""
TEST DOC: Lexer

WHAT: Tests for input tokenization
WHY: Every handler relies on the word list to tell bare verbs from verbs with arguments
HOW: Test various input formats and edge cases

CASES:
- Simple word tokenization
- Lowercasing
- Quantifier detection

EDGE CASES:
- Empty input
- Whitespace-only input
- Extra whitespace between words
"""

from spelkollektivet.models.command import EVERYTHING_WORDS
from spelkollektivet.parser.lexer import includes_any, tokenize


class TestTokenize:
    """Tests for the tokenize function."""

    def test_simple_words(self):
        """Simple words are tokenized correctly."""
        assert tokenize("get suitcase") == ["get", "suitcase"]

    def test_lowercasing(self):
        """Input is lowercased."""
        assert tokenize("TALK TO James") == ["talk", "to", "james"]

    def test_small_words_kept(self):
        """Nothing is stripped; 'at' and 'to' stay in the word list."""
        assert tokenize("look at the plate") == ["look", "at", "the", "plate"]

    def test_extra_whitespace(self):
        """Runs of whitespace produce no empty tokens."""
        assert tokenize("  drop \t  mop  ") == ["drop", "mop"]

    def test_empty_input(self):
        """Empty input gives no words."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace-only input gives no words."""
        assert tokenize("   \t ") == []


class TestIncludesAny:
    """Tests for quantifier detection."""

    def test_everything(self):
        """'everything' is found anywhere in the words."""
        assert includes_any(["get", "everything"], EVERYTHING_WORDS)

    def test_all(self):
        """'all' is a synonym."""
        assert includes_any(("drop", "the", "all"), EVERYTHING_WORDS)

    def test_no_quantifier(self):
        """Ordinary words are not quantifiers."""
        assert not includes_any(["get", "suitcase"], EVERYTHING_WORDS)

    def test_empty(self):
        """No words means no quantifier."""
        assert not includes_any([], EVERYTHING_WORDS)
