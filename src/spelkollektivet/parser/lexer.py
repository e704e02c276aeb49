"""
lexer.py

PURPOSE: Tokenize player input for the parser.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
The lexer converts raw input strings into a list of normalized words.
It handles:
- Lowercasing
- Splitting on whitespace
- Dropping empty tokens

No articles or punctuation are stripped: every word is kept so handlers
can tell a bare verb from a verb with arguments.
"""


def tokenize(text: str) -> list[str]:
    """
    Convert input text into a list of lowercase words.

    Args:
        text: Raw player input

    Returns:
        List of words, possibly empty
    """
    return text.lower().split()


def includes_any(words: list[str] | tuple[str, ...], candidates: frozenset[str]) -> bool:
    """
    Tell if any of the words is one of the candidates.

    Used for quantifiers such as "everything" that may appear anywhere.
    """
    return not candidates.isdisjoint(words)
