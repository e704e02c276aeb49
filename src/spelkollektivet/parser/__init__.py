"""Parser module for player commands."""

from spelkollektivet.parser.lexer import includes_any, tokenize
from spelkollektivet.parser.parser import ParseError, ParseResult, parse
from spelkollektivet.parser.vocabulary import Vocabulary

__all__ = [
    "ParseError",
    "ParseResult",
    "Vocabulary",
    "includes_any",
    "parse",
    "tokenize",
]
