"""
parser.py

PURPOSE: Parse tokenized input into Command objects.
DEPENDENCIES: lexer, vocabulary, command model

ARCHITECTURE NOTES:
The grammar is deliberately small:
    COMMAND := VERB WORD*

The first word must be a known verb or one of its synonyms (exact match,
no fuzzy matching). Every following word is looked up in the vocabulary;
words that don't name a thing are dropped silently. The parser does not
check whether things are present - that's the handlers' job.
"""

from dataclasses import dataclass

from spelkollektivet.models.command import VERB_ALIASES, Command
from spelkollektivet.parser.lexer import tokenize
from spelkollektivet.parser.vocabulary import Vocabulary

EMPTY_INPUT_MESSAGE = "Try typing something."
UNKNOWN_VERB_MESSAGE = "I do not understand you."


@dataclass
class ParseError:
    """Represents a parsing error with a user-friendly message."""

    message: str
    raw_input: str


@dataclass
class ParseResult:
    """Result of parsing - either a Command or an error."""

    command: Command | None
    error: ParseError | None

    @property
    def success(self) -> bool:
        return self.command is not None

    @classmethod
    def ok(cls, command: Command) -> "ParseResult":
        return cls(command=command, error=None)

    @classmethod
    def fail(cls, message: str, raw_input: str) -> "ParseResult":
        return cls(command=None, error=ParseError(message, raw_input))


def parse(text: str, vocabulary: Vocabulary) -> ParseResult:
    """
    Parse player input into a Command.

    Args:
        text: Raw player input string
        vocabulary: Word -> thing bindings used to resolve mentioned things

    Returns:
        ParseResult containing either a Command or an error
    """
    raw_input = text.strip()
    words = tokenize(raw_input)

    if not words:
        return ParseResult.fail(EMPTY_INPUT_MESSAGE, raw_input)

    verb = VERB_ALIASES.get(words[0])
    if verb is None:
        return ParseResult.fail(UNKNOWN_VERB_MESSAGE, raw_input)

    things = vocabulary.resolve_all(words[1:])

    return ParseResult.ok(
        Command(
            verb=verb,
            words=tuple(words),
            things=tuple(things),
            raw_input=raw_input,
        )
    )
