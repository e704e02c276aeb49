"""
vocabulary.py

PURPOSE: Resolve words in commands to thing IDs.
DEPENDENCIES: world model

ARCHITECTURE NOTES:
The vocabulary maps single words to thing IDs. It is built once from every
word of every thing's name, in catalog order, and the first thing to claim
a word keeps it ("plate" belongs to the clean plate, not the dirty one).

The word is a view, the ID is the truth. When one thing narratively takes
over from another (the plate gets dirty, the desk gets claimed), event and
rule logic calls rebind() so the same word reaches the new ID. Entries are
overwritten but never removed.
"""

import logging

from spelkollektivet.models.world import World

logger = logging.getLogger(__name__)


class Vocabulary:
    """Runtime-mutable mapping from words to thing IDs."""

    def __init__(self, bindings: dict[str, str] | None = None):
        self._bindings: dict[str, str] = dict(bindings or {})

    @classmethod
    def from_world(cls, world: World) -> "Vocabulary":
        """
        Build the vocabulary from thing names.

        Every whitespace-separated word of a thing's name refers to that
        thing, unless an earlier thing already claimed the word.
        """
        bindings: dict[str, str] = {}
        for thing in world.things:
            for word in thing.name.lower().split():
                bindings.setdefault(word, thing.id)
        return cls(bindings)

    def resolve(self, word: str) -> str | None:
        """Get the thing ID a word refers to, or None if unrecognized."""
        return self._bindings.get(word)

    def resolve_all(self, words: list[str] | tuple[str, ...]) -> list[str]:
        """
        Resolve a sequence of words to thing IDs.

        Unrecognized words are dropped. Order and repeated mentions are kept.
        """
        things: list[str] = []
        for word in words:
            thing_id = self.resolve(word)
            if thing_id is not None:
                things.append(thing_id)
        return things

    def rebind(self, word: str, thing_id: str) -> None:
        """Make a word refer to a different thing from now on."""
        logger.debug(f"Rebinding '{word}' to '{thing_id}'")
        self._bindings[word] = thing_id

    def words_for(self, thing_id: str) -> list[str]:
        """Get every word currently bound to a thing."""
        return [word for word, bound in self._bindings.items() if bound == thing_id]

    def __contains__(self, word: object) -> bool:
        return word in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)
