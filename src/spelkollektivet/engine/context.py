"""
context.py

PURPOSE: The session object handed to every handler, event and rule.
DEPENDENCIES: models, parser

ARCHITECTURE NOTES:
Everything mutable about a session (placement, goal flags, one-shot flags,
vocabulary bindings) hangs off one GameContext instead of module globals.
A fresh context per session (or per test) is all it takes to start over.
"""

from dataclasses import dataclass

from spelkollektivet.models.state import GameState
from spelkollektivet.models.world import World
from spelkollektivet.parser.vocabulary import Vocabulary


def capitalize(text: str) -> str:
    """Uppercase the first letter only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


@dataclass
class GameContext:
    """World definition, mutable state and vocabulary of one session."""

    world: World
    state: GameState
    vocabulary: Vocabulary

    @classmethod
    def new(cls, world: World) -> "GameContext":
        """Start a fresh session in the given world."""
        return cls(
            world=world,
            state=GameState.from_world(world),
            vocabulary=Vocabulary.from_world(world),
        )

    def name(self, thing_id: str) -> str:
        """Display name of a thing."""
        thing = self.world.get_thing(thing_id)
        return thing.name if thing else thing_id

    def title(self, thing_id: str) -> str:
        """Display name of a thing, capitalized to start a sentence."""
        return capitalize(self.name(thing_id))

    def names(self, thing_ids: list[str]) -> list[str]:
        """Display names of several things."""
        return [self.name(thing_id) for thing_id in thing_ids]
