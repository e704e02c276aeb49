"""Domain models for the house, its things and the session state."""

from spelkollektivet.models.command import Command, Verb
from spelkollektivet.models.goals import GOAL_DESCRIPTIONS, Goal
from spelkollektivet.models.state import GameState
from spelkollektivet.models.world import (
    INVENTORY,
    NOWHERE,
    Direction,
    Location,
    Thing,
    World,
    WorldMetadata,
)

__all__ = [
    "Command",
    "Direction",
    "GOAL_DESCRIPTIONS",
    "GameState",
    "Goal",
    "INVENTORY",
    "Location",
    "NOWHERE",
    "Thing",
    "Verb",
    "World",
    "WorldMetadata",
]
