"""
command.py

PURPOSE: Define the Command model and Verb enum for parsed player input.
DEPENDENCIES: world.py (Direction)

ARCHITECTURE NOTES:
Commands represent fully parsed player input. The parser produces Command objects,
and the game engine consumes them. This provides a clean boundary between parsing
and execution.

A command keeps the whole word list as well as the resolved things, so a
handler can tell "look" apart from "look at the ceiling" (words but no
things) without comparing verb strings itself.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from spelkollektivet.models.world import Direction


class Verb(Enum):
    """
    All verbs supported by the game engine.

    Movement verbs are the ten directions.
    Everything else maps to a dedicated handler.
    """

    # Movement
    NORTH = auto()
    NORTHEAST = auto()
    EAST = auto()
    SOUTHEAST = auto()
    SOUTH = auto()
    SOUTHWEST = auto()
    WEST = auto()
    NORTHWEST = auto()
    DOWN = auto()
    UP = auto()

    # Examination
    LOOK = auto()  # aliases: L
    READ = auto()

    # Interaction
    TALK = auto()
    GET = auto()  # aliases: PICK, TAKE
    DROP = auto()  # aliases: SET, PLACE, THROW
    OPEN = auto()
    SHOWER = auto()
    CLEAN = auto()
    MOP = auto()
    EAT = auto()
    SLEEP = auto()
    RINSE = auto()

    # Inventory
    INVENTORY = auto()  # aliases: I

    # Meta commands
    CHECKLIST = auto()
    QUIT = auto()  # aliases: END, EXIT


@dataclass(frozen=True)
class Command:
    """
    A fully parsed player command.

    Examples:
        - N -> Command(verb=NORTH, words=("n",))
        - GET SUITCASE -> Command(verb=GET, words=("get", "suitcase"),
                                  things=("suitcase",))
        - LOOK AT PLATE PLATE -> Command(verb=LOOK, words=("look", "at", "plate", "plate"),
                                         things=("clean_plate", "clean_plate"))

    Attributes:
        verb: The action to perform
        words: Every token of the input, verb included
        things: Thing IDs mentioned after the verb, in order, duplicates kept
        raw_input: The original player input string
    """

    verb: Verb
    words: tuple[str, ...] = ()
    things: tuple[str, ...] = field(default=())
    raw_input: str = ""

    @property
    def has_arguments(self) -> bool:
        """Whether anything was typed after the verb."""
        return len(self.words) > 1


# Verb aliases for the parser
VERB_ALIASES: dict[str, Verb] = {
    # Movement
    "n": Verb.NORTH,
    "north": Verb.NORTH,
    "ne": Verb.NORTHEAST,
    "northeast": Verb.NORTHEAST,
    "e": Verb.EAST,
    "east": Verb.EAST,
    "se": Verb.SOUTHEAST,
    "southeast": Verb.SOUTHEAST,
    "s": Verb.SOUTH,
    "south": Verb.SOUTH,
    "sw": Verb.SOUTHWEST,
    "southwest": Verb.SOUTHWEST,
    "w": Verb.WEST,
    "west": Verb.WEST,
    "nw": Verb.NORTHWEST,
    "northwest": Verb.NORTHWEST,
    "d": Verb.DOWN,
    "down": Verb.DOWN,
    "u": Verb.UP,
    "up": Verb.UP,
    # Examination
    "l": Verb.LOOK,
    "look": Verb.LOOK,
    "read": Verb.READ,
    # Interaction
    "talk": Verb.TALK,
    "get": Verb.GET,
    "pick": Verb.GET,
    "take": Verb.GET,
    "drop": Verb.DROP,
    "set": Verb.DROP,
    "place": Verb.DROP,
    "throw": Verb.DROP,
    "open": Verb.OPEN,
    "shower": Verb.SHOWER,
    "clean": Verb.CLEAN,
    "mop": Verb.MOP,
    "eat": Verb.EAT,
    "sleep": Verb.SLEEP,
    "rinse": Verb.RINSE,
    # Inventory
    "i": Verb.INVENTORY,
    "inventory": Verb.INVENTORY,
    # Meta
    "checklist": Verb.CHECKLIST,
    "end": Verb.QUIT,
    "quit": Verb.QUIT,
    "exit": Verb.QUIT,
}

# Movement verbs and the exit direction each one follows
DIRECTION_VERBS: dict[Verb, Direction] = {
    Verb.NORTH: Direction.NORTH,
    Verb.NORTHEAST: Direction.NORTHEAST,
    Verb.EAST: Direction.EAST,
    Verb.SOUTHEAST: Direction.SOUTHEAST,
    Verb.SOUTH: Direction.SOUTH,
    Verb.SOUTHWEST: Direction.SOUTHWEST,
    Verb.WEST: Direction.WEST,
    Verb.NORTHWEST: Direction.NORTHWEST,
    Verb.DOWN: Direction.DOWN,
    Verb.UP: Direction.UP,
}

# Words that turn GET/DROP into "every eligible thing"
EVERYTHING_WORDS = frozenset({"everything", "all"})
