"""
world.py

PURPOSE: Pydantic models for the static world definition (locations and things).
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
These models define the STATIC world content - what exists in the house.
They are separate from GameState, which tracks MUTABLE placement during play.
The World model is the root - it contains all locations and things.

World JSON files are validated against these models when loaded, so a
malformed definition (an exit to an undeclared location, a thing starting
somewhere that doesn't exist) fails fast at load time and never reaches
the engine. Models are frozen: the world is read-only for the session.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

# Pseudo-locations that sit outside the visitable graph
NOWHERE = "nowhere"
INVENTORY = "inventory"

PSEUDO_LOCATIONS = frozenset({NOWHERE, INVENTORY})

ID_PATTERN = r"^[a-z][a-z0-9_]*$"


class Direction(str, Enum):
    """The ten compass and vertical directions an exit can take."""

    NORTH = "north"
    NORTHEAST = "northeast"
    EAST = "east"
    SOUTHEAST = "southeast"
    SOUTH = "south"
    SOUTHWEST = "southwest"
    WEST = "west"
    NORTHWEST = "northwest"
    DOWN = "down"
    UP = "up"


class WorldMetadata(BaseModel):
    """Metadata about the world itself."""

    model_config = {"frozen": True}

    title: str = Field(..., min_length=1, max_length=100)
    author: str = Field(default="Unknown")
    version: str = Field(default="1.0")
    description: str = Field(default="", description="Intro text shown before play")


class Location(BaseModel):
    """
    A visitable room in the house.

    Exits form a directed graph: an exit in one direction does not imply a
    way back.
    """

    model_config = {"frozen": True}

    id: str = Field(..., min_length=1, pattern=ID_PATTERN)
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    directions: dict[Direction, str] = Field(
        default_factory=dict,
        description="Map of direction -> destination location ID",
    )


class Thing(BaseModel):
    """
    An interactive noun in the world: an item, a fixture or a person.

    The name is used for display and, split on whitespace, for vocabulary.
    """

    model_config = {"frozen": True}

    id: str = Field(..., min_length=1, pattern=ID_PATTERN)
    name: str = Field(..., min_length=1, max_length=50)
    description: str = Field(..., min_length=1)
    starting_location: str = Field(
        ...,
        description="Location ID, 'inventory' or 'nowhere' (not yet in play)",
    )


class World(BaseModel):
    """
    A complete world definition.

    This is the root model that contains everything needed to play.
    It is loaded from JSON and validated against this schema.
    """

    model_config = {"frozen": True}

    metadata: WorldMetadata
    starting_location: str = Field(..., description="Location ID the player starts in")
    locations: list[Location] = Field(..., min_length=1)
    things: list[Thing] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_references(self) -> "World":
        """Ensure all ID references are valid."""
        location_ids = [location.id for location in self.locations]
        thing_ids = [thing.id for thing in self.things]

        if len(set(location_ids)) != len(location_ids):
            raise ValueError("Duplicate location IDs")
        if len(set(thing_ids)) != len(thing_ids):
            raise ValueError("Duplicate thing IDs")

        for location_id in location_ids:
            if location_id in PSEUDO_LOCATIONS:
                raise ValueError(f"Location ID '{location_id}' is reserved")

        declared = set(location_ids)

        if self.starting_location not in declared:
            raise ValueError(f"Starting location '{self.starting_location}' not found")

        # Exits may only lead to declared locations
        for location in self.locations:
            for direction, target in location.directions.items():
                if target not in declared:
                    raise ValueError(
                        f"Location '{location.id}' has exit '{direction.value}' "
                        f"to unknown location '{target}'"
                    )

        # Things start in a location or a pseudo-location
        for thing in self.things:
            if thing.starting_location not in declared | PSEUDO_LOCATIONS:
                raise ValueError(
                    f"Thing '{thing.id}' has invalid starting location "
                    f"'{thing.starting_location}'"
                )

        return self

    def get_location(self, location_id: str) -> Location | None:
        """Get a location by ID."""
        for location in self.locations:
            if location.id == location_id:
                return location
        return None

    def get_thing(self, thing_id: str) -> Thing | None:
        """Get a thing by ID."""
        for thing in self.things:
            if thing.id == thing_id:
                return thing
        return None
