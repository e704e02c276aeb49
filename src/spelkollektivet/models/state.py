"""
state.py

PURPOSE: Mutable game state that changes during play.
DEPENDENCIES: pydantic, world.py, goals.py

ARCHITECTURE NOTES:
GameState is separate from the static World definition.
It tracks what has changed: player location, where every thing is,
which locations have been described, and the goal flags.

Placement is a single map of thing ID -> location ID. A thing is "held"
when that location is INVENTORY and "gone" when it is NOWHERE, so a thing
can never be in two places or in none.
"""

from pydantic import BaseModel, Field

from spelkollektivet.models.goals import Goal
from spelkollektivet.models.world import INVENTORY, World


class GameState(BaseModel):
    """
    Complete mutable state of a session in progress.

    The engine modifies this in response to commands.
    """

    current_location: str = Field(..., description="ID of the location the player is in")
    thing_locations: dict[str, str] = Field(
        default_factory=dict,
        description="Current location of each thing by ID",
    )
    locations_seen: dict[str, bool] = Field(
        default_factory=dict,
        description="Whether each location's full description has been shown",
    )
    goals: dict[Goal, bool] = Field(
        default_factory=lambda: {goal: False for goal in Goal},
        description="Completion flag for each goal",
    )
    sleep_hint_given: bool = Field(default=False)
    turns: int = Field(default=0, description="Number of commands processed")
    game_over: bool = Field(default=False)

    @classmethod
    def from_world(cls, world: World) -> "GameState":
        """
        Create initial state from a world definition.

        Every thing starts at its starting location, no location has been
        seen and no goal is complete.
        """
        return cls(
            current_location=world.starting_location,
            thing_locations={thing.id: thing.starting_location for thing in world.things},
            locations_seen={location.id: False for location in world.locations},
            goals={goal: False for goal in Goal},
        )

    def location_of(self, thing_id: str) -> str:
        """Get the current location of a thing."""
        return self.thing_locations[thing_id]

    def is_at(self, thing_id: str, location_id: str) -> bool:
        """Check if a thing is at the given location."""
        return self.thing_locations[thing_id] == location_id

    def things_at(self, location_id: str) -> list[str]:
        """Get all thing IDs at a location, in catalog order."""
        return [
            thing_id
            for thing_id, location in self.thing_locations.items()
            if location == location_id
        ]

    def is_here(self, thing_id: str) -> bool:
        """Check if a thing is at the player's current location."""
        return self.is_at(thing_id, self.current_location)

    def has_thing(self, thing_id: str) -> bool:
        """Check if a thing is in the player's inventory."""
        return self.is_at(thing_id, INVENTORY)

    def is_available(self, thing_id: str) -> bool:
        """Check if a thing is either here or held."""
        return self.is_here(thing_id) or self.has_thing(thing_id)

    def move_thing(self, thing_id: str, location_id: str) -> None:
        """Move a thing to a new location."""
        self.thing_locations[thing_id] = location_id

    def swap_things(self, first_id: str, second_id: str) -> None:
        """Swap the locations of two things."""
        first_location = self.thing_locations[first_id]
        second_location = self.thing_locations[second_id]
        self.thing_locations[first_id] = second_location
        self.thing_locations[second_id] = first_location

    def has_seen(self, location_id: str) -> bool:
        """Check if a location's description has been shown."""
        return self.locations_seen.get(location_id, False)

    def mark_seen(self, location_id: str) -> None:
        """Mark a location's description as shown."""
        self.locations_seen[location_id] = True

    def set_goal(self, goal: Goal, completed: bool = True) -> None:
        """Set a goal's completion flag."""
        self.goals[goal] = completed

    def is_goal_completed(self, goal: Goal) -> bool:
        """Get a goal's completion flag."""
        return self.goals.get(goal, False)

    def all_goals_completed(self) -> bool:
        """Check if every goal is complete."""
        return all(self.is_goal_completed(goal) for goal in Goal)

    def increment_turns(self) -> None:
        """Increment the turn counter."""
        self.turns += 1

    def end_game(self) -> None:
        """Mark the session as over."""
        self.game_over = True
