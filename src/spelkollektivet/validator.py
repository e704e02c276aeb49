"""
validator.py

PURPOSE: Validate world definitions for common issues.
DEPENDENCIES: models, parser (vocabulary), engine catalog

ARCHITECTURE NOTES:
Model validation already guarantees a world is well-formed (every exit
leads somewhere, every thing starts somewhere). The validator checks the
issues that would still break or spoil play:
- Things and locations the scripted events depend on are missing
- Locations the player can never reach
- Things the player can never name, because earlier things took every word
- One-way exits (reported for information; they are allowed)

Running validation at load time catches these issues early.
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto

from spelkollektivet.engine.catalog import REQUIRED_LOCATIONS, REQUIRED_THINGS
from spelkollektivet.models.world import World
from spelkollektivet.parser.vocabulary import Vocabulary


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = auto()  # Will cause runtime failure
    WARNING = auto()  # May cause unexpected behavior
    INFO = auto()  # Worth knowing, allowed by design


@dataclass
class ValidationIssue:
    """A single validation issue found in a world."""

    severity: ValidationSeverity
    message: str
    location: str  # e.g., "thing:suitcase", "location:lobby"

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.location}: {self.message}"


class WorldValidator:
    """
    Validates world definitions for common issues.

    Usage:
        validator = WorldValidator(world)
        issues = validator.validate()
        for issue in issues:
            print(issue)
    """

    def __init__(self, world: World):
        self.world = world
        self.issues: list[ValidationIssue] = []

        self.location_ids = {location.id for location in world.locations}
        self.thing_ids = {thing.id for thing in world.things}

    def validate(self) -> list[ValidationIssue]:
        """
        Run all validation checks.

        Returns:
            List of ValidationIssue objects, sorted by severity.
        """
        self.issues = []

        self._validate_required_ids()
        self._validate_reachability()
        self._validate_vocabulary()
        self._validate_exits()

        # Sort by severity (errors first)
        self.issues.sort(key=lambda i: i.severity.value)
        return self.issues

    def _validate_required_ids(self) -> None:
        """Scripted events need their things and locations to exist."""
        for thing_id in REQUIRED_THINGS:
            if thing_id not in self.thing_ids:
                self.issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        message="Thing is required by the game rules but not defined.",
                        location=f"thing:{thing_id}",
                    )
                )

        for location_id in REQUIRED_LOCATIONS:
            if location_id not in self.location_ids:
                self.issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        message="Location is required by the game rules but not defined.",
                        location=f"location:{location_id}",
                    )
                )

    def _validate_reachability(self) -> None:
        """Every location should be reachable from the start."""
        reachable = {self.world.starting_location}
        queue = deque([self.world.starting_location])

        while queue:
            location = self.world.get_location(queue.popleft())
            if location is None:
                continue
            for target in location.directions.values():
                if target not in reachable:
                    reachable.add(target)
                    queue.append(target)

        for location in self.world.locations:
            if location.id not in reachable:
                self.issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        message="Location can't be reached from the starting location.",
                        location=f"location:{location.id}",
                    )
                )

    def _validate_vocabulary(self) -> None:
        """Every thing should own at least one word of its name."""
        vocabulary = Vocabulary.from_world(self.world)

        for thing in self.world.things:
            if not vocabulary.words_for(thing.id):
                self.issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        message=f"Every word of the name '{thing.name}' is already taken "
                        f"by an earlier thing. Players won't be able to refer to it.",
                        location=f"thing:{thing.id}",
                    )
                )

    def _validate_exits(self) -> None:
        """Report exits with no way back."""
        for location in self.world.locations:
            for direction, target_id in location.directions.items():
                target = self.world.get_location(target_id)
                if target and location.id not in target.directions.values():
                    self.issues.append(
                        ValidationIssue(
                            severity=ValidationSeverity.INFO,
                            message=f"Exit {direction.value} to '{target_id}' has no way back.",
                            location=f"location:{location.id}",
                        )
                    )


def validate_world(world: World) -> list[ValidationIssue]:
    """
    Convenience function to validate a world.

    Args:
        world: The world to validate.

    Returns:
        List of validation issues (empty if world is valid).
    """
    return WorldValidator(world).validate()
