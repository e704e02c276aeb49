"""
loader.py

PURPOSE: Load world definitions from JSON.
DEPENDENCIES: pydantic, world model, validator

ARCHITECTURE NOTES:
The bundled house ships as package data and is read through
importlib.resources, so it works from a wheel as well as a checkout.
Model validation rejects structurally broken worlds (unknown exits,
duplicate IDs); validate=True additionally runs the WorldValidator and
refuses worlds the scripted events can't run in.
"""

import json
import logging
from importlib import resources
from pathlib import Path

from spelkollektivet.models.world import World
from spelkollektivet.validator import ValidationSeverity, WorldValidator

logger = logging.getLogger(__name__)

DEFAULT_WORLD = "spelkollektivet.json"


class WorldValidationError(ValueError):
    """A world definition is well-formed but unusable by the engine."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__("Invalid world: " + "; ".join(messages))


def read_world_data(path: Path | None = None) -> dict:
    """Read raw world JSON from a file, or the bundled world when no path is given."""
    if path is None:
        text = resources.files("spelkollektivet.data").joinpath(DEFAULT_WORLD).read_text(
            encoding="utf-8"
        )
    else:
        text = Path(path).read_text(encoding="utf-8")
    return json.loads(text)


def load_world(path: Path | None = None, validate: bool = False) -> World:
    """
    Load and validate a world definition.

    Args:
        path: World JSON file (the bundled house when None)
        validate: Also run the WorldValidator and fail on errors

    Returns:
        The validated World

    Raises:
        json.JSONDecodeError: The file isn't JSON
        pydantic.ValidationError: The JSON doesn't describe a well-formed world
        WorldValidationError: validate=True and the validator found errors
    """
    world = World.model_validate(read_world_data(path))
    logger.debug(
        f"Loaded world '{world.metadata.title}' with {len(world.locations)} locations "
        f"and {len(world.things)} things"
    )

    if validate:
        errors = [
            str(issue)
            for issue in WorldValidator(world).validate()
            if issue.severity == ValidationSeverity.ERROR
        ]
        if errors:
            raise WorldValidationError(errors)

    return world
