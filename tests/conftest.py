"""
conftest.py

Shared pytest fixtures for spelkollektivet tests.
"""

import json
from pathlib import Path

import pytest

from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.engine import GameEngine, TurnResult
from spelkollektivet.loader import load_world, read_world_data
from spelkollektivet.models.world import World

# Every command of a playthrough that completes the day without a single mistake
PERFECT_DAY = [
    "n",
    "talk to james",
    "get suitcase",
    "e",
    "n",
    "w",
    "drop suitcase",
    "open suitcase",
    "get computer",
    "e",
    "s",
    "w",
    "d",
    "e",
    "drop computer",
    "w",
    "u",
    "e",
    "n",
    "e",
    "shower",
    "get mop",
    "mop",
    "get hair",
    "throw hair in trash",
    "drop mop",
    "w",
    "s",
    "w",
    "w",
    "n",
    "get plate",
    "get meatballs",
    "eat",
    "e",
    "rinse plate",
    "drop plate",
    "w",
    "s",
    "e",
    "e",
    "n",
    "w",
]


@pytest.fixture
def world_dict() -> dict:
    """The bundled world as a dictionary."""
    return read_world_data()


@pytest.fixture
def world() -> World:
    """Load and validate the bundled world."""
    return load_world(validate=True)


@pytest.fixture
def engine(world: World) -> GameEngine:
    """A fresh engine at the entrance."""
    return GameEngine(world)


@pytest.fixture
def ctx(engine: GameEngine) -> GameContext:
    """The session behind the engine fixture."""
    return engine.context


@pytest.fixture
def world_file(tmp_path: Path, world_dict: dict) -> Path:
    """The bundled world written to a temporary file."""
    path = tmp_path / "world.json"
    path.write_text(json.dumps(world_dict))
    return path


@pytest.fixture
def minimal_world_dict() -> dict:
    """A minimal valid world with two connected rooms and no scripted things."""
    return {
        "metadata": {
            "title": "Minimal Test World",
        },
        "starting_location": "hall",
        "locations": [
            {
                "id": "hall",
                "name": "Hall",
                "description": "A plain hall.",
                "directions": {"north": "attic"},
            },
            {
                "id": "attic",
                "name": "Attic",
                "description": "A dusty attic.",
                "directions": {"south": "hall"},
            },
        ],
        "things": [
            {
                "id": "broom",
                "name": "old broom",
                "description": "An old broom.",
                "starting_location": "hall",
            }
        ],
    }


@pytest.fixture
def minimal_world(minimal_world_dict: dict) -> World:
    """Create the minimal world from its dict."""
    return World.model_validate(minimal_world_dict)


@pytest.fixture
def play(engine: GameEngine):
    """Run commands on the engine fixture in order and return the last TurnResult."""

    def run(*commands: str) -> TurnResult:
        result = TurnResult()
        for command in commands:
            result = engine.process_input(command)
        return result

    return run


@pytest.fixture
def perfect_day() -> list[str]:
    """Commands that complete the day without a single mistake, ending in your room."""
    return list(PERFECT_DAY)
