"""Game engine module."""

from spelkollektivet.engine.actions import execute_action
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.engine import GameEngine, TurnResult
from spelkollektivet.engine.output import ActionResult, Line, LineStyle

__all__ = [
    "ActionResult",
    "GameContext",
    "GameEngine",
    "Line",
    "LineStyle",
    "TurnResult",
    "execute_action",
]
