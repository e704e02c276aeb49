"""
engine.py

PURPOSE: Core game engine that executes commands and manages game state.
DEPENDENCIES: models, parser, observability

ARCHITECTURE NOTES:
The GameEngine is the central coordinator:
- Holds a GameContext (world, state, vocabulary)
- Parses input and executes Commands by delegating to action handlers
- Runs the rule engine after every turn
- Returns tagged lines for display

The engine is the "server" - it is authoritative over game state. The host
loop stops calling process_input once a TurnResult reports game_over.
"""

import logging
from dataclasses import dataclass, field

from spelkollektivet.engine.actions import execute_action
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.display import describe_location
from spelkollektivet.engine.output import ActionResult, Line
from spelkollektivet.engine.rules import apply_rules
from spelkollektivet.models.state import GameState
from spelkollektivet.models.world import World
from spelkollektivet.observability import get_tracer
from spelkollektivet.parser.parser import ParseResult, parse
from spelkollektivet.parser.vocabulary import Vocabulary

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


@dataclass
class TurnResult:
    """Result of processing a player turn."""

    lines: list[Line] = field(default_factory=list)
    game_over: bool = False

    @property
    def messages(self) -> list[str]:
        """Non-empty line texts, in order."""
        return [line.text for line in self.lines if line.text]

    @property
    def message(self) -> str:
        """Narrative text as a single string."""
        return "\n".join(self.messages)


class GameEngine:
    """
    The core game engine.

    Manages game state and executes player commands.
    """

    def __init__(self, world: World, context: GameContext | None = None):
        """
        Initialize the engine with a world definition.

        Args:
            world: The world to play in
            context: Optional existing session (a fresh one is created otherwise)
        """
        self.world = world
        self.context = context or GameContext.new(world)

    @property
    def state(self) -> GameState:
        """The session's mutable state."""
        return self.context.state

    @property
    def vocabulary(self) -> Vocabulary:
        """The session's word bindings."""
        return self.context.vocabulary

    def intro(self) -> list[Line]:
        """Welcome text shown before the first location."""
        result = ActionResult()
        result.reply(f"Welcome to {self.world.metadata.title}!")
        if self.world.metadata.description:
            result.reply(self.world.metadata.description)
        return result.lines

    def describe_current_location(self, force_description: bool = False) -> list[Line]:
        """Describe where the player is standing."""
        return describe_location(self.context, force_description).lines

    def process_input(self, user_input: str) -> TurnResult:
        """
        Process a line of player input.

        This is the main entry point for the game loop. The command runs to
        completion, then the rule engine runs once.

        Args:
            user_input: Raw text from the player

        Returns:
            TurnResult with the lines to show and whether the session ended
        """
        if self.state.game_over:
            return TurnResult(
                lines=ActionResult().reply("The game is over.").lines,
                game_over=True,
            )

        with tracer.start_as_current_span("game.turn") as span:
            span.set_attribute("game.location", self.state.current_location)

            result = ActionResult()
            parse_result: ParseResult = parse(user_input, self.vocabulary)

            if parse_result.success:
                command = parse_result.command
                assert command is not None
                span.set_attribute("game.verb", command.verb.name)
                span.set_attribute("game.things", list(command.things))
                result.extend(execute_action(command, self.context))
            else:
                assert parse_result.error is not None
                logger.debug(f"Unparsed input: {parse_result.error.raw_input!r}")
                result.reply(parse_result.error.message)

            self.state.increment_turns()
            result.extend(apply_rules(self.context))

        return TurnResult(lines=result.lines, game_over=self.state.game_over)
