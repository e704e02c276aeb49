"""
rules.py

PURPOSE: World rules applied once per turn, after the command has run.
DEPENDENCIES: context, catalog, output

ARCHITECTURE NOTES:
The rule engine is authoritative over the goal flags it can derive from
placement, and it applies the world's passive reactions. The checks run in
order because later ones can depend on earlier mutations in the same pass:

1. Derive goal flags from placement.
2. A computer in the office claims the empty desk.
3. Holding food and a clean plate dirties the plate.
4. Completing every goal earns a one-time hint to go to sleep.

Running the pass twice without a command in between changes nothing the
second time.
"""

import logging

from spelkollektivet.engine import catalog
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.output import ActionResult
from spelkollektivet.models.goals import Goal
from spelkollektivet.models.world import NOWHERE

logger = logging.getLogger(__name__)

SLEEP_HINT = (
    "Congratulations! You've completed all four goals. It's been a long day, so when "
    "you're ready to be evaluated, go to sleep in your room. Now is the chance for any "
    "last actions."
)


def derive_goals(ctx: GameContext) -> None:
    """
    Recompute the goals that are a function of placement.

    The shower goal has no such predicate: the hair and puddle it leaves
    behind are meant to be cleaned away, so it keeps the value the shower
    event gave it.
    """
    state = ctx.state
    state.set_goal(Goal.SUITCASE_IN_ROOM, state.is_at(catalog.SUITCASE, catalog.YOUR_ROOM))
    state.set_goal(Goal.COMPUTER_IN_OFFICE, state.is_at(catalog.COMPUTER, catalog.LOUD_OFFICE))
    state.set_goal(Goal.DINNER_EATEN, state.is_at(catalog.MEATBALLS, NOWHERE))


def apply_rules(ctx: GameContext) -> ActionResult:
    """
    Run the per-turn rule pass.

    Returns:
        Any lines the rules want to tell the player
    """
    result = ActionResult()
    state = ctx.state

    derive_goals(ctx)

    # Dropping your computer in the loud office claims the desk
    if state.is_at(catalog.COMPUTER, catalog.LOUD_OFFICE) and state.is_at(
        catalog.EMPTY_DESK, catalog.LOUD_OFFICE
    ):
        state.swap_things(catalog.EMPTY_DESK, catalog.YOUR_DESK)
        ctx.vocabulary.rebind(catalog.DESK_WORD, catalog.YOUR_DESK)
        logger.debug("Desk claimed in the loud office")

    # Getting meatballs dirties your plate
    if state.has_thing(catalog.MEATBALLS) and state.has_thing(catalog.CLEAN_PLATE):
        state.swap_things(catalog.CLEAN_PLATE, catalog.DIRTY_PLATE)
        ctx.vocabulary.rebind(catalog.PLATE_WORD, catalog.DIRTY_PLATE)
        logger.debug("Plate dirtied by food")

    if state.all_goals_completed() and not state.sleep_hint_given:
        result.reply(SLEEP_HINT)
        state.sleep_hint_given = True

    return result
