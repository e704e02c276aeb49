"""
events.py

PURPOSE: Scripted narrative set-pieces.
DEPENDENCIES: context, catalog, output, evaluation

ARCHITECTURE NOTES:
Each event is a short guarded transition: check every precondition first,
reply and return on the first one that fails, and only then mutate state.
A failed event therefore never leaves the world half-changed.

Events may set a goal flag directly when they complete it; the rule engine
recomputes the placement-derived goals after the turn either way.
"""

import logging

from spelkollektivet.engine import catalog
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.evaluation import evaluate_day
from spelkollektivet.engine.output import ActionResult
from spelkollektivet.models.goals import Goal
from spelkollektivet.models.world import NOWHERE

logger = logging.getLogger(__name__)


def talk_to_james(ctx: GameContext) -> ActionResult:
    """James welcomes you once, then heads off to the reception."""
    result = ActionResult()

    if not ctx.state.is_at(catalog.JAMES, catalog.LOBBY):
        return result.reply("James looks busy and you don't want to bother him.")

    result.reply(
        'James says "Welcome to Spelkollektivet! You\'ll first want to get settled in. '
        'Your room is on the west side of the north wing."'
    )
    result.reply(
        "James points to the east where the north wing starts. "
        'He adds "If you have any questions, I\'ll be in the reception."'
    )
    result.reply("James leaves southeast.")

    ctx.state.move_thing(catalog.JAMES, catalog.RECEPTION)
    logger.debug("James moved to the reception")
    return result


def open_suitcase(ctx: GameContext) -> ActionResult:
    """Opening the suitcase reveals the computer wherever the suitcase is."""
    result = ActionResult()
    state = ctx.state

    if not state.is_available(catalog.SUITCASE):
        return result.reply("Hmm … Where did you put your suitcase?")

    state.move_thing(catalog.COMPUTER, state.location_of(catalog.SUITCASE))
    return result.reply("You open the suitcase and see your computer in it.")


def take_shower(ctx: GameContext) -> ActionResult:
    """
    Shower, leaving hair and a puddle behind.

    Showering again before cleaning up just leaves the byproducts here again.
    """
    result = ActionResult()
    state = ctx.state

    if not state.is_here(catalog.SHOWER):
        return result.reply("I don't see a shower here. Maybe try a bathroom?")

    # First blocking item wins
    for thing_id in catalog.SHOWER_BLOCKERS:
        if state.is_available(thing_id):
            return result.reply(f"You shouldn't shower with your {ctx.name(thing_id)} around.")

    result.reply("You turn on the water and enjoy a long, hot shower.")
    result.reply(
        "After you're done, there's water all over the floor. "
        "You also left a souvenier of hair in the drain."
    )

    state.move_thing(catalog.HAIR, state.current_location)
    state.move_thing(catalog.PUDDLE, state.current_location)
    state.set_goal(Goal.SHOWER_TAKEN)
    logger.debug(f"Shower taken in {state.current_location}")
    return result


def mop_puddle(ctx: GameContext) -> ActionResult:
    """Mop up the puddle at the current location."""
    result = ActionResult()
    state = ctx.state

    if not state.is_here(catalog.PUDDLE):
        return result.reply("There aren't any puddles of water here.")

    if not state.has_thing(catalog.MOP):
        return result.reply("Try grabbing a mop first.")

    result.reply(
        "You grip the mop firmly and drag it tightly across the floor towards the drain."
    )
    result.reply("The floor is now dry and you feel good about yourself.")

    state.move_thing(catalog.PUDDLE, NOWHERE)
    return result


def throw_in_trash(ctx: GameContext, thing_ids: list[str]) -> ActionResult:
    """
    Throw things in the trash bin.

    Only hair may go in; everything else is refused one by one.
    """
    result = ActionResult()
    state = ctx.state

    if not thing_ids:
        return result.reply("I don't know what you want to throw in the trash.")

    for thing_id in thing_ids:
        if not state.has_thing(thing_id):
            result.reply(f"{ctx.title(thing_id)} is not in your inventory.")
            continue

        if thing_id != catalog.HAIR:
            result.reply(f"I don't want to throw the {ctx.name(thing_id)} away!")
            continue

        result.reply("You dispose your hair into the trash bin. Humanity thanks you!")
        state.move_thing(catalog.HAIR, NOWHERE)

    return result


def eat_meatballs(ctx: GameContext) -> ActionResult:
    """Eat dinner."""
    result = ActionResult()
    state = ctx.state

    if not state.has_thing(catalog.MEATBALLS):
        return result.reply("You don't have anything to eat.")

    result.reply(
        "You eat the delicious meatballs and are immediately content with the decision "
        "of moving into this house. The food will be one of unexpected highlights of "
        "living here."
    )

    state.move_thing(catalog.MEATBALLS, NOWHERE)
    state.set_goal(Goal.DINNER_EATEN)
    return result


def rinse_plate(ctx: GameContext) -> ActionResult:
    """
    Rinse the dirty plate at a sink.

    The rinsed plate takes the dirty plate's place and the word "plate"
    follows it.
    """
    result = ActionResult()
    state = ctx.state

    if state.current_location not in catalog.SINK_LOCATIONS:
        return result.reply("There is no sink here.")

    if state.is_available(catalog.CLEAN_PLATE):
        return result.reply("The plate is already clean.")
    if state.is_available(catalog.RINSED_PLATE):
        return result.reply("The plate is already rinsed.")
    if not state.is_available(catalog.DIRTY_PLATE):
        return result.reply("You don't have a plate to rinse.")

    result.reply(
        "As a good future homie, you rinse the plate so that the dishwasher will have "
        "an easier time getting it super clean."
    )

    state.swap_things(catalog.DIRTY_PLATE, catalog.RINSED_PLATE)
    ctx.vocabulary.rebind(catalog.PLATE_WORD, catalog.RINSED_PLATE)
    return result


def sleep(ctx: GameContext) -> ActionResult:
    """Go to bed, which ends the day and the game once every goal is done."""
    result = ActionResult()
    state = ctx.state

    if state.current_location != catalog.YOUR_ROOM:
        return result.reply("Maybe try sleeping in your room?")

    if not state.all_goals_completed():
        return result.reply("You still have things to do today. Look at your checklist!")

    logger.info(f"Day ended after {state.turns} turns")
    result.extend(evaluate_day(ctx))
    state.end_game()
    return result
