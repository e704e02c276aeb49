"""
actions.py

PURPOSE: Verb handlers for player commands.
DEPENDENCIES: models, context, display, events

ARCHITECTURE NOTES:
Each verb has a handler that:
- Validates the action is possible
- Updates game state (or hands off to a narrative event)
- Returns narrative lines

Handlers never compare verb strings; the VERB_HANDLERS table maps every
Verb to its handler, and synonyms are resolved before that by the parser.
Validation always precedes mutation, so a refused action changes nothing.
"""

import logging
from collections.abc import Callable
from functools import partial

from spelkollektivet.engine import catalog, events
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.display import (
    describe_checklist,
    describe_inventory,
    describe_location,
    describe_thing,
)
from spelkollektivet.engine.output import ActionResult
from spelkollektivet.models.command import DIRECTION_VERBS, EVERYTHING_WORDS, Command, Verb
from spelkollektivet.models.world import INVENTORY, Direction
from spelkollektivet.parser.lexer import includes_any

logger = logging.getLogger(__name__)

Handler = Callable[[Command, GameContext], ActionResult]

# Scripted conversation for each person you can talk to
TALK_EVENTS: dict[str, Callable[[GameContext], ActionResult]] = {
    catalog.JAMES: events.talk_to_james,
}


def execute_action(command: Command, ctx: GameContext) -> ActionResult:
    """
    Execute a parsed command.

    This is the main dispatch function that routes to specific handlers.

    Args:
        command: The parsed command with resolved thing IDs
        ctx: The session (will be modified)

    Returns:
        ActionResult with the lines to show
    """
    handler = VERB_HANDLERS.get(command.verb)
    if handler is None:
        return ActionResult().reply("I do not understand you.")

    logger.debug(f"Dispatching {command.verb.name} with things {list(command.things)}")
    return handler(command, ctx)


def handle_movement(direction: Direction, _command: Command, ctx: GameContext) -> ActionResult:
    """Handle the ten movement verbs."""
    state = ctx.state
    location = ctx.world.get_location(state.current_location)

    if location is None or direction not in location.directions:
        return ActionResult().reply("You cannot go there.")

    state.current_location = location.directions[direction]
    logger.debug(f"Moved {direction.value} to {state.current_location}")
    return describe_location(ctx)


def handle_look(command: Command, ctx: GameContext) -> ActionResult:
    """Handle LOOK, with or without things to look at."""
    if not command.has_arguments:
        return describe_location(ctx, force_description=True)

    result = ActionResult()
    if not command.things:
        return result.reply("I don't see it.")

    for thing_id in command.things:
        if not ctx.state.is_available(thing_id):
            result.reply(f"{ctx.title(thing_id)} is not here.")
            continue
        result.extend(describe_thing(ctx, thing_id))

    return result


def handle_read(command: Command, ctx: GameContext) -> ActionResult:
    """Handle READ. Only a few things have anything written on them."""
    result = ActionResult()
    if not command.has_arguments:
        return result.reply("What do you want to read?")

    if not command.things:
        return result.reply("I don't know which thing you want to read.")

    for thing_id in command.things:
        if thing_id not in catalog.READABLE:
            result.reply(f"{ctx.title(thing_id)} can't be read.")
            continue
        if not ctx.state.is_available(thing_id):
            result.reply(f"{ctx.title(thing_id)} is not here.")
            continue
        result.extend(describe_thing(ctx, thing_id))

    return result


def handle_talk(command: Command, ctx: GameContext) -> ActionResult:
    """Handle TALK. Only the first mentioned thing is considered."""
    result = ActionResult()
    if not command.has_arguments:
        return result.reply("Talk to who?")

    if not command.things:
        return result.reply("I don't know who you mean.")

    thing_id = command.things[0]

    if thing_id not in catalog.TALKABLE:
        return result.reply("You can't talk to that.")

    if not ctx.state.is_here(thing_id):
        return result.reply(f"{ctx.title(thing_id)} is not here.")

    return TALK_EVENTS[thing_id](ctx)


def handle_get(command: Command, ctx: GameContext) -> ActionResult:
    """Handle GET/TAKE/PICK, including GET EVERYTHING."""
    result = ActionResult()
    state = ctx.state

    if not command.has_arguments:
        return result.reply("What do you want to get?")

    things = list(command.things)

    if includes_any(command.words, EVERYTHING_WORDS):
        here = state.things_at(state.current_location)
        things = [thing_id for thing_id in catalog.GETTABLE if thing_id in here]
        if not things:
            return result.reply("There is nothing here to be picked up.")

    if not things:
        return result.reply("I don't know which thing you want to get.")

    picked_up: list[str] = []

    for thing_id in things:
        if thing_id not in catalog.GETTABLE:
            # Taking a shower is a manner of speech
            if thing_id == catalog.SHOWER:
                result.extend(events.take_shower(ctx))
                continue
            result.reply(f"{ctx.title(thing_id)} can't be picked up.")
            continue

        if state.has_thing(thing_id):
            result.reply(f"{ctx.title(thing_id)} is already in your possession.")
            continue

        if not state.is_here(thing_id):
            result.reply(f"{ctx.title(thing_id)} is not here.")
            continue

        if _get_thing(ctx, thing_id, result):
            picked_up.append(thing_id)

    return _report(ctx, result, things, picked_up, "picked up")


def handle_drop(command: Command, ctx: GameContext) -> ActionResult:
    """Handle DROP/SET/PLACE/THROW, including the trash bin and DROP EVERYTHING."""
    result = ActionResult()
    state = ctx.state

    if not command.has_arguments:
        return result.reply("What do you want to drop?")

    # Mentioning the trash means the other things go in it
    if catalog.TRASH_BIN in command.things:
        return events.throw_in_trash(
            ctx, [thing_id for thing_id in command.things if thing_id != catalog.TRASH_BIN]
        )

    things = list(command.things)

    if includes_any(command.words, EVERYTHING_WORDS):
        held = state.things_at(INVENTORY)
        if not held:
            return result.reply("You aren't carrying anything.")

        things = [thing_id for thing_id in held if thing_id in catalog.GETTABLE]
        if not things:
            return result.reply("You don't have anything you could drop.")

    if not things:
        return result.reply("I don't know which thing you want to drop.")

    dropped: list[str] = []

    for thing_id in things:
        if not state.has_thing(thing_id):
            result.reply(f"{ctx.title(thing_id)} is not in your inventory.")
            continue

        if _drop_thing(ctx, thing_id, result):
            dropped.append(thing_id)

    return _report(ctx, result, things, dropped, "dropped")


def handle_open(command: Command, ctx: GameContext) -> ActionResult:
    """Handle OPEN. The suitcase is the only thing worth opening."""
    result = ActionResult()
    if not command.has_arguments:
        return result.reply("What do you want to open?")

    if not command.things:
        return result.reply("I don't know which thing you want to open.")

    if catalog.SUITCASE in command.things:
        return events.open_suitcase(ctx)

    return result.reply("You can't open that.")


def handle_clean(command: Command, ctx: GameContext) -> ActionResult:
    """Handle CLEAN, routing to mopping or rinsing."""
    result = ActionResult()
    if not command.has_arguments:
        return result.reply("What do you want to clean?")

    if not command.things:
        return result.reply("I don't know which thing you want to clean.")

    if catalog.PUDDLE in command.things:
        return events.mop_puddle(ctx)

    if catalog.HAIR in command.things:
        return result.reply("You should pick it up and throw it in the trash.")

    if _mentions_plate(command):
        return events.rinse_plate(ctx)

    return result.reply("You can't clean that.")


def handle_eat(command: Command, ctx: GameContext) -> ActionResult:
    """Handle EAT. On its own it means eating whatever food you have."""
    if not command.has_arguments:
        return events.eat_meatballs(ctx)

    if not command.things:
        return ActionResult().reply("I don't know which thing you want to eat.")

    if catalog.MEATBALLS in command.things:
        return events.eat_meatballs(ctx)

    return ActionResult().reply("You can't eat that.")


def handle_rinse(command: Command, ctx: GameContext) -> ActionResult:
    """Handle RINSE. Only plates can be rinsed."""
    if not command.has_arguments:
        return ActionResult().reply("What do you want to rinse?")

    if _mentions_plate(command):
        return events.rinse_plate(ctx)

    return ActionResult().reply("You can't rinse that.")


def handle_shower(_command: Command, ctx: GameContext) -> ActionResult:
    """Handle SHOWER."""
    return events.take_shower(ctx)


def handle_mop(_command: Command, ctx: GameContext) -> ActionResult:
    """Handle MOP."""
    return events.mop_puddle(ctx)


def handle_sleep(_command: Command, ctx: GameContext) -> ActionResult:
    """Handle SLEEP."""
    return events.sleep(ctx)


def handle_inventory(_command: Command, ctx: GameContext) -> ActionResult:
    """Handle INVENTORY."""
    return describe_inventory(ctx)


def handle_checklist(_command: Command, ctx: GameContext) -> ActionResult:
    """Handle CHECKLIST."""
    return describe_checklist(ctx)


def handle_quit(_command: Command, ctx: GameContext) -> ActionResult:
    """Handle QUIT/END/EXIT."""
    ctx.state.end_game()
    return ActionResult().reply("Goodbye!")


def _mentions_plate(command: Command) -> bool:
    """Whether any plate, in any condition, was mentioned."""
    return any(thing_id in catalog.PLATES for thing_id in command.things)


def _get_thing(ctx: GameContext, thing_id: str, result: ActionResult) -> bool:
    """
    Put a thing in the inventory, unless a domain rule forbids it.

    Returns:
        True if the thing was picked up
    """
    state = ctx.state

    # Food can't be taken without a plate
    if thing_id == catalog.MEATBALLS and not any(
        state.has_thing(plate) for plate in catalog.FOOD_PLATES
    ):
        result.reply("You should get a plate first.")
        return False

    state.move_thing(thing_id, INVENTORY)
    return True


def _drop_thing(ctx: GameContext, thing_id: str, result: ActionResult) -> bool:
    """
    Put a held thing down at the current location, unless a domain rule forbids it.

    Returns:
        True if the thing was dropped
    """
    state = ctx.state

    if thing_id == catalog.MEATBALLS:
        result.reply("You shouldn't be throwing food away!")
        return False

    if thing_id in catalog.PLATES and state.has_thing(catalog.MEATBALLS):
        result.reply("You still have meatballs to eat!")
        return False

    state.move_thing(thing_id, state.current_location)
    return True


def _report(
    ctx: GameContext,
    result: ActionResult,
    requested: list[str],
    succeeded: list[str],
    past_tense: str,
) -> ActionResult:
    """
    Summarize a GET or DROP over several things.

    Nothing succeeded: the refusals already said it all.
    Everything succeeded: a plain confirmation.
    Some succeeded: name just those.
    """
    if not succeeded:
        return result

    if len(succeeded) == len(requested):
        return result.reply("OK.")

    return result.reply(f"You {past_tense} {', '.join(ctx.names(succeeded))}.")


VERB_HANDLERS: dict[Verb, Handler] = {
    **{
        verb: partial(handle_movement, direction)
        for verb, direction in DIRECTION_VERBS.items()
    },
    Verb.LOOK: handle_look,
    Verb.READ: handle_read,
    Verb.TALK: handle_talk,
    Verb.GET: handle_get,
    Verb.DROP: handle_drop,
    Verb.OPEN: handle_open,
    Verb.SHOWER: handle_shower,
    Verb.CLEAN: handle_clean,
    Verb.MOP: handle_mop,
    Verb.EAT: handle_eat,
    Verb.SLEEP: handle_sleep,
    Verb.RINSE: handle_rinse,
    Verb.INVENTORY: handle_inventory,
    Verb.CHECKLIST: handle_checklist,
    Verb.QUIT: handle_quit,
}
