"""
display.py

PURPOSE: Describe locations, things, the checklist and the inventory.
DEPENDENCIES: models, context, output

ARCHITECTURE NOTES:
These produce lines only; they never decide what the player may do.
Location display is the one exception that touches state: showing a
location's full description marks it as seen.
"""

from spelkollektivet.engine.catalog import CHECKLIST
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.output import ActionResult, LineStyle
from spelkollektivet.models.goals import GOAL_DESCRIPTIONS
from spelkollektivet.models.world import INVENTORY

CHECKMARK = " ✔"


def describe_location(ctx: GameContext, force_description: bool = False) -> ActionResult:
    """
    Describe the current location.

    Args:
        ctx: The session
        force_description: If True, always show the full description.
                           If False, show just the name on revisits.

    Returns:
        Description, exits and the things lying here
    """
    result = ActionResult()
    state = ctx.state
    location = ctx.world.get_location(state.current_location)
    if location is None:
        return result.reply("You are nowhere.")

    if state.has_seen(location.id) and not force_description:
        result.say(f"{location.name}.")
    else:
        result.say(location.description)
        state.mark_seen(location.id)

    result.blank()

    exits = "".join(f" {direction.value}" for direction in location.directions)
    result.say(f"Possible exits are:{exits}.")

    result.say("You see:")
    things_here = state.things_at(location.id)
    if not things_here:
        result.say("    nothing.")
    for thing_id in things_here:
        result.say(f"    {ctx.name(thing_id)}.")

    return result.blank()


def describe_thing(ctx: GameContext, thing_id: str) -> ActionResult:
    """Describe a single thing. The checklist shows the goals instead."""
    if thing_id == CHECKLIST:
        return describe_checklist(ctx)

    thing = ctx.world.get_thing(thing_id)
    description = thing.description if thing else "You see nothing special."
    return ActionResult().reply(description)


def describe_checklist(ctx: GameContext) -> ActionResult:
    """List the goals, ticking the completed ones."""
    result = ActionResult()
    result.say("You go over the mental checklist of things you're supposed to do today:")

    for goal, description in GOAL_DESCRIPTIONS.items():
        if ctx.state.is_goal_completed(goal):
            result.say(f"    {description}{CHECKMARK}", LineStyle.SUCCESS)
        else:
            result.say(f"    {description}")

    return result.blank()


def describe_inventory(ctx: GameContext) -> ActionResult:
    """List the things the player is carrying."""
    result = ActionResult()
    result.say("You are carrying:")

    held = ctx.state.things_at(INVENTORY)
    if not held:
        result.say("    nothing.")
    for thing_id in held:
        result.say(f"    {ctx.name(thing_id)}.")

    return result.blank()
