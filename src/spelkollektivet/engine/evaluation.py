"""
evaluation.py

PURPOSE: Judge how the player behaved once the day is over.
DEPENDENCIES: context, catalog, output

ARCHITECTURE NOTES:
The evaluation is a strictly ordered read-only pass over final placement.
It never moves anything; it only produces feedback blocks, separated by
pauses, and picks one of two closing messages depending on whether any
mistake was noticed along the way.
"""

from spelkollektivet.engine import catalog
from spelkollektivet.engine.context import GameContext
from spelkollektivet.engine.output import ActionResult
from spelkollektivet.models.world import NOWHERE

MISTAKES_CLOSING = (
    "We hope you've learned something today. It's not always easy to live in a house "
    "full of other people, but we can make it very enjoyable if we all take care of the "
    "place and keep things in the same condition as we found them."
)

PERFECT_CLOSING = (
    "You've shown that you can get things done and be mindful of your fellow homies at "
    "the same time. You are a shining example of how to behave in a coliving "
    "environment. Have a wonderful night!"
)


def evaluate_day(ctx: GameContext) -> ActionResult:
    """Produce the end-of-day feedback."""
    result = ActionResult()

    result.reply(
        "Exhausted at the end of your first day, you doze off to sleep. You've completed "
        "all four goals, but … have you been a good homie at doing it?"
    )
    result.pause()

    shower_feedback, shower_mistakes = _judge_shower(ctx)
    result.extend(shower_feedback)
    result.pause()

    dinner_feedback, dinner_mistakes = _judge_dinner(ctx)
    result.extend(dinner_feedback)
    result.pause()

    if shower_mistakes or dinner_mistakes:
        result.reply(MISTAKES_CLOSING)
    else:
        result.reply(PERFECT_CLOSING)

    return result.pause()


def _judge_shower(ctx: GameContext) -> tuple[ActionResult, bool]:
    """Judge the puddle, the mop and the hair."""
    result = ActionResult()
    state = ctx.state
    made_mistakes = False
    hair_in_drain = state.is_at(catalog.HAIR, catalog.NORTH_WING_BATHROOM)

    if state.is_at(catalog.PUDDLE, NOWHERE):
        result.reply("You took a shower and you mopped the floor afterwards. Awesome!")

        if not state.is_at(catalog.MOP, catalog.NORTH_WING_BATHROOM):
            result.reply(
                "It would be nice if you also left the mop back in the bathroom for other "
                "homies to use afterwards."
            )
            made_mistakes = True

        if hair_in_drain:
            if made_mistakes:
                hair_feedback = "You also left a ball of hair in the drain after you."
            else:
                hair_feedback = "However, you left a ball of hair in the drain after you."
            made_mistakes = True
        else:
            hair_feedback = "Thank you for picking up your hair from the drain as well."
    else:
        result.reply(
            "You took a shower and you left a huge puddle of water all over the floor. "
            "Please use the mop and clean after yourself next time."
        )
        made_mistakes = True

        if hair_in_drain:
            hair_feedback = "You also left a ball of hair in the drain after you."
        else:
            hair_feedback = "Thank you for picking up your hair from the drain as well."

    if hair_in_drain:
        hair_feedback += (
            " Try to be mindful of the homies coming to shower after you and don't leave "
            "hairy souvenirs for them."
        )
    elif state.has_thing(catalog.HAIR):
        hair_feedback += (
            " However, you were a bit gross running around with it in your hands all day."
        )
        made_mistakes = True
    elif not state.is_at(catalog.HAIR, NOWHERE):
        hair_feedback += (
            " However, throwing it somewhere else is not a nice thing to do. "
            "Next time dispose of it in the trash."
        )
        made_mistakes = True

    result.reply(hair_feedback)
    return result, made_mistakes


def _judge_dinner(ctx: GameContext) -> tuple[ActionResult, bool]:
    """Judge what happened to the plate after dinner."""
    state = ctx.state
    made_mistakes = False
    feedback = "We hope the meatballs were delicious."

    if state.is_at(catalog.DIRTY_PLATE, NOWHERE):
        feedback += " Thank you for rinsing the plate after you"

        if state.is_at(catalog.RINSED_PLATE, catalog.SCULLERY):
            feedback += " and leaving it by the dishwasher to get it super clean. Great job!"
        else:
            feedback += (
                ". Next time also leave it by the dishwasher so it gets thoroughly "
                "cleaned as well."
            )
            made_mistakes = True
    else:
        feedback += " It would be nice, however, if you rinsed the dirty plate"
        made_mistakes = True

        if state.is_at(catalog.DIRTY_PLATE, catalog.SCULLERY):
            feedback += (
                ". It's nice that you dropped it off at the dishwasher, but if thick "
                "layers of food are left on it, they sometimes don't get cleaned. "
                "Remember, nobody would like to eat your leftovers!"
            )
        else:
            feedback += " and placed it next to the dishwasher."

    return ActionResult().reply(feedback), made_mistakes
