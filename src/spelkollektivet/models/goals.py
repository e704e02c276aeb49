"""
goals.py

PURPOSE: The day's goals and their checklist descriptions.
DEPENDENCIES: None (pure Python + enum)

ARCHITECTURE NOTES:
Goal completion is never stored here. GameState holds one flag per goal,
and the rule engine re-derives those flags after every turn.
"""

from enum import Enum


class Goal(str, Enum):
    """Things the player is supposed to do by the end of the day."""

    SUITCASE_IN_ROOM = "suitcase_in_room"
    COMPUTER_IN_OFFICE = "computer_in_office"
    DINNER_EATEN = "dinner_eaten"
    SHOWER_TAKEN = "shower_taken"


# Checklist order follows the enum order
GOAL_DESCRIPTIONS: dict[Goal, str] = {
    Goal.SUITCASE_IN_ROOM: "Drop suitcase in your room.",
    Goal.COMPUTER_IN_OFFICE: "Find a desk and put your computer on it.",
    Goal.DINNER_EATEN: "Eat dinner.",
    Goal.SHOWER_TAKEN: "Take a shower.",
}
