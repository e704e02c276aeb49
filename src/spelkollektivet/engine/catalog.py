"""
catalog.py

PURPOSE: Thing and location IDs that scripted logic depends on.
DEPENDENCIES: None

ARCHITECTURE NOTES:
Most of the world lives in data, but the events, rules and evaluation are
written against specific things ("the plate", "the shower"). Those IDs and
the fixed allow-lists live here so the validator can check a world file
provides all of them.
"""

# Things
SUITCASE = "suitcase"
JAMES = "james"
CLEAN_PLATE = "clean_plate"
DIRTY_PLATE = "dirty_plate"
RINSED_PLATE = "rinsed_plate"
COMPUTER = "computer"
CHECKLIST = "checklist"
EMPTY_DESK = "empty_desk"
YOUR_DESK = "your_desk"
BATHROOM_SIGN = "bathroom_sign"
MOP = "mop"
HAIR = "hair"
PUDDLE = "puddle"
SHOWER = "shower"
TRASH_BIN = "trash_bin"
MEATBALLS = "meatballs"

# Locations
LOBBY = "lobby"
RECEPTION = "reception"
YOUR_ROOM = "your_room"
NORTH_WING_BATHROOM = "north_wing_bathroom"
LOUD_OFFICE = "loud_office"
SCULLERY = "scullery"
HOMIES_KITCHEN = "homies_kitchen"

# Vocabulary words that get rebound during play
PLATE_WORD = "plate"
DESK_WORD = "desk"

# Allow-lists (order matters where lists are intersected for display)
TALKABLE = (JAMES,)
GETTABLE = (SUITCASE, CLEAN_PLATE, DIRTY_PLATE, RINSED_PLATE, COMPUTER, MOP, HAIR, MEATBALLS)
READABLE = (CHECKLIST, BATHROOM_SIGN)
PLATES = (DIRTY_PLATE, CLEAN_PLATE, RINSED_PLATE)
# Plates that can carry food
FOOD_PLATES = (CLEAN_PLATE, DIRTY_PLATE)
SINK_LOCATIONS = (SCULLERY, HOMIES_KITCHEN, NORTH_WING_BATHROOM)
SHOWER_BLOCKERS = (SUITCASE, COMPUTER)

REQUIRED_THINGS = (
    SUITCASE,
    JAMES,
    CLEAN_PLATE,
    DIRTY_PLATE,
    RINSED_PLATE,
    COMPUTER,
    CHECKLIST,
    EMPTY_DESK,
    YOUR_DESK,
    BATHROOM_SIGN,
    MOP,
    HAIR,
    PUDDLE,
    SHOWER,
    TRASH_BIN,
    MEATBALLS,
)

REQUIRED_LOCATIONS = (
    LOBBY,
    RECEPTION,
    YOUR_ROOM,
    NORTH_WING_BATHROOM,
    LOUD_OFFICE,
    SCULLERY,
    HOMIES_KITCHEN,
)
