"""
TEST DOC: Get and Drop

WHAT: Tests for picking things up and putting them down
WHY: Placement drives every goal and the final evaluation
HOW: Play short command sequences and check placement and replies

CASES:
- Getting and dropping single things
- GET EVERYTHING and DROP EVERYTHING
- Partial success naming only what worked
- Food and plate rules
- Throwing things in the trash

EDGE CASES:
- Bare verbs
- Unknown words
- Things that can't be picked up
- Things already held or not held
"""

from spelkollektivet.engine.engine import GameEngine
from spelkollektivet.models.world import INVENTORY, NOWHERE


class TestGet:
    """Tests for GET and its synonyms."""

    def test_get(self, engine: GameEngine, play):
        """Getting a thing here puts it in the inventory."""
        result = play("n", "get suitcase")
        assert result.messages == ["OK."]
        assert engine.state.has_thing("suitcase")

    def test_take_and_pick(self, engine: GameEngine, play):
        """TAKE and PICK are GET."""
        play("n", "take suitcase", "drop suitcase", "pick suitcase")
        assert engine.state.has_thing("suitcase")

    def test_get_then_drop_restores_placement(self, engine: GameEngine, play):
        """Picking something up and putting it back leaves it where it was."""
        play("n")
        before = dict(engine.state.thing_locations)
        play("get suitcase", "drop suitcase")
        assert engine.state.thing_locations == before

    def test_get_with_possessive(self, engine: GameEngine, play):
        """Filler words around a thing name are ignored."""
        result = play("n", "get your suitcase")
        assert result.messages == ["OK."]
        assert engine.state.has_thing("suitcase")

    def test_bare_get(self, engine: GameEngine):
        """GET alone asks what."""
        result = engine.process_input("get")
        assert result.messages == ["What do you want to get?"]

    def test_get_unknown(self, engine: GameEngine):
        """Words that name nothing can't be gotten."""
        result = engine.process_input("get lamp")
        assert result.messages == ["I don't know which thing you want to get."]

    def test_get_not_here(self, engine: GameEngine):
        """Things elsewhere can't be picked up."""
        result = engine.process_input("get suitcase")
        assert result.messages == ["Suitcase is not here."]
        assert engine.state.is_at("suitcase", "lobby")

    def test_get_person(self, engine: GameEngine, play):
        """People can't be picked up."""
        result = play("n", "get james")
        assert result.messages == ["James can't be picked up."]
        assert engine.state.is_at("james", "lobby")

    def test_get_already_held(self, play):
        """Held things are already in your possession."""
        result = play("n", "get suitcase", "get suitcase")
        assert result.messages == ["Suitcase is already in your possession."]

    def test_partial_success(self, engine: GameEngine, play):
        """When only some things are picked up, those are named."""
        result = play("n", "get suitcase james")
        assert result.messages == ["James can't be picked up.", "You picked up suitcase."]
        assert engine.state.has_thing("suitcase")

    def test_get_everything(self, engine: GameEngine, play):
        """GET EVERYTHING takes every gettable thing here."""
        result = play("n", "w", "n", "get everything")
        assert result.messages == ["OK."]
        assert engine.state.has_thing("dirty_plate")
        assert engine.state.has_thing("meatballs")

    def test_get_all_skips_fixtures(self, engine: GameEngine, play):
        """GET ALL leaves fixtures where they are."""
        play("n", "e", "n", "e", "get all")
        assert engine.state.has_thing("mop")
        assert engine.state.is_at("shower", "north_wing_bathroom")
        assert engine.state.is_at("trash_bin", "north_wing_bathroom")
        assert engine.state.is_at("bathroom_sign", "north_wing_bathroom")

    def test_get_everything_nothing_here(self, engine: GameEngine):
        """GET EVERYTHING with nothing gettable around says so."""
        result = engine.process_input("get everything")
        assert result.messages == ["There is nothing here to be picked up."]

    def test_take_shower(self, engine: GameEngine, play):
        """Taking a shower is showering, not picking it up."""
        result = play("n", "e", "n", "e", "take shower")
        assert result.messages[0] == "You turn on the water and enjoy a long, hot shower."
        assert engine.state.is_at("shower", "north_wing_bathroom")
        assert engine.state.is_here("puddle")


class TestFood:
    """Tests for the food and plate rules."""

    def test_meatballs_need_plate(self, engine: GameEngine, play):
        """Food can't be taken without a plate."""
        result = play("n", "w", "n", "get meatballs")
        assert result.messages == ["You should get a plate first."]
        assert engine.state.is_at("meatballs", "dining_room")

    def test_plate_then_meatballs(self, engine: GameEngine, play):
        """With a plate, food can be taken, and the plate gets dirty."""
        result = play("n", "w", "n", "get plate", "get meatballs")
        assert result.messages == ["OK."]
        assert engine.state.has_thing("meatballs")
        assert engine.state.has_thing("dirty_plate")
        assert engine.state.is_at("clean_plate", NOWHERE)

    def test_plate_and_meatballs_together(self, engine: GameEngine, play):
        """The plate is picked up first when both are named."""
        result = play("n", "w", "n", "get plate and meatballs")
        assert result.messages == ["OK."]
        assert engine.state.has_thing("meatballs")

    def test_drop_food(self, engine: GameEngine, play):
        """Food can't be thrown away."""
        result = play("n", "w", "n", "get plate", "get meatballs", "drop meatballs")
        assert result.messages == ["You shouldn't be throwing food away!"]
        assert engine.state.has_thing("meatballs")

    def test_drop_plate_with_food(self, engine: GameEngine, play):
        """The plate stays while there is food to eat."""
        result = play("n", "w", "n", "get plate", "get meatballs", "drop plate")
        assert result.messages == ["You still have meatballs to eat!"]
        assert engine.state.has_thing("dirty_plate")

    def test_drop_plate_after_eating(self, engine: GameEngine, play):
        """After eating, the dirty plate can go."""
        result = play("n", "w", "n", "get plate", "get meatballs", "eat", "drop plate")
        assert result.messages == ["OK."]
        assert engine.state.is_at("dirty_plate", "dining_room")


class TestDrop:
    """Tests for DROP and its synonyms."""

    def test_drop(self, engine: GameEngine, play):
        """Dropping puts a held thing here."""
        result = play("n", "get suitcase", "e", "drop suitcase")
        assert result.messages == ["OK."]
        assert engine.state.is_at("suitcase", "north_wing_entrance")

    def test_set_and_place(self, engine: GameEngine, play):
        """SET and PLACE are DROP."""
        play("n", "get suitcase", "set suitcase")
        assert engine.state.is_at("suitcase", "lobby")
        play("get suitcase", "place suitcase")
        assert engine.state.is_at("suitcase", "lobby")

    def test_drop_with_possessive(self, engine: GameEngine, play):
        """The word "your" doesn't name anything."""
        result = play("n", "get suitcase", "drop your suitcase")
        assert result.messages == ["OK."]
        assert engine.state.is_at("suitcase", "lobby")

    def test_bare_drop(self, engine: GameEngine):
        """DROP alone asks what."""
        result = engine.process_input("drop")
        assert result.messages == ["What do you want to drop?"]

    def test_drop_unknown(self, engine: GameEngine):
        """Words that name nothing can't be dropped."""
        result = engine.process_input("drop lamp")
        assert result.messages == ["I don't know which thing you want to drop."]

    def test_drop_not_held(self, engine: GameEngine):
        """Things not held can't be dropped."""
        result = engine.process_input("drop suitcase")
        assert result.messages == ["Suitcase is not in your inventory."]

    def test_drop_everything(self, engine: GameEngine, play):
        """DROP EVERYTHING drops every droppable held thing but keeps the checklist."""
        result = play("n", "get suitcase", "drop everything")
        assert result.messages == ["OK."]
        assert engine.state.is_at("suitcase", "lobby")
        assert engine.state.is_at("checklist", INVENTORY)

    def test_drop_everything_nothing_droppable(self, engine: GameEngine):
        """Holding only the checklist leaves nothing to drop."""
        result = engine.process_input("drop all")
        assert result.messages == ["You don't have anything you could drop."]

    def test_drop_everything_empty_handed(self, engine: GameEngine):
        """Holding nothing at all says so."""
        engine.state.move_thing("checklist", NOWHERE)
        result = engine.process_input("drop everything")
        assert result.messages == ["You aren't carrying anything."]

    def test_drop_partial(self, engine: GameEngine, play):
        """When only some things are dropped, those are named."""
        result = play("n", "get suitcase", "drop suitcase mop")
        assert result.messages == ["Mop is not in your inventory.", "You dropped suitcase."]


class TestTrash:
    """Tests for throwing things in the trash bin."""

    def test_throw_hair(self, engine: GameEngine, play):
        """Hair goes in the trash and out of play."""
        result = play("n", "e", "n", "e", "shower", "get hair", "throw hair in trash")
        assert result.messages == ["You dispose your hair into the trash bin. Humanity thanks you!"]
        assert engine.state.is_at("hair", NOWHERE)

    def test_throw_other(self, engine: GameEngine, play):
        """Anything else is refused."""
        result = play("n", "e", "n", "e", "get mop", "throw mop in trash")
        assert result.messages == ["I don't want to throw the mop away!"]
        assert engine.state.has_thing("mop")

    def test_throw_not_held(self, play):
        """Only held things can be thrown away."""
        result = play("n", "e", "n", "e", "drop mop in trash bin")
        assert result.messages == ["Mop is not in your inventory."]

    def test_throw_nothing(self, play):
        """Naming only the trash bin asks what to throw."""
        result = play("n", "e", "n", "e", "throw trash")
        assert result.messages == ["I don't know what you want to throw in the trash."]
