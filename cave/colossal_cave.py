"""A portion of Colossal Cave, with some changes and enhancements.

The rooms, items, exits and details are declared in ``world.yaml``. Everything
that needs code is attached here by ``setup_<id>`` methods, which the world
runs after all the declared objects exist.
"""

from __future__ import annotations

from pathlib import Path

from advent.actions import PASS, LocalAction
from advent.errors import QuitGame
from advent.item import Fixture, Item
from advent.lantern import Lantern
from advent.owner import LIMBO, ItemOwner
from advent.room import Room
from advent.world import World

DATA_PATH = Path(__file__).with_name("world.yaml")

# Words for teleporting out of the Hall of Mists. The bird reveals which one works.
MAGIC_WORDS = (
    "plover", "plugh", "zork", "foobar", "blorple", "frob", "foo", "quux",
    "wibble", "wobble", "wubble", "flob", "blep", "blah", "fnord", "piyo",
)

BIRD_DISTURBED = "As you approach, the bird becomes disturbed and you cannot catch it."


class ColossalCave(World):
    # rooms
    outside_building: Room
    inside_building: Room
    hill: Room
    end_of_road: Room
    cliff: Room
    valley: Room
    forest: Room
    slit: Room
    outside_grate: Room
    below_grate: Room
    cobble: Room
    debris: Room
    awkward_canyon: Room
    bird_chamber: Room
    pit_top: Room
    mist_hall: Room
    east_bank: Room
    nugget_room: Room
    king_hall: Room
    # items
    sign: Fixture
    implementor_prize: Fixture
    lantern: Lantern
    keys: Item
    food: Item
    water: Item
    grate: Fixture
    cage: Item
    rod: Item
    bird: Item
    caged_bird: Item
    nugget: Item
    axe: Item
    dwarf: Fixture
    snake: Fixture
    stone_steps: Fixture

    def declare(self) -> None:
        self.load_declarations(DATA_PATH)
        self.magic_word = self.random.choice(MAGIC_WORDS)
        self.grate_open = self.toggle(
            False,
            turned_on="You unlock and open the grate.",
            turned_off="You close and lock the grate.",
            already_on="The grate is already open.",
            already_off="The grate is already closed.",
        )
        self.prize_open = False
        self.forest_steps = 0
        self.action("xyzzy", effect=lambda action: action.say("Nothing happens."))
        self.action("say", "speak", effect=lambda action: action.say("Just say it."))

    # --- outdoors ---

    def setup_outside_building(self, room: Room) -> None:
        def deliver_prize(old_room: Room) -> None:
            if self.player.has(self.nugget) and self.implementor_prize.is_in(LIMBO):
                entry_word = "exit" if old_room is self.inside_building else "approach"
                room.say(
                    f"As you {entry_word} the well house, a large box appears hovering in the air.\n"
                    "The box drops to the ground with a thud.\n"
                )
                self.implementor_prize.move_to(room)

        room.on_player_entry(deliver_prize)

    def setup_sign(self, sign: Fixture) -> None:
        sign.cant_take_message = "The sign is nailed securely to the wall."
        sign.vicinity_action(
            "read",
            "look",
            effect=lambda action: action.say(
                """The sign says:
                |
                |    Welcome to AdventKT, a theme park based on the legendary Colossal Cave.
                |    There is a priceless gold nugget hidden in the cave, protected by
                |    an ancient curse. Bring it here to win the Implementor's Prize!
                |
                |There is some fine print at the bottom of the sign."""
            ),
        )

    def setup_implementor_prize(self, prize: Fixture) -> None:
        prize.cant_take_message = "The Implementor's Prize is far too big for you to carry."

        @prize.vicinity_action("open")
        def open_prize(action: LocalAction) -> None:
            if self.prize_open:
                action.say("The Implementor's Prize is already open.")
                return
            self.prize_open = True
            action.say(
                """You open the box, releasing a huge cloud of yellow vapor.
                |The cloud briefly morphs into words
                |
                |    TODO("implement this")
                |
                |before melting into the clear blue sky.
                |
                |Congratulations! You have won the game."""
            )
            raise QuitGame()

    def setup_inside_building(self, room: Room) -> None:
        @room.action("xyzzy")
        def foof(action: LocalAction) -> None:
            action.say(">>Foof!<<")
            self.player.move_to(self.debris)

        room.action(
            "down",
            "downstream",
            effect=lambda action: action.say(
                """The stream flows out through a pair of 1 foot diameter sewer pipes.
                |It would be advisable to use the exit."""
            ),
        )

    def setup_forest(self, forest: Room) -> None:
        @forest.action("get")
        def get_out(action: LocalAction):
            if "out" not in action.subjects:
                return PASS
            self.player.move_to(self.outside_building)
            return None

        def no_dropping(old_owner: ItemOwner, item: Item) -> bool:
            # Dropped items would give away that the forest is a single room.
            if old_owner is self.player:
                forest.say(
                    """You realize you might never find your way back here
                    |and decide against dropping it."""
                )
                return False
            return True

        forest.allow_item_move_in(no_dropping)

        def bird_goes_home(old_owner: ItemOwner, bird: Item) -> None:
            forest.say(
                f"""The bird is singing to you in gratitude for your having returned it to
                |its home. In return, it informs you of a magic word which it thinks
                |you may find useful somewhere near the Hall of Mists. The magic word
                |changes frequently, but for now the bird believes it is "{self.magic_word}". You
                |thank the bird for this information, and it flies off into the forest."""
            )
            bird.move_to(LIMBO)

        forest.on_item_move_in(bird_goes_home, self.bird)

        def wander(old_room: Room) -> None:
            if old_room is not forest:
                forest.say("You enter the forest and soon become lost among the trees.")
                self.forest_steps = 0
                return
            self.forest_steps += 1
            message = {
                2: "Are you sure you are not walking in circles?",
                4: """You think you see your tracks on the forest floor
                   |But then again, you've never been much of a tracker.""",
                6: "The forest is not a maze. Maybe you need to try something else.",
                8: "You are feeling tired. All you wish for is to get out.",
            }.get(self.forest_steps)
            if message:
                forest.say(message)

        forest.on_player_entry(wander)

        def leave(new_room: Room) -> None:
            if new_room is not forest:
                forest.say("You finally found your way out of the forest.")

        forest.on_player_exit(leave)

    # --- the grate ---

    def grate_closed(self) -> bool:
        return not self.grate_open.is_on

    def setup_outside_grate(self, room: Room) -> None:
        room.guard_exit("down", "in", unless=self.grate_closed, message="The grate is closed.")

    def setup_below_grate(self, room: Room) -> None:
        room.guard_exit("up", "out", unless=self.grate_closed, message="The grate is closed.")

    def setup_grate(self, grate: Fixture) -> None:
        grate.description = lambda: "The grate is open." if self.grate_open.is_on else "The grate is closed."
        # The last guard is checked first, so an open grate is reported as such
        # even to a player without the keys.
        (
            grate.vicinity_action("open", "unlock", effect=lambda action: self.grate_open.turn_on())
            .guarded_by(lambda: self.player.has(self.keys), "The grate is locked and you don't have the key.")
            .guarded_by(lambda: not self.grate_open.is_on, "The grate is already open.")
        )
        (
            grate.vicinity_action("close", "lock", effect=lambda action: self.grate_open.turn_off())
            .guarded_by(lambda: self.player.has(self.keys), "You don't have the key to lock it.")
        )

    # --- underground ---

    def setup_debris(self, room: Room) -> None:
        @room.action("xyzzy")
        def foof(action: LocalAction) -> None:
            action.say(">>Foof!<<")
            self.player.move_to(self.inside_building)

    def setup_rod(self, rod: Item) -> None:
        @rod.action("wave")
        def wave(action: LocalAction) -> None:
            if self.player.room is self.east_bank:
                action.say('A hollow voice says, "What did you expect, a crystal bridge?"')
            else:
                action.say("You look silly waving the black rod.")

    def setup_bird(self, bird: Item) -> None:
        # A caught bird is represented by caged_bird; this item is only ever
        # in a room or in limbo.
        def describe() -> str:
            if LIMBO.has(self.snake):
                return """A little bird is sitting here looking sad and lonely.
                       |It probably misses its home in the forest."""
            return "A cheerful little bird is sitting here singing."

        bird.description = describe

        @bird.vicinity_action("take", "get", "catch")
        def catch(action: LocalAction) -> None:
            if self.player.has(self.rod):
                action.say(BIRD_DISTURBED)
            elif self.player.has(self.cage):
                self.cage.move_to(LIMBO)
                bird.move_to(LIMBO)
                self.caged_bird.move_to(self.player)
                action.say("You catch the bird and put it in the cage.")
            else:
                action.say("You can catch the bird, but you cannot carry it.")

        bird.allow_move_to(
            self.player,
            lambda: bird.decline(
                BIRD_DISTURBED if self.player.has(self.rod) else "You can catch the bird, but you cannot carry it."
            ),
        )

    def setup_caged_bird(self, caged_bird: Item) -> None:
        @caged_bird.action("open", "release")
        def release(action: LocalAction) -> None:
            caged_bird.move_to(LIMBO)
            self.cage.move_to(self.player)
            self.bird.move_to(self.player.room)

    def setup_stone_steps(self, steps: Fixture) -> None:
        def describe() -> str:
            if self.player.room is self.pit_top:
                return "Rough stone steps lead down the pit."
            if self.player.room is self.mist_hall:
                return "Rough stone steps lead up the dome."
            return "- error: why are the rough stone steps here? -"

        steps.description = describe

    def setup_dwarf(self, dwarf: Fixture) -> None:
        def throw_axe() -> None:
            # An axe in limbo is neither carried nor lying anywhere.
            if self.chance(0.3) and self.axe.is_in(LIMBO):
                dwarf.say("")
                dwarf.say(
                    """A little dwarf just walked around a corner, saw you, threw a little
                    |axe at you which missed, cursed, and ran away."""
                )
                self.axe.move_to(self.player.room)

        dwarf.on_turn_end(throw_axe)

    def setup_mist_hall(self, room: Room) -> None:
        room.guard_exit(
            "dome",
            "up",
            unless=lambda: self.player.has(self.nugget),
            message="An invisible force stops you from climbing the dome.",
        )

        @room.action(self.magic_word)
        def teleport(action: LocalAction) -> None:
            action.say(
                """The cave walls around you become a blur.
                |>>Foof!<<"""
            )
            self.player.move_to(self.outside_grate)

        # The room keeps the first action declared for a word, so the real
        # magic word keeps its teleport.
        for word in MAGIC_WORDS:
            room.action(word, effect=lambda action: action.say('A hollow voice says, "Fool!"'))

    def setup_king_hall(self, room: Room) -> None:
        room.guard_exit(
            "north",
            "south",
            "west",
            "southwest",
            unless=lambda: room.has(self.snake),
            message="You can't get by the snake.",
        )

        def drive_snake_away(old_owner: ItemOwner, bird: Item) -> None:
            if room.has(self.snake):
                room.say(
                    """The little bird attacks the green snake, and in an astounding flurry
                    |drives the snake away."""
                )
                self.snake.move_to(LIMBO)

        room.on_item_move_in(drive_snake_away, self.bird)

    def setup_snake(self, snake: Fixture) -> None:
        snake.cant_take_message = "This doesn't sound like a very good idea."


__all__ = ["ColossalCave", "MAGIC_WORDS", "DATA_PATH"]
