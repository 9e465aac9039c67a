"""Player death, resurrection and the lurking grue."""

from typing import TYPE_CHECKING

from .flags import ObjectFlag, RoomFlag
from .narration import Narration
from .state import ENTRANCE_TO_HADES, FOREST_1, LAMP, SOUTH_TEMPLE

if TYPE_CHECKING:
    from .state import GameState

DEATH_PENALTY = 10
MAX_DEATHS = 3
GRUE_CHANCE = 0.75

DEATH_BANNER = "    ****  You have died  ****"
GRUE_ATTACK = "Oh, no! You have walked into the slavering fangs of a lurking grue!"


def jigs_up(state: "GameState", message: str, out: Narration) -> None:
    """Kill the player and decide what happens next."""
    if state.dead:
        out.say(
            "It takes a talented person to be killed while already dead. "
            "YOU are such a talent. Unfortunately, it takes a talented person "
            "to deal with it. I am not such a talent. Sorry."
        )
        state.is_finished = True
        return

    out.say(message)
    out.say(DEATH_BANNER)
    state.score -= DEATH_PENALTY
    state.deaths += 1
    state.wounds = 0
    state.staggered = False
    state.load_allowed = max(state.load_allowed, 50)
    for actor in state.actors:
        state.set_object_flag(actor.id, ObjectFlag.FIGHT, False)

    if state.deaths >= MAX_DEATHS:
        out.say(
            "You clearly are a suicidal maniac. We don't allow psychotics in "
            "the cave, since they may harm other adventurers. Your remains "
            "will be installed in the Land of the Living Dead, where your "
            "fellow adventurers may gloat over them."
        )
        state.is_finished = True
        return

    death_room = state.current_room
    if RoomFlag.TOUCHED in state.rooms[SOUTH_TEMPLE].flags:
        out.say(
            "As you take your last breath, you feel relieved of your burdens. "
            "The feeling passes as you find yourself before the gates of Hell, "
            "where the spirits jeer at you and deny you entry. Your senses are "
            "disturbed. The objects in the dungeon appear indistinct, bleached "
            "of color, even unreal."
        )
        state.dead = True
        state.current_room = ENTRANCE_TO_HADES
    else:
        out.say(
            "Now, let's take a look here... Well, you probably deserve another "
            "chance. I can't quite fix you up completely, but you can't have "
            "everything."
        )
        state.current_room = FOREST_1
        state.events.enable("forest")
    state.room.flags.add(RoomFlag.TOUCHED)
    scatter_possessions(state, death_room)


def scatter_possessions(state: "GameState", death_room: str) -> None:
    """Spread the inventory around the world after a death.

    The lamp goes home, treasures land in random rooms above ground or
    below, and everything else stays where the player fell.
    """
    land = [r.id for r in state.rooms.values() if RoomFlag.LAND in r.flags]
    for obj_id in list(state.inventory):
        obj = state.objects[obj_id]
        if obj_id == LAMP and LAMP in state.world.objects:
            state.move_object(obj_id, state.world.objects[LAMP].location)
        elif obj.value > 0 and land:
            state.move_object(obj_id, state.rng.choice(land))
        else:
            state.move_object(obj_id, death_room)


def grue_check(state: "GameState", was_lit: bool, out: Narration) -> bool:
    """Maybe feed the player to a grue when stumbling between dark rooms."""
    if was_lit or state.dead or state.is_lit():
        return False
    if state.rng.random() < GRUE_CHANCE:
        jigs_up(state, GRUE_ATTACK, out)
        return True
    return False
