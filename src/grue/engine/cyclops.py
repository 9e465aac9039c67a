"""The cyclops blocking the stairs out of the maze.

His temper is a single integer kept in actor memory. Positive wrath grows
each turn the player lingers; feeding him the lunch flips it negative
(thirsty), and water while thirsty puts him to sleep for good.
"""

from typing import TYPE_CHECKING

from .actors import Actor, ActorDefinition, ActorState
from .combat import CombatProfile, CombatResult
from .flags import GameFlag, ObjectFlag
from .narration import Narration
from .state import BOTTLE, GARLIC, LUNCH, SWORD, WATER

if TYPE_CHECKING:
    from .state import GameState

MAX_WRATH = 5

AWAKE_DESCRIPTION = "A hungry cyclops is standing at the foot of the stairs."
SLEEPING_DESCRIPTION = "The cyclops is sleeping blissfully at the foot of the stairs."

WRATH_MESSAGES = (
    "The cyclops seems somewhat agitated.",
    "The cyclops appears to be getting more agitated.",
    "The cyclops is moving about the room, looking for something.",
    "The cyclops was looking for salt and pepper. No doubt they are "
    "condiments for his upcoming snack.",
    "The cyclops is moving toward you in an unfriendly manner.",
    "You have two choices: 1. Leave  2. Become dinner.",
)

CYCLOPS_COMBAT = CombatProfile(
    best_weapon=SWORD,
    best_weapon_advantage=0,
    messages={
        CombatResult.MISSED: (
            "The cyclops swings at you but misses.",
            "The cyclops's massive fist whooshes past you.",
        ),
        CombatResult.LIGHT_WOUND: (
            "The cyclops clips you with his fist.",
            "The cyclops grazes you.",
        ),
        CombatResult.SERIOUS_WOUND: (
            "The cyclops strikes you with tremendous force!",
            "The cyclops's blow sends you reeling!",
        ),
        CombatResult.STAGGER: ("The cyclops's attack staggers you!",),
        CombatResult.LOSE_WEAPON: ("The cyclops knocks your {weapon} away!",),
        CombatResult.UNCONSCIOUS: ("The cyclops knocks you senseless!",),
        CombatResult.KILLED: ("The cyclops crushes you!",),
        CombatResult.HESITATE: ("The cyclops hesitates, confused.",),
    },
)


def _cyclops_turn(actor: Actor, state: "GameState", out: Narration) -> bool:
    from .death import jigs_up

    if actor.state is ActorState.SLEEPING or not actor.is_with_player(state):
        return False

    wrath = actor.memory.get("wrath", 0)
    if abs(wrath) > MAX_WRATH:
        jigs_up(
            state,
            "The cyclops, tired of all of your games and trickery, grabs you "
            "firmly. As he licks his chops, he says \"Mmm. Just like Mom used "
            "to make 'em.\" It's nice to be appreciated.",
            out,
        )
        return True

    actor.memory["wrath"] = wrath - 1 if wrath < 0 else wrath + 1
    index = min(abs(wrath) - 1, len(WRATH_MESSAGES) - 1)
    if index >= 0:
        out.say(WRATH_MESSAGES[index])
    state.events.queue_interrupt("cyclops", 1)
    return True


def _cyclops_should_act(actor: Actor, state: "GameState") -> bool:
    return actor.state is not ActorState.DEAD and actor.is_with_player(state)


def _holds_water(state: "GameState", item: str) -> bool:
    return item == WATER or (
        item == BOTTLE and state.objects[WATER].location == BOTTLE
    )


def _cyclops_gift(actor: Actor, state: "GameState", item: str, out: Narration) -> bool:
    wrath = actor.memory.get("wrath", 0)

    if item == LUNCH:
        if wrath < 0:
            out.say("The cyclops is not so stupid as to eat THAT!")
            return False
        state.remove_object(LUNCH)
        out.say(
            "The cyclops says \"Mmm Mmm. I love hot peppers! But oh, could I "
            "use a drink. Perhaps I could drink the blood of that thing.\" From "
            "the gleam in his eye, it could be surmised that you are \"that "
            "thing\"."
        )
        actor.memory["wrath"] = min(-1, -wrath)
        state.events.queue_interrupt("cyclops", 1)
        return True

    if _holds_water(state, item):
        if wrath >= 0:
            out.say(
                "The cyclops apparently is not thirsty and refuses your "
                "generous offer."
            )
            return False
        state.remove_object(WATER)
        state.move_object(BOTTLE, state.current_room)
        state.set_object_flag(BOTTLE, ObjectFlag.OPEN)
        out.say(
            "The cyclops takes the bottle, checks that it's open, and drinks "
            "the water. A moment later, he lets out a yawn that nearly blows "
            "you over, and then falls fast asleep (what did you put in that "
            "drink, anyway?)."
        )
        actor.transition(ActorState.SLEEPING, state, out)
        return True

    if item == GARLIC:
        out.say("The cyclops may be hungry, but there is a limit.")
        return False

    out.say("The cyclops is not so stupid as to eat THAT!")
    return False


def _cyclops_attacked(
    actor: Actor, state: "GameState", out: Narration, weapon: str | None
) -> None:
    if actor.state is ActorState.SLEEPING:
        actor.transition(ActorState.NORMAL, state, out)
        return
    out.say("The cyclops shrugs but otherwise ignores your pitiful attempt.")
    state.events.queue_interrupt("cyclops", 1)


def _cyclops_talk(actor: Actor, state: "GameState") -> str:
    if actor.state is ActorState.SLEEPING:
        return "No use talking to him. He's fast asleep."
    return "The cyclops prefers eating to making conversation."


def _cyclops_sleeps(actor: Actor, state: "GameState", out: Narration) -> None:
    state.set_object_flag(actor.id, ObjectFlag.FIGHT, False)
    actor.obj(state).description = SLEEPING_DESCRIPTION
    state.set_flag(GameFlag.CYCLOPS_FLAG)
    state.events.disable("cyclops")
    state.award("defeat_cyclops", 10)


def _cyclops_wakes(actor: Actor, state: "GameState", out: Narration) -> None:
    actor.tell_if_visible(
        state, out, "The cyclops yawns and stares at the thing that woke him up."
    )
    state.set_object_flag(actor.id, ObjectFlag.FIGHT)
    actor.obj(state).description = AWAKE_DESCRIPTION
    state.set_flag(GameFlag.CYCLOPS_FLAG, False)
    actor.memory["wrath"] = abs(actor.memory.get("wrath", 0))


CYCLOPS_ACTOR = ActorDefinition(
    kind="cyclops",
    combat=CYCLOPS_COMBAT,
    fights_back=False,
    execute_turn=_cyclops_turn,
    on_attacked=_cyclops_attacked,
    on_receive_item=_cyclops_gift,
    on_talk=_cyclops_talk,
    should_act=_cyclops_should_act,
    transitions={
        (None, ActorState.SLEEPING): _cyclops_sleeps,
        (ActorState.SLEEPING, ActorState.NORMAL): _cyclops_wakes,
    },
    memory={"wrath": 0},
)
