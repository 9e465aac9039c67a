"""The troll guarding the passages beyond the cellar."""

from typing import TYPE_CHECKING

from .actors import Actor, ActorDefinition, ActorState
from .combat import CombatProfile, CombatResult
from .flags import GameFlag, ObjectFlag
from .narration import Narration
from .state import AXE, KNIFE, SWORD

if TYPE_CHECKING:
    from .state import GameState

RECOVER_WEAPON_FIGHTING = 0.90
RECOVER_WEAPON_NORMAL = 0.75
EAT_WEAPON_CHANCE = 0.20
COUNTER_ATTACK_CHANCE = 0.33

ARMED_DESCRIPTION = (
    "A nasty-looking troll, brandishing a bloody axe, blocks all passages "
    "out of the room."
)
UNARMED_DESCRIPTION = "A pathetically babbling troll is here."
UNCONSCIOUS_DESCRIPTION = (
    "An unconscious troll is sprawled on the floor. All passages out of the "
    "room are open."
)

TROLL_COMBAT = CombatProfile(
    best_weapon=SWORD,
    best_weapon_advantage=1,
    messages={
        CombatResult.MISSED: (
            "The troll swings his axe, but misses.",
            "The troll's axe whistles past your ear.",
        ),
        CombatResult.LIGHT_WOUND: (
            "The troll's axe grazes you.",
            "The troll nicks you with his axe.",
        ),
        CombatResult.SERIOUS_WOUND: (
            "The troll's axe strikes you with a mighty blow!",
            "The troll wounds you seriously with his axe!",
        ),
        CombatResult.STAGGER: ("The troll's blow staggers you!",),
        CombatResult.LOSE_WEAPON: (
            "The troll's axe knocks your {weapon} from your hand!",
        ),
        CombatResult.UNCONSCIOUS: ("The troll knocks you unconscious!",),
        CombatResult.KILLED: ("The troll's axe cleaves you in twain!",),
        CombatResult.HESITATE: (
            "The troll hesitates, giving you a chance to recover.",
        ),
    },
)


def _axe_on_floor(actor: Actor, state: "GameState") -> bool:
    room = actor.obj(state).location
    return room is not None and state.objects[AXE].location == room


def _troll_turn(actor: Actor, state: "GameState", out: Narration) -> bool:
    obj = actor.obj(state)
    if actor.state is ActorState.NORMAL and actor.has_weapon(state):
        if actor.is_with_player(state):
            actor.transition(ActorState.FIGHTING, state, out)

    if not actor.has_weapon(state) and _axe_on_floor(actor, state):
        chance = (
            RECOVER_WEAPON_FIGHTING
            if actor.state is ActorState.FIGHTING
            else RECOVER_WEAPON_NORMAL
        )
        if state.rng.random() < chance:
            actor.take_weapon(state)
            actor.tell_if_visible(
                state,
                out,
                "The troll, angered and humiliated, recovers his weapon. He "
                "appears to have an axe to grind with you.",
            )
        else:
            actor.tell_if_visible(
                state,
                out,
                "The troll, disarmed, cowers in terror, pleading for his life "
                "in the guttural tongue of the trolls.",
            )

    obj.description = (
        ARMED_DESCRIPTION if actor.has_weapon(state) else UNARMED_DESCRIPTION
    )
    return True


def _troll_attacked(
    actor: Actor, state: "GameState", out: Narration, weapon: str | None
) -> None:
    if actor.state is ActorState.NORMAL:
        actor.transition(ActorState.FIGHTING, state, out)
        if state.rng.random() < COUNTER_ATTACK_CHANCE:
            state.set_object_flag(actor.id, ObjectFlag.FIGHT)


def _troll_gift(actor: Actor, state: "GameState", item: str, out: Narration) -> bool:
    name = state.objects[item].name
    if item == AXE:
        out.say("The troll scratches his head in confusion, then takes the axe.")
        actor.take_weapon(state)
        if actor.state is ActorState.NORMAL:
            actor.transition(ActorState.FIGHTING, state, out)
        return True

    if item in (KNIFE, SWORD):
        if state.rng.random() < EAT_WEAPON_CHANCE:
            out.say(
                "The troll, who is not overly proud, graciously accepts the "
                "gift and eats it hungrily. Poor troll, he dies from an internal "
                "hemorrhage and his carcass disappears in a sinister black fog."
            )
            state.remove_object(item)
            actor.transition(ActorState.DEAD, state, out)
        else:
            out.say(
                "The troll, who is not overly proud, graciously accepts the "
                "gift and, being for the moment sated, throws it back. "
                f"Fortunately, the troll has poor control, and the {name} falls "
                "to the floor. He does not look pleased."
            )
            state.move_object(item, state.current_room)
            state.set_object_flag(actor.id, ObjectFlag.FIGHT)
        return True

    out.say(
        "The troll, who is not overly proud, graciously accepts the gift and "
        "not having the most discriminating tastes, gleefully eats it."
    )
    state.remove_object(item)
    return True


def _troll_talk(actor: Actor, state: "GameState") -> str:
    return "The troll isn't much of a conversationalist."


def _troll_dies(actor: Actor, state: "GameState", out: Narration) -> None:
    actor.drop_weapon(state)
    state.set_flag(GameFlag.TROLL_FLAG)
    state.award("defeat_troll", 10)
    actor.tell_if_visible(
        state, out, "The troll's body disappears in a cloud of greasy black smoke."
    )


def _troll_knocked_out(actor: Actor, state: "GameState", out: Narration) -> None:
    actor.drop_weapon(state)
    actor.obj(state).description = UNCONSCIOUS_DESCRIPTION
    state.set_flag(GameFlag.TROLL_FLAG)


def _troll_wakes(actor: Actor, state: "GameState", out: Narration) -> None:
    actor.tell_if_visible(
        state, out, "The troll stirs, quickly resuming a fighting stance."
    )
    if _axe_on_floor(actor, state):
        actor.take_weapon(state)
    obj = actor.obj(state)
    obj.description = (
        ARMED_DESCRIPTION if actor.has_weapon(state) else UNARMED_DESCRIPTION
    )
    state.set_flag(GameFlag.TROLL_FLAG, False)


TROLL_ACTOR = ActorDefinition(
    kind="troll",
    weapon=AXE,
    combat=TROLL_COMBAT,
    wake_state=ActorState.FIGHTING,
    driven_by_combat=True,
    execute_turn=_troll_turn,
    on_attacked=_troll_attacked,
    on_receive_item=_troll_gift,
    on_talk=_troll_talk,
    transitions={
        (None, ActorState.DEAD): _troll_dies,
        (None, ActorState.UNCONSCIOUS): _troll_knocked_out,
        (ActorState.UNCONSCIOUS, ActorState.FIGHTING): _troll_wakes,
    },
)
