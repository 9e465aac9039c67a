"""Melee resolution for the player and hostile actors.

Blows are resolved against three outcome tables picked by the defender's
strength, with the attacker's advantage selecting a slice of the table. The
player's strength grows with score and shrinks with wounds; wounds heal one
point every CURE_WAIT turns.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from .actors import Actor, ActorState
from .flags import ObjectFlag
from .narration import Narration
from .state import AXE, KNIFE, LOAD_LIMIT, MAX_SCORE, PLAYER, STILETTO, SWORD

if TYPE_CHECKING:
    from .state import GameState

STRENGTH_MIN = 2
STRENGTH_MAX = 7
CURE_WAIT = 30
WAKE_STEP = 25

WEAPONS = (SWORD, KNIFE, AXE, STILETTO)


class CombatResult(IntEnum):
    MISSED = 1
    LIGHT_WOUND = 2
    SERIOUS_WOUND = 3
    STAGGER = 4
    LOSE_WEAPON = 5
    UNCONSCIOUS = 6
    KILLED = 7
    HESITATE = 8
    SITTING_DUCK = 9


R = CombatResult

DEF1 = (R.LIGHT_WOUND, R.LIGHT_WOUND, R.SERIOUS_WOUND, R.STAGGER, R.LOSE_WEAPON,
        R.UNCONSCIOUS, R.KILLED, R.MISSED, R.MISSED)
DEF2A = (R.MISSED, R.MISSED, R.LIGHT_WOUND, R.LIGHT_WOUND, R.SERIOUS_WOUND,
         R.STAGGER, R.LOSE_WEAPON, R.UNCONSCIOUS, R.KILLED)
DEF2B = (R.MISSED, R.MISSED, R.MISSED, R.LIGHT_WOUND, R.SERIOUS_WOUND,
         R.SERIOUS_WOUND, R.SERIOUS_WOUND, R.SERIOUS_WOUND, R.SERIOUS_WOUND)
DEF3A = (R.MISSED, R.MISSED, R.MISSED, R.MISSED, R.MISSED, R.LIGHT_WOUND,
         R.SERIOUS_WOUND, R.STAGGER, R.LOSE_WEAPON)
DEF3B = (R.MISSED, R.MISSED, R.MISSED, R.MISSED, R.MISSED, R.MISSED, R.MISSED,
         R.MISSED, R.LIGHT_WOUND)

DEF1_RES = (DEF1[2:], DEF1[4:])
DEF2_RES = (DEF2A, DEF2A, DEF2B[2:], DEF2B[4:])
DEF3_RES = (DEF3A, DEF3A[2:], DEF3A, DEF3B[2:])

HERO_MESSAGES: dict[CombatResult, tuple[str, ...]] = {
    R.MISSED: (
        "Your {weapon} misses the {villain} by an inch.",
        "A good slash, but it misses the {villain} by a mile.",
        "You charge, but the {villain} jumps nimbly aside.",
        "Clang! Crash! The {villain} parries.",
        "A quick stroke, but the {villain} is on guard.",
        "A good stroke, but it's too slow; the {villain} dodges.",
    ),
    R.LIGHT_WOUND: (
        "The {villain} is struck on the arm; blood begins to trickle down.",
        "Your {weapon} pinks the {villain} on the wrist, but it's not serious.",
        "Your stroke lands, but it was only the flat of the blade.",
        "The blow lands, making a shallow gash in the {villain}'s arm!",
    ),
    R.SERIOUS_WOUND: (
        "The {villain} receives a deep gash in his side.",
        "A savage blow on the thigh! The {villain} is stunned but can still fight!",
        "Slash! Your blow lands! That one hit an artery, it could be serious!",
        "Slash! Your stroke connects! This could be serious!",
    ),
    R.STAGGER: (
        "The {villain} is staggered, and drops to his knees.",
        "The {villain} is momentarily disoriented and can't fight back.",
        "The force of your blow knocks the {villain} back, stunned.",
        "The {villain} is confused and can't fight back.",
        "The quickness of your thrust knocks the {villain} back, stunned.",
    ),
    R.LOSE_WEAPON: (
        "The {villain}'s weapon is knocked to the floor, leaving him unarmed.",
        "The {villain} is disarmed by a subtle feint past his guard.",
    ),
    R.UNCONSCIOUS: (
        "Your {weapon} crashes down, knocking the {villain} into dreamland.",
        "The {villain} is battered into unconsciousness.",
        "A furious exchange, and the {villain} is knocked out!",
        "The haft of your {weapon} knocks out the {villain}.",
        "The {villain} is knocked out!",
    ),
    R.KILLED: (
        "It's curtains for the {villain} as your {weapon} removes his head.",
        "The fatal blow strikes the {villain} square in the heart: He dies.",
        "The {villain} takes a fatal blow and slumps to the floor dead.",
    ),
    R.HESITATE: ("The {villain} hesitates, giving you an opening.",),
    R.SITTING_DUCK: ("The {villain} is defenseless!",),
}


@dataclass(frozen=True)
class CombatProfile:
    """How an actor fights: its best-weapon weakness and blow messages."""

    best_weapon: str
    best_weapon_advantage: int
    messages: dict[CombatResult, tuple[str, ...]] = field(default_factory=dict)


def find_weapon(state: "GameState", holder: str) -> str | None:
    for weapon in WEAPONS:
        if weapon in state.objects and state.objects[weapon].location == holder:
            return weapon
    return None


def player_strength(state: "GameState", adjust: bool = True) -> int:
    strength = STRENGTH_MIN + max(state.score, 0) // (
        MAX_SCORE // (STRENGTH_MAX - STRENGTH_MIN)
    )
    if adjust:
        strength += state.wounds
    return strength


def villain_strength(state: "GameState", actor: Actor, player_weapon: str | None) -> int:
    strength = actor.obj(state).properties.get("strength", 0)
    if strength < 0:
        return strength
    profile = actor.definition.combat
    if profile and player_weapon == profile.best_weapon:
        strength = max(1, strength - profile.best_weapon_advantage)
    return strength


def resolve_blow(
    state: "GameState", attack: int, defense: int, staggered: bool
) -> CombatResult:
    """Pick an outcome from the table for this strength pairing."""
    if defense == 1:
        table = DEF1_RES[max(min(attack, 2), 1) - 1]
    elif defense == 2:
        table = DEF2_RES[max(min(attack, 4), 1) - 1]
    elif defense > 2:
        table = DEF3_RES[max(-2, min(2, attack - defense)) + 2]
    else:
        table = DEF1_RES[0]
    result = table[int(state.rng.random() * min(9, len(table)))]
    if staggered:
        result = R.HESITATE if result is R.STAGGER else R.SITTING_DUCK
    return result


def _pick(state: "GameState", messages: tuple[str, ...], **names: str) -> str:
    return messages[int(state.rng.random() * len(messages))].format(**names)


def villain_blow(state: "GameState", actor: Actor, out: Narration) -> CombatResult:
    """One attack by an actor on the player."""
    from .death import jigs_up

    obj = actor.obj(state)
    if obj.has(ObjectFlag.STAGGERED):
        out.say(f"The {obj.name} slowly regains his feet.")
        state.set_object_flag(obj.id, ObjectFlag.STAGGERED, False)
        return R.HESITATE

    weapon = find_weapon(state, PLAYER)
    attack = villain_strength(state, actor, weapon)
    defense = player_strength(state)
    if defense <= 0:
        result = R.KILLED
    else:
        result = resolve_blow(state, attack, defense, state.staggered)

    messages = actor.definition.combat.messages.get(result)
    if messages:
        weapon_name = state.objects[weapon].name if weapon else "weapon"
        out.say(_pick(state, messages, villain=obj.name, weapon=weapon_name))

    new_defense = defense
    match result:
        case R.LIGHT_WOUND:
            new_defense = max(0, defense - 1)
            if state.load_allowed > 50:
                state.load_allowed -= 10
        case R.SERIOUS_WOUND:
            new_defense = max(0, defense - 2)
            if state.load_allowed > 50:
                state.load_allowed -= 20
        case R.STAGGER:
            state.staggered = True
        case R.LOSE_WEAPON:
            if weapon:
                state.move_object(weapon, state.current_room)
                spare = find_weapon(state, PLAYER)
                if spare:
                    out.say(f"Fortunately, you still have a {state.objects[spare].name}.")
        case R.UNCONSCIOUS | R.KILLED | R.SITTING_DUCK:
            new_defense = 0

    state.wounds = new_defense - player_strength(state, adjust=False)
    if new_defense <= 0:
        state.wounds = 0
        jigs_up(
            state,
            "It appears that that last blow was too much for you. I'm afraid you are dead.",
            out,
        )
    elif state.wounds < 0 and not state.events.is_enabled("cure"):
        state.events.queue_interrupt("cure", CURE_WAIT)
    return result


def player_blow(
    state: "GameState", actor: Actor, weapon: str, out: Narration
) -> CombatResult:
    """One attack by the player on an actor."""
    obj = actor.obj(state)
    state.set_object_flag(obj.id, ObjectFlag.FIGHT)

    if state.staggered:
        out.say(
            "You are still recovering from that last blow, "
            "so your attack is ineffective."
        )
        state.staggered = False
        return R.HESITATE

    defense = villain_strength(state, actor, weapon)
    if defense <= 0:
        condition = "unconscious" if defense < 0 else "unarmed"
        out.say(f"The {condition} {obj.name} cannot defend himself: He dies.")
        kill_villain(state, actor, out)
        return R.KILLED

    attack = player_strength(state)
    result = resolve_blow(state, attack, defense, obj.has(ObjectFlag.STAGGERED))
    out.say(
        _pick(
            state,
            HERO_MESSAGES[result],
            villain=obj.name,
            weapon=state.objects[weapon].name,
        )
    )

    new_defense = defense
    match result:
        case R.LIGHT_WOUND:
            new_defense = max(0, defense - 1)
        case R.SERIOUS_WOUND:
            new_defense = max(0, defense - 2)
        case R.STAGGER:
            state.set_object_flag(obj.id, ObjectFlag.STAGGERED)
        case R.LOSE_WEAPON:
            actor.drop_weapon(state)
        case R.UNCONSCIOUS:
            new_defense = -defense
        case R.KILLED | R.SITTING_DUCK:
            new_defense = 0

    obj.properties["strength"] = new_defense
    if new_defense == 0:
        kill_villain(state, actor, out)
    elif result is R.UNCONSCIOUS:
        actor.transition(ActorState.UNCONSCIOUS, state, out)
    return result


def kill_villain(state: "GameState", actor: Actor, out: Narration) -> None:
    obj = actor.obj(state)
    obj.properties["strength"] = 0
    out.say(
        f"Almost as soon as the {obj.name} breathes his last breath, a cloud of "
        "sinister black fog envelops him, and when the fog lifts, the carcass "
        "has disappeared."
    )
    state.remove_object(obj.id)
    actor.transition(ActorState.DEAD, state, out)


def fight_daemon(state: "GameState", out: Narration) -> bool:
    """Wake rolls for unconscious villains, then one blow per hostile one."""
    fighting = False
    for actor in state.actors:
        if actor.definition.combat is None or actor.state is ActorState.DEAD:
            continue
        obj = actor.obj(state)
        if obj.location == state.current_room and not obj.has(ObjectFlag.INVISIBLE):
            strength = obj.properties.get("strength", 0)
            if strength < 0:
                chance = actor.memory.get("wake_chance", 0)
                if chance > 0 and state.rng.random() * 100 < chance:
                    actor.memory["wake_chance"] = 0
                    obj.properties["strength"] = -strength
                    actor.transition(actor.definition.wake_state, state, out)
                else:
                    actor.memory["wake_chance"] = min(100, chance + WAKE_STEP)
                continue
            if actor.definition.driven_by_combat and actor.should_act(state):
                actor.execute_turn(state, out)
            if obj.has(ObjectFlag.FIGHT):
                fighting = True
        else:
            if obj.has(ObjectFlag.FIGHT):
                state.set_object_flag(obj.id, ObjectFlag.FIGHT, False)
            if obj.has(ObjectFlag.STAGGERED):
                state.set_object_flag(obj.id, ObjectFlag.STAGGERED, False)

    if not fighting:
        return False

    room = state.current_room
    for actor in state.actors:
        obj = actor.obj(state)
        if (
            actor.definition.combat is not None
            and obj.location == room
            and obj.has(ObjectFlag.FIGHT)
            and obj.properties.get("strength", 0) > 0
        ):
            villain_blow(state, actor, out)
            if state.current_room != room or state.is_finished:
                break
    return True


def cure_interrupt(state: "GameState", out: Narration) -> bool:
    """Heal one point of wounds and come back later if more remain."""
    if state.wounds > 0:
        state.wounds = 0
    elif state.wounds < 0:
        state.wounds += 1
        state.load_allowed = min(LOAD_LIMIT, state.load_allowed + 10)
    if state.wounds < 0:
        state.events.queue_interrupt("cure", CURE_WAIT)
    return False
