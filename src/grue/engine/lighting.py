"""Light and darkness."""

from typing import TYPE_CHECKING

from .flags import ObjectFlag, RoomFlag

if TYPE_CHECKING:
    from .state import GameState

DARKNESS = "It is pitch black. You are likely to be eaten by a grue."


def _gives_light(state: "GameState", obj_id: str) -> bool:
    obj = state.objects[obj_id]
    if obj.has(ObjectFlag.LIGHT) and obj.has(ObjectFlag.ON):
        return True
    if obj.has(ObjectFlag.CONTAINER) and obj.has(ObjectFlag.OPEN):
        return any(_gives_light(state, inner) for inner in state.contents_of(obj_id))
    return False


def is_lit(state: "GameState", room_id: str | None = None) -> bool:
    """Whether a room is lit, by itself or by a burning light source.

    The player's own light only counts for the room they stand in.
    """
    room_id = room_id or state.current_room
    room = state.rooms[room_id]
    if RoomFlag.LIT in room.flags:
        return True
    candidates = list(room.objects)
    if room_id == state.current_room:
        candidates.extend(state.inventory)
    return any(_gives_light(state, obj_id) for obj_id in candidates)
