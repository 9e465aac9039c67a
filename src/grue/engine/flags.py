"""Closed flag sets for objects, rooms and global game conditions.

Values match the lowercase names used in world.json.
"""

from enum import StrEnum


class ObjectFlag(StrEnum):
    TAKE = "take"
    CONTAINER = "container"
    OPEN = "open"
    ON = "on"
    LIGHT = "light"
    ACTOR = "actor"
    WEAPON = "weapon"
    NDESC = "ndesc"  # present but not listed in room descriptions
    FIGHT = "fight"
    INVISIBLE = "invisible"
    STAGGERED = "staggered"
    TOUCHED = "touched"
    SACRED = "sacred"  # the thief leaves it alone
    READ = "read"
    DOOR = "door"
    BURNED_OUT = "burned_out"
    FOOD = "food"
    DRINK = "drink"
    TOOL = "tool"


class RoomFlag(StrEnum):
    LIT = "lit"
    LAND = "land"
    SACRED = "sacred"
    TOUCHED = "touched"
    FOREST = "forest"


class GameFlag(StrEnum):
    TROLL_FLAG = "troll_flag"  # troll no longer blocks the passages
    CYCLOPS_FLAG = "cyclops_flag"  # cyclops asleep, stairs open


class Verbosity(StrEnum):
    VERBOSE = "verbose"
    BRIEF = "brief"
    SUPERBRIEF = "superbrief"
