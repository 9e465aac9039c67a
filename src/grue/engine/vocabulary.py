"""Word tables and word classification.

Verbs, directions and function words are fixed; nouns and adjectives come
from the object definitions of the loaded world.
"""

from collections.abc import Iterable
from enum import StrEnum

from .world import ObjectDef


class WordType(StrEnum):
    VERB = "verb"
    NOUN = "noun"
    DIRECTION = "direction"
    ADJECTIVE = "adjective"
    PREPOSITION = "preposition"
    ARTICLE = "article"
    PRONOUN = "pronoun"
    UNKNOWN = "unknown"


ABBREVIATIONS = {
    "n": "north",
    "s": "south",
    "e": "east",
    "w": "west",
    "u": "up",
    "d": "down",
    "ne": "northeast",
    "nw": "northwest",
    "se": "southeast",
    "sw": "southwest",
    "i": "inventory",
    "x": "examine",
    "l": "look",
    "z": "wait",
    "q": "quit",
    "y": "yes",
    "g": "again",
}

# canonical verb -> accepted spellings
VERBS: dict[str, tuple[str, ...]] = {
    "take": ("take", "get", "grab", "carry", "hold"),
    "drop": ("drop", "discard", "release"),
    "put": ("put", "insert", "place", "stuff"),
    "give": ("give", "offer", "hand", "feed"),
    "throw": ("throw", "toss", "hurl"),
    "examine": ("examine", "inspect", "describe"),
    "look": ("look", "stare", "gaze"),
    "inventory": ("inventory",),
    "open": ("open",),
    "close": ("close", "shut"),
    "read": ("read", "skim"),
    "light": ("light", "ignite"),
    "extinguish": ("extinguish", "douse", "unlight"),
    "turn": ("turn", "switch", "flip"),
    "attack": ("attack", "kill", "fight", "hit", "slay", "stab", "strike", "murder"),
    "eat": ("eat", "consume", "devour"),
    "drink": ("drink", "sip", "quaff"),
    "wait": ("wait",),
    "score": ("score",),
    "version": ("version",),
    "diagnose": ("diagnose",),
    "verbose": ("verbose",),
    "brief": ("brief",),
    "superbrief": ("superbrief",),
    "pray": ("pray",),
    "yell": ("yell", "scream", "shout"),
    "jump": ("jump", "leap"),
    "hello": ("hello", "hi"),
    "say": ("say",),
    "echo": ("echo",),
    "tell": ("tell", "talk", "ask"),
    "listen": ("listen", "hear"),
    "smell": ("smell", "sniff"),
    "touch": ("touch", "feel", "rub", "pat"),
    "wave": ("wave", "brandish"),
    "climb": ("climb", "scale"),
    "enter": ("enter",),
    "go": ("go", "walk", "run", "travel", "proceed"),
    "wake": ("wake", "awaken", "rouse"),
    "yes": ("yes",),
    "no": ("no",),
    "again": ("again",),
    "oops": ("oops",),
    "save": ("save",),
    "restore": ("restore",),
    "quit": ("quit",),
    "restart": ("restart",),
    "dig": ("dig",),
    "swim": ("swim", "wade"),
    "make": ("make", "build"),
}

DIRECTIONS: dict[str, tuple[str, ...]] = {
    "north": ("north",),
    "south": ("south",),
    "east": ("east",),
    "west": ("west",),
    "northeast": ("northeast",),
    "northwest": ("northwest",),
    "southeast": ("southeast",),
    "southwest": ("southwest",),
    "up": ("up", "upward", "upstairs"),
    "down": ("down", "downward", "downstairs"),
    "out": ("out", "exit", "leave", "outside"),
}

PREPOSITIONS = frozenset(
    ("with", "in", "into", "inside", "on", "onto", "under", "at", "to", "from", "off")
)
ARTICLES = frozenset(("the", "a", "an"))
PRONOUNS = frozenset(("it", "them", "all", "everything"))
SELF_WORDS = frozenset(("me", "myself", "self", "cretin"))

# verb + particle -> single verb, merged before phrase parsing
PHRASAL_VERBS = {
    ("put", "down"): "drop",
    ("look", "at"): "examine",
    ("pick", "up"): "take",
}


def _invert(table: dict[str, tuple[str, ...]]) -> dict[str, str]:
    return {spelling: canon for canon, spellings in table.items() for spelling in spellings}


_VERB_LOOKUP = _invert(VERBS) | {"pick": "pick"}
_DIRECTION_LOOKUP = _invert(DIRECTIONS)


class Vocabulary:
    """Classifies words against the fixed tables plus the world's nouns."""

    def __init__(self, nouns: Iterable[str] = (), adjectives: Iterable[str] = ()):
        self.nouns = frozenset(nouns)
        self.adjectives = frozenset(adjectives)

    @classmethod
    def from_objects(cls, objects: Iterable[ObjectDef]) -> "Vocabulary":
        nouns: set[str] = set()
        adjectives: set[str] = set()
        for obj in objects:
            nouns.update(obj.synonyms)
            nouns.add(obj.name.split()[-1])
            adjectives.update(obj.adjectives)
        return cls(nouns, adjectives)

    def expand_abbreviation(self, word: str) -> str:
        """Return the canonical long form of an abbreviation, or the word."""
        return ABBREVIATIONS.get(word.lower(), word.lower())

    def lookup_word(self, word: str) -> WordType:
        word = self.expand_abbreviation(word)
        if word in ARTICLES:
            return WordType.ARTICLE
        if word in PRONOUNS or word in SELF_WORDS:
            return WordType.PRONOUN
        if word in PREPOSITIONS:
            return WordType.PREPOSITION
        if word in _DIRECTION_LOOKUP:
            return WordType.DIRECTION
        if word in _VERB_LOOKUP:
            return WordType.VERB
        if word in self.nouns:
            return WordType.NOUN
        if word in self.adjectives:
            return WordType.ADJECTIVE
        return WordType.UNKNOWN

    def canonical_verb(self, word: str) -> str:
        """Map a verb or direction spelling onto its canonical form."""
        word = self.expand_abbreviation(word)
        return _DIRECTION_LOOKUP.get(word) or _VERB_LOOKUP.get(word, word)

    @staticmethod
    def is_direction(verb: str) -> bool:
        return verb in DIRECTIONS
