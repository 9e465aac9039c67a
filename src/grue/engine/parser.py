"""Turn classified tokens into a command against reachable objects.

The parser never raises. Every rejected sentence comes back as a ParseError
whose message is shown to the player as is. Two failures are deliberately
kept apart: a word the game has never heard of is an UNKNOWN_WORD, while a
known noun with nothing matching it nearby is NOT_FOUND.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from .lexer import Token
from .state import SELF_ID, GameObject
from .vocabulary import PHRASAL_VERBS, SELF_WORDS, Vocabulary, WordType

MAX_WORDS = 20
MAX_REPEATS = 3
_BAD_CHARACTERS = re.compile(r"[@#$%^&*()+=\[\]{}|\\<>~`]")

PARDON = "I beg your pardon?"
NOT_UNDERSTOOD = "I don't understand that sentence."
NOT_RECOGNIZED = "That sentence isn't one I recognize."

# Verbs that cannot run without a direct object
OBJECT_VERBS = frozenset(
    {
        "take", "drop", "put", "give", "throw", "examine", "open", "close",
        "read", "light", "extinguish", "turn", "eat", "drink", "attack",
        "wave", "touch",
    }
)
# Verbs that also need the second slot filled
INDIRECT_PROMPTS = {
    "put": "Where do you want to put it?",
    "give": "To whom do you want to give it?",
}
FREE_TEXT_VERBS = frozenset({"say", "echo"})
QUANTIFIERS = frozenset({"all", "everything"})
REFERENT_PRONOUNS = frozenset({"it", "them"})
# Verbs that take a direction as their argument
MOTION_VERBS = frozenset({"go", "climb", "enter"})


@dataclass(frozen=True)
class ObjectRef:
    object_id: str
    name: str


@dataclass(frozen=True)
class ParsedCommand:
    verb: str
    direct: ObjectRef | None = None
    indirect: ObjectRef | None = None
    preposition: str | None = None
    is_all: bool = False
    raw_input: str = ""


class ParseErrorKind(StrEnum):
    EMPTY_INPUT = "empty_input"
    UNKNOWN_WORD = "unknown_word"
    MISSING_NOUN = "missing_noun"
    AMBIGUOUS = "ambiguous"
    MALFORMED = "malformed"
    NOT_FOUND = "not_found"
    NO_REFERENT = "no_referent"


@dataclass(frozen=True)
class ParseError:
    kind: ParseErrorKind
    message: str
    word: str | None = None


ParseResult = ParsedCommand | ParseError


class Parser:
    """Sentence parser bound to one world's vocabulary."""

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary

    def parse(
        self,
        tokens: Sequence[Token],
        reachable: Sequence[GameObject],
        raw_input: str = "",
        referent: str | None = None,
    ) -> ParseResult:
        words = [self.vocabulary.expand_abbreviation(t.word) for t in tokens]

        rejected = self._check_shape(words, raw_input)
        if rejected is not None:
            return rejected

        first = self.vocabulary.canonical_verb(words[0])
        if first in FREE_TEXT_VERBS:
            return ParsedCommand(first, raw_input=raw_input or " ".join(words))

        for word in words:
            if self.vocabulary.lookup_word(word) is WordType.UNKNOWN:
                return ParseError(
                    ParseErrorKind.UNKNOWN_WORD,
                    f'I don\'t know the word "{word}".',
                    word,
                )

        types = [self.vocabulary.lookup_word(w) for w in words]
        if types[0] not in (WordType.VERB, WordType.DIRECTION):
            return ParseError(ParseErrorKind.MALFORMED, NOT_UNDERSTOOD)

        verb = self.vocabulary.canonical_verb(words[0])
        rest = words[1:]
        verb, rest = _merge_phrasal(verb, rest)

        if Vocabulary.is_direction(verb):
            if rest:
                return ParseError(ParseErrorKind.MALFORMED, NOT_RECOGNIZED)
            return ParsedCommand(verb, raw_input=raw_input)

        if verb in MOTION_VERBS and rest:
            direction = self.vocabulary.canonical_verb(rest[0])
            if Vocabulary.is_direction(direction):
                return ParsedCommand(direction, raw_input=raw_input)
        if verb == "go":
            return ParseError(ParseErrorKind.MISSING_NOUN, "Where do you want to go?")

        rest = [w for w in rest if self.vocabulary.lookup_word(w) is not WordType.ARTICLE]
        direct_words, preposition, indirect_words = self._split(rest)
        if preposition and not direct_words and not indirect_words:
            return ParseError(ParseErrorKind.MALFORMED, NOT_RECOGNIZED)

        is_all = False
        direct = indirect = None
        if direct_words and direct_words[0] in QUANTIFIERS:
            if len(direct_words) > 1:
                return ParseError(ParseErrorKind.MALFORMED, NOT_RECOGNIZED)
            is_all = True
        elif direct_words:
            direct = self._resolve(direct_words, reachable, referent)
            if isinstance(direct, ParseError):
                return direct
        if indirect_words:
            indirect = self._resolve(indirect_words, reachable, referent)
            if isinstance(indirect, ParseError):
                return indirect

        if verb in OBJECT_VERBS and not (direct or indirect or is_all):
            return ParseError(
                ParseErrorKind.MISSING_NOUN, f"What do you want to {verb}?"
            )
        if verb in INDIRECT_PROMPTS and direct and not indirect:
            return ParseError(ParseErrorKind.MISSING_NOUN, INDIRECT_PROMPTS[verb])

        return ParsedCommand(
            verb,
            direct=direct,
            indirect=indirect,
            preposition=preposition,
            is_all=is_all,
            raw_input=raw_input,
        )

    def _check_shape(self, words: list[str], raw_input: str) -> ParseError | None:
        """Reject input whose form alone rules it out."""
        if not words:
            return ParseError(ParseErrorKind.EMPTY_INPUT, PARDON)
        if len(words) > MAX_WORDS:
            return ParseError(ParseErrorKind.MALFORMED, NOT_UNDERSTOOD)
        run = 1
        for previous, word in zip(words, words[1:]):
            run = run + 1 if word == previous else 1
            if run > MAX_REPEATS:
                return ParseError(ParseErrorKind.MALFORMED, NOT_UNDERSTOOD)
        if all(w.isdigit() for w in words):
            return ParseError(ParseErrorKind.MALFORMED, NOT_UNDERSTOOD)
        if _BAD_CHARACTERS.search(raw_input or " ".join(words)):
            return ParseError(ParseErrorKind.MALFORMED, NOT_UNDERSTOOD)
        return None

    def _split(self, words: list[str]) -> tuple[list[str], str | None, list[str]]:
        """Cut a phrase at its first preposition."""
        for i, word in enumerate(words):
            if self.vocabulary.lookup_word(word) is WordType.PREPOSITION:
                return words[:i], word, words[i + 1 :]
        return words, None, []

    def _resolve(
        self,
        words: list[str],
        reachable: Sequence[GameObject],
        referent: str | None,
    ) -> ObjectRef | ParseError:
        if len(words) == 1 and words[0] in SELF_WORDS:
            return ObjectRef(SELF_ID, words[0])

        if len(words) == 1 and words[0] in REFERENT_PRONOUNS:
            if referent is None:
                return ParseError(
                    ParseErrorKind.NO_REFERENT,
                    "I don't know what you're referring to.",
                    words[0],
                )
            for obj in reachable:
                if obj.id == referent:
                    return ObjectRef(obj.id, obj.name)
            return ParseError(
                ParseErrorKind.NOT_FOUND, "You can't see any such thing here!", words[0]
            )

        phrase = " ".join(words)
        candidates = [obj for obj in reachable if _matches(obj, words)]
        if not candidates:
            return ParseError(
                ParseErrorKind.NOT_FOUND, f"You can't see any {phrase} here!", phrase
            )
        if len(candidates) > 1:
            exact = [o for o in candidates if o.name == phrase]
            if len(exact) == 1:
                candidates = exact
        if len(candidates) == 1:
            return ObjectRef(candidates[0].id, candidates[0].name)
        return ParseError(
            ParseErrorKind.AMBIGUOUS, _which(words[-1], candidates), phrase
        )


def _merge_phrasal(verb: str, rest: list[str]) -> tuple[str, list[str]]:
    for (head, particle), merged in PHRASAL_VERBS.items():
        if verb == head and particle in rest:
            remaining = list(rest)
            remaining.remove(particle)
            return merged, remaining
    return verb, rest


def _matches(obj: GameObject, words: list[str]) -> bool:
    """Whether a noun phrase names this object.

    Either the whole phrase is the object's name or a synonym, or its last
    word is a noun for the object and every earlier word describes it.
    """
    phrase = " ".join(words)
    name_words = obj.name.split()
    if phrase == obj.name or phrase in obj.synonyms:
        return True
    noun = words[-1]
    if noun not in obj.synonyms and noun != name_words[-1]:
        return False
    return all(w in obj.adjectives or w in name_words for w in words[:-1])


def _distinguishing(obj: GameObject, others: Sequence[GameObject]) -> str:
    for adjective in obj.adjectives:
        if not any(adjective in other.adjectives for other in others):
            return f"the {adjective} one"
    return f"the {obj.name}"


def _which(noun: str, candidates: Sequence[GameObject]) -> str:
    if len(candidates) != 2:
        return f"Which {noun} do you mean?"
    a, b = candidates
    return (
        f"Which {noun} do you mean, {_distinguishing(a, [b])} "
        f"or {_distinguishing(b, [a])}?"
    )
