"""Keyword vocabulary for sequence records.

Every record lists one or more keywords on its ``%K`` line, e.g.::

    %K A000045 nonn,core,nice,easy

The vocabulary is closed. Lookup is case-insensitive and rendering is always
lowercase.
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownTagError


class Keyword(str, Enum):
    BASE = "base"
    BREF = "bref"
    CHANGED = "changed"
    COFR = "cofr"
    CONS = "cons"
    CORE = "core"
    DEAD = "dead"
    DUMB = "dumb"
    DUPE = "dupe"
    EASY = "easy"
    EIGEN = "eigen"
    FINI = "fini"
    FRAC = "frac"
    FULL = "full"
    HARD = "hard"
    HEAR = "hear"
    LOOK = "look"
    LESS = "less"
    MORE = "more"
    MULT = "mult"
    NEW = "new"
    NICE = "nice"
    NONN = "nonn"
    OBSC = "obsc"
    PROBATION = "probation"
    SIGN = "sign"
    TABF = "tabf"
    TABL = "tabl"
    UNED = "uned"
    WALK = "walk"
    WORD = "word"

    def __str__(self) -> str:
        return self.value


KEYWORD_DESCRIPTIONS = {
    Keyword.BASE: "dependent on base used for sequence",
    Keyword.BREF: "sequence is too short to do any analysis with",
    Keyword.CHANGED: "sequence changed in last two weeks",
    Keyword.COFR: "a continued fraction expansion of a number",
    Keyword.CONS: "a decimal expansion of a number",
    Keyword.CORE: "an important sequence",
    Keyword.DEAD: "an erroneous sequence",
    Keyword.DUMB: "an unimportant sequence",
    Keyword.DUPE: "duplicate of another sequence",
    Keyword.EASY: "it is very easy to produce terms of sequence",
    Keyword.EIGEN: "an eigensequence: a fixed sequence for some transformation",
    Keyword.FINI: "a finite sequence",
    Keyword.FRAC: "numerators or denominators of sequence of rationals",
    Keyword.FULL: "the full sequence is given",
    Keyword.HARD: "next term not known, may be hard to find",
    Keyword.HEAR: "worth listening to",
    Keyword.LOOK: "just look at this sequence, interesting graph",
    Keyword.LESS: "reluctantly accepted",
    Keyword.MORE: "more terms are needed",
    Keyword.MULT: "multiplicative: a(mn)=a(m)a(n) if gcd(m,n)=1",
    Keyword.NEW: "added within last two weeks, roughly",
    Keyword.NICE: "an exceptionally nice sequence",
    Keyword.NONN: "a sequence of nonnegative numbers",
    Keyword.OBSC: "obscure, better description needed",
    Keyword.PROBATION: "included on a provisional basis",
    Keyword.SIGN: "sequence contains negative numbers",
    Keyword.TABF: "an irregular array of numbers read by rows",
    Keyword.TABL: "a regular triangle or array of numbers read by rows",
    Keyword.UNED: "not edited, so may contain basic errors",
    Keyword.WALK: "counts walks (or self-avoiding paths)",
    Keyword.WORD: "depends on words for the sequence in some language",
}

_BY_NAME: dict[str, Keyword] = {k.value: k for k in Keyword}


def parse_keyword(token: str) -> Keyword:
    """Resolve a keyword token, ignoring case.

    Raises:
        UnknownTagError: if the token is not a known keyword.
    """
    try:
        return _BY_NAME[token.lower()]
    except KeyError:
        raise UnknownTagError(token) from None


def all_keywords() -> tuple[Keyword, ...]:
    """All keywords in declaration order."""
    return tuple(Keyword)
