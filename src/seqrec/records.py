"""Sequence record data model.

A record is a block of lines with a fixed layout:
    %<code> <identity> <content>

Example:
    %I A000045 M0692 N0256 #1130 Mar 02 2025 15:21:04
    %S A000045 0,1,1,2,3,5,8,13,21,34,55,89,144,
    %N A000045 Fibonacci numbers: F(n) = F(n-1) + F(n-2) with F(0) = 0 and F(1) = 1.

Field codes:
    I identity (required)          K keywords (required)
    N name (required)              D references
    A author (required)            H links
    O offset (required)            F formulae
    S first line of terms (req.)   Y cross-references
    T second line of terms (req.)  E extensions, errata
    U third line of terms (req.)   e examples
    C comments                     p / t / o Maple / Mathematica / other programs

Besides the field values, a parsed record keeps the bookkeeping needed to
write the exact same text back: the order in which codes appeared, the number
of lines per code, and the number of terms per S/T/U line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from .errors import UnsupportedFieldCodeError
from .keywords import Keyword

MARKER = "%"

# Column layout of every line: "%C A000000 content"
CODE_COLUMN = 1
IDENTITY_COLUMN = 3
IDENTITY_END = 10
CONTENT_COLUMN = 11

TERM_GROUP_CODES = "STU"
REQUIRED_CODES = "INAOSTUK"

ANNOTATION_FIELDS = {
    "D": "references",
    "H": "links",
    "F": "formulae",
    "Y": "cross_references",
    "E": "errata",
    "e": "examples",
    "p": "maple_program",
    "t": "mathematica_program",
    "o": "other_program",
    "C": "comments",
}

# Bytes that are not valid UTF-8 survive a parse/render cycle unchanged.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# Digits per int()/str() step; stays under the interpreter's 4300 digit cap.
_DIGIT_CHUNK = 4000
_CHUNK_BASE = 10 ** _DIGIT_CHUNK

_ALIAS_RE = re.compile(r"^[MN][0-9]{4}$")
_REVISION_RE = re.compile(r"^#([0-9]+)$")
_DIGITS_RE = re.compile(r"[0-9]+")


def decimal_to_int(token: str) -> int:
    """Convert a ``-?[0-9]+`` token of any length to an int."""
    negative = token.startswith("-")
    digits = token[1:] if negative else token
    value = 0
    for i in range(0, len(digits), _DIGIT_CHUNK):
        part = digits[i:i + _DIGIT_CHUNK]
        value = value * 10 ** len(part) + int(part)
    return -value if negative else value


def int_to_decimal(value: int) -> str:
    """Render an int of any size as base-10 text."""
    sign = "-" if value < 0 else ""
    value = abs(value)
    parts: list[str] = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        parts.append(f"{low:0{_DIGIT_CHUNK}d}")
    return sign + str(value) + "".join(reversed(parts))


@dataclass(frozen=True)
class Offset:
    """Subscript of the first term, and position of the first term >= 2 in magnitude."""
    initial_value: int = 0
    first_greater_than_one: int = 0


@dataclass(frozen=True)
class SequenceSummary:
    """What the identity line says about a sequence, plus its name."""
    number: int
    aliases: tuple[str, ...]
    revision: Optional[int]
    modified: str
    name: str


@dataclass
class SequenceRecord:
    identity: str = ""
    identity_plus: str = ""
    name: str = ""
    author: str = ""
    offset: Offset = field(default_factory=Offset)
    terms: list[int] = field(default_factory=list)
    keywords: list[Keyword] = field(default_factory=list)

    references: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    formulae: list[str] = field(default_factory=list)
    cross_references: list[str] = field(default_factory=list)
    errata: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    maple_program: list[str] = field(default_factory=list)
    mathematica_program: list[str] = field(default_factory=list)
    other_program: list[str] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)

    # Written by the parser only; replayed by the renderer.
    field_order: list[str] = field(default_factory=list)
    line_counts: dict[str, int] = field(default_factory=dict)
    group_counts: list[int] = field(default_factory=lambda: [0, 0, 0])

    def string_list_field(self, code: str) -> list[str]:
        """Return the annotation list stored under a field code.

        Raises:
            UnsupportedFieldCodeError: if the code is not an annotation code.
        """
        attr = ANNOTATION_FIELDS.get(code)
        if attr is None:
            raise UnsupportedFieldCodeError(code)
        return getattr(self, attr)

    def terms_string(self) -> str:
        return ",".join(int_to_decimal(t) for t in self.terms)

    def keywords_string(self) -> str:
        return ",".join(str(k) for k in self.keywords)

    def summary(self) -> SequenceSummary:
        """Split the identity line into number, aliases, revision and timestamp.

        A typical identity line reads ``%I A000045 M0692 N0256 #1130 Mar 02 2025 15:21:04``:
        the aliases come first, then the revision, then the modification time.
        """
        number = int(self.identity[1:]) if _DIGITS_RE.fullmatch(self.identity[1:]) else 0
        aliases: list[str] = []
        revision = None
        tokens = self.identity_plus.split()
        rest = 0
        for i, token in enumerate(tokens):
            if _ALIAS_RE.match(token):
                aliases.append(token)
                rest = i + 1
                continue
            m = _REVISION_RE.match(token)
            if m:
                revision = int(m.group(1))
                rest = i + 1
            break
        return SequenceSummary(
            number=number,
            aliases=tuple(aliases),
            revision=revision,
            modified=" ".join(tokens[rest:]),
            name=self.name,
        )
