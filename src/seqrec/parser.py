"""Parse sequence record text into a SequenceRecord.

All meaningful lines look like ``%{code} {identity} {content}``: a single
character code, the 7 character identity and one line of content. Lines that
do not start with the marker or are too short to carry content are skipped.

Design notes:
- Parsing is strict about the two separator columns (2 and 10).
- The first error stops the parse; nothing is collected.
- ``field_order`` only grows when the code changes from the previous line,
  which is what lets the renderer replay runs of repeated codes.
"""

from __future__ import annotations

import logging
import re

from .errors import FormatError, NumericParseError, OffsetArityError
from .keywords import Keyword, parse_keyword
from .records import (
    ANNOTATION_FIELDS,
    CODE_COLUMN,
    CONTENT_COLUMN,
    ENCODING,
    ENCODING_ERRORS,
    IDENTITY_COLUMN,
    IDENTITY_END,
    MARKER,
    TERM_GROUP_CODES,
    Offset,
    SequenceRecord,
    decimal_to_int,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?[0-9]+")


def _parse_integer(token: str, what: str) -> int:
    # Plain decimal digits with an optional minus sign, nothing else.
    if not _INTEGER_RE.fullmatch(token):
        raise NumericParseError(token, what)
    return decimal_to_int(token)


def _parse_offset(content: str) -> Offset:
    values = content.split(",")
    if len(values) != 2:
        raise OffsetArityError(content)
    return Offset(
        initial_value=_parse_integer(values[0], "initial value"),
        first_greater_than_one=_parse_integer(values[1], "first greater than one"),
    )


def _parse_terms(content: str) -> list[int]:
    return [_parse_integer(v, "sequence value") for v in content.rstrip(",").split(",")]


def _parse_keywords(content: str) -> list[Keyword]:
    return [parse_keyword(v) for v in content.split(",")]


def _is_bare_identity(line: str) -> bool:
    # "%I A000001" carries no content but still names the record.
    return len(line) == IDENTITY_END and line[CODE_COLUMN] == "I"


def parse_line(rec: SequenceRecord, line: str) -> bool:
    """Apply one line to a record.

    Returns False when the line was skipped as noise.

    Raises:
        ParseError: if the line is malformed.
    """
    if not line.startswith(MARKER):
        return False
    if len(line) < CONTENT_COLUMN and not _is_bare_identity(line):
        return False

    if line[2] != " " or (len(line) > IDENTITY_END and line[IDENTITY_END] != " "):
        raise FormatError(line)

    code = line[CODE_COLUMN]
    content = line[CONTENT_COLUMN:]

    if code == "I":
        rec.identity = line[IDENTITY_COLUMN:IDENTITY_END]
        rec.identity_plus = content
    elif code == "N":
        rec.name = content
    elif code == "A":
        rec.author = content
    elif code == "O":
        rec.offset = _parse_offset(content)
    elif code in TERM_GROUP_CODES:
        values = _parse_terms(content)
        rec.terms.extend(values)
        # A repeated group line replaces the count instead of adding to it.
        rec.group_counts[TERM_GROUP_CODES.index(code)] = len(values)
    elif code == "K":
        rec.keywords.extend(_parse_keywords(content))
    elif code in ANNOTATION_FIELDS:
        rec.string_list_field(code).append(content)

    if not rec.field_order or rec.field_order[-1] != code:
        rec.field_order.append(code)
    rec.line_counts[code] = rec.line_counts.get(code, 0) + 1
    return True


def parse_record(text: str) -> SequenceRecord:
    """Parse the text of one record.

    Raises:
        ParseError: on the first malformed line.
    """
    rec = SequenceRecord()
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not parse_line(rec, line) and line:
            logger.debug("skipping line %d: %r", lineno, line)
    logger.debug(
        "parsed %s: %d lines, %d terms",
        rec.identity or "<no identity>",
        sum(rec.line_counts.values()),
        len(rec.terms),
    )
    return rec


def unmarshal(data: bytes) -> SequenceRecord:
    """Parse UTF-8 encoded record bytes.

    Invalid UTF-8 bytes are carried through as surrogates so ``marshal`` can
    write them back unchanged.
    """
    return parse_record(data.decode(ENCODING, ENCODING_ERRORS))
