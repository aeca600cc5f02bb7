"""Render a SequenceRecord back to its text form.

Lines are emitted by replaying ``field_order``: each entry writes every line
stored under that code. For a record produced by the parser this yields the
original text byte for byte.
"""

from __future__ import annotations

from .errors import UnsupportedFieldCodeError
from .records import (
    ANNOTATION_FIELDS,
    ENCODING,
    ENCODING_ERRORS,
    MARKER,
    TERM_GROUP_CODES,
    SequenceRecord,
    int_to_decimal,
)


def _line(code: str, identity: str, content: str) -> str:
    return f"{MARKER}{code} {identity} {content}\n"


def _render_terms(rec: SequenceRecord, code: str) -> str:
    slot = TERM_GROUP_CODES.index(code)
    begin = sum(rec.group_counts[:slot])
    end = begin + rec.group_counts[slot]
    values = [int_to_decimal(v) for v in rec.terms[begin:end]]
    # Every term is followed by a comma except the very last one on the U line.
    if code == TERM_GROUP_CODES[-1]:
        return ",".join(values)
    return "".join(v + "," for v in values)


def render_code(rec: SequenceRecord, code: str) -> str:
    """Render all lines stored under one field code.

    Raises:
        UnsupportedFieldCodeError: if the code has no slot in the record.
    """
    if code == "I":
        if rec.identity_plus:
            return f"{MARKER}I {rec.identity} {rec.identity_plus}\n"
        return f"{MARKER}I {rec.identity}\n"
    if code == "N":
        return _line(code, rec.identity, rec.name)
    if code == "A":
        return _line(code, rec.identity, rec.author)
    if code == "O":
        initial = int_to_decimal(rec.offset.initial_value)
        first = int_to_decimal(rec.offset.first_greater_than_one)
        return _line(code, rec.identity, f"{initial},{first}")
    if code in TERM_GROUP_CODES:
        return _line(code, rec.identity, _render_terms(rec, code))
    if code == "K":
        return _line(code, rec.identity, rec.keywords_string())
    if code in ANNOTATION_FIELDS:
        return "".join(_line(code, rec.identity, v) for v in rec.string_list_field(code))
    raise UnsupportedFieldCodeError(code)


def render_record(rec: SequenceRecord) -> str:
    """Render a record to text, one line per source line."""
    return "".join(render_code(rec, code) for code in rec.field_order)


def marshal(rec: SequenceRecord) -> bytes:
    """Render a record to UTF-8 bytes."""
    return render_record(rec).encode(ENCODING, ENCODING_ERRORS)
