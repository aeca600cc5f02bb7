"""Record validation.

A check inspects a SequenceRecord and raises a ValidationError if the record
breaks one rule. ``validate`` runs the checks in order and stops at the first
failure.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable

from .errors import InvalidIdentityError, MissingContentError, MissingFieldError
from .records import REQUIRED_CODES, SequenceRecord


Check = Callable[[SequenceRecord], None]

_IDENTITY_RE = re.compile(r"A[0-9]{6}")


def check_required_fields(rec: SequenceRecord) -> None:
    """Every required code must have been seen, including all of S, T and U."""
    for code in REQUIRED_CODES:
        if code not in rec.field_order:
            raise MissingFieldError(code)


def check_identity(rec: SequenceRecord) -> None:
    if not _IDENTITY_RE.fullmatch(rec.identity):
        raise InvalidIdentityError(rec.identity)


def check_name(rec: SequenceRecord) -> None:
    # Any textual description will do, but it must be there.
    if rec.name == "":
        raise MissingContentError("name")


def check_author(rec: SequenceRecord) -> None:
    if rec.author == "":
        raise MissingContentError("author")


CHECKS: tuple[Check, ...] = (
    check_required_fields,
    check_identity,
    check_name,
    check_author,
)


def validate(rec: SequenceRecord, checks: Iterable[Check] = CHECKS) -> None:
    """Run checks in order.

    Raises:
        ValidationError: from the first failing check.
    """
    for check in checks:
        check(rec)
