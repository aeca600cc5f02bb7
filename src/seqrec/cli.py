"""Command-line interface for seqrec.

Intentionally simple:
- reads one record from stdin or a file
- parses it, optionally validates it
- writes the re-rendered record (or a part of it) to stdout

Exit codes: 0 on success, 1 when validation or the round-trip check fails,
2 when the input cannot be read or parsed.
"""

from __future__ import annotations
import argparse
import logging
import sys

from .errors import SeqError, ValidationError
from .keywords import KEYWORD_DESCRIPTIONS, all_keywords
from .parser import unmarshal
from .render import marshal
from .validation import validate

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger("seqrec")


def _read_bytes(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as fh:
        return fh.read()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="seqrec", description="Parse and re-render sequence records.")
    p.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    p.add_argument("--validate", action="store_true", help="Check required fields and identity")
    p.add_argument("--check-roundtrip", action="store_true",
                   help="Fail if the rendered record differs from the input")
    out = p.add_mutually_exclusive_group()
    out.add_argument("--terms", action="store_true", help="Print only the comma-separated terms")
    out.add_argument("--keywords", action="store_true", help="Print only the keywords")
    out.add_argument("--summary", action="store_true", help="Print id, aliases, revision and name")
    p.add_argument("--list-keywords", action="store_true",
                   help="Print the keyword vocabulary with descriptions and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    if args.list_keywords:
        for keyword in all_keywords():
            sys.stdout.write(f"{keyword.value}\t{KEYWORD_DESCRIPTIONS[keyword]}\n")
        return 0

    try:
        data = _read_bytes(args.path)
        rec = unmarshal(data)
        rendered = marshal(rec)
    except (OSError, SeqError) as ex:
        sys.stderr.write(f"error: {ex}\n")
        return 2

    status = 0
    if args.validate:
        try:
            validate(rec)
        except ValidationError as ex:
            sys.stderr.write(f"invalid: {ex}\n")
            status = 1
    if args.check_roundtrip and rendered != data:
        sys.stderr.write("round trip mismatch\n")
        status = 1

    if args.terms:
        sys.stdout.write(rec.terms_string() + "\n")
    elif args.keywords:
        sys.stdout.write(rec.keywords_string() + "\n")
    elif args.summary:
        s = rec.summary()
        revision = "" if s.revision is None else s.revision
        sys.stdout.write(f"{rec.identity}\t{' '.join(s.aliases)}\t{revision}\t{s.name}\n")
    else:
        # Raw bytes, so input that is not valid UTF-8 comes back unchanged.
        sys.stdout.flush()
        sys.stdout.buffer.write(rendered)

    logger.debug("%s: status %d", rec.identity, status)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
