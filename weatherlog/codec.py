"""
Record codec.

A record is stored as a single line of `field=value` pairs joined by '|':

    day=Mon|condition=sunny|high=21|low=12

Encoding always writes the four FIELDS in order. Decoding is lenient and
returns whatever keys the line carries; strictness lives in parse_items,
which guards everything that enters the store through the CLI.
"""
from typing import Iterable

from weatherlog.errors import InvalidItem, InvalidValue, MalformedSegment, UnknownField
from weatherlog.models import FIELDS, SEPARATOR, Record


def encode_record(record: Record) -> str:
    """Render a record as one line; extra keys are dropped, missing ones written empty."""
    return SEPARATOR.join(f"{f}={record.get(f, '')}" for f in FIELDS)


def decode_line(line: str) -> Record:
    """
    Parse one stored line back into a record.

    Only the line terminator is removed; values keep their whitespace.
    Empty segments (leading/trailing '|') are skipped.
    Raises MalformedSegment for a segment without '='.
    """
    values: Record = {}
    raw = line.rstrip("\r\n")
    for part in raw.split(SEPARATOR):
        if not part:
            continue
        key, sep, value = part.partition("=")
        if not sep:
            raise MalformedSegment(f"bad part: {part!r} in line {raw!r}")
        values[key] = value
    return values


def parse_items(items: Iterable[str]) -> Record:
    """
    Build a record from `key=value` command-line tokens.

    Every field of FIELDS is present in the result; unset ones are "".
    """
    record: Record = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep:
            raise InvalidItem(f"invalid item: {item}")
        if key not in FIELDS:
            raise UnknownField(f"unknown field: {key}")
        if SEPARATOR in value:
            raise InvalidValue(f"value may not contain '{SEPARATOR}': {item}")
        if "\n" in value or "\r" in value:
            raise InvalidValue(f"value may not contain a line break: {item!r}")
        record[key] = value
    for f in FIELDS:
        record.setdefault(f, "")
    return record
