"""
Day 4 — Passport Processing.

Records are separated by blank lines; each holds ``key:value`` fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import IO

from puzzles.core.errors import InvalidInput
from puzzles.core.reader import U16_MAX, parse_uint, read_text, split_blocks


class Field(str, Enum):
    BIRTH_YEAR = "byr"
    ISSUE_YEAR = "iyr"
    EXPIRATION_YEAR = "eyr"
    HEIGHT = "hgt"
    HAIR_COLOR = "hcl"
    EYE_COLOR = "ecl"
    PASSPORT_ID = "pid"
    COUNTRY_ID = "cid"


YEAR_FIELDS = {Field.BIRTH_YEAR, Field.ISSUE_YEAR, Field.EXPIRATION_YEAR}

FIELD_RES: dict[Field, re.Pattern[str]] = {
    field: re.compile(rf"{field.value}:(\d+)" if field in YEAR_FIELDS else rf"{field.value}:(\S+)")
    for field in Field
}

# Validation patterns for part 2
HEIGHT_PARSER = re.compile(r"^(?P<value>\d+)(?P<unit>in|cm)$")
HAIR_COLOR_PARSER = re.compile(r"^#[0-9a-f]{6}$")
EYE_COLOR_PARSER = re.compile(r"^(amb|blu|brn|gry|grn|hzl|oth)$")
PASSPORT_ID_PARSER = re.compile(r"^[0-9]{9}$")

YEAR_RANGES = {
    Field.BIRTH_YEAR: (1920, 2002),
    Field.ISSUE_YEAR: (2010, 2020),
    Field.EXPIRATION_YEAR: (2020, 2030),
}
HEIGHT_RANGES = {"cm": (150, 193), "in": (59, 76)}


def is_valid_value(field: Field, value: str | int) -> bool:
    """Part-2 rule for a single field."""
    if field in YEAR_RANGES:
        low, high = YEAR_RANGES[field]
        return low <= int(value) <= high
    if field is Field.HEIGHT:
        caps = HEIGHT_PARSER.match(str(value))
        if caps is None:
            return False
        low, high = HEIGHT_RANGES[caps["unit"]]
        return low <= int(caps["value"]) <= high
    if field is Field.HAIR_COLOR:
        return HAIR_COLOR_PARSER.match(str(value)) is not None
    if field is Field.EYE_COLOR:
        return EYE_COLOR_PARSER.match(str(value)) is not None
    if field is Field.PASSPORT_ID:
        return PASSPORT_ID_PARSER.match(str(value)) is not None
    return True


@dataclass(frozen=True)
class Passport:
    fields: dict[Field, str | int]

    @classmethod
    def parse(cls, text: str) -> "Passport":
        fields: dict[Field, str | int] = {}
        for field, pattern in FIELD_RES.items():
            matches = pattern.findall(text)
            if not matches:
                continue
            if len(matches) > 1:
                raise InvalidInput(f"too many matches of field {field.value!r}")
            value = matches[0]
            fields[field] = parse_uint(value, U16_MAX) if field in YEAR_FIELDS else value
        return cls(fields)

    def is_valid(self) -> bool:
        """All eight fields present, or only ``cid`` missing."""
        missing = set(Field) - self.fields.keys()
        return not missing or missing == {Field.COUNTRY_ID}

    def is_valid_strict(self) -> bool:
        return self.is_valid() and all(
            is_valid_value(field, value) for field, value in self.fields.items()
        )


def get_passports(stream: IO[bytes]) -> list[Passport]:
    return [Passport.parse(block) for block in split_blocks(read_text(stream))]


def part_1(stream: IO[bytes]) -> int:
    return sum(1 for passport in get_passports(stream) if passport.is_valid())


def part_2(stream: IO[bytes]) -> int:
    return sum(1 for passport in get_passports(stream) if passport.is_valid_strict())
