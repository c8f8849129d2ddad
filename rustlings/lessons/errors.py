"""Error handling: validation, parsing and errors that wrap other errors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_U32_MAX = 2**32 - 1

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse an integer strictly within [low, high]; raise ValueError otherwise."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    pattern = _SIGNED if low < 0 else _UNSIGNED
    if not pattern.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def _parse_float(text: str) -> float:
    """Parse a decimal float literal strictly; raise ValueError otherwise."""
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT.fullmatch(text):
        raise ValueError("invalid float literal")
    return float(text)


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity of items, fee included."""
    quantity = _parse_int(item_quantity, _I32_MIN, _I32_MAX)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


def remaining_tokens(tokens: int, item_quantity: str) -> int:
    """Tokens left after buying the typed quantity; refuse a purchase that is too dear."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """Why a PositiveNonzeroInteger could not be made."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)
        if self.value > _I64_MAX:
            raise OverflowError("value does not fit in a 64-bit signed integer")


class ParsePosNonzeroError(ValueError):
    """Parsing text into a PositiveNonzeroInteger failed."""

    class Kind(enum.Enum):
        CREATION = "creation"
        PARSE_INT = "parse_int"

    def __init__(self, kind: ParsePosNonzeroError.Kind, source: Exception) -> None:
        super().__init__(str(source))
        self.kind = kind
        self.source = source


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(s, _I64_MIN, _I64_MAX)
    except ValueError as error:
        raise ParsePosNonzeroError(ParsePosNonzeroError.Kind.PARSE_INT, error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError(ParsePosNonzeroError.Kind.CREATION, error) from error


class ParseClimateError(ValueError):
    """Why a text could not be parsed into a Climate."""

    class Kind(enum.Enum):
        EMPTY = "empty input"
        BAD_LEN = "incorrect number of fields"
        NO_CITY = "no city name"
        PARSE_INT = "error parsing year"
        PARSE_FLOAT = "error parsing temperature"

    def __init__(
        self, kind: ParseClimateError.Kind, source: Exception | None = None
    ) -> None:
        message = kind.value if source is None else f"{kind.value}: {source}"
        super().__init__(message)
        self.kind = kind
        self.source = source


@dataclass(frozen=True)
class Climate:
    """A city's temperature in a given year."""

    city: str
    year: int
    temp: float

    @classmethod
    def parse(cls, s: str) -> Climate:
        """Parse 'city,year,temp'; raise ParseClimateError when it does not fit."""
        if not s:
            raise ParseClimateError(ParseClimateError.Kind.EMPTY)
        fields = s.split(",")
        if len(fields) != 3:
            raise ParseClimateError(ParseClimateError.Kind.BAD_LEN)
        city, year_text, temp_text = fields
        if not city:
            raise ParseClimateError(ParseClimateError.Kind.NO_CITY)
        try:
            year = _parse_int(year_text, 0, _U32_MAX)
        except ValueError as error:
            raise ParseClimateError(ParseClimateError.Kind.PARSE_INT, error) from error
        try:
            temp = _parse_float(temp_text)
        except ValueError as error:
            raise ParseClimateError(ParseClimateError.Kind.PARSE_FLOAT, error) from error
        return cls(city=city, year=year, temp=temp)