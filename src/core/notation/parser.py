"""
Notation parser — raw record fields to a validated Formula

A record carries nine notation columns:

    symmetry, tepals, calyx, petals, anthers, carpels, ovary, fruit, adnation

Each column is a ";"-separated token list, e.g. tepals "3;3" (two whorls of
three), anthers "5;5s" (five stamens and five staminodes), carpels "3;c"
(three fused carpels). "" or "-" means the column is empty.

The first failing token aborts the whole record; the raised
FormulaParseError names the column and the token.
"""

import logging
from contextlib import contextmanager
from dataclasses import astuple, dataclass, fields
from typing import Iterator, Optional, Sequence

from src.core.domain import (
    Adnation,
    FloralPart,
    FloralPartNumber,
    Formula,
    Fruit,
    Ovary,
    Part,
    Sterile,
    Symmetry,
    Whorl,
    build_perianth,
)
from src.core.errors import FormulaParseError, MalformedWhorl, UnknownSymmetry

from .tokens import CONNATE_FLAG, VARIATION_FLAG, strip_whorl_flags

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = ";"
RANGE_SEPARATOR = "-"
EMPTY_FIELDS = ("", "-")


# =============================================================================
# FIELDS
# =============================================================================


@dataclass(frozen=True)
class NotationFields:
    """The nine raw notation columns of one record."""

    symmetry: str
    tepals: str
    calyx: str
    petals: str
    anthers: str
    carpels: str
    ovary: str
    fruit: str
    adnation: str

    @classmethod
    def from_sequence(cls, values: Sequence[str]) -> "NotationFields":
        """Build from the nine columns in record order."""
        expected = len(FIELD_NAMES)
        if len(values) != expected:
            raise ValueError(f"expected {expected} notation fields, got {len(values)}")
        return cls(*values)

    def as_tuple(self) -> tuple[str, ...]:
        return astuple(self)


FIELD_NAMES: tuple[str, ...] = tuple(field.name for field in fields(NotationFields))


@contextmanager
def field_context(name: str) -> Iterator[None]:
    """Attribute any FormulaParseError raised inside to notation column `name`."""
    try:
        yield
    except FormulaParseError as exc:
        if exc.field is None:
            exc.field = name
        raise


def _split(field: str) -> list[str]:
    return field.split(TOKEN_SEPARATOR)


# =============================================================================
# FIELD PARSERS
# =============================================================================


def parse_symmetry_field(field: str) -> tuple[Symmetry, ...]:
    """
    Parse the symmetry column ("r", "up;down", ...).

    Raises:
        UnknownSymmetry: a token is unrecognised or the column is empty
    """
    if field == "":
        raise UnknownSymmetry(field, detail="at least one symmetry is required")
    return tuple(Symmetry.parse(token) for token in _split(field))


def parse_whorl_token(token: str) -> Whorl:
    """
    Parse one whorl token: a count ("5", "inf", "0.5") or a range ("2-4"),
    with optional s/c/v flag letters anywhere in it.

    Raises:
        MalformedWhorl: range without exactly two sides, or v without c
        InvalidNumber: a side is not a number
    """
    cleaned, flags = strip_whorl_flags(token)
    if flags.connation_variation and not flags.connation:
        raise MalformedWhorl(token, detail="connation variation without connation")

    attributes = dict(
        sterile=Sterile.STERILE if flags.sterile else Sterile.FERTILE,
        connation=flags.connation,
        connation_variation=flags.connation_variation,
    )

    if RANGE_SEPARATOR in cleaned:
        sides = cleaned.split(RANGE_SEPARATOR)
        if len(sides) != 2:
            raise MalformedWhorl(token, detail="a range has exactly two sides")
        minimum = FloralPartNumber.parse(sides[0])
        maximum = FloralPartNumber.parse(sides[1])
        return Whorl.of_range(minimum, maximum, **attributes)

    return Whorl.of_count(FloralPartNumber.parse(cleaned), **attributes)


def parse_floral_part_field(
    field: str, part: Part, ovary: Optional[Ovary] = None
) -> Optional[FloralPart]:
    """
    Parse the column of one organ category.

    A bare "c" token fuses the whole part, a bare "v" marks that fusion as
    variable; every other token is a whorl.

    Args:
        field: raw column text
        part: organ category of the column
        ovary: ovary position, attached verbatim (carpels only)

    Returns:
        None for an empty column, otherwise the FloralPart

    Raises:
        MalformedWhorl: no whorls, or v without c
        FormulaParseError: from any whorl token
    """
    if field in EMPTY_FIELDS:
        return None

    connate = False
    connation_variation = False
    whorls: list[Whorl] = []

    for token in _split(field):
        if RANGE_SEPARATOR in token:
            whorls.append(parse_whorl_token(token))
        elif token == CONNATE_FLAG:
            connate = True
        elif token == VARIATION_FLAG:
            connation_variation = True
        else:
            whorls.append(parse_whorl_token(token))

    if not whorls:
        raise MalformedWhorl(field, detail="no whorl counts given")
    if connation_variation and not connate:
        raise MalformedWhorl(field, detail="connation variation without connation")

    return FloralPart(
        part=part,
        connate=connate,
        connation_variation=connation_variation,
        whorls=tuple(whorls),
        ovary=ovary,
    )


def parse_adnation_field(field: str) -> Adnation:
    """
    Parse the adnation column ("T;A;G", "C;A;v", "-").

    Raises:
        UnknownPart: a token is neither "v" nor a part letter
    """
    if field in EMPTY_FIELDS:
        return Adnation()

    variation = False
    parts: list[Part] = []
    for token in _split(field):
        if token == VARIATION_FLAG:
            variation = True
        else:
            parts.append(Part.parse(token))
    return Adnation(variation=variation, parts=tuple(parts) or None)


def parse_fruit_field(field: str) -> tuple[Fruit, ...]:
    """
    Parse the fruit column; order and duplicates are preserved.

    Raises:
        UnknownFruit: a token is not in the vocabulary
    """
    return tuple(Fruit.parse(token) for token in _split(field))


# =============================================================================
# RECORD PARSER
# =============================================================================


def parse_formula(
    symmetry: str,
    tepals: str,
    calyx: str,
    petals: str,
    anthers: str,
    carpels: str,
    ovary: str,
    fruit: str,
    adnation: str,
) -> Formula:
    """
    Parse the nine notation columns of one record.

    Returns:
        Validated Formula

    Raises:
        FormulaParseError: the first failing column; err.field names it
    """
    with field_context("symmetry"):
        parsed_symmetry = parse_symmetry_field(symmetry)
    with field_context("ovary"):
        parsed_ovary = Ovary.parse_field(ovary)
    with field_context("tepals"):
        parsed_tepals = parse_floral_part_field(tepals, Part.TEPALS)
    with field_context("calyx"):
        parsed_calyx = parse_floral_part_field(calyx, Part.CALYX)
    with field_context("petals"):
        parsed_petals = parse_floral_part_field(petals, Part.PETALS)
    with field_context("anthers"):
        parsed_stamens = parse_floral_part_field(anthers, Part.STAMENS)
    with field_context("carpels"):
        parsed_carpels = parse_floral_part_field(carpels, Part.CARPELS, parsed_ovary)
    with field_context("perianth"):
        perianth = build_perianth(parsed_tepals, parsed_calyx, parsed_petals)
    with field_context("fruit"):
        parsed_fruit = parse_fruit_field(fruit)
    with field_context("adnation"):
        parsed_adnation = parse_adnation_field(adnation)

    formula = Formula(
        symmetry=parsed_symmetry,
        perianth=perianth,
        stamens=parsed_stamens,
        carpels=parsed_carpels,
        fruit=parsed_fruit,
        adnation=parsed_adnation,
    )
    logger.debug("parsed formula %s", formula.render().primary)
    return formula


def parse_fields(notation: NotationFields) -> Formula:
    """parse_formula() for a NotationFields value."""
    return parse_formula(*notation.as_tuple())
