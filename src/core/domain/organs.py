"""
Organs — floral part categories, sterility and ovary position

Part doubles as the element type of Adnation. Its declaration order is the
canonical organ order (outside in): tepals, calyx, petals, stamens, carpels.
"""

from enum import Enum
from typing import Dict, Final, Iterable, Optional

from src.core.errors import UnknownOvary, UnknownPart


# =============================================================================
# PART
# =============================================================================


class Part(str, Enum):
    """Organ category; values are the notation letters"""

    TEPALS = "T"
    CALYX = "K"
    PETALS = "C"
    STAMENS = "A"
    CARPELS = "G"

    @classmethod
    def parse(cls, token: str) -> "Part":
        """
        Parse a part letter (T, K, C, A, G).

        Raises:
            UnknownPart: unrecognised token
        """
        try:
            return cls(token)
        except ValueError:
            raise UnknownPart(token) from None

    @property
    def order(self) -> int:
        """Position in canonical organ order"""
        return _PART_ORDER[self]

    @property
    def letter(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_PART_ORDER: Final[Dict[Part, int]] = {part: index for index, part in enumerate(Part)}


def canonical_order(parts: Iterable[Part]) -> tuple[Part, ...]:
    """Deduplicate parts and sort them in canonical organ order."""
    return tuple(sorted(set(parts), key=lambda part: part.order))


# =============================================================================
# STERILITY
# =============================================================================


class Sterile(str, Enum):
    """Sterility of a whorl"""

    FERTILE = "fertile"
    STERILE = "sterile"

    @property
    def glyph(self) -> str:
        return "•" if self is Sterile.STERILE else ""

    def __str__(self) -> str:
        return self.glyph


# =============================================================================
# OVARY
# =============================================================================

# Combining diacritics written before the carpel letter
LOW_LINE: Final[str] = "\u0332"
OVERLINE: Final[str] = "\u0305"


class Ovary(str, Enum):
    """Ovary position; only carpels carry one"""

    SUPERIOR = "s"
    INFERIOR = "i"
    BOTH = "both"

    @classmethod
    def parse(cls, token: str) -> "Ovary":
        """
        Parse a single ovary token (s or i).

        Raises:
            UnknownOvary: unrecognised token
        """
        if token == cls.SUPERIOR.value:
            return cls.SUPERIOR
        if token == cls.INFERIOR.value:
            return cls.INFERIOR
        raise UnknownOvary(token)

    @classmethod
    def parse_field(cls, field: str) -> Optional["Ovary"]:
        """
        Parse the ovary column.

        "" or "-" means no ovary position. Several ";"-separated tokens that
        resolve to more than one distinct position give BOTH.

        Raises:
            UnknownOvary: any token is unrecognised
        """
        if field in ("", "-"):
            return None
        positions = [cls.parse(token) for token in field.split(";")]
        distinct = set(positions)
        if len(distinct) > 1:
            return cls.BOTH
        return positions[0]

    @property
    def diacritic(self) -> str:
        return _OVARY_DIACRITICS[self]


_OVARY_DIACRITICS: Final[Dict[Ovary, str]] = {
    Ovary.SUPERIOR: LOW_LINE,
    Ovary.INFERIOR: OVERLINE,
    Ovary.BOTH: OVERLINE + LOW_LINE,
}
