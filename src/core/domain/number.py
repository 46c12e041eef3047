"""
FloralPartNumber — number of organs in a whorl

A finite count (0..30), the single fractional value 0.5, or "infinite".
Counts above 30 are not distinguished by the notation and normalize to
Infinite.
"""

import re
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.errors import InvalidNumber


# =============================================================================
# CONSTANTS
# =============================================================================

# Largest count rendered as a number; anything above is ∞
FINITE_MAX: Final[int] = 30

FRACTIONAL_VALUE: Final[float] = 0.5

INFINITE_TOKEN: Final[str] = "inf"
FRACTIONAL_TOKEN: Final[str] = "0.5"

INFINITE_GLYPH: Final[str] = "∞"
FRACTIONAL_GLYPH: Final[str] = "½"

_DIGITS = re.compile(r"[0-9]+")


# =============================================================================
# ENUMS
# =============================================================================


class NumberKind(str, Enum):
    """Shape of a FloralPartNumber"""

    FINITE = "finite"
    FRACTIONAL = "fractional"
    INFINITE = "infinite"


# =============================================================================
# MODEL
# =============================================================================


class FloralPartNumber(BaseModel):
    """
    Number of parts in a whorl.

    Only FINITE carries a count; FRACTIONAL is always 0.5 and INFINITE has no
    value.
    """

    kind: NumberKind = Field(..., description="finite / fractional / infinite")
    count: Optional[int] = Field(
        None, ge=0, le=FINITE_MAX, description="Count for FINITE numbers"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_count_matches_kind(self) -> "FloralPartNumber":
        """count is present exactly when kind is FINITE"""
        if self.kind is NumberKind.FINITE and self.count is None:
            raise ValueError("finite number requires a count")
        if self.kind is not NumberKind.FINITE and self.count is not None:
            raise ValueError(f"{self.kind.value} number cannot carry a count")
        return self

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def finite(cls, count: int) -> "FloralPartNumber":
        """Finite count; counts above FINITE_MAX become infinite."""
        if count > FINITE_MAX:
            return cls.infinite()
        return cls(kind=NumberKind.FINITE, count=count)

    @classmethod
    def fractional(cls) -> "FloralPartNumber":
        return cls(kind=NumberKind.FRACTIONAL)

    @classmethod
    def infinite(cls) -> "FloralPartNumber":
        return cls(kind=NumberKind.INFINITE)

    @classmethod
    def parse(cls, token: str) -> "FloralPartNumber":
        """
        Parse a count token.

        Args:
            token: "-" or "" (zero), "inf", "0.5" or a non-negative integer

        Returns:
            FloralPartNumber

        Raises:
            InvalidNumber: token is not one of the accepted spellings

        Examples:
            >>> str(FloralPartNumber.parse("5"))
            '5'
            >>> str(FloralPartNumber.parse("31"))
            '∞'
        """
        if token in ("-", ""):
            return cls.finite(0)
        if token == INFINITE_TOKEN:
            return cls.infinite()
        if token == FRACTIONAL_TOKEN:
            return cls.fractional()
        if not _DIGITS.fullmatch(token):
            raise InvalidNumber(token)
        return cls.finite(int(token))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_infinite(self) -> bool:
        return self.kind is NumberKind.INFINITE

    @property
    def value(self) -> float:
        """Numeric value (math.inf for INFINITE)."""
        if self.kind is NumberKind.FINITE:
            return float(self.count)
        if self.kind is NumberKind.FRACTIONAL:
            return FRACTIONAL_VALUE
        return float("inf")

    def __str__(self) -> str:
        if self.kind is NumberKind.FINITE:
            return str(self.count)
        if self.kind is NumberKind.FRACTIONAL:
            return FRACTIONAL_GLYPH
        return INFINITE_GLYPH
