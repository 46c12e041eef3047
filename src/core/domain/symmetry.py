"""
Symmetry — floral symmetry

A formula lists one or more alternative symmetries (joined by "or" when
rendered). Bilateral symmetry carries the direction of its plane.
"""

from enum import Enum
from typing import Dict, Final, Optional

from pydantic import BaseModel, Field, model_validator

from src.core.errors import UnknownSymmetry


# =============================================================================
# ENUMS
# =============================================================================


class BilateralDirection(str, Enum):
    """Direction of the plane of a bilateral (zygomorphic) flower"""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UPLEFT = "upleft"
    UPRIGHT = "upright"
    DOWNLEFT = "downleft"
    DOWNRIGHT = "downright"

    @property
    def glyph(self) -> str:
        return _DIRECTION_GLYPHS[self]


class SymmetryKind(str, Enum):
    """Symmetry classes; values are the single-letter notation tokens"""

    RADIAL = "r"
    BILATERAL = "bilateral"
    ASYMMETRY = "a"
    SPIRAL = "s"
    DISYMMETRIC = "d"


_DIRECTION_GLYPHS: Final[Dict[BilateralDirection, str]] = {
    BilateralDirection.UP: "↑",
    BilateralDirection.DOWN: "↓",
    BilateralDirection.LEFT: "←",
    BilateralDirection.RIGHT: "→",
    BilateralDirection.UPLEFT: "↖",
    BilateralDirection.UPRIGHT: "↗",
    BilateralDirection.DOWNLEFT: "↙",
    BilateralDirection.DOWNRIGHT: "↘",
}

_SYMMETRY_GLYPHS: Final[Dict[SymmetryKind, str]] = {
    SymmetryKind.RADIAL: "*",
    SymmetryKind.ASYMMETRY: "↯",
    SymmetryKind.SPIRAL: "↻",
    SymmetryKind.DISYMMETRIC: "↔",
}

# Letter codes; bilateral symmetry is spelled by its direction word
_SYMMETRY_TOKENS: Final[Dict[str, SymmetryKind]] = {
    "r": SymmetryKind.RADIAL,
    "a": SymmetryKind.ASYMMETRY,
    "s": SymmetryKind.SPIRAL,
    "d": SymmetryKind.DISYMMETRIC,
}


# =============================================================================
# MODEL
# =============================================================================


class Symmetry(BaseModel):
    """
    One floral symmetry.

    direction is set exactly when kind is BILATERAL.
    """

    kind: SymmetryKind = Field(..., description="Symmetry class")
    direction: Optional[BilateralDirection] = Field(
        None, description="Plane direction for bilateral symmetry"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_direction(self) -> "Symmetry":
        if self.kind is SymmetryKind.BILATERAL and self.direction is None:
            raise ValueError("bilateral symmetry requires a direction")
        if self.kind is not SymmetryKind.BILATERAL and self.direction is not None:
            raise ValueError(f"{self.kind.name.lower()} symmetry has no direction")
        return self

    @classmethod
    def bilateral(cls, direction: BilateralDirection) -> "Symmetry":
        return cls(kind=SymmetryKind.BILATERAL, direction=direction)

    @classmethod
    def parse(cls, token: str) -> "Symmetry":
        """
        Parse a symmetry token.

        Args:
            token: r, a, s, d or one of the eight direction words

        Raises:
            UnknownSymmetry: unrecognised token
        """
        if token in _SYMMETRY_TOKENS:
            return cls(kind=_SYMMETRY_TOKENS[token])
        try:
            direction = BilateralDirection(token)
        except ValueError:
            raise UnknownSymmetry(token) from None
        return cls.bilateral(direction)

    def __str__(self) -> str:
        if self.kind is SymmetryKind.BILATERAL:
            return f"X({self.direction.glyph})"
        return _SYMMETRY_GLYPHS[self.kind]
