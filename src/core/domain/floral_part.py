"""
FloralPart — all whorls of one organ category

E.g. the stamens of a flower with five fertile stamens and five staminodes
render as "A5+5•". Whole-part fusion wraps the string in parentheses; an
ovary position on carpels adds a diacritic before the letter.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .organs import Ovary, Part
from .whorl import Whorl, wrap_connation


class FloralPart(BaseModel):
    """
    One organ category of the flower.

    whorls keep insertion order, which is display order.
    """

    part: Part = Field(..., description="Organ category")
    connate: bool = Field(False, description="Organs of the whole part are fused")
    connation_variation: bool = Field(
        False, description="Fusion varies within the group described"
    )
    whorls: tuple[Whorl, ...] = Field(..., min_length=1, description="Whorls, outside in")
    ovary: Optional[Ovary] = Field(None, description="Ovary position (carpels only)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_flags(self) -> "FloralPart":
        if self.connation_variation and not self.connate:
            raise ValueError("connation_variation requires connate")
        if self.ovary is not None and self.part is not Part.CARPELS:
            raise ValueError(f"ovary position given for {self.part.name.lower()}")
        return self

    @property
    def glyph(self) -> str:
        """Part letter with any ovary diacritic in front of it."""
        if self.ovary is None:
            return self.part.letter
        return f"{self.ovary.diacritic}{self.part.letter}"

    @property
    def glyph_offset(self) -> int:
        """Characters before the glyph in the rendered string."""
        return 1 if self.connate else 0

    def __str__(self) -> str:
        body = self.glyph + "+".join(str(whorl) for whorl in self.whorls)
        return wrap_connation(body, self.connate, self.connation_variation)
