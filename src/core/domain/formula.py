"""
Formula — a complete floral formula and its canonical serializer

Primary line, in fixed order:

    <symmetry or symmetry>,<perianth>,<stamens>,<carpels>;<fruit,fruit>

followed, when two or more adnated organs are present, by a bracket line
drawn under the adnated organs' letters (see adnation.py).
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .adnation import Adnation, render_adnation_brackets
from .floral_part import FloralPart
from .fruit import Fruit
from .organs import Part
from .perianth import CalyxAndPetals, Perianth, TepalsOnly, TepalsOrCalyxPetals
from .symmetry import Symmetry


# =============================================================================
# RENDER RESULT
# =============================================================================


@dataclass(frozen=True)
class RenderedFormula:
    """Serializer output: both lines plus the columns the brackets span."""

    primary: str
    columns: tuple[tuple[Part, int], ...]
    brackets: str

    @property
    def lines(self) -> list[str]:
        if self.brackets:
            return [self.primary, self.brackets]
        return [self.primary]

    def __str__(self) -> str:
        return "\n".join(self.lines)


# =============================================================================
# FORMULA MODEL
# =============================================================================


class Formula(BaseModel):
    """
    Floral formula of one taxon.

    Built once by the notation parser; immutable afterwards.
    """

    symmetry: tuple[Symmetry, ...] = Field(
        ..., min_length=1, description="Alternative symmetries"
    )
    perianth: Perianth = Field(..., description="Validated perianth shape")
    stamens: Optional[FloralPart] = Field(None, description="Androecium")
    carpels: Optional[FloralPart] = Field(None, description="Gynoecium")
    fruit: tuple[Fruit, ...] = Field(
        (Fruit.NONE,), min_length=1, description="Fruits, in order, duplicates kept"
    )
    adnation: Adnation = Field(default_factory=Adnation, description="Fusion between parts")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_organ_parts(self) -> "Formula":
        if self.stamens is not None and self.stamens.part is not Part.STAMENS:
            raise ValueError("stamens field holds a different organ")
        if self.carpels is not None and self.carpels.part is not Part.CARPELS:
            raise ValueError("carpels field holds a different organ")
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def tepals(self) -> Optional[FloralPart]:
        if isinstance(self.perianth, (TepalsOnly, TepalsOrCalyxPetals)):
            return self.perianth.tepals
        return None

    @property
    def calyx(self) -> Optional[FloralPart]:
        if isinstance(self.perianth, (CalyxAndPetals, TepalsOrCalyxPetals)):
            return self.perianth.calyx
        return None

    @property
    def petals(self) -> Optional[FloralPart]:
        if isinstance(self.perianth, (CalyxAndPetals, TepalsOrCalyxPetals)):
            return self.perianth.petals
        return None

    @property
    def floral_parts(self) -> list[FloralPart]:
        """All present floral parts in canonical organ order."""
        parts = [self.tepals, self.calyx, self.petals, self.stamens, self.carpels]
        return [part for part in parts if part is not None]

    @property
    def has_adnation(self) -> bool:
        return self.adnation.is_asserted

    # -------------------------------------------------------------------------
    # Serializer
    # -------------------------------------------------------------------------

    def segments(self) -> list[tuple[FloralPart, str]]:
        """(anchoring floral part, segment text) for everything after symmetry."""
        segments = self.perianth.anchored_segments()
        for organ in (self.stamens, self.carpels):
            if organ is not None:
                segments.append((organ, f",{organ}"))
        return segments

    def render(self) -> RenderedFormula:
        """
        Render the formula and compute the adnation bracket line.

        The column of an adnated organ is where its glyph starts: one past the
        segment's comma, plus one for the opening parenthesis of a connate
        part. Columns count code points, so an ovary diacritic is a column.
        """
        text = " or ".join(str(symmetry) for symmetry in self.symmetry)
        columns: list[tuple[Part, int]] = []

        for organ, segment in self.segments():
            if organ.part in self.adnation:
                columns.append((organ.part, len(text) + 1 + organ.glyph_offset))
            text += segment

        text += ";" + ",".join(fruit.value for fruit in self.fruit)
        brackets = render_adnation_brackets(
            [column for _, column in columns], self.adnation.variation
        )
        return RenderedFormula(primary=text, columns=tuple(columns), brackets=brackets)

    def __str__(self) -> str:
        return str(self.render())
