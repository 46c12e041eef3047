"""
Perianth — the validated tepals / calyx / petals combination

Three shapes are possible:

    TepalsOnly           ,T6
    CalyxAndPetals       ,K5,C5
    TepalsOrCalyxPetals  ,T6[or K3,C3]   (the taxon is described either way)

build_perianth() is the only factory; any other presence pattern is an
InvalidPerianth error.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.errors import InvalidPerianth

from .floral_part import FloralPart
from .organs import Part


def _check_part(floral_part: FloralPart, expected: Part) -> None:
    if floral_part.part is not expected:
        raise ValueError(
            f"expected {expected.name.lower()}, got {floral_part.part.name.lower()}"
        )


class TepalsOnly(BaseModel):
    """Undifferentiated perianth"""

    shape: Literal["tepals_only"] = "tepals_only"
    tepals: FloralPart

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_parts(self) -> "TepalsOnly":
        _check_part(self.tepals, Part.TEPALS)
        return self

    def anchored_segments(self) -> list[tuple[FloralPart, str]]:
        """(floral part, rendered segment) pairs, each segment with its comma"""
        return [(self.tepals, f",{self.tepals}")]


class CalyxAndPetals(BaseModel):
    """Perianth differentiated into calyx and corolla"""

    shape: Literal["calyx_and_petals"] = "calyx_and_petals"
    calyx: FloralPart
    petals: FloralPart

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_parts(self) -> "CalyxAndPetals":
        _check_part(self.calyx, Part.CALYX)
        _check_part(self.petals, Part.PETALS)
        return self

    def anchored_segments(self) -> list[tuple[FloralPart, str]]:
        return [(self.calyx, f",{self.calyx}"), (self.petals, f",{self.petals}")]


class TepalsOrCalyxPetals(BaseModel):
    """
    Perianth described either as tepals or as calyx and petals.

    Only the tepals anchor a column; the bracketed alternative is never a
    target of adnation brackets.
    """

    shape: Literal["tepals_or_calyx_petals"] = "tepals_or_calyx_petals"
    tepals: FloralPart
    calyx: FloralPart
    petals: FloralPart

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_parts(self) -> "TepalsOrCalyxPetals":
        _check_part(self.tepals, Part.TEPALS)
        _check_part(self.calyx, Part.CALYX)
        _check_part(self.petals, Part.PETALS)
        return self

    def anchored_segments(self) -> list[tuple[FloralPart, str]]:
        segment = f",{self.tepals}[or {self.calyx},{self.petals}]"
        return [(self.tepals, segment)]


Perianth = Annotated[
    Union[TepalsOnly, CalyxAndPetals, TepalsOrCalyxPetals],
    Field(discriminator="shape"),
]


def build_perianth(
    tepals: Optional[FloralPart],
    calyx: Optional[FloralPart],
    petals: Optional[FloralPart],
) -> Union[TepalsOnly, CalyxAndPetals, TepalsOrCalyxPetals]:
    """
    Combine the three independently parsed perianth fields.

    Raises:
        InvalidPerianth: presence pattern is not T, K+C or T+K+C
    """
    present = (tepals is not None, calyx is not None, petals is not None)
    if present == (True, False, False):
        return TepalsOnly(tepals=tepals)
    if present == (False, True, True):
        return CalyxAndPetals(calyx=calyx, petals=petals)
    if present == (True, True, True):
        return TepalsOrCalyxPetals(tepals=tepals, calyx=calyx, petals=petals)

    names = ("tepals", "calyx", "petals")
    given = "+".join(name for name, flag in zip(names, present) if flag) or "none"
    raise InvalidPerianth(given, detail="expected tepals, calyx+petals or all three")
