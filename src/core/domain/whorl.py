"""
Whorl — one differentiated ring of organs within a floral part

A whorl has either a single count or a min-max range, plus sterility and its
own connation flags. Rendered as e.g. "5", "2-4•", "(5)" or "(3-6]".
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .number import FloralPartNumber
from .organs import Sterile


def wrap_connation(body: str, connate: bool, variation: bool) -> str:
    """
    Bracket a rendered body for connation.

    (body) for connate, (body] for connate with variation, body otherwise.
    """
    if not connate:
        return body
    closing = "]" if variation else ")"
    return f"({body}{closing}"


class Whorl(BaseModel):
    """
    Whorl of a floral part.

    Exactly one of number / (minimum, maximum) is set.
    """

    number: Optional[FloralPartNumber] = Field(None, description="Single count")
    minimum: Optional[FloralPartNumber] = Field(None, description="Lower bound of range")
    maximum: Optional[FloralPartNumber] = Field(None, description="Upper bound of range")
    sterile: Sterile = Field(Sterile.FERTILE, description="Sterility of the whorl")
    connation: bool = Field(False, description="Organs of this whorl are fused")
    connation_variation: bool = Field(
        False, description="Fusion varies within the group described"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_shape(self) -> "Whorl":
        """Count XOR range; variation only on a connate whorl"""
        has_number = self.number is not None
        has_range = self.minimum is not None and self.maximum is not None
        partial_range = (self.minimum is None) != (self.maximum is None)
        if partial_range or has_number == has_range:
            raise ValueError("whorl needs either a number or both minimum and maximum")
        if self.connation_variation and not self.connation:
            raise ValueError("connation_variation requires connation")
        return self

    @classmethod
    def of_count(cls, number: FloralPartNumber, **flags) -> "Whorl":
        return cls(number=number, **flags)

    @classmethod
    def of_range(
        cls, minimum: FloralPartNumber, maximum: FloralPartNumber, **flags
    ) -> "Whorl":
        return cls(minimum=minimum, maximum=maximum, **flags)

    @property
    def is_range(self) -> bool:
        return self.number is None

    @property
    def is_sterile(self) -> bool:
        return self.sterile is Sterile.STERILE

    def __str__(self) -> str:
        if self.is_range:
            body = f"{self.minimum}-{self.maximum}"
        else:
            body = str(self.number)
        body += self.sterile.glyph
        return wrap_connation(body, self.connation, self.connation_variation)
