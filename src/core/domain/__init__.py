"""
Domain models and value objects.

Contains the typed floral formula: primitive values (numbers, symmetry,
organs, fruit), Whorl, FloralPart, Adnation, the perianth shapes and Formula.
"""

from src.core.domain.adnation import (
    INVARIANT_GLYPHS,
    VARIABLE_GLYPHS,
    Adnation,
    BracketGlyphs,
    render_adnation_brackets,
)
from src.core.domain.floral_part import FloralPart
from src.core.domain.formula import Formula, RenderedFormula
from src.core.domain.fruit import FRUIT_DESCRIPTIONS, Fruit
from src.core.domain.number import FINITE_MAX, FloralPartNumber, NumberKind
from src.core.domain.organs import Ovary, Part, Sterile, canonical_order
from src.core.domain.perianth import (
    CalyxAndPetals,
    Perianth,
    TepalsOnly,
    TepalsOrCalyxPetals,
    build_perianth,
)
from src.core.domain.symmetry import BilateralDirection, Symmetry, SymmetryKind
from src.core.domain.whorl import Whorl

__all__ = [
    # Primitives
    "FINITE_MAX",
    "FloralPartNumber",
    "NumberKind",
    "Symmetry",
    "SymmetryKind",
    "BilateralDirection",
    "Part",
    "Sterile",
    "Ovary",
    "canonical_order",
    "Fruit",
    "FRUIT_DESCRIPTIONS",
    # Whorls and parts
    "Whorl",
    "FloralPart",
    # Adnation
    "Adnation",
    "BracketGlyphs",
    "INVARIANT_GLYPHS",
    "VARIABLE_GLYPHS",
    "render_adnation_brackets",
    # Perianth
    "Perianth",
    "TepalsOnly",
    "CalyxAndPetals",
    "TepalsOrCalyxPetals",
    "build_perianth",
    # Formula
    "Formula",
    "RenderedFormula",
]
