"""
Explain renderer — floral formula as prose

Consumes the typed model and describes it in English: symmetry, each floral
part with its whorls, the ovary position, the fruits and any adnation. Prose
is wrapped; the rendered formula at the top is not.
"""

import textwrap
from dataclasses import dataclass
from typing import Dict, Final, Optional

from src.core.domain import (
    Adnation,
    BilateralDirection,
    FloralPart,
    FloralPartNumber,
    Formula,
    Fruit,
    NumberKind,
    Ovary,
    Part,
    Symmetry,
    SymmetryKind,
    Whorl,
)
from src.records.flower_type import FlowerType

INDENT: Final[str] = "    "


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ExplainConfig:
    """Explain renderer configuration."""

    # Width prose lines are wrapped to
    wrap_width: int = 70


# =============================================================================
# VOCABULARY
# =============================================================================

_DIRECTION_WORDS: Final[Dict[BilateralDirection, str]] = {
    BilateralDirection.UP: "upwards",
    BilateralDirection.DOWN: "downward",
    BilateralDirection.LEFT: "left",
    BilateralDirection.RIGHT: "right",
    BilateralDirection.UPLEFT: "up and left",
    BilateralDirection.UPRIGHT: "up and right",
    BilateralDirection.DOWNLEFT: "down and left",
    BilateralDirection.DOWNRIGHT: "down and right",
}

_SYMMETRY_WORDS: Final[Dict[SymmetryKind, str]] = {
    SymmetryKind.RADIAL: "radial",
    SymmetryKind.ASYMMETRY: "asymmetrical",
    SymmetryKind.SPIRAL: "spiral",
    SymmetryKind.DISYMMETRIC: "disymmetric",
}

_PART_WORDS: Final[Dict[Part, str]] = {
    Part.TEPALS: "tepals",
    Part.CALYX: "calyx",
    Part.PETALS: "petals",
    Part.STAMENS: "stamens",
    Part.CARPELS: "carpels",
}

_OVARY_WORDS: Final[Dict[Ovary, str]] = {
    Ovary.SUPERIOR: "a superior ovary",
    Ovary.INFERIOR: "an inferior ovary",
    Ovary.BOTH: "both superior and inferior ovaries",
}

_FLOWER_TYPE_SENTENCES: Final[Dict[FlowerType, str]] = {
    FlowerType.BISEXUAL: (
        "A bisexual flower with both male (androecium) and female (gynoecium) parts."
    ),
    FlowerType.CARPELLATE: "A carpellate (female only) flower.",
    FlowerType.STAMINATE: "A staminate (male only) flower.",
}


# =============================================================================
# PER-TYPE EXPLANATIONS
# =============================================================================


def explain_number(number: FloralPartNumber) -> str:
    if number.kind is NumberKind.INFINITE:
        return "infinite"
    return str(number)


def explain_symmetry(symmetry: Symmetry) -> str:
    if symmetry.kind is SymmetryKind.BILATERAL:
        return f"{_DIRECTION_WORDS[symmetry.direction]} bilateral ({symmetry})"
    return f"{_SYMMETRY_WORDS[symmetry.kind]} ({symmetry})"


def explain_part(part: Part) -> str:
    return _PART_WORDS[part]


def explain_ovary(ovary: Ovary) -> str:
    return _OVARY_WORDS[ovary]


def explain_fruit(fruit: Fruit) -> str:
    return f"{fruit.value} - {fruit.description}"


def explain_flower_type(flower_type: FlowerType) -> str:
    return _FLOWER_TYPE_SENTENCES[flower_type]


def explain_whorl(whorl: Whorl) -> str:
    """e.g. 'sterile part and has between 2 and 4 parts, connate'"""
    fertility = "sterile part" if whorl.is_sterile else "fertile part"
    if whorl.is_range:
        count = (
            f"has between {explain_number(whorl.minimum)} and "
            f"{explain_number(whorl.maximum)} parts"
        )
    else:
        count = f"has {explain_number(whorl.number)} parts"

    text = f"{fertility} and {count}"
    if whorl.connation_variation:
        text += ", variably connate"
    elif whorl.connation:
        text += ", connate"
    return text


def explain_floral_part(floral_part: FloralPart) -> str:
    """Header line, one line per whorl and, for carpels, the ovary position."""
    connation = "connate" if floral_part.connate else "not connate"
    variation = (
        "with variation in the connation"
        if floral_part.connation_variation
        else "with no variation in the connation"
    )
    lines = [f"{floral_part} = {explain_part(floral_part.part)} are {connation} {variation}"]
    for number, whorl in enumerate(floral_part.whorls, start=1):
        lines.append(f"{INDENT}Whorl {number}: {explain_whorl(whorl)}")
    if floral_part.part is Part.CARPELS and floral_part.ovary is not None:
        lines.append(f"{INDENT}Whorl has {explain_ovary(floral_part.ovary)}")
    return "\n".join(lines)


def explain_adnation(adnation: Adnation) -> str:
    if adnation.parts is None:
        return "There is no adnation between floral parts"
    parts = ", and ".join(explain_part(part) for part in adnation.parts)
    variable = "Variable" if adnation.variation else "Not variable"
    return f"Adnation between {parts} floral parts. {variable} between species."


# =============================================================================
# EXPLAINER
# =============================================================================


class FormulaExplainer:
    """
    Prose explanation of a whole formula.

    Layout:
        <formula lines>

        Explanation of floral formula above:

        The symmetry is ...

        <one block per floral part>

        Fruit(s):
            <fruit> - <description>

        <adnation sentence>
    """

    def __init__(self, config: Optional[ExplainConfig] = None):
        self.config = config or ExplainConfig()

    def explain(self, formula: Formula) -> str:
        symmetry = " or ".join(explain_symmetry(s) for s in formula.symmetry)
        blocks = [
            "Explanation of floral formula above:",
            f"The symmetry is {symmetry}",
        ]
        blocks.extend(explain_floral_part(part) for part in formula.floral_parts)

        fruit_lines = [f"{INDENT}{explain_fruit(fruit)}" for fruit in formula.fruit]
        blocks.append("\n".join(["Fruit(s):", *fruit_lines]))
        blocks.append(explain_adnation(formula.adnation))

        prose = "\n\n".join(self._wrap(block) for block in blocks)
        return f"{formula}\n\n{prose}"

    def _wrap(self, text: str) -> str:
        """Wrap each line on its own, keeping its indentation."""
        wrapped: list[str] = []
        for line in text.split("\n"):
            body = line.lstrip(" ")
            if not body:
                wrapped.append("")
                continue
            indent = line[: len(line) - len(body)]
            wrapped.extend(
                textwrap.wrap(
                    body,
                    width=self.config.wrap_width,
                    initial_indent=indent,
                    subsequent_indent=indent,
                    break_long_words=False,
                    break_on_hyphens=False,
                )
            )
        return "\n".join(wrapped)


def explain_formula(formula: Formula, config: Optional[ExplainConfig] = None) -> str:
    """Convenience wrapper around FormulaExplainer."""
    return FormulaExplainer(config).explain(formula)
