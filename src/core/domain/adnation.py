"""
Adnation — fusion between different organ categories

Adnation is drawn as a second line under the formula: a bracket spanning the
columns at which the fused organs' letters start, e.g.

    *,T2,A2,G2;berry
      ╰──┴──╯

Box-drawing glyphs differ for invariant and variable adnation.
"""

from typing import Final, NamedTuple, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.errors import ColumnRenderError

from .organs import Part, canonical_order


# =============================================================================
# GLYPH TABLES
# =============================================================================


class BracketGlyphs(NamedTuple):
    """Glyph set for one adnation bracket"""

    open_left: str
    close_right: str
    fill: str
    junction: str


INVARIANT_GLYPHS: Final[BracketGlyphs] = BracketGlyphs("╰", "╯", "─", "┴")
VARIABLE_GLYPHS: Final[BracketGlyphs] = BracketGlyphs("└", "┘", "┄", "┴")


def glyphs_for(variation: bool) -> BracketGlyphs:
    return VARIABLE_GLYPHS if variation else INVARIANT_GLYPHS


# =============================================================================
# MODEL
# =============================================================================


class Adnation(BaseModel):
    """
    Organ categories fused to each other.

    parts is None when no adnation is asserted; otherwise it holds at least
    one part, deduplicated, in canonical organ order.
    """

    variation: bool = Field(False, description="Adnation varies within the group")
    parts: Optional[tuple[Part, ...]] = Field(
        None, min_length=1, description="Fused organ categories"
    )

    model_config = {"frozen": True}

    @field_validator("parts")
    @classmethod
    def normalize_parts(cls, v: Optional[tuple[Part, ...]]) -> Optional[tuple[Part, ...]]:
        if v is None:
            return v
        return canonical_order(v)

    def with_part(self, part: Part) -> "Adnation":
        """Copy with one more fused part."""
        return Adnation(variation=self.variation, parts=(*(self.parts or ()), part))

    @property
    def is_asserted(self) -> bool:
        return self.parts is not None

    def __contains__(self, part: Part) -> bool:
        return self.parts is not None and part in self.parts

    def __str__(self) -> str:
        if self.parts is None:
            return "-"
        tokens = [part.letter for part in self.parts]
        if self.variation:
            tokens.append("v")
        return ";".join(tokens)


# =============================================================================
# BRACKET RENDERER
# =============================================================================


def render_adnation_brackets(columns: Sequence[int], variation: bool = False) -> str:
    """
    Draw the adnation bracket line.

    Args:
        columns: columns of the fused organs' glyphs, strictly increasing
        variation: use the variable-fusion glyph set

    Returns:
        "" for fewer than two columns; otherwise leading spaces up to the first
        column, an open glyph there, fill between columns, a junction at every
        interior column and a close glyph at the last.

    Raises:
        ColumnRenderError: negative or not strictly increasing columns

    Examples:
        >>> render_adnation_brackets([2, 9])
        '  ╰──────╯'
        >>> render_adnation_brackets([0, 2, 4], variation=True)
        '└┄┴┄┘'
    """
    if len(columns) < 2:
        return ""
    if columns[0] < 0:
        raise ColumnRenderError(f"negative adnation column: {list(columns)}")
    for previous, current in zip(columns, columns[1:]):
        if current <= previous:
            raise ColumnRenderError(
                f"adnation columns not strictly increasing: {list(columns)}"
            )

    glyphs = glyphs_for(variation)
    line = " " * columns[0] + glyphs.open_left
    last = len(columns) - 1
    for index in range(1, len(columns)):
        line += glyphs.fill * (columns[index] - columns[index - 1] - 1)
        line += glyphs.close_right if index == last else glyphs.junction
    return line
