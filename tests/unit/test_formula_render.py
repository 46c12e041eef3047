"""
End-to-end tests: record columns -> Formula -> rendered text

Checks:
1. Primary line for every perianth shape, connation and ovary position
2. Adnation bracket line positions (invariant and variable)
3. Organs absent from the formula or inside the bracketed alternative
4. Determinism and model round trip
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Formula,
    Fruit,
    Part,
    Symmetry,
    SymmetryKind,
    build_perianth,
)
from src.core.notation import parse_floral_part_field, parse_formula


def render(line: str) -> str:
    """Render a comma-separated record line of nine notation columns."""
    return str(parse_formula(*line.split(",")))


# =============================================================================
# PRIMARY LINE
# =============================================================================


class TestPrimaryLine:
    """Tests for the first rendered line"""

    def test_spiral_without_fruit(self) -> None:
        assert render("s,8-11,-,-,inf,0,-,-,-") == "↻,T8-11,A∞,G0;no fruit"

    def test_inferior_ovary(self) -> None:
        assert render("r,2,-,-,2,2,i,berry,-") == "*,T2,A2,\u0305G2;berry"

    def test_connate_parts(self) -> None:
        formula = parse_formula(*"r,2;c,-,-,2;c,2;c,i,berry,-".split(","))
        assert formula.render().primary == "*,(T2),(A2),(\u0305G2);berry"

    def test_tepals_or_calyx_petals(self) -> None:
        assert render("r,2,2,2,2,2,i,berry,-") == "*,T2[or K2,C2],A2,\u0305G2;berry"

    def test_alternative_symmetries_and_variable_connation(self) -> None:
        line = "up;r,-,5;c,5,10;c;v,1,s,legume;loment,-"
        assert render(line) == "X(↑) or *,(K5),C5,(A10],\u0332G1;legume,loment"

    def test_sterile_whorl_and_both_ovaries(self) -> None:
        line = "r,3;3,-,-,3;3s,3;c,s;i,capsule,-"
        assert render(line) == "*,T3+3,A3+3•,(\u0305\u0332G3);capsule"

    def test_fractional_count(self) -> None:
        assert render("a,0.5,-,-,1,1,-,utricle,-") == "↯,T½,A1,G1;utricle"

    def test_connate_whorls(self) -> None:
        assert render("d,2-4sc,-,-,3cv,2,-,nut,-") == "↔,T(2-4•),A(3],G2;nut"

    def test_counts_above_thirty(self) -> None:
        assert render("r,-,5,5,45,1-31,-,follicle;follicle,-") == (
            "*,K5,C5,A∞,G1-∞;follicle,follicle"
        )

    def test_no_androecium_or_gynoecium(self) -> None:
        assert render("r,6,-,-,-,-,-,-,-") == "*,T6;no fruit"


# =============================================================================
# ADNATION BRACKETS
# =============================================================================


class TestAdnationLine:
    """Tests for the second rendered line"""

    def test_tepals_stamens_carpels(self) -> None:
        rendered = parse_formula(*"r,2,-,-,2,2,i,berry,T;A;G".split(",")).render()
        assert rendered.lines == ["*,T2,A2,\u0305G2;berry", "  ╰──┴──╯"]
        assert rendered.columns == (
            (Part.TEPALS, 2),
            (Part.STAMENS, 5),
            (Part.CARPELS, 8),
        )

    def test_connate_parts_shift_columns(self) -> None:
        assert render("r,2;c,-,-,2;c,2;c,i,berry,T;A;G") == (
            "*,(T2),(A2),(\u0305G2);berry\n   ╰────┴────╯"
        )

    def test_bracketed_alternative_skipped(self) -> None:
        assert render("r,2,2,2,2,2,i,berry,T;A;G") == (
            "*,T2[or K2,C2],A2,\u0305G2;berry\n  ╰" + "─" * 12 + "┴──╯"
        )

    def test_calyx_and_petals_in_alternative_not_anchored(self) -> None:
        formula = parse_formula(*"r,2,2,2,2,2,i,berry,K;C".split(","))
        assert formula.render().columns == ()
        assert formula.render().brackets == ""

    def test_mixed_whorls(self) -> None:
        assert render("r,2;c,-,-,2;5s;c,2;c,i,berry,T;A;G") == (
            "*,(T2),(A2+5•),(\u0305G2);berry\n   ╰────┴───────╯"
        )

    def test_calyx_petals_stamens(self) -> None:
        line = "r,-,5,5,inf,1-inf,s;i,achene;drupe;pome;follicle,K;C;A"
        assert render(line) == (
            "*,K5,C5,A∞,\u0305\u0332G1-∞;achene,drupe,pome,follicle\n  ╰──┴──╯"
        )

    def test_variable_adnation(self) -> None:
        assert render("r,2,-,-,2,2,i,berry,T;A;G;v") == (
            "*,T2,A2,\u0305G2;berry\n  └┄┄┴┄┄┘"
        )

    def test_absent_organ_records_no_column(self) -> None:
        rendered = parse_formula(*"r,2,-,-,2,2,-,berry,T;K;A".split(",")).render()
        assert [part for part, _ in rendered.columns] == [Part.TEPALS, Part.STAMENS]
        assert rendered.brackets == "  ╰──╯"

    def test_single_adnated_organ_has_no_bracket_line(self) -> None:
        rendered = parse_formula(*"r,2,-,-,2,2,-,berry,A".split(",")).render()
        assert rendered.columns == ((Part.STAMENS, 5),)
        assert rendered.lines == ["*,T2,A2,G2;berry"]

    def test_rendering_is_deterministic(self) -> None:
        formula = parse_formula(*"r,2,-,-,2,2,i,berry,T;A;G".split(","))
        assert str(formula) == str(formula)
        assert formula.render() == formula.render()


# =============================================================================
# MODEL
# =============================================================================


class TestFormulaModel:
    """Tests for the Formula model itself"""

    @pytest.fixture
    def formula(self) -> Formula:
        return parse_formula(*"up;r,-,5;c,5,10;c;v,1,s,legume;loment,C;A".split(","))

    def test_accessors(self, formula) -> None:
        assert formula.tepals is None
        assert formula.calyx.part is Part.CALYX
        assert formula.petals.part is Part.PETALS
        assert [fp.part for fp in formula.floral_parts] == [
            Part.CALYX,
            Part.PETALS,
            Part.STAMENS,
            Part.CARPELS,
        ]
        assert formula.has_adnation

    def test_round_trip_through_dump(self, formula) -> None:
        assert Formula.model_validate(formula.model_dump()) == formula

    def test_round_trip_through_json(self, formula) -> None:
        restored = Formula.model_validate_json(formula.model_dump_json())
        assert restored == formula
        assert str(restored) == str(formula)

    def test_frozen(self, formula) -> None:
        with pytest.raises(ValidationError):
            formula.fruit = (Fruit.BERRY,)

    def test_defaults(self) -> None:
        tepals = parse_floral_part_field("6", Part.TEPALS)
        formula = Formula(
            symmetry=(Symmetry(kind=SymmetryKind.RADIAL),),
            perianth=build_perianth(tepals, None, None),
        )
        assert formula.fruit == (Fruit.NONE,)
        assert not formula.has_adnation
        assert str(formula) == "*,T6;no fruit"

    def test_symmetry_required(self) -> None:
        tepals = parse_floral_part_field("6", Part.TEPALS)
        with pytest.raises(ValidationError):
            Formula(symmetry=(), perianth=build_perianth(tepals, None, None))

    def test_stamens_slot_checks_organ(self) -> None:
        tepals = parse_floral_part_field("6", Part.TEPALS)
        carpels = parse_floral_part_field("3", Part.CARPELS)
        with pytest.raises(ValidationError):
            Formula(
                symmetry=(Symmetry(kind=SymmetryKind.RADIAL),),
                perianth=build_perianth(tepals, None, None),
                stamens=carpels,
            )
