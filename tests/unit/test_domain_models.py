"""
Tests for the composite domain models: Whorl, FloralPart, Adnation, Perianth

Checks:
1. Construction and validation (pydantic ValidationError on bad shapes)
2. Canonical rendering of each model
3. Immutability (frozen=True)
4. Perianth shape factory and InvalidPerianth
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Adnation,
    CalyxAndPetals,
    FloralPart,
    FloralPartNumber,
    Ovary,
    Part,
    Sterile,
    TepalsOnly,
    TepalsOrCalyxPetals,
    Whorl,
    build_perianth,
)
from src.core.errors import InvalidPerianth


def n(count: int) -> FloralPartNumber:
    return FloralPartNumber.finite(count)


def simple_part(part: Part, count: int = 2, **kwargs) -> FloralPart:
    return FloralPart(part=part, whorls=(Whorl.of_count(n(count)),), **kwargs)


# =============================================================================
# WHORL
# =============================================================================


class TestWhorl:
    """Tests for Whorl"""

    def test_count_renders(self) -> None:
        assert str(Whorl.of_count(n(5))) == "5"

    def test_range_renders(self) -> None:
        whorl = Whorl.of_range(n(8), n(11))
        assert whorl.is_range
        assert str(whorl) == "8-11"

    def test_sterile_glyph_after_count(self) -> None:
        whorl = Whorl.of_count(n(5), sterile=Sterile.STERILE)
        assert whorl.is_sterile
        assert str(whorl) == "5•"

    def test_connate_whorl_parenthesized(self) -> None:
        whorl = Whorl.of_range(n(2), n(4), sterile=Sterile.STERILE, connation=True)
        assert str(whorl) == "(2-4•)"

    def test_variable_connation_square_close(self) -> None:
        whorl = Whorl.of_count(n(3), connation=True, connation_variation=True)
        assert str(whorl) == "(3]"

    def test_infinite_range(self) -> None:
        assert str(Whorl.of_range(n(4), FloralPartNumber.infinite())) == "4-∞"

    def test_variation_without_connation_rejected(self) -> None:
        """connation_variation requires connation"""
        with pytest.raises(ValidationError):
            Whorl.of_count(n(3), connation_variation=True)

    def test_needs_number_or_range(self) -> None:
        with pytest.raises(ValidationError):
            Whorl()

    def test_not_both_number_and_range(self) -> None:
        with pytest.raises(ValidationError):
            Whorl(number=n(1), minimum=n(1), maximum=n(2))

    def test_half_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Whorl(minimum=n(1))

    def test_immutable(self) -> None:
        whorl = Whorl.of_count(n(3))
        with pytest.raises(ValidationError):
            whorl.connation = True


# =============================================================================
# FLORAL PART
# =============================================================================


class TestFloralPart:
    """Tests for FloralPart"""

    def test_whorls_joined_with_plus(self) -> None:
        stamens = FloralPart(
            part=Part.STAMENS,
            whorls=(Whorl.of_count(n(5)), Whorl.of_count(n(5), sterile=Sterile.STERILE)),
        )
        assert str(stamens) == "A5+5•"

    def test_connate_part(self) -> None:
        assert str(simple_part(Part.TEPALS, connate=True)) == "(T2)"

    def test_connate_variable_part(self) -> None:
        part = simple_part(Part.STAMENS, 10, connate=True, connation_variation=True)
        assert str(part) == "(A10]"

    def test_ovary_diacritics_precede_letter(self) -> None:
        superior = simple_part(Part.CARPELS, 3, ovary=Ovary.SUPERIOR)
        inferior = simple_part(Part.CARPELS, 3, ovary=Ovary.INFERIOR)
        both = simple_part(Part.CARPELS, 3, ovary=Ovary.BOTH)
        assert str(superior) == "\u0332G3"
        assert str(inferior) == "\u0305G3"
        assert str(both) == "\u0305\u0332G3"

    def test_connate_carpels_with_ovary(self) -> None:
        part = simple_part(Part.CARPELS, 2, connate=True, ovary=Ovary.INFERIOR)
        assert str(part) == "(\u0305G2)"
        assert part.glyph_offset == 1

    def test_whorl_order_preserved(self) -> None:
        part = FloralPart(
            part=Part.TEPALS,
            whorls=(Whorl.of_count(n(3)), Whorl.of_range(n(1), n(2))),
        )
        assert str(part) == "T3+1-2"

    def test_requires_a_whorl(self) -> None:
        with pytest.raises(ValidationError):
            FloralPart(part=Part.TEPALS, whorls=())

    def test_variation_without_connation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            simple_part(Part.PETALS, connation_variation=True)

    def test_ovary_only_on_carpels(self) -> None:
        with pytest.raises(ValidationError):
            simple_part(Part.STAMENS, ovary=Ovary.SUPERIOR)


# =============================================================================
# ADNATION
# =============================================================================


class TestAdnation:
    """Tests for Adnation"""

    def test_default_asserts_nothing(self) -> None:
        adnation = Adnation()
        assert adnation.parts is None
        assert not adnation.is_asserted
        assert Part.TEPALS not in adnation
        assert str(adnation) == "-"

    def test_parts_in_canonical_order(self) -> None:
        adnation = Adnation(parts=(Part.CARPELS, Part.TEPALS, Part.STAMENS))
        assert adnation.parts == (Part.TEPALS, Part.STAMENS, Part.CARPELS)

    def test_duplicates_collapse(self) -> None:
        adnation = Adnation(parts=(Part.STAMENS, Part.STAMENS))
        assert adnation.parts == (Part.STAMENS,)

    def test_with_part_returns_copy(self) -> None:
        base = Adnation(variation=True)
        extended = base.with_part(Part.CARPELS).with_part(Part.PETALS)
        assert base.parts is None
        assert extended.parts == (Part.PETALS, Part.CARPELS)
        assert extended.variation

    def test_empty_parts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Adnation(parts=())

    def test_str(self) -> None:
        adnation = Adnation(variation=True, parts=(Part.PETALS, Part.STAMENS))
        assert str(adnation) == "C;A;v"


# =============================================================================
# PERIANTH
# =============================================================================


class TestPerianth:
    """Tests for the perianth shapes and build_perianth"""

    @pytest.fixture
    def tepals(self) -> FloralPart:
        return simple_part(Part.TEPALS, 6)

    @pytest.fixture
    def calyx(self) -> FloralPart:
        return simple_part(Part.CALYX, 3)

    @pytest.fixture
    def petals(self) -> FloralPart:
        return simple_part(Part.PETALS, 3)

    def test_tepals_only(self, tepals) -> None:
        perianth = build_perianth(tepals, None, None)
        assert isinstance(perianth, TepalsOnly)
        assert perianth.anchored_segments() == [(tepals, ",T6")]

    def test_calyx_and_petals(self, calyx, petals) -> None:
        perianth = build_perianth(None, calyx, petals)
        assert isinstance(perianth, CalyxAndPetals)
        assert perianth.anchored_segments() == [(calyx, ",K3"), (petals, ",C3")]

    def test_tepals_or_calyx_petals(self, tepals, calyx, petals) -> None:
        perianth = build_perianth(tepals, calyx, petals)
        assert isinstance(perianth, TepalsOrCalyxPetals)
        assert perianth.anchored_segments() == [(tepals, ",T6[or K3,C3]")]

    def test_tepals_and_calyx_without_petals(self, tepals, calyx) -> None:
        """Tepals + calyx without petals is not a perianth shape"""
        with pytest.raises(InvalidPerianth) as exc_info:
            build_perianth(tepals, calyx, None)
        assert exc_info.value.token == "tepals+calyx"

    @pytest.mark.parametrize(
        "present",
        [
            (False, False, False),
            (False, True, False),
            (False, False, True),
            (True, False, True),
        ],
    )
    def test_other_combinations_rejected(self, tepals, calyx, petals, present) -> None:
        args = [part if flag else None for part, flag in zip((tepals, calyx, petals), present)]
        with pytest.raises(InvalidPerianth):
            build_perianth(*args)

    def test_wrong_organ_in_slot(self, calyx) -> None:
        with pytest.raises(ValidationError):
            TepalsOnly(tepals=calyx)
