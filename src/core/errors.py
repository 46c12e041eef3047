"""
Floral formula errors

Error taxonomy shared by the notation parser, the domain models and the
record store. Every user-input failure is a FormulaParseError that names the
offending notation field and token; nothing is silently corrected.
"""

from typing import Optional


# =============================================================================
# BASE
# =============================================================================


class FloralFormulaError(Exception):
    """Root of all floral formula errors."""

    pass


class FormulaParseError(FloralFormulaError, ValueError):
    """
    A token of a notation field could not be turned into a typed value.

    Attributes:
        token: the offending raw token
        field: the notation column (symmetry, tepals, ...); filled in by the
            whole-record parser, None while a primitive is parsed on its own
    """

    kind = "parse error"

    def __init__(self, token: str, field: Optional[str] = None, detail: str = ""):
        self.token = token
        self.field = field
        self.detail = detail
        super().__init__(token)

    def __str__(self) -> str:
        where = f"field '{self.field}': " if self.field else ""
        message = f"{where}{self.kind} {self.token!r}"
        if self.detail:
            message = f"{message} ({self.detail})"
        return message


# =============================================================================
# TOKEN ERRORS
# =============================================================================


class UnknownSymmetry(FormulaParseError):
    kind = "unknown symmetry"


class UnknownPart(FormulaParseError):
    kind = "unknown floral part"


class UnknownOvary(FormulaParseError):
    kind = "unknown ovary position"


class UnknownFruit(FormulaParseError):
    kind = "unknown fruit"


class UnknownFlowerType(FormulaParseError):
    kind = "unknown flower type"


class InvalidNumber(FormulaParseError):
    kind = "invalid number"


# =============================================================================
# STRUCTURAL ERRORS
# =============================================================================


class InvalidPerianth(FormulaParseError):
    """Tepals/calyx/petals presence matches none of the three perianth shapes."""

    kind = "invalid perianth"


class MalformedWhorl(FormulaParseError):
    """
    A whorl or floral part cannot be constructed from its token.

    Raised for range tokens that do not split into exactly two sides and for
    connation variation asserted without connation.
    """

    kind = "malformed whorl"


# =============================================================================
# INTERNAL INVARIANTS
# =============================================================================


class ColumnRenderError(FloralFormulaError):
    """
    The adnation bracket renderer received an impossible column list.

    Columns are produced by the formula serializer, so this signals a defect
    in the serializer rather than bad user input.
    """

    pass


class RecordStoreError(FloralFormulaError):
    """
    A database row could not be loaded.

    The underlying exception is chained as __cause__.
    """

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(f"line {line_number}: {message}")
