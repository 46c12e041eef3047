"""
Notation parser for the floral formula mini-language.

Turns the raw delimited columns of a record into a validated Formula.
"""

from .parser import (
    FIELD_NAMES,
    NotationFields,
    field_context,
    parse_adnation_field,
    parse_fields,
    parse_floral_part_field,
    parse_formula,
    parse_fruit_field,
    parse_symmetry_field,
    parse_whorl_token,
)
from .tokens import WhorlFlags, strip_whorl_flags

__all__ = [
    "FIELD_NAMES",
    "NotationFields",
    "field_context",
    "parse_formula",
    "parse_fields",
    "parse_symmetry_field",
    "parse_floral_part_field",
    "parse_whorl_token",
    "parse_adnation_field",
    "parse_fruit_field",
    "WhorlFlags",
    "strip_whorl_flags",
]
