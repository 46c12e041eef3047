"""
Contract Validation Module

JSON Schema validation of floral record rows and dumped formulae.
"""

from .validators import (
    ContractValidator,
    FloralRecordValidator,
    FormulaValidator,
    SchemaLoader,
    validate_floral_record,
    validate_formula,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FloralRecordValidator",
    "FormulaValidator",
    # Functions
    "validate_floral_record",
    "validate_formula",
]
