"""
JSON Schema Contract Validators

Validation of floral formula data against formal JSON Schema contracts,
using the jsonschema library.

Schemas:
- floral_record.json (one database row, all columns as strings)
- formula.json (Formula.model_dump(mode="json"))
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Finds schemas in contracts/schema/ relative to the project root.
    """

    def __init__(self):
        # Project root is four levels up from this file
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Loaded schema cache
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: schema name without extension (e.g. 'floral_record')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: schema file does not exist
            json.JSONDecodeError: file is not valid JSON
            ValueError: file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Shared loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: name of the schema to validate against
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True if data matches the schema, without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Iterate over all validation errors.

        Yields:
            ValidationError for each problem found
        """
        return self.validator.iter_errors(data)


class FloralRecordValidator(ContractValidator):
    """Validator for one database row (floral_record.json)."""

    def __init__(self):
        super().__init__("floral_record")


class FormulaValidator(ContractValidator):
    """Validator for a dumped Formula (formula.json)."""

    def __init__(self):
        super().__init__("formula")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_floral_record(data: Dict[str, Any]) -> None:
    """
    Validate a database row mapping.

    Raises:
        ValidationError: data does not match the schema
    """
    FloralRecordValidator().validate(data)


def validate_formula(data: Dict[str, Any]) -> None:
    """
    Validate a dumped Formula.

    Raises:
        ValidationError: data does not match the schema
    """
    FormulaValidator().validate(data)

