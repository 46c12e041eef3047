"""
Record store — the floral formula database

Loads delimited rows of

    order,family,flower_type,symmetry,tepals,calyx,petals,anthers,carpels,ovary,fruit,adnation

and indexes the parsed formulae by (order, family, flower type). The first
bad row aborts loading with a RecordStoreError naming its line.
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Final, Iterable, Iterator, Optional, Union

from jsonschema import ValidationError
from pydantic import BaseModel, Field

from src.core.contracts import FloralRecordValidator
from src.core.domain import Formula
from src.core.errors import FormulaParseError, RecordStoreError
from src.core.notation import FIELD_NAMES, NotationFields, parse_fields

from .flower_type import FlowerType

logger = logging.getLogger(__name__)

TAXON_COLUMNS: Final[tuple[str, ...]] = ("order", "family", "flower_type")
RECORD_COLUMNS: Final[tuple[str, ...]] = TAXON_COLUMNS + FIELD_NAMES

# Bundled database, relative to the project root
DEFAULT_DATA_PATH: Final[Path] = (
    Path(__file__).parent.parent.parent / "data" / "formulae.csv"
)

RecordKey = tuple[str, str, FlowerType]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RecordStoreConfig:
    """Record store configuration."""

    delimiter: str = ","

    # First row holds column names
    has_header: bool = True

    # Check each row against contracts/schema/floral_record.json
    validate_contract: bool = True


# =============================================================================
# RECORD
# =============================================================================


class FloralRecord(BaseModel):
    """One taxon of the database."""

    order: str = Field(..., min_length=1, description="Plant order")
    family: str = Field(..., min_length=1, description="Plant family")
    flower_type: FlowerType = Field(..., description="Sex of the flowers described")
    formula: Formula = Field(..., description="Parsed floral formula")

    model_config = {"frozen": True}

    @property
    def key(self) -> RecordKey:
        return (self.order, self.family, self.flower_type)

    @property
    def family_title(self) -> str:
        """Family with its first letter upper-cased."""
        return self.family[:1].upper() + self.family[1:]


# =============================================================================
# STORE
# =============================================================================


class RecordStore:
    """
    Parsed floral formula records, iterated in (order, family, flower type)
    order.
    """

    def __init__(self, records: Iterable[FloralRecord] = ()):
        self._records: Dict[RecordKey, FloralRecord] = {}
        for record in records:
            if record.key in self._records:
                logger.warning(
                    "duplicate record %s / %s / %s replaces earlier row",
                    record.order,
                    record.family,
                    record.flower_type.display_name,
                )
            self._records[record.key] = record

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_path(
        cls,
        path: Union[str, Path] = DEFAULT_DATA_PATH,
        config: Optional[RecordStoreConfig] = None,
    ) -> "RecordStore":
        """
        Load a database file.

        Raises:
            RecordStoreError: a row cannot be parsed
            OSError: the file cannot be read
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8", newline="") as f:
            store = cls.from_lines(f, config)
        logger.info("loaded %d floral records from %s", len(store), path)
        return store

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], config: Optional[RecordStoreConfig] = None
    ) -> "RecordStore":
        """
        Load database rows from text lines.

        Raises:
            RecordStoreError: a row cannot be parsed
        """
        config = config or RecordStoreConfig()
        validator = FloralRecordValidator() if config.validate_contract else None
        reader = csv.reader(lines, delimiter=config.delimiter)

        records = []
        for row in reader:
            if config.has_header and reader.line_num == 1:
                continue
            if not row or all(cell.strip() == "" for cell in row):
                logger.debug("skipping blank line %d", reader.line_num)
                continue
            records.append(_record_from_row(row, reader.line_num, validator))
        return cls(records)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def records(self) -> list[FloralRecord]:
        return [self._records[key] for key in sorted(self._records)]

    def get(self, order: str, family: str, flower_type: FlowerType) -> Optional[FloralRecord]:
        return self._records.get((order, family, flower_type))

    def families(self) -> list[str]:
        return sorted({record.family for record in self._records.values()})

    def orders(self) -> list[str]:
        return sorted({record.order for record in self._records.values()})

    def by_family(self, family: str) -> list[FloralRecord]:
        return [record for record in self.records() if record.family == family]

    def by_order(self, order: str) -> list[FloralRecord]:
        return [record for record in self.records() if record.order == order]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FloralRecord]:
        return iter(self.records())


def _record_from_row(
    row: list[str], line_number: int, validator: Optional[FloralRecordValidator]
) -> FloralRecord:
    """Parse one row; any failure becomes a RecordStoreError for line_number."""
    if len(row) != len(RECORD_COLUMNS):
        raise RecordStoreError(
            line_number, f"expected {len(RECORD_COLUMNS)} columns, got {len(row)}"
        )

    data = dict(zip(RECORD_COLUMNS, row))
    if validator is not None:
        try:
            validator.validate(data)
        except ValidationError as exc:
            raise RecordStoreError(line_number, exc.message) from exc

    try:
        flower_type = FlowerType.parse(data["flower_type"])
        notation = NotationFields(**{name: data[name] for name in FIELD_NAMES})
        formula = parse_fields(notation)
    except FormulaParseError as exc:
        raise RecordStoreError(line_number, str(exc)) from exc

    return FloralRecord(
        order=data["order"],
        family=data["family"],
        flower_type=flower_type,
        formula=formula,
    )
