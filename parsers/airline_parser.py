"""
Airline reference sheet parser.

Reads a CSV or Excel sheet of airline personal-item policies into
AirlineCreate records for bulk upsert.

Expected columns (header names are case/space insensitive):
    Name, IATA Code, Max Length, Max Width, Max Height, Unit,
    Verification Status, Source URL, Pet Carrier Allowed,
    Pet Max Length, Pet Max Width, Pet Max Height, Notes

Unit is "in" or "cm" per row (default cm); inches are converted.
"""

from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Optional, Union
import re
import structlog

import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from exceptions import AirlineReferenceParseError
from models.airline import AirlineCreate, VerificationStatus
from utils.units import to_cm

logger = structlog.get_logger(__name__)

REQUIRED_COLUMNS = ["name", "iata_code"]

DIMENSION_COLUMNS = {
    "max_length": "max_personal_item_length_cm",
    "max_width": "max_personal_item_width_cm",
    "max_height": "max_personal_item_height_cm",
    "pet_max_length": "pet_carrier_max_length_cm",
    "pet_max_width": "pet_carrier_max_width_cm",
    "pet_max_height": "pet_carrier_max_height_cm",
}

TRUE_VALUES = {"true", "yes", "y", "1", "si", "sí"}
FALSE_VALUES = {"false", "no", "n", "0"}


@dataclass
class ParseError:
    """Single validation error from parsing."""
    row: int
    field: str
    error: str


@dataclass
class AirlineParseResult:
    """Result of parsing an airline reference sheet."""
    airlines: list[AirlineCreate] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if no errors occurred."""
        return len(self.errors) == 0

    @property
    def rejected_rows(self) -> int:
        """Number of distinct rows with at least one error."""
        return len({e.row for e in self.errors})

    def errors_as_dicts(self) -> list[dict]:
        return [
            {"row": e.row, "field": e.field, "error": e.error}
            for e in self.errors
        ]


def parse_airline_reference(
    file: Union[str, Path, BytesIO],
    filename: Optional[str] = None,
) -> AirlineParseResult:
    """
    Parse an airline reference sheet.

    Args:
        file: File path or file-like object
        filename: Original name, used to pick CSV vs Excel for file objects

    Returns:
        AirlineParseResult with valid airlines and row errors

    Raises:
        AirlineReferenceParseError: If the file cannot be read or required
            columns are missing
    """
    name = filename or (str(file) if isinstance(file, (str, Path)) else "")
    logger.info("parsing_airline_reference", filename=name)

    try:
        # "NA" is a valid IATA code; only empty cells are missing
        if name.lower().endswith(".csv"):
            df = pd.read_csv(file, keep_default_na=False, na_values=[""])
        else:
            df = pd.read_excel(file, engine="openpyxl", keep_default_na=False, na_values=[""])
    except Exception as e:
        logger.error("airline_reference_read_failed", error=str(e))
        raise AirlineReferenceParseError(
            message="Failed to read airline reference file",
            details={"original_error": str(e)}
        )

    df.columns = [_normalize_column(col) for col in df.columns]

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise AirlineReferenceParseError(
            message=f"Missing required columns: {', '.join(missing)}",
            details={"missing": missing}
        )

    result = AirlineParseResult()

    for idx, row in df.iterrows():
        row_num = idx + 2  # 1-indexed + header

        if _is_blank(row.get("name")) and _is_blank(row.get("iata_code")):
            continue

        record = _parse_row(row, row_num, result)
        if record is not None:
            result.airlines.append(record)

    logger.info(
        "airline_reference_parsed",
        airlines=len(result.airlines),
        errors=len(result.errors)
    )

    return result


def _parse_row(row: pd.Series, row_num: int, result: AirlineParseResult) -> Optional[AirlineCreate]:
    """Validate one row, recording errors on the result."""
    unit = "cm" if _is_blank(row.get("unit")) else str(row["unit"]).strip().lower()
    if unit not in ("in", "cm"):
        result.errors.append(ParseError(row_num, "Unit", f"Unknown unit: {unit}"))
        return None

    data = {
        "name": str(row["name"]).strip(),
        "iata_code": str(row["iata_code"]).strip(),
    }

    for column, target in DIMENSION_COLUMNS.items():
        value = row.get(column)
        if _is_blank(value):
            continue
        try:
            data[target] = to_cm(float(value), unit)
        except (TypeError, ValueError):
            result.errors.append(ParseError(row_num, column, f"Not a number: {value}"))
            return None

    status = row.get("verification_status")
    if not _is_blank(status):
        status = str(status).strip().upper().replace(" ", "_")
        if status not in VerificationStatus.__members__:
            result.errors.append(ParseError(row_num, "Verification Status", f"Unknown status: {status}"))
            return None
        data["verification_status"] = status

    allowed = row.get("pet_carrier_allowed")
    if not _is_blank(allowed):
        parsed = _parse_bool(allowed)
        if parsed is None:
            result.errors.append(ParseError(row_num, "Pet Carrier Allowed", f"Expected yes/no: {allowed}"))
            return None
        data["pet_carrier_allowed"] = parsed

    for column, target in (("source_url", "source_url"), ("notes", "conflict_notes")):
        value = row.get(column)
        if not _is_blank(value):
            data[target] = str(value).strip()

    try:
        return AirlineCreate(**data)
    except PydanticValidationError as e:
        for err in e.errors():
            result.errors.append(ParseError(
                row=row_num,
                field=".".join(str(p) for p in err["loc"]),
                error=err["msg"]
            ))
        return None


def _normalize_column(col) -> str:
    """'IATA Code' → 'iata_code', 'Max Length (cm)' → 'max_length'."""
    text = str(col).strip().lower()
    text = re.sub(r"\(.*?\)", "", text)
    return re.sub(r"[^a-z0-9]+", "_", text).strip("_")


def _is_blank(value) -> bool:
    return value is None or (not isinstance(value, str) and pd.isna(value)) or str(value).strip() == ""


def _parse_bool(value) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None
