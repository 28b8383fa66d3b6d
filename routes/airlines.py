"""
Airline API routes.

Airline reference data: listing, lookup by IATA code, maintenance and
bulk import from a reference sheet.
"""

from io import BytesIO
from fastapi import APIRouter, Response, UploadFile, File
import structlog

from config import settings
from models.airline import (
    AirlineCreate,
    AirlineUpdate,
    AirlineResponse,
    AirlineImportResponse,
)
from parsers.airline_parser import parse_airline_reference
from services.airline_service import get_airline_service
from routes.common import handle_error

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=list[AirlineResponse])
async def list_airlines(response: Response):
    """
    List all airlines ordered by name.

    The list changes rarely, so clients may cache it.
    """
    try:
        service = get_airline_service()
        airlines = service.get_all()
        response.headers["Cache-Control"] = f"public, max-age={settings.airline_cache_seconds}"
        return airlines

    except Exception as e:
        return handle_error(e)


@router.get("/{iata_code}", response_model=AirlineResponse)
async def get_airline(iata_code: str):
    """
    Get an airline by IATA code (case-insensitive).

    Raises:
        404: Airline not found
    """
    try:
        service = get_airline_service()
        return service.get_by_iata_code(iata_code)

    except Exception as e:
        return handle_error(e)


@router.post("", response_model=AirlineResponse, status_code=201)
async def create_airline(data: AirlineCreate):
    """
    Create a new airline.

    Raises:
        409: IATA code already exists
        422: Validation error
    """
    try:
        service = get_airline_service()
        return service.create(data)

    except Exception as e:
        return handle_error(e)


@router.patch("/{airline_id}", response_model=AirlineResponse)
async def update_airline(airline_id: str, data: AirlineUpdate):
    """
    Update an existing airline.

    Only provided fields are updated.

    Raises:
        404: Airline not found
        422: Validation error
    """
    try:
        service = get_airline_service()
        return service.update(airline_id, data)

    except Exception as e:
        return handle_error(e)


@router.post("/upload", response_model=AirlineImportResponse)
async def upload_airlines(file: UploadFile = File(...)):
    """
    Import airlines from a CSV or Excel reference sheet.

    Valid rows are created or updated by IATA code; invalid rows are
    reported and skipped.

    Raises:
        422: File unreadable or required columns missing
    """
    logger.info("airline_upload_started", filename=file.filename)

    try:
        content = await file.read()
        parse_result = parse_airline_reference(BytesIO(content), filename=file.filename)

        service = get_airline_service()
        created, updated = service.bulk_upsert(parse_result.airlines)

        return AirlineImportResponse(
            filename=file.filename or "",
            total_records=len(parse_result.airlines) + parse_result.rejected_rows,
            created=created,
            updated=updated,
            errors=parse_result.errors_as_dicts(),
        )

    except Exception as e:
        return handle_error(e)
