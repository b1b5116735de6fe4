"""Homework data API mounted under the protected agenda path."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from agenda.config import AGENDA_API_PATH
from agenda.errors import RecordNotFoundError, RecordValidationError
from .models import parse_record, parse_submission_key
from .service import RecordStore, get_record_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix=AGENDA_API_PATH, tags=["Homework"])

# Form field carrying the JSON-encoded homework record
HOMEWORK_FIELD = "newHW"


async def read_homework_field(request: Request) -> Any:
    """Pull the homework payload out of a form or JSON request body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise RecordValidationError("Request body is not valid JSON")
        if isinstance(body, dict) and HOMEWORK_FIELD in body:
            return body[HOMEWORK_FIELD]
        return body

    form = await request.form()
    value = form.get(HOMEWORK_FIELD)
    if not isinstance(value, str):
        raise RecordValidationError(f"Missing form field: {HOMEWORK_FIELD}")
    return value


@router.get("")
async def list_homework(store: RecordStore = Depends(get_record_store)):
    """Return every homework record keyed by submission date."""
    records = {key: record.to_payload() for key, record in store.list().items()}
    return JSONResponse(records)


@router.post("")
@router.put("")
async def save_homework(request: Request, store: RecordStore = Depends(get_record_store)):
    """Add or replace a homework record; its priority is always recomputed."""
    try:
        record = parse_record(await read_homework_field(request))
    except RecordValidationError as e:
        logger.warning(f"Rejected homework payload: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    stored = store.upsert(record)
    return PlainTextResponse(stored.model_dump_json(by_alias=True))


@router.delete("")
async def delete_homework(request: Request, store: RecordStore = Depends(get_record_store)):
    """Remove the homework record named by the ``subDate`` in the body."""
    try:
        key = parse_submission_key(await read_homework_field(request))
        store.remove(key)
    except RecordValidationError as e:
        logger.warning(f"Rejected homework deletion: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return Response(status_code=status.HTTP_200_OK)
