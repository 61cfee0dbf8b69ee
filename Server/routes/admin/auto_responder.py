"""
Dialog Admin Server - Auto-Responder Settings Endpoints

Read and write the auto-responder settings (enabled flag plus one text per
locale) kept in the dialog_settings key-value table.
"""

import json
import logging
from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from auth import RequireDialogAdmin
from database import GetSettingsStore
from exceptions import DialogAPIError, InternalServerError
from managers import SettingsStore
from models.api import AutoResponderSettingsResponse, SaveSettingsResponse, ErrorResponse
from settings_schema import (
    BuildAutoResponderSchema, DecodeSettings, EncodeSettings, ValidatePayload
)

# Create logger
logger = logging.getLogger(__name__)

# Create router instance
router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def GetAutoResponderSchema(request: Request) -> list:
    """Dependency building the settings schema from the configured locales"""
    config = getattr(request.app.state, "config", None) or {}
    return BuildAutoResponderSchema(config.get("extra_locales", []))


async def ReadJsonBody(request: Request):
    """
    Decode the request body as JSON

    Returns:
        The decoded value, or None if the body is empty or not valid JSON

    Unparseable bodies are treated as empty and so fail validation with a
    400, rather than surfacing as a 500 from the JSON parser.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError, RecursionError):
        logger.debug("Request body is not valid JSON")
        return None


# ==================== Auto-Responder Settings ====================


@router.get(
    "/api/dialog/admin/auto-responder",
    response_model=AutoResponderSettingsResponse,
    responses=ERROR_RESPONSES,
    tags=["Admin"]
)
def admin_get_auto_responder(
    session: dict = Depends(RequireDialogAdmin),
    store: SettingsStore = Depends(GetSettingsStore),
    schema: list = Depends(GetAutoResponderSchema)
):
    """
    Get current auto-responder settings

    Missing keys read as their defaults: enabled is false unless stored as
    exactly "true", texts are empty strings.
    """
    try:
        raw_by_key = store.GetMany(entry.key for entry in schema)
        settings = DecodeSettings(schema, raw_by_key)

        return AutoResponderSettingsResponse(settings=settings)

    except DialogAPIError:
        raise
    except Exception as e:
        logger.error(f"Error fetching auto-responder settings: {str(e)}")
        raise InternalServerError()


@router.post(
    "/api/dialog/admin/auto-responder",
    response_model=SaveSettingsResponse,
    responses=ERROR_RESPONSES,
    tags=["Admin"]
)
async def admin_update_auto_responder(
    request: Request,
    session: dict = Depends(RequireDialogAdmin),
    store: SettingsStore = Depends(GetSettingsStore),
    schema: list = Depends(GetAutoResponderSchema)
):
    """
    Save auto-responder settings

    Body: {"enabled": bool, "text": str, ...one text_<locale> per extra locale}
    All values are written in a single transaction.
    """
    try:
        body = await ReadJsonBody(request)

        # Validate before touching the store
        values = ValidatePayload(schema, body)

        await run_in_threadpool(store.UpsertMany, EncodeSettings(schema, values))

        logger.info(
            f"User '{session['username']}' updated auto-responder settings "
            f"(enabled={values['enabled']})"
        )

        return SaveSettingsResponse()

    except DialogAPIError:
        raise
    except Exception as e:
        logger.error(f"Error saving auto-responder settings: {str(e)}")
        raise InternalServerError()
