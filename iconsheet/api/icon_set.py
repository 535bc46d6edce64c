"""POST /api/icon-set/* — icon sheet import and JSON export."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from fastapi import APIRouter, HTTPException

from iconsheet.config import settings
from iconsheet.errors import IconSheetError
from iconsheet.exporters.json_exporter import export_json
from iconsheet.importers.web_icons import ImportOptions, import_web_icons
from iconsheet.models.requests import IconSetImportRequest
from iconsheet.models.responses import IconSetImportResponse

router = APIRouter(prefix="/icon-set")
logger = logging.getLogger(__name__)


@router.post("/import", response_model=IconSetImportResponse)
async def import_icon_set(req: IconSetImportRequest) -> IconSetImportResponse:
    if not req.svg.lstrip().startswith("<"):
        raise HTTPException(status_code=400, detail="Expected SVG markup")

    messages: list[str] = []
    options = ImportOptions(
        debug=settings.import_debug if req.debug is None else req.debug,
        log=messages.append,
    )
    optimize = settings.export_optimize if req.optimize is None else req.optimize

    try:
        collection = await import_web_icons(req.svg, options)
    except ET.ParseError as e:
        logger.warning("Malformed icon sheet: %s", e)
        raise HTTPException(status_code=400, detail=f"Malformed SVG: {e}") from e
    except IconSheetError as e:
        logger.warning("Icon sheet rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    if req.prefix:
        collection.prefix = req.prefix

    icon_set = await export_json(collection, optimize=optimize)

    return IconSetImportResponse(
        icon_set=icon_set,
        count=collection.length(),
        prefix=collection.prefix,
        messages=messages,
    )
