"""
Import/export handlers
"""

from typing import Any, Dict, Optional

from fastapi import File, Query, Response, UploadFile

from daily_record.config.loader import get_config
from daily_record.core.db import get_db
from daily_record.core.errors import ValidationError
from daily_record.core.events import emit_events_imported
from daily_record.core.logger import get_logger
from daily_record.core.transfer import export_events, import_file

from . import api_handler

logger = get_logger(__name__)


@api_handler(
    method="GET",
    path="/export",
    tags=["transfer"],
    summary="Export events",
    description="Download events as Markdown or JSON, optionally limited to a date range",
)
async def export_data(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    format: Optional[str] = Query(None),
) -> Response:
    """Export events as a downloadable file

    @param format - json or md, defaults to export.default_format from the config
    """
    fmt = format or get_config().get("export.default_format", "md")
    exported = export_events(get_db(), fmt, start_date, end_date)
    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )


@api_handler(
    method="POST",
    path="/import",
    tags=["transfer"],
    summary="Import events",
    description="Upload a .json or .md export; identical events already stored are skipped",
)
async def import_data(file: UploadFile = File(...)) -> Dict[str, Any]:
    """Import events from an uploaded file

    @returns {"imported", "skipped", "failed", "total"}
    """
    raw = await file.read()
    try:
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValidationError("Import file must be UTF-8 text") from e

    result = import_file(get_db(), file.filename or "", content)
    summary = result.model_dump()
    emit_events_imported({"filename": file.filename, **summary})
    return summary
