"""
Logs router - records generated routes and lists them
"""
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from dailywalker.core.dependencies import get_log_storage, get_logging_pipeline
from dailywalker.core.utils import get_logger
from dailywalker.database.logs import LogStorage
from dailywalker.models import (
    LogEntry,
    LogListResponse,
    LogRequest,
    LogSavedResponse,
    MirrorStatusResponse
)
from dailywalker.services.logging_pipeline import LoggingPipeline

logger = get_logger("logs_router")
router = APIRouter(prefix="/api")


@router.post("/log", response_model=LogSavedResponse)
async def log_route(
    request: LogRequest,
    background_tasks: BackgroundTasks,
    pipeline: LoggingPipeline = Depends(get_logging_pipeline)
):
    """Save a generated route locally and mirror it to Google Sheets"""
    if not request.user_id or not request.maps_url:
        raise HTTPException(status_code=400, detail="Missing required fields")

    entry = LogEntry(
        user_id=request.user_id,
        fingerprint=request.fingerprint,
        start_location=request.start_location,
        distance=request.distance,
        unit=request.unit,
        maps_url=request.maps_url
    )

    try:
        log_id = pipeline.log_route(entry)
    except Exception as e:
        logger.error(f"Error saving route log: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    # Mirror after the response is sent
    background_tasks.add_task(pipeline.mirror_entry, entry)

    return LogSavedResponse(message="Log saved", id=log_id)


@router.get("/logs", response_model=LogListResponse)
async def list_logs(storage: LogStorage = Depends(get_log_storage)):
    """All route logs, most recent first"""
    try:
        return LogListResponse(data=storage.get_logs())
    except Exception as e:
        logger.error(f"Error reading route logs: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/logs/mirror-status", response_model=MirrorStatusResponse)
async def mirror_status(pipeline: LoggingPipeline = Depends(get_logging_pipeline)):
    """Outcome counters of the Google Sheets mirror"""
    return MirrorStatusResponse(**pipeline.recorder.snapshot())
