"""
Routes router - handles loop route generation
"""
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from dailywalker.core.dependencies import get_logging_pipeline, get_route_service
from dailywalker.core.utils import get_logger
from dailywalker.models import LogEntry, LoopRouteRequest, LoopRouteResponse
from dailywalker.services.logging_pipeline import LoggingPipeline
from dailywalker.services.route_service import RouteService

logger = get_logger("routes_router")
router = APIRouter(prefix="/api")


@router.post("/routes/loop", response_model=LoopRouteResponse)
async def generate_loop_route(
    request: LoopRouteRequest,
    background_tasks: BackgroundTasks,
    route_service: RouteService = Depends(get_route_service),
    pipeline: LoggingPipeline = Depends(get_logging_pipeline)
):
    """
    Generate a loop route that starts and ends at the given location.

    The route is logged when the request carries a user_id. The distance is
    logged in the unit the user entered.
    """
    try:
        route = route_service.generate_loop(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if request.user_id:
        entry = LogEntry(
            user_id=request.user_id,
            fingerprint=request.fingerprint,
            start_location=request.start_location,
            distance=request.distance,
            unit=request.unit.value,
            maps_url=route.maps_url,
            mode=request.mode.value
        )
        try:
            route.log_id = pipeline.log_route(entry)
        except Exception as e:
            logger.error(f"Route generated but logging failed: {e}", exc_info=True)
            raise HTTPException(status_code=500, detail=f"Error saving route log: {str(e)}")
        background_tasks.add_task(pipeline.mirror_entry, entry)

    return route
