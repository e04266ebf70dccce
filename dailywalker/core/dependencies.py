"""
Service singletons shared by the routers
"""
from functools import lru_cache

from dailywalker.core.config import DATABASE_CONFIG, load_sheets_config
from dailywalker.database.logs import LogStorage
from dailywalker.services.logging_pipeline import LoggingPipeline
from dailywalker.services.route_service import RouteService
from dailywalker.services.sheets_mirror import SheetsMirror


@lru_cache()
def get_log_storage() -> LogStorage:
    return LogStorage(DATABASE_CONFIG["logs_db_path"])


@lru_cache()
def get_logging_pipeline() -> LoggingPipeline:
    return LoggingPipeline(
        storage=get_log_storage(),
        mirror=SheetsMirror(load_sheets_config())
    )


@lru_cache()
def get_route_service() -> RouteService:
    return RouteService()
