"""
Main FastAPI application
"""
import os
from datetime import datetime

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from dailywalker.core.config import API_CONFIG, SERVER_CONFIG, STATIC_DIR
from dailywalker.core.utils import get_logger
from dailywalker.models import ApiInfoResponse, HealthResponse
from dailywalker.routers import logs, routes

# Initialize logger
logger = get_logger("main")


# Initialize FastAPI app
app = FastAPI(
    title=API_CONFIG["title"],
    version=API_CONFIG["version"],
    description=API_CONFIG["description"]
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        os.getenv("FRONTEND_URL", "http://localhost:3000"),
        "http://localhost:5173",  # Vite dev
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(routes.router, tags=["routes"])
app.include_router(logs.router, tags=["logs"])


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return ApiInfoResponse(
        message="Daily Walker API is running!",
        version=API_CONFIG["version"],
        status="healthy"
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat()
    )


if __name__ == "__main__":
    logger.info("Starting Daily Walker API server", extra={
        "host": SERVER_CONFIG["host"],
        "port": SERVER_CONFIG["port"],
        "docs_url": f"http://localhost:{SERVER_CONFIG['port']}/docs"
    })
    uvicorn.run(
        app,
        host=SERVER_CONFIG["host"],
        port=SERVER_CONFIG["port"],
        reload=False
    )
