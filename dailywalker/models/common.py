"""
Common/Base models used across multiple domains
"""
from pydantic import BaseModel


class PointModel(BaseModel):
    """Geographic point with latitude and longitude"""
    lat: float
    lng: float


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: str


class ApiInfoResponse(BaseModel):
    """API information response"""
    message: str
    version: str
    status: str
