"""
Dialog Admin Server - Status Endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter

from models.api import HealthResponse
from version import SERVICE_NAME, __version__


# Create router instance
router = APIRouter()


# ==================== Health Check Endpoint ====================

@router.get("/health", response_model=HealthResponse, tags=["Status"])
async def health_check():
    """
    Health check endpoint to verify server is running

    Returns:
        dict: Server status information
    """
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": __version__,
        "timestamp_utc": datetime.now(timezone.utc).isoformat()
    }
