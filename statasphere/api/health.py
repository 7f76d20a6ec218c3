"""
Health check and status endpoints
"""
from fastapi import APIRouter, Depends
from datetime import datetime, timezone
from statasphere.api.deps import get_bigquery_connector
from statasphere.config import get_settings
from statasphere.connectors.bigquery_connector import BigQueryConnector
from statasphere import __version__

settings = get_settings()

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__
    }


@router.get("/status")
async def get_status(connector: BigQueryConnector = Depends(get_bigquery_connector)):
    """Get system status"""
    return {
        "app_name": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "warehouse": {
            **connector.get_status(),
            "performance_table": settings.performance_table,
        },
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
