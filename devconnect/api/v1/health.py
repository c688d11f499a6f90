# 📄 File: devconnect/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us if the DevConnect service is up and can reach its
# database, like a quick checkup for load balancers and monitoring.
# 🧪 Purpose (Technical Summary):
# Liveness, readiness and detailed health endpoints: document store ping plus psutil system
# metrics, with 503 when the store is unreachable.
# 🔗 Dependencies:
# FastAPI, psutil, devconnect.shared.core.dependencies (store, settings)
# 🔄 Connected Modules / Calls From:
# devconnect.api.v1.router, monitoring systems, load balancers

import logging
import platform
from datetime import datetime, timezone
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from devconnect.shared.config.settings import Settings
from devconnect.shared.core.dependencies import get_app_settings, get_store
from devconnect.shared.infrastructure.database import DocumentStore

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


async def _store_health(store: DocumentStore) -> Dict[str, Any]:
    try:
        reachable = await store.ping()
    except Exception as e:
        logger.error(f"Document store health check failed: {e}")
        return {"status": "unhealthy", "error": str(e), "timestamp": _now()}

    return {"status": "healthy" if reachable else "unhealthy", "timestamp": _now()}


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness plus document store reachability")
async def health_check(
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """
    Basic health check endpoint.

    Returns 200 when the document store answers a ping, 503 otherwise.
    """
    database = await _store_health(store)
    healthy = database["status"] == "healthy"

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": _now(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "database": database["status"],
        }
    )


@health_router.get("/health/live",
                   summary="Liveness Probe",
                   description="Returns 200 while the process is running")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Document store status plus host resource usage")
async def detailed_health_check(
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """
    Detailed health check.

    Checks:
    - Document store connectivity
    - System resources (CPU, memory, disk)

    Resource usage above 90% marks the service degraded; an unreachable
    store marks it unhealthy.
    """
    start_time = datetime.now(timezone.utc)
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    components["database"] = await _store_health(store)
    if components["database"]["status"] != "healthy":
        overall_status = "unhealthy"

    try:
        system_metrics = _get_system_metrics()
        components["system"] = system_metrics

        if overall_status == "healthy" and (
            system_metrics["cpu_percent"] > 90
            or system_metrics["memory_percent"] > 90
            or system_metrics["disk_percent"] > 90
        ):
            overall_status = "degraded"

    except (psutil.Error, OSError) as e:
        logger.warning(f"System metrics unavailable: {e}")
        components["system"] = {"status": "error", "error": str(e), "timestamp": _now()}
        if overall_status == "healthy":
            overall_status = "degraded"

    now = datetime.now(timezone.utc)
    return JSONResponse(
        status_code=503 if overall_status == "unhealthy" else 200,
        content={
            "status": overall_status,
            "timestamp": now.isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "uptime_seconds": (now - _app_start_time).total_seconds(),
            "response_time_seconds": (now - start_time).total_seconds(),
            "components": components,
        }
    )


def _get_system_metrics() -> Dict[str, Any]:
    """Get basic system metrics"""
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage("/")

    return {
        "status": "ok",
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": memory.percent,
        "memory_available_mb": round(memory.available / (1024 * 1024), 1),
        "disk_percent": disk.percent,
        "python_version": platform.python_version(),
        "platform": platform.system(),
        "timestamp": _now(),
    }
