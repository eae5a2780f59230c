"""
Shipment Tracking Microservice API

HTTP adapter over the shipment tracking engine: raw update submission,
shipment state queries and tracker registration.
"""

import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))
from core.config import get_settings
from core.logger import setup_service_logger

from .factory import create_tracking_service
from .models import (
    HealthResponse,
    ProcessUpdateRequest,
    ProcessUpdateResponse,
    ServiceInfo,
    ShipmentListResponse,
    ShipmentResponse,
    TrackerResponse,
)
from .protocols import AlreadyTrackedError, NotTrackedError, ShipmentNotFoundError
from .routes_registry import SERVICE_METADATA, get_route_summary
from .tracking_service import ShipmentTrackingService

# Initialize configuration
config = get_settings()

# Configure logger
logger = setup_service_logger(
    "microservices.shipment_tracking_service", level=config.log_level.upper(), config=config.logging
)

# Global variables
tracking_service: Optional[ShipmentTrackingService] = None
SERVICE_PORT = config.service_port or 8080


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    global tracking_service

    if tracking_service is None:
        tracking_service = create_tracking_service(config)

    logger.info(
        f"Shipment tracking service started on port {SERVICE_PORT} "
        f"({get_route_summary()['route_count']} routes)"
    )
    yield
    logger.info("Shipment tracking service shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Shipment Tracking Service",
    description="Shipment update processing with delivery-window rules and tracking",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan,
)


# ====================
# Dependency Injection
# ====================


async def get_tracking_service() -> ShipmentTrackingService:
    """Get tracking service instance"""
    if not tracking_service:
        raise HTTPException(status_code=503, detail="Tracking service not initialized")
    return tracking_service


def _status_code_for(result: ProcessUpdateResponse) -> int:
    if result.success:
        return 200
    if result.error_type == ShipmentNotFoundError.__name__:
        return 404
    return 400


async def read_text_body(request: Request) -> str:
    """Raw request body decoded as UTF-8 and trimmed"""
    body = await request.body()
    return body.decode("utf-8", errors="replace").strip()


# ====================
# Health Check and Service Info
# ====================


@app.get("/api/v1/shipments/health", response_model=HealthResponse)
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check"""
    return HealthResponse(
        status="healthy" if tracking_service else "degraded",
        service=SERVICE_METADATA["service_name"],
        port=SERVICE_PORT,
        version=SERVICE_METADATA["version"],
        shipments=len(tracking_service.registry) if tracking_service else 0,
        dependencies={"engine": "healthy" if tracking_service else "unavailable"},
    )


@app.get("/api/v1/shipments/info", response_model=ServiceInfo)
def get_service_info(
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Get service information"""
    return ServiceInfo(
        service=SERVICE_METADATA["service_name"],
        version=SERVICE_METADATA["version"],
        description="Shipment update processing with delivery-window rules and tracking",
        capabilities=SERVICE_METADATA["capabilities"],
        update_types=sorted(service.strategies),
    )


# ====================
# Update Submission API
# ====================


@app.post("/update-shipment", response_class=PlainTextResponse)
def update_shipment(
    body: str = Depends(read_text_body),
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Submit one raw update record as a text/plain body"""
    result = service.process_update(body)
    return PlainTextResponse(result.message, status_code=_status_code_for(result))


@app.post("/api/v1/shipments/updates", response_model=ProcessUpdateResponse)
def submit_update(
    request: ProcessUpdateRequest,
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Submit one update record"""
    result = service.process_update(request.update)
    if not result.success:
        return JSONResponse(status_code=_status_code_for(result), content=result.model_dump())
    return result


# ====================
# Shipment Query API
# ====================


@app.get("/api/v1/shipments", response_model=ShipmentListResponse)
def list_shipments(
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """List shipments"""
    shipments = [ShipmentResponse.from_shipment(s) for s in service.list_shipments()]
    return ShipmentListResponse(shipments=shipments, total=len(shipments))


@app.get("/api/v1/shipments/{shipment_id}", response_model=ShipmentResponse)
def get_shipment(
    shipment_id: str,
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Get current shipment state"""
    shipment = service.find_shipment(shipment_id)
    if not shipment:
        raise HTTPException(status_code=404, detail=f"Shipment with ID '{shipment_id}' not found.")
    return ShipmentResponse.from_shipment(shipment)


# ====================
# Tracking API
# ====================


@app.post("/api/v1/shipments/{shipment_id}/tracker", response_model=TrackerResponse)
def track_shipment(
    shipment_id: str,
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Start tracking a shipment"""
    try:
        tracker = service.track_shipment(shipment_id)
    except ShipmentNotFoundError:
        raise HTTPException(status_code=404, detail=f"Shipment with ID '{shipment_id}' not found.")
    except AlreadyTrackedError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return TrackerResponse(
        success=True,
        message=f"Started tracking shipment {shipment_id}",
        view=tracker.view,
    )


@app.get("/api/v1/shipments/{shipment_id}/tracker", response_model=TrackerResponse)
def get_tracker_view(
    shipment_id: str,
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Get the latest tracker view"""
    tracker = service.get_tracker(shipment_id)
    if not tracker:
        raise HTTPException(status_code=404, detail=f"Shipment {shipment_id} is not currently tracked.")
    return TrackerResponse(success=True, message="OK", view=tracker.view)


@app.delete("/api/v1/shipments/{shipment_id}/tracker", response_model=TrackerResponse)
def stop_tracking(
    shipment_id: str,
    service: ShipmentTrackingService = Depends(get_tracking_service),
):
    """Stop tracking a shipment"""
    try:
        service.stop_tracking(shipment_id)
    except NotTrackedError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TrackerResponse(success=True, message=f"Stopped tracking shipment {shipment_id}")


# ====================
# Error Handling
# ====================


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(f"Unhandled exception in {request.url}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error occurred"}
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "microservices.shipment_tracking_service.main:app",
        host=config.service_host,
        port=SERVICE_PORT,
        reload=config.debug,
        log_level=config.log_level.lower(),
    )
