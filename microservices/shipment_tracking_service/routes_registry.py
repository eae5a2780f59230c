"""
Shipment Tracking Service Routes Registry

Defines service metadata and routes exposed by the HTTP adapter.
"""

SERVICE_METADATA = {
    "service_name": "shipment_tracking_service",
    "version": "1.0.0",
    "tags": ["v1", "shipments", "tracking", "microservice"],
    "capabilities": [
        "update_processing",
        "delivery_rule_validation",
        "shipment_tracking",
        "batch_replay",
    ],
}

# Route definitions for API documentation
ROUTES = [
    # Health endpoints
    {"path": "/health", "methods": ["GET"], "description": "Health check"},
    {"path": "/api/v1/shipments/health", "methods": ["GET"], "description": "Service health check (API v1)"},

    # Service info
    {"path": "/api/v1/shipments/info", "methods": ["GET"], "description": "Service information"},

    # Update submission
    {"path": "/update-shipment", "methods": ["POST"], "description": "Submit raw update record (text/plain)"},
    {"path": "/api/v1/shipments/updates", "methods": ["POST"], "description": "Submit update record (JSON)"},

    # Shipments
    {"path": "/api/v1/shipments", "methods": ["GET"], "description": "List shipments"},
    {"path": "/api/v1/shipments/{shipment_id}", "methods": ["GET"], "description": "Get shipment"},

    # Tracking
    {"path": "/api/v1/shipments/{shipment_id}/tracker", "methods": ["POST"], "description": "Start tracking"},
    {"path": "/api/v1/shipments/{shipment_id}/tracker", "methods": ["GET"], "description": "Tracker view"},
    {"path": "/api/v1/shipments/{shipment_id}/tracker", "methods": ["DELETE"], "description": "Stop tracking"},
]


def get_route_summary():
    """Get route metadata summary"""
    route_paths = sorted({r["path"] for r in ROUTES})
    return {
        "route_count": str(len(ROUTES)),
        "routes": ",".join(route_paths),
        "api_version": "v1",
        "base_path": "/api/v1/shipments",
    }


__all__ = ["SERVICE_METADATA", "ROUTES", "get_route_summary"]
