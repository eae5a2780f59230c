"""
Shipment Tracking Service

Processes shipment update records (created, shipped, location, delayed,
delivered, lost, canceled, noteadded), checks delivery windows per shipment
type and pushes state changes to registered trackers.

Port: 8080
"""

__version__ = "1.0.0"
__service_name__ = "shipment_tracking_service"
__service_port__ = 8080
