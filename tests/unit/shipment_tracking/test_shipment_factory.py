"""
Unit tests for shipment type resolution and creation
"""
import pytest

from microservices.shipment_tracking_service.models import ShipmentStatus, ShipmentType
from microservices.shipment_tracking_service.protocols import UnknownShipmentTypeError
from microservices.shipment_tracking_service.shipment_factory import (
    create_shipment,
    resolve_shipment_type,
)

pytestmark = pytest.mark.unit


class TestResolveShipmentType:
    """Tests for resolve_shipment_type"""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("STANDARD", ShipmentType.STANDARD),
            ("express", ShipmentType.EXPRESS),
            ("Overnight", ShipmentType.OVERNIGHT),
            ("  bulk ", ShipmentType.BULK),
        ],
    )
    def test_case_insensitive(self, tag, expected):
        """Tags match regardless of case and surrounding whitespace"""
        assert resolve_shipment_type(tag) is expected

    def test_unknown_tag(self):
        """Unknown tags raise with the accepted values in the message"""
        with pytest.raises(UnknownShipmentTypeError) as exc_info:
            resolve_shipment_type("ROCKET")

        assert exc_info.value.type_tag == "ROCKET"
        assert str(exc_info.value) == (
            "Invalid shipment type string: ROCKET. "
            "Must be STANDARD, EXPRESS, OVERNIGHT, or BULK."
        )


class TestCreateShipment:
    """Tests for create_shipment"""

    def test_new_shipment_state(self):
        """New shipments start Unknown with empty collections"""
        shipment = create_shipment("S1", "express", 1000)

        assert shipment.id == "S1"
        assert shipment.shipment_type == ShipmentType.EXPRESS
        assert shipment.created_timestamp == 1000
        assert shipment.status == ShipmentStatus.UNKNOWN.value
        assert shipment.expected_delivery_timestamp is None
        assert shipment.current_location is None
        assert shipment.notes == []
        assert shipment.update_history == []
        assert shipment.rule_violations == []
        assert shipment.observers == []

    def test_invalid_type_creates_nothing(self):
        with pytest.raises(UnknownShipmentTypeError):
            create_shipment("S1", "", 1000)
