"""
Fixture rows for the four tables.

Every row is a literal constant; keys are given explicitly.
"""

from datetime import date
from decimal import Decimal

from shipment_tracker.app.models.consignment_enums import BookingMode, TrackingStatus
from shipment_tracker.app.models.courier import Courier
from shipment_tracker.app.models.consignment import Consignment
from shipment_tracker.app.models.item import Item
from shipment_tracker.app.models.tracking_event import TrackingEvent

AIR, TRAIN, SURFACE = BookingMode.AIR, BookingMode.TRAIN, BookingMode.SURFACE
PICKED_UP = TrackingStatus.PICKED_UP
IN_TRANSIT = TrackingStatus.IN_TRANSIT
WAREHOUSE = TrackingStatus.WAREHOUSE
DELIVERED = TrackingStatus.DELIVERED


COURIERS = [
    {"courier_id": 1, "courier_name": "Ravi"},
    {"courier_id": 2, "courier_name": "Arjun"},
    {"courier_id": 3, "courier_name": "Vikram"},
    {"courier_id": 4, "courier_name": "Kumar"},
    {"courier_id": 5, "courier_name": "Sanjay"},
]


def _consignment(no, sender, receiver, mode, booked, amount, weight, shipment_type, courier_id):
    return {
        "consignment_no": no,
        "sender_city": sender,
        "receiver_city": receiver,
        "booking_mode": mode,
        "date_of_booking": booked,
        "charge_amount": Decimal(amount),
        "charge_weight": Decimal(weight),
        "shipment_type": shipment_type,
        "courier_id": courier_id,
    }


CONSIGNMENTS = [
    _consignment(1001, "Mumbai", "Chennai", AIR, date(2017, 5, 20), "250.00", "2.0", "Documents", 1),
    _consignment(1002, "Delhi", "Mumbai", TRAIN, date(2017, 5, 21), "150.00", "3.0", "Food", 2),
    _consignment(1003, "Kolkata", "Bangalore", AIR, date(2017, 5, 22), "350.00", "4.0", "Electronics", 3),
    _consignment(1004, "Chennai", "Hyderabad", SURFACE, date(2017, 5, 20), "200.00", "5.0", "Clothes", 1),
    _consignment(1005, "Jaipur", "Delhi", TRAIN, date(2017, 5, 25), "100.00", "2.0", "Documents", 4),
    _consignment(1006, "Bangalore", "Pune", AIR, date(2017, 5, 24), "300.00", "3.0", "Electronics", 3),
    _consignment(1007, "Hyderabad", "Mumbai", SURFACE, date(2017, 5, 23), "180.00", "4.0", "Household", 2),
    _consignment(1008, "Pune", "Chennai", TRAIN, date(2017, 5, 26), "210.00", "3.0", "Industrial", 1),
    _consignment(1009, "Delhi", "Kolkata", AIR, date(2017, 5, 27), "400.00", "5.0", "Electronics", 4),
    _consignment(1010, "Lucknow", "Jaipur", SURFACE, date(2017, 5, 21), "160.00", "2.0", "Clothes", 2),
]

ITEMS = [
    {"item_id": item_id, "consignment_no": consignment_no, "item_name": name}
    for item_id, consignment_no, name in [
        (1, 1001, "Passport"),
        (2, 1001, "Legal Papers"),
        (3, 1002, "Snacks"),
        (4, 1003, "Laptop"),
        (5, 1003, "Charger"),
        (6, 1004, "Shirts"),
        (7, 1004, "Pants"),
        (8, 1005, "Certificates"),
        (9, 1006, "Phone"),
        (10, 1006, "Powerbank"),
        (11, 1007, "Small Table"),
        (12, 1008, "Machine Part"),
        (13, 1009, "Camera"),
        (14, 1009, "Lens"),
        (15, 1010, "Jacket"),
    ]
]

TRACKING_EVENTS = [
    {"tracking_id": tracking_id, "consignment_no": consignment_no, "tracking_status": status}
    for tracking_id, consignment_no, status in [
        (1, 1001, PICKED_UP),
        (2, 1001, IN_TRANSIT),
        (3, 1001, DELIVERED),
        (4, 1002, PICKED_UP),
        (5, 1002, WAREHOUSE),
        (6, 1003, PICKED_UP),
        (7, 1003, IN_TRANSIT),
        (8, 1004, PICKED_UP),
        (9, 1005, PICKED_UP),
        (10, 1005, DELIVERED),
        (11, 1006, PICKED_UP),
        (12, 1006, IN_TRANSIT),
        (13, 1006, DELIVERED),
        (14, 1007, PICKED_UP),
        (15, 1007, WAREHOUSE),
        (16, 1007, DELIVERED),
        (17, 1008, PICKED_UP),
        (18, 1008, IN_TRANSIT),
        (19, 1009, PICKED_UP),
        (20, 1009, IN_TRANSIT),
        (21, 1009, DELIVERED),
        (22, 1010, PICKED_UP),
    ]
]

# Load order: parents before children
SEED_ROWS = (
    (Courier, COURIERS),
    (Consignment, CONSIGNMENTS),
    (Item, ITEMS),
    (TrackingEvent, TRACKING_EVENTS),
)
