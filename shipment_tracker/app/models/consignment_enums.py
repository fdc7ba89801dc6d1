"""
Booking and tracking enumerations.

Values are stored as their display text so the tables hold the same
strings the fixtures were written with.
"""

import enum


class BookingMode(str, enum.Enum):
    """How a consignment is moved between cities."""
    AIR = "Air"
    TRAIN = "Train"
    SURFACE = "Surface"


class TrackingStatus(str, enum.Enum):
    """
    Tracking status enumeration.
    
    Typical flow:
        Picked Up → In Transit / Warehouse → Delivered
    """
    PICKED_UP = "Picked Up"
    IN_TRANSIT = "In Transit"
    WAREHOUSE = "Warehouse"
    DELIVERED = "Delivered"


def stored_values(enum_cls):
    """Persist enum members by value rather than by member name."""
    return [member.value for member in enum_cls]
