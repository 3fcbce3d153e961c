"""
Validator - keeps the building numerically sane and rejects infeasible doors.

Leniency policy: bad dimension input is never an error. Garbage, empty,
negative, NaN or infinite values become 0 and are then clamped up to the field
minimum. The only thing this module ever refuses is a garage door that leaves
less than 2 ft of header clearance under the sidewall.
"""

import logging
import math
import re

from .models import Dimension, DoorType

logger = logging.getLogger(__name__)

# Minimum dimensions in feet. No upper bounds.
MIN_DIMENSIONS = {
    Dimension.SIDEWALL_HEIGHT: 8.0,
    Dimension.WIDTH: 12.0,
    Dimension.LENGTH: 20.0,
}

# Header clearance a garage door needs above its opening
GARAGE_HEADER_CLEARANCE_FT = 2.0

# Leading number of a string, the way a browser number field reads it ("25ft" -> 25)
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class InfeasibleDoorPlacement(ValueError):
    """A garage door is too tall for the sidewall. The message is user-facing."""

    def __init__(self, size: str):
        self.size = size
        super().__init__(
            f"Cannot add {size} garage door: sidewall must be at least 2' "
            f"taller than door height."
        )


def parse_number(value, default: float = 0.0) -> float:
    """
    Parse a number from user input. Returns default on anything unparseable,
    NaN or infinite.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return default
        try:
            number = float(match.group(0))
        except ValueError:
            return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def normalize_dimension(field, raw_value) -> float:
    """
    Parse raw_value as feet and clamp it to the field's minimum.

    Never raises for bad values: unparseable input is treated as 0, which
    then clamps to the minimum. Infinite input ("Infinity", or "1e400" which
    overflows a float) is also treated as 0 rather than kept, so a quote total
    can never be infinite.
    """
    field = Dimension(field)
    return max(parse_number(raw_value), MIN_DIMENSIONS[field])


def parse_door_size(size: str) -> tuple:
    """Split a "WxH" door size into (width_ft, height_ft). Bad parts become 0."""
    parts = str(size or "").lower().split("x")
    width = parse_number(parts[0]) if parts else 0.0
    height = parse_number(parts[1]) if len(parts) > 1 else 0.0
    return width, height


def can_add_garage_door(sidewall_height: float, door_height: float) -> bool:
    """True iff the sidewall clears the door opening by at least 2 ft."""
    return sidewall_height >= door_height + GARAGE_HEADER_CLEARANCE_FT


def check_door_placement(sidewall_height: float, door_type, size: str) -> None:
    """
    Raise InfeasibleDoorPlacement if the door cannot be added.
    Walk doors always pass - only garage doors have a height check.
    """
    if DoorType(door_type) != DoorType.GARAGE:
        return
    sidewall = normalize_dimension(Dimension.SIDEWALL_HEIGHT, sidewall_height)
    _, door_height = parse_door_size(size)
    if not can_add_garage_door(sidewall, door_height):
        logger.warning(
            "Rejected %s garage door: sidewall %.1f ft, needs %.1f ft",
            size, sidewall, door_height + GARAGE_HEADER_CLEARANCE_FT,
        )
        raise InfeasibleDoorPlacement(size)
