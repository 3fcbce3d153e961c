"""
In-memory domain records for the shop quote tool.

Nothing here is persisted. A QuoteSession (see session.py) owns one
BuildingSpec, one DoorRegistry and one ContactInfo for its lifetime.
"""

import enum
from typing import Optional

from pydantic import BaseModel


# --- Enums ---

class Side(str, enum.Enum):
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


# Display / iteration order for all four walls
SIDES = [Side.FRONT, Side.BACK, Side.LEFT, Side.RIGHT]


class DoorType(str, enum.Enum):
    WALK = "walk"
    GARAGE = "garage"


class ColorGrade(str, enum.Enum):
    NORMAL = "normal"
    PREMIUM = "premium"


class RoofPitch(str, enum.Enum):
    ONE = "1/12"
    TWO = "2/12"
    THREE = "3/12"
    FOUR = "4/12"


class Dimension(str, enum.Enum):
    SIDEWALL_HEIGHT = "sidewall_height"
    LENGTH = "length"
    WIDTH = "width"


class MoveDirection(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"


# --- Records ---

class BuildingSpec(BaseModel):
    """Building dimensions (feet) and options. Defaults match the blank form."""
    sidewall_height: float = 10.0
    length: float = 30.0
    width: float = 40.0
    color: ColorGrade = ColorGrade.NORMAL
    # Kept as the raw "N/12" string - the engine parses it leniently
    roof_pitch: str = RoofPitch.THREE.value
    spray_foam: bool = False


class Door(BaseModel):
    id: int
    type: DoorType
    size: str  # "WxH" in feet, e.g. "3x7"
    side: Side
    offset: float = 0.0  # feet from wall centre, signed


class ContactInfo(BaseModel):
    """Customer contact block. Printed on the PDF, never priced or validated."""
    name: str = ""
    phone: str = ""
    address: str = ""
    email: str = ""


class QuoteResult(BaseModel):
    total: float
    formatted_total: str
    note: str
    breakdown: Optional[dict] = None
