from pydantic import BaseModel
from typing import Any, Optional, List, Dict
from .models import ColorGrade, DoorType, MoveDirection, RoofPitch, Side


class DimensionUpdate(BaseModel):
    # Raw form text; anything unparseable clamps to the minimum
    value: Any = None

class ColorUpdate(BaseModel):
    color: ColorGrade

class RoofPitchUpdate(BaseModel):
    roof_pitch: RoofPitch

class SprayFoamUpdate(BaseModel):
    spray_foam: bool

class ContactUpdate(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None

class DoorCreate(BaseModel):
    side: Side
    type: DoorType
    size: str

class DoorMove(BaseModel):
    direction: MoveDirection

class DoorOut(BaseModel):
    id: int
    type: DoorType
    size: str
    side: Side
    offset: float

class BuildingSpecOut(BaseModel):
    sidewall_height: float
    length: float
    width: float
    color: ColorGrade
    roof_pitch: str
    spray_foam: bool

class ContactOut(BaseModel):
    name: str
    phone: str
    address: str
    email: str

class QuoteOut(BaseModel):
    total: float
    formatted_total: str
    note: str
    breakdown: Optional[dict] = None

class SessionState(BaseModel):
    session_id: str
    created_at: str
    spec: BuildingSpecOut
    doors: Dict[Side, List[DoorOut]]
    contact: ContactOut
    error: str = ""
    quote: Optional[QuoteOut] = None
