"""
Quote Session API - the form's in-process API over HTTP.

POST   /api/session/start                                 - New session with default form values
GET    /api/session/{id}                                  - Current form state, doors, error, last quote
PUT    /api/session/{id}/dimensions/{field}               - Set sidewall_height | length | width (clamped)
PUT    /api/session/{id}/color                            - normal | premium
PUT    /api/session/{id}/roof-pitch                       - 1/12 .. 4/12
PUT    /api/session/{id}/spray-foam                       - on/off
PUT    /api/session/{id}/contact                          - Customer name/phone/address/email
POST   /api/session/{id}/doors                            - Add a door (422 if infeasible)
POST   /api/session/{id}/doors/{side}/{door_id}/move      - Nudge a door left/right
DELETE /api/session/{id}/doors/{side}/{door_id}           - Remove a door
POST   /api/session/{id}/quote                            - Compute the quote
DELETE /api/session/{id}                                  - Discard the session
"""

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..models import Dimension, Side
from ..session import QuoteSession, store
from ..validator import InfeasibleDoorPlacement

router = APIRouter(prefix="/session", tags=["quote-session"])


def get_session(session_id: str) -> QuoteSession:
    """Resolve a session id, or 404."""
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Session not found")


# --- Endpoints ---

@router.post("/start", response_model=schemas.SessionState)
def start_session():
    session = store.create()
    return session.snapshot()


@router.get("/{session_id}", response_model=schemas.SessionState)
def session_status(session: QuoteSession = Depends(get_session)):
    return session.snapshot()


@router.delete("/{session_id}")
def end_session(session_id: str):
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"deleted": session_id}


@router.put("/{session_id}/dimensions/{field}", response_model=schemas.SessionState)
def set_dimension(
    field: Dimension,
    request: schemas.DimensionUpdate,
    session: QuoteSession = Depends(get_session),
):
    """Never rejects the value itself: garbage becomes the field minimum."""
    session.set_dimension(field, request.value)
    return session.snapshot()


@router.put("/{session_id}/color", response_model=schemas.SessionState)
def set_color(request: schemas.ColorUpdate, session: QuoteSession = Depends(get_session)):
    session.set_color(request.color)
    return session.snapshot()


@router.put("/{session_id}/roof-pitch", response_model=schemas.SessionState)
def set_roof_pitch(request: schemas.RoofPitchUpdate, session: QuoteSession = Depends(get_session)):
    session.set_roof_pitch(request.roof_pitch)
    return session.snapshot()


@router.put("/{session_id}/spray-foam", response_model=schemas.SessionState)
def set_spray_foam(request: schemas.SprayFoamUpdate, session: QuoteSession = Depends(get_session)):
    session.set_spray_foam(request.spray_foam)
    return session.snapshot()


@router.put("/{session_id}/contact", response_model=schemas.SessionState)
def set_contact(request: schemas.ContactUpdate, session: QuoteSession = Depends(get_session)):
    session.set_contact(**request.model_dump())
    return session.snapshot()


@router.post("/{session_id}/doors", response_model=schemas.DoorOut)
def add_door(request: schemas.DoorCreate, session: QuoteSession = Depends(get_session)):
    """
    Add a door at the centre of a wall.

    A garage door needs the sidewall to be at least 2 ft taller than the
    door. If not, returns 422 with the user-facing message and changes nothing.
    """
    try:
        door = session.add_door(request.side, request.type, request.size)
    except InfeasibleDoorPlacement as e:
        raise HTTPException(status_code=422, detail=str(e))
    return door.model_dump()


@router.post("/{session_id}/doors/{side}/{door_id}/move", response_model=schemas.DoorOut)
def move_door(
    side: Side,
    door_id: int,
    request: schemas.DoorMove,
    session: QuoteSession = Depends(get_session),
):
    door = session.move_door(side, door_id, request.direction)
    if door is None:
        raise HTTPException(status_code=404, detail="Door not found")
    return door.model_dump()


@router.delete("/{session_id}/doors/{side}/{door_id}", response_model=schemas.SessionState)
def remove_door(side: Side, door_id: int, session: QuoteSession = Depends(get_session)):
    """Removing a door that isn't there is a no-op."""
    session.remove_door(side, door_id)
    return session.snapshot()


@router.post("/{session_id}/quote", response_model=schemas.QuoteOut)
def get_quote(session: QuoteSession = Depends(get_session)):
    return session.get_quote().model_dump()
