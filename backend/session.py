"""
Quote session - the form state and the single controller around it.

One QuoteSession holds everything the user has entered: building spec,
doors, contact details, the current error banner and the last quote.
Every edit goes through a typed setter; there is no field-name dispatch.

SessionStore keeps sessions in memory only, keyed by a uuid4 string. Sessions
older than SESSION_TTL_MINUTES are purged whenever a new one is created.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Optional

from .config import settings
from .door_registry import DoorRegistry, wall_span
from .models import BuildingSpec, ColorGrade, ContactInfo, Dimension, QuoteResult
from .quote_engine import QuoteEngine
from .validator import InfeasibleDoorPlacement, normalize_dimension

logger = logging.getLogger(__name__)

# Stateless - shared by all sessions
engine = QuoteEngine()


class QuoteSession:

    def __init__(self, session_id: Optional[str] = None):
        self.id = session_id or str(uuid.uuid4())
        self.created_at = datetime.utcnow()
        self.spec = BuildingSpec()
        self.doors = DoorRegistry()
        self.contact = ContactInfo()
        self.error = ""
        self.last_quote: Optional[QuoteResult] = None

    # --- Dimension setters (clamp on edit, never error) ---

    def set_sidewall_height(self, raw) -> float:
        self.spec.sidewall_height = normalize_dimension(Dimension.SIDEWALL_HEIGHT, raw)
        return self.spec.sidewall_height

    def set_length(self, raw) -> float:
        self.spec.length = normalize_dimension(Dimension.LENGTH, raw)
        return self.spec.length

    def set_width(self, raw) -> float:
        self.spec.width = normalize_dimension(Dimension.WIDTH, raw)
        return self.spec.width

    def set_dimension(self, field, raw) -> float:
        """Route a Dimension to its setter. Used by the HTTP layer."""
        setters = {
            Dimension.SIDEWALL_HEIGHT: self.set_sidewall_height,
            Dimension.LENGTH: self.set_length,
            Dimension.WIDTH: self.set_width,
        }
        return setters[Dimension(field)](raw)

    # --- Option setters ---

    def set_color(self, value) -> None:
        self.spec.color = ColorGrade(value)

    def set_roof_pitch(self, value) -> None:
        self.spec.roof_pitch = str(getattr(value, "value", value))

    def set_spray_foam(self, enabled: bool) -> None:
        self.spec.spray_foam = bool(enabled)

    def set_contact(self, name=None, phone=None, address=None, email=None) -> None:
        """Update any subset of the contact fields."""
        updates = {"name": name, "phone": phone, "address": address, "email": email}
        for field, value in updates.items():
            if value is not None:
                setattr(self.contact, field, str(value))

    # --- Doors ---

    def add_door(self, side, door_type, size: str):
        """
        Add a door to a wall.

        On an infeasible garage door the message is kept in self.error for
        display and InfeasibleDoorPlacement is re-raised. The registry is
        left untouched.
        """
        self.error = ""
        try:
            return self.doors.add_door(side, door_type, size, self.spec.sidewall_height)
        except InfeasibleDoorPlacement as e:
            self.error = str(e)
            raise

    def move_door(self, side, door_id: int, direction):
        return self.doors.move_door(side, door_id, direction, wall_span(side, self.spec))

    def remove_door(self, side, door_id: int) -> bool:
        return self.doors.remove_door(side, door_id)

    # --- Quote ---

    def get_quote(self) -> QuoteResult:
        self.error = ""
        self.last_quote = engine.build_quote(self.spec, self.doors)
        return self.last_quote

    def snapshot(self) -> dict:
        """Everything the UI or the PDF exporter needs, as plain data."""
        return {
            "session_id": self.id,
            "created_at": self.created_at.isoformat(),
            "spec": self.spec.model_dump(mode="json"),
            "doors": self.doors.snapshot(),
            "contact": self.contact.model_dump(),
            "error": self.error,
            "quote": self.last_quote.model_dump() if self.last_quote else None,
        }


class SessionStore:
    """In-memory session map. Sessions vanish when the process exits."""

    def __init__(self, ttl_minutes: Optional[int] = None):
        self._sessions = {}
        self.ttl = timedelta(
            minutes=settings.SESSION_TTL_MINUTES if ttl_minutes is None else ttl_minutes
        )

    def create(self) -> QuoteSession:
        self.purge_expired()
        session = QuoteSession()
        self._sessions[session.id] = session
        logger.info("Started quote session %s", session.id)
        return session

    def get(self, session_id: str) -> QuoteSession:
        """Raises KeyError for an unknown id."""
        return self._sessions[session_id]

    def delete(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        """Drop sessions older than the TTL. Returns how many were dropped."""
        cutoff = (now or datetime.utcnow()) - self.ttl
        expired = [sid for sid, s in self._sessions.items() if s.created_at < cutoff]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Purged %d expired quote sessions", len(expired))
        return len(expired)

    def __len__(self):
        return len(self._sessions)


store = SessionStore()
