"""
Door Registry - per-wall ordered door placements.

Insertion order is display order. Ids come from a counter owned by the
registry: strictly increasing, never reused, even after a door is removed.
Offsets are clamped to the wall at move time only; a new door always starts
centred at offset 0.
"""

import logging
from typing import Optional

from .models import SIDES, BuildingSpec, Dimension, Door, DoorType, MoveDirection, Side
from .validator import check_door_placement, normalize_dimension, parse_door_size

logger = logging.getLogger(__name__)


def wall_span(side, spec: BuildingSpec) -> float:
    """Length of the wall a door sits on: left/right run the building length, front/back the width."""
    if Side(side) in (Side.LEFT, Side.RIGHT):
        return normalize_dimension(Dimension.LENGTH, spec.length)
    return normalize_dimension(Dimension.WIDTH, spec.width)


class DoorRegistry:
    """Owns every Door in a session, keyed by wall side."""

    MOVE_STEP_FT = 0.5
    EDGE_MARGIN_FT = 0.5  # clearance between a door edge and the wall corner

    def __init__(self):
        self._doors = {side: [] for side in SIDES}
        self._last_id = 0

    # --- Queries ---

    def doors(self, side) -> list:
        """Doors on one wall, in insertion order."""
        return list(self._doors[Side(side)])

    def all_doors(self) -> list:
        """Every door across the four walls (front, back, left, right)."""
        return [door for side in SIDES for door in self._doors[side]]

    def get(self, side, door_id: int) -> Optional[Door]:
        for door in self._doors[Side(side)]:
            if door.id == door_id:
                return door
        return None

    def count(self, door_type) -> int:
        door_type = DoorType(door_type)
        return sum(1 for d in self.all_doors() if d.type == door_type)

    def snapshot(self) -> dict:
        """{side: [door dict, ...]} for serialization and PDF export."""
        return {
            side.value: [d.model_dump(mode="json") for d in self._doors[side]]
            for side in SIDES
        }

    # --- Mutations ---

    def add_door(self, side, door_type, size: str, sidewall_height: float) -> Door:
        """
        Append a door at offset 0 on the given wall.

        Raises InfeasibleDoorPlacement for a garage door without enough
        header clearance. On failure nothing changes, including the id counter.
        """
        side = Side(side)
        door_type = DoorType(door_type)
        check_door_placement(sidewall_height, door_type, size)

        self._last_id += 1
        door = Door(id=self._last_id, type=door_type, size=size, side=side, offset=0.0)
        self._doors[side].append(door)
        logger.info("Added %s door %s (#%d) on %s wall", door_type.value, size, door.id, side.value)
        return door

    def move_door(self, side, door_id: int, direction, span: float) -> Optional[Door]:
        """
        Nudge a door one step left or right, clamped so its edges stay at
        least EDGE_MARGIN_FT inside the wall corners.

        span is the full wall length (see wall_span). Other doors on the same
        wall are not considered - doors may overlap. Returns None for an
        unknown id.
        """
        door = self.get(side, door_id)
        if door is None:
            return None

        step = -self.MOVE_STEP_FT if MoveDirection(direction) == MoveDirection.LEFT else self.MOVE_STEP_FT
        door_width, _ = parse_door_size(door.size)
        half_span = span / 2.0
        low = -half_span + door_width / 2.0 + self.EDGE_MARGIN_FT
        high = half_span - door_width / 2.0 - self.EDGE_MARGIN_FT

        # A door wider than the usable wall pins to the low bound
        door.offset = max(low, min(high, door.offset + step))
        return door

    def remove_door(self, side, door_id: int) -> bool:
        """Delete a door by id. Returns False (and does nothing) if it isn't there."""
        side = Side(side)
        remaining = [d for d in self._doors[side] if d.id != door_id]
        removed = len(remaining) != len(self._doors[side])
        self._doors[side] = remaining
        if removed:
            logger.info("Removed door #%d from %s wall", door_id, side.value)
        return removed
