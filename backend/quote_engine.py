"""
Quote Engine - building spec + doors in, price and explanatory note out.

Pure math, no side effects. Surcharges are additive; the premium color
multiplier is applied last, to the whole running total.

Estimation shortcuts that are intentional and must not be "fixed" silently:
- spray foam counts only one gable end
- spray foam wall area does not subtract door/window openings
"""

import logging
import math

from .models import BuildingSpec, ColorGrade, Dimension, DoorType, QuoteResult
from .validator import normalize_dimension, parse_number

logger = logging.getLogger(__name__)

BASE_NOTE = "Includes concrete and metal building."
SPRAY_FOAM_NOTE = 'spray foam (1" closed cell on whole building)'


def format_currency(amount: float) -> str:
    """en-US style: 2 decimal places with thousands separators (42,000.00)."""
    return f"{amount:,.2f}"


def pitch_ratio(roof_pitch) -> float:
    """Rise per foot of run: "3/12" -> 0.25. An unparseable numerator counts as a flat roof."""
    numerator = str(getattr(roof_pitch, "value", roof_pitch) or "").split("/")[0]
    return parse_number(numerator) / 12.0


class QuoteEngine:
    """Computes a QuoteResult from a BuildingSpec and a DoorRegistry."""

    PRICE_PER_SQFT = 35.00            # concrete + metal building, per sq ft of footprint
    STANDARD_SIDEWALL_FT = 12.0       # heights above this pay the extra-height surcharge
    EXTRA_HEIGHT_PER_SQFT = 6.00      # per sq ft of perimeter wall above standard
    WALK_DOOR_PRICE = 800.00
    GARAGE_DOOR_PRICE = 2000.00
    SPRAY_FOAM_PER_SQFT = 2.00
    PREMIUM_COLOR_MULTIPLIER = 1.15

    def build_quote(self, spec: BuildingSpec, registry) -> QuoteResult:
        """Price the building. Always returns a result - never raises on bad input."""
        breakdown = self.breakdown(spec, registry)
        total = breakdown["total"]
        note = self.build_note(spec, registry)
        logger.info("Quoted %s (%s)", format_currency(total), note)
        return QuoteResult(
            total=total,
            formatted_total=format_currency(total),
            note=note,
            breakdown=breakdown,
        )

    def breakdown(self, spec: BuildingSpec, registry) -> dict:
        """
        Every intermediate amount of the quote, in the order it is applied.

        Returns:
            {
                length, width, sidewall_height: clamped dimensions,
                area: footprint sq ft,
                base, extra_height, doors, spray_foam: additive amounts,
                spray_foam_sq_ft: float,
                subtotal: sum of the additive amounts,
                color_multiplier: 1.0 or 1.15,
                total: subtotal * color_multiplier, rounded to cents,
            }
        """
        # Re-clamp even though the setters already did
        sidewall = normalize_dimension(Dimension.SIDEWALL_HEIGHT, spec.sidewall_height)
        width = normalize_dimension(Dimension.WIDTH, spec.width)
        length = normalize_dimension(Dimension.LENGTH, spec.length)

        area = length * width
        base = area * self.PRICE_PER_SQFT
        extra_height = self._extra_height_surcharge(length, width, sidewall)
        doors = self._door_surcharge(registry)

        foam_sq_ft = 0.0
        spray_foam = 0.0
        if spec.spray_foam:
            foam_sq_ft = self.spray_foam_sq_ft(length, width, sidewall, spec.roof_pitch)
            spray_foam = foam_sq_ft * self.SPRAY_FOAM_PER_SQFT

        subtotal = base + extra_height + doors + spray_foam
        multiplier = self.PREMIUM_COLOR_MULTIPLIER if spec.color == ColorGrade.PREMIUM else 1.0

        return {
            "length": length,
            "width": width,
            "sidewall_height": sidewall,
            "area": area,
            "base": round(base, 2),
            "extra_height": round(extra_height, 2),
            "doors": round(doors, 2),
            "spray_foam": round(spray_foam, 2),
            "spray_foam_sq_ft": round(foam_sq_ft, 1),
            "subtotal": round(subtotal, 2),
            "color_multiplier": multiplier,
            "total": round(subtotal * multiplier, 2),
        }

    def _extra_height_surcharge(self, length: float, width: float, sidewall: float) -> float:
        """Perimeter wall area above the standard sidewall height, priced per sq ft."""
        if sidewall <= self.STANDARD_SIDEWALL_FT:
            return 0.0
        perimeter = 2 * (length + width)
        return perimeter * (sidewall - self.STANDARD_SIDEWALL_FT) * self.EXTRA_HEIGHT_PER_SQFT

    def _door_surcharge(self, registry) -> float:
        return (
            registry.count(DoorType.WALK) * self.WALK_DOOR_PRICE
            + registry.count(DoorType.GARAGE) * self.GARAGE_DOOR_PRICE
        )

    def spray_foam_sq_ft(self, length: float, width: float, sidewall: float, roof_pitch) -> float:
        """
        Envelope area to foam: both roof slopes, the four sidewalls at full
        height, and a single gable triangle.
        """
        rise = (width / 2) * pitch_ratio(roof_pitch)
        half_span = math.sqrt((width / 2) ** 2 + rise ** 2)  # ridge to eave
        roof_area = half_span * 2 * length
        wall_area = 2 * (width * sidewall + length * sidewall)
        gable_area = width * rise
        return roof_area + wall_area + gable_area

    def build_note(self, spec: BuildingSpec, registry) -> str:
        """Base phrase plus an "Includes ..." sentence listing the add-ons."""
        addons = []
        all_doors = registry.all_doors()

        for door_type in (DoorType.WALK, DoorType.GARAGE):
            matching = [d for d in all_doors if d.type == door_type]
            if matching:
                addons.append(self._door_clause(door_type, matching))

        if spec.spray_foam:
            addons.append(SPRAY_FOAM_NOTE)

        note = BASE_NOTE
        if addons:
            note += " Includes " + " and ".join(addons) + "."
        return note

    def _door_clause(self, door_type: DoorType, doors: list) -> str:
        """'2 walk doors (3x7, 4x7)' - distinct sizes in first-seen order."""
        sizes = []
        for door in doors:
            if door.size not in sizes:
                sizes.append(door.size)
        plural = "s" if len(doors) > 1 else ""
        return f"{len(doors)} {door_type.value} door{plural} ({', '.join(sizes)})"
