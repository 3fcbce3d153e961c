"""
Validator tests - dimension normalization, door size parsing, garage clearance.

Tests:
1-6.   normalize_dimension leniency (garbage, empty, negative, NaN, no upper bound)
7-9.   parse_door_size
10-14. Garage door clearance rule
"""

import math

import pytest

from backend.models import Dimension, DoorType
from backend.validator import (
    InfeasibleDoorPlacement,
    MIN_DIMENSIONS,
    can_add_garage_door,
    check_door_placement,
    normalize_dimension,
    parse_door_size,
    parse_number,
)


# ============================================================
# 1-6. normalize_dimension
# ============================================================

@pytest.mark.parametrize("raw", ["", None, "abc", "-50", -3, float("nan"), "nan", "  "])
def test_normalize_never_below_minimum(raw):
    """Bad input silently becomes the field minimum, for every field."""
    for field, minimum in MIN_DIMENSIONS.items():
        assert normalize_dimension(field, raw) == minimum


def test_normalize_minimums():
    assert normalize_dimension(Dimension.SIDEWALL_HEIGHT, "0") == 8
    assert normalize_dimension(Dimension.WIDTH, "0") == 12
    assert normalize_dimension(Dimension.LENGTH, "0") == 20


def test_normalize_passes_valid_values():
    assert normalize_dimension(Dimension.SIDEWALL_HEIGHT, "14") == 14
    assert normalize_dimension(Dimension.WIDTH, "40.5") == 40.5
    assert normalize_dimension(Dimension.LENGTH, 30) == 30


def test_normalize_has_no_upper_bound():
    assert normalize_dimension(Dimension.LENGTH, "1000") == 1000


def test_normalize_accepts_field_name_strings():
    assert normalize_dimension("sidewall_height", "5") == 8


def test_normalize_reads_leading_number():
    """'25ft' reads as 25, like a browser number field."""
    assert normalize_dimension(Dimension.LENGTH, "25ft") == 25
    assert normalize_dimension(Dimension.LENGTH, "ft25") == 20


def test_normalize_infinite_input_clamps_to_minimum():
    assert normalize_dimension(Dimension.LENGTH, "1e400") == 20
    assert normalize_dimension(Dimension.WIDTH, "Infinity") == 12
    assert normalize_dimension(Dimension.SIDEWALL_HEIGHT, float("inf")) == 8


def test_parse_number_rejects_infinity():
    assert parse_number(float("inf")) == 0.0
    assert parse_number(True) == 0.0
    assert not math.isnan(parse_number("nan"))


# ============================================================
# 7-9. parse_door_size
# ============================================================

def test_parse_door_size():
    assert parse_door_size("3x7") == (3.0, 7.0)
    assert parse_door_size("10x10") == (10.0, 10.0)
    assert parse_door_size("12X14") == (12.0, 14.0)


def test_parse_door_size_missing_height():
    assert parse_door_size("10") == (10.0, 0.0)


def test_parse_door_size_garbage():
    assert parse_door_size("big") == (0.0, 0.0)
    assert parse_door_size("") == (0.0, 0.0)


# ============================================================
# 10-14. Garage door clearance
# ============================================================

def test_can_add_garage_door_boundary():
    assert can_add_garage_door(12, 10) is True
    assert can_add_garage_door(11.5, 10) is False
    assert can_add_garage_door(10, 10) is False


def test_check_placement_rejects_short_sidewall():
    with pytest.raises(InfeasibleDoorPlacement) as exc:
        check_door_placement(10, DoorType.GARAGE, "10x10")
    assert str(exc.value) == (
        "Cannot add 10x10 garage door: sidewall must be at least 2' taller than door height."
    )
    assert exc.value.size == "10x10"


def test_check_placement_allows_exact_clearance():
    check_door_placement(12, DoorType.GARAGE, "10x10")


def test_walk_doors_have_no_height_check():
    """A 3x7 walk door on the minimum 8' wall, even a silly tall one, passes."""
    check_door_placement(8, DoorType.WALK, "3x7")
    check_door_placement(8, DoorType.WALK, "3x20")


def test_check_placement_clamps_sidewall_first():
    """A garbage sidewall counts as the 8' minimum, which fits a 6' tall garage door."""
    check_door_placement("junk", "garage", "8x6")
    with pytest.raises(InfeasibleDoorPlacement):
        check_door_placement("junk", "garage", "8x7")


def test_infeasible_placement_is_value_error():
    assert issubclass(InfeasibleDoorPlacement, ValueError)
