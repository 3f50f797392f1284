"""
Tests for block geometry and parity slot placement.
"""

import pytest

from ParityGrid.errors import InvalidGeometryError
from ParityGrid.protocol.layout import (
    PARITY_LAYOUT,
    Axis,
    BlockGeometry,
    check_geometry,
    data_positions,
    reserved_positions,
)


def test_reserved_positions_reference_block():
    assert reserved_positions(16) == [1, 2, 4, 8]


def test_reserved_positions_larger_block():
    """Column slots stay on row 0, row slots stay on column 0."""
    assert reserved_positions(64) == [1, 2, 8, 16]
    assert reserved_positions(256) == [1, 2, 16, 32]


def test_data_positions_reference_block():
    assert data_positions(16) == [3, 5, 6, 7, 9, 10, 11, 12, 13, 14, 15]


def test_data_positions_skip_zero_and_reserved():
    for length in (16, 64, 256):
        slots = data_positions(length)
        assert 0 not in slots
        assert not set(slots) & set(reserved_positions(length))
        assert len(slots) == length - 1 - len(PARITY_LAYOUT)
        assert slots == sorted(slots)


def test_layout_order_is_columns_then_rows():
    assert [(g.axis, g.index_bit) for g in PARITY_LAYOUT] == [
        (Axis.COLUMN, 0),
        (Axis.COLUMN, 1),
        (Axis.ROW, 0),
        (Axis.ROW, 1),
    ]


def test_group_indices():
    col_bit0, col_bit1, row_bit0, row_bit1 = PARITY_LAYOUT
    assert col_bit0.indices(4) == [1, 3]
    assert col_bit1.indices(4) == [2, 3]
    assert row_bit0.indices(8) == [1, 3, 5, 7]
    assert row_bit1.indices(8) == [2, 3, 6, 7]


@pytest.mark.parametrize("side", [4, 8, 16])
def test_each_slot_lies_only_in_its_own_group(side):
    """
    Writing a parity bit must only affect the group it belongs to,
    otherwise encoding could not zero every group at once.
    """
    geometry = BlockGeometry.from_length(side * side)
    for owner, slot in zip(PARITY_LAYOUT, geometry.reserved):
        row, col = geometry.locate(slot)
        for group in PARITY_LAYOUT:
            index = col if group.axis is Axis.COLUMN else row
            covered = index in group.indices(side)
            assert covered == (group is owner)


def test_position_zero_is_in_no_group():
    for group in PARITY_LAYOUT:
        assert 0 not in group.indices(4)


@pytest.mark.parametrize("length", [16, 64, 256, 1024])
def test_check_geometry_accepts_power_of_two_squares(length):
    side = check_geometry(length)
    assert side * side == length


@pytest.mark.parametrize("length", [12, 15, 17, 36, 100, 4, 1, 0, -16])
def test_check_geometry_rejects_bad_lengths(length):
    with pytest.raises(InvalidGeometryError) as exc_info:
        check_geometry(length)
    assert exc_info.value.block_length == length


@pytest.mark.parametrize("length", [16.0, "16", None, True])
def test_check_geometry_rejects_non_integers(length):
    with pytest.raises(InvalidGeometryError):
        check_geometry(length)


def test_reserved_positions_rejects_bad_geometry():
    with pytest.raises(InvalidGeometryError):
        reserved_positions(12)


def test_block_geometry():
    geometry = BlockGeometry.from_length(16)
    assert geometry.side == 4
    assert geometry.reserved == (1, 2, 4, 8)
    assert geometry.data_capacity == 11
    assert geometry.locate(9) == (2, 1)
    with pytest.raises(IndexError):
        geometry.locate(16)
