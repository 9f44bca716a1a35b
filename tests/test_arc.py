from __future__ import annotations
import pytest

from eventflow_arcstar.arc import expand_arc, find_freshest, is_arc_valid


def test_find_freshest_first_max_wins():
    assert find_freshest([5, 9, 9, 1]) == (1, 9)
    assert find_freshest([3, 1, 3]) == (0, 3)


def test_find_freshest_all_zero():
    assert find_freshest([0] * 16) == (0, 0)


def test_expand_constant_ring_covers_everything():
    assert expand_arc([0] * 16, 3, 0) == 16
    assert expand_arc([5] * 20, 4, 0) == 20


def test_expand_plateau():
    vals = [9, 7, 7, 7, 7, 7] + [0] * 10
    idx, _ = find_freshest(vals)
    assert expand_arc(vals, 3, idx) == 6


def test_expand_plateau_counter_clockwise():
    vals = [0] * 10 + [7, 7, 7, 7, 7, 9]
    idx, _ = find_freshest(vals)
    assert idx == 15
    assert expand_arc(vals, 3, idx) == 6


def test_expand_outside_corner_ring():
    # radius-3 ring of a north-east outside corner
    vals = [97, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 85, 84, 88, 92]
    idx, _ = find_freshest(vals)
    assert expand_arc(vals, 3, idx) == 3


def test_expand_straight_edge_ring():
    vals = [7, 0, 0, 0, 0, 0, 0, 0, 7, 7, 7, 7, 7, 7, 7, 7]
    idx, _ = find_freshest(vals)
    assert idx == 0
    assert expand_arc(vals, 3, idx) == 9


def test_expand_never_shorter_than_min_arc():
    vals = [10, 9, 8, 7, 6] + [0] * 11
    assert expand_arc(vals, 3, 0) == 3


@pytest.mark.parametrize(
    "length,expected",
    [(3, True), (6, True), (7, False), (9, False), (10, True), (13, True), (14, False), (16, False)],
)
def test_ring3_validity(length, expected):
    assert is_arc_valid(length, 16, 3, 6) is expected


@pytest.mark.parametrize(
    "length,expected",
    [(4, True), (8, True), (9, False), (11, False), (12, True), (16, True), (17, False), (20, False)],
)
def test_ring4_validity(length, expected):
    assert is_arc_valid(length, 20, 4, 8) is expected
