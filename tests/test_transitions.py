import pytest

from core.dots import DotType
from core.transitions import TRANSITIONS, Direction, ScanContext, next_type

SEL = DotType.SELECTED
N = DotType.NORMAL
M = DotType.MEDIUM
S = DotType.SMALL
NO = DotType.NONE

FWD = Direction.FORWARD
BWD = Direction.BACKWARD


def test_table_covers_every_direction_and_type():
    assert set(TRANSITIONS) == {(d, t) for d in Direction for t in DotType}


def test_direction_between():
    assert Direction.between(2, 3) is FWD
    assert Direction.between(3, 2) is BWD


@pytest.mark.parametrize("direction", [FWD, BWD])
@pytest.mark.parametrize("neighbor", [None, SEL, N, M, S, NO])
def test_selected_always_becomes_normal(direction, neighbor):
    assert next_type(direction, SEL, neighbor) is N


def test_forward_normal_shrinks_only_first_in_scan():
    assert next_type(FWD, N, None, ScanContext(first_normal=True)) is M
    assert next_type(FWD, N, M, ScanContext(first_normal=False)) is N


@pytest.mark.parametrize("direction", [FWD, BWD])
def test_medium_next_to_normal_grows(direction):
    assert next_type(direction, M, N) is N
    assert next_type(direction, M, N, ScanContext(is_new_selection=True)) is SEL


@pytest.mark.parametrize("direction", [FWD, BWD])
@pytest.mark.parametrize("neighbor", [None, SEL, M, S, NO])
def test_medium_otherwise_shrinks(direction, neighbor):
    assert next_type(direction, M, neighbor) is S


@pytest.mark.parametrize("direction", [FWD, BWD])
def test_small_transitions(direction):
    assert next_type(direction, S, N) is M
    assert next_type(direction, S, SEL) is M
    assert next_type(direction, S, M) is NO
    assert next_type(direction, S, NO) is NO
    assert next_type(direction, S, None) is NO


def test_forward_placeholder_grows_while_pages_remain():
    assert next_type(FWD, NO, M, ScanContext(pages_ahead=True)) is S
    assert next_type(FWD, NO, S, ScanContext(pages_ahead=True)) is NO
    assert next_type(FWD, NO, M, ScanContext(pages_ahead=False)) is NO


def test_backward_placeholder_ignores_remaining_pages():
    assert next_type(BWD, NO, M, ScanContext(pages_ahead=False)) is S
    assert next_type(BWD, NO, S) is NO
    assert next_type(BWD, NO, None) is NO


def test_backward_normal_depends_on_successor():
    assert next_type(BWD, N, N) is N
    assert next_type(BWD, N, M) is N
    assert next_type(BWD, N, S) is M
    assert next_type(BWD, N, NO) is M
    assert next_type(BWD, N, SEL) is M
    # tail slot of a six-wide window
    assert next_type(BWD, N, None) is M


def test_backward_normal_ignores_scan_order_flag():
    assert next_type(BWD, N, N, ScanContext(first_normal=True)) is N
