"""Per-slot type transitions applied when the dot row slides by one slot.

Each page-forward pass shifts the size gradient ``SEL > N > M > S > NO`` one
slot towards the head of the window; a page-backward pass shifts it towards
the tail. A slot's next type depends on its current type and on the type
already assigned to its neighbour in scan order: the predecessor when moving
forward (head-to-tail scan), the successor when moving backward
(tail-to-head scan).
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional

from .dots import DotType

__all__ = ["Direction", "ScanContext", "next_type", "TRANSITIONS"]


class Direction(enum.Enum):
    FORWARD = 1
    BACKWARD = -1

    @classmethod
    def between(cls, old_page: int, new_page: int) -> "Direction":
        return cls.FORWARD if new_page > old_page else cls.BACKWARD


@dataclass(frozen=True)
class ScanContext:
    """Pass-level facts a rule may consult.

    is_new_selection:
        The slot being typed is where the selection lands.
    first_normal:
        No ``NORMAL`` slot has been met yet in this forward scan.
    pages_ahead:
        More than ``small_dot_run_length`` pages lie past the current one,
        so a placeholder may still grow into a small dot.
    """

    is_new_selection: bool = False
    first_normal: bool = True
    pages_ahead: bool = True


Rule = Callable[[Optional[DotType], ScanContext], DotType]

_FULL_SIZE = (DotType.NORMAL, DotType.SELECTED)


def _to(dot_type: DotType) -> Rule:
    return lambda neighbor, ctx: dot_type


def _medium(neighbor: Optional[DotType], ctx: ScanContext) -> DotType:
    if neighbor is DotType.NORMAL:
        return DotType.SELECTED if ctx.is_new_selection else DotType.NORMAL
    return DotType.SMALL


def _small(neighbor: Optional[DotType], ctx: ScanContext) -> DotType:
    if neighbor in _FULL_SIZE:
        return DotType.MEDIUM
    return DotType.NONE


def _forward_normal(neighbor: Optional[DotType], ctx: ScanContext) -> DotType:
    return DotType.MEDIUM if ctx.first_normal else DotType.NORMAL


def _forward_none(neighbor: Optional[DotType], ctx: ScanContext) -> DotType:
    if ctx.pages_ahead and neighbor is DotType.MEDIUM:
        return DotType.SMALL
    return DotType.NONE


def _backward_normal(neighbor: Optional[DotType], ctx: ScanContext) -> DotType:
    # The tail slot of a six-wide window has no successor and shrinks.
    if neighbor in (DotType.NORMAL, DotType.MEDIUM):
        return DotType.NORMAL
    return DotType.MEDIUM


def _backward_none(neighbor: Optional[DotType], ctx: ScanContext) -> DotType:
    return DotType.SMALL if neighbor is DotType.MEDIUM else DotType.NONE


TRANSITIONS: dict[tuple[Direction, DotType], Rule] = {
    (Direction.FORWARD, DotType.SELECTED): _to(DotType.NORMAL),
    (Direction.FORWARD, DotType.NORMAL): _forward_normal,
    (Direction.FORWARD, DotType.MEDIUM): _medium,
    (Direction.FORWARD, DotType.SMALL): _small,
    (Direction.FORWARD, DotType.NONE): _forward_none,
    (Direction.BACKWARD, DotType.SELECTED): _to(DotType.NORMAL),
    (Direction.BACKWARD, DotType.NORMAL): _backward_normal,
    (Direction.BACKWARD, DotType.MEDIUM): _medium,
    (Direction.BACKWARD, DotType.SMALL): _small,
    (Direction.BACKWARD, DotType.NONE): _backward_none,
}


def next_type(
    direction: Direction,
    current: DotType,
    neighbor: Optional[DotType],
    context: ScanContext | None = None,
) -> DotType:
    """Type a slot takes after one slide in ``direction``.

    ``neighbor`` is ``None`` for the slot at the leading edge of the scan.
    """
    rule = TRANSITIONS[(direction, current)]
    return rule(neighbor, context or ScanContext())
