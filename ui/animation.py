from __future__ import annotations

from dataclasses import dataclass

from PySide6 import QtCore


@dataclass
class _SlotMotion:
    start_x: float
    start_radius: float
    end_x: float
    end_radius: float
    animation: QtCore.QVariantAnimation


class SlotAnimator(QtCore.QObject):
    """Interpolate dot slots towards their targets.

    Each slot keeps its displayed ``(center_x, radius)``. A new animated
    target stops whatever motion the slot had in flight and starts from the
    displayed values, so the most recent target always wins.
    """

    changed = QtCore.Signal()

    def __init__(self, duration_ms: int = 200, parent: QtCore.QObject | None = None) -> None:
        super().__init__(parent)
        self._duration_ms = max(0, int(duration_ms))
        self._displayed: dict[int, tuple[float, float]] = {}
        self._motions: dict[int, _SlotMotion] = {}

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    def set_duration(self, duration_ms: int) -> None:
        self._duration_ms = max(0, int(duration_ms))

    def displayed(self, slot_id: int, default: tuple[float, float]) -> tuple[float, float]:
        return self._displayed.get(slot_id, default)

    def is_running(self, slot_id: int) -> bool:
        motion = self._motions.get(slot_id)
        return (
            motion is not None
            and motion.animation.state() == QtCore.QAbstractAnimation.State.Running
        )

    def any_running(self) -> bool:
        return any(self.is_running(slot_id) for slot_id in self._motions)

    def jump(self, slot_id: int, center_x: float, radius: float) -> None:
        self._stop(slot_id)
        self._displayed[slot_id] = (center_x, radius)
        self.changed.emit()

    def animate(self, slot_id: int, center_x: float, radius: float) -> None:
        start_x, start_radius = self._displayed.get(slot_id, (center_x, radius))
        self._stop(slot_id)
        if self._duration_ms == 0:
            self.jump(slot_id, center_x, radius)
            return

        animation = QtCore.QVariantAnimation(self)
        animation.setStartValue(0.0)
        animation.setEndValue(1.0)
        animation.setDuration(self._duration_ms)
        motion = _SlotMotion(start_x, start_radius, center_x, radius, animation)
        animation.valueChanged.connect(
            lambda value, sid=slot_id, m=motion: self._apply(sid, m, float(value))
        )
        animation.finished.connect(lambda sid=slot_id, m=motion: self._finish(sid, m))
        self._motions[slot_id] = motion
        animation.start()

    def finish_all(self) -> None:
        """Jump every running slot to its end values."""
        for slot_id, motion in list(self._motions.items()):
            self._stop(slot_id)
            self._displayed[slot_id] = (motion.end_x, motion.end_radius)
        self.changed.emit()

    def clear(self) -> None:
        for slot_id in list(self._motions):
            self._stop(slot_id)
        self._displayed.clear()
        self.changed.emit()

    def _apply(self, slot_id: int, motion: _SlotMotion, fraction: float) -> None:
        if self._motions.get(slot_id) is not motion:
            return
        x = motion.start_x + (motion.end_x - motion.start_x) * fraction
        radius = motion.start_radius + (motion.end_radius - motion.start_radius) * fraction
        self._displayed[slot_id] = (x, radius)
        self.changed.emit()

    def _finish(self, slot_id: int, motion: _SlotMotion) -> None:
        if self._motions.get(slot_id) is not motion:
            return
        self._displayed[slot_id] = (motion.end_x, motion.end_radius)
        del self._motions[slot_id]
        motion.animation.deleteLater()
        self.changed.emit()

    def _stop(self, slot_id: int) -> None:
        motion = self._motions.pop(slot_id, None)
        if motion is None:
            return
        motion.animation.stop()
        motion.animation.deleteLater()
