"""Frame-driven tween engine.

A :class:`Tween` is a chain of steps run one after another against a single
target object: ``to`` interpolates attributes, ``delay`` waits, ``call`` runs
a continuation. Tweens do nothing on their own; a :class:`TweenManager`
advances every running tween once per frame via ``update(dt)``.

Usage::

    tweens = TweenManager()
    tween(panel, tweens).to(0.3, {'scale': 1.0}, easing='backOut').call(done).start()
    # each frame
    tweens.update(dt)

Starting a tween supersedes any tween still running on the same target.
"""
from __future__ import annotations
import math
from typing import Any, Callable, Optional, Union
from popups.core.easing import EasingFn, resolve

# Steps finishing within this many seconds of the frame budget count as finished,
# so ratio arithmetic (0.2 * d + 0.8 * d) never lands a hair past d.
FINISH_TOLERANCE = 1e-9


class _Step:
    duration: float = 0.0

    def begin(self, target) -> None:
        pass

    def apply(self, target, t: float) -> None:
        pass

    def finish(self, target) -> None:
        pass


class _ToStep(_Step):
    def __init__(self, duration: float, props: dict[str, float], easing: EasingFn):
        self.duration = duration
        self.props = dict(props)
        self.easing = easing
        self._start: dict[str, float] = {}

    def begin(self, target) -> None:
        # Start values are read when the step begins, not when it was queued
        self._start = {name: getattr(target, name) for name in self.props}

    def apply(self, target, t: float) -> None:
        k = self.easing(t)
        for name, end in self.props.items():
            start = self._start[name]
            setattr(target, name, start + (end - start) * k)

    def finish(self, target) -> None:
        for name, end in self.props.items():
            setattr(target, name, end)


class _DelayStep(_Step):
    def __init__(self, duration: float):
        self.duration = duration


class _CallStep(_Step):
    def __init__(self, fn: Callable[[], Any]):
        self.fn = fn

    def finish(self, target) -> None:
        self.fn()


def _check_duration(duration: float) -> float:
    duration = float(duration)
    if not math.isfinite(duration) or duration < 0:
        raise ValueError(f"tween duration must be finite and >= 0, got {duration}")
    return duration


class Tween:
    def __init__(self, target, manager: 'TweenManager'):
        self.target = target
        self.manager = manager
        self._steps: list[_Step] = []
        self._index = 0
        self._elapsed = 0.0
        self._step_begun = False
        self.running = False
        self.done = False

    # --- Builder -----------------------------------------------------------
    def to(self, duration: float, props: dict[str, float], easing: Optional[Union[str, EasingFn]] = None) -> 'Tween':
        self._steps.append(_ToStep(_check_duration(duration), props, resolve(easing)))
        return self

    def delay(self, duration: float) -> 'Tween':
        self._steps.append(_DelayStep(_check_duration(duration)))
        return self

    def call(self, fn: Callable[[], Any]) -> 'Tween':
        self._steps.append(_CallStep(fn))
        return self

    def start(self) -> 'Tween':
        self.manager.add(self)
        return self

    def stop(self) -> None:
        self.running = False

    # --- Frame advance -----------------------------------------------------
    def advance(self, dt: float) -> bool:
        """Consume ``dt`` seconds; return True once every step has finished.

        Time left over after a step finishes carries into the next one.
        """
        while self.running and self._index < len(self._steps):
            step = self._steps[self._index]
            if not self._step_begun:
                step.begin(self.target)
                self._step_begun = True
            remaining = step.duration - self._elapsed
            if dt + FINISH_TOLERANCE >= remaining:
                dt = max(0.0, dt - remaining)
                self._index += 1
                self._elapsed = 0.0
                self._step_begun = False
                # may start/stop tweens (including this one)
                step.finish(self.target)
                continue
            self._elapsed += dt
            step.apply(self.target, self._elapsed / step.duration)
            return False
        if self._index >= len(self._steps):
            self.running = False
            self.done = True
            return True
        return False


class TweenManager:
    """Owns running tweens and advances them from the frame loop."""

    def __init__(self):
        self._tweens: list[Tween] = []

    def add(self, tween: Tween) -> None:
        self.stop_all_by_target(tween.target)
        tween.running = True
        self._tweens.append(tween)

    def update(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        # Tweens started during this frame begin advancing next frame
        for tw in list(self._tweens):
            if tw.running:
                tw.advance(dt)
        self._tweens = [tw for tw in self._tweens if tw.running]

    def stop_all_by_target(self, target) -> None:
        for tw in self._tweens:
            if tw.target is target:
                tw.stop()

    def is_animating(self, target) -> bool:
        return any(tw.running and tw.target is target for tw in self._tweens)

    def clear(self) -> None:
        for tw in self._tweens:
            tw.stop()
        self._tweens.clear()

    def __len__(self) -> int:
        return sum(1 for tw in self._tweens if tw.running)


def tween(target, manager: TweenManager) -> Tween:
    """Shorthand for ``Tween(target, manager)``."""
    return Tween(target, manager)

__all__ = ["Tween", "TweenManager", "tween", "FINISH_TOLERANCE"]
