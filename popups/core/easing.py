"""Easing curves used by the tween engine.

Every curve maps normalized time ``t`` in [0, 1] to progress, with
``f(0) == 0`` and ``f(1) == 1``. The ``back`` family overshoots past the
end points (``backOut`` settles from above 1, ``backIn`` dips below 0 first).
Names follow the camelCase convention used by popup configuration
(``'backOut'``, ``'quadIn'`` ...).
"""
from __future__ import annotations
import math
from typing import Callable, Optional, Union

EasingFn = Callable[[float], float]

BACK_OVERSHOOT = 1.70158


def linear(t: float) -> float:
    return t

def quad_in(t: float) -> float:
    return t * t

def quad_out(t: float) -> float:
    return t * (2 - t)

def quad_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t
    t -= 1
    return -0.5 * (t * (t - 2) - 1)

def cubic_in(t: float) -> float:
    return t * t * t

def cubic_out(t: float) -> float:
    t -= 1
    return t * t * t + 1

def sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)

def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)

def back_in(t: float) -> float:
    s = BACK_OVERSHOOT
    return t * t * ((s + 1) * t - s)

def back_out(t: float) -> float:
    s = BACK_OVERSHOOT
    t -= 1
    return t * t * ((s + 1) * t + s) + 1

def back_in_out(t: float) -> float:
    s = BACK_OVERSHOOT * 1.525
    t *= 2
    if t < 1:
        return 0.5 * (t * t * ((s + 1) * t - s))
    t -= 2
    return 0.5 * (t * t * ((s + 1) * t + s) + 2)


EASINGS: dict[str, EasingFn] = {
    'linear': linear,
    'quadIn': quad_in,
    'quadOut': quad_out,
    'quadInOut': quad_in_out,
    'cubicIn': cubic_in,
    'cubicOut': cubic_out,
    'sineIn': sine_in,
    'sineOut': sine_out,
    'backIn': back_in,
    'backOut': back_out,
    'backInOut': back_in_out,
}


def resolve(easing: Optional[Union[str, EasingFn]]) -> EasingFn:
    """Return the easing callable for a name, a callable, or None (linear)."""
    if easing is None:
        return linear
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise ValueError(f"unknown easing {easing!r}; expected one of {sorted(EASINGS)}") from None

__all__ = ["EASINGS", "EasingFn", "resolve", "linear", "back_in", "back_out", "back_in_out"]
