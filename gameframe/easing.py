"""Easing curves mapping a frame counter onto a value between start and end.

Every function takes the current count, the start and end values and the
number of frames the transition lasts.
"""

from __future__ import annotations

import math

_HALF_PI = math.pi / 2.0


def linear(cnt: float, start: float, end: float, frames: float) -> float:
    return (end - start) * cnt / frames + start


def in_quad(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames
    return (end - start) * t * t + start


def out_quad(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames
    return -(end - start) * t * (t - 2) + start


def in_out_quad(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / (frames / 2.0)
    if t < 1:
        return (end - start) / 2.0 * t * t + start
    t -= 1
    return -(end - start) / 2.0 * (t * (t - 2) - 1) + start


def in_cubic(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames
    return (end - start) * t ** 3 + start


def out_cubic(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames - 1
    return (end - start) * (t ** 3 + 1) + start


def in_out_cubic(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / (frames / 2.0)
    if t < 1:
        return (end - start) / 2.0 * t ** 3 + start
    t -= 2
    return (end - start) / 2.0 * (t ** 3 + 2) + start


def in_quart(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames
    return (end - start) * t ** 4 + start


def out_quart(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames - 1
    return -(end - start) * (t ** 4 - 1) + start


def in_out_quart(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / (frames / 2.0)
    if t < 1:
        return (end - start) / 2.0 * t ** 4 + start
    t -= 2
    return -(end - start) / 2.0 * (t ** 4 - 2) + start


def in_quint(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames
    return (end - start) * t ** 5 + start


def out_quint(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames - 1
    return (end - start) * (t ** 5 + 1) + start


def in_out_quint(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / (frames / 2.0)
    if t < 1:
        return (end - start) / 2.0 * t ** 5 + start
    t -= 2
    return (end - start) / 2.0 * (t ** 5 + 2) + start


def in_sine(cnt: float, start: float, end: float, frames: float) -> float:
    """Sine ease-in; the curve is offset by ``start``, so it runs from 2*start to end+start."""
    return -(end - start) * math.cos(cnt / frames * _HALF_PI) + end + start


def out_sine(cnt: float, start: float, end: float, frames: float) -> float:
    return (end - start) * math.sin(cnt / frames * _HALF_PI) + start


def in_out_sine(cnt: float, start: float, end: float, frames: float) -> float:
    return -(end - start) / 2.0 * (math.cos(math.pi * cnt / frames) - 1) + start


def in_expo(cnt: float, start: float, end: float, frames: float) -> float:
    return (end - start) * 2.0 ** (10 * (cnt / frames - 1)) + start


def out_expo(cnt: float, start: float, end: float, frames: float) -> float:
    return (end - start) * (-(2.0 ** (-10 * cnt / frames)) + 1) + start


def in_out_expo(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / (frames / 2.0)
    if t < 1:
        return (end - start) / 2.0 * 2.0 ** (10 * (t - 1)) + start
    t -= 1
    return (end - start) / 2.0 * (-(2.0 ** (-10 * t)) + 2) + start


def in_circ(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames
    return -(end - start) * (math.sqrt(1 - t * t) - 1) + start


def out_circ(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / frames - 1
    return (end - start) * math.sqrt(1 - t * t) + start


def in_out_circ(cnt: float, start: float, end: float, frames: float) -> float:
    t = cnt / (frames / 2.0)
    if t < 1:
        return -(end - start) / 2.0 * (math.sqrt(1 - t * t) - 1) + start
    t -= 2
    return (end - start) / 2.0 * (math.sqrt(1 - t * t) + 1) + start


def out_elastic(cnt: float, start: float, end: float, frames: float) -> float:
    """Springy ease-out that overshoots end before settling on it."""
    if cnt == 0:
        return start
    if cnt == frames:
        return end
    time = cnt / frames
    rad = (2.0 * math.pi) / 3.0
    rate = 2.0 ** (-10 * time) * math.sin((time * 10 - 0.75) * rad) + 1
    return start + (end - start) * rate