"""
Small geometry helpers shared by the engine.
"""

from __future__ import annotations


def clamp(value: float, low: float, high: float) -> float:
    """
    Clamp ``value`` into ``[low, high]``.

    When the range is empty (``high < low``) ``low`` wins, so a paddle
    taller than the court sticks to the top.
    """
    return max(low, min(high, value))


def circle_overlaps_rect(
    cx: float,
    cy: float,
    radius: float,
    rect: tuple[float, float, float, float],
) -> bool:
    """
    Ball-vs-paddle overlap test.

    The ball is widened by its radius on the X axis only; its centre must
    lie within the rectangle's vertical span.

    :param cx: Circle centre X.
    :type cx: float

    :param cy: Circle centre Y.
    :type cy: float

    :param radius: Circle radius.
    :type radius: float

    :param rect: Rectangle as (x, y, width, height).
    :type rect: tuple[float, float, float, float]

    :return: True when they overlap.
    :rtype: bool
    """
    x, y, w, h = rect
    return cx - radius < x + w and cx + radius > x and y <= cy <= y + h


def rescale(value: float, old_extent: float, new_extent: float) -> float:
    """Map ``value`` proportionally from ``[0, old_extent]`` to ``[0, new_extent]``."""
    if old_extent <= 0:
        return value
    return value * new_extent / old_extent
