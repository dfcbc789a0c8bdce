"""Small element-wise kernels: clamping and SAXPY (``y += a * x``)."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

CLAMP_MAX = 0xFF
_VECTOR_WIDTH = 8


def clamp_min(x: MutableSequence[int]) -> None:
    """Clamp every value to at most ``CLAMP_MAX`` in place, using ``min``."""
    for i, value in enumerate(x):
        x[i] = min(value, CLAMP_MAX)


def clamp_conditional(x: MutableSequence[int]) -> None:
    """Clamp every value to at most ``CLAMP_MAX`` in place, using a test."""
    for i, value in enumerate(x):
        if value > CLAMP_MAX:
            x[i] = CLAMP_MAX


def _check_lengths(x: Sequence[float], y: Sequence[float]) -> None:
    if len(x) != len(y):
        raise ValueError(f"length mismatch: x has {len(x)}, y has {len(y)}")


def saxpy(a: float, x: Sequence[float], y: MutableSequence[float]) -> None:
    """Compute ``y += a * x`` in place."""
    _check_lengths(x, y)
    for i, xv in enumerate(x):
        y[i] += a * xv


def saxpy_chunked(a: float, x: Sequence[float], y: MutableSequence[float]) -> None:
    """Compute ``y += a * x`` in place, a fixed-width chunk at a time.

    Whole chunks are processed first and the remaining tail afterwards.
    """
    _check_lengths(x, y)
    size = len(y)
    full = size - size % _VECTOR_WIDTH
    for start in range(0, full, _VECTOR_WIDTH):
        for i, xv in enumerate(x[start : start + _VECTOR_WIDTH], start):
            y[i] += a * xv
    for i, xv in enumerate(x[full:], full):
        y[i] += a * xv