"""
Linear RGB color used for light and surface values.

Channels are unconstrained while light contributions are summed. Only a
clamped color may be turned into display bytes; anything else is a bug in
the caller and fails with ColorRangeError.
"""

from __future__ import annotations
from typing import Tuple, Union
import numpy as np


class ColorRangeError(AssertionError):
    """A color channel outside [0, 1] reached display conversion."""
    pass


class Color:
    """An RGB triple backed by a numpy array."""

    __slots__ = ('_data',)

    def __init__(self, red: float = 0.0, green: float = 0.0, blue: float = 0.0):
        self._data = np.array([red, green, blue], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Color:
        """Create Color from numpy array."""
        c = cls.__new__(cls)
        c._data = np.asarray(arr, dtype=np.float64)
        return c

    @property
    def red(self) -> float:
        return float(self._data[0])

    @property
    def green(self) -> float:
        return float(self._data[1])

    @property
    def blue(self) -> float:
        return float(self._data[2])

    # Short aliases
    r = red
    g = green
    b = blue

    def __repr__(self) -> str:
        return f"Color({self.red:.4f}, {self.green:.4f}, {self.blue:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return np.allclose(self._data, other._data)

    # Mutable through clamp() and compared approximately
    __hash__ = None

    def __add__(self, other: Union[Color, float]) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self._data + other._data)
        return Color.from_array(self._data + other)

    def __radd__(self, other: float) -> Color:
        return Color.from_array(other + self._data)

    def __mul__(self, other: Union[Color, float]) -> Color:
        if isinstance(other, Color):
            return Color.from_array(self._data * other._data)
        return Color.from_array(self._data * other)

    def __rmul__(self, other: float) -> Color:
        return Color.from_array(other * self._data)

    def clamp(self) -> None:
        """Clip every channel to [0, 1] in place."""
        np.clip(self._data, 0.0, 1.0, out=self._data)

    def to_rgb(self) -> Tuple[int, int, int]:
        """Convert a clamped color to 8-bit channel values.

        Each channel c maps to round(c * 255).

        Raises:
            ColorRangeError: If any channel is outside [0, 1] or NaN.
        """
        for name, value in zip(('red', 'green', 'blue'), self._data):
            if not 0.0 <= value <= 1.0:
                raise ColorRangeError(
                    f"{name} channel out of range for display: {value!r}"
                )
        return tuple(int(round(float(c) * 255)) for c in self._data)

    def to_rgba(self) -> Tuple[int, int, int, int]:
        """Like to_rgb, with a fixed opaque alpha."""
        return self.to_rgb() + (255,)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()
