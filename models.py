"""
models.py - Core Data Models for Wall Snapping
===============================================
Defines the data structures shared by the snapping helpers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import numpy as np

from utils import ValidationError, calculate_distance


@dataclass(frozen=True)
class Point:
    """2D point in image (pixel) coordinates."""
    x: float
    y: float

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return calculate_distance(self.to_tuple(), other.to_tuple())

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple representation."""
        return (self.x, self.y)

    @classmethod
    def from_any(cls, value: Any) -> 'Point':
        """
        Coerce a point-like value into a Point.

        Accepts a Point, an ``(x, y)`` pair, a ``{'x': .., 'y': ..}``
        mapping (the shape the drawing canvas sends) or any object with
        ``x`` and ``y`` attributes.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            if 'x' in value and 'y' in value:
                return cls(value['x'], value['y'])
            raise ValidationError(f"Point mapping needs 'x' and 'y' keys: {value!r}")
        if hasattr(value, 'x') and hasattr(value, 'y'):
            return cls(value.x, value.y)
        if isinstance(value, (tuple, list, np.ndarray)) and len(value) == 2:
            return cls(value[0], value[1])
        raise ValidationError(f"Cannot interpret {value!r} as a point")


@dataclass(frozen=True)
class EdgeSnap:
    """Result of snapping one edge of a rectangle to wall lines."""
    position: float
    size: float


@dataclass
class VertexSnapResult:
    """Outcome of moving a perimeter vertex with snapping."""
    index: int
    requested: Point
    position: Optional[Point] = None
    snapped: bool = False
    aligned_indices: List[int] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        """Whether the perimeter was modified at all."""
        return self.position is not None
