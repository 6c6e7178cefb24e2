"""
Vertex Snapper
==============
Keeps the wall lines of the current floor plan and snaps perimeter
vertices and room rectangle edges to them while the user edits.
"""

import logging
from numbers import Number
from typing import Dict, List, MutableSequence, Optional, Sequence

from config import Config
from models import EdgeSnap, Point, VertexSnapResult
from snapping_helper import (
    apply_secondary_alignment,
    find_all_intersection_points,
    find_nearest_intersection,
    snap_edge_to_lines,
)
from utils import timer

logger = logging.getLogger(__name__)


class VertexSnapper:
    """Snaps perimeter edits to detected wall lines."""

    def __init__(self, snap_distance: Optional[float] = None,
                 align_distance: Optional[float] = None,
                 line_snap_distance: Optional[float] = None):
        """
        Initialize vertex snapper.

        Args:
            snap_distance: Max distance (px) from a vertex to an intersection
            align_distance: Max distance (px) for secondary alignment
            line_snap_distance: Max distance (px) from an edge to a wall line

        Unset distances come from ``Config.SNAPPING``.
        """
        snapping = Config.SNAPPING
        self.snap_distance = (snapping['intersection_distance']
                              if snap_distance is None else snap_distance)
        self.align_distance = (snapping['alignment_distance']
                               if align_distance is None else align_distance)
        self.line_snap_distance = (snapping['line_distance']
                                   if line_snap_distance is None else line_snap_distance)

        self.horizontal_lines: List[float] = []
        self.vertical_lines: List[float] = []
        self._intersections: List[Point] = []

    @property
    def intersections(self) -> List[Point]:
        """Intersection points of the current wall lines."""
        return list(self._intersections)

    @timer
    def set_wall_lines(self, horizontal_lines: Optional[Sequence[float]],
                       vertical_lines: Optional[Sequence[float]]):
        """
        Replace the wall lines and recompute their intersections.

        Args:
            horizontal_lines: Y coordinates of horizontal walls (None clears)
            vertical_lines: X coordinates of vertical walls (None clears)
        """
        self.horizontal_lines = list(horizontal_lines) if horizontal_lines is not None else []
        self.vertical_lines = list(vertical_lines) if vertical_lines is not None else []
        self._intersections = find_all_intersection_points(
            self.horizontal_lines, self.vertical_lines
        )

        logger.info(
            f"Wall lines set: {len(self.horizontal_lines)} horizontal x "
            f"{len(self.vertical_lines)} vertical -> "
            f"{len(self._intersections)} intersections"
        )

    def set_wall_lines_from_detection(self, line_data: Optional[Dict]):
        """
        Set wall lines from line detector output.

        ``line_data`` has ``horizontal`` and ``vertical`` lists whose items
        are either coordinates or detected lines carrying a ``center``
        (as a key or attribute).
        """
        if not line_data:
            self.set_wall_lines(None, None)
            return

        self.set_wall_lines(
            [self._line_center(line) for line in self._lines_of(line_data, 'horizontal')],
            [self._line_center(line) for line in self._lines_of(line_data, 'vertical')],
        )

    @staticmethod
    def _lines_of(line_data: Dict, key: str) -> Sequence:
        lines = line_data.get(key)
        return () if lines is None else lines

    @staticmethod
    def _line_center(line) -> float:
        if isinstance(line, Number):
            return line
        if isinstance(line, dict):
            return line['center']
        return line.center

    def snap_position(self, position) -> Optional[Point]:
        """Return the intersection to snap ``position`` to, if any."""
        return find_nearest_intersection(position, self._intersections, self.snap_distance)

    def snap_vertex(self, points: MutableSequence, index: int, position,
                    align: bool = True) -> VertexSnapResult:
        """
        Move perimeter vertex ``index`` to ``position``, snapping it.

        The vertex lands on the nearest intersection when one is within
        ``snap_distance``, otherwise on the raw position. After a snap,
        nearby vertices are aligned to the snapped wall lines unless
        ``align`` is False.

        Args:
            points: Perimeter vertices, modified in place
            index: Index of the vertex being moved
            position: Requested position for the vertex
            align: Whether to apply secondary alignment

        Returns:
            VertexSnapResult describing what changed. An index outside
            the list leaves ``points`` untouched.
        """
        requested = Point.from_any(position)
        result = VertexSnapResult(index=index, requested=requested)

        if points is None or not 0 <= index < len(points):
            logger.debug(f"Vertex index {index} out of range, nothing to snap")
            return result

        snapped = self.snap_position(requested)
        result.snapped = snapped is not None
        result.position = snapped if snapped is not None else requested
        points[index] = result.position

        if result.snapped and align:
            before = list(points)
            apply_secondary_alignment(points, index, result.position, self.align_distance)
            result.aligned_indices = [
                i for i, (old, new) in enumerate(zip(before, points)) if old is not new
            ]

        logger.debug(
            f"Vertex {index} -> ({result.position.x}, {result.position.y}) "
            f"snapped={result.snapped} aligned={result.aligned_indices}"
        )
        return result

    def snap_edge(self, position: float, size: float, axis: str,
                  direction: int) -> EdgeSnap:
        """
        Snap a dragged rectangle edge to the wall lines on one axis.

        Args:
            position: Start coordinate of the rectangle on ``axis``
            size: Extent of the rectangle on ``axis``
            axis: 'x' snaps to vertical walls, 'y' to horizontal walls
            direction: -1 for the start edge, +1 for the end edge
        """
        if axis == 'x':
            lines = self.vertical_lines
        elif axis == 'y':
            lines = self.horizontal_lines
        else:
            raise ValueError(f"Unknown axis: {axis!r} (expected 'x' or 'y')")

        return snap_edge_to_lines(position, size, lines, self.line_snap_distance, direction)
