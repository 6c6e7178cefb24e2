"""
Snapping Helper
===============
Snaps perimeter vertices and rectangle edges to the wall lines detected
on a floor plan.

Horizontal wall lines are given by their Y coordinate and vertical wall
lines by their X coordinate; both are treated as infinite lines.
"""

import logging
from typing import Iterable, List, MutableSequence, Optional, Sequence

from config import Config
from models import EdgeSnap, Point

logger = logging.getLogger(__name__)


# Default tolerances in pixels
SNAP_TO_LINE_DISTANCE = Config.SNAPPING['line_distance']
SNAP_TO_INTERSECTION_DISTANCE = Config.SNAPPING['intersection_distance']
SECONDARY_ALIGNMENT_DISTANCE = Config.SNAPPING['alignment_distance']

# Old name kept for callers written before intersections replaced corners
SNAP_TO_CORNER_DISTANCE = SNAP_TO_INTERSECTION_DISTANCE


def find_all_intersection_points(horizontal_lines: Optional[Iterable[float]],
                                 vertical_lines: Optional[Iterable[float]]) -> List[Point]:
    """
    Find every point where a horizontal wall line crosses a vertical one.

    Args:
        horizontal_lines: Y coordinates of horizontal wall lines
        vertical_lines: X coordinates of vertical wall lines

    Returns:
        Intersection points grouped by horizontal line, then by vertical
        line, in input order. Duplicate coordinates give duplicate points.
    """
    if horizontal_lines is None or vertical_lines is None:
        return []

    vertical_lines = list(vertical_lines)
    intersections = [
        Point(vertical_x, horizontal_y)
        for horizontal_y in horizontal_lines
        for vertical_x in vertical_lines
    ]

    logger.debug(f"Generated {len(intersections)} intersection points")
    return intersections


def find_nearest_intersection(position, intersections: Optional[Sequence],
                              snap_distance: float):
    """
    Find the intersection closest to a position within the snap distance.

    Args:
        position: Point to snap from
        intersections: Candidate intersection points
        snap_distance: Maximum distance for snapping

    Returns:
        The nearest candidate (as given), or None if none is in range.
        On equal distances the first candidate wins.
    """
    if intersections is None or len(intersections) == 0:
        return None

    position = Point.from_any(position)
    nearest_intersection = None
    min_distance = float('inf')

    for intersection in intersections:
        distance = position.distance_to(Point.from_any(intersection))

        if distance < min_distance and distance <= snap_distance:
            min_distance = distance
            nearest_intersection = intersection

    return nearest_intersection


def apply_secondary_alignment(points: Optional[MutableSequence], snapped_index: int,
                              snapped_position, align_distance: float) -> None:
    """
    Pull other vertices onto the wall lines of a vertex that was just snapped.

    Every vertex other than ``snapped_index`` whose Y is within
    ``align_distance`` of the snapped Y takes that Y, and independently
    every vertex whose X is within ``align_distance`` of the snapped X
    takes that X. Only vertices whose coordinates actually change are
    replaced, and they are replaced by new Point objects whatever shape
    the caller used (a ``{'x', 'y'}`` dict comes back as a Point).
    Untouched entries keep their original objects. The list is never
    resized or reordered.

    An absent list or an index outside ``[0, len(points))`` is a no-op.
    """
    if points is None or not 0 <= snapped_index < len(points):
        return

    snapped_position = Point.from_any(snapped_position)

    for i, raw_point in enumerate(points):
        if i == snapped_index:
            continue

        point = Point.from_any(raw_point)
        new_x, new_y = point.x, point.y

        # Same horizontal wall line
        if abs(point.y - snapped_position.y) <= align_distance:
            new_y = snapped_position.y

        # Same vertical wall line
        if abs(point.x - snapped_position.x) <= align_distance:
            new_x = snapped_position.x

        if new_x != point.x or new_y != point.y:
            points[i] = Point(new_x, new_y)


def snap_to_nearest_line(value: float, lines: Optional[Sequence[float]],
                         threshold: float) -> Optional[float]:
    """
    Snap a single coordinate to the nearest wall line within threshold.

    Returns:
        The line coordinate, or None when no line is close enough.
    """
    if lines is None or len(lines) == 0:
        return None

    nearest_line = None
    min_distance = float('inf')

    for line in lines:
        distance = abs(line - value)
        if distance < min_distance and distance <= threshold:
            min_distance = distance
            nearest_line = line

    return nearest_line


def snap_edge_to_lines(position: float, size: float, lines: Optional[Sequence[float]],
                       threshold: float, direction: int) -> EdgeSnap:
    """
    Snap one edge of a rectangle being resized to the nearest wall line.

    Args:
        position: Start coordinate of the rectangle on this axis
        size: Extent of the rectangle on this axis
        lines: Wall line coordinates on this axis
        threshold: Maximum distance for snapping
        direction: -1 when dragging the start edge (left/top),
            +1 when dragging the end edge (right/bottom)

    Returns:
        EdgeSnap with the adjusted position and size. The edge that is
        not being dragged keeps its coordinate.
    """
    snapped_position = position
    snapped_size = size

    if lines is None or len(lines) == 0:
        return EdgeSnap(snapped_position, snapped_size)

    if direction < 0:
        snapped_start = snap_to_nearest_line(position, lines, threshold)
        if snapped_start is not None:
            snapped_size += position - snapped_start
            snapped_position = snapped_start

    if direction > 0:
        snapped_end = snap_to_nearest_line(position + size, lines, threshold)
        if snapped_end is not None:
            snapped_size = snapped_end - position

    return EdgeSnap(snapped_position, snapped_size)
