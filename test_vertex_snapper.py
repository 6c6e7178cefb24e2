"""
Tests for the stateful vertex snapper.
"""

from types import SimpleNamespace

import numpy as np
import pytest

from config import Config
from models import EdgeSnap, Point
from vertex_snapper import VertexSnapper


@pytest.fixture
def snapper():
    snapper = VertexSnapper()
    snapper.set_wall_lines([100, 300], [50, 250])
    return snapper


def test_defaults_come_from_config():
    snapper = VertexSnapper()

    assert snapper.snap_distance == Config.SNAPPING['intersection_distance']
    assert snapper.align_distance == Config.SNAPPING['alignment_distance']
    assert snapper.line_snap_distance == Config.SNAPPING['line_distance']


def test_explicit_distances_override_config():
    snapper = VertexSnapper(snap_distance=0, align_distance=3, line_snap_distance=1)

    assert (snapper.snap_distance, snapper.align_distance, snapper.line_snap_distance) == (0, 3, 1)


def test_set_wall_lines_builds_intersections(snapper):
    assert snapper.intersections == [
        Point(50, 100), Point(250, 100), Point(50, 300), Point(250, 300)
    ]


def test_intersections_property_is_a_copy(snapper):
    snapper.intersections.clear()

    assert len(snapper.intersections) == 4


def test_clearing_wall_lines(snapper):
    snapper.set_wall_lines(None, [1, 2])

    assert snapper.horizontal_lines == []
    assert snapper.intersections == []
    assert snapper.snap_position(Point(1, 0)) is None


def test_set_wall_lines_from_detection():
    snapper = VertexSnapper()
    snapper.set_wall_lines_from_detection({
        'horizontal': [{'center': 20}, SimpleNamespace(center=40)],
        'vertical': [7],
    })

    assert snapper.horizontal_lines == [20, 40]
    assert snapper.vertical_lines == [7]
    assert snapper.intersections == [Point(7, 20), Point(7, 40)]

    snapper.set_wall_lines_from_detection(None)
    assert snapper.intersections == []


def test_snap_position(snapper):
    assert snapper.snap_position(Point(53, 96)) == Point(50, 100)
    assert snapper.snap_position((150, 200)) is None


def test_snap_vertex_snaps_and_aligns(snapper):
    points = [Point(0, 0), Point(245, 40), Point(400, 304), Point(600, 600)]

    result = snapper.snap_vertex(points, 0, Point(246, 297))

    assert result.snapped
    assert result.position == Point(250, 300)
    assert points[0] == Point(250, 300)
    assert points[1] == Point(250, 40)
    assert points[2] == Point(400, 300)
    assert points[3] == Point(600, 600)
    assert result.aligned_indices == [1, 2]


def test_snap_vertex_does_not_report_vertices_already_aligned():
    snapper = VertexSnapper()
    snapper.set_wall_lines([100], [50])
    on_wall = Point(200, 100)
    points = [Point(0, 0), on_wall, Point(400, 400)]

    result = snapper.snap_vertex(points, 0, (52, 98))

    assert result.position == Point(50, 100)
    assert points[1] is on_wall
    assert result.aligned_indices == []


def test_set_wall_lines_from_numpy_detection():
    snapper = VertexSnapper()
    snapper.set_wall_lines_from_detection({
        'horizontal': np.array([10.0, 30.0]),
        'vertical': np.array([5.0]),
    })

    assert snapper.intersections == [Point(5.0, 10.0), Point(5.0, 30.0)]
    assert snapper.snap_position(np.array([6.0, 29.0])) == Point(5.0, 30.0)


def test_snap_vertex_without_alignment(snapper):
    points = [Point(0, 0), Point(245, 40)]

    result = snapper.snap_vertex(points, 0, Point(250, 300), align=False)

    assert result.snapped
    assert points[1] == Point(245, 40)
    assert result.aligned_indices == []


def test_snap_vertex_uses_raw_position_when_out_of_range(snapper):
    points = [Point(0, 0), Point(152, 40)]

    result = snapper.snap_vertex(points, 0, {'x': 150, 'y': 40})

    assert not result.snapped
    assert result.applied
    assert points == [Point(150, 40), Point(152, 40)]
    assert result.aligned_indices == []


@pytest.mark.parametrize("index", [-1, 2])
def test_snap_vertex_invalid_index(snapper, index):
    points = [Point(0, 0), Point(1, 1)]

    result = snapper.snap_vertex(points, index, Point(50, 100))

    assert not result.applied
    assert not result.snapped
    assert points == [Point(0, 0), Point(1, 1)]


def test_snap_edge_axes(snapper):
    assert snapper.snap_edge(48, 100, 'x', -1) == EdgeSnap(50, 98)
    assert snapper.snap_edge(0, 297, 'y', 1) == EdgeSnap(0, 300)


def test_snap_edge_unknown_axis(snapper):
    with pytest.raises(ValueError):
        snapper.snap_edge(0, 10, 'z', 1)
