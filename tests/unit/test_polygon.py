"""
Unit tests for regular-polygon geometry and mask helpers.
"""

import math

import pytest

import numpy as np

from mazeframe.core.grid import Direction, Position
from mazeframe.geometry.polygon import (
    distance_to_segment,
    edge_cells,
    frame_vertices,
    largest_component,
    nearest_polygon_side,
    point_in_polygon,
    polygon_mask,
    polygon_vertices,
)

SQUARE = np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0]])


class TestPolygonVertices:
    @pytest.mark.parametrize("sides", [3, 6, 10])
    def test_vertices_on_circle(self, sides):
        vertices = polygon_vertices(sides, 5.0, 1.0, 2.0)

        assert vertices.shape == (sides, 2)
        radii = np.hypot(vertices[:, 0] - 1.0, vertices[:, 1] - 2.0)
        np.testing.assert_allclose(radii, 5.0)

    def test_first_vertex_at_top(self):
        vertices = polygon_vertices(4, 2.0, 0.0, 0.0)
        np.testing.assert_allclose(vertices[0], [0.0, -2.0], atol=1e-12)

    def test_rejects_degenerate(self):
        with pytest.raises(ValueError):
            polygon_vertices(2, 1.0, 0.0, 0.0)

    def test_frame_vertices_centered(self):
        vertices = frame_vertices(10, 20, 6, cell_size=1.0)
        center = vertices.mean(axis=0)

        np.testing.assert_allclose(center, [10.0, 5.0], atol=1e-9)
        radius = math.hypot(*(vertices[0] - center))
        assert radius == pytest.approx(10 / 2 * 0.8)


class TestPointInPolygon:
    @pytest.mark.parametrize(("x", "y", "expected"), [(5, 5, True), (0.5, 9.5, True), (11, 5, False), (-1, -1, False)])
    def test_square(self, x, y, expected):
        assert point_in_polygon(x, y, SQUARE) is expected

    def test_triangle(self):
        triangle = np.array([[0.0, 0.0], [4.0, 0.0], [0.0, 4.0]])
        assert point_in_polygon(1.0, 1.0, triangle)
        assert not point_in_polygon(3.0, 3.0, triangle)


class TestPolygonMask:
    def test_hexagon_mask_is_centered_blob(self):
        rows, cols = 10, 10
        mask = polygon_mask(rows, cols, frame_vertices(rows, cols, 6))

        assert mask.shape == (rows, cols)
        assert mask[5, 5]
        assert not mask[0, 0]
        assert not mask[9, 9]

    def test_mask_matches_point_test(self):
        vertices = frame_vertices(8, 8, 5, cell_size=30)
        mask = polygon_mask(8, 8, vertices, cell_size=30)

        for row in range(8):
            for col in range(8):
                expected = point_in_polygon((col + 0.5) * 30, (row + 0.5) * 30, vertices)
                assert mask[row, col] == expected


class TestMaskHelpers:
    def test_largest_component_keeps_biggest(self):
        mask = np.array(
            [
                [True, False, False, False],
                [False, False, True, True],
                [False, False, True, True],
            ]
        )
        kept = largest_component(mask)

        assert not kept[0, 0]
        assert kept[1:, 2:].all()

    def test_largest_component_diagonal_is_disconnected(self):
        mask = np.array([[True, False], [False, True]])
        assert largest_component(mask).sum() == 1

    def test_edge_cells_of_block(self):
        mask = np.ones((3, 3), dtype=bool)
        edges = edge_cells(mask)

        assert Position(1, 1) not in edges
        assert len(edges) == 8
        assert edges == sorted(edges)

    def test_edge_cells_inside_padding(self):
        mask = np.zeros((5, 5), dtype=bool)
        mask[1:4, 1:4] = True
        assert set(edge_cells(mask)) == {Position(r, c) for r in range(1, 4) for c in range(1, 4)} - {Position(2, 2)}


class TestNearestSide:
    def test_distance_to_segment(self):
        assert distance_to_segment(0, 1, -1, 0, 1, 0) == pytest.approx(1.0)
        assert distance_to_segment(3, 0, -1, 0, 1, 0) == pytest.approx(2.0)
        assert distance_to_segment(2, 2, 1, 1, 1, 1) == pytest.approx(math.sqrt(2))

    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (1.0, 5.0, Direction.WEST),
            (9.0, 5.0, Direction.EAST),
            (5.0, 1.0, Direction.NORTH),
            (5.0, 9.0, Direction.SOUTH),
        ],
    )
    def test_square_sides(self, x, y, expected):
        assert nearest_polygon_side(x, y, SQUARE) is expected
