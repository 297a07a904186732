"""Unit tests for catan board data models."""

from __future__ import annotations

import math
import unittest

import pydantic

from companion.app.catan.models import board


class TestEnums(unittest.TestCase):
    """Tests for the board enums."""

    def test_producing_resources_exclude_desert_and_sea(self) -> None:
        self.assertNotIn(board.ResourceKind.DESERT, board.PRODUCING_RESOURCES)
        self.assertNotIn(board.ResourceKind.SEA, board.PRODUCING_RESOURCES)
        self.assertEqual(len(board.PRODUCING_RESOURCES), 5)

    def test_every_producing_resource_has_a_port(self) -> None:
        """Each producing resource has a 2:1 port of the same name."""
        for resource in board.PRODUCING_RESOURCES:
            self.assertEqual(board.PortKind(resource.value).ratio, 2)

    def test_generic_port_ratio(self) -> None:
        self.assertEqual(board.PortKind.GENERIC.ratio, 3)

    def test_board_size_radius(self) -> None:
        self.assertEqual(board.BoardSize.SMALL.land_radius, 2)
        self.assertEqual(board.BoardSize.LARGE.land_radius, 3)

    def test_seven_is_not_a_token(self) -> None:
        self.assertNotIn(7, board.VALID_NUMBERS)
        self.assertEqual(len(board.VALID_NUMBERS), 10)


class TestAxialCoord(unittest.TestCase):
    """Tests for AxialCoord model."""

    def test_distance(self) -> None:
        """Cube distance from the origin."""
        cases = [((0, 0), 0), ((1, 0), 1), ((1, -1), 1), ((2, -1), 2), ((-3, 3), 3), ((2, 2), 4)]
        for (q, r), expected in cases:
            self.assertEqual(board.AxialCoord(q=q, r=r).distance(), expected)

    def test_implicit_s(self) -> None:
        coord = board.AxialCoord(q=2, r=-3)
        self.assertEqual(coord.q + coord.r + coord.s, 0)

    def test_key(self) -> None:
        self.assertEqual(board.AxialCoord(q=-1, r=2).key, '-1,2')

    def test_to_pixel(self) -> None:
        """Flat-topped projection: x = 1.5q, y = sqrt(3)/2 q + sqrt(3) r."""
        x, y = board.AxialCoord(q=2, r=1).to_pixel()
        self.assertAlmostEqual(x, 3.0)
        self.assertAlmostEqual(y, 2 * math.sqrt(3))

    def test_neighbors_are_at_distance_one(self) -> None:
        origin = board.AxialCoord(q=0, r=0)
        neighbors = origin.neighbors()
        self.assertEqual(len(set(neighbors)), 6)
        for n in neighbors:
            self.assertEqual(n.distance(), 1)

    def test_frozen_model(self) -> None:
        coord = board.AxialCoord(q=0, r=0)
        with self.assertRaises(pydantic.ValidationError):
            coord.q = 1  # type: ignore[misc]

    def test_hashable(self) -> None:
        self.assertEqual(
            {board.AxialCoord(q=1, r=2), board.AxialCoord(q=1, r=2)},
            {board.AxialCoord(q=1, r=2)},
        )


class TestTile(unittest.TestCase):
    """Tests for Tile validation."""

    def _coord(self) -> board.AxialCoord:
        return board.AxialCoord(q=0, r=0)

    def test_producing_tile_needs_number(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            board.Tile(coord=self._coord(), resource=board.ResourceKind.FOREST)

    def test_desert_rejects_number(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            board.Tile(coord=self._coord(), resource=board.ResourceKind.DESERT, number=5)

    def test_rejects_seven(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            board.Tile(coord=self._coord(), resource=board.ResourceKind.GRAIN, number=7)

    def test_rejects_out_of_range(self) -> None:
        for bad in (1, 13):
            with self.assertRaises(pydantic.ValidationError):
                board.Tile(coord=self._coord(), resource=board.ResourceKind.GRAIN, number=bad)

    def test_port_only_on_sea(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            board.Tile(
                coord=self._coord(),
                resource=board.ResourceKind.HILLS,
                number=4,
                port=board.PortKind.GENERIC,
                rotation=0.0,
            )

    def test_port_needs_rotation(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            board.Tile(
                coord=self._coord(),
                resource=board.ResourceKind.SEA,
                port=board.PortKind.GENERIC,
            )

    def test_sea_with_port(self) -> None:
        tile = board.Tile(
            coord=self._coord(),
            resource=board.ResourceKind.SEA,
            port=board.PortKind.MOUNTAINS,
            rotation=45.0,
        )
        self.assertFalse(tile.is_land)
        self.assertEqual(tile.port, board.PortKind.MOUNTAINS)


class TestBoard(unittest.TestCase):
    """Tests for Board helpers."""

    def setUp(self) -> None:
        self.board = board.Board(
            size=board.BoardSize.SMALL,
            land_radius=2,
            tiles=(
                board.Tile(
                    coord=board.AxialCoord(q=0, r=0),
                    resource=board.ResourceKind.DESERT,
                ),
                board.Tile(
                    coord=board.AxialCoord(q=1, r=0),
                    resource=board.ResourceKind.PASTURE,
                    number=9,
                ),
                board.Tile(
                    coord=board.AxialCoord(q=3, r=0),
                    resource=board.ResourceKind.SEA,
                    port=board.PortKind.GENERIC,
                    rotation=120.0,
                ),
                board.Tile(
                    coord=board.AxialCoord(q=3, r=-1),
                    resource=board.ResourceKind.SEA,
                ),
            ),
        )

    def test_partitions(self) -> None:
        self.assertEqual(len(self.board.land_tiles()), 2)
        self.assertEqual(len(self.board.sea_tiles()), 2)
        self.assertEqual(len(self.board.port_tiles()), 1)
        self.assertEqual(self.board.water_radius, 3)

    def test_tile_at(self) -> None:
        tile = self.board.tile_at(1, 0)
        assert tile is not None
        self.assertEqual(tile.resource, board.ResourceKind.PASTURE)
        self.assertIsNone(self.board.tile_at(5, 5))

    def test_counts(self) -> None:
        self.assertEqual(
            self.board.resource_counts(),
            {board.ResourceKind.DESERT: 1, board.ResourceKind.PASTURE: 1},
        )
        self.assertEqual(self.board.numbers(), [9])

    def test_rejects_duplicate_coordinates(self) -> None:
        tile = board.Tile(coord=board.AxialCoord(q=0, r=0), resource=board.ResourceKind.SEA)
        with self.assertRaises(pydantic.ValidationError):
            board.Board(size=board.BoardSize.SMALL, land_radius=2, tiles=(tile, tile))

    def test_rejects_radius_that_does_not_match_size(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            board.Board(size=board.BoardSize.SMALL, land_radius=3, tiles=self.board.tiles)

    def test_frozen(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            self.board.land_radius = 4  # type: ignore[misc]


if __name__ == '__main__':
    unittest.main()
