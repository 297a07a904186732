"""Catan board data models.

Defines the axial hex grid, resource and port kinds, and the immutable Board
returned by the generator.  Tiles are addressed by axial coordinates (q, r);
the implicit third cube coordinate is ``s = -q - r``.  See
https://www.redblobgames.com/grids/hexagons/#coordinates-axial for details.
"""

from __future__ import annotations

import collections
import enum
import math

import pydantic

_SQRT3 = math.sqrt(3)

# Production numbers printed on tokens.  7 is the robber roll and has no token.
VALID_NUMBERS: frozenset[int] = frozenset({2, 3, 4, 5, 6, 8, 9, 10, 11, 12})

# Red (high-probability) numbers.
RED_NUMBERS: frozenset[int] = frozenset({6, 8})


class ResourceKind(enum.StrEnum):
    """Terrain of a tile.  Sea tiles form the ring around the island."""

    FOREST = 'forest'  # produces wood
    PASTURE = 'pasture'  # produces sheep
    GRAIN = 'grain'  # produces wheat
    HILLS = 'hills'  # produces brick
    MOUNTAINS = 'mountains'  # produces ore
    DESERT = 'desert'  # produces nothing
    SEA = 'sea'


# Terrains that carry a number token.
PRODUCING_RESOURCES: tuple[ResourceKind, ...] = (
    ResourceKind.FOREST,
    ResourceKind.PASTURE,
    ResourceKind.GRAIN,
    ResourceKind.HILLS,
    ResourceKind.MOUNTAINS,
)


class PortKind(enum.StrEnum):
    """Port kinds: generic 3:1 or a specific resource at 2:1."""

    GENERIC = 'generic'
    FOREST = 'forest'
    PASTURE = 'pasture'
    GRAIN = 'grain'
    HILLS = 'hills'
    MOUNTAINS = 'mountains'

    @property
    def ratio(self) -> int:
        """Number of cards given per card received."""
        return 3 if self is PortKind.GENERIC else 2


class BoardSize(enum.StrEnum):
    """Supported board sizes."""

    SMALL = 'small'
    LARGE = 'large'

    @property
    def land_radius(self) -> int:
        """Cube-distance bound of the land disk."""
        return 2 if self is BoardSize.SMALL else 3


_AXIAL_DIRECTIONS: list[tuple[int, int]] = [
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
]


class AxialCoord(pydantic.BaseModel):
    """Axial coordinates for a hex tile."""

    model_config = pydantic.ConfigDict(frozen=True)

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    @property
    def key(self) -> str:
        """Stable string id, e.g. ``'-1,2'``."""
        return f'{self.q},{self.r}'

    def distance(self) -> int:
        """Return the cube distance from the origin."""
        return (abs(self.q) + abs(self.q + self.r) + abs(self.r)) // 2

    def to_pixel(self) -> tuple[float, float]:
        """Return the centre of a unit flat-topped hex in pixel space."""
        x = 1.5 * self.q
        y = (_SQRT3 / 2) * self.q + _SQRT3 * self.r
        return x, y

    def neighbors(self) -> list[AxialCoord]:
        """Return the 6 neighbouring coordinates in order."""
        return [AxialCoord(q=self.q + dq, r=self.r + dr) for dq, dr in _AXIAL_DIRECTIONS]


class Tile(pydantic.BaseModel):
    """A single hex on the board: land, desert, or sea."""

    model_config = pydantic.ConfigDict(frozen=True)

    coord: AxialCoord
    resource: ResourceKind
    number: int | None = None  # None for desert and sea
    port: PortKind | None = None  # sea ring only
    rotation: float | None = None  # degrees; set whenever port is set

    @pydantic.field_validator('number')
    @classmethod
    def _check_number(cls, value: int | None) -> int | None:
        if value is not None and value not in VALID_NUMBERS:
            raise ValueError(f'number token must be one of {sorted(VALID_NUMBERS)}')
        return value

    @pydantic.model_validator(mode='after')
    def _check_consistency(self) -> Tile:
        producing = self.resource in PRODUCING_RESOURCES
        if producing and self.number is None:
            raise ValueError(f'{self.resource} tile at {self.coord.key} needs a number')
        if not producing and self.number is not None:
            raise ValueError(f'{self.resource} tile at {self.coord.key} cannot have a number')
        if self.port is not None and self.resource != ResourceKind.SEA:
            raise ValueError('ports can only sit on sea tiles')
        if (self.port is None) != (self.rotation is None):
            raise ValueError('port and rotation must be set together')
        return self

    @property
    def is_land(self) -> bool:
        return self.resource != ResourceKind.SEA


class Board(pydantic.BaseModel):
    """A generated board: land tiles in placement order, then the sea ring."""

    model_config = pydantic.ConfigDict(frozen=True)

    size: BoardSize
    land_radius: int
    tiles: tuple[Tile, ...]

    @pydantic.model_validator(mode='after')
    def _check_layout(self) -> Board:
        if self.land_radius != self.size.land_radius:
            raise ValueError(
                f'a {self.size} board has land radius {self.size.land_radius}, '
                f'got {self.land_radius}'
            )
        keys = [tile.coord.key for tile in self.tiles]
        duplicates = [key for key, count in collections.Counter(keys).items() if count > 1]
        if duplicates:
            raise ValueError(f'duplicate tile coordinates: {duplicates}')
        return self

    @property
    def water_radius(self) -> int:
        return self.land_radius + 1

    def land_tiles(self) -> list[Tile]:
        return [t for t in self.tiles if t.is_land]

    def sea_tiles(self) -> list[Tile]:
        return [t for t in self.tiles if not t.is_land]

    def port_tiles(self) -> list[Tile]:
        return [t for t in self.tiles if t.port is not None]

    def tile_at(self, q: int, r: int) -> Tile | None:
        """Return the tile at (q, r), or None if it is off the board."""
        for tile in self.tiles:
            if tile.coord.q == q and tile.coord.r == r:
                return tile
        return None

    def resource_counts(self) -> dict[ResourceKind, int]:
        """Count land tiles per resource kind."""
        return dict(collections.Counter(t.resource for t in self.land_tiles()))

    def numbers(self) -> list[int]:
        """Return all placed number tokens in placement order."""
        return [t.number for t in self.tiles if t.number is not None]
