"""Catan board generation algorithm.

Generates a randomised board of land tiles surrounded by a single ring of sea
tiles carrying trade ports.

Axial-coordinate geometry
-------------------------
Each hex is identified by integer axial coordinates (q, r).  The land disk is
every coordinate whose cube distance from the origin,
``(|q| + |q + r| + |r|) / 2``, is at most the land radius (2 for a small
board, 3 for a large one).  The sea ring is every coordinate at exactly
``land_radius + 1``.

Land coordinates are enumerated row-major by q then r, which fixes the order
in which shuffled resources and number tokens are consumed::

    for q in -R .. R:
        for r in max(-R, -q - R) .. min(R, -q + R):
            ...

Port placement
--------------
Ring tiles are sorted by the angle of their projected centre
(``x = 1.5·q``, ``y = √3/2·q + √3·r``, angle ``atan2(y, x)``) and every other
tile receives a port until the port pool runs out.  A 19-tile board has an
18-tile ring and 9 ports, so ports alternate exactly.  Each port is rotated
to face the origin: ``degrees(atan2(-y, -x)) + 90``, the extra quarter turn
because port icons are drawn pointing up.

Balanced boards
---------------
With ``balanced=True`` the red tokens (6 and 8) are placed first, on producing
tiles chosen by a backtracking search so that no two of them touch, and the
other tokens fill the remaining tiles.  If the search fails the resources are
reshuffled and it runs again, up to ``MAX_BALANCE_ATTEMPTS`` times.
"""

from __future__ import annotations

import collections
import logging
import math
import random
from collections.abc import Iterable, Sequence
from typing import TypeVar

import pydantic

from .models.board import (
    RED_NUMBERS,
    AxialCoord,
    Board,
    BoardSize,
    PortKind,
    ResourceKind,
    Tile,
)

logger = logging.getLogger(__name__)

_T = TypeVar('_T')

# ---------------------------------------------------------------------------
# Board constants
# ---------------------------------------------------------------------------

# Classic number-token set, in the order printed on the box.
STANDARD_NUMBER_TOKENS: list[int] = [5, 2, 6, 3, 8, 10, 9, 12, 11, 4, 8, 10, 9, 4, 5, 6, 3, 11]

# Standard port distribution (4 generic 3:1 + one 2:1 per resource = 9 total).
STANDARD_PORTS: list[PortKind] = [
    PortKind.GENERIC,
    PortKind.GENERIC,
    PortKind.GENERIC,
    PortKind.GENERIC,
    PortKind.GRAIN,
    PortKind.FOREST,
    PortKind.HILLS,
    PortKind.MOUNTAINS,
    PortKind.PASTURE,
]

# Icons are drawn pointing up; atan2 measures from the +x axis.
PORT_ICON_OFFSET_DEGREES = 90.0

MAX_BALANCE_ATTEMPTS = 1000

# Placement budget for one search for non-adjacent red tiles.
SPREAD_SEARCH_STEPS = 2000


class InvalidBoardSizeError(ValueError):
    """Raised when a board size outside the supported set is requested."""


class BoardGenerationError(RuntimeError):
    """Raised when a balanced layout cannot be found."""


def hex_disk_size(radius: int) -> int:
    """Number of hexes within *radius* of the origin."""
    return 3 * radius * (radius + 1) + 1


class BoardConfig(pydantic.BaseModel):
    """Tile, token, and port pools for one board size."""

    model_config = pydantic.ConfigDict(frozen=True)

    land_radius: int = pydantic.Field(ge=1)
    resource_counts: dict[ResourceKind, int]
    number_tokens: tuple[int, ...]
    ports: tuple[PortKind, ...]

    @pydantic.model_validator(mode='after')
    def _check_pools(self) -> BoardConfig:
        if ResourceKind.SEA in self.resource_counts:
            raise ValueError('sea tiles are placed on the ring, not drawn from the pool')
        land_count = hex_disk_size(self.land_radius)
        tile_total = sum(self.resource_counts.values())
        if tile_total != land_count:
            raise ValueError(
                f'radius {self.land_radius} needs {land_count} land tiles, '
                f'resource pool has {tile_total}'
            )
        producing = land_count - self.resource_counts.get(ResourceKind.DESERT, 0)
        if len(self.number_tokens) != producing:
            raise ValueError(
                f'{producing} producing tiles need {producing} number tokens, '
                f'got {len(self.number_tokens)}'
            )
        ring_count = 6 * (self.land_radius + 1)
        if len(self.ports) > ring_count // 2:
            raise ValueError(f'{len(self.ports)} ports do not fit on a {ring_count}-tile ring')
        return self

    def resource_pool(self) -> list[ResourceKind]:
        """Expand resource_counts into a flat list."""
        pool: list[ResourceKind] = []
        for resource, count in self.resource_counts.items():
            pool.extend([resource] * count)
        return pool


SMALL_BOARD = BoardConfig(
    land_radius=2,
    resource_counts={
        ResourceKind.FOREST: 4,
        ResourceKind.PASTURE: 4,
        ResourceKind.GRAIN: 4,
        ResourceKind.HILLS: 3,
        ResourceKind.MOUNTAINS: 3,
        ResourceKind.DESERT: 1,
    },
    number_tokens=tuple(STANDARD_NUMBER_TOKENS),
    ports=tuple(STANDARD_PORTS),
)

# Large-board pools are house tunables rather than an official distribution:
# two deserts plus seven of each terrain fill the 37 hexes, and the classic
# token set is doubled then cut to the 35 producing tiles.
LARGE_BOARD = BoardConfig(
    land_radius=3,
    resource_counts={
        ResourceKind.DESERT: 2,
        ResourceKind.FOREST: 7,
        ResourceKind.PASTURE: 7,
        ResourceKind.GRAIN: 7,
        ResourceKind.HILLS: 7,
        ResourceKind.MOUNTAINS: 7,
    },
    number_tokens=tuple((STANDARD_NUMBER_TOKENS * 2)[:35]),
    ports=(*STANDARD_PORTS, PortKind.GENERIC, PortKind.PASTURE, PortKind.GENERIC),
)

BOARD_CONFIGS: dict[BoardSize, BoardConfig] = {
    BoardSize.SMALL: SMALL_BOARD,
    BoardSize.LARGE: LARGE_BOARD,
}

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_board_size(value: BoardSize | str) -> BoardSize:
    """Convert user input into a BoardSize.

    Raises:
        InvalidBoardSizeError: If *value* is not a supported size.
    """
    try:
        return BoardSize(str(value).strip().lower())
    except ValueError:
        allowed = ', '.join(size.value for size in BoardSize)
        raise InvalidBoardSizeError(
            f'Invalid board size {value!r}; expected one of: {allowed}'
        ) from None


def generate_board(
    size: BoardSize | str,
    balanced: bool = False,
    seed: int | None = None,
    config: BoardConfig | None = None,
) -> Board:
    """Generate and return a randomised board.

    Args:
        size: ``'small'`` (19 land tiles) or ``'large'`` (37 land tiles).
        balanced: When True, place red numbers (6 and 8) so that no two
            of them land on adjacent tiles.
        seed: Optional integer seed for reproducible boards.
        config: Pools to use instead of the preset for *size*; its land
            radius must match *size*.

    Returns:
        A :class:`Board` with land tiles followed by the sea ring.

    Raises:
        InvalidBoardSizeError: If *size* is not supported.
        ValueError: If *config* is for a different land radius.
        BoardGenerationError: If *balanced* and no layout was found.
    """
    board_size = parse_board_size(size)
    cfg = config if config is not None else BOARD_CONFIGS[board_size]
    if cfg.land_radius != board_size.land_radius:
        raise ValueError(
            f'config land radius {cfg.land_radius} does not match a {board_size} board '
            f'(radius {board_size.land_radius})'
        )
    rng = random.Random(seed)

    land = _create_land_tiles(rng, cfg, balanced)
    ring = _create_ring_tiles(rng, cfg)

    board = Board(size=board_size, land_radius=cfg.land_radius, tiles=(*land, *ring))
    logger.info(
        'Generated %s board: %d land tiles, %d sea tiles, %d ports',
        board_size,
        len(land),
        len(ring),
        len(board.port_tiles()),
    )
    return board


def hex_disk(radius: int) -> list[AxialCoord]:
    """Return every coordinate within *radius*, row-major by q then r."""
    coords: list[AxialCoord] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, -q + radius)
        for r in range(r_min, r_max + 1):
            coords.append(AxialCoord(q=q, r=r))
    return coords


def hex_ring(radius: int) -> list[AxialCoord]:
    """Return every coordinate at exactly *radius*, sorted by angle."""
    ring = [c for c in hex_disk(radius) if c.distance() == radius]
    ring.sort(key=ring_angle)
    return ring


def ring_angle(coord: AxialCoord) -> float:
    """Angle of the coordinate's projected centre around the origin."""
    x, y = coord.to_pixel()
    return math.atan2(y, x)


def port_rotation(coord: AxialCoord) -> float:
    """Rotation in degrees that points a port icon at the origin."""
    x, y = coord.to_pixel()
    return math.degrees(math.atan2(-y, -x)) + PORT_ICON_OFFSET_DEGREES


def has_adjacent_red_numbers(tiles: Iterable[Tile]) -> bool:
    """Return True if two neighbouring tiles both carry a red number."""
    red = {t.coord for t in tiles if t.number in RED_NUMBERS}
    return any(n in red for coord in red for n in coord.neighbors())


def validate_board_counts(board: Board, config: BoardConfig | None = None) -> bool:
    """Return True if *board* uses exactly the pools of its size preset."""
    cfg = config if config is not None else BOARD_CONFIGS[board.size]
    expected_resources = {k: v for k, v in cfg.resource_counts.items() if v}
    if board.resource_counts() != expected_resources:
        return False
    if sorted(board.numbers()) != sorted(cfg.number_tokens):
        return False
    placed_ports = collections.Counter(t.port for t in board.port_tiles())
    return placed_ports == collections.Counter(cfg.ports)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _shuffled(rng: random.Random, pool: Sequence[_T]) -> list[_T]:
    """Return a shuffled copy of *pool*."""
    items = list(pool)
    rng.shuffle(items)
    return items


def _place_land(
    coords: list[AxialCoord],
    resources: list[ResourceKind],
    numbers: list[int],
) -> list[Tile]:
    """Zip coordinates with resources, handing numbers to producing tiles."""
    number_iter = iter(numbers)
    tiles: list[Tile] = []
    for coord, resource in zip(coords, resources, strict=True):
        number = None if resource == ResourceKind.DESERT else next(number_iter)
        tiles.append(Tile(coord=coord, resource=resource, number=number))
    return tiles


def _create_land_tiles(
    rng: random.Random, cfg: BoardConfig, balanced: bool
) -> list[Tile]:
    """Shuffle the resource and number pools and lay out the land disk."""
    coords = hex_disk(cfg.land_radius)
    if not balanced:
        resources = _shuffled(rng, cfg.resource_pool())
        return _place_land(coords, resources, _shuffled(rng, cfg.number_tokens))

    for attempt in range(1, MAX_BALANCE_ATTEMPTS + 1):
        resources = _shuffled(rng, cfg.resource_pool())
        numbers = _balanced_numbers(rng, cfg, coords, resources)
        if numbers is None:
            continue
        tiles = _place_land(coords, resources, numbers)
        if not has_adjacent_red_numbers(tiles):
            logger.debug('Balanced number layout found after %d attempts', attempt)
            return tiles

    raise BoardGenerationError(
        f'No layout without adjacent red numbers after {MAX_BALANCE_ATTEMPTS} attempts'
    )


def _balanced_numbers(
    rng: random.Random,
    cfg: BoardConfig,
    coords: list[AxialCoord],
    resources: list[ResourceKind],
) -> list[int] | None:
    """Order the number tokens so that no two red tokens touch.

    Red tokens go to a set of mutually non-adjacent producing tiles; the
    remaining tokens fill the rest in shuffled order.  Returns the tokens in
    producing-tile order, or None if no such set was found.
    """
    producing = [
        coord for coord, res in zip(coords, resources, strict=True) if res != ResourceKind.DESERT
    ]
    reds = _shuffled(rng, [n for n in cfg.number_tokens if n in RED_NUMBERS])
    others = _shuffled(rng, [n for n in cfg.number_tokens if n not in RED_NUMBERS])

    red_coords = _pick_apart(rng, producing, len(reds))
    if red_coords is None:
        return None

    red_iter = iter(reds)
    other_iter = iter(others)
    return [next(red_iter) if c in red_coords else next(other_iter) for c in producing]


def _pick_apart(
    rng: random.Random, candidates: list[AxialCoord], count: int
) -> set[AxialCoord] | None:
    """Pick *count* pairwise non-adjacent coordinates by backtracking search.

    Candidates are tried in shuffled order; the search gives up after
    SPREAD_SEARCH_STEPS placements.
    """
    order = _shuffled(rng, candidates)
    chosen: list[AxialCoord] = []
    blocked: collections.Counter[AxialCoord] = collections.Counter()
    steps = 0

    def search(start: int) -> bool:
        nonlocal steps
        if len(chosen) == count:
            return True
        for index in range(start, len(order)):
            if len(order) - index < count - len(chosen):
                return False
            coord = order[index]
            if blocked[coord]:
                continue
            steps += 1
            if steps > SPREAD_SEARCH_STEPS:
                return False
            chosen.append(coord)
            blocked.update(coord.neighbors())
            if search(index + 1):
                return True
            chosen.pop()
            blocked.subtract(coord.neighbors())
        return False

    return set(chosen) if search(0) else None


def _create_ring_tiles(rng: random.Random, cfg: BoardConfig) -> list[Tile]:
    """Build the sea ring and hand a port to every other tile."""
    ports = iter(_shuffled(rng, cfg.ports))
    tiles: list[Tile] = []
    for index, coord in enumerate(hex_ring(cfg.land_radius + 1)):
        port = next(ports, None) if index % 2 == 0 else None
        tiles.append(
            Tile(
                coord=coord,
                resource=ResourceKind.SEA,
                port=port,
                rotation=port_rotation(coord) if port is not None else None,
            )
        )
    return tiles
