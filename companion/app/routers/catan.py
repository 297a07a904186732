"""HTTP routes for the board generator.

Registers:

* ``GET /catan/board``: generate a board as JSON
* ``GET /catan/board/download``: same board as a JSON file attachment
* ``GET /catan/sizes``: supported sizes and their tile counts
"""

from __future__ import annotations

import logging

import fastapi
import fastapi.responses
import pydantic

import common.settings

from ..catan import board_generator
from ..catan.models import serializers
from ..catan.models.board import Board, BoardSize

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(tags=['catan'])


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class BoardSizeInfo(pydantic.BaseModel):
    """Returned by GET /catan/sizes."""

    size: BoardSize
    land_radius: int
    land_tiles: int
    sea_tiles: int
    ports: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _generate(size: str, balanced: bool, seed: int | None) -> Board:
    """Generate a board, translating generator errors into HTTP errors."""
    try:
        return board_generator.generate_board(size, balanced=balanced, seed=seed)
    except board_generator.InvalidBoardSizeError as exc:
        logger.warning('Rejected board request: %s', exc)
        raise fastapi.HTTPException(status_code=400, detail=str(exc)) from exc
    except board_generator.BoardGenerationError as exc:
        logger.warning('Board generation failed: %s', exc)
        raise fastapi.HTTPException(status_code=503, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# HTTP endpoints
# ---------------------------------------------------------------------------


@router.get('/catan/board', response_model=Board)
async def get_board(
    size: str = common.settings.DEFAULT_BOARD_SIZE,
    balanced: bool = False,
    seed: int | None = None,
) -> Board:
    """Generate a fresh board.

    Args:
        size: ``'small'`` or ``'large'``.
        balanced: Keep red numbers (6 and 8) off neighbouring tiles.
        seed: Optional seed for a reproducible board.
    """
    return _generate(size, balanced, seed)


@router.get('/catan/board/download')
async def download_board(
    size: str = common.settings.DEFAULT_BOARD_SIZE,
    balanced: bool = False,
    seed: int | None = None,
) -> fastapi.responses.Response:
    """Generate a board and return it as a downloadable JSON file."""
    board = _generate(size, balanced, seed)
    return fastapi.responses.Response(
        content=serializers.serialize_to_json(board, indent=2),
        media_type='application/json',
        headers={
            'Content-Disposition': f'attachment; filename="catan-board-{board.size}.json"'
        },
    )


@router.get('/catan/sizes', response_model=list[BoardSizeInfo])
async def list_sizes() -> list[BoardSizeInfo]:
    """Describe every supported board size."""
    result: list[BoardSizeInfo] = []
    for size, config in board_generator.BOARD_CONFIGS.items():
        result.append(
            BoardSizeInfo(
                size=size,
                land_radius=config.land_radius,
                land_tiles=board_generator.hex_disk_size(config.land_radius),
                sea_tiles=6 * (config.land_radius + 1),
                ports=len(config.ports),
            )
        )
    return result
