"""Command-line board generator.

Prints a freshly generated board, either as a readable summary or as JSON.

Usage::

    python -m companion.app.catan.generate --size large --balanced
"""

from __future__ import annotations

import argparse
import sys

import common.log
import common.settings
from companion.app.catan import board_generator
from companion.app.catan.models import board as board_models
from companion.app.catan.models import serializers


def format_board(board: board_models.Board) -> str:
    """Render a board as a plain-text summary."""
    lines = [f'{board.size} board (land radius {board.land_radius})', '']
    lines.append('Land:')
    for tile in board.land_tiles():
        number = '--' if tile.number is None else f'{tile.number:2d}'
        lines.append(f'  ({tile.coord.q:+d},{tile.coord.r:+d})  {number}  {tile.resource}')
    lines.append('')
    lines.append('Ports:')
    for tile in board.port_tiles():
        assert tile.port is not None and tile.rotation is not None
        lines.append(
            f'  ({tile.coord.q:+d},{tile.coord.r:+d})  {tile.port} '
            f'{tile.port.ratio}:1  facing {tile.rotation:.0f} deg'
        )
    return '\n'.join(lines)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description='Generate a random Catan board')
    parser.add_argument(
        '--size',
        choices=[size.value for size in board_models.BoardSize],
        default=common.settings.DEFAULT_BOARD_SIZE,
        help='Board size',
    )
    parser.add_argument(
        '--balanced',
        action='store_true',
        help='Keep 6s and 8s from touching',
    )
    parser.add_argument('--seed', type=int, default=None, help='RNG seed')
    parser.add_argument('--json', action='store_true', help='Print the board as JSON')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate a board and print it; returns the process exit code."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    common.log.configure_logging()
    try:
        board = board_generator.generate_board(
            args.size, balanced=args.balanced, seed=args.seed
        )
    except (
        board_generator.InvalidBoardSizeError,
        board_generator.BoardGenerationError,
    ) as exc:
        print(f'error: {exc}', file=sys.stderr)
        return 1
    if args.json:
        print(serializers.serialize_to_json(board, indent=2))
    else:
        print(format_board(board))
    return 0


if __name__ == '__main__':
    sys.exit(main())
