"""Shared application settings read from environment variables."""

import os

LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Winning streaks only count sessions played within this many days.
STREAK_WINDOW_DAYS: int = int(os.environ.get('STREAK_WINDOW_DAYS', '30'))

DEFAULT_BOARD_SIZE: str = os.environ.get('DEFAULT_BOARD_SIZE', 'small')
