"""Unit tests for common/settings.py."""

import importlib
import os
import unittest

import common.settings

_VARS = ('LOG_LEVEL', 'STREAK_WINDOW_DAYS', 'DEFAULT_BOARD_SIZE')


class TestSettings(unittest.TestCase):
    """Tests for shared application settings."""

    def setUp(self) -> None:
        self._backup = {name: os.environ.pop(name, None) for name in _VARS}

    def tearDown(self) -> None:
        for name, value in self._backup.items():
            os.environ.pop(name, None)
            if value is not None:
                os.environ[name] = value
        importlib.reload(common.settings)

    def test_defaults(self) -> None:
        """Settings fall back to their defaults when the env vars are unset."""
        importlib.reload(common.settings)
        self.assertEqual(common.settings.LOG_LEVEL, 'INFO')
        self.assertEqual(common.settings.STREAK_WINDOW_DAYS, 30)
        self.assertEqual(common.settings.DEFAULT_BOARD_SIZE, 'small')

    def test_log_level_is_upper_cased(self) -> None:
        """LOG_LEVEL is normalised to upper case."""
        os.environ['LOG_LEVEL'] = 'debug'
        importlib.reload(common.settings)
        self.assertEqual(common.settings.LOG_LEVEL, 'DEBUG')

    def test_streak_window_reads_from_env(self) -> None:
        """STREAK_WINDOW_DAYS is parsed as an integer."""
        os.environ['STREAK_WINDOW_DAYS'] = '7'
        importlib.reload(common.settings)
        self.assertEqual(common.settings.STREAK_WINDOW_DAYS, 7)

    def test_default_board_size_reads_from_env(self) -> None:
        """DEFAULT_BOARD_SIZE is read verbatim from the environment."""
        os.environ['DEFAULT_BOARD_SIZE'] = 'large'
        importlib.reload(common.settings)
        self.assertEqual(common.settings.DEFAULT_BOARD_SIZE, 'large')


if __name__ == '__main__':
    unittest.main()
