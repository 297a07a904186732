"""Leaderboard aggregation over recorded game sessions.

Statistics are recomputed from the full session list on every request:

* every session gives its winner one win and each listed player one game;
* win rate is the whole-number percentage of games won;
* the streak is the longest run of consecutive wins over sessions played in
  the last ``STREAK_WINDOW_DAYS`` days.  A session the player sat out does not
  break the run; one they played and lost does.
"""

from __future__ import annotations

import collections
import datetime
import logging
from collections.abc import Iterable, Sequence

import common.settings

from .models import DICE_TOTALS, GameSession, PlayerStats

logger = logging.getLogger(__name__)


def _as_utc(moment: datetime.datetime) -> datetime.datetime:
    """Treat naive timestamps as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=datetime.UTC)
    return moment


def _utc_now(now: datetime.datetime | None) -> datetime.datetime:
    return _as_utc(now) if now is not None else datetime.datetime.now(datetime.UTC)


def chronological(sessions: Iterable[GameSession]) -> list[GameSession]:
    """Return sessions sorted oldest first."""
    return sorted(sessions, key=lambda s: _as_utc(s.created_date))


def sessions_in_window(
    sessions: Iterable[GameSession],
    now: datetime.datetime | None = None,
    days: int | None = None,
) -> list[GameSession]:
    """Return sessions played within the streak window, oldest first."""
    window = days if days is not None else common.settings.STREAK_WINDOW_DAYS
    cutoff = _utc_now(now) - datetime.timedelta(days=window)
    return [s for s in chronological(sessions) if _as_utc(s.created_date) >= cutoff]


def max_win_streak(name: str, ordered_sessions: Iterable[GameSession]) -> int:
    """Longest run of consecutive wins by *name* in the given order."""
    current = 0
    best = 0
    for session in ordered_sessions:
        if name not in session.participants():
            continue
        if session.winner.strip() == name:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best


def _win_rate(wins: int, total: int) -> int:
    return round(wins / total * 100) if total > 0 else 0


def compute_leaderboard(
    sessions: Sequence[GameSession],
    now: datetime.datetime | None = None,
    group_id: str | None = None,
) -> list[PlayerStats]:
    """Aggregate per-player statistics, best players first.

    Args:
        sessions: All recorded sessions, in any order.
        now: Reference time for the streak window; defaults to the current time.
        group_id: When set, only sessions of that group are counted.

    Returns:
        One :class:`PlayerStats` per player, sorted by wins then win rate.
    """
    if group_id is not None:
        sessions = [s for s in sessions if s.group_id == group_id]

    wins: collections.Counter[str] = collections.Counter()
    games: collections.Counter[str] = collections.Counter()
    names: list[str] = []  # first-seen order, for stable ties

    for session in sessions:
        winner = session.winner.strip()
        if winner:
            if winner not in wins and winner not in games:
                names.append(winner)
            wins[winner] += 1
        for player in session.participants():
            if player not in wins and player not in games:
                names.append(player)
            games[player] += 1

    recent = sessions_in_window(sessions, now)
    leaderboard = [
        PlayerStats(
            name=name,
            wins=wins[name],
            total_games=games[name],
            win_rate=_win_rate(wins[name], games[name]),
            max_streak=max_win_streak(name, recent),
        )
        for name in names
    ]
    leaderboard.sort(key=lambda row: (-row.wins, -row.win_rate))
    logger.debug(
        'Leaderboard built from %d sessions for %d players', len(sessions), len(leaderboard)
    )
    return leaderboard


def player_stats(
    name: str,
    sessions: Sequence[GameSession],
    now: datetime.datetime | None = None,
) -> PlayerStats:
    """Return the leaderboard row for *name*, or an all-zero row."""
    name = name.strip()
    for row in compute_leaderboard(sessions, now):
        if row.name == name:
            return row
    return PlayerStats(name=name)


def recent_sessions(
    name: str, sessions: Iterable[GameSession], limit: int = 5
) -> list[GameSession]:
    """Return up to *limit* of the player's sessions, newest first."""
    name = name.strip()
    played = [s for s in chronological(sessions) if name in s.participants()]
    return list(reversed(played))[:limit]


def dice_frequency(sessions: Iterable[GameSession]) -> dict[int, int]:
    """Count how often each dice total was marked hot, for totals 2 to 12."""
    counts = collections.Counter(n for s in sessions for n in s.dice_stats)
    return {total: counts[total] for total in DICE_TOTALS}
