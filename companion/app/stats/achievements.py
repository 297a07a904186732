"""Achievement catalogue and award rules."""

from __future__ import annotations

import datetime
from collections.abc import Iterable, Sequence

from . import leaderboard
from .models import Achievement, GameSession

ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement(id='novice', title='Settler', description='Play your first game.', icon='🛖'),
    Achievement(id='first_win', title='First Victory', description='Win 1 game.', icon='🏆'),
    Achievement(id='veteran', title='Veteran', description='Play 5 games.', icon='⚔️'),
    Achievement(id='master', title='Lord of Catan', description='Win 5 games.', icon='👑'),
    Achievement(
        id='unstoppable',
        title='Unstoppable',
        description='Win 3 games in a row this month.',
        icon='🔥',
    ),
    Achievement(
        id='party',
        title='Life of the Party',
        description='Play a game with 5 or more players.',
        icon='🥳',
    ),
    Achievement(
        id='duelist', title='Duelist', description='Play a one-on-one game.', icon='🤺'
    ),
    Achievement(
        id='strategist',
        title='Strategist',
        description='Keep a win rate of 50% or more over at least 3 games.',
        icon='🧠',
    ),
    Achievement(id='loyal', title='Old Timer', description='Play 10 games.', icon='👴'),
)

_BY_ID: dict[str, Achievement] = {a.id: a for a in ACHIEVEMENTS}

# Thresholds.
VETERAN_GAMES = 5
LOYAL_GAMES = 10
MASTER_WINS = 5
PARTY_PLAYERS = 5
DUEL_PLAYERS = 2
STRATEGIST_MIN_GAMES = 3
STRATEGIST_WIN_RATE = 0.5
UNSTOPPABLE_STREAK = 3


def player_achievements(
    name: str,
    sessions: Sequence[GameSession],
    now: datetime.datetime | None = None,
) -> list[str]:
    """Return the ids of every achievement *name* has earned, in catalogue order."""
    name = name.strip()
    played = [s for s in sessions if name in s.participants()]
    wins = [s for s in played if s.winner.strip() == name]
    streak = leaderboard.max_win_streak(name, leaderboard.sessions_in_window(sessions, now))

    earned = {
        'novice': len(played) >= 1,
        'first_win': len(wins) >= 1,
        'veteran': len(played) >= VETERAN_GAMES,
        'master': len(wins) >= MASTER_WINS,
        'unstoppable': streak >= UNSTOPPABLE_STREAK,
        'party': any(s.num_players >= PARTY_PLAYERS for s in played),
        'duelist': any(s.num_players == DUEL_PLAYERS for s in played),
        'strategist': (
            len(played) >= STRATEGIST_MIN_GAMES
            and len(wins) / len(played) >= STRATEGIST_WIN_RATE
        ),
        'loyal': len(played) >= LOYAL_GAMES,
    }
    return [a.id for a in ACHIEVEMENTS if earned[a.id]]


def describe(achievement_ids: Iterable[str]) -> list[Achievement]:
    """Look up catalogue entries; unknown ids raise KeyError."""
    return [_BY_ID[achievement_id] for achievement_id in achievement_ids]
