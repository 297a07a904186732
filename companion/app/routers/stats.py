"""HTTP routes for session statistics.

Sessions are posted in the request body; the service keeps no history.

Registers:

* ``POST /stats/leaderboard``: leaderboard for a list of sessions
* ``POST /stats/players/{name}``: one player's stats, badges and recent games
* ``GET  /stats/achievements``: the achievement catalogue
* ``POST /stats/dice``: how often each dice total ran hot
"""

from __future__ import annotations

import fastapi

from ..stats import achievements, leaderboard
from ..stats.models import Achievement, GameSession, PlayerProfile, PlayerStats

router = fastapi.APIRouter(prefix='/stats', tags=['stats'])


@router.post('/leaderboard', response_model=list[PlayerStats])
async def post_leaderboard(
    sessions: list[GameSession], group_id: str | None = None
) -> list[PlayerStats]:
    """Rank players by wins, then win rate."""
    return leaderboard.compute_leaderboard(sessions, group_id=group_id)


@router.post('/players/{name}', response_model=PlayerProfile)
async def post_player_profile(name: str, sessions: list[GameSession]) -> PlayerProfile:
    """Return a player's stats, earned achievements, and last five games."""
    earned = achievements.player_achievements(name, sessions)
    return PlayerProfile(
        stats=leaderboard.player_stats(name, sessions),
        achievements=achievements.describe(earned),
        recent_sessions=leaderboard.recent_sessions(name, sessions),
    )


@router.get('/achievements', response_model=list[Achievement])
async def list_achievements() -> list[Achievement]:
    """Return every achievement that can be earned."""
    return list(achievements.ACHIEVEMENTS)


@router.post('/dice', response_model=dict[int, int])
async def post_dice_frequency(sessions: list[GameSession]) -> dict[int, int]:
    """Count hot dice totals across sessions."""
    return leaderboard.dice_frequency(sessions)
