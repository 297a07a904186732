"""Game-session and player-statistics models.

Sessions are recorded by the group after each game night and submitted to
the stats endpoints as JSON; nothing here is persisted.
"""

from __future__ import annotations

import datetime

import pydantic

# Victory points needed to win a standard game; no recorded score exceeds it.
MAX_SCORE = 12

# Dice totals that can be marked as "hot" for a session.
DICE_TOTALS: tuple[int, ...] = tuple(range(2, 13))


class ScoreBreakdown(pydantic.BaseModel):
    """The winner's victory points, by source."""

    settlements: int = pydantic.Field(default=0, ge=0)
    cities: int = pydantic.Field(default=0, ge=0)
    victory_cards: int = pydantic.Field(default=0, ge=0)
    longest_road: bool = False
    largest_army: bool = False

    @pydantic.computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        """Settlements 1, cities 2, cards 1, longest road 2, largest army 2."""
        return (
            self.settlements
            + 2 * self.cities
            + self.victory_cards
            + (2 if self.longest_road else 0)
            + (2 if self.largest_army else 0)
        )

    @pydantic.model_validator(mode='after')
    def _check_total(self) -> ScoreBreakdown:
        if self.total > MAX_SCORE:
            raise ValueError(f'score {self.total} exceeds the maximum of {MAX_SCORE}')
        return self


class GameSession(pydantic.BaseModel):
    """One completed game."""

    id: str
    session_name: str = ''
    created_date: datetime.datetime
    num_players: int = pydantic.Field(default=0, ge=0)  # 0 means "use len(players_list)"
    players_list: list[str]
    winner: str
    notes: str = ''
    group_id: str | None = None
    score_breakdown: ScoreBreakdown | None = None
    dice_stats: list[int] = pydantic.Field(default_factory=list)

    @pydantic.field_validator('dice_stats')
    @classmethod
    def _check_dice(cls, value: list[int]) -> list[int]:
        bad = [n for n in value if n not in DICE_TOTALS]
        if bad:
            raise ValueError(f'dice totals must be between 2 and 12, got {bad}')
        return value

    @pydantic.model_validator(mode='after')
    def _default_num_players(self) -> GameSession:
        if self.num_players == 0:
            self.num_players = len(self.players_list)
        return self

    def participants(self) -> list[str]:
        """Trimmed, non-empty, de-duplicated player names in listed order."""
        return list(dict.fromkeys(name.strip() for name in self.players_list if name.strip()))


class PlayerStats(pydantic.BaseModel):
    """One leaderboard row."""

    name: str
    wins: int = 0
    total_games: int = 0
    win_rate: int = 0  # whole percent
    max_streak: int = 0  # within the streak window


class Achievement(pydantic.BaseModel):
    """A badge a player can earn."""

    model_config = pydantic.ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    icon: str


class PlayerProfile(pydantic.BaseModel):
    """Everything the profile view shows for one player."""

    stats: PlayerStats
    achievements: list[Achievement]
    recent_sessions: list[GameSession]
