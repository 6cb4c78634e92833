"""
Game State - One immutable variant per game phase.

Design principles:
- Immutable: every transition returns a new state, nothing is mutated
- Explicit variants: BEGIN, SETUP, TURN, TURN_RESULT and OVER are separate
  types, so a phase can only carry the fields that make sense in it
- Sparse vs dense: SETUP holds seats (which may be empty), later phases
  hold a dense players tuple; compact_seats() converts between the two
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Optional, Union

from .config import GameConfig


class Tag(Enum):
    """Game phases."""
    BEGIN = "BEGIN"
    SETUP = "SETUP"
    TURN = "TURN"
    TURN_RESULT = "TURN_RESULT"
    OVER = "OVER"


@dataclass(frozen=True)
class Player:
    """A named player and the station their marker stands on."""
    name: str
    station: int

    def at(self, station: int) -> Player:
        """Return the same player moved to another station."""
        return replace(self, station=station)


# An empty seat is None
Seat = Optional[Player]


@dataclass(frozen=True)
class _BaseState:
    """Fields shared by every phase."""
    config: GameConfig
    secret_station: int

    tag: ClassVar[Tag]

    @property
    def first_station(self) -> int:
        return self.config.first_station

    @property
    def last_station(self) -> int:
        return self.config.last_station

    @property
    def min_players(self) -> int:
        return self.config.min_players

    @property
    def max_players(self) -> int:
        return self.config.max_players

    def _copy_with(self, **kwargs):
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BeginState(_BaseState):
    """Title screen. No roster yet."""
    tag: ClassVar[Tag] = Tag.BEGIN


@dataclass(frozen=True)
class SetupState(_BaseState):
    """
    Roster entry.

    seats always has exactly max_players entries; None marks an empty seat.
    """
    seats: tuple[Seat, ...] = ()

    tag: ClassVar[Tag] = Tag.SETUP

    @property
    def players(self) -> tuple[Seat, ...]:
        return self.seats

    @property
    def roster(self) -> tuple[Player, ...]:
        """Seated players in seat order."""
        return compact_seats(self.seats)

    @property
    def roster_size(self) -> int:
        return sum(1 for seat in self.seats if seat is not None)

    @property
    def can_start(self) -> bool:
        return self.roster_size >= self.min_players

    def with_seat(self, seat: int, player: Seat) -> SetupState:
        """Return new state with one seat replaced."""
        seats = list(self.seats)
        seats[seat] = player
        return self._copy_with(seats=tuple(seats))


@dataclass(frozen=True)
class _RosterState(_BaseState):
    """A phase with a dense roster and a current player."""
    players: tuple[Player, ...] = ()
    current_player: int = 0

    @property
    def current(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.current_player]

    @property
    def num_players(self) -> int:
        return len(self.players)


@dataclass(frozen=True)
class TurnState(_RosterState):
    """The current player is moving and may get off."""
    tag: ClassVar[Tag] = Tag.TURN


@dataclass(frozen=True)
class TurnResultState(_RosterState):
    """The current player got off at the wrong station."""
    tag: ClassVar[Tag] = Tag.TURN_RESULT


@dataclass(frozen=True)
class OverState(_RosterState):
    """Someone got off at the secret station."""
    winner: Optional[Player] = None

    tag: ClassVar[Tag] = Tag.OVER


GameState = Union[BeginState, SetupState, TurnState, TurnResultState, OverState]


def empty_seats(config: GameConfig) -> tuple[Seat, ...]:
    """One empty seat per possible player."""
    return (None,) * config.max_players


def compact_seats(seats: tuple[Seat, ...]) -> tuple[Player, ...]:
    """Drop empty seats, keeping seat order."""
    return tuple(seat for seat in seats if seat is not None)
