"""
Text rendering of a game state, for terminals and logs.

The secret station is only ever shown in the OVER screen.
"""

from __future__ import annotations

from ..engine_core.state import GameState, Tag

KEY_HELP = [
    "Left: go to previous station",
    "Right: go to next station",
    "Shift+Left: go to first station",
    "Shift+Right: go to last station",
    "Enter: get off the train",
]


def _player_line(name: str, station: int, is_current: bool) -> str:
    marker = "X" if is_current else " "
    return f"[{marker}] {name} is at station {station}"


def render_players(state) -> list[str]:
    return [
        _player_line(player.name, player.station, i == state.current_player)
        for i, player in enumerate(state.players)
    ]


def render_text(state: GameState) -> str:
    """Render a state as plain text."""
    lines: list[str] = []

    if state.tag == Tag.BEGIN:
        lines.append(
            f"Guess the secret station between {state.first_station} and {state.last_station}."
        )
        lines.append("Hit ENTER to begin")

    elif state.tag == Tag.SETUP:
        lines.append(f"Who is playing? ({state.min_players}-{state.max_players} players)")
        for seat, player in enumerate(state.seats):
            lines.append(f"  Seat {seat}: {player.name if player else '-'}")
        if state.can_start:
            lines.append("Hit ENTER to start")
        else:
            lines.append(f"Need at least {state.min_players} players")

    elif state.tag == Tag.TURN:
        lines.extend(render_players(state))
        lines.append(f"{state.current.name}, where do you get off?")
        lines.extend(f"  * {line}" for line in KEY_HELP)

    elif state.tag == Tag.TURN_RESULT:
        lines.extend(render_players(state))
        lines.append(
            f"Nobody gets off at station {state.current.station}. Hit ENTER to pass the turn"
        )

    elif state.tag == Tag.OVER:
        lines.extend(render_players(state))
        lines.append(
            f"Game Over! {state.winner.name} won the game "
            f"at station {state.secret_station}."
        )
        lines.append("Hit ENTER to play again")

    return "\n".join(lines)
