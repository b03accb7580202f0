"""Fights between two fighters, and how they are shown in a table."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from octagonstats.fighter import Fighter
from octagonstats.referee import Referee

_RESET = "\033[0m"
_YELLOW = "\033[33m"
_WHITE = "\033[97m"

_HEADER_COLUMNS = (
    ("Red Corner", 10),
    ("Blue Corner", 29),
    ("Weight Class", 32),
    ("Winner", 14),
    ("R Wins", 10),
    ("R Losses", 10),
    ("B Wins", 8),
    ("B Losses", 10),
    ("Bout Number", 13),
)

_RULE_WIDTH = 136


def fight_table_header() -> str:
    """Column titles of the single-fight table and the rule beneath them."""
    titles = "".join(f"{title:>{width}}" for title, width in _HEADER_COLUMNS)
    return f"{titles}\n{'-' * _RULE_WIDTH}\n"


def _win_rate(fighter: Fighter) -> float:
    wins = fighter.record.wins
    total = wins + fighter.record.losses
    if total == 0:
        if wins == 0:
            return math.nan
        return math.copysign(math.inf, wins)
    return wins / total


@dataclass
class Fight:
    """One bout between a red-corner and a blue-corner fighter."""

    blue_fighter: Fighter = field(default_factory=Fighter)
    red_fighter: Fighter = field(default_factory=Fighter)
    referee: Referee = field(default_factory=Referee)
    weight_class: str = "N/A"
    winner: str = "N/A"
    bout_number: int = 0
    location: str = "N/A"
    date: str = "N/A"

    _display_prefix: ClassVar[str] = ""
    _display_suffix: ClassVar[str] = ""

    def favorite_message(self) -> str:
        """Name the fighter with the better win rate, or call it even.

        When a win rate cannot be worked out (no fights on record) no
        comparison holds and the message is empty.
        """
        red_rate = _win_rate(self.red_fighter)
        blue_rate = _win_rate(self.blue_fighter)
        if red_rate > blue_rate:
            return f"{self.red_fighter.name} should be the favorite to win. \n\n"
        if red_rate < blue_rate:
            return f"{self.blue_fighter.name} should be the favorite to win. \n\n"
        if red_rate == blue_rate:
            return "It's an even fight \n\n"
        return ""

    def format_row(self) -> str:
        """The fight as one left-aligned table row."""
        red = self.red_fighter
        blue = self.blue_fighter
        return (
            f"{red.name:<30}"
            f"{blue.name:<29}"
            f"{self.weight_class:<20}"
            f"{self.winner:<10}"
            f"{red.record.wins:<8}"
            f"{red.record.losses:<10}"
            f"{blue.record.wins:<8}"
            f"{blue.record.losses:<10}"
            f"{self.bout_number:<8}"
            f"{str(self.referee):<8}"
        )

    def display(self) -> str:
        """The fight under a heading and the table header."""
        return (
            "Displaying fight: \n\n"
            + fight_table_header()
            + self._display_prefix
            + self.format_row()
            + "\n"
            + self._display_suffix
        )

    def __str__(self) -> str:
        return self.format_row()


class TitleFight(Fight):
    """A championship bout, shown in yellow."""

    _display_prefix: ClassVar[str] = _YELLOW
    _display_suffix: ClassVar[str] = _RESET

    def format_row(self) -> str:
        """The table row wrapped in yellow."""
        return _YELLOW + super().format_row() + _RESET


class NonTitleFight(Fight):
    """A regular bout, shown in white."""

    _display_prefix: ClassVar[str] = _WHITE
    _display_suffix: ClassVar[str] = _RESET

    def format_row(self) -> str:
        """The table row wrapped in white."""
        return _WHITE + super().format_row() + _RESET