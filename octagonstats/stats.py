"""Fighter statistics: win breakdowns, records, striking, grappling and physique."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def clean_text(text: str) -> str:
    """Drop every newline and carriage return from ``text``."""
    return text.replace("\n", "").replace("\r", "")


def format_float(value: float) -> str:
    """Render a number with six decimal places, as the reports show it."""
    return f"{float(value):f}"


@dataclass
class WinsBy:
    """How a fighter's wins were earned."""

    decision_wins: int = 0
    tko_wins: int = 0
    sub_wins: int = 0

    def describe(self) -> str:
        """Sentence fragment listing the win methods."""
        return (
            f" holds {self.decision_wins} wins by decision, "
            f"{self.tko_wins} wins by KO/TKO, and "
            f"{self.sub_wins} wins by submission.\n\n"
        )


@dataclass
class FightRecord:
    """A fighter's wins, losses and win breakdown."""

    wins: int = 0
    losses: int = 0
    wins_by: WinsBy = field(default_factory=WinsBy)

    def describe(self) -> str:
        """Sentence fragment stating the record."""
        return f" holds a record of {self.wins} wins and {self.losses} losses."


@dataclass
class StrikingStats:
    """Average striking numbers of a fighter."""

    average_knockdowns: float = 0.0
    striking_accuracy: float = 0.0
    strikes_attempted: float = 0.0
    strikes_landed: float = 0.0

    def describe(self) -> str:
        """Sentence fragment summarising the striking."""
        return (
            f" lands an average of {format_float(self.average_knockdowns)} knockdowns and "
            f"{format_float(self.strikes_landed)} total strikes of "
            f"{format_float(self.strikes_attempted)} attempted strikes, "
            f"for a striking accuracy of {format_float(self.striking_accuracy)}."
        )


@dataclass
class GrapplingStats:
    """Average takedown numbers of a fighter."""

    takedown_accuracy: float = 0.0
    takedowns_attempted: float = 0.0
    takedowns_landed: float = 0.0

    def describe(self) -> str:
        """Sentence fragment summarising the grappling."""
        return (
            f" lands {format_float(self.takedowns_landed)} takedowns of "
            f"{format_float(self.takedowns_attempted)} attempted takedowns, "
            f"for a takedown accuracy of {format_float(self.takedown_accuracy)}.\n\n"
        )


@dataclass
class FightStats:
    """Striking and grappling statistics together."""

    grappling: GrapplingStats = field(default_factory=GrapplingStats)
    striking: StrikingStats = field(default_factory=StrikingStats)

    @classmethod
    def from_values(
        cls,
        average_knockdowns: float,
        striking_accuracy: float,
        takedown_accuracy: float,
        strikes_attempted: float,
        strikes_landed: float,
        takedowns_attempted: float,
        takedowns_landed: float,
    ) -> "FightStats":
        """Build both parts from the flat list of numbers a data row carries."""
        return cls(
            grappling=GrapplingStats(
                takedown_accuracy, takedowns_attempted, takedowns_landed
            ),
            striking=StrikingStats(
                average_knockdowns, striking_accuracy, strikes_attempted, strikes_landed
            ),
        )

    def describe(self) -> str:
        """Striking summary followed by grappling summary."""
        return self.striking.describe() + " And" + self.grappling.describe()


@dataclass
class PhysicalAttributes:
    """Age, stance, height and reach of a fighter."""

    age: int = 0
    stance: str = "N/A"
    height: float = 0.0
    reach: float = 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "stance":
            value = clean_text(value)
        super().__setattr__(name, value)

    def describe(self) -> str:
        """Sentence fragment describing the fighter's physique."""
        return (
            f" is {self.age} years old, fights in a(n) {self.stance} stance, "
            f"stands {format_float(self.height)}cm tall, "
            f"with a {format_float(self.reach)}cm reach.\n\n"
        )