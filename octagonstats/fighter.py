"""Fighters, with their record, physique and statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Iterable, Protocol

from octagonstats.stats import (
    FightRecord,
    FightStats,
    PhysicalAttributes,
    clean_text,
)

WOMEN_WEIGHT_CLASSES = frozenset(
    {
        "WomenStrawweight",
        "WomenFlyweight",
        "WomenBantamweight",
        "WomenFeatherweight",
    }
)

MEN_WEIGHT_CLASSES = frozenset(
    {
        "Flyweight",
        "Bantamweight",
        "Featherweight",
        "Lightweight",
        "Welterweight",
        "Middleweight",
        "LightHeavyweight",
        "Heavyweight",
        "Catchweight",
    }
)


class _FightLike(Protocol):
    red_fighter: "Fighter"
    blue_fighter: "Fighter"
    weight_class: str


def is_women_weight_class(weight_class: str) -> bool:
    """Tell whether ``weight_class`` is one of the women's divisions."""
    return weight_class in WOMEN_WEIGHT_CLASSES


@total_ordering
@dataclass(eq=False)
class Fighter:
    """A fighter, compared and ordered by name."""

    name: str = "N/A"
    record: FightRecord = field(default_factory=FightRecord)
    attributes: PhysicalAttributes = field(default_factory=PhysicalAttributes)
    stats: FightStats = field(default_factory=FightStats)

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name":
            value = clean_text(value)
        super().__setattr__(key, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fighter):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fighter):
            return NotImplemented
        return self.name < other.name

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.name

    def record_summary(self) -> str:
        """The fighter's win/loss record as a sentence."""
        return f"{self.name}{self.record.describe()}\n\n"

    def attributes_summary(self) -> str:
        """The fighter's physique as a sentence."""
        return f"{self.name}{self.attributes.describe()}"

    def wins_by_summary(self) -> str:
        """How the fighter's wins were earned, as a sentence."""
        return f"{self.name}{self.record.wins_by.describe()}\n\n"

    def fight_stats_summary(self) -> str:
        """The fighter's striking and grappling numbers as a sentence."""
        return f"{self.name}{self.stats.describe()}"

    def weight_classes(self, fights: Iterable[_FightLike]) -> list[str]:
        """Weight classes of every fight this fighter took part in, in order."""
        return [
            fight.weight_class
            for fight in fights
            if self.name in (fight.red_fighter.name, fight.blue_fighter.name)
        ]

    def _weight_class_lines(self, fights: Iterable[_FightLike]) -> str:
        return "".join(f"{wc}\n" for wc in self.weight_classes(fights))

    def weight_class_report(self, fights: Iterable[_FightLike]) -> str:
        """One line per weight class fought in, followed by a blank line."""
        return self._weight_class_lines(fights) + "\n"


class FemaleFighter(Fighter):
    """A fighter in the women's divisions."""

    def weight_class_report(self, fights: Iterable[_FightLike]) -> str:
        """Weight classes fought in, most recent first, with a heading."""
        return (
            f"{self.name} is a female UFC fighter who has fought in the following"
            " weight classes: \n(Most recent)\n"
            + self._weight_class_lines(fights)
            + "(UFC debut)\n\n"
        )


class MaleFighter(Fighter):
    """A fighter in the men's divisions."""

    def weight_class_report(self, fights: Iterable[_FightLike]) -> str:
        """Weight classes fought in, most recent first, with a heading."""
        return (
            f"{self.name} is a male UFC fighter who has fought in the following"
            " weight classes: \n(Most recent)\n"
            + self._weight_class_lines(fights)
            + "(UFC debut)\n\n"
        )