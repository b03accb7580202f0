"""The referee who officiated a fight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from octagonstats.stats import clean_text


@dataclass(order=True)
class Referee:
    """A referee, compared and ordered by name."""

    name: str = "N/A"

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name":
            value = clean_text(value)
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return self.name