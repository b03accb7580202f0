# octagonstats

A small library for mixed martial arts bouts. It models fighters, with their
records, physique and statistics, as well as referees and fights. It also
builds the text reports and table rows used to show them.

## Installing

```
pip install .
```

## Modules

- `octagonstats.stats` holds the record and statistics types:
  - `WinsBy`: decision, KO/TKO and submission wins.
  - `FightRecord`: wins, losses and a `WinsBy`.
  - `StrikingStats` and `GrapplingStats`.
  - `FightStats`: striking and grappling together. `FightStats.from_values`
    builds it from a flat list of numbers.
  - `PhysicalAttributes`: age, stance, height and reach.

  Each type has a `describe()` method that returns a sentence fragment. The
  module also has two helpers. `clean_text` strips newlines and carriage
  returns. `format_float` renders a number with six decimals.
- `octagonstats.referee` holds `Referee`. Referees compare and sort by name.
- `octagonstats.fighter` holds `Fighter`, `FemaleFighter` and `MaleFighter`,
  plus `is_women_weight_class`.
  - Fighters compare and sort by name.
  - `record_summary`, `attributes_summary`, `wins_by_summary` and
    `fight_stats_summary` return readable sentences.
  - `weight_classes(fights)` lists the weight class of every bout the fighter
    appears in.
  - `weight_class_report(fights)` formats that list. The female and male
    variants add a heading and "(Most recent)" / "(UFC debut)" markers.
- `octagonstats.fight` holds `Fight`, `TitleFight` and `NonTitleFight`, plus
  `fight_table_header()`.
  - `favorite_message()` names the corner with the better win rate, or calls
    the fight even.
  - `format_row()` gives one fixed-width table row. Title fights are wrapped
    in yellow ANSI colour codes and non-title fights in white.
  - `display()` puts the row under a heading and the column titles.

## Example

```python
from octagonstats.fight import TitleFight
from octagonstats.fighter import MaleFighter
from octagonstats.referee import Referee
from octagonstats.stats import FightRecord, WinsBy

red = MaleFighter("Red Example", FightRecord(10, 2, WinsBy(4, 5, 1)))
blue = MaleFighter("Blue Example", FightRecord(8, 4))
fight = TitleFight(
    blue_fighter=blue,
    red_fighter=red,
    referee=Referee("Ref Example"),
    weight_class="Lightweight",
    winner="Red",
    bout_number=1,
)

print(fight.favorite_message())   # Red Example should be the favorite to win.
print(red.record_summary())
print(red.weight_class_report([fight]))
print(fight.display())
```

## What it does not do

The package has no command to run and no interactive menu. It also does not
read bout data from a file. You build `Fight` objects yourself and pass them
to the methods above.

## Running the tests

```
pip install .[test]
pytest
```