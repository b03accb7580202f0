import pytest

from octagonstats.fight import Fight, NonTitleFight, TitleFight, fight_table_header
from octagonstats.fighter import Fighter
from octagonstats.referee import Referee
from octagonstats.stats import FightRecord


def _fighter(name, wins, losses):
    return Fighter(name=name, record=FightRecord(wins=wins, losses=losses))


def _fight(cls=Fight, red=("Red Person", 10, 2), blue=("Blue Person", 5, 5)):
    return cls(
        blue_fighter=_fighter(*blue),
        red_fighter=_fighter(*red),
        referee=Referee("Herb Dean"),
        weight_class="Lightweight",
        winner="Red",
        bout_number=7,
        location="Las Vegas",
        date="2024-01-01",
    )


def test_header_layout():
    header = fight_table_header()
    title_line, rule_line, rest = header.split("\n")
    assert rest == ""
    assert rule_line == "-" * 136
    assert title_line.startswith("Red Corner")
    assert title_line.endswith("Bout Number")
    assert len(title_line) == 10 + 29 + 32 + 14 + 10 + 10 + 8 + 10 + 13


def test_defaults():
    fight = Fight()
    assert fight.weight_class == "N/A"
    assert fight.winner == "N/A"
    assert fight.bout_number == 0
    assert fight.location == "N/A"
    assert fight.date == "N/A"
    assert fight.red_fighter.name == "N/A"
    assert fight.referee.name == "N/A"


def test_format_row_columns():
    row = _fight().format_row()
    assert row[:30] == "Red Person".ljust(30)
    assert row[30:59] == "Blue Person".ljust(29)
    assert row[59:79] == "Lightweight".ljust(20)
    assert row[79:89] == "Red".ljust(10)
    assert row[89:97] == "10".ljust(8)
    assert row[97:107] == "2".ljust(10)
    assert row[107:115] == "5".ljust(8)
    assert row[115:125] == "5".ljust(10)
    assert row[125:133] == "7".ljust(8)
    assert row[133:] == "Herb Dean"


def test_str_is_row():
    fight = _fight()
    assert str(fight) == fight.format_row()


def test_long_name_not_truncated():
    long_name = "X" * 40
    fight = _fight(red=(long_name, 1, 1))
    assert fight.format_row().startswith(long_name + "Blue Person")


def test_title_row_is_yellow():
    plain = _fight().format_row()
    title = _fight(TitleFight).format_row()
    assert title == "\033[33m" + plain + "\033[0m"


def test_non_title_row_is_white():
    plain = _fight().format_row()
    row = _fight(NonTitleFight).format_row()
    assert row == "\033[97m" + plain + "\033[0m"


def test_display_plain():
    fight = _fight()
    assert fight.display() == (
        "Displaying fight: \n\n" + fight_table_header() + fight.format_row() + "\n"
    )


def test_display_title():
    fight = _fight(TitleFight)
    assert fight.display() == (
        "Displaying fight: \n\n"
        + fight_table_header()
        + "\033[33m"
        + fight.format_row()
        + "\n\033[0m"
    )


def test_display_non_title():
    fight = _fight(NonTitleFight)
    out = fight.display()
    assert out.endswith("\033[97m" + fight.format_row() + "\n\033[0m")


def test_favorite_red():
    fight = _fight(red=("Red Person", 10, 2), blue=("Blue Person", 5, 5))
    assert fight.favorite_message() == "Red Person should be the favorite to win. \n\n"


def test_favorite_blue():
    fight = _fight(red=("Red Person", 1, 3), blue=("Blue Person", 9, 1))
    assert fight.favorite_message() == "Blue Person should be the favorite to win. \n\n"


@pytest.mark.parametrize("red,blue", [((4, 4), (2, 2)), ((3, 1), (6, 2))])
def test_even_fight(red, blue):
    fight = _fight(red=("Red Person", *red), blue=("Blue Person", *blue))
    assert fight.favorite_message() == "It's an even fight \n\n"


def test_no_record_gives_no_message():
    fight = _fight(red=("Red Person", 0, 0), blue=("Blue Person", 3, 1))
    assert fight.favorite_message() == ""


def test_subclass_is_fight():
    fight = _fight(TitleFight)
    assert isinstance(fight, Fight)
    assert fight.red_fighter.name == "Red Person"
    assert fight.bout_number == 7