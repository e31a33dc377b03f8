import io
import random

import pytest

from castlequest.game import (
    Game,
    classic_castle,
    format_exits,
    parse_direction,
    place_creatures,
)
from castlequest.mapgen import REVERSE
from castlequest.room import Room


def _small_map():
    hall = Room("Hall")
    garden = Room("Garden", has_princess=True)
    pit = Room("Pit", has_monster=True)
    hall.connect("east", garden)
    garden.connect("west", hall)
    hall.connect("down", pit)
    pit.connect("up", hall)
    return hall, garden, pit


def test_format_exits_empty():
    assert format_exits([], False) == "No exits."
    assert format_exits([], True) == "No exits."


def test_format_exits_single():
    assert format_exits(["up"], True) == "up"
    assert format_exits(["up"], False) == "and up."


def test_format_exits_many_reversed():
    assert format_exits(["east", "up", "west"], False) == "west, up, and east."
    assert format_exits(["east", "up", "west"], True) == format_exits(
        ["east", "up", "west"], False
    )


def test_format_exits_mentions_every_name():
    names = ["down", "east", "north", "south"]
    text = format_exits(names, False)
    assert all(name in text for name in names)
    assert text.startswith("south, ")
    assert text.endswith("and down.")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("go east", "east"),
        ("go west", "west"),
        ("go up", "up"),
        ("go down", "down"),
        ("go south", "south"),
        ("go north", "north"),
        ("go upstairs", "up"),
        ("go northeast", "east"),
        ("east", None),
        ("walk east", None),
        ("go", None),
        ("", None),
        ("go nowhere", None),
    ],
)
def test_parse_direction(line, expected):
    assert parse_direction(line) == expected


def test_classic_castle_layout():
    rooms = classic_castle()
    assert rooms[0].name == "Lobby"
    assert {room.name for room in rooms} == {
        "Lobby",
        "Dining Room",
        "Armory",
        "Tower",
        "Kitchen",
        "Dungeon",
        "Tower Top",
        "Pantry",
        "Secret Room",
    }
    assert rooms[0].exit_names() == ["east", "up", "west"]
    assert not any(room.has_monster or room.has_princess for room in rooms)


def test_classic_castle_exits_are_two_way():
    for room in classic_castle():
        for direction, target in room.exits.items():
            assert target.exits[REVERSE[direction]] is room


@pytest.mark.parametrize("seed", range(20))
def test_place_creatures_excluding_start(seed):
    rooms = classic_castle()
    monster, princess = place_creatures(rooms, random.Random(seed), exclude_start=True)
    assert monster is not princess
    assert monster is not rooms[0] and princess is not rooms[0]
    assert monster.has_monster and princess.has_princess
    assert sum(room.has_monster for room in rooms) == 1
    assert sum(room.has_princess for room in rooms) == 1


@pytest.mark.parametrize("seed", range(20))
def test_place_creatures_apart_unless_start(seed):
    rooms = classic_castle()
    monster, princess = place_creatures(rooms, random.Random(seed), exclude_start=False)
    assert monster is not princess or monster is rooms[0]
    assert monster.has_monster and princess.has_princess


def test_place_creatures_single_room_shares_start():
    only = Room("Only")
    monster, princess = place_creatures([only], random.Random(1), exclude_start=False)
    assert monster is only and princess is only
    assert only.has_monster and only.has_princess


def test_place_creatures_too_few_rooms():
    with pytest.raises(ValueError):
        place_creatures([Room("A"), Room("B")], random.Random(0), exclude_start=True)
    with pytest.raises(ValueError):
        place_creatures([], random.Random(0), exclude_start=False)


def test_describe_room():
    hall, _, _ = _small_map()
    game = Game(hall, io.StringIO())
    text = game.describe_room()
    assert text.startswith("Welcome to the Hall. There are 2 exits: ")
    assert format_exits(hall.exit_names(), False) in text
    assert text.endswith("\nEnter your command:\n")


def test_describe_room_bare_single():
    _, garden, _ = _small_map()
    game = Game(garden, io.StringIO(), bare_single=True)
    assert game.describe_room() == (
        "Welcome to the Garden. There are 1 exits: west\nEnter your command:\n"
    )


def test_handle_wrong_instruction():
    hall, _, _ = _small_map()
    game = Game(hall, io.StringIO())
    assert game.handle("east") == "Wrong Instruction!\n"
    assert game.room is hall
    assert not game.over


def test_handle_no_room():
    hall, _, _ = _small_map()
    game = Game(hall, io.StringIO())
    assert game.handle("go north") == "There is NO ROOM in this direction!\n"
    assert game.room is hall


def test_handle_moves():
    hall, garden, _ = _small_map()
    game = Game(hall, io.StringIO())
    assert game.handle("go east") == "Garden\n"
    assert game.room is garden
    assert game.won and not game.lost


def test_play_win():
    hall, _, _ = _small_map()
    out = io.StringIO()
    game = Game(hall, out)
    assert game.play(["go north\n", "go east\n"]) is True
    text = out.getvalue()
    assert "There is NO ROOM in this direction!\n" in text
    assert "Garden\n" in text
    assert text.endswith("You have rescued the Princess. YOU WIN!")
    assert game.ending() == "You have rescued the Princess. YOU WIN!"


def test_play_lose():
    hall, _, _ = _small_map()
    out = io.StringIO()
    game = Game(hall, out)
    assert game.play(["go down"]) is True
    assert game.lost and not game.won
    assert out.getvalue().endswith("You have met the Monster. YOU LOSE!")


def test_play_stops_at_end_of_input():
    hall, _, _ = _small_map()
    out = io.StringIO()
    game = Game(hall, out)
    assert game.play([]) is False
    assert out.getvalue() == game.describe_room()
    assert game.ending() == ""


def test_ending_with_both_creatures():
    start = Room("Start", has_monster=True, has_princess=True)
    game = Game(start, io.StringIO())
    game.handle("")
    assert game.over
    assert game.ending() == (
        "You have met the Monster. YOU LOSE!You have rescued the Princess. YOU WIN!"
    )


def test_play_ignores_commands_after_end():
    hall, garden, _ = _small_map()
    game = Game(hall, io.StringIO())
    game.play(["go east", "go west"])
    assert game.room is garden