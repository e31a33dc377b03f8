"""The text adventure itself: command parsing, creature placement and the game loop."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .room import Room

# Directions are tried in this order when reading a command.
_COMMAND_DIRECTIONS: tuple[str, ...] = ("east", "west", "up", "down", "south", "north")

WRONG_INSTRUCTION = "Wrong Instruction!"
NO_ROOM = "There is NO ROOM in this direction!"
LOSE_MESSAGE = "You have met the Monster. YOU LOSE!"
WIN_MESSAGE = "You have rescued the Princess. YOU WIN!"


def format_exits(names: Sequence[str], bare_single: bool = False) -> str:
    """Describe a list of exit names, last name first, ending with "and <first>."

    With ``bare_single`` a lone exit is given by its name alone.
    """
    if not names:
        return "No exits."
    if len(names) == 1 and bare_single:
        return names[0]
    *rest, first = reversed(names)
    return "".join(f"{name}, " for name in rest) + f"and {first}."


def parse_direction(line: str) -> str | None:
    """Return the direction a "go ..." command names, or None if it is not a valid command."""
    for direction in _COMMAND_DIRECTIONS:
        if line.find(direction) > 0:
            return direction if line.startswith("go") else None
    return None


def classic_castle() -> list[Room]:
    """Build the fixed nine-room castle; the lobby comes first."""
    lobby = Room("Lobby")
    dining = Room("Dining Room")
    armory = Room("Armory")
    tower = Room("Tower")
    kitchen = Room("Kitchen")
    dungeon = Room("Dungeon")
    tower_top = Room("Tower Top")
    pantry = Room("Pantry")
    secret_room = Room("Secret Room")

    links = [
        (lobby, "east", dining),
        (lobby, "west", armory),
        (lobby, "up", tower),
        (dining, "west", lobby),
        (dining, "south", kitchen),
        (armory, "east", lobby),
        (armory, "down", dungeon),
        (tower, "down", lobby),
        (tower, "up", tower_top),
        (kitchen, "north", dining),
        (kitchen, "east", pantry),
        (pantry, "west", kitchen),
        (dungeon, "up", armory),
        (dungeon, "south", secret_room),
        (secret_room, "north", dungeon),
        (tower_top, "down", tower),
    ]
    for source, direction, target in links:
        source.connect(direction, target)

    return [lobby, dining, armory, tower, kitchen, dungeon, tower_top, pantry, secret_room]


def place_creatures(
    rooms: Sequence[Room],
    rng: random.Random | None = None,
    exclude_start: bool = True,
) -> tuple[Room, Room]:
    """Put the monster and the princess into random rooms and return (monster_room, princess_room).

    With ``exclude_start`` neither goes into the first room and they never share a room.
    Without it they are kept apart unless both land in the first room.
    """
    rng = rng if rng is not None else random.Random()
    if exclude_start:
        candidates = list(rooms[1:])
        if len(candidates) < 2:
            raise ValueError("need at least two rooms besides the start room")
        monster_index = rng.randrange(len(candidates))
        princess_index = rng.randrange(len(candidates))
        while princess_index == monster_index:
            princess_index = rng.randrange(len(candidates))
    else:
        candidates = list(rooms)
        if not candidates:
            raise ValueError("need at least one room")
        monster_index = rng.randrange(len(candidates))
        princess_index = rng.randrange(len(candidates))
        while princess_index == monster_index and monster_index != 0 and princess_index != 0:
            princess_index = rng.randrange(len(candidates))

    monster_room = candidates[monster_index]
    princess_room = candidates[princess_index]
    monster_room.has_monster = True
    princess_room.has_princess = True
    return monster_room, princess_room


class Game:
    """One play-through starting in ``start``; text goes to ``output`` (standard output by default)."""

    def __init__(
        self,
        start: Room,
        output: TextIO | None = None,
        bare_single: bool = False,
    ) -> None:
        self.room = start
        self.output = output
        self.bare_single = bare_single
        self.won = False
        self.lost = False

    @property
    def over(self) -> bool:
        """True once the player has met the monster or found the princess."""
        return self.won or self.lost

    def describe_room(self) -> str:
        """Return the greeting for the current room with its exits and the prompt."""
        names = self.room.exit_names()
        exits = format_exits(names, self.bare_single)
        return (
            f"Welcome to the {self.room.name}. There are {len(names)} exits: {exits}\n"
            "Enter your command:\n"
        )

    def handle(self, line: str) -> str:
        """Carry out one command and return the text it produces."""
        direction = parse_direction(line)
        if direction is None:
            message = f"{WRONG_INSTRUCTION}\n"
        elif direction not in self.room.exits:
            message = f"{NO_ROOM}\n"
        else:
            self.room = self.room.exits[direction]
            message = f"{self.room.name}\n"
        self._check_events()
        return message

    def play(self, lines: Iterable[str]) -> bool:
        """Run the game on the given command lines; return True if it reached an end."""
        out = self.output if self.output is not None else sys.stdout
        commands = iter(lines)
        while not self.over:
            out.write(self.describe_room())
            line = next(commands, None)
            if line is None:
                return False
            out.write(self.handle(line.rstrip("\r\n")))
        out.write(self.ending())
        return True

    def ending(self) -> str:
        """Return the closing message for the way the game ended, or "" if it has not."""
        parts = []
        if self.lost:
            parts.append(LOSE_MESSAGE)
        if self.won:
            parts.append(WIN_MESSAGE)
        return "".join(parts)

    def _check_events(self) -> None:
        if self.room.has_monster:
            self.lost = True
        if self.room.has_princess:
            self.won = True