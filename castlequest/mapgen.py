"""Random generation of a connected castle map."""

from __future__ import annotations

import random

from .room import Room

DIRECTIONS: tuple[str, ...] = ("north", "south", "west", "east", "up", "down")

ROOM_TYPES: tuple[str, ...] = (
    "Lobby",
    "Hall",
    "Chamber",
    "Dungeon",
    "Tower",
    "Kitchen",
    "Armory",
    "Library",
    "Cellar",
    "Gallery",
)

REVERSE: dict[str, str] = {
    "west": "east",
    "east": "west",
    "south": "north",
    "north": "south",
    "up": "down",
    "down": "up",
}

START_NAME = "Main-Lobby"


class MapGenerator:
    """Builds a random map: a depth-first tree of rooms plus a few extra loops."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.rooms: list[Room] = []

    def generate(self, min_rooms: int) -> list[Room]:
        """Create ``min_rooms`` rooms; the first one returned is the start room."""
        if min_rooms < 1:
            raise ValueError("a map needs at least one room")

        lobby = Room(START_NAME)
        self.rooms = [lobby]
        stack = [lobby]

        while len(self.rooms) < min_rooms and stack:
            current = stack.pop()
            for _ in range(self.rng.randint(1, 3)):
                if len(self.rooms) >= min_rooms:
                    break
                available = self._free_directions(current)
                if not available:
                    continue
                direction = self.rng.choice(available)
                new_room = Room(self._unique_name())
                current.connect(direction, new_room)
                new_room.connect(REVERSE[direction], current)
                self.rooms.append(new_room)
                stack.append(new_room)

        for _ in range(len(self.rooms) * 2):
            a = self.rng.choice(self.rooms)
            b = self.rng.choice(self.rooms)
            available = self._free_directions(a)
            if available and a is not b:
                direction = self.rng.choice(available)
                a.connect(direction, b)
                b.connect(REVERSE[direction], a)

        return self.rooms

    def describe(self) -> str:
        """Return a text listing of every room and where its exits lead."""
        parts = []
        for room in self.rooms:
            exits = "".join(
                f"{direction}->{room.exits[direction].name}  "
                for direction in room.exit_names()
            )
            parts.append(f"[{room.name}]\nExits: {exits}\n\n")
        return "".join(parts)

    @staticmethod
    def _free_directions(room: Room) -> list[str]:
        return [d for d in DIRECTIONS if d not in room.exits]

    def _unique_name(self) -> str:
        taken = {room.name for room in self.rooms}
        counter = 0
        while True:
            counter += 1
            name = f"{self.rng.choice(ROOM_TYPES)}-{counter}"
            if name not in taken:
                return name