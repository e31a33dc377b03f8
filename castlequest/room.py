"""Rooms of the castle and the exits that join them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Room:
    """A named room that may hold the monster or the princess."""

    name: str
    exits: dict[str, Room] = field(default_factory=dict, repr=False)
    has_monster: bool = False
    has_princess: bool = False

    def connect(self, direction: str, room: Room) -> None:
        """Make ``direction`` lead from this room to ``room``, replacing any old exit."""
        self.exits[direction] = room

    def exit_names(self) -> list[str]:
        """Return the directions out of this room in sorted order."""
        return sorted(self.exits)