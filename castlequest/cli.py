"""Command-line entry point for the castle adventure."""

from __future__ import annotations

import argparse
import itertools
import random
import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .game import Game, classic_castle, place_creatures
from .mapgen import MapGenerator

SIZE_PROMPT = "Please give the number of rooms(AKA the size of the map)\n"
START_BANNER = "-------------------------GAME START!-----------------------\n"

_SIZE_PATTERN = re.compile(r"\s*([+-]?\d+)(.*)")


def _echo(lines: Iterable[str], out: TextIO) -> Iterator[str]:
    for line in lines:
        out.write(line.rstrip("\r\n") + "\n")
        yield line


def _play_classic(rng: random.Random, stdin: TextIO, out: TextIO) -> int:
    rooms = classic_castle()
    monster_room, princess_room = place_creatures(rooms, rng, exclude_start=True)
    out.write(f"{monster_room.name} Monster\n{princess_room.name} Princess\n")
    game = Game(rooms[0], out, bare_single=False)
    game.play(_echo(stdin, out))
    return 0


def _play_generated(rng: random.Random, stdin: TextIO, out: TextIO) -> int:
    out.write(SIZE_PROMPT)
    first_line = stdin.readline().rstrip("\r\n")
    match = _SIZE_PATTERN.match(first_line)
    if match is None:
        print("castlequest: the number of rooms must be a whole number", file=sys.stderr)
        return 1

    generator = MapGenerator(rng)
    try:
        rooms = generator.generate(int(match.group(1)))
    except ValueError as error:
        print(f"castlequest: {error}", file=sys.stderr)
        return 1
    out.write(generator.describe())

    place_creatures(rooms, rng, exclude_start=False)
    out.write(START_BANNER)
    game = Game(rooms[0], out, bare_single=True)
    # Whatever follows the number on its line is read as the first command.
    game.play(itertools.chain([match.group(2)], stdin))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Play the adventure on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="castlequest",
        description="Find the princess in the castle without meeting the monster.",
    )
    parser.add_argument(
        "--classic",
        action="store_true",
        help="play in the fixed nine-room castle instead of a generated map",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random choices")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    if args.classic:
        return _play_classic(rng, sys.stdin, sys.stdout)
    return _play_generated(rng, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())