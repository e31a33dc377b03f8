# castlequest

A small console text adventure. You start in the lobby of a castle; in one
room waits a princess, in another a monster. Walk from room to room until you
find one or the other.

## Installing

```
pip install .
```

## Playing

```
castlequest
```

By default the castle is generated at random. The game first asks for the
number of rooms, builds a map of that many rooms starting from `Main-Lobby`,
prints a listing of every room and where its exits lead, and then starts.
Anything typed after the number on the same line is taken as the first
command. A size that is not a whole number, or is less than one, ends the
program with an error message and exit status 1.

Options:

- `--classic` plays in the fixed nine-room castle (Lobby, Dining Room,
  Armory, Tower, Kitchen, Dungeon, Tower Top, Pantry, Secret Room). This mode
  prints at the start which rooms hold the monster and the princess, and
  echoes each command you type.
- `--seed N` seeds the random choices, so the same seed gives the same map
  and the same placement of monster and princess.

Each turn the game names the room you are in and its exits, then waits for a
command. Move with `go` followed by a direction:

```
go east
go up
```

The directions are `north`, `south`, `east`, `west`, `up` and `down`. A line
that does not start with `go`, or names no direction after its first
character, is answered with `Wrong Instruction!`; a direction the room has no
exit in is answered with `There is NO ROOM in this direction!`. When a line
names several directions, they are tried in the order east, west, up, down,
south, north.

Entering the princess's room wins (`You have rescued the Princess. YOU WIN!`);
entering the monster's room loses (`You have met the Monster. YOU LOSE!`).
Rooms are checked after every command, so in a generated castle, where the
monster or princess may be placed in the start room, the first command can end
the game. The game also stops quietly when the input runs out.

## Using it from Python

```python
import random

from castlequest.mapgen import MapGenerator
from castlequest.game import Game, place_creatures

rng = random.Random(7)
rooms = MapGenerator(rng).generate(12)
place_creatures(rooms, rng, exclude_start=True)

game = Game(rooms[0])          # writes to standard output by default
finished = game.play(["go north", "go east"])
```

- `castlequest.room.Room` holds a name, its `exits` and the `has_monster` /
  `has_princess` flags. `Room.connect(direction, room)` adds or replaces an
  exit; `Room.exit_names()` returns the exit directions sorted.
- `castlequest.mapgen.MapGenerator(rng)` builds maps. `generate(min_rooms)`
  returns the rooms with the start room first, each exit matched by one back
  in the opposite direction; `describe()` returns a text listing of the rooms
  and their exits.
- `castlequest.game` has `classic_castle()`, `place_creatures(rooms, rng,
  exclude_start)` (returns the monster's and the princess's rooms),
  `parse_direction(line)`, `format_exits(names, bare_single)` and `Game`.
  `Game.describe_room()` and `Game.handle(line)` return text for one step;
  `Game.play(lines)` runs the loop and returns True if the game reached an
  end; `Game.ending()` gives the closing message.
- `castlequest.cli.main(argv)` is the `castlequest` command.

## What it does not do

There is only the `go` command: no looking around, items, inventory, quitting
command or saving and loading of a game.