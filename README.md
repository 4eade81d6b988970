# labworks

Four small programs in one package:

- **`labworks.rna`**: an RNA chain that stores each nucleotide in two bits.
- **`labworks.csvparser`**: a CSV reader that turns every row into a tuple
  of typed values.
- **`labworks.life`**: Conway's Game of Life on a 40 × 40 field, driven by
  typed commands.
- **`labworks.robots`**: a console game in which collector robots explore
  an unknown map, scan it and pick up apples, while an optional sapper
  clears bombs.

The package needs only the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## RNA chains

```python
from labworks.rna.rna import RNA, Nucl

a = RNA("TAGTCC")
b = RNA("TTTTTT")
print(str(~a + ~b))           # ATCAGGAAAAAA

c = RNA.repeat(Nucl.C, 12)
c.add(Nucl.G)
assert len(c) == 13 and c[12] is Nucl.G
c[0] = Nucl.A

print(RNA("GACCTAGGGG").is_complementary(RNA("CTGGATCCCC")))  # True
tail = c.split(4)             # the nucleotides from index 4 onward
```

- `~` gives the complementary chain (A↔T, G↔C).
- `+` joins two chains.
- `split(index)` returns a copy of the whole chain when `index` lies
  outside it.
- Indexing outside the chain raises `IndexError`.
- `add` doubles the storage when it runs out of room. `add_plus` grows it
  in steps of 32 nucleotides instead.
- `capacity()` reports the number of bytes currently reserved.
- Letters other than `A`, `G` and `C` are read as `T`.

## Typed CSV reading

```python
from labworks.csvparser.reader import CsvParser, CsvError, format_row

with open("people.csv", newline="") as stream:
    try:
        for row in CsvParser(stream, (int, int, str, float)):
            print(format_row(row))    # [1, 20, Alice, 3.5]
    except CsvError as error:
        print(error)                  # e.g. "Line 3: Wrong fields number."
```

Each row must have exactly as many fields as there are types. The reader
raises `CsvError`, with the line number in the message, in these cases:

- an empty line;
- a field that cannot be read as its type;
- the exit character (`"` by default) anywhere in a row.

Numbers are read from the start of a field, and anything after a valid
leading number is ignored. The column separator, row separator and exit
character can be passed to `CsvParser`.

From the command line:

```
labworks-csv people.csv --types int,int,str,float
```

`--types` takes a comma-separated list of `int`, `float` and `str`. Its
default is `int,int,str,float`. The command prints each row, or the first
error, and then exits with status 1.

## Game of Life

```
labworks-life
```

Commands typed at the `$` prompt:

| command          | effect                                                   |
|------------------|----------------------------------------------------------|
| `reset`          | clear the field (the old state becomes the previous one) |
| `set a8`         | place a living cell (column letter, row number)          |
| `clear a8`       | remove a cell                                            |
| `step [N]`       | advance N generations (1 by default)                     |
| `back`           | swap the current field with the previous one             |
| `save FILE`      | write the field to a file as `0` and `1` characters      |
| `load FILE`      | read a field written by `save`                           |
| `quit`           | leave                                                    |

Columns are lettered `a`–`z`, then `A`–`N`. Rows are numbered 0–39.
Ctrl+C or the end of input also ends the program.

The same engine is available from Python:

```python
from labworks.life.field import Field

field = Field()
for line in (4, 5, 6):
    field.set(1, line)
field.step()
print(field.is_alive(2, 5), field.alive_neighbours(2, 5))
print(field.render())
```

## Robots

```
labworks-robots --map maps/world.txt --width 100 --height 100 --collector 2
```

| option              | meaning                                                   |
|---------------------|-----------------------------------------------------------|
| `-m`, `--map`       | map file (default `../data/map_test.txt`)                 |
| `-w`, `--width`     | map width, 5–1000 (default 100)                           |
| `-h`, `--height`    | map height, 5–1000 (default 100)                          |
| `-c`, `--collector` | number of collector robots, 1–5 (default 1)               |
| `-a`, `--algorithm` | scan-mode search: `dijkstra`; any other value uses A*     |
| `--help`            | show help (`-h` is the height)                            |

A map file holds `width × height` symbols; whitespace is ignored. The
symbols are:

- `.` empty
- `#` rock
- `A` apple
- `B` bomb
- `?` unknown

Robots cannot be placed in the file. Collectors start on random empty
cells. Each robot knows only the cell it stands on.

Commands typed while the game runs:

| command                 | effect                                              |
|-------------------------|-----------------------------------------------------|
| `move u\|d\|l\|r`       | move the active robot one cell                      |
| `scan`                  | reveal the four cells around the active robot       |
| `grab`                  | pick up the item under the robot                    |
| `robot ID`              | switch to collector `ID` (counted from 0)           |
| `sapper on\|off`        | put the sapper next to the active collector, or remove it |
| `set_mode manual`       | control robots by hand (the default)                |
| `set_mode scan N`       | let the active robot explore for N steps            |
| `set_mode auto`         | collect every reachable apple (and bomb, with the sapper on) |
| `quit`                  | leave the game                                      |

A collector that steps onto a bomb ends the game. The sapper can push a
collector out of its way.

The screen is drawn with ANSI escape sequences and 24-bit colour, so a
terminal that supports them is needed.

## What is not included

No map files ship with the package. `labworks-robots` needs a map passed
with `--map`, or a file at the default relative path.