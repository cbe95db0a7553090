# cubmap

`cubmap` reads `.cub` scene description files, the kind used by small
raycasting games, and checks them before a game starts. It also reads XPM
images, the format such games usually use for their wall textures.

## What a `.cub` file looks like

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

* `NO`, `SO`, `WE`, `EA` give the path of the texture for each wall
  direction. Each may appear only once; a texture that is not given is
  `None` in the result.
* `F` and `C` give the floor and ceiling colours as `R,G,B`, each value a
  decimal number from 0 to 255. A colour that is not given is `0`.
* The map comes last; the first line that starts (after spaces) with `1`,
  `0`, `N`, `S`, `E` or `W` begins it. `1` is a wall, `0` is open floor,
  and exactly one of `N`, `S`, `E`, `W` marks where the player starts and
  which way they face. Rows are padded with spaces to the longest row.
  Every open cell must be enclosed: no open cell may touch a blank space or
  the edge of the map.

A file that breaks these rules raises `cubmap.errors.ParseError`. Its
`message` is one of `File read error`, `Invalid line`, `No map`,
`Map error`, `Multiple player`, `Player missing` or `Map not closed`.

## Installing

```
pip install .
```

Nothing beyond the standard library is needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cubmap scene.cub
```

On success it prints the size of the loaded map, for example
`Loaded map 6x5`, and exits with status 0. With no file, or on a bad file,
it prints `Error` and the reason on the next line and exits with status 1.

## Library use

```python
from cubmap.config import parse_file, parse_text
from cubmap.errors import ParseError

config = parse_file("scene.cub")
print(config.textures.north)                       # ./textures/north.xpm
print(hex(config.floor_color))                     # 0xdc6400
print(config.game_map.width, config.game_map.height)  # 6 5
print(config.player)                               # Player(x=4, y=3, direction='N')
print(config.game_map.cell(4, 3))                  # 0: the start tile is open floor

try:
    parse_text("F 300,0,0\n111\n1N1\n111\n")
except ParseError as exc:
    print(exc)                                     # Invalid line
```

Lower-level helpers:

* `cubmap.color.parse_color("10,20,30")` returns `0x0A141E`; it raises
  `ValueError` for a malformed or out-of-range colour.
* `cubmap.config.parse_texture(text)` returns the path part of a texture
  setting, and `cubmap.config.parse_lines(lines)` builds a `Config` from
  already split lines.
* `cubmap.gamemap.parse_map(lines, start)` returns a `GameMap` and the
  `Player` found on it (or `None`); `cubmap.gamemap.validate_map(game_map,
  player)` checks it.
* `cubmap.utils.is_empty_line`, `is_map_line`, `split_lines` and
  `read_file` are the line-level building blocks.

### XPM images

```python
from cubmap.xpm import read_xpm

image = read_xpm("textures/north.xpm")
print(image.width, image.height)
print(hex(image.pixel(0, 0)))
```

`read_xpm`, `parse_xpm_text` and `parse_xpm_lines` return an `XpmImage`
whose pixels are `0xRRGGBB` values. Comments are removed first with
`strip_comments`. Colours may be given as `#RRGGBB` or by X11 colour name
(`"light blue"`, `"gray50"`); `None` becomes the transparent value
`0xFF000000` and unknown names become `0`. Names are looked up with
`cubmap.colornames.lookup_color`, which ignores case and raises `KeyError`
for an unknown name. Malformed XPM data raises `ValueError`.

`cubmap.colorconv` converts `0xRRGGBB` colours to the pixel layout of a
display: `VisualFormat.from_masks(red_mask, green_mask, blue_mask)`
describes the layout, and `good_color(color, depth, fmt)` leaves colours
unchanged at 24 bits or more and converts them below that.

## What it does not do

`cubmap` only reads and checks scene files and images. It opens no window,
draws nothing and runs no game; the command stops after reporting the map
size.