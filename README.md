# dxball

The start of a DX-Ball style arcade game, built on pygame. It opens a
resizable 800×600 window with the title "DX-Ball". The window shows
"Hello World!" in white on a black background. The text is centred again
on every frame, using the window's current size. Close the window to quit.

## Installing

```
pip install .
```

To run the game you need a display and the font file `OpenSans-Regular.ttf`.
The game searches for font files (`.ttf`, `.otf` or `.ttc`, in any letter
case) in these folders and all of their subfolders:

- `assets/` in the current directory
- `src/assets/` in the current directory
- `assets/` in the parent directory
- `src/assets/` in the parent directory

## Running

```
dxball
```

The command takes no options other than `--help`. If the game cannot start,
it prints `Error: ...` to standard error and exits with status 1. This
happens, for example, when no display is available or when the font cannot
be found.

## Using the pieces

### `dxball.config`

`get_config()` returns the shared `GameConfig`. It has three fields:
`game_name`, `window_width` and `window_height`. Their defaults are
`"Game"`, 800 and 600. `initialize(game_name, window_width, window_height)`
sets all three.

The asset folders are computed from the current working directory:

- `assets_path()` returns `./assets`
- `fonts_path()` returns `./assets/fonts`
- `textures_path()` returns `./assets/textures`
- `sounds_path()` returns `./assets/sounds`

### `dxball.fonts`

`get_font_manager()` returns the shared `FontManager`. You can also create
your own with `FontManager(root)`. Its search folders are then taken
relative to `root` instead of the current directory.

- `initialize()` starts pygame's font system and scans for fonts.
- `load_font(name, size)` opens a font by its file name. If the name is not
  in the cache, it rescans once before it gives up.
- `find_font_path(name)` returns the cached path, or `None`.
- `available_fonts()` lists the font file names that were found.
- `refresh()` rescans the folders. If two files share a name, the one found
  last wins.
- `shutdown()` stops the font system.

Failures raise `FontError`. This includes calling `load_font` before
`initialize`.

### `dxball.window`

`Window(title, width, height)` opens a resizable window. If it cannot, it
raises `WindowError`. It provides:

- `size()`
- `set_clear_color(r, g, b, a)`, where each component must be 0 to 255 or
  `ValueError` is raised
- `clear()`
- `present()`
- `close()`
- `surface` and `clear_color`

It works as a context manager and closes on exit. Using it after it has
closed raises `WindowError`.

### `dxball.text`

`Text(target, font_name, font_size, fonts=None)` loads a font through a
`FontManager`. It uses the shared one unless you pass another. Then:

- `set_text(text, color)` renders the string. On failure it raises
  `TextError`.
- `render(x, y)` draws it onto `target` with its top-left corner at
  `(x, y)`.
- `dimensions()` returns the rendered width and height. This is `(0, 0)`
  before any text is set.

### `dxball.app`

`centered_position(area_size, item_size)` returns the top-left corner that
centres an item inside an area:

```python
from dxball.app import centered_position

centered_position((800, 600), (200, 50))  # (300.0, 275.0)
```

`run(max_frames=None)` runs the game loop until the window is closed. If
`max_frames` is given, it stops after that many frames. It returns the
number of frames drawn. `main(argv=None)` is what the `dxball` command
calls.

## What it does not do

There is no gameplay yet: no ball, paddle, bricks, score, input handling or
levels. The textures and sounds folders are only named by `GameConfig`.
Nothing is loaded from them, and the game plays no sound.