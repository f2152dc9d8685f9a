# stellargen

`stellargen` generates random stars and stellar remnants from two CSV tables.
It also has a few small helpers for games that show those objects:

- `stellargen.stellar`: the `StellarCategory` and `StellarSubtype` enums,
  `parse_category` / `parse_subtype` and their `*_to_string` counterparts,
  `pick_weighted`, and `StellarObjectFactory`, which draws `StellarObject`s.
- `stellargen.vector`, `stellargen.complex_number`, `stellargen.matrix`:
  `Vector`, `Complex` and `Matrix` types. Arithmetic on them works element by
  element. The matrix module also has `dot`, `identity`, `transpose`,
  `determinant`, `inverse`, `direct_sum`, `kronecker_product`, `expand`,
  `expm`, `minimum`, `maximum`, `absolute` and `sign`.
- `stellargen.text`: `Character` glyph metrics, `Font`, and `TextBatch`. A
  `TextBatch` lays text out as quads.
- `stellargen.sprite`: `Sprite`, `SpriteSheet`, `SpriteAnimation`, `SpriteBatch`,
  `create_sprite_sheet_quad` and `create_animation`.
- `stellargen.ui_renderer`: `UIVertex` and `UIBatch`. A `UIBatch` collects UI quads.
- `stellargen.ui_elements`: a tree of UI elements (`Container`, `Panel`, `Button`,
  `Label`) with absolute, relative and anchored grid positioning.
- `stellargen.ui_menu`: `Menu` and the chaining `MenuBuilder`.
- `stellargen.timer`: `Timer`, which sleeps so that frames keep to a target rate.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
pip install .[test]   # with pytest
```

## Generating stars

The category table lists categories and their weights. The factory skips the
header line:

```
Category,Probability
MainSequence,0.9
WhiteDwarf,0.1
```

The subtype table lists subtypes and their physical ranges. Columns are matched
by their header names:

```
Category,Subtype,Probability,MinMassSolar,MaxMassSolar,MinRadiusKm,MaxRadiusKm,MinTemperatureK,MaxTemperatureK
MainSequence,G,1.0,0.8,1.2,600000,800000,5200,6000
WhiteDwarf,DA,1.0,0.5,1.0,5000,9000,8000,40000
```

```python
import random
from stellargen.stellar import StellarObjectFactory

factory = StellarObjectFactory.from_files("categories.csv", "subtypes.csv")
star = factory.generate_stellar_object(random.Random(42))
print(star.info_str())
print(factory.info_category_str())
print(factory.info_subtype_str())
```

The `rng` argument can be any object with a `uniform(a, b)` method, such as
`random.Random`. Generation works in three steps:

1. Draw a category, weighted by the category table.
2. Draw a subtype of that category, weighted by the subtype table.
3. Draw mass, radius and temperature uniformly within the subtype's ranges.

Luminosity is then `radius² · temperature⁴ · σ`, where σ is the
Stefan–Boltzmann constant.

The factory constructor also accepts any iterables of lines. Rows that cannot be
read are skipped and reported through the `logging` module. When
`parse_category` or `parse_subtype` gets an unknown name, it raises
`StellarParseError`, which is a subclass of `ValueError`.

## Building a menu

```python
from stellargen.text import Character, Font
from stellargen.ui_elements import ElementState, Grid, MouseState, PositionType
from stellargen.ui_menu import MenuBuilder
from stellargen.ui_renderer import UIBatch

menu = (
    MenuBuilder()
    .create_menu((0.0, 0.0), (800.0, 600.0), Grid.sized(3, 1))
    .begin_panel(ElementState.NORMAL, (0.0, 2.0), PositionType.GRID,
                 (300.0, 100.0), (0.2, 0.2, 0.2, 1.0))
    .end()
    .begin_button(ElementState.NORMAL, (0.0, 1.0), PositionType.GRID,
                  (200.0, 50.0), lambda: print("start"))
    .end()
    .complete_menu()
)

menu.update(MouseState(x=400.0, y=300.0, left_down=True))  # clicks the button

batch = UIBatch(Font({"A": Character(width=8, height=10, advance=9 * 64)}, height=12))
menu.submit(batch)
print(batch.quad_count, batch.vertices, batch.indices)
```

Every `begin_*` call opens an element under the one that is currently open, and
`end()` closes it. If `end()` is called with nothing open, or if
`complete_menu()` is called while an element is still open, `MenuBuildError`
is raised.

## What the package does not do

The batches (`TextBatch`, `SpriteBatch`, `UIBatch`) only produce vertex and
index lists. The package does not open a window, draw anything, load textures
or shaders, or read font files. Glyph metrics are passed to `Font` by the
caller, and texture sizes are passed to `create_sprite_sheet_quad`. Input goes
in through `MouseState` values that the caller builds. There is no
command-line program.

## Running the tests

```
pytest
```