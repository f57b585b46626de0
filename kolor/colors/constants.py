from .color import FrozenColor

WHITE = FrozenColor([1.0, 1.0, 1.0, 1.0])
BLACK = FrozenColor([0.0, 0.0, 0.0, 1.0])
RED = FrozenColor([1.0, 0.0, 0.0, 1.0])
GREEN = FrozenColor([0.0, 1.0, 0.0, 1.0])
BLUE = FrozenColor([0.0, 0.0, 1.0, 1.0])

named_colors = {
    "white": WHITE,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
}
