# topmark:header:start
#
#   project      : Errata
#   file         : colored_enum.py
#   file_relpath : src/errata/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` stores a textual value while attaching a colorizer (a callable
that decorates strings). Severities and structural render roles are both built
on it, so the renderer can style any of them through one code path.

Example:
    ```python
    class Tone(ColoredStrEnum):
        CALM = ("calm", palette.green)
        LOUD = ("loud", palette.red_bright)

    print(Tone.CALM.value)            # 'calm'
    print(Tone.CALM.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import ChalkFactory
from yachalk import ColorMode as ChalkColorMode

# Styles always carry ANSI codes; whether they are applied is decided per render.
palette: ChalkFactory = ChalkFactory(ChalkColorMode.Basic16)


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic list
    of arguments and a `sep` keyword. Errata always calls colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the provided arguments into a display string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The member stays a `str` (hashing, equality and `repr` behave normally); the
    colorizer lives in `_color` and is exposed through `.color`.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color
