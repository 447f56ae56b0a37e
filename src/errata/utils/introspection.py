# topmark:header:start
#
#   project      : Errata
#   file         : introspection.py
#   file_relpath : src/errata/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Introspection helpers: naming diagnostic kinds and capturing call sites."""

from __future__ import annotations

import inspect
from enum import Enum
from typing import TYPE_CHECKING

from errata.config.logging import get_logger

if TYPE_CHECKING:
    from types import FrameType

    from errata.config.logging import ErrataLogger

logger: ErrataLogger = get_logger(__name__)


def describe_kind(kind: object) -> str:
    """Return a type-qualified, human-friendly tag for a diagnostic kind.

    Enum members render as ``TypeName.MEMBER``; any other value as
    ``TypeName(value)`` using its ``repr``. Nested types keep their ``__qualname__``
    (``Parser.Error.BAD_TOKEN``).

    Args:
        kind: The caller-defined kind value.

    Returns:
        A string such as ``"ParseError.NOT_A_NUMBER"`` or ``"str('oops')"``.
    """
    type_name: str = getattr(type(kind), "__qualname__", type(kind).__name__)
    if isinstance(kind, Enum):
        return f"{type_name}.{kind.name}"
    return f"{type_name}({kind!r})"


def caller_location(stacklevel: int = 1) -> str | None:
    """Return ``"path:line:column"`` for a frame up the call stack.

    ``stacklevel=1`` designates the direct caller of the function that calls
    `caller_location`, mirroring `warnings.warn`. The column is 1-based and is
    omitted on interpreters that do not record instruction positions.

    Args:
        stacklevel: How many frames above the immediate caller to look.

    Returns:
        The formatted location, or None when the stack is not deep enough.
    """
    frame: FrameType | None = inspect.currentframe()
    try:
        # Skip this function's own frame plus `stacklevel` frames.
        for _ in range(stacklevel + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        info = inspect.getframeinfo(frame, context=0)
        positions = getattr(info, "positions", None)
        col_offset: int | None = getattr(positions, "col_offset", None)
        if col_offset is None:
            return f"{info.filename}:{info.lineno}"
        return f"{info.filename}:{info.lineno}:{col_offset + 1}"
    finally:
        # Break the reference cycle between this frame and the inspected one.
        del frame
