"""Map loading: brush files become planes, wall lists become point pairs."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from brushwalk.plane import Plane, make_floor_plane, make_plane

DELIMITERS = (" ", "\n", "\t", "\b")
BRUSH_MARKER = "// brush"
BRUSH_SCALE = 0.5
WALL_PREFIX = "WALL "
WALL_POSITION_MARKER = "Pos "
WALL_SCALE = 0.2

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class TwoPoints:
    """The two ends of a wall on the horizontal plane."""

    x1: float
    z1: float
    x2: float
    z2: float

    def __iter__(self) -> Iterator[float]:
        yield self.x1
        yield self.z1
        yield self.x2
        yield self.z2


def find_any(text: str, tokens: Sequence[str]) -> int | None:
    """Earliest position in text of any of the tokens, or None if none occurs."""
    positions = [pos for pos in (text.find(token) for token in tokens) if pos != -1]
    return min(positions, default=None)


def split(text: str) -> list[str]:
    """Split on single whitespace delimiters, keeping empty fields between repeats."""
    line = text + " "
    tokens: list[str] = []
    while (pos := find_any(line, DELIMITERS)) is not None:
        tokens.append(line[:pos])
        line = line[pos + 1:]
    return tokens


def _parse_float(text: str) -> float:
    """Read the leading number of text, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return float(match.group(1))


def _field(tokens: Sequence[str], index: int) -> float:
    if index >= len(tokens):
        raise ValueError(
            f"expected at least {index + 1} fields, got {len(tokens)}"
        )
    return _parse_float(tokens[index])


def _read_lines(filepath) -> list[str] | None:
    try:
        with open(filepath, encoding="utf-8", newline="") as handle:
            return [line.rstrip("\n") for line in handle]
    except FileNotFoundError:
        return None


def load_map(filepath, texture: Any) -> list[Plane]:
    """Read a brush map; each brush yields a front wall and a top floor.

    A missing file yields no planes. A brush whose face lines are missing
    or malformed raises ValueError.
    """
    lines = _read_lines(filepath)
    if lines is None:
        return []

    planes: list[Plane] = []
    remaining = iter(lines)

    def next_line() -> str:
        return next(remaining, "")

    for line in remaining:
        if BRUSH_MARKER not in line:
            continue
        next_line()  # opening brace
        next_line()  # first face, unused

        tokens = split(next_line())
        x1 = _field(tokens, 1) * -BRUSH_SCALE
        z1 = _field(tokens, 2) * BRUSH_SCALE
        x2 = _field(tokens, 6) * -BRUSH_SCALE
        z2 = _field(tokens, 7) * BRUSH_SCALE
        y = _field(tokens, 13) * BRUSH_SCALE
        height = _field(tokens, 3) - y
        h_repeat = int(_field(tokens, 19))
        v_repeat = int(_field(tokens, 20))
        planes.append(make_plane(x1, z1, x2, z2, texture, y, height, h_repeat, v_repeat))

        next_line()  # face between front and top, unused

        tokens = split(next_line())
        x1 = _field(tokens, 1) * -BRUSH_SCALE
        z1 = _field(tokens, 2) * BRUSH_SCALE
        x2 = _field(tokens, 6) * -BRUSH_SCALE
        z2 = _field(tokens, 12) * BRUSH_SCALE
        y = _field(tokens, 3) * BRUSH_SCALE
        h_repeat = int(_field(tokens, 19) * 4)
        v_repeat = int(_field(tokens, 20) * 4)
        planes.append(make_floor_plane(x1, z1, x2, z2, texture, y, h_repeat, v_repeat))

    return planes


def make_wall_set(filepath) -> list[TwoPoints]:
    """Read "WALL ... Pos x1 y1 x2 y2" lines into wall end points.

    Every line read is echoed, followed by the number of wall lines found.
    The two ends are swapped so that wall normals face the right way.
    A missing file yields no walls.
    """
    lines = _read_lines(filepath)
    if lines is None:
        return []

    wall_lines = []
    for line in lines:
        print(line)
        if line[:5] == WALL_PREFIX:
            wall_lines.append(line)
    print(f"Wall Count: {len(wall_lines)}")

    walls: list[TwoPoints] = []
    for line in wall_lines:
        start = line.find(WALL_POSITION_MARKER)
        if start == -1:
            continue
        parts = split(line[start:])
        if len(parts) < 5:
            continue
        x1, y1, x2, y2 = (_parse_float(part) * WALL_SCALE for part in parts[1:5])
        walls.append(TwoPoints(x2, y2, x1, y1))
    return walls