"""Path data transformer.

Re-encodes path data under an affine matrix. Every command is resolved to
absolute coordinates, transformed, and emitted in upper-case form:

    M0,0 l10,0 v5 z   --translate(1,1)-->   M 1,1L 11,1L 11,6z

The cursor used for relative commands lives in source (untransformed)
coordinates, so a relative path and its absolute equivalent produce identical
output. H and V become L, since a rotated horizontal line is no longer
horizontal. Arcs only get their endpoint transformed; radii, x-axis rotation
and flags pass through unchanged.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from svgxform.engine.formatting import DEFAULT_PRECISION, format_number, format_point
from svgxform.engine.matrix import AffineMatrix, apply, is_identity

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(
    r"([MmLlHhVvCcSsQqTtAaZz])|([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
)
# Arc flags: one "0" or "1" character, optionally preceded by separators
_FLAG_RE = re.compile(r"[\s,]*([01])")

# Number of arguments consumed by one repetition of each command
ARITY = {"M": 2, "L": 2, "T": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "A": 7, "Z": 0}


@dataclass(frozen=True)
class PathCommand:
    letter: str
    args: tuple[float, ...] = ()

    @property
    def upper(self) -> str:
        return self.letter.upper()

    @property
    def is_relative(self) -> bool:
        return self.letter.islower()

    def groups(self) -> list[tuple[float, ...]]:
        """Complete argument groups; a trailing partial group is dropped."""
        arity = ARITY.get(self.upper, 0)
        if arity == 0:
            return []
        usable = len(self.args) - len(self.args) % arity
        if usable != len(self.args):
            logger.warning(
                "Dropping %d trailing argument(s) of %s command",
                len(self.args) - usable,
                self.letter,
            )
        return [self.args[i : i + arity] for i in range(0, usable, arity)]


def _read_number(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        logger.warning("Out-of-range number %r in path data, using 0", token)
        return 0.0
    return value


def tokenize_path(path_data: str) -> list[PathCommand]:
    """Split path data into commands. Numbers before the first command are ignored.

    The two arc flags are single characters, so compact data such as
    ``a5,5 0 1110,0`` reads as flags ``1``, ``1`` and endpoint ``10,0``.
    """
    commands: list[PathCommand] = []
    letter: str | None = None
    args: list[float] = []
    pos = 0

    while True:
        if letter in ("A", "a") and len(args) % 7 in (3, 4):
            flag = _FLAG_RE.match(path_data, pos)
            if flag is not None:
                args.append(float(flag.group(1)))
                pos = flag.end()
                continue

        match = _TOKEN_RE.search(path_data, pos)
        if match is None:
            break
        pos = match.end()

        if match.group(1):
            if letter is not None:
                commands.append(PathCommand(letter, tuple(args)))
            letter = match.group(1)
            args = []
        elif letter is not None:
            args.append(_read_number(match.group(2)))
        else:
            logger.debug("Ignoring number %r before first path command", match.group(2))

    if letter is not None:
        commands.append(PathCommand(letter, tuple(args)))
    return commands


def transform_command(
    command: PathCommand,
    matrix: AffineMatrix,
    cursor: tuple[float, float],
    precision: int = DEFAULT_PRECISION,
) -> tuple[str, tuple[float, float]]:
    """Transform one command. Returns ``(emitted_text, new_cursor)``."""
    cmd = command.upper
    relative = command.is_relative
    cx, cy = cursor

    if cmd == "Z":
        return command.letter, cursor

    if cmd not in ARITY:
        # Unreachable with the tokenizer above; kept for hand-built commands
        parts = [command.letter]
        if command.args:
            parts.append(",".join(format_number(v, precision) for v in command.args))
        return " ".join(parts), cursor

    groups = command.groups()
    if not groups:
        return "", cursor

    def point(x: float, y: float) -> str:
        return format_point(*apply(matrix, x, y), precision=precision)

    parts = ["L" if cmd in ("H", "V") else cmd]

    for g in groups:
        ox, oy = (cx, cy) if relative else (0.0, 0.0)

        if cmd in ("M", "L", "T"):
            cx, cy = g[0] + ox, g[1] + oy
            parts.append(point(cx, cy))

        elif cmd == "H":
            cx = g[0] + ox
            parts.append(point(cx, cy))

        elif cmd == "V":
            cy = g[0] + oy
            parts.append(point(cx, cy))

        elif cmd == "C":
            parts.append(point(g[0] + ox, g[1] + oy))
            parts.append(point(g[2] + ox, g[3] + oy))
            cx, cy = g[4] + ox, g[5] + oy
            parts.append(point(cx, cy))

        elif cmd in ("S", "Q"):
            parts.append(point(g[0] + ox, g[1] + oy))
            cx, cy = g[2] + ox, g[3] + oy
            parts.append(point(cx, cy))

        elif cmd == "A":
            rx, ry, rotation, large_arc, sweep = g[:5]
            cx, cy = g[5] + ox, g[6] + oy
            parts.append(f"{format_number(rx, precision)},{format_number(ry, precision)}")
            parts.append(format_number(rotation, precision))
            parts.append(format_number(large_arc, precision))
            parts.append(format_number(sweep, precision))
            parts.append(point(cx, cy))

    return " ".join(parts), (cx, cy)


def transform_path_data(
    path_data: str,
    matrix: AffineMatrix,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Apply ``matrix`` to every coordinate of ``path_data``.

    The identity matrix returns the input object untouched.
    """
    if is_identity(matrix):
        return path_data

    output: list[str] = []
    cursor = (0.0, 0.0)
    for command in tokenize_path(path_data):
        text, cursor = transform_command(command, matrix, cursor, precision)
        output.append(text)
    return "".join(output)
