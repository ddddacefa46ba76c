"""Transform expression parser.

Turns a chained expression such as ``"translate(10,5) rotate(45, 2, 2)"`` into
a single :class:`AffineMatrix`. Functions compose left to right, each one
post-multiplying the accumulated matrix.

Nothing in here raises on bad input: unknown functions contribute the identity,
missing arguments take their defaults, and unparseable numbers read as ``0``.
"""

from __future__ import annotations

import enum
import logging
import math
import re
import threading
from dataclasses import dataclass

from svgxform.engine import matrix as mx
from svgxform.engine.matrix import AffineMatrix

logger = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"([A-Za-z_]\w*)\s*\(([^)]*)\)")
_ARG_SPLIT_RE = re.compile(r"[\s,]+")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class TransformKind(enum.Enum):
    TRANSLATE = "translate"
    MATRIX = "matrix"
    SCALE = "scale"
    ROTATE = "rotate"
    SKEW_X = "skewX"
    SKEW_Y = "skewY"
    UNKNOWN = "unknown"


_KINDS_BY_NAME = {k.value: k for k in TransformKind if k is not TransformKind.UNKNOWN}


@dataclass(frozen=True)
class TransformOp:
    """One ``name(args)`` group of a transform expression."""

    kind: TransformKind
    args: tuple[float, ...] = ()
    # Source function name, kept for diagnostics on UNKNOWN ops
    name: str = ""


def parse_number(token: str) -> float:
    """Read the leading number of ``token``; ``0.0`` (with a warning) if there is none."""
    match = _NUMBER_RE.match(token)
    if match is None:
        logger.warning("Non-numeric transform argument %r, using 0", token)
        return 0.0
    if match.end() != len(token):
        logger.debug("Ignoring trailing text in transform argument %r", token)
    value = float(match.group(0))
    if not math.isfinite(value):
        logger.warning("Out-of-range number %r, using 0", token)
        return 0.0
    return value


def tokenize_transform(expr: str | None) -> list[TransformOp]:
    """Split an expression into its function groups, in source order."""
    if not expr:
        return []

    ops: list[TransformOp] = []
    for match in _FUNCTION_RE.finditer(expr):
        name = match.group(1)
        raw_args = [t for t in _ARG_SPLIT_RE.split(match.group(2).strip()) if t]
        args = tuple(parse_number(t) for t in raw_args)
        kind = _KINDS_BY_NAME.get(name, TransformKind.UNKNOWN)
        if kind is TransformKind.UNKNOWN:
            logger.debug("Unknown transform function %r ignored", name)
        ops.append(TransformOp(kind=kind, args=args, name=name))
    return ops


def _arg(args: tuple[float, ...], index: int, default: float) -> float:
    return args[index] if len(args) > index else default


def op_to_matrix(op: TransformOp) -> AffineMatrix:
    """Matrix for a single transform function."""
    args = op.args
    kind = op.kind

    if kind is TransformKind.TRANSLATE:
        return mx.translate(_arg(args, 0, 0.0), _arg(args, 1, 0.0))

    if kind is TransformKind.MATRIX:
        if len(args) != 6:
            logger.debug("matrix() needs 6 arguments, got %d; ignored", len(args))
            return mx.identity()
        return AffineMatrix(*args)

    if kind is TransformKind.SCALE:
        sx = _arg(args, 0, 1.0)
        return mx.scale(sx, _arg(args, 1, sx))

    if kind is TransformKind.ROTATE:
        return mx.rotate(_arg(args, 0, 0.0), _arg(args, 1, 0.0), _arg(args, 2, 0.0))

    if kind is TransformKind.SKEW_X:
        return mx.skew_x(_arg(args, 0, 0.0))

    if kind is TransformKind.SKEW_Y:
        return mx.skew_y(_arg(args, 0, 0.0))

    return mx.identity()


def parse_transform(expr: str | None) -> AffineMatrix:
    """Compose every function of ``expr`` into one matrix. Empty input is the identity."""
    result = mx.identity()
    for op in tokenize_transform(expr):
        result = mx.compose(result, op_to_matrix(op))
    return result


class TransformCache:
    """Expression -> matrix memo keyed by the verbatim expression text.

    Owned by a conversion session, never shared process-wide. Entries never
    expire; the lock only protects the dict, so two threads racing on the same
    miss may both parse (harmless, the result is identical).
    """

    def __init__(self) -> None:
        self._entries: dict[str, AffineMatrix] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, expr: str) -> AffineMatrix:
        with self._lock:
            cached = self._entries.get(expr)
            if cached is not None:
                self.hits += 1
                return cached
            self.misses += 1

        parsed = parse_transform(expr)
        with self._lock:
            self._entries.setdefault(expr, parsed)
        return parsed

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, expr: object) -> bool:
        return expr in self._entries

    def __len__(self) -> int:
        return len(self._entries)
