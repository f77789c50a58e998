"""Path data optimizer: relative commands, 3-decimal rounding, canonical spacing."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

# Parameter count per command (uppercase); Z takes none
COMMAND_ARITY = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}
_COMMAND_LETTERS = frozenset(COMMAND_ARITY) | frozenset(c.lower() for c in COMMAND_ARITY)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")

PRECISION = 3
# Arc x-axis rotation keeps two extra digits
ARC_ROTATION_PRECISION = PRECISION + 2

Segment = tuple[str, list[Decimal]]
Number = Union[str, int, float]


def _skip_separators(d: str, pos: int) -> int:
    return _SEPARATOR_RE.match(d, pos).end()


def tokenize(d: str) -> list[Segment]:
    """
    Parse path data into (command, params) segments, one per command instance.

    Implicit repeats become separate segments; extra coordinate pairs after a
    moveto become linetos. Arc flags may be packed without separators.
    Raises ValueError on malformed data.
    """
    segments: list[Segment] = []
    length = len(d)
    pos = _skip_separators(d, 0)
    while pos < length:
        cmd = d[pos]
        arity = COMMAND_ARITY.get(cmd.upper())
        if arity is None:
            raise ValueError(f"Unexpected {cmd!r} at position {pos} in path data")
        pos = _skip_separators(d, pos + 1)
        if arity == 0:
            segments.append((cmd, []))
            continue
        first = True
        while first or (pos < length and d[pos] not in _COMMAND_LETTERS):
            params: list[Decimal] = []
            for index in range(arity):
                if cmd in "Aa" and index in (3, 4):
                    flag = d[pos : pos + 1]
                    if flag not in ("0", "1"):
                        raise ValueError(f"Expected arc flag at position {pos} in path data")
                    params.append(Decimal(flag))
                    pos += 1
                else:
                    match = _NUMBER_RE.match(d, pos)
                    if match is None:
                        raise ValueError(f"Expected number at position {pos} in path data")
                    params.append(Decimal(match.group()))
                    pos = match.end()
                pos = _skip_separators(d, pos)
            segments.append((cmd, params))
            if first and cmd in "Mm":
                cmd = "L" if cmd == "M" else "l"
            first = False
    return segments


def to_relative(segments: list[Segment]) -> list[Segment]:
    """
    Convert absolute segments to relative ones. The leading moveto stays absolute.
    """
    x = y = start_x = start_y = Decimal(0)
    result: list[Segment] = []
    for index, (cmd, params) in enumerate(segments):
        upper = cmd.upper()
        is_relative = cmd != upper
        out = list(params)

        if not is_relative and not (index == 0 and cmd == "M"):
            if upper == "H":
                out[0] -= x
            elif upper == "V":
                out[0] -= y
            elif upper == "A":
                out[5] -= x
                out[6] -= y
            else:
                for i in range(len(out)):
                    out[i] -= x if i % 2 == 0 else y
            cmd = cmd.lower()
        result.append((cmd, out))

        # Advance the absolute current point from the source segment
        if upper == "Z":
            x, y = start_x, start_y
        elif upper == "H":
            x = x + params[0] if is_relative else params[0]
        elif upper == "V":
            y = y + params[0] if is_relative else params[0]
        else:
            if is_relative:
                x, y = x + params[-2], y + params[-1]
            else:
                x, y = params[-2], params[-1]
            if upper == "M":
                start_x, start_y = x, y
    return result


def round_decimal(value: Decimal, digits: int = PRECISION) -> Decimal:
    """Round half away from zero to the given number of decimals, at any magnitude."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the kept decimals
        ctx.prec = max(ctx.prec, value.adjusted() + digits + 2)
        return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def round_segments(segments: list[Segment], digits: int = PRECISION) -> list[Segment]:
    """
    Round every parameter, carrying each endpoint's rounding error into the next
    relative endpoint so long relative chains do not drift.
    """
    delta_x = delta_y = Decimal(0)
    contour_dx = contour_dy = Decimal(0)
    result: list[Segment] = []
    for cmd, params in segments:
        upper = cmd.upper()
        is_relative = cmd != upper
        out = list(params)

        if upper == "Z":
            delta_x, delta_y = contour_dx, contour_dy
        elif upper == "H":
            if is_relative:
                out[0] += delta_x
            rounded = round_decimal(out[0], digits)
            delta_x = out[0] - rounded
            out[0] = rounded
        elif upper == "V":
            if is_relative:
                out[0] += delta_y
            rounded = round_decimal(out[0], digits)
            delta_y = out[0] - rounded
            out[0] = rounded
        else:
            if is_relative:
                out[-2] += delta_x
                out[-1] += delta_y
            end_x = round_decimal(out[-2], digits)
            end_y = round_decimal(out[-1], digits)
            delta_x = out[-2] - end_x
            delta_y = out[-1] - end_y
            if upper == "M":
                contour_dx, contour_dy = delta_x, delta_y
            for i in range(len(out)):
                if upper == "A" and i in (3, 4):
                    continue
                if upper == "A" and i == 2:
                    out[i] = round_decimal(out[i], digits + 2)
                else:
                    out[i] = round_decimal(out[i], digits)
        result.append((cmd, out))
    return result


def format_number(value: Decimal) -> str:
    """Shortest plain decimal text: no exponent, no trailing zeros, no negative zero."""
    if value == 0:
        return "0"
    return format(value.normalize(), "f")


def serialize(segments: list[Segment]) -> str:
    """Join each segment's tokens with spaces and concatenate segments without a separator."""
    return "".join(" ".join([cmd, *(format_number(p) for p in params)]) for cmd, params in segments)


def _working_precision(segments: list[Segment]) -> int:
    """Digits that keep sums of these parameters exact down to the rounding step."""
    values = [p for _, params in segments for p in params if p]
    if not values:
        return 0
    highest = max(p.adjusted() for p in values)
    lowest = min(min(p.as_tuple().exponent for p in values), -ARC_ROTATION_PRECISION)
    # Headroom for carries when coordinates are accumulated
    return highest - lowest + 4


def optimize_path(d: str) -> str:
    """
    Canonicalize path data: relative commands, coordinates rounded to 3 decimals.

    >>> optimize_path("M 3 5 L 5 5 L 5 8 Z")
    'M 3 5l 2 0l 0 3z'
    """
    segments = tokenize(d)
    if not segments:
        return ""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _working_precision(segments))
        return serialize(round_segments(to_relative(segments)))


def add_floats(n1: Number, n2: Number) -> float:
    """Sum two numbers (or numeric strings) rounded to 3 decimals."""
    total = Decimal(str(n1).strip()) + Decimal(str(n2).strip())
    return float(round_decimal(total))
