from __future__ import annotations

import re
from typing import TYPE_CHECKING

from click import UsageError

from ..core.cuboid import Cuboid
from ..core.reactor import Command, Flag

if TYPE_CHECKING:
    from collections.abc import Iterator

_INT = r"\s*(-?\d+)\s*"
_RANGES = rf"x={_INT}\.\.{_INT},\s*y={_INT}\.\.{_INT},\s*z={_INT}\.\.{_INT}"

RANGES_PATTERN = re.compile(_RANGES)
STEP_PATTERN = re.compile(rf"(on|off)\s+{_RANGES}")


def parse_cuboid(text: str) -> Cuboid:
    """Parse ``x=a..b,y=c..d,z=e..f`` into a valid Cuboid."""
    match = RANGES_PATTERN.fullmatch(text.strip())
    if not match:
        raise UsageError(f"Expected x=<min>..<max>,y=<min>..<max>,z=<min>..<max>; received {text!r}")
    return _build_cuboid(match.groups(), repr(text.strip()))


def parse_steps(text: str) -> list[Command]:
    return list(iter_steps(text))


def iter_steps(text: str) -> Iterator[Command]:
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not (line := line.strip()):
            continue

        match = STEP_PATTERN.fullmatch(line)
        if not match:
            raise UsageError(f"Line {line_number}: malformed reboot step {line!r}")

        flag, *bounds = match.groups()
        cuboid = _build_cuboid(bounds, f"line {line_number}")
        yield Command(Flag(flag), cuboid)


def _build_cuboid(bounds: tuple[str, ...] | list[str], where: str) -> Cuboid:
    cuboid = Cuboid(*map(int, bounds))
    if not cuboid.is_valid:
        raise UsageError(f"Range with min greater than max in {where}: {cuboid}")
    return cuboid
