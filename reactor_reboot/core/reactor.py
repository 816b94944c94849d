from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from .index import SpatialIndex

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .cuboid import Cuboid

logger = logging.getLogger(__name__)


class Flag(Enum):
    on = "on"
    off = "off"


class Command(NamedTuple):
    flag: Flag
    cuboid: Cuboid

    def __str__(self):
        return f"{self.flag.value} {self.cuboid}"


class Reactor:
    """Applies reboot steps in order, keeping the lit region as disjoint cuboids."""

    def __init__(self):
        self._index = SpatialIndex()
        self.steps = 0

    def __len__(self):
        return len(self._index)

    def apply(self, command: Command):
        flag, cuboid = command
        cuboid.validate()
        overlaps = self._index.overlaps(cuboid)

        if flag is Flag.on:
            added = self._turn_on(cuboid, [id for id, _ in overlaps])
            logger.debug(
                "step %d: %s -> %d overlaps, %d fragments added",
                self.steps,
                command,
                len(overlaps),
                added,
            )
        else:
            kept = self._turn_off(cuboid, [id for id, _ in overlaps])
            logger.debug(
                "step %d: %s -> %d cuboids cut, %d fragments kept",
                self.steps,
                command,
                len(overlaps),
                kept,
            )
        self.steps += 1

    def _turn_on(self, cuboid: Cuboid, overlapping: list[int]) -> int:
        # Carve away everything already lit; what is left is new volume.
        fragments = [cuboid]
        for id in overlapping:
            lit = self._index[id]
            fragments = [piece for f in fragments for piece in f.subtract(lit)]
            if not fragments:
                break

        for fragment in fragments:
            self._index.insert(fragment)
        return len(fragments)

    def _turn_off(self, cuboid: Cuboid, overlapping: list[int]) -> int:
        kept = 0
        for id in overlapping:
            lit = self._index.remove(id)
            for piece in lit.subtract(cuboid):
                self._index.insert(piece)
                kept += 1
        return kept

    def region(self) -> tuple[Cuboid, ...]:
        return self._index.cuboids()


def run(
    commands: Iterable[Command],
    *,
    on_step: Callable[[Command], None] | None = None,
) -> tuple[Cuboid, ...]:
    reactor = Reactor()
    for command in commands:
        reactor.apply(command)
        if on_step:
            on_step(command)

    logger.info(
        "Applied %d steps; %d disjoint cuboids lit.", reactor.steps, len(reactor)
    )
    return reactor.region()
