from __future__ import annotations

from typing import TYPE_CHECKING

from .cuboid import Cuboid

if TYPE_CHECKING:
    from collections.abc import Iterable

# Region considered by the initialization procedure.
INIT_REGION = Cuboid(-50, 50, -50, 50, -50, 50)


def total_volume(region: Iterable[Cuboid]) -> int:
    return sum(cuboid.volume for cuboid in region)


def clipped_volume(region: Iterable[Cuboid], limit: Cuboid) -> int:
    total = 0
    for cuboid in region:
        if (overlap := cuboid.intersect(limit)) is not None:
            total += overlap.volume
    return total
