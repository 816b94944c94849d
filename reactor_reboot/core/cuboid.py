from __future__ import annotations

from itertools import product
from typing import NamedTuple

from .errors import InvalidCuboid

Segment = tuple[int, int]


class Cuboid(NamedTuple):
    """Closed axis-aligned box of integer lattice points."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int
    z_min: int
    z_max: int

    def __str__(self):
        return (
            f"x={self.x_min}..{self.x_max},"
            f"y={self.y_min}..{self.y_max},"
            f"z={self.z_min}..{self.z_max}"
        )

    @property
    def is_valid(self) -> bool:
        return (
            self.x_min <= self.x_max
            and self.y_min <= self.y_max
            and self.z_min <= self.z_max
        )

    def validate(self) -> Cuboid:
        if not self.is_valid:
            raise InvalidCuboid(self)
        return self

    @property
    def volume(self) -> int:
        return (
            (self.x_max - self.x_min + 1)
            * (self.y_max - self.y_min + 1)
            * (self.z_max - self.z_min + 1)
        )

    def contains(self, other: Cuboid) -> bool:
        return (
            self.x_min <= other.x_min
            and other.x_max <= self.x_max
            and self.y_min <= other.y_min
            and other.y_max <= self.y_max
            and self.z_min <= other.z_min
            and other.z_max <= self.z_max
        )

    def intersect(self, other: Cuboid) -> Cuboid | None:
        self.validate()
        other.validate()

        overlap = Cuboid(
            max(self.x_min, other.x_min),
            min(self.x_max, other.x_max),
            max(self.y_min, other.y_min),
            min(self.y_max, other.y_max),
            max(self.z_min, other.z_min),
            min(self.z_max, other.z_max),
        )
        if not overlap.is_valid:
            return None
        return overlap

    def subtract(self, other: Cuboid) -> list[Cuboid]:
        """Split off the part of ``self`` not covered by ``other``.

        The overlap cuts each axis into a before, middle and after segment.
        Of the 27 boxes in their product, the middle-middle-middle one is the
        overlap itself and is dropped, as is every box with an empty segment.
        What is left partitions ``self - other``.
        """
        overlap = self.intersect(other)
        if overlap is None:
            return [self]

        x_segments = _segments(self.x_min, self.x_max, overlap.x_min, overlap.x_max)
        y_segments = _segments(self.y_min, self.y_max, overlap.y_min, overlap.y_max)
        z_segments = _segments(self.z_min, self.z_max, overlap.z_min, overlap.z_max)

        fragments: list[Cuboid] = []
        for (x0, x1), (y0, y1), (z0, z1) in product(x_segments, y_segments, z_segments):
            fragment = Cuboid(x0, x1, y0, y1, z0, z1)
            if fragment != overlap and fragment.is_valid:
                fragments.append(fragment)
        return fragments


def _segments(start: int, end: int, cut_start: int, cut_end: int) -> tuple[Segment, ...]:
    return (
        (start, cut_start - 1),
        (cut_start, cut_end),
        (cut_end + 1, end),
    )


def volume(cuboid: Cuboid) -> int:
    return cuboid.volume


def intersect(a: Cuboid, b: Cuboid) -> Cuboid | None:
    return a.intersect(b)


def subtract(a: Cuboid, b: Cuboid) -> list[Cuboid]:
    return a.subtract(b)
