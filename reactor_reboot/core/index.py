from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from itertools import count
from typing import TYPE_CHECKING

from .errors import UnknownIdentifier

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .cuboid import Cuboid

Id = int

# Field order of Cuboid; face i bounds axis i // 2.
FACES = ("x_min", "x_max", "y_min", "y_max", "z_min", "z_max")


class FaceIndex:
    """Ordered map from one face coordinate to the ids that share it."""

    def __init__(self):
        self._keys: list[int] = []
        self._ids: dict[int, set[Id]] = {}

    def __len__(self):
        return len(self._keys)

    def __contains__(self, key: object):
        return key in self._ids

    def add(self, key: int, id: Id):
        if key not in self._ids:
            insort(self._keys, key)
            self._ids[key] = set()
        self._ids[key].add(id)

    def discard(self, key: int, id: Id):
        ids = self._ids.get(key)
        if ids is None:
            return
        ids.discard(id)
        if not ids:
            del self._ids[key]
            del self._keys[bisect_left(self._keys, key)]

    def between(self, low: int, high: int) -> Iterator[Id]:
        """Yield ids whose key lies in ``[low, high]``."""
        start = bisect_left(self._keys, low)
        stop = bisect_right(self._keys, high)
        for key in self._keys[start:stop]:
            yield from self._ids[key]

    def descending(self, below: int, floor: int) -> Iterator[Id]:
        """Yield ids whose key lies in ``[floor, below)``, largest key first."""
        for i in range(bisect_left(self._keys, below) - 1, -1, -1):
            key = self._keys[i]
            if key < floor:
                return
            yield from self._ids[key]


class SpatialIndex:
    """Disjoint cuboids keyed by id, with one FaceIndex per face coordinate.

    Only ``insert`` and ``remove`` mutate the index, and each touches the
    store and all six face maps together.
    """

    def __init__(self):
        self._ids = count()
        self._cuboids: dict[Id, Cuboid] = {}
        self._faces = tuple(FaceIndex() for _ in FACES)
        # Sorted x_max - x_min of every stored cuboid.
        self._widths: list[int] = []

    def __len__(self):
        return len(self._cuboids)

    def __contains__(self, id: object):
        return id in self._cuboids

    def __getitem__(self, id: Id) -> Cuboid:
        try:
            return self._cuboids[id]
        except KeyError:
            raise UnknownIdentifier(id) from None

    def cuboids(self) -> tuple[Cuboid, ...]:
        return tuple(self._cuboids.values())

    @property
    def widest(self) -> int:
        """Largest x extent among the stored cuboids."""
        return self._widths[-1] if self._widths else 0

    def insert(self, cuboid: Cuboid) -> Id:
        cuboid.validate()
        id = next(self._ids)
        self._cuboids[id] = cuboid
        for face, key in zip(self._faces, cuboid):
            face.add(key, id)
        insort(self._widths, cuboid.x_max - cuboid.x_min)
        return id

    def remove(self, id: Id) -> Cuboid:
        cuboid = self[id]
        del self._cuboids[id]
        for face, key in zip(self._faces, cuboid):
            face.discard(key, id)
        del self._widths[bisect_left(self._widths, cuboid.x_max - cuboid.x_min)]
        return cuboid

    def query_overlap_candidates(self, query: Cuboid) -> list[Id]:
        """Ids of stored cuboids that may overlap ``query``.

        A stored cuboid overlapping the query either has a face inside the
        query's range on that face's axis, or strictly encloses the query.
        Stored cuboids are disjoint, so at most one can enclose it.

        The enclosure search walks ``x_min`` keys down to ``query.x_max``
        minus the widest stored x extent, so while one very wide cuboid is
        stored it may visit most keys.
        """
        candidates: set[Id] = set()
        for i, face in enumerate(self._faces):
            axis = i // 2
            low, high = query[2 * axis], query[2 * axis + 1]
            candidates.update(face.between(low, high))

        enclosing = self._find_enclosing(query)
        if enclosing is not None:
            candidates.add(enclosing)

        return sorted(candidates)

    def overlaps(self, query: Cuboid) -> list[tuple[Id, Cuboid]]:
        found = []
        for id in self.query_overlap_candidates(query):
            overlap = self._cuboids[id].intersect(query)
            if overlap is not None:
                found.append((id, overlap))
        return found

    def _find_enclosing(self, query: Cuboid) -> Id | None:
        # An enclosing cuboid starts before query.x_min and ends after
        # query.x_max, so it starts no earlier than query.x_max - widest.
        floor = query.x_max - self.widest
        for id in self._faces[0].descending(query.x_min, floor):
            if self._cuboids[id].contains(query):
                return id
        return None
