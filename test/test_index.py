from __future__ import annotations

import pytest

from reactor_reboot.core.cuboid import Cuboid
from reactor_reboot.core.errors import InvalidCuboid, UnknownIdentifier
from reactor_reboot.core.index import FaceIndex, SpatialIndex


def test_face_index_range_lookup():
    face = FaceIndex()
    face.add(5, 1)
    face.add(-3, 2)
    face.add(5, 3)
    face.add(12, 4)

    assert len(face) == 3
    assert sorted(face.between(-3, 5)) == [1, 2, 3]
    assert sorted(face.between(6, 11)) == []
    assert sorted(face.between(12, 12)) == [4]
    assert sorted(face.between(-100, 100)) == [1, 2, 3, 4]


def test_face_index_discard_drops_empty_keys():
    face = FaceIndex()
    face.add(5, 1)
    face.add(5, 2)

    face.discard(5, 1)
    assert 5 in face
    face.discard(5, 2)
    assert 5 not in face
    assert len(face) == 0

    # unknown keys and ids are ignored
    face.discard(5, 2)
    face.discard(7, 9)


def test_face_index_descending_stops_at_floor():
    face = FaceIndex()
    for key in (0, 2, 4, 6, 8):
        face.add(key, key)

    assert list(face.descending(6, 1)) == [4, 2]
    assert list(face.descending(100, -100)) == [8, 6, 4, 2, 0]
    assert list(face.descending(0, -100)) == []


def test_insert_assigns_fresh_ids():
    index = SpatialIndex()
    a = index.insert(Cuboid(0, 1, 0, 1, 0, 1))
    b = index.insert(Cuboid(5, 6, 5, 6, 5, 6))
    index.remove(a)
    c = index.insert(Cuboid(0, 1, 0, 1, 0, 1))

    assert len({a, b, c}) == 3
    assert len(index) == 2
    assert a not in index and c in index


def test_insert_rejects_invalid_cuboid():
    index = SpatialIndex()
    with pytest.raises(InvalidCuboid):
        index.insert(Cuboid(0, 1, 3, 2, 0, 1))
    assert len(index) == 0


def test_remove_returns_cuboid_and_clears_every_face():
    index = SpatialIndex()
    cuboid = Cuboid(0, 4, 0, 4, 0, 4)
    id = index.insert(cuboid)

    assert index.remove(id) == cuboid
    assert len(index) == 0
    assert index.query_overlap_candidates(Cuboid(-10, 10, -10, 10, -10, 10)) == []
    for face in index._faces:
        assert len(face) == 0


def test_remove_unknown_id_leaves_index_untouched():
    index = SpatialIndex()
    id = index.insert(Cuboid(0, 4, 0, 4, 0, 4))

    with pytest.raises(UnknownIdentifier):
        index.remove(id + 1)
    with pytest.raises(KeyError):
        index[id + 1]

    assert len(index) == 1
    assert index.query_overlap_candidates(Cuboid(0, 0, 0, 0, 0, 0)) == [id]


def test_candidates_come_from_face_ranges():
    index = SpatialIndex()
    left = index.insert(Cuboid(0, 4, 0, 4, 0, 4))
    far = index.insert(Cuboid(100, 104, 100, 104, 100, 104))
    # x faces outside the query, y face inside it, but no overlap on z
    decoy = index.insert(Cuboid(-50, 50, 2, 3, 40, 45))

    candidates = index.query_overlap_candidates(Cuboid(3, 8, 3, 8, 3, 8))
    assert left in candidates
    assert decoy in candidates
    assert far not in candidates

    assert index.overlaps(Cuboid(3, 8, 3, 8, 3, 8)) == [(left, Cuboid(3, 4, 3, 4, 3, 4))]


def test_enclosing_cuboid_is_found():
    index = SpatialIndex()
    index.insert(Cuboid(-30, -20, 0, 1, 0, 1))
    big = index.insert(Cuboid(-10, 10, -10, 10, -10, 10))
    index.insert(Cuboid(20, 30, 0, 1, 0, 1))

    # no face of `big` falls inside the query's ranges
    query = Cuboid(-1, 1, -1, 1, -1, 1)
    assert big in index.query_overlap_candidates(query)
    assert index.overlaps(query) == [(big, query)]


def test_cuboids_lists_stored_region():
    index = SpatialIndex()
    stored = [Cuboid(0, 1, 0, 1, 0, 1), Cuboid(2, 3, 0, 1, 0, 1)]
    for cuboid in stored:
        index.insert(cuboid)
    assert sorted(index.cuboids()) == sorted(stored)


def test_widest_shrinks_when_wide_cuboids_are_removed():
    index = SpatialIndex()
    narrow = index.insert(Cuboid(0, 4, 0, 4, 0, 4))
    wide = index.insert(Cuboid(-1000, 1000, 10, 20, 10, 20))
    index.insert(Cuboid(10, 13, 0, 4, 0, 4))
    assert index.widest == 2000

    index.remove(wide)
    assert index.widest == 4
    assert index.overlaps(Cuboid(1, 3, 1, 3, 1, 3)) == [(narrow, Cuboid(1, 3, 1, 3, 1, 3))]

    index.remove(narrow)
    assert index.widest == 3
    assert index.query_overlap_candidates(Cuboid(1, 3, 1, 3, 1, 3)) == []
