import sys

import pytest

from wasmforge.arena import Id, Tombstone, TombstoneArena


class Doggo(Tombstone):
    def __init__(self, good_boi):
        self.good_boi = good_boi

    def on_delete(self):
        self.good_boi = None


def test_can_delete():
    arena = TombstoneArena()
    rc = object()
    base = sys.getrefcount(rc)

    id_ = arena.alloc(Doggo(rc))
    assert sys.getrefcount(rc) == base + 1
    assert id_ in arena

    arena.delete(id_)
    assert sys.getrefcount(rc) == base, "the on_delete should have been called"
    assert id_ not in arena, "and the arena no longer contains the doggo :("


def test_len_counts_only_live_items():
    arena = TombstoneArena()
    ids = [arena.alloc(n) for n in range(4)]
    assert len(arena) == 4
    arena.delete(ids[1])
    assert len(arena) == 3
    assert list(arena) == [0, 2, 3]


def test_items_skip_dead():
    arena = TombstoneArena()
    a = arena.alloc("a")
    b = arena.alloc("b")
    c = arena.alloc("c")
    arena.delete(b)
    assert list(arena.items()) == [(a, "a"), (c, "c")]


def test_get_returns_none_for_dead_item():
    arena = TombstoneArena()
    id_ = arena.alloc("x")
    assert arena.get(id_) == "x"
    arena.delete(id_)
    assert arena.get(id_) is None


def test_getitem_of_dead_item_raises():
    arena = TombstoneArena()
    id_ = arena.alloc("x")
    assert arena[id_] == "x"
    arena.delete(id_)
    with pytest.raises(KeyError):
        arena[id_]


def test_delete_twice_raises():
    arena = TombstoneArena()
    id_ = arena.alloc("x")
    arena.delete(id_)
    with pytest.raises(KeyError):
        arena.delete(id_)


def test_ids_from_other_arena_are_not_contained():
    first = TombstoneArena()
    second = TombstoneArena()
    id_ = first.alloc("x")
    second.alloc("y")
    assert id_ not in second
    assert second.get(id_) is None


def test_next_id_matches_alloc():
    arena = TombstoneArena()
    arena.alloc("first")
    expected = arena.next_id()
    assert arena.alloc("second") == expected


def test_alloc_with_id_passes_own_id():
    arena = TombstoneArena()
    arena.alloc("filler")
    id_ = arena.alloc_with_id(lambda i: ("item", i))
    assert arena[id_] == ("item", id_)


def test_items_without_on_delete_can_be_deleted():
    arena = TombstoneArena()
    id_ = arena.alloc(42)
    arena.delete(id_)
    assert len(arena) == 0


def test_non_id_is_not_contained():
    arena = TombstoneArena()
    arena.alloc("x")
    assert 0 not in arena
    assert Id(-1, 0) not in arena