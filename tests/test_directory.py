from pathlib import Path

import pytest

from resourcekit.directory import Directory


def test_new_directory_has_no_parent_or_children():
    root = Directory("assets")
    assert root.parent is None
    assert root.children == []
    assert root.child(0) is None


def test_add_child_links_both_ways():
    root = Directory("assets")
    sub = root.add_child(Directory("assets/textures"))
    assert sub.parent is root
    assert root.child(0) is sub
    assert root.children == [sub]


def test_child_out_of_range_returns_none():
    root = Directory("assets")
    root.add_child(Directory("assets/a"))
    assert root.child(1) is None
    assert root.child(-1) is None


def test_children_keep_order():
    root = Directory("r")
    kids = [root.add_child(Directory(f"r/{n}")) for n in "abc"]
    assert [root.child(i) for i in range(3)] == kids


def test_fs_path_matches_path():
    d = Directory("assets/textures")
    assert d.fs_path == Path("assets/textures")


def test_cannot_add_self():
    d = Directory("x")
    with pytest.raises(ValueError):
        d.add_child(d)