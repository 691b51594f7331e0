"""Tests for parent assignment, derived paths and tree traversal helpers."""

import pytest

from explorertree import File, Folder, StructuralViolationError
from explorertree.testing import EventRecorder


@pytest.fixture
def tree():
    """root -> src -> x.ts, root -> lib"""
    root = Folder.create_root()
    src = Folder("src")
    src.parent = root
    lib = Folder("lib")
    lib.parent = root
    x = File("x.ts")
    x.parent = src
    return root, src, lib, x


class TestAttachDetach:
    """Membership follows the parent setter."""

    def test_attach(self, tree):
        root, src, lib, x = tree

        assert x.parent is src
        assert list(src.children) == [x]
        assert root.children.names() == ["src", "lib"]

    def test_reparent_moves_node(self, tree):
        root, src, lib, x = tree

        x.parent = lib

        assert x.parent is lib
        assert len(src.children) == 0
        assert list(lib.children) == [x]

    def test_detach(self, tree):
        root, src, lib, x = tree

        x.parent = None

        assert x.parent is None
        assert len(src.children) == 0
        assert x.root is None

    def test_same_parent_twice_keeps_single_membership(self, tree):
        root, src, lib, x = tree

        x.parent = src

        assert list(src.children) == [x]

    def test_reparent_expands_new_ancestors(self, tree):
        root, src, lib, x = tree
        deep = Folder("deep")
        deep.parent = lib
        for folder in root.lineage.where(lambda n: n.type == "folder", lambda n: n):
            folder.collapse()

        x.parent = deep

        assert deep.expanded and lib.expanded and root.expanded
        assert not src.expanded

    def test_reparent_events(self, tree):
        root, src, lib, x = tree
        lib.expand()
        recorder = EventRecorder(root, src, lib, x)

        x.parent = lib

        assert recorder.names(src) == ["children"]
        assert recorder.names(lib) == ["children", "child:parent"]
        assert recorder.names(x) == ["parent:children", "parent"]
        assert recorder.names(root) == ["child:children", "child:children", "descendant:parent"]

    def test_failing_listener_does_not_split_a_move(self, tree):
        root, src, lib, x = tree

        def explode(event):
            raise RuntimeError("listener failed")

        src.changes.on("children", explode)

        with pytest.raises(RuntimeError):
            x.parent = lib

        assert x.parent is lib
        assert list(lib.children) == [x]
        assert len(src.children) == 0

    def test_listeners_see_the_finished_move(self, tree):
        root, src, lib, x = tree
        seen = []
        src.changes.on("children", lambda event: seen.append((x.parent, list(lib.children))))

        x.parent = lib

        assert seen == [(lib, [x])]


class TestStructuralGuards:
    """Assignments that would corrupt the tree are rejected up front."""

    def test_folder_cannot_be_its_own_parent(self):
        a = Folder("a")

        with pytest.raises(StructuralViolationError):
            a.parent = a
        assert a.parent is None

    def test_folder_cannot_move_below_descendant(self):
        a, b, c = Folder("a"), Folder("b"), Folder("c")
        b.parent = a
        c.parent = b

        with pytest.raises(StructuralViolationError):
            a.parent = c

        assert a.parent is None
        assert c.parent is b
        assert list(b.children) == [c]

    def test_root_cannot_be_moved(self):
        root = Folder.create_root()

        with pytest.raises(StructuralViolationError):
            root.parent = Folder("elsewhere")

    def test_parent_must_be_folder(self):
        with pytest.raises(StructuralViolationError):
            File("a").parent = File("b")


class TestDerivedReads:
    """path, ancestors, root, depth."""

    def test_paths(self, tree):
        root, src, lib, x = tree

        assert root.path == ""
        assert src.path == "src/"
        assert x.path == "src/x.ts"

    def test_path_follows_renames_and_moves(self, tree):
        root, src, lib, x = tree

        src.name = "source"
        assert x.path == "source/x.ts"

        x.parent = lib
        assert x.path == "lib/x.ts"

    def test_detached_paths(self):
        assert File("x.ts").path == "x.ts"
        assert Folder("lib").path == "lib/"

    def test_ancestors_nearest_first(self, tree):
        root, src, lib, x = tree

        assert list(x.ancestors) == [src, root]
        assert list(root.ancestors) == []

    def test_root(self, tree):
        root, src, lib, x = tree

        assert x.root is root
        assert src.root is root
        assert root.root is root
        assert Folder("loose").root.name == "loose"
        assert File("loose").root is None

    def test_depth_and_is_root(self, tree):
        root, src, lib, x = tree

        assert (root.depth, src.depth, x.depth) == (0, 1, 2)
        assert root.is_root
        assert not src.is_root
        assert not Folder("loose").is_root


class TestSingletonsAcrossMoves:
    """Moving a subtree into a tree keeps one selected/opened node."""

    def test_incoming_selection_loses(self, tree):
        root, src, lib, x = tree
        x.select()
        pkg = Folder("pkg")
        y = File("y.ts")
        y.parent = pkg
        y.select()

        pkg.parent = root

        assert x.selected
        assert not y.selected
        assert [n for n in root.lineage if n.selected] == [x]

    def test_incoming_open_file_loses(self, tree):
        root, src, lib, x = tree
        x.open()
        y = File("y.ts")
        y.open()

        y.parent = lib

        assert x.opened and not y.opened

    def test_incoming_state_kept_when_tree_has_none(self, tree):
        root, src, lib, x = tree
        y = File("y.ts")
        y.focus()

        y.parent = lib

        assert y.focused
