"""Unit tests for FileSystemNode."""

from anytree import PreOrderIter

from pretty_print.file_system_tree.file_system_node import FileSystemNode


def test_defaults():
    node = FileSystemNode("main.py")
    assert node.name == "main.py"
    assert node.parent is None
    assert node.is_dir is False
    assert node.relative_path == ""


def test_hierarchy():
    root = FileSystemNode(".", is_dir=True)
    src = FileSystemNode("src", parent=root, is_dir=True, relative_path="src")
    main = FileSystemNode("main.py", parent=src, relative_path="src/main.py")

    assert root.children == (src,)
    assert src.children == (main,)
    assert main.path == (root, src, main)
    assert [node.relative_path for node in PreOrderIter(root)] == ["", "src", "src/main.py"]


def test_detach():
    root = FileSystemNode(".", is_dir=True)
    child = FileSystemNode("empty", parent=root, is_dir=True, relative_path="empty")
    child.parent = None
    assert root.children == ()
    assert child.is_root


def test_extra_attributes():
    node = FileSystemNode("a.py", relative_path="a.py", line_count=12)
    assert node.line_count == 12
