"""Node representation for entries of the rendered structure."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the rendered structure.

    Extends anytree.Node with the entry kind and the entry's path relative to the
    directory the tool was started from, which is what accepted file paths are compared
    against. Children are attached in display order (directories first, then files,
    each group sorted by name).

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        relative_path (str): Path of the entry as it appears in accepted file lists.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode(".", is_dir=True, relative_path="")
        >>> child = FileSystemNode("main.py", parent=root, relative_path="main.py")
        >>> [node.name for node in root.children]
        ['main.py']
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        relative_path: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.relative_path = relative_path
