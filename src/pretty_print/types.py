from os import PathLike
from typing import FrozenSet, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Lowercase file extensions without the leading dot, e.g. {"py", "md"}
ExtensionSet = FrozenSet[str]
