"""Path classification predicates: hidden entries, binary files and extension filters.

All predicates work on the path string alone and never touch the filesystem, so they
always return a definite answer.
"""

from typing import AbstractSet, List, Optional

from pretty_print.types import ExtensionSet

# Extensions treated as binary content. Edit this table to customize what is
# considered binary; files without any extension are always treated as binary.
BINARY_EXTENSIONS: ExtensionSet = frozenset(
    {
        # Documents and images
        "pdf",
        "png",
        "jpg",
        "jpeg",
        "gif",
        "bmp",
        "ico",
        "svg",
        "webp",
        # Audio and video
        "mp3",
        "mp4",
        "wav",
        "ogg",
        "flac",
        "avi",
        "mov",
        "mkv",
        "wmv",
        # Archives
        "zip",
        "tar",
        "gz",
        "bz2",
        "xz",
        "7z",
        "rar",
        # Executables and compiled objects
        "exe",
        "dll",
        "so",
        "dylib",
        "class",
        "pyc",
        "pyo",
        "o",
        "obj",
        "a",
        "lib",
        "bin",
    }
)


def _segments(path: str) -> List[str]:
    return [segment for segment in path.replace("\\", "/").split("/") if segment]


def get_extension(path: str) -> Optional[str]:
    """Return the extension of the final path segment, preserving its case.

    The extension is the text after the last ``.`` of the file name. A name without a
    dot, or ending with one, has no extension. Note that dotfiles such as ``.bashrc``
    have the extension ``bashrc``.

    Example:
        >>> get_extension("src/app.Tar.GZ")
        'GZ'
        >>> get_extension("Makefile") is None
        True
        >>> get_extension(".bashrc")
        'bashrc'
    """
    segments = _segments(path)
    if not segments:
        return None
    name = segments[-1]
    if "." not in name:
        return None
    extension = name.rsplit(".", 1)[1]
    return extension or None


def is_hidden(path: str) -> bool:
    """Check whether any segment of ``path`` is hidden.

    A segment is hidden when it starts with ``.`` (``.`` and ``..`` themselves excepted)
    or with ``__``, which covers cache directories such as ``__pycache__``.

    Example:
        >>> is_hidden("./src/.env")
        True
        >>> is_hidden("pkg/__pycache__/mod.cpython-312.pyc")
        True
        >>> is_hidden("../src/main.py")
        False
    """
    for segment in _segments(path):
        if segment in (".", ".."):
            continue
        if segment.startswith(".") or segment.startswith("__"):
            return True
    return False


def is_binary(path: str, binary_extensions: AbstractSet[str] = BINARY_EXTENSIONS) -> bool:
    """Classify a file as binary from its name alone.

    Args:
        path: File path; only the final segment is inspected.
        binary_extensions: Lowercase extensions considered binary.

    Returns:
        True if the file has no extension or its lowercase extension is listed.

    Example:
        >>> is_binary("logo.PNG")
        True
        >>> is_binary("LICENSE")
        True
        >>> is_binary("main.py")
        False
    """
    extension = get_extension(path)
    if extension is None:
        return True
    return extension.lower() in binary_extensions


def passes_extension_filter(
    path: str, whitelist: AbstractSet[str] = frozenset(), blacklist: AbstractSet[str] = frozenset()
) -> bool:
    """Apply whitelist/blacklist extension rules to a file path.

    With a whitelist, the file must have an extension contained in it. Otherwise, with a
    blacklist, the file fails only if its extension is listed; files without an
    extension always pass blacklist mode. Without either list every file passes.
    Comparison is case-insensitive; both lists are expected in lowercase.

    Example:
        >>> passes_extension_filter("a.PY", whitelist={"py"})
        True
        >>> passes_extension_filter("Makefile", whitelist={"py"})
        False
        >>> passes_extension_filter("Makefile", blacklist={"json"})
        True
    """
    extension = get_extension(path)
    if whitelist:
        return extension is not None and extension.lower() in whitelist
    if blacklist:
        return extension is None or extension.lower() not in blacklist
    return True
