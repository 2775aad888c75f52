import os

from .paths import PathLike


def extension_of(path: PathLike) -> str:
    """
    Return the extension key for a file path: "" or "." + suffix.

    Only the final path segment is considered. A dotfile with nothing after
    its leading dot (".bashrc") and a name ending in a dot have no extension.
    Case is kept as found on disk.
    """
    name = os.path.basename(os.fspath(path))
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        return ""
    return f".{ext}"
