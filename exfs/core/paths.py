"""Path helpers shared by the core services."""

import os
from pathlib import Path, PurePath
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def normalise(path: PathLike) -> Path:
    """Returns an absolute path with symlinks and ``..`` segments resolved."""
    return Path(os.path.realpath(os.fspath(path)))


def _as_pure(path: PathLike) -> PurePath:
    # Keep the flavour of paths that already carry one (e.g. PureWindowsPath on POSIX).
    return path if isinstance(path, PurePath) else PurePath(path)


def is_within(path: PathLike, boundary: PathLike) -> bool:
    """Checks whether ``path`` equals ``boundary`` or lies below it.

    The comparison is done on path segments, so ``/home/user2`` is not
    within ``/home/user`` even though it shares the string prefix.
    Both arguments are expected to be absolute and normalised.
    """
    path_parts = _as_pure(path).parts
    boundary_parts = _as_pure(boundary).parts
    if len(path_parts) < len(boundary_parts):
        return False
    return path_parts[:len(boundary_parts)] == boundary_parts
