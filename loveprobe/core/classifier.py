"""Path classification: zipped ``.love`` package or plain project folder."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .project_models import ENTRY_POINT, PACKAGE_EXTENSION

PathLike = Union[str, "os.PathLike[str]"]


def get_extension(project_path: PathLike) -> str:
    """Return the last dot-segment of the path's final component.

    A name without any dot has no extension and yields ``""``.
    """
    name = Path(project_path).name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def is_love_package(project_path: PathLike, extension: str = PACKAGE_EXTENSION) -> bool:
    """Check whether the path names a package. Only the extension is looked at."""
    return get_extension(project_path) == extension


def is_love_project_folder(project_path: PathLike, entry_point: str = ENTRY_POINT) -> bool:
    """Check whether ``entry_point`` exists directly under the path."""
    try:
        return (Path(project_path) / entry_point).exists()
    except (OSError, ValueError):
        return False
