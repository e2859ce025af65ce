"""loveprobe - find out which LÖVE version a project folder or .love package needs."""

from .core import (
    ProjectInfo,
    ProjectInspector,
    ProjectKind,
    ProjectLayout,
    classify_project,
    get_required_version,
)
from .exceptions import (
    EmptyEntryError,
    EntryDecodeError,
    EntryNotFoundError,
    EntryReadError,
    InspectionError,
    VersionNotDeterminedError,
)
from .version import load_version

__version__ = load_version()

__all__ = [
    "EmptyEntryError",
    "EntryDecodeError",
    "EntryNotFoundError",
    "EntryReadError",
    "InspectionError",
    "ProjectInfo",
    "ProjectInspector",
    "ProjectKind",
    "ProjectLayout",
    "VersionNotDeterminedError",
    "__version__",
    "classify_project",
    "get_required_version",
]
