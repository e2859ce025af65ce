"""Core inspection logic for LÖVE projects."""

from .classifier import get_extension, is_love_package, is_love_project_folder
from .inspector import ProjectInspector, classify_project, get_required_version
from .project_models import DEFAULT_LAYOUT, ProjectInfo, ProjectKind, ProjectLayout
from .readers import (
    EntryReader,
    FolderEntryReader,
    PackageEntryReader,
    open_entry_reader,
    read_entry,
)
from .version_extractor import VERSION_ASSIGNMENT_RE, extract_version, parse_version

__all__ = [
    "DEFAULT_LAYOUT",
    "EntryReader",
    "FolderEntryReader",
    "PackageEntryReader",
    "ProjectInfo",
    "ProjectInspector",
    "ProjectKind",
    "ProjectLayout",
    "VERSION_ASSIGNMENT_RE",
    "classify_project",
    "extract_version",
    "get_extension",
    "get_required_version",
    "is_love_package",
    "is_love_project_folder",
    "open_entry_reader",
    "parse_version",
    "read_entry",
]
