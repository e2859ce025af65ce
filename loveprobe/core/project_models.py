#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared models for project inspection results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from packaging.version import Version

PACKAGE_EXTENSION = "love"
ENTRY_POINT = "main.lua"
CONFIG_ENTRY = "conf.lua"


class ProjectKind(Enum):
    """How a LÖVE project is laid out on disk."""

    PACKAGE = "package"
    FOLDER = "folder"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ProjectLayout:
    """Fixed names used to recognise a project and find its configuration."""

    package_extension: str = PACKAGE_EXTENSION
    """Final dot-segment identifying a zipped package (case-sensitive)."""

    entry_point: str = ENTRY_POINT
    """Script whose presence at the root marks a project folder."""

    config_entry: str = CONFIG_ENTRY
    """File holding the ``version = "..."`` assignment."""


DEFAULT_LAYOUT = ProjectLayout()


@dataclass(frozen=True)
class ProjectInfo:
    """Result of classifying a project.

    ``version`` is always set for ``PACKAGE`` and ``FOLDER`` and always
    ``None`` for ``UNKNOWN``; use the constructors below rather than building
    instances by hand.
    """

    kind: ProjectKind
    version: Optional[Version] = None
    path: str = ""

    @classmethod
    def package(cls, version: Version, path: str = "") -> "ProjectInfo":
        return cls(ProjectKind.PACKAGE, version, str(path))

    @classmethod
    def folder(cls, version: Version, path: str = "") -> "ProjectInfo":
        return cls(ProjectKind.FOLDER, version, str(path))

    @classmethod
    def unknown(cls, path: str = "") -> "ProjectInfo":
        return cls(ProjectKind.UNKNOWN, None, str(path))

    @property
    def is_unknown(self) -> bool:
        return self.kind is ProjectKind.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "kind": self.kind.value,
            "version": str(self.version) if self.version is not None else None,
        }

    def __str__(self) -> str:
        if self.version is None:
            return self.kind.value
        return f"{self.kind.value} {self.version}"
