#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Project inspection: which LÖVE version does a project need, and what is it.

Two queries are offered, both read-only:

- :meth:`ProjectInspector.required_version` reads the configuration entry and
  fails with a typed error when no version can be found.
- :meth:`ProjectInspector.classify` tries the path as a package and then as a
  project folder, returning the first kind that yields a version, or
  ``UNKNOWN``.

The package and folder checks are independent: a path is not assumed to be
exactly one of the two.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from packaging.version import Version

from ..exceptions import EmptyEntryError, EntryReadError, VersionNotDeterminedError
from .classifier import PathLike, is_love_package, is_love_project_folder
from .project_models import DEFAULT_LAYOUT, ProjectInfo, ProjectLayout
from .readers import EntryReader, FolderEntryReader, PackageEntryReader, open_entry_reader
from .version_extractor import extract_version

logger = logging.getLogger(__name__)


class ProjectInspector:
    """Inspects LÖVE projects using a fixed :class:`ProjectLayout`."""

    def __init__(self, layout: ProjectLayout = DEFAULT_LAYOUT):
        self.layout = layout

    @classmethod
    def from_config(cls, config: Any) -> "ProjectInspector":
        """Build an inspector from a validated ``ConfigModel``."""
        return cls(config.project.to_layout())

    def is_package(self, project_path: PathLike) -> bool:
        return is_love_package(project_path, self.layout.package_extension)

    def is_project_folder(self, project_path: PathLike) -> bool:
        return is_love_project_folder(project_path, self.layout.entry_point)

    def _read_version(self, reader: EntryReader) -> Optional[Version]:
        content = reader.read_text(self.layout.config_entry)
        return extract_version(content)

    def required_version(self, project_path: PathLike) -> Version:
        """Return the version declared in the project's configuration entry.

        Raises:
            EntryReadError: the configuration entry could not be read.
            VersionNotDeterminedError: no parseable version assignment was found.
        """
        reader = open_entry_reader(project_path, self.layout)
        version = self._read_version(reader)
        if version is None:
            raise VersionNotDeterminedError(
                f"Failed to determine the version from '{self.layout.config_entry}'",
                project_path=str(project_path),
                entry_name=self.layout.config_entry,
            )
        logger.debug("%s requires version %s", project_path, version)
        return version

    def classify(self, project_path: PathLike) -> ProjectInfo:
        """Classify the project and report the version it declares.

        A package whose configuration entry is missing, unreadable or
        undecodable raises; an empty entry or one without a version falls
        through to the folder check. Folder read failures always fall through.
        """
        path_str = str(project_path)

        if self.is_package(project_path):
            try:
                version = self._read_version(PackageEntryReader(project_path))
            except EmptyEntryError as exc:
                logger.debug("Package check fell through: %s", exc)
                version = None
            if version is not None:
                return ProjectInfo.package(version, path_str)
            logger.debug("No version found in package %s", path_str)

        if self.is_project_folder(project_path):
            try:
                version = self._read_version(FolderEntryReader(project_path))
            except EntryReadError as exc:
                logger.debug("Folder check fell through: %s", exc)
                version = None
            if version is not None:
                return ProjectInfo.folder(version, path_str)
            logger.debug("No version found in folder %s", path_str)

        return ProjectInfo.unknown(path_str)


_default_inspector = ProjectInspector()


def get_required_version(project_path: PathLike, layout: Optional[ProjectLayout] = None) -> Version:
    """Look inside ``conf.lua`` of a project folder or ``.love`` package for the
    LÖVE version it should be run with."""
    inspector = _default_inspector if layout is None else ProjectInspector(layout)
    return inspector.required_version(project_path)


def classify_project(project_path: PathLike, layout: Optional[ProjectLayout] = None) -> ProjectInfo:
    """Tell whether the path is a package, a folder or neither, with its version."""
    inspector = _default_inspector if layout is None else ProjectInspector(layout)
    return inspector.classify(project_path)
