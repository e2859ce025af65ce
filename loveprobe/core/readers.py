#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""
Entry readers for LÖVE projects.

A project is either a folder on disk or a zipped ``.love`` package. Both are
read through the same :class:`EntryReader` interface; :func:`open_entry_reader`
picks the strategy from the path classification so callers never branch on
the project format themselves.

Every read buffers the whole entry. Empty entries and undecodable bytes are
reported as errors, not as empty strings.
"""

from __future__ import annotations

import logging
import zipfile
import zlib
from abc import ABC, abstractmethod
from pathlib import Path

from ..exceptions import EmptyEntryError, EntryDecodeError, EntryNotFoundError
from .classifier import PathLike, is_love_package
from .project_models import DEFAULT_LAYOUT, ProjectLayout

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"


class EntryReader(ABC):
    """Reads named files out of a single project."""

    kind = "unknown"

    def __init__(self, project_path: PathLike):
        self.project_path = Path(project_path)

    @abstractmethod
    def read_bytes(self, entry_name: str) -> bytes:
        """Return the full content of ``entry_name``.

        Raises:
            EntryNotFoundError: the project or the entry cannot be opened.
        """

    def read_text(self, entry_name: str) -> str:
        """Return the decoded content of ``entry_name``.

        Raises:
            EntryNotFoundError: the project or the entry cannot be opened.
            EmptyEntryError: the entry holds zero bytes.
            EntryDecodeError: the bytes are not valid text.
        """
        data = self.read_bytes(entry_name)
        if not data:
            raise EmptyEntryError(
                f"Entry '{entry_name}' is empty",
                project_path=str(self.project_path),
                entry_name=entry_name,
            )
        try:
            return data.decode(TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            raise EntryDecodeError(
                f"Entry '{entry_name}' is not valid {TEXT_ENCODING} text: {exc}",
                project_path=str(self.project_path),
                entry_name=entry_name,
                encoding=TEXT_ENCODING,
            ) from exc

    def _not_found(self, entry_name: str, exc: BaseException) -> EntryNotFoundError:
        return EntryNotFoundError(
            f"Cannot open '{entry_name}' in {self.kind} {self.project_path}: {exc}",
            project_path=str(self.project_path),
            entry_name=entry_name,
        )


class FolderEntryReader(EntryReader):
    """Reads files relative to a project directory."""

    kind = "folder"

    def read_bytes(self, entry_name: str) -> bytes:
        entry_path = self.project_path / entry_name
        try:
            with open(entry_path, "rb") as f:
                data = f.read()
        except (OSError, ValueError) as exc:
            raise self._not_found(entry_name, exc) from exc
        logger.debug("Read %d bytes from %s", len(data), entry_path)
        return data


class PackageEntryReader(EntryReader):
    """Reads members of a zipped ``.love`` package.

    Member names are matched exactly and case-sensitively; no path
    normalisation is applied.
    """

    kind = "package"

    def read_bytes(self, entry_name: str) -> bytes:
        # Encrypted members raise RuntimeError; damaged streams raise zlib.error or EOFError
        try:
            with zipfile.ZipFile(self.project_path, "r") as zf:
                data = zf.read(entry_name)
        except (OSError, KeyError, zipfile.BadZipFile, RuntimeError,
                NotImplementedError, EOFError, zlib.error) as exc:
            raise self._not_found(entry_name, exc) from exc
        logger.debug("Read %d bytes from %s!%s", len(data), self.project_path, entry_name)
        return data


def open_entry_reader(project_path: PathLike, layout: ProjectLayout = DEFAULT_LAYOUT) -> EntryReader:
    """Select the reader strategy for ``project_path``."""
    if is_love_package(project_path, layout.package_extension):
        return PackageEntryReader(project_path)
    return FolderEntryReader(project_path)


def read_entry(project_path: PathLike, entry_name: str, layout: ProjectLayout = DEFAULT_LAYOUT) -> str:
    """Read ``entry_name`` as text from a project folder or package."""
    return open_entry_reader(project_path, layout).read_text(entry_name)
