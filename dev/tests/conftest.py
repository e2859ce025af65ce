from __future__ import annotations

import sys
import zipfile
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

# Ensure repo root on path
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


DEFAULT_CONF = 'function love.conf(t)\n    t.identity = "demo"\n    t.version = "11.3"\nend\n'


@pytest.fixture
def make_folder(tmp_path) -> Callable[..., Path]:
    """Create a project folder holding the given files (name -> text or bytes)."""

    def _make(files: Dict[str, object], name: str = "game") -> Path:
        folder = tmp_path / name
        folder.mkdir(parents=True, exist_ok=True)
        for file_name, content in files.items():
            target = folder / file_name
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(str(content), encoding="utf-8")
        return folder

    return _make


@pytest.fixture
def make_package(tmp_path) -> Callable[..., Path]:
    """Create a zipped package holding the given entries (name -> text or bytes)."""

    def _make(entries: Dict[str, object], name: str = "game.love", compression: Optional[int] = None) -> Path:
        package = tmp_path / name
        package.parent.mkdir(parents=True, exist_ok=True)
        mode = zipfile.ZIP_DEFLATED if compression is None else compression
        with zipfile.ZipFile(package, "w", compression=mode) as zf:
            for entry_name, content in entries.items():
                data = content if isinstance(content, bytes) else str(content).encode("utf-8")
                zf.writestr(entry_name, data)
        return package

    return _make
