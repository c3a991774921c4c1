from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures describing a small published package, both as flat
   file records and as a real directory on disk.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from unpackedsize.domain.size_models import FileEntry  # noqa: E402

# Sizes of the reference package used across the suite (total 9227 bytes)
SAMPLE_SIZES: Dict[str, int] = {
    "dist/index.cjs": 6300,
    "package.json": 1351,
    "LICENSE": 1065,
    "README.md": 511,
}


def write_manifest(path: Path, data: Dict[str, Any], size: int) -> None:
    """Write ``data`` as package.json padded to exactly ``size`` bytes."""
    payload = dict(data)
    payload["description"] = ""
    base = json.dumps(payload)
    pad = size - len(base.encode("utf-8"))
    assert pad >= 0, "Manifest data larger than requested size."
    payload["description"] = "x" * pad
    path.write_text(json.dumps(payload), encoding="utf-8")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_entries() -> List[FileEntry]:
    """Flat file records of the reference package, in enumeration order."""
    return [FileEntry(parts=tuple(p.split("/")), size=s) for p, s in SAMPLE_SIZES.items()]


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a file of an exact byte size below ``tmp_path``."""
    def _make(rel: str, size: int = 1, base: Path = tmp_path) -> Path:
        target = base.joinpath(*rel.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"x" * size)
        return target
    return _make


@pytest.fixture
def sample_package(tmp_path: Path) -> Path:
    """
    Create the reference package on disk.

    Structure:
    /pkg
      /dist
        index.cjs      6300 B
      /src
        index.ts       (not published)
      package.json     1351 B (files: ["dist"])
      LICENSE          1065 B
      README.md         511 B
    """
    root = tmp_path / "pkg"
    (root / "dist").mkdir(parents=True)
    (root / "src").mkdir()

    (root / "dist" / "index.cjs").write_bytes(b"a" * SAMPLE_SIZES["dist/index.cjs"])
    (root / "src" / "index.ts").write_text("export const x = 1;\n", encoding="utf-8")
    (root / "LICENSE").write_bytes(b"l" * SAMPLE_SIZES["LICENSE"])
    (root / "README.md").write_bytes(b"r" * SAMPLE_SIZES["README.md"])
    write_manifest(
        root / "package.json",
        {"name": "demo", "version": "1.0.0", "main": "dist/index.cjs", "files": ["dist"]},
        SAMPLE_SIZES["package.json"],
    )
    return root


@pytest.fixture
def manifest_writer() -> Callable[[Path, Dict[str, Any], int], None]:
    """Expose ``write_manifest`` to tests that need exact manifest sizes."""
    return write_manifest
