from __future__ import annotations

from .project import PackageProject, load_project
from .walker import FileEnumerator, enumerate_pack_files

__all__ = [
    "FileEnumerator",
    "PackageProject",
    "enumerate_pack_files",
    "load_project",
]
