from __future__ import annotations

"""
Project Model Loader.

Reads the package manifest of a project directory and exposes the pieces
of it that drive file selection: the ``files`` whitelist, the entry
points that always ship, and the workspace directories that belong to
other packages.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from unpackedsize.domain.errors import ProjectLoadError

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

# -----------------------------------------------------------------------------
# PROJECT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PackageProject:
    """
    In-memory model of one package directory.

    Attributes:
        root: Absolute path of the project directory.
        manifest: Parsed manifest object (empty when no manifest exists).
    """
    root: str
    manifest: Dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        value = self.manifest.get("name")
        return value if isinstance(value, str) else os.path.basename(self.root)

    @property
    def version(self) -> str:
        value = self.manifest.get("version")
        return value if isinstance(value, str) else ""

    @property
    def files(self) -> Optional[List[str]]:
        """Whitelist entries, or None when the manifest declares none."""
        value = self.manifest.get("files")
        if not isinstance(value, list):
            return None
        return [v for v in value if isinstance(v, str) and v.strip()]

    @property
    def entry_points(self) -> List[str]:
        """Relative paths of ``main``, ``browser`` and every ``bin`` target."""
        candidates: List[Any] = [self.manifest.get("main"), self.manifest.get("browser")]

        bins = self.manifest.get("bin")
        if isinstance(bins, str):
            candidates.append(bins)
        elif isinstance(bins, dict):
            candidates.extend(bins.values())

        points: List[str] = []
        for c in candidates:
            if not isinstance(c, str):
                continue
            rel = _clean_relative(c)
            if rel and rel not in points:
                points.append(rel)
        return points

    @property
    def workspaces(self) -> List[str]:
        """Workspace glob patterns, from either manifest form."""
        value = self.manifest.get("workspaces")
        if isinstance(value, dict):
            value = value.get("packages")
        if not isinstance(value, list):
            return []
        return [_clean_relative(v) for v in value if isinstance(v, str) and _clean_relative(v)]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_project(path: str) -> PackageProject:
    """
    Load the package model for ``path``.

    Args:
        path: Project directory.

    Returns:
        PackageProject: Model with the parsed manifest.

    Raises:
        ProjectLoadError: If the directory is missing or the manifest is
            unreadable or not a JSON object.
    """
    root = os.path.abspath(path)
    if not os.path.isdir(root):
        raise ProjectLoadError(f"Not a directory: {root}")

    manifest_path = os.path.join(root, MANIFEST_NAME)
    if not os.path.isfile(manifest_path):
        logger.info(f"No {MANIFEST_NAME} found in {root}; using default file rules.")
        return PackageProject(root=root)

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except OSError as e:
        raise ProjectLoadError(f"Cannot read {manifest_path}: {e}") from e
    except ValueError as e:
        raise ProjectLoadError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(manifest, dict):
        raise ProjectLoadError(f"{manifest_path} must contain a JSON object.")

    project = PackageProject(root=root, manifest=manifest)
    logger.debug(f"Loaded manifest for '{project.name}' {project.version}".rstrip())
    return project

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _clean_relative(value: str) -> str:
    """Normalize a manifest path to a POSIX path relative to the root."""
    parts = value.strip().replace("\\", "/").split("/")
    # "./a/b", "a/./b" and "a//b" all name "a/b"
    return "/".join(p for p in parts if p and p != ".")
